"""
Legacy user record -> Customer.

Pure mapping: no I/O, no shared state, never raises on missing fields.
"""
from typing import Any, Mapping, Optional

from legacy_bridge.models.schemas import Address, Company, Customer


def _text(value: Any) -> Optional[str]:
    return None if value is None else str(value)


def _section(raw: Mapping[str, Any], name: str) -> Mapping[str, Any]:
    nested = raw.get(name)
    return nested if isinstance(nested, Mapping) else {}


def to_customer(raw: Mapping[str, Any]) -> Customer:
    """
    Reshape a legacy user into a Customer.

    Absent or malformed ``address``/``company`` objects produce nested
    records whose fields are all None.
    """
    if not isinstance(raw, Mapping):
        raw = {}

    address = _section(raw, "address")
    company = _section(raw, "company")

    return Customer(
        id=raw.get("id"),
        name=_text(raw.get("name")),
        username=_text(raw.get("username")),
        email=_text(raw.get("email")),
        phone=_text(raw.get("phone")),
        website=_text(raw.get("website")),
        address=Address(
            street=_text(address.get("street")),
            suite=_text(address.get("suite")),
            city=_text(address.get("city")),
            zipcode=_text(address.get("zipcode")),
        ),
        company=Company(
            name=_text(company.get("name")),
            catch_phrase=_text(company.get("catchPhrase")),
            bs=_text(company.get("bs")),
        ),
    )
