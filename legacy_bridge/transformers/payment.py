"""
Legacy post record -> Payment.

The legacy API has no real payments; posts are reinterpreted. Status and
the demo amount are derived from the post id so the same input always maps
to the same Payment.
"""
import random
from typing import Any, Mapping

from legacy_bridge.models.schemas import Payment, PaymentStatus

CURRENCY = "NGN"

_STATUSES = (PaymentStatus.PENDING, PaymentStatus.COMPLETED, PaymentStatus.FAILED)


def _status_for(record_id: Any) -> PaymentStatus:
    # bool is an int subclass but never a real id
    if isinstance(record_id, int) and not isinstance(record_id, bool):
        return _STATUSES[record_id % len(_STATUSES)]
    return PaymentStatus.PENDING


def _amount_for(raw: Mapping[str, Any]) -> float:
    amount = raw.get("amount")
    if isinstance(amount, (int, float)) and not isinstance(amount, bool):
        return round(float(amount), 2)
    record_id = raw.get("id")
    if record_id is None:
        return 0.0
    # Seeded per record: stable across cache refreshes
    return round(random.Random(str(record_id)).uniform(0, 1000), 2)


def to_payment(raw: Mapping[str, Any]) -> Payment:
    """Reshape a legacy post into a Payment. Never raises on missing fields."""
    if not isinstance(raw, Mapping):
        raw = {}

    title = raw.get("title")
    created_at = raw.get("createdAt")

    return Payment(
        id=raw.get("id"),
        customer_id=raw.get("userId"),
        amount=_amount_for(raw),
        currency=CURRENCY,
        status=_status_for(raw.get("id")),
        description=None if title is None else str(title),
        created_at=None if created_at is None else str(created_at),
    )
