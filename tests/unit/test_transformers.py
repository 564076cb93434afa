"""
Unit tests for legacy -> domain transformers.
"""
import pytest
from pydantic import ValidationError

from legacy_bridge.models.schemas import Address, Company, PaymentStatus
from legacy_bridge.transformers import to_customer, to_payment


class TestToCustomer:
    def test_maps_full_record(self, legacy_users):
        customer = to_customer(legacy_users[0])

        assert customer.id == 1
        assert customer.name == "Leanne Graham"
        assert customer.username == "Bret"
        assert customer.email == "Sincere@april.biz"
        assert customer.phone == "1-770-736-8031 x56442"
        assert customer.website == "hildegard.org"
        assert customer.address == Address(
            street="Kulas Light", suite="Apt. 556", city="Gwenborough", zipcode="92998-3874"
        )
        assert customer.company.catch_phrase == "Multi-layered client-server neural-net"
        assert customer.company.bs == "harness real-time e-markets"

    def test_missing_nested_objects_map_to_empty_sections(self, legacy_users):
        customer = to_customer(legacy_users[1])

        assert customer.name == "Ervin Howell"
        assert customer.phone is None
        assert customer.address == Address()
        assert customer.company == Company()
        assert customer.address.city is None

    @pytest.mark.parametrize("bad_nested", [None, "n/a", 42, ["x"]])
    def test_malformed_nested_objects_are_tolerated(self, bad_nested):
        customer = to_customer({"id": 5, "address": bad_nested, "company": bad_nested})

        assert customer.address == Address()
        assert customer.company == Company()

    def test_empty_record_does_not_raise(self):
        customer = to_customer({})

        assert customer.id is None
        assert customer.email is None

    def test_is_pure(self, legacy_users):
        raw = legacy_users[0]
        assert to_customer(raw) == to_customer(raw)
        assert raw["company"]["catchPhrase"] == "Multi-layered client-server neural-net"

    def test_serializes_camel_case(self, legacy_users):
        dumped = to_customer(legacy_users[0]).model_dump(by_alias=True)

        assert dumped["company"]["catchPhrase"] == "Multi-layered client-server neural-net"
        assert "geo" not in dumped["address"]

    def test_result_is_immutable(self, legacy_users):
        customer = to_customer(legacy_users[0])
        with pytest.raises(ValidationError):
            customer.name = "changed"


class TestToPayment:
    def test_maps_post_fields(self, legacy_posts):
        payment = to_payment(legacy_posts[2])

        assert payment.id == 3
        assert payment.customer_id == 2
        assert payment.description == "ea molestias"
        assert payment.currency == "NGN"
        assert payment.created_at is None

    @pytest.mark.parametrize(
        "record_id,status",
        [
            (3, PaymentStatus.PENDING),
            (7, PaymentStatus.COMPLETED),
            (8, PaymentStatus.FAILED),
        ],
    )
    def test_status_follows_id(self, record_id, status):
        assert to_payment({"id": record_id}).status == status

    @pytest.mark.parametrize("record_id", [None, "abc", True])
    def test_non_integer_id_defaults_to_pending(self, record_id):
        assert to_payment({"id": record_id}).status == PaymentStatus.PENDING

    def test_demo_amount_is_deterministic(self, legacy_posts):
        first = to_payment(legacy_posts[0])
        again = to_payment(dict(legacy_posts[0]))

        assert first == again
        assert 0 <= first.amount <= 1000
        assert round(first.amount, 2) == first.amount

    def test_record_without_id_or_amount_gets_zero_amount(self):
        assert to_payment({"title": "orphan"}).amount == 0.0
        assert to_payment({"id": None, "userId": 3}).amount == 0.0

    def test_upstream_amount_wins(self):
        payment = to_payment({"id": 1, "amount": 250})
        assert payment.amount == 250.0

    def test_created_at_passed_through(self):
        payment = to_payment({"id": 1, "createdAt": "2024-01-15T10:00:00Z"})
        assert payment.created_at == "2024-01-15T10:00:00Z"

    def test_empty_record_does_not_raise(self):
        payment = to_payment({})

        assert payment.id is None
        assert payment.status == PaymentStatus.PENDING
        assert payment.description is None

    def test_serializes_camel_case(self, legacy_posts):
        dumped = to_payment(legacy_posts[0]).model_dump(by_alias=True, mode="json")

        assert dumped["customerId"] == 1
        assert dumped["status"] in {"pending", "completed", "failed"}
        assert "createdAt" in dumped
