"""Transformers package - legacy wire shapes to domain records."""
from .customer import to_customer
from .payment import to_payment

__all__ = ["to_customer", "to_payment"]
