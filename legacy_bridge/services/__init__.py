"""Services package - business logic layer."""
from .customer import CustomerService
from .payment import PaymentService
from .resource import ResourceService

__all__ = [
    "CustomerService",
    "PaymentService",
    "ResourceService",
]
