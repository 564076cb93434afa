"""Models package - domain records and upstream interfaces."""
from .interfaces import CustomerSource, PaymentSource, ResourceId
from .schemas import (
    Address,
    CacheStats,
    Company,
    Customer,
    DataResponse,
    ErrorResponse,
    Payment,
    PaymentStatus,
)

__all__ = [
    # Interfaces
    "CustomerSource",
    "PaymentSource",
    "ResourceId",
    # Schemas
    "Address",
    "CacheStats",
    "Company",
    "Customer",
    "DataResponse",
    "ErrorResponse",
    "Payment",
    "PaymentStatus",
]
