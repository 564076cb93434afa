"""
Domain models using Pydantic.
Internal record shapes returned to callers, decoupled from the legacy wire
format, plus the API envelopes.
"""
from enum import Enum
from typing import Any, Dict, Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class DomainModel(BaseModel):
    """Immutable record serialised with camelCase keys."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


# =============================================================================
# Customers
# =============================================================================


class Address(DomainModel):
    """Postal address. Every field is None when the legacy record has none."""

    street: Optional[str] = None
    suite: Optional[str] = None
    city: Optional[str] = None
    zipcode: Optional[str] = None


class Company(DomainModel):
    """Employer details. Every field is None when the legacy record has none."""

    name: Optional[str] = None
    catch_phrase: Optional[str] = None
    bs: Optional[str] = None


class Customer(DomainModel):
    """
    Customer as exposed by the v2 API.
    Built from a legacy user record; required-looking fields stay optional
    because the read path never rejects upstream data.
    """

    id: Optional[Any] = Field(default=None, description="Legacy user id")
    name: Optional[str] = None
    username: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    website: Optional[str] = None
    address: Address = Field(default_factory=Address)
    company: Company = Field(default_factory=Company)


# =============================================================================
# Payments
# =============================================================================


class PaymentStatus(str, Enum):
    PENDING = "pending"
    COMPLETED = "completed"
    FAILED = "failed"


class Payment(DomainModel):
    """Payment as exposed by the v2 API, built from a legacy post record."""

    id: Optional[Any] = Field(default=None, description="Legacy post id")
    customer_id: Optional[Any] = Field(default=None, description="Legacy userId")
    amount: float = Field(..., description="Amount in major units")
    currency: str = Field(..., description="ISO 4217 currency code")
    status: PaymentStatus
    description: Optional[str] = None
    created_at: Optional[str] = Field(default=None, description="ISO timestamp")


# =============================================================================
# API Models (External)
# =============================================================================


class DataResponse(BaseModel, Generic[T]):
    """Success envelope shared by every resource endpoint."""

    success: bool = True
    data: T


class CacheStats(BaseModel):
    """Cache statistics snapshot."""

    size: int
    max_size: int
    ttl_seconds: int
    enabled: bool


class ErrorResponse(BaseModel):
    """Standard error response format."""

    success: bool = False
    error: Dict[str, Any] = Field(..., description="Error details")
    source: Optional[str] = Field(
        default=None,
        description="'legacy-api' when the failure originated upstream",
    )
