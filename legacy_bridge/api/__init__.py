"""API package - FastAPI routes and dependencies."""
from .dependencies import get_customer_service, get_payment_service
from .routers import customers_router, health_router, legacy_router, payments_router

__all__ = [
    "customers_router",
    "get_customer_service",
    "get_payment_service",
    "health_router",
    "legacy_router",
    "payments_router",
]
