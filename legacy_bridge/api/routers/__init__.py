"""API routers package."""
from .customers import router as customers_router
from .health import router as health_router
from .legacy import router as legacy_router
from .payments import router as payments_router

__all__ = ["customers_router", "health_router", "legacy_router", "payments_router"]
