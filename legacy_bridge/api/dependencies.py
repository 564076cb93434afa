"""
Dependency injection container.
Creates and wires all application components.
Uses FastAPI's dependency injection system.
"""
from functools import lru_cache
from typing import Any

from fastapi import Depends

from legacy_bridge.clients.upstream import UpstreamClient
from legacy_bridge.config import get_settings
from legacy_bridge.core.cache import TTLCache
from legacy_bridge.core.retry import RetryExecutor, RetryPolicy
from legacy_bridge.services.customer import CustomerService
from legacy_bridge.services.payment import PaymentService


# =============================================================================
# Singleton Instances (Application Lifetime)
# =============================================================================


@lru_cache()
def get_cache() -> TTLCache[Any]:
    """Get the application-wide response cache."""
    settings = get_settings()
    return TTLCache(
        max_size=settings.CACHE_MAX_SIZE,
        ttl_seconds=settings.CACHE_TTL_SEC,
        enabled=settings.CACHE_ENABLED,
    )


@lru_cache()
def get_retry_executor() -> RetryExecutor:
    """Get singleton retry executor (real asyncio sleep)."""
    return RetryExecutor()


@lru_cache()
def get_upstream_client() -> UpstreamClient:
    """Get singleton legacy API client."""
    settings = get_settings()
    return UpstreamClient(
        base_url=settings.LEGACY_API_BASE_URL,
        timeout_ms=settings.LEGACY_API_TIMEOUT_MS,
        policy=RetryPolicy(
            max_attempts=settings.MAX_RETRY_ATTEMPTS,
            delay_ms=settings.RETRY_DELAY_MS,
        ),
        executor=get_retry_executor(),
        api_key=settings.LEGACY_API_KEY,
    )


# =============================================================================
# Request-Scoped Dependencies (Per-Request Lifetime)
# =============================================================================


def get_customer_service(
    upstream: UpstreamClient = Depends(get_upstream_client),
    cache: TTLCache[Any] = Depends(get_cache),
) -> CustomerService:
    """Get customer service wired to the shared cache and client."""
    return CustomerService(source=upstream, cache=cache)


def get_payment_service(
    upstream: UpstreamClient = Depends(get_upstream_client),
    cache: TTLCache[Any] = Depends(get_cache),
) -> PaymentService:
    """Get payment service wired to the shared cache and client."""
    return PaymentService(source=upstream, cache=cache)


# =============================================================================
# Cleanup Functions
# =============================================================================


async def close_upstream_client() -> None:
    """
    Close the legacy API client if one was ever created.

    The singleton is dropped as well, so a later startup in the same
    process builds a fresh client instead of reusing the closed one.
    """
    if get_upstream_client.cache_info().currsize:
        await get_upstream_client().aclose()
        get_upstream_client.cache_clear()


def clear_caches() -> None:
    """Clear all cached singleton instances (for testing)."""
    get_cache.cache_clear()
    get_retry_executor.cache_clear()
    get_upstream_client.cache_clear()
