"""Core infrastructure components."""
from .cache import CacheInterface, TTLCache, generate_cache_key
from .exceptions import (
    UPSTREAM_PUBLIC_MESSAGE,
    UPSTREAM_SOURCE,
    AppException,
    ServiceError,
    UpstreamError,
)
from .retry import RetryExecutor, RetryPolicy

__all__ = [
    "AppException",
    "CacheInterface",
    "RetryExecutor",
    "RetryPolicy",
    "ServiceError",
    "TTLCache",
    "UPSTREAM_PUBLIC_MESSAGE",
    "UPSTREAM_SOURCE",
    "UpstreamError",
    "generate_cache_key",
]
