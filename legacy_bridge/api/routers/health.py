"""
Health and cache statistics routers for observability.
"""
import time
from typing import Any

from fastapi import APIRouter, Depends

from legacy_bridge.api.dependencies import get_cache
from legacy_bridge.core.cache import TTLCache
from legacy_bridge.models.schemas import CacheStats

_STARTED_AT = time.monotonic()

router = APIRouter(tags=["health"])


@router.get("/health", summary="Health Check")
async def health_check() -> dict:
    """Basic health check endpoint."""
    return {"status": "ok", "uptime": round(time.monotonic() - _STARTED_AT, 3)}


@router.get("/health/ready", summary="Readiness Check")
async def readiness_check(cache: TTLCache[Any] = Depends(get_cache)) -> dict:
    """
    Readiness check for Kubernetes.
    Reports cache state alongside the status.
    """
    return {
        "status": "ready",
        "cache": cache.stats(),
    }


@router.get("/cache/stats", response_model=CacheStats, summary="Cache Statistics")
async def cache_stats(cache: TTLCache[Any] = Depends(get_cache)) -> CacheStats:
    """Read-only snapshot of the response cache."""
    return CacheStats(**cache.stats())
