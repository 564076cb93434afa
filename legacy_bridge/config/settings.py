"""
Centralized configuration using Pydantic BaseSettings.
All environment variables are loaded here - no hardcoded values.
"""
from functools import lru_cache
from typing import List

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application
    APP_NAME: str = "LegacyBridge API"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # HTTP surface
    API_PREFIX: str = "/api"
    CORS_ORIGINS: List[str] = ["http://localhost:5173"]

    # Legacy (upstream) API
    LEGACY_API_BASE_URL: str = "http://localhost:4000"
    LEGACY_API_KEY: str = ""
    LEGACY_API_TIMEOUT_MS: int = 5000  # Per attempt

    # Cache
    CACHE_ENABLED: bool = True
    CACHE_TTL_SEC: int = 300
    CACHE_MAX_SIZE: int = 100
    CACHE_CLEANUP_INTERVAL_SEC: int = 300  # 0 disables the background sweep

    # Retry (fixed delay, no backoff)
    MAX_RETRY_ATTEMPTS: int = 3
    RETRY_DELAY_MS: int = 1000

    # Telemetry
    ENABLE_OTEL: bool = False  # Default to False to prevent gRPC errors in dev
    ENABLE_PROMETHEUS: bool = True

    class Config:
        env_file = ".env"
        case_sensitive = True


@lru_cache()
def get_settings() -> Settings:
    """Cached settings instance - singleton pattern."""
    return Settings()
