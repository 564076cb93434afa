"""
Main FastAPI application entry point.
Configures logging, exception handlers, middleware, and routers.
"""
import asyncio
import logging
import time
from contextlib import asynccontextmanager, suppress
from typing import AsyncGenerator, Awaitable, Callable

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from legacy_bridge.api.dependencies import close_upstream_client, get_cache
from legacy_bridge.api.routers import (
    customers_router,
    health_router,
    legacy_router,
    payments_router,
)
from legacy_bridge.config import get_settings
from legacy_bridge.config.logging import configure_logging
from legacy_bridge.core.exceptions import AppException, UpstreamError
from legacy_bridge.core.telemetry import setup_telemetry

logger = logging.getLogger(__name__)


# =============================================================================
# Background Tasks
# =============================================================================


async def sweep_expired_entries(interval_sec: float) -> None:
    """Periodically drop expired cache entries that were never read again."""
    while True:
        await asyncio.sleep(interval_sec)
        removed = get_cache().cleanup_expired()
        if removed:
            logger.info(f"Cache cleanup: removed {removed} expired entries")


# =============================================================================
# Lifespan (Startup/Shutdown)
# =============================================================================


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler for startup/shutdown events."""
    settings = get_settings()

    logger.info(f"Starting {settings.APP_NAME} v{settings.APP_VERSION}")
    logger.info(f"Legacy API: {settings.LEGACY_API_BASE_URL}")
    logger.info(
        f"Cache enabled: {settings.CACHE_ENABLED} "
        f"(ttl={settings.CACHE_TTL_SEC}s, max_size={settings.CACHE_MAX_SIZE})"
    )

    sweeper = None
    if settings.CACHE_ENABLED and settings.CACHE_CLEANUP_INTERVAL_SEC > 0:
        sweeper = asyncio.create_task(
            sweep_expired_entries(settings.CACHE_CLEANUP_INTERVAL_SEC)
        )

    yield

    logger.info("Shutting down application")
    if sweeper is not None:
        sweeper.cancel()
        with suppress(asyncio.CancelledError):
            await sweeper
    await close_upstream_client()


# =============================================================================
# Middleware
# =============================================================================


async def log_requests(
    request: Request,
    call_next: Callable[[Request], Awaitable[Response]],
) -> Response:
    """Log method, path, status and duration for every request."""
    start = time.perf_counter()
    response = await call_next(request)
    duration_ms = round((time.perf_counter() - start) * 1000, 2)

    level = logging.WARNING if response.status_code >= 400 else logging.INFO
    logger.log(
        level,
        f"{request.method} {request.url.path} {response.status_code} {duration_ms}ms",
        extra={
            "method": request.method,
            "path": request.url.path,
            "status_code": response.status_code,
            "duration_ms": duration_ms,
        },
    )
    return response


# =============================================================================
# Exception Handlers
# =============================================================================


async def app_exception_handler(
    request: Request,
    exc: AppException,
) -> JSONResponse:
    """Handle custom application exceptions."""
    if exc.status_code >= 500:
        cause = exc.__cause__
        logger.error(
            f"[SERVER ERROR] {request.method} {request.url.path}: {exc.message}",
            exc_info=(type(cause), cause, cause.__traceback__) if cause else None,
            extra={"endpoint": exc.endpoint} if isinstance(exc, UpstreamError) else None,
        )
    else:
        logger.warning(
            f"[CLIENT ERROR] {request.method} {request.url.path} - {exc.message}"
        )

    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict(),
    )


async def unhandled_exception_handler(
    request: Request,
    exc: Exception,
) -> JSONResponse:
    """Handle unexpected exceptions - return generic error."""
    logger.exception(f"Unhandled exception: {exc}")

    return JSONResponse(
        status_code=500,
        content={
            "success": False,
            "error": {
                "code": "INTERNAL_ERROR",
                "message": "An unexpected error occurred",
            },
        },
    )


# =============================================================================
# Application Factory
# =============================================================================


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()

    # Configure structured logging
    configure_logging(debug=settings.DEBUG, level=settings.LOG_LEVEL)

    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        description="""
        LegacyBridge API

        A resilience layer in front of a slow, unreliable legacy API.

        ## Features
        - v1: raw passthrough of legacy payloads
        - v2: modern customer/payment shapes
        - Bounded in-memory TTL cache (cache-aside)
        - Fixed-delay retries on legacy calls
        - Uniform 503 for any legacy failure
        - Observability: JSON logs, Prometheus, OpenTelemetry
        """,
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # Register exception handlers
    app.add_exception_handler(AppException, app_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    # Middleware
    app.middleware("http")(log_requests)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    # Include routers
    app.include_router(health_router, prefix=settings.API_PREFIX)
    app.include_router(legacy_router, prefix=settings.API_PREFIX)
    app.include_router(customers_router, prefix=settings.API_PREFIX)
    app.include_router(payments_router, prefix=settings.API_PREFIX)

    @app.get("/", include_in_schema=False)
    async def root() -> dict:
        return {
            "message": "LegacyBridge API is running",
            "versions": ["v1", "v2"],
            "health": f"{settings.API_PREFIX}/health",
        }

    # Setup Telemetry (Metrics & Tracing)
    setup_telemetry(app)

    return app


# Create application instance
app = create_app()


# =============================================================================
# Development Entry Point
# =============================================================================


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "legacy_bridge.main:app",
        host="0.0.0.0",
        port=4000,
        reload=True,
    )
