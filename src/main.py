"""
Main FastAPI application entry point.

This module initializes the FastAPI application instance, wires the
request tracing middleware and RFC 7807 exception handlers, and mounts the
system and v1 routers.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from src.core.config import settings
from src.core.container import get_database, get_logger
from src.presentation.routers import system_router
from src.presentation.routers.api.middleware.trace_middleware import TraceMiddleware
from src.presentation.routers.api.v1 import v1_router
from src.presentation.routers.api.v1.errors import register_exception_handlers


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan context manager.

    Handles startup and shutdown events:
    - Startup: Log the configured token store backend
    - Shutdown: Close database connections (database backend only)

    Args:
        app: FastAPI application instance.

    Yields:
        None during application lifetime.
    """
    logger = get_logger()
    logger.info(
        "Application starting",
        environment=settings.environment.value,
        token_store_backend=settings.token_store_backend,
    )

    yield

    if settings.token_store_backend == "database":
        await get_database().close()
    logger.info("Application stopped")


# Initialize FastAPI application with settings and lifespan
app = FastAPI(
    title=settings.app_name,
    description="Credential login with email verification and two-factor codes",
    version=settings.app_version,
    docs_url="/docs",
    redoc_url="/redoc",
    debug=settings.debug,
    lifespan=lifespan,
)

# Wire trace middleware (request correlation)
app.add_middleware(TraceMiddleware)

# Register global exception handlers (RFC 7807 error responses)
register_exception_handlers(app)

# Include non-versioned system routes and API v1 routers
app.include_router(system_router)
app.include_router(v1_router)
