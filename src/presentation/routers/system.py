"""System router for non-versioned application endpoints.

Provides root, health, and configuration endpoints. These endpoints are
lightweight and side-effect free.
"""

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from src.core.config import settings

system_router = APIRouter(tags=["System"])


@system_router.get("/")
async def root() -> dict[str, str]:
    """Root endpoint - basic status check.

    Returns:
        dict[str, str]: Welcome message with API status and version.
    """
    return {
        "message": settings.app_name,
        "status": "operational",
        "version": settings.app_version,
    }


@system_router.get("/health")
async def health() -> dict[str, str]:
    """Health check endpoint for monitoring and load balancers."""
    return {"status": "healthy"}


@system_router.get("/config")
async def get_config() -> JSONResponse:
    """Configuration debug endpoint (development only).

    Returns:
        JSONResponse: Configuration details (sanitized) or 403 in
            non-development environments.
    """
    if not settings.is_development:
        return JSONResponse(
            status_code=403,
            content={"detail": "Config endpoint only available in development"},
        )

    return JSONResponse(
        content={
            "environment": settings.environment.value,
            "debug": settings.debug,
            "api": {
                "name": settings.app_name,
                "version": settings.app_version,
                "base_url": settings.api_base_url,
                "v1_prefix": settings.api_v1_prefix,
            },
            "token_store": {
                "backend": settings.token_store_backend,
                "database_url": "<redacted>",  # Never expose credentials
            },
            "token_lifetimes_minutes": {
                "verification": settings.verification_token_expire_minutes,
                "two_factor": settings.two_factor_token_expire_minutes,
                "password_reset": settings.password_reset_token_expire_minutes,
            },
        }
    )
