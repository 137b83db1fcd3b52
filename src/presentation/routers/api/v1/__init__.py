"""API v1 routers.

RESTful resource-based endpoints. All endpoints use resource nouns, not
action verbs.

Resources:
    /api/v1/sessions               - Session creation (login)
    /api/v1/email-verifications    - Email verification
    /api/v1/password-resets        - Password reset request and execution
"""

from fastapi import APIRouter

from src.core.config import settings
from src.presentation.routers.api.v1.email_verifications import (
    router as email_verifications_router,
)
from src.presentation.routers.api.v1.password_resets import (
    router as password_resets_router,
)
from src.presentation.routers.api.v1.sessions import router as sessions_router

v1_router = APIRouter(prefix=settings.api_v1_prefix)
v1_router.include_router(sessions_router)
v1_router.include_router(email_verifications_router)
v1_router.include_router(password_resets_router)

__all__ = [
    "v1_router",
]
