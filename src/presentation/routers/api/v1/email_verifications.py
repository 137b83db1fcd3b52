"""Email verifications resource router.

RESTful endpoints for email verification management.

Endpoints:
    POST /api/v1/email-verifications - Create email verification (verify email)
"""

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from src.application.commands.auth_commands import VerifyEmail
from src.application.commands.handlers.verify_email_handler import (
    VerifyEmailError,
    VerifyEmailHandler,
)
from src.core.container import get_verify_email_handler
from src.core.result import Failure, Success
from src.presentation.routers.api.v1.errors import ErrorResponseBuilder
from src.presentation.routers.api.v1.errors.problem_details import ProblemDetails
from src.schemas.auth_schemas import (
    EmailVerificationCreateRequest,
    EmailVerificationCreateResponse,
)

router = APIRouter(prefix="/email-verifications", tags=["Email Verifications"])

_ERROR_MAPPING: dict[str, tuple[int, str]] = {
    VerifyEmailError.INVALID_TOKEN: (status.HTTP_400_BAD_REQUEST, "Invalid Token"),
    VerifyEmailError.TOKEN_NOT_FOUND: (status.HTTP_404_NOT_FOUND, "Token Not Found"),
    VerifyEmailError.TOKEN_EXPIRED: (status.HTTP_400_BAD_REQUEST, "Token Expired"),
    VerifyEmailError.EMAIL_NOT_FOUND: (status.HTTP_404_NOT_FOUND, "Email Not Found"),
}


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=EmailVerificationCreateResponse,
    responses={
        201: {
            "description": "Email verified successfully",
            "model": EmailVerificationCreateResponse,
        },
        400: {"description": "Invalid or expired token", "model": ProblemDetails},
        404: {"description": "Token or email not found", "model": ProblemDetails},
    },
    summary="Create email verification",
    description="Verify an account's email address using the emailed token.",
)
async def create_email_verification(
    request: Request,
    data: EmailVerificationCreateRequest,
    handler: VerifyEmailHandler = Depends(get_verify_email_handler),
) -> EmailVerificationCreateResponse | JSONResponse:
    """Create email verification (verify email).

    POST /api/v1/email-verifications → 201 Created

    After verification, the account can create a session (login).

    Args:
        request: FastAPI request object.
        data: Email verification request (token).
        handler: Verify email handler (injected).

    Returns:
        EmailVerificationCreateResponse on success (201 Created).
        JSONResponse with error on failure (400/404).
    """
    result = await handler.handle(VerifyEmail(token=data.token))

    match result:
        case Success(value=_):
            return EmailVerificationCreateResponse()
        case Failure(error=error):
            status_code, title = _ERROR_MAPPING.get(
                error, (status.HTTP_400_BAD_REQUEST, "Verification Failed")
            )
            return ErrorResponseBuilder.build(
                request=request,
                status_code=status_code,
                error=error,
                title=title,
                detail=_get_user_friendly_error(error),
            )


def _get_user_friendly_error(error: str) -> str:
    """Get user-friendly error message.

    Args:
        error: Internal error code.

    Returns:
        User-friendly error message.
    """
    messages = {
        VerifyEmailError.INVALID_TOKEN: "Invalid token!",
        VerifyEmailError.TOKEN_NOT_FOUND: "Token does not exist!",
        VerifyEmailError.TOKEN_EXPIRED: "Token has expired!",
        VerifyEmailError.EMAIL_NOT_FOUND: "Email does not exist!",
    }
    return messages.get(error, "Something went wrong!")
