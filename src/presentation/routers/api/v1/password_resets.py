"""Password resets resource router.

Endpoints:
    POST  /api/v1/password-resets         - Request a reset link
    PATCH /api/v1/password-resets/{token} - Apply the reset (new password)
"""

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from src.application.commands.auth_commands import (
    ConfirmPasswordReset,
    RequestPasswordReset,
)
from src.application.commands.handlers.confirm_password_reset_handler import (
    ConfirmPasswordResetHandler,
    PasswordResetConfirmError,
)
from src.application.commands.handlers.request_password_reset_handler import (
    RequestPasswordResetHandler,
)
from src.core.container import (
    get_confirm_password_reset_handler,
    get_request_password_reset_handler,
)
from src.core.result import Failure, Success
from src.presentation.routers.api.v1.errors import ErrorResponseBuilder
from src.presentation.routers.api.v1.errors.problem_details import ProblemDetails
from src.schemas.auth_schemas import (
    PasswordResetCreateRequest,
    PasswordResetCreateResponse,
    PasswordResetUpdateRequest,
    PasswordResetUpdateResponse,
)

router = APIRouter(prefix="/password-resets", tags=["Password Resets"])

_CONFIRM_ERRORS: dict[str, tuple[int, str, str]] = {
    PasswordResetConfirmError.INVALID_TOKEN: (
        status.HTTP_400_BAD_REQUEST,
        "Invalid Token",
        "Invalid token!",
    ),
    PasswordResetConfirmError.INVALID_PASSWORD: (
        status.HTTP_422_UNPROCESSABLE_ENTITY,
        "Invalid Fields",
        "Invalid fields!",
    ),
    PasswordResetConfirmError.TOKEN_NOT_FOUND: (
        status.HTTP_404_NOT_FOUND,
        "Token Not Found",
        "Invalid token!",
    ),
    PasswordResetConfirmError.TOKEN_EXPIRED: (
        status.HTTP_400_BAD_REQUEST,
        "Token Expired",
        "Token has expired!",
    ),
    PasswordResetConfirmError.EMAIL_NOT_FOUND: (
        status.HTTP_404_NOT_FOUND,
        "Email Not Found",
        "Email does not exist!",
    ),
}


@router.post(
    "",
    status_code=status.HTTP_202_ACCEPTED,
    response_model=PasswordResetCreateResponse,
    responses={
        202: {"description": "Reset link sent", "model": PasswordResetCreateResponse},
        422: {"description": "Invalid email", "model": ProblemDetails},
    },
    summary="Request password reset",
    description="Send a reset link. Always the same response for a valid email.",
)
async def create_password_reset(
    request: Request,
    data: PasswordResetCreateRequest,
    handler: RequestPasswordResetHandler = Depends(get_request_password_reset_handler),
) -> PasswordResetCreateResponse | JSONResponse:
    """Request password reset.

    POST /api/v1/password-resets → 202 Accepted

    Whether or not the account exists, the response is the same.
    """
    match await handler.handle(RequestPasswordReset(email=data.email)):
        case Success(value=response):
            return PasswordResetCreateResponse(message=response.message)
        case Failure(error=error):
            return ErrorResponseBuilder.build(
                request=request,
                status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
                error=error,
                title="Invalid Fields",
                detail="Invalid email!",
            )


@router.patch(
    "/{token}",
    status_code=status.HTTP_200_OK,
    response_model=PasswordResetUpdateResponse,
    responses={
        200: {"description": "Password updated", "model": PasswordResetUpdateResponse},
        400: {"description": "Invalid or expired token", "model": ProblemDetails},
        404: {"description": "Token or email not found", "model": ProblemDetails},
        422: {"description": "Invalid password", "model": ProblemDetails},
    },
    summary="Apply password reset",
    description="Set a new password using the token from the reset link.",
)
async def update_password_reset(
    request: Request,
    token: str,
    data: PasswordResetUpdateRequest,
    handler: ConfirmPasswordResetHandler = Depends(get_confirm_password_reset_handler),
) -> PasswordResetUpdateResponse | JSONResponse:
    """Apply password reset.

    PATCH /api/v1/password-resets/{token} → 200 OK
    """
    command = ConfirmPasswordReset(token=token, new_password=data.new_password)

    match await handler.handle(command):
        case Success(value=_):
            return PasswordResetUpdateResponse()
        case Failure(error=error):
            status_code, title, detail = _CONFIRM_ERRORS.get(
                error,
                (status.HTTP_400_BAD_REQUEST, "Reset Failed", "Something went wrong!"),
            )
            return ErrorResponseBuilder.build(
                request=request,
                status_code=status_code,
                error=error,
                title=title,
                detail=detail,
            )
