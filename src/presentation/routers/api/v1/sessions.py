"""Sessions resource router.

Endpoints:
    POST /api/v1/sessions - Create session (credential login)

A login may need more than one request: an unverified account is sent a
verification link, and a two-factor account is sent a code that the client
resubmits with the credentials. Both answer 202 Accepted.
"""

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from src.application.commands.auth_commands import LoginUser
from src.application.commands.handlers.login_user_handler import LoginUserHandler
from src.core.container import get_login_user_handler
from src.core.result import Failure, Success
from src.domain.enums.login_outcome import LoginOutcome
from src.presentation.routers.api.v1.errors import ErrorResponseBuilder
from src.presentation.routers.api.v1.errors.problem_details import ProblemDetails
from src.schemas.auth_schemas import (
    SessionChallengeResponse,
    SessionCreateRequest,
    SessionCreateResponse,
)

router = APIRouter(prefix="/sessions", tags=["Sessions"])

# Login outcome -> (status code, problem title)
_ERROR_MAPPING: dict[LoginOutcome, tuple[int, str]] = {
    LoginOutcome.INVALID_FIELDS: (
        status.HTTP_422_UNPROCESSABLE_ENTITY,
        "Invalid Fields",
    ),
    LoginOutcome.ACCOUNT_NOT_FOUND: (status.HTTP_401_UNAUTHORIZED, "Account Not Found"),
    LoginOutcome.INVALID_CODE: (status.HTTP_401_UNAUTHORIZED, "Invalid Code"),
    LoginOutcome.CODE_EXPIRED: (status.HTTP_401_UNAUTHORIZED, "Code Expired"),
    LoginOutcome.INVALID_CREDENTIALS: (
        status.HTTP_401_UNAUTHORIZED,
        "Invalid Credentials",
    ),
    LoginOutcome.UNKNOWN_ERROR: (
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "Login Failed",
    ),
}


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=SessionCreateResponse,
    responses={
        201: {"description": "Login successful", "model": SessionCreateResponse},
        202: {
            "description": "Verification link or two-factor code sent",
            "model": SessionChallengeResponse,
        },
        401: {"description": "Login rejected", "model": ProblemDetails},
        422: {"description": "Invalid fields", "model": ProblemDetails},
        500: {"description": "Something went wrong", "model": ProblemDetails},
    },
    summary="Create session",
    description="Log in with email and password, plus a two-factor code when asked.",
)
async def create_session(
    request: Request,
    data: SessionCreateRequest,
    handler: LoginUserHandler = Depends(get_login_user_handler),
) -> SessionCreateResponse | JSONResponse:
    """Create session (login).

    POST /api/v1/sessions → 201 Created | 202 Accepted

    Args:
        request: FastAPI request object.
        data: Login request (email, password, optional code).
        handler: Login handler (injected).

    Returns:
        SessionCreateResponse on success (201 Created).
        SessionChallengeResponse when another step is needed (202 Accepted).
        JSONResponse with problem details otherwise.
    """
    command = LoginUser(email=data.email, password=data.password, code=data.code)

    match await handler.handle(command):
        case Success(value=response) if response.session is not None:
            return SessionCreateResponse(
                outcome=response.outcome,
                message=response.message,
                access_token=response.session.access_token,
                expires_at=response.session.expires_at,
            )
        case Success(value=response):
            return JSONResponse(
                status_code=status.HTTP_202_ACCEPTED,
                content=SessionChallengeResponse(
                    outcome=response.outcome,
                    message=response.message,
                ).model_dump(mode="json"),
            )
        case Failure(error=outcome):
            status_code, title = _ERROR_MAPPING.get(
                outcome, (status.HTTP_500_INTERNAL_SERVER_ERROR, "Login Failed")
            )
            return ErrorResponseBuilder.build(
                request=request,
                status_code=status_code,
                error=outcome.value,
                title=title,
                detail=outcome.message,
            )
