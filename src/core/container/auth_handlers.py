"""Authentication handler dependency factories.

Request-scoped handler instances for authentication operations:
- Credential login (email verification and two-factor gates)
- Email verification
- Password reset (request and confirm)
"""

from datetime import timedelta
from typing import TYPE_CHECKING

from fastapi import Depends

from src.core.config import settings
from src.core.container.infrastructure import (
    get_logger,
    get_notification_sender,
    get_password_service,
    get_token_service,
)
from src.core.container.repositories import (
    get_account_repository,
    get_token_repository,
)

if TYPE_CHECKING:
    from src.application.commands.handlers.confirm_password_reset_handler import (
        ConfirmPasswordResetHandler,
    )
    from src.application.commands.handlers.login_user_handler import (
        LoginUserHandler,
    )
    from src.application.commands.handlers.request_password_reset_handler import (
        RequestPasswordResetHandler,
    )
    from src.application.commands.handlers.verify_email_handler import (
        VerifyEmailHandler,
    )
    from src.application.services.token_generator import TokenGenerator
    from src.domain.protocols import (
        AccountRepository,
        SessionIssuerProtocol,
        TokenRepository,
    )


# ============================================================================
# Shared Services (Request-Scoped)
# ============================================================================


async def get_token_generator(
    token_repo: "TokenRepository" = Depends(get_token_repository),
) -> "TokenGenerator":
    """Get token generator bound to the request's token store.

    Lifetimes come from settings (verification, two-factor, password reset).
    """
    from src.application.services.token_generator import TokenGenerator

    return TokenGenerator(
        token_repo=token_repo,
        verification_ttl=timedelta(minutes=settings.verification_token_expire_minutes),
        two_factor_ttl=timedelta(minutes=settings.two_factor_token_expire_minutes),
        password_reset_ttl=timedelta(
            minutes=settings.password_reset_token_expire_minutes
        ),
    )


async def get_session_issuer(
    account_repo: "AccountRepository" = Depends(get_account_repository),
    token_repo: "TokenRepository" = Depends(get_token_repository),
) -> "SessionIssuerProtocol":
    """Get the credentials session issuer (request-scoped)."""
    from src.infrastructure.session import CredentialsSessionIssuer

    return CredentialsSessionIssuer(
        account_repo=account_repo,
        token_repo=token_repo,
        password_service=get_password_service(),
        token_service=get_token_service(),
    )


# ============================================================================
# Authentication Handler Factories
# ============================================================================


async def get_login_user_handler(
    account_repo: "AccountRepository" = Depends(get_account_repository),
    token_repo: "TokenRepository" = Depends(get_token_repository),
    token_generator: "TokenGenerator" = Depends(get_token_generator),
    session_issuer: "SessionIssuerProtocol" = Depends(get_session_issuer),
) -> "LoginUserHandler":
    """Get LoginUser command handler (request-scoped).

    Creates new handler instance per request with all required dependencies:
    - AccountRepository, TokenRepository (request-scoped)
    - TokenGenerator (request-scoped, shares the token store)
    - NotificationSender (app-scoped singleton)
    - CredentialsSessionIssuer (request-scoped)

    Usage:
        @router.post("/sessions")
        async def create_session(
            handler: LoginUserHandler = Depends(get_login_user_handler)
        ):
            result = await handler.handle(command)
    """
    from src.application.commands.handlers.login_user_handler import (
        LoginUserHandler,
    )

    return LoginUserHandler(
        account_repo=account_repo,
        token_repo=token_repo,
        token_generator=token_generator,
        notification_sender=get_notification_sender(),
        session_issuer=session_issuer,
        logger=get_logger(),
    )


async def get_verify_email_handler(
    account_repo: "AccountRepository" = Depends(get_account_repository),
    token_repo: "TokenRepository" = Depends(get_token_repository),
) -> "VerifyEmailHandler":
    """Get VerifyEmail command handler (request-scoped)."""
    from src.application.commands.handlers.verify_email_handler import (
        VerifyEmailHandler,
    )

    return VerifyEmailHandler(
        account_repo=account_repo,
        token_repo=token_repo,
        logger=get_logger(),
    )


async def get_request_password_reset_handler(
    account_repo: "AccountRepository" = Depends(get_account_repository),
    token_generator: "TokenGenerator" = Depends(get_token_generator),
) -> "RequestPasswordResetHandler":
    """Get RequestPasswordReset command handler (request-scoped)."""
    from src.application.commands.handlers.request_password_reset_handler import (
        RequestPasswordResetHandler,
    )

    return RequestPasswordResetHandler(
        account_repo=account_repo,
        token_generator=token_generator,
        notification_sender=get_notification_sender(),
        logger=get_logger(),
    )


async def get_confirm_password_reset_handler(
    account_repo: "AccountRepository" = Depends(get_account_repository),
    token_repo: "TokenRepository" = Depends(get_token_repository),
) -> "ConfirmPasswordResetHandler":
    """Get ConfirmPasswordReset command handler (request-scoped)."""
    from src.application.commands.handlers.confirm_password_reset_handler import (
        ConfirmPasswordResetHandler,
    )

    return ConfirmPasswordResetHandler(
        account_repo=account_repo,
        token_repo=token_repo,
        password_service=get_password_service(),
        logger=get_logger(),
    )
