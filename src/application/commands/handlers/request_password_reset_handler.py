"""Request password reset handler.

Flow:
1. Validate email shape
2. Find account by email
3. If found (and it can use a password): issue a password reset token,
   send the reset link
4. Return Success regardless (no account enumeration)
"""

from dataclasses import dataclass

from pydantic import ValidationError

from src.application.commands.auth_commands import RequestPasswordReset
from src.application.dtos.auth_dtos import PasswordResetRequestInput
from src.application.services.token_generator import TokenGenerator
from src.core.result import Failure, Result, Success
from src.domain.enums.token_kind import TokenKind
from src.domain.protocols import (
    AccountRepository,
    LoggerProtocol,
    NotificationSenderProtocol,
)


class PasswordResetError:
    """Password reset request error reasons."""

    INVALID_EMAIL = "invalid_email"


@dataclass
class PasswordResetRequestResponse:
    """Response data for password reset request.

    Note: Always the same message to prevent account enumeration.
    """

    message: str = "Reset email sent!"


class RequestPasswordResetHandler:
    """Handler for request password reset command."""

    def __init__(
        self,
        account_repo: AccountRepository,
        token_generator: TokenGenerator,
        notification_sender: NotificationSenderProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._account_repo = account_repo
        self._token_generator = token_generator
        self._notifications = notification_sender
        self._logger = logger.bind(handler="request_password_reset")

    async def handle(
        self, cmd: RequestPasswordReset
    ) -> Result[PasswordResetRequestResponse, str]:
        """Handle request password reset command.

        Returns:
            Success(PasswordResetRequestResponse) for any well-formed email.
            Failure(INVALID_EMAIL) if the email is malformed.
        """
        try:
            data = PasswordResetRequestInput(email=cmd.email)
        except ValidationError:
            return Failure(error=PasswordResetError.INVALID_EMAIL)

        account = await self._account_repo.find_by_email(data.email)
        if account is None or not account.has_password:
            self._logger.info("Password reset requested for unknown email")
            return Success(value=PasswordResetRequestResponse())

        token = await self._token_generator.issue(
            TokenKind.PASSWORD_RESET, account.email
        )
        await self._notifications.send_password_reset(token.identifier, token.token)
        self._logger.info("Password reset email sent", email=account.email)
        return Success(value=PasswordResetRequestResponse())
