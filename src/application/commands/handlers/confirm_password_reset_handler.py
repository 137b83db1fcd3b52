"""Confirm password reset handler.

Flow:
1. Validate token and new password shape
2. Find password reset token by value
3. Check token exists and is not expired
4. Find account by the email the token was issued for
5. Hash and store the new password
6. Delete the token (single use)
7. Return Success(account_id)
"""

from uuid import UUID

from pydantic import ValidationError

from src.application.commands.auth_commands import ConfirmPasswordReset
from src.application.dtos.auth_dtos import PasswordResetConfirmInput
from src.core.result import Failure, Result, Success
from src.domain.enums.token_kind import TokenKind
from src.domain.protocols import (
    AccountRepository,
    LoggerProtocol,
    PasswordHashingProtocol,
    TokenRepository,
)


class PasswordResetConfirmError:
    """Password reset confirmation error reasons."""

    INVALID_TOKEN = "invalid_token"
    INVALID_PASSWORD = "invalid_password"
    TOKEN_NOT_FOUND = "token_not_found"
    TOKEN_EXPIRED = "token_expired"
    EMAIL_NOT_FOUND = "email_not_found"


class ConfirmPasswordResetHandler:
    """Handler for confirm password reset command."""

    def __init__(
        self,
        account_repo: AccountRepository,
        token_repo: TokenRepository,
        password_service: PasswordHashingProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._account_repo = account_repo
        self._token_repo = token_repo
        self._password_service = password_service
        self._logger = logger.bind(handler="confirm_password_reset")

    async def handle(self, cmd: ConfirmPasswordReset) -> Result[UUID, str]:
        """Handle confirm password reset command.

        Returns:
            Success(account_id) when the password was changed.
            Failure(error_reason) otherwise.
        """
        try:
            data = PasswordResetConfirmInput(
                token=cmd.token, new_password=cmd.new_password
            )
        except ValidationError as e:
            bad_fields = {str(err["loc"][0]) for err in e.errors() if err["loc"]}
            if "token" in bad_fields:
                return Failure(error=PasswordResetConfirmError.INVALID_TOKEN)
            return Failure(error=PasswordResetConfirmError.INVALID_PASSWORD)

        token = await self._token_repo.find_by_token(
            TokenKind.PASSWORD_RESET, data.token
        )
        if token is None:
            return Failure(error=PasswordResetConfirmError.TOKEN_NOT_FOUND)

        if token.is_expired():
            return Failure(error=PasswordResetConfirmError.TOKEN_EXPIRED)

        account = await self._account_repo.find_by_email(token.identifier)
        if account is None:
            return Failure(error=PasswordResetConfirmError.EMAIL_NOT_FOUND)

        account.password_hash = self._password_service.hash_password(data.new_password)
        await self._account_repo.update(account)
        await self._token_repo.delete(token.id)

        self._logger.info("Password reset completed", account_id=str(account.id))
        return Success(value=account.id)
