"""Email verification handler.

Flow:
1. Validate token shape
2. Find verification token by value
3. Check token exists
4. Check token not expired (now >= expires_at is expired)
5. Find account by the email the token was issued for
6. Mark account verified (verified email stored on the account)
7. Delete the token (single use)
8. Return Success(account_id)

On failure:
- Return Failure(error) with a VerifyEmailError reason
"""

from datetime import UTC, datetime
from uuid import UUID

from pydantic import TypeAdapter, ValidationError

from src.application.commands.auth_commands import VerifyEmail
from src.core.result import Failure, Result, Success
from src.domain.enums.token_kind import TokenKind
from src.domain.protocols import AccountRepository, LoggerProtocol, TokenRepository
from src.domain.types import OpaqueToken

_TOKEN_ADAPTER = TypeAdapter(OpaqueToken)


class VerifyEmailError:
    """Email verification error reasons."""

    INVALID_TOKEN = "invalid_token"
    TOKEN_NOT_FOUND = "token_not_found"
    TOKEN_EXPIRED = "token_expired"
    EMAIL_NOT_FOUND = "email_not_found"


class VerifyEmailHandler:
    """Handler for email verification command."""

    def __init__(
        self,
        account_repo: AccountRepository,
        token_repo: TokenRepository,
        logger: LoggerProtocol,
    ) -> None:
        """Initialize email verification handler with dependencies.

        Args:
            account_repo: Account repository for persistence.
            token_repo: Token store holding verification tokens.
            logger: Structured logger.
        """
        self._account_repo = account_repo
        self._token_repo = token_repo
        self._logger = logger.bind(handler="verify_email")

    async def handle(self, cmd: VerifyEmail) -> Result[UUID, str]:
        """Handle email verification command.

        Args:
            cmd: VerifyEmail command.

        Returns:
            Success(account_id) on successful verification.
            Failure(error_reason) on failure.

        Side Effects:
            - Sets Account.email_verified.
            - Deletes the verification token.
        """
        try:
            token_value = _TOKEN_ADAPTER.validate_python(cmd.token)
        except ValidationError:
            return Failure(error=VerifyEmailError.INVALID_TOKEN)

        token = await self._token_repo.find_by_token(TokenKind.VERIFICATION, token_value)
        if token is None:
            return Failure(error=VerifyEmailError.TOKEN_NOT_FOUND)

        if token.is_expired():
            self._logger.info("Verification token expired", email=token.identifier)
            return Failure(error=VerifyEmailError.TOKEN_EXPIRED)

        account = await self._account_repo.find_by_email(token.identifier)
        if account is None:
            return Failure(error=VerifyEmailError.EMAIL_NOT_FOUND)

        account.mark_email_verified(token.identifier, at=datetime.now(UTC))
        await self._account_repo.update(account)
        await self._token_repo.delete(token.id)

        self._logger.info("Email verified", account_id=str(account.id))
        return Success(value=account.id)
