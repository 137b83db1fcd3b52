"""Credentials session issuer.

Final step of password login. Runs after the login handler's gates, and
repeats the checks a sign-in callback would make before handing out a
session:

    1. Account exists and has a password hash, password verifies
       (CREDENTIALS_INVALID otherwise)
    2. Email is verified (SESSION_FAILED otherwise)
    3. Two-factor accounts hold a confirmation (SESSION_FAILED otherwise),
       which is deleted so the next sign-in needs a fresh code
    4. Access token issued
"""

from src.core.result import Failure, Result, Success
from src.domain.entities.account import Account
from src.domain.entities.session import Session
from src.domain.errors import SessionError
from src.domain.protocols import (
    AccountRepository,
    PasswordHashingProtocol,
    TokenGenerationProtocol,
    TokenRepository,
)


class CredentialsSessionIssuer:
    """SessionIssuerProtocol adapter for email + password login.

    Args:
        account_repo: Account lookup (fresh read by email).
        token_repo: Confirmation lookup and removal for two-factor accounts.
        password_service: Credential verifier.
        token_service: Access token generator.
    """

    def __init__(
        self,
        account_repo: AccountRepository,
        token_repo: TokenRepository,
        password_service: PasswordHashingProtocol,
        token_service: TokenGenerationProtocol,
    ) -> None:
        self._account_repo = account_repo
        self._token_repo = token_repo
        self._password_service = password_service
        self._token_service = token_service

    async def establish(
        self, account: Account, password: str
    ) -> Result[Session, SessionError]:
        """Verify credentials and issue a session.

        Args:
            account: Account the login handler resolved.
            password: Submitted password.

        Returns:
            Success(Session) or Failure(SessionError).
        """
        current = await self._account_repo.find_by_email(account.email)
        if current is None or current.password_hash is None:
            return Failure(error=SessionError.credentials_invalid())

        if not self._password_service.verify_password(password, current.password_hash):
            return Failure(error=SessionError.credentials_invalid())

        if not current.is_verified:
            return Failure(error=SessionError.failed("email not verified"))

        if current.is_two_factor_enabled:
            confirmation = await self._token_repo.find_confirmation(current.id)
            if confirmation is None:
                return Failure(
                    error=SessionError.failed("two-factor confirmation missing")
                )
            await self._token_repo.delete_confirmation(confirmation.id)

        access_token, expires_at = self._token_service.generate_access_token(
            current.id, current.email
        )
        return Success(
            value=Session(
                account_id=current.id,
                email=current.email,
                access_token=access_token,
                expires_at=expires_at,
            )
        )
