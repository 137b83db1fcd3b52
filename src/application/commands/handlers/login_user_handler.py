"""Login handler for credential login with email verification and 2FA.

Flow (each call ends in exactly one LoginOutcome):
1. Validate input shape (INVALID_FIELDS, before any lookup)
2. Find account by email (ACCOUNT_NOT_FOUND if missing or password-less)
3. Email verification gate: unverified account gets a fresh verification
   token by email (CONFIRMATION_EMAIL_SENT); no password check
4. Two-factor gate (2FA-enabled accounts):
   a. No code: fresh code by email (TWO_FACTOR_REQUIRED); no password check
   b. Code: INVALID_CODE if no token or mismatch, CODE_EXPIRED if expired;
      otherwise delete the token, reset the account's confirmation
5. Establish session through the session issuer:
   LOGIN_SUCCESSFUL, INVALID_CREDENTIALS, or UNKNOWN_ERROR

Error Boundary:
- Domain outcomes are returned as data
- Any exception from a store, sender or issuer is logged and reported as
  UNKNOWN_ERROR; nothing is retried and earlier deletions stay deleted

Architecture:
- Application layer ONLY imports from domain layer (entities, protocols, enums)
- NO infrastructure imports (repositories are injected via protocols)
"""

from pydantic import ValidationError

from src.application.commands.auth_commands import LoginUser
from src.application.dtos.auth_dtos import LoginCredentials, LoginResponse
from src.application.services.token_generator import TokenGenerator
from src.core.result import Failure, Result, Success
from src.domain.entities.account import Account
from src.domain.enums.login_outcome import LoginOutcome
from src.domain.enums.token_kind import TokenKind
from src.domain.protocols import (
    AccountRepository,
    LoggerProtocol,
    NotificationSenderProtocol,
    SessionIssuerProtocol,
    TokenRepository,
)


class LoginUserHandler:
    """Handler for the login command.

    Follows hexagonal architecture:
    - Application layer (this handler)
    - Domain layer (Account, AuthToken, protocols)
    - Infrastructure layer (stores, sender, session issuer via injection)
    """

    def __init__(
        self,
        account_repo: AccountRepository,
        token_repo: TokenRepository,
        token_generator: TokenGenerator,
        notification_sender: NotificationSenderProtocol,
        session_issuer: SessionIssuerProtocol,
        logger: LoggerProtocol,
    ) -> None:
        """Initialize login handler with dependencies.

        Args:
            account_repo: Account lookup.
            token_repo: Token store (two-factor lookup, deletion, confirmations).
            token_generator: Issues verification and two-factor tokens.
            notification_sender: Delivers verification links and codes.
            session_issuer: Checks credentials and establishes the session.
            logger: Structured logger.
        """
        self._account_repo = account_repo
        self._token_repo = token_repo
        self._token_generator = token_generator
        self._notifications = notification_sender
        self._session_issuer = session_issuer
        self._logger = logger.bind(handler="login_user")

    async def handle(self, cmd: LoginUser) -> Result[LoginResponse, LoginOutcome]:
        """Handle login command.

        Args:
            cmd: LoginUser command with raw submitted values.

        Returns:
            Success(LoginResponse) for CONFIRMATION_EMAIL_SENT,
            TWO_FACTOR_REQUIRED and LOGIN_SUCCESSFUL.
            Failure(LoginOutcome) for every other outcome.

        Side Effects:
            - Replaces the verification token (unverified account).
            - Replaces the two-factor token (2FA account, no code).
            - Deletes the two-factor token and replaces the confirmation
              (2FA account, accepted code).
            - Sends a verification link or code.
        """
        try:
            credentials = LoginCredentials(
                email=cmd.email,
                password=cmd.password,
                code=cmd.code,
            )
        except ValidationError as e:
            self._logger.info(
                "Login rejected: invalid fields",
                fields=sorted({str(err["loc"][0]) for err in e.errors() if err["loc"]}),
            )
            return Failure(error=LoginOutcome.INVALID_FIELDS)

        try:
            return await self._login(credentials)
        except Exception as e:
            # Error boundary: callers only ever see the closed outcome set
            self._logger.error(
                "Login failed unexpectedly",
                error=e,
                email=credentials.email,
            )
            return Failure(error=LoginOutcome.UNKNOWN_ERROR)

    async def _login(
        self, credentials: LoginCredentials
    ) -> Result[LoginResponse, LoginOutcome]:
        # Step 2: Find account (no password hash is reported as not found)
        account = await self._account_repo.find_by_email(credentials.email)
        if account is None or not account.has_password:
            return self._reject(LoginOutcome.ACCOUNT_NOT_FOUND, credentials.email)

        # Step 3: Email verification gate
        if not account.is_verified:
            token = await self._token_generator.issue(
                TokenKind.VERIFICATION, account.email
            )
            await self._notifications.send_verification(token.identifier, token.token)
            self._logger.info("Verification email sent", email=account.email)
            return Success(
                value=LoginResponse(outcome=LoginOutcome.CONFIRMATION_EMAIL_SENT)
            )

        # Step 4: Two-factor gate
        if account.is_two_factor_enabled:
            if credentials.code is None:
                token = await self._token_generator.issue(
                    TokenKind.TWO_FACTOR, account.email
                )
                await self._notifications.send_two_factor_code(
                    token.identifier, token.token
                )
                self._logger.info("Two-factor code sent", email=account.email)
                return Success(
                    value=LoginResponse(outcome=LoginOutcome.TWO_FACTOR_REQUIRED)
                )

            match await self._confirm_two_factor(account, credentials.code):
                case Failure(error=outcome):
                    return self._reject(outcome, account.email)
                case Success():
                    pass

        # Step 5: Credentials and session
        match await self._session_issuer.establish(account, credentials.password):
            case Success(value=session):
                self._logger.info("Login succeeded", account_id=str(account.id))
                return Success(
                    value=LoginResponse(
                        outcome=LoginOutcome.LOGIN_SUCCESSFUL,
                        session=session,
                    )
                )
            case Failure(error=error) if error.is_credentials_invalid:
                return self._reject(LoginOutcome.INVALID_CREDENTIALS, account.email)
            case Failure(error=error):
                self._logger.warning(
                    "Session could not be established",
                    email=account.email,
                    reason=error.message,
                )
                return Failure(error=LoginOutcome.UNKNOWN_ERROR)

    async def _confirm_two_factor(
        self, account: Account, code: str
    ) -> Result[None, LoginOutcome]:
        """Check a submitted code and consume it.

        The token is deleted before any later step can fail, so an accepted
        code can never be replayed.
        """
        token = await self._token_repo.find_by_identifier(
            TokenKind.TWO_FACTOR, account.email
        )
        if token is None or not token.matches(code):
            return Failure(error=LoginOutcome.INVALID_CODE)

        if token.is_expired():
            return Failure(error=LoginOutcome.CODE_EXPIRED)

        await self._token_repo.delete(token.id)
        await self._token_repo.replace_confirmation(account.id)
        return Success(value=None)

    def _reject(
        self, outcome: LoginOutcome, email: str
    ) -> Failure[LoginOutcome]:
        self._logger.info("Login rejected", outcome=outcome.value, email=email)
        return Failure(error=outcome)
