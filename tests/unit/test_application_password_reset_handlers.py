"""Unit tests for password reset handlers.

Tests cover:
- RequestPasswordResetHandler: same answer for known and unknown emails,
  token issued and link sent only for password accounts
- ConfirmPasswordResetHandler: token and password validation, expiry,
  password change, single use
"""

from datetime import UTC, datetime, timedelta

import pytest

from src.application.commands.auth_commands import (
    ConfirmPasswordReset,
    RequestPasswordReset,
)
from src.application.commands.handlers.confirm_password_reset_handler import (
    ConfirmPasswordResetHandler,
    PasswordResetConfirmError,
)
from src.application.commands.handlers.request_password_reset_handler import (
    PasswordResetError,
    PasswordResetRequestResponse,
    RequestPasswordResetHandler,
)
from src.application.services.token_generator import TokenGenerator
from src.core.result import Failure, Success
from src.domain.enums.token_kind import TokenKind
from tests.conftest import (
    PASSWORD,
    PASSWORD_SERVICE,
    create_account,
    stored_tokens,
)

RESET_TOKEN = "reset.0123456789abcdef"


@pytest.fixture
def request_handler(account_repo, token_repo, mock_sender, mock_logger):
    return RequestPasswordResetHandler(
        account_repo=account_repo,
        token_generator=TokenGenerator(token_repo=token_repo),
        notification_sender=mock_sender,
        logger=mock_logger,
    )


@pytest.fixture
def confirm_handler(account_repo, token_repo, mock_logger):
    return ConfirmPasswordResetHandler(
        account_repo=account_repo,
        token_repo=token_repo,
        password_service=PASSWORD_SERVICE,
        logger=mock_logger,
    )


@pytest.mark.unit
class TestRequestPasswordReset:
    """Test password reset requests."""

    @pytest.mark.asyncio
    async def test_malformed_email(self, request_handler):
        result = await request_handler.handle(RequestPasswordReset(email="nope"))

        assert result == Failure(error=PasswordResetError.INVALID_EMAIL)

    @pytest.mark.asyncio
    async def test_known_email_issues_token_and_sends_link(
        self, request_handler, account_repo, token_repo, mock_sender
    ):
        """Test a password account gets a reset token by email."""
        account_repo.add(create_account())

        result = await request_handler.handle(RequestPasswordReset(email="a@x.com"))

        assert result == Success(value=PasswordResetRequestResponse())
        tokens = stored_tokens(token_repo)
        assert len(tokens) == 1
        assert tokens[0].kind == TokenKind.PASSWORD_RESET
        assert tokens[0].token.startswith("reset.")
        mock_sender.send_password_reset.assert_awaited_once_with(
            "a@x.com", tokens[0].token
        )

    @pytest.mark.asyncio
    async def test_unknown_email_same_answer(
        self, request_handler, token_repo, mock_sender
    ):
        """Test an unknown email gets the same response and no token."""
        result = await request_handler.handle(
            RequestPasswordReset(email="nobody@x.com")
        )

        assert result == Success(value=PasswordResetRequestResponse())
        assert stored_tokens(token_repo) == []
        mock_sender.send_password_reset.assert_not_called()

    @pytest.mark.asyncio
    async def test_password_less_account_gets_nothing(
        self, request_handler, account_repo, token_repo
    ):
        account_repo.add(create_account(password_hash=None))

        await request_handler.handle(RequestPasswordReset(email="a@x.com"))

        assert stored_tokens(token_repo) == []

    @pytest.mark.asyncio
    async def test_repeat_request_replaces_token(
        self, request_handler, account_repo, token_repo
    ):
        """Test only the newest reset link stays valid."""
        account_repo.add(create_account())

        await request_handler.handle(RequestPasswordReset(email="a@x.com"))
        await request_handler.handle(RequestPasswordReset(email="a@x.com"))

        assert len(stored_tokens(token_repo)) == 1


@pytest.mark.unit
class TestConfirmPasswordReset:
    """Test password reset confirmation."""

    @pytest.mark.asyncio
    async def test_malformed_token(self, confirm_handler):
        result = await confirm_handler.handle(
            ConfirmPasswordReset(token="bad token", new_password="secret1")
        )

        assert result == Failure(error=PasswordResetConfirmError.INVALID_TOKEN)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("new_password", ["12345", "      "])
    async def test_weak_password(self, confirm_handler, new_password):
        """Test short or blank passwords are rejected."""
        result = await confirm_handler.handle(
            ConfirmPasswordReset(token=RESET_TOKEN, new_password=new_password)
        )

        assert result == Failure(error=PasswordResetConfirmError.INVALID_PASSWORD)

    @pytest.mark.asyncio
    async def test_unknown_token(self, confirm_handler):
        result = await confirm_handler.handle(
            ConfirmPasswordReset(token=RESET_TOKEN, new_password="secret1")
        )

        assert result == Failure(error=PasswordResetConfirmError.TOKEN_NOT_FOUND)

    @pytest.mark.asyncio
    async def test_expired_token(self, confirm_handler, account_repo, token_repo):
        account_repo.add(create_account())
        await token_repo.create(
            TokenKind.PASSWORD_RESET,
            "a@x.com",
            RESET_TOKEN,
            datetime.now(UTC) - timedelta(seconds=1),
        )

        result = await confirm_handler.handle(
            ConfirmPasswordReset(token=RESET_TOKEN, new_password="secret1")
        )

        assert result == Failure(error=PasswordResetConfirmError.TOKEN_EXPIRED)

    @pytest.mark.asyncio
    async def test_email_not_found(self, confirm_handler, token_repo):
        await token_repo.create(
            TokenKind.PASSWORD_RESET,
            "gone@x.com",
            RESET_TOKEN,
            datetime.now(UTC) + timedelta(hours=1),
        )

        result = await confirm_handler.handle(
            ConfirmPasswordReset(token=RESET_TOKEN, new_password="secret1")
        )

        assert result == Failure(error=PasswordResetConfirmError.EMAIL_NOT_FOUND)

    @pytest.mark.asyncio
    async def test_password_changed_and_token_consumed(
        self, confirm_handler, account_repo, token_repo
    ):
        """Test the new password verifies, the old one no longer does."""
        account = create_account()
        account_repo.add(account)
        await token_repo.create(
            TokenKind.PASSWORD_RESET,
            "a@x.com",
            RESET_TOKEN,
            datetime.now(UTC) + timedelta(hours=1),
        )

        result = await confirm_handler.handle(
            ConfirmPasswordReset(token=RESET_TOKEN, new_password="secret1")
        )

        assert result == Success(value=account.id)
        stored = await account_repo.find_by_id(account.id)
        assert PASSWORD_SERVICE.verify_password("secret1", stored.password_hash)
        assert not PASSWORD_SERVICE.verify_password(PASSWORD, stored.password_hash)
        assert stored_tokens(token_repo) == []
