"""Unit tests for TokenGenerator.

Tests cover:
- Token value formats per kind
- Expiry calculation per kind
- Issuing replaces the previous token for the same key
"""

from datetime import UTC, datetime, timedelta

import pytest
from freezegun import freeze_time

from src.application.services.token_generator import TokenGenerator
from src.domain.enums.token_kind import TokenKind
from tests.conftest import stored_tokens


@pytest.fixture
def generator(token_repo):
    return TokenGenerator(token_repo=token_repo)


@pytest.mark.unit
class TestTokenGeneratorValues:
    """Test token value formats."""

    def test_two_factor_code_is_six_digits_in_range(self, generator):
        """Test every generated code is a six-digit number in 100000..999999."""
        for _ in range(500):
            code = generator.generate_value(TokenKind.TWO_FACTOR)

            assert len(code) == 6
            assert code.isdigit()
            assert 100_000 <= int(code) <= 999_999

    def test_verification_token_is_prefixed_hex(self, generator):
        """Test verification tokens are "verify." plus 64 hex characters."""
        value = generator.generate_value(TokenKind.VERIFICATION)

        assert value.startswith("verify.")
        suffix = value.removeprefix("verify.")
        assert len(suffix) == 64
        int(suffix, 16)

    def test_password_reset_token_is_prefixed_hex(self, generator):
        """Test password reset tokens are "reset." plus 64 hex characters."""
        value = generator.generate_value(TokenKind.PASSWORD_RESET)

        assert value.startswith("reset.")
        assert len(value.removeprefix("reset.")) == 64

    def test_opaque_tokens_are_unique(self, generator):
        """Test consecutive opaque tokens differ."""
        values = {generator.generate_value(TokenKind.VERIFICATION) for _ in range(50)}

        assert len(values) == 50


@pytest.mark.unit
class TestTokenGeneratorExpiry:
    """Test expiry calculation."""

    @freeze_time("2024-01-01 12:00:00")
    def test_default_lifetimes(self, generator):
        """Test verification 1h, two-factor 5min, password reset 1h."""
        now = datetime(2024, 1, 1, 12, 0, tzinfo=UTC)

        assert generator.calculate_expiration(TokenKind.VERIFICATION) == now + timedelta(
            hours=1
        )
        assert generator.calculate_expiration(TokenKind.TWO_FACTOR) == now + timedelta(
            minutes=5
        )
        assert generator.calculate_expiration(
            TokenKind.PASSWORD_RESET
        ) == now + timedelta(hours=1)

    @freeze_time("2024-01-01 12:00:00")
    def test_custom_lifetimes(self, token_repo):
        """Test lifetimes passed to the constructor are used."""
        generator = TokenGenerator(
            token_repo=token_repo, two_factor_ttl=timedelta(minutes=2)
        )

        assert generator.calculate_expiration(TokenKind.TWO_FACTOR) == datetime(
            2024, 1, 1, 12, 2, tzinfo=UTC
        )


@pytest.mark.unit
class TestTokenGeneratorIssue:
    """Test issuing through the token store."""

    @pytest.mark.asyncio
    async def test_issue_stores_token(self, generator, token_repo):
        """Test issue returns the stored token."""
        token = await generator.issue(TokenKind.VERIFICATION, "a@x.com")

        stored = await token_repo.find_by_identifier(TokenKind.VERIFICATION, "a@x.com")
        assert stored == token
        assert token.kind == TokenKind.VERIFICATION
        assert token.identifier == "a@x.com"

    @pytest.mark.asyncio
    async def test_issue_twice_keeps_only_newest(self, generator, token_repo):
        """Test a second issue for the same email deletes the first token."""
        first = await generator.issue(TokenKind.VERIFICATION, "a@x.com")
        second = await generator.issue(TokenKind.VERIFICATION, "a@x.com")

        tokens = stored_tokens(token_repo)
        assert tokens == [second]
        assert await token_repo.find_by_token(TokenKind.VERIFICATION, first.token) is None

    @pytest.mark.asyncio
    async def test_kinds_do_not_replace_each_other(self, generator, token_repo):
        """Test tokens of different kinds for one email coexist."""
        await generator.issue(TokenKind.VERIFICATION, "a@x.com")
        await generator.issue(TokenKind.TWO_FACTOR, "a@x.com")
        await generator.issue(TokenKind.PASSWORD_RESET, "a@x.com")

        assert len(stored_tokens(token_repo)) == 3
