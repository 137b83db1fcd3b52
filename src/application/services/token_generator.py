"""Token generator for verification, two-factor and password reset tokens.

Issuing a token always goes through `TokenRepository.replace`, so the
previous token for the same (kind, identifier) is removed in the same
serialized step. Issuing twice for one email leaves exactly one live token
(the newer one); a resend invalidates the previous code.

Token Strategy:
    - Verification: "verify." + 32-byte random hex, 1 hour
    - Two-factor: uniform six-digit code in 100000..999999, 5 minutes
    - Password reset: "reset." + 32-byte random hex, 1 hour

Usage:
    generator = TokenGenerator(token_repo=token_repo)
    token = await generator.issue(TokenKind.TWO_FACTOR, "b@x.com")
    await sender.send_two_factor_code(token.identifier, token.token)
"""

import secrets
from datetime import UTC, datetime, timedelta

from src.core.constants import (
    PASSWORD_RESET_TOKEN_PREFIX,
    TOKEN_BYTES,
    TWO_FACTOR_CODE_MAX,
    TWO_FACTOR_CODE_MIN,
    VERIFICATION_TOKEN_PREFIX,
)
from src.domain.entities.auth_token import AuthToken
from src.domain.enums.token_kind import TokenKind
from src.domain.protocols.token_repository import TokenRepository


class TokenGenerator:
    """Produces token values and expiries and stores them by replacement.

    Args:
        token_repo: Token store (single writer for token records).
        verification_ttl: Lifetime of email verification tokens.
        two_factor_ttl: Lifetime of two-factor codes.
        password_reset_ttl: Lifetime of password reset tokens.
    """

    def __init__(
        self,
        token_repo: TokenRepository,
        verification_ttl: timedelta = timedelta(hours=1),
        two_factor_ttl: timedelta = timedelta(minutes=5),
        password_reset_ttl: timedelta = timedelta(hours=1),
    ) -> None:
        self._token_repo = token_repo
        self._ttls: dict[TokenKind, timedelta] = {
            TokenKind.VERIFICATION: verification_ttl,
            TokenKind.TWO_FACTOR: two_factor_ttl,
            TokenKind.PASSWORD_RESET: password_reset_ttl,
        }

    async def issue(self, kind: TokenKind, identifier: str) -> AuthToken:
        """Issue a fresh token of `kind` for `identifier`.

        Any earlier token of the same kind for the identifier is deleted
        before the new one is stored.

        Args:
            kind: Token kind.
            identifier: Email address the token is for.

        Returns:
            The stored token.
        """
        return await self._token_repo.replace(
            kind=kind,
            identifier=identifier,
            token=self.generate_value(kind),
            expires_at=self.calculate_expiration(kind),
        )

    def generate_value(self, kind: TokenKind) -> str:
        """Generate a token value for `kind`.

        Two-factor codes are drawn uniformly from 100000..999999 rather than
        zero-padding a smaller number, so every code has six significant
        digits and no value is favoured.

        Example:
            >>> generator.generate_value(TokenKind.TWO_FACTOR)
            '482913'
            >>> generator.generate_value(TokenKind.VERIFICATION)[:7]
            'verify.'
        """
        match kind:
            case TokenKind.TWO_FACTOR:
                span = TWO_FACTOR_CODE_MAX - TWO_FACTOR_CODE_MIN + 1
                return str(TWO_FACTOR_CODE_MIN + secrets.randbelow(span))
            case TokenKind.VERIFICATION:
                return f"{VERIFICATION_TOKEN_PREFIX}{secrets.token_hex(TOKEN_BYTES)}"
            case TokenKind.PASSWORD_RESET:
                return f"{PASSWORD_RESET_TOKEN_PREFIX}{secrets.token_hex(TOKEN_BYTES)}"

    def calculate_expiration(self, kind: TokenKind) -> datetime:
        """Expiry timestamp (UTC) for a token of `kind` issued now."""
        return datetime.now(UTC) + self._ttls[kind]
