"""Short-lived single-use token issued for an email address.

One entity covers the three token kinds (email verification, two-factor
code, password reset); `kind` tells them apart.
"""

from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import UUID

from src.domain.enums.token_kind import TokenKind


@dataclass(frozen=True, slots=True, kw_only=True)
class AuthToken:
    """Issued token record. Never mutated; refreshed by replacement.

    Business Rules:
        - At most one live token per (kind, identifier)
        - A token is expired from its expiry instant onward (now >= expires_at)
        - Two-factor tokens are deleted as soon as they are accepted

    Attributes:
        id: Record identifier in the token store.
        kind: Which flow the token belongs to.
        identifier: Email address the token was issued for.
        token: Token value (opaque string or six-digit code).
        expires_at: Expiry timestamp (UTC).
    """

    id: UUID
    kind: TokenKind
    identifier: str
    token: str
    expires_at: datetime

    def is_expired(self, now: datetime | None = None) -> bool:
        """Check whether the token has reached its expiry.

        Args:
            now: Reference time (defaults to current UTC time).

        Returns:
            True if `now` is at or past `expires_at`.
        """
        return (now or datetime.now(UTC)) >= self.expires_at

    def matches(self, value: str) -> bool:
        """Exact comparison with a submitted value (no normalization)."""
        return self.token == value
