"""TokenRepository protocol (port) for short-lived auth records.

The token store is the single writer for three record types:
    - AuthToken (verification, two-factor, password reset), keyed by
      (kind, identifier) where identifier is the email address
    - TwoFactorConfirmation, keyed by account id

Refresh Semantics:
    `replace` and `replace_confirmation` are the only way new records are
    issued by the login flows. Each removes the previous record for the
    key and creates the new one as one serialized step, so at most one
    live record exists per key even when refreshes race. Whoever writes
    last wins.
"""

from datetime import datetime
from typing import Protocol
from uuid import UUID

from src.domain.entities.auth_token import AuthToken
from src.domain.entities.two_factor_confirmation import TwoFactorConfirmation
from src.domain.enums.token_kind import TokenKind


class TokenRepository(Protocol):
    """Protocol for token and two-factor confirmation persistence.

    Implementations:
        - InMemoryTokenRepository: src/infrastructure/persistence/memory/
        - SqlAlchemyTokenRepository: src/infrastructure/persistence/repositories/
    """

    async def find_by_identifier(
        self, kind: TokenKind, identifier: str
    ) -> AuthToken | None:
        """Find the live token of `kind` issued for `identifier`.

        Does NOT check expiration - caller must compare expires_at.

        Args:
            kind: Token kind.
            identifier: Email address the token was issued for.

        Returns:
            AuthToken if one exists, None otherwise.
        """
        ...

    async def find_by_token(self, kind: TokenKind, token: str) -> AuthToken | None:
        """Find a token of `kind` by its value (links carry only the value).

        Returns:
            AuthToken if found, None otherwise.
        """
        ...

    async def create(
        self,
        kind: TokenKind,
        identifier: str,
        token: str,
        expires_at: datetime,
    ) -> AuthToken:
        """Store a new token without touching existing ones.

        Prefer `replace`; callers using `create` own the single-token rule.

        Returns:
            Created AuthToken.
        """
        ...

    async def delete(self, token_id: UUID) -> None:
        """Delete a token by record id. Deleting a missing id is a no-op."""
        ...

    async def replace(
        self,
        kind: TokenKind,
        identifier: str,
        token: str,
        expires_at: datetime,
    ) -> AuthToken:
        """Delete any token of `kind` for `identifier`, then create a new one.

        Args:
            kind: Token kind.
            identifier: Email address the token is issued for.
            token: New token value.
            expires_at: New expiry timestamp.

        Returns:
            The newly created AuthToken (the only live one for the key).
        """
        ...

    async def find_confirmation(
        self, account_id: UUID
    ) -> TwoFactorConfirmation | None:
        """Find the two-factor confirmation for an account.

        Returns:
            TwoFactorConfirmation if present, None otherwise.
        """
        ...

    async def delete_confirmation(self, confirmation_id: UUID) -> None:
        """Delete a confirmation by record id. Missing ids are a no-op."""
        ...

    async def replace_confirmation(self, account_id: UUID) -> TwoFactorConfirmation:
        """Delete any confirmation for the account, then create a fresh one.

        Returns:
            The new confirmation (the only one for the account).
        """
        ...
