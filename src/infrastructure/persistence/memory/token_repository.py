"""InMemoryTokenRepository - dict-backed token and confirmation store.

Tokens are keyed by (kind, identifier). `replace` and `replace_confirmation`
are built only from the store's own find, delete and insert steps and take
the key lock around them, so a refresh is a single step with respect to
other refreshes of the same key whatever those steps await.
"""

from datetime import datetime
from uuid import UUID

from uuid_extensions import uuid7

from src.domain.entities.auth_token import AuthToken
from src.domain.entities.two_factor_confirmation import TwoFactorConfirmation
from src.domain.enums.token_kind import TokenKind
from src.infrastructure.persistence.identifier_locks import IdentifierLocks


class InMemoryTokenRepository:
    """Token store held in process memory.

    Attributes:
        locks: Key lock registry shared by every store instance of the app.
    """

    def __init__(self, locks: IdentifierLocks | None = None) -> None:
        self.locks = locks if locks is not None else IdentifierLocks()
        self._tokens: dict[tuple[TokenKind, str], AuthToken] = {}
        self._confirmations: dict[UUID, TwoFactorConfirmation] = {}

    async def find_by_identifier(
        self, kind: TokenKind, identifier: str
    ) -> AuthToken | None:
        return self._tokens.get((kind, identifier))

    async def find_by_token(self, kind: TokenKind, token: str) -> AuthToken | None:
        for stored in self._tokens.values():
            if stored.kind == kind and stored.token == token:
                return stored
        return None

    async def create(
        self,
        kind: TokenKind,
        identifier: str,
        token: str,
        expires_at: datetime,
    ) -> AuthToken:
        auth_token = AuthToken(
            id=uuid7(),
            kind=kind,
            identifier=identifier,
            token=token,
            expires_at=expires_at,
        )
        self._tokens[(kind, identifier)] = auth_token
        return auth_token

    async def delete(self, token_id: UUID) -> None:
        for key, stored in list(self._tokens.items()):
            if stored.id == token_id:
                del self._tokens[key]

    async def replace(
        self,
        kind: TokenKind,
        identifier: str,
        token: str,
        expires_at: datetime,
    ) -> AuthToken:
        async with self.locks.hold((kind, identifier)):
            existing = await self.find_by_identifier(kind, identifier)
            if existing:
                await self.delete(existing.id)
            return await self.create(kind, identifier, token, expires_at)

    async def find_confirmation(
        self, account_id: UUID
    ) -> TwoFactorConfirmation | None:
        return self._confirmations.get(account_id)

    async def delete_confirmation(self, confirmation_id: UUID) -> None:
        for account_id, stored in list(self._confirmations.items()):
            if stored.id == confirmation_id:
                del self._confirmations[account_id]

    async def replace_confirmation(self, account_id: UUID) -> TwoFactorConfirmation:
        async with self.locks.hold(("confirmation", account_id)):
            existing = await self.find_confirmation(account_id)
            if existing:
                await self.delete_confirmation(existing.id)
            return await self._insert_confirmation(account_id)

    async def _insert_confirmation(self, account_id: UUID) -> TwoFactorConfirmation:
        confirmation = TwoFactorConfirmation(id=uuid7(), account_id=account_id)
        self._confirmations[account_id] = confirmation
        return confirmation
