"""SqlAlchemyTokenRepository - SQLAlchemy implementation of TokenRepository.

Handles auth tokens (all kinds) and two-factor confirmations.

Refresh Atomicity:
    `replace` runs DELETE + INSERT inside one transaction while holding the
    key lock from the shared IdentifierLocks registry. The unique
    (kind, identifier) constraint rejects a second live token should a
    writer outside this process race us.

Every statement runs under `rollback_on_error`, so a database error leaves
the session rolled back before it propagates.
"""

from datetime import datetime
from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities.auth_token import AuthToken
from src.domain.entities.two_factor_confirmation import TwoFactorConfirmation
from src.domain.enums.token_kind import TokenKind
from src.infrastructure.persistence.database import rollback_on_error
from src.infrastructure.persistence.identifier_locks import IdentifierLocks
from src.infrastructure.persistence.models.auth_token import AuthTokenModel
from src.infrastructure.persistence.models.two_factor_confirmation import (
    TwoFactorConfirmationModel,
)


def _to_token(model: AuthTokenModel) -> AuthToken:
    """Convert database model to domain entity."""
    return AuthToken(
        id=model.id,
        kind=model.kind,
        identifier=model.identifier,
        token=model.token,
        expires_at=model.expires_at,
    )


def _to_confirmation(model: TwoFactorConfirmationModel) -> TwoFactorConfirmation:
    """Convert database model to domain entity."""
    return TwoFactorConfirmation(id=model.id, account_id=model.account_id)


class SqlAlchemyTokenRepository:
    """SQLAlchemy implementation for token and confirmation persistence.

    Attributes:
        session: SQLAlchemy async session for database operations.
        locks: Key lock registry shared across requests.

    Example:
        >>> async with database.get_session() as session:
        ...     repo = SqlAlchemyTokenRepository(session, locks)
        ...     token = await repo.find_by_identifier(TokenKind.TWO_FACTOR, email)
    """

    def __init__(self, session: AsyncSession, locks: IdentifierLocks) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session.
            locks: Process-wide key lock registry.
        """
        self.session = session
        self.locks = locks

    async def find_by_identifier(
        self, kind: TokenKind, identifier: str
    ) -> AuthToken | None:
        """Find the token of `kind` issued for `identifier`.

        Does NOT check expiration - caller must compare expires_at.
        """
        stmt = (
            select(AuthTokenModel)
            .where(AuthTokenModel.kind == kind)
            .where(AuthTokenModel.identifier == identifier)
        )
        async with rollback_on_error(self.session):
            result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()
        return _to_token(model) if model else None

    async def find_by_token(self, kind: TokenKind, token: str) -> AuthToken | None:
        """Find a token of `kind` by value."""
        stmt = (
            select(AuthTokenModel)
            .where(AuthTokenModel.kind == kind)
            .where(AuthTokenModel.token == token)
        )
        async with rollback_on_error(self.session):
            result = await self.session.execute(stmt)
        model = result.scalars().first()
        return _to_token(model) if model else None

    async def create(
        self,
        kind: TokenKind,
        identifier: str,
        token: str,
        expires_at: datetime,
    ) -> AuthToken:
        """Create a token row.

        Raises:
            IntegrityError: If a token for (kind, identifier) already exists.
        """
        async with rollback_on_error(self.session):
            model = self._add(kind, identifier, token, expires_at)
            await self.session.commit()
            await self.session.refresh(model)
        return _to_token(model)

    async def delete(self, token_id: UUID) -> None:
        """Delete a token by id (no-op if missing)."""
        async with rollback_on_error(self.session):
            await self.session.execute(
                delete(AuthTokenModel).where(AuthTokenModel.id == token_id)
            )
            await self.session.commit()

    async def replace(
        self,
        kind: TokenKind,
        identifier: str,
        token: str,
        expires_at: datetime,
    ) -> AuthToken:
        """Delete the token for (kind, identifier) and insert the new one.

        Both statements commit together; on error the old token survives.
        """
        async with self.locks.hold((kind, identifier)):
            async with rollback_on_error(self.session):
                await self.session.execute(
                    delete(AuthTokenModel)
                    .where(AuthTokenModel.kind == kind)
                    .where(AuthTokenModel.identifier == identifier)
                )
                model = self._add(kind, identifier, token, expires_at)
                await self.session.commit()
        async with rollback_on_error(self.session):
            await self.session.refresh(model)
        return _to_token(model)

    async def find_confirmation(
        self, account_id: UUID
    ) -> TwoFactorConfirmation | None:
        """Find the confirmation for an account."""
        stmt = select(TwoFactorConfirmationModel).where(
            TwoFactorConfirmationModel.account_id == account_id
        )
        async with rollback_on_error(self.session):
            result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()
        return _to_confirmation(model) if model else None

    async def delete_confirmation(self, confirmation_id: UUID) -> None:
        """Delete a confirmation by id (no-op if missing)."""
        async with rollback_on_error(self.session):
            await self.session.execute(
                delete(TwoFactorConfirmationModel).where(
                    TwoFactorConfirmationModel.id == confirmation_id
                )
            )
            await self.session.commit()

    async def replace_confirmation(self, account_id: UUID) -> TwoFactorConfirmation:
        """Delete the account's confirmation and insert a fresh one."""
        async with self.locks.hold(("confirmation", account_id)):
            async with rollback_on_error(self.session):
                await self.session.execute(
                    delete(TwoFactorConfirmationModel).where(
                        TwoFactorConfirmationModel.account_id == account_id
                    )
                )
                model = TwoFactorConfirmationModel(account_id=account_id)
                self.session.add(model)
                await self.session.commit()
        async with rollback_on_error(self.session):
            await self.session.refresh(model)
        return _to_confirmation(model)

    def _add(
        self,
        kind: TokenKind,
        identifier: str,
        token: str,
        expires_at: datetime,
    ) -> AuthTokenModel:
        model = AuthTokenModel(
            kind=kind,
            identifier=identifier,
            token=token,
            expires_at=expires_at,
        )
        self.session.add(model)
        return model
