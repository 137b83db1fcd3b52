"""SqlAlchemyAccountRepository - SQLAlchemy implementation of AccountRepository.

Adapter for hexagonal architecture.
Maps between domain Account entities and AccountModel rows.
Statements run under `rollback_on_error`.
"""

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities.account import Account
from src.infrastructure.persistence.database import rollback_on_error
from src.infrastructure.persistence.models.account import AccountModel


def _to_domain(model: AccountModel) -> Account:
    """Convert database model to domain entity."""
    return Account(
        id=model.id,
        email=model.email,
        password_hash=model.password_hash,
        email_verified=model.email_verified,
        is_two_factor_enabled=model.is_two_factor_enabled,
        name=model.name,
    )


class SqlAlchemyAccountRepository:
    """SQLAlchemy implementation of AccountRepository.

    This class does NOT inherit from AccountRepository protocol.
    Python's Protocol uses structural typing (duck typing).

    Attributes:
        session: SQLAlchemy async session for database operations.

    Example:
        >>> async with database.get_session() as session:
        ...     repo = SqlAlchemyAccountRepository(session)
        ...     account = await repo.find_by_email("a@x.com")
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session.
        """
        self.session = session

    async def find_by_id(self, account_id: UUID) -> Account | None:
        """Find account by ID.

        Args:
            account_id: Account's unique identifier.

        Returns:
            Account if found, None otherwise.
        """
        async with rollback_on_error(self.session):
            model = await self.session.get(AccountModel, account_id)
        return _to_domain(model) if model else None

    async def find_by_email(self, email: str) -> Account | None:
        """Find account by exact email (no case folding).

        Args:
            email: Email address.

        Returns:
            Account if found, None otherwise.
        """
        stmt = select(AccountModel).where(AccountModel.email == email)
        async with rollback_on_error(self.session):
            result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()
        return _to_domain(model) if model else None

    async def update(self, account: Account) -> None:
        """Persist verification state, password and profile fields.

        Args:
            account: Account entity with changes.

        Raises:
            NoResultFound: If the account does not exist.
        """
        stmt = select(AccountModel).where(AccountModel.id == account.id)
        async with rollback_on_error(self.session):
            result = await self.session.execute(stmt)
            model = result.scalar_one()

            model.email = account.email
            model.password_hash = account.password_hash
            model.email_verified = account.email_verified
            model.is_two_factor_enabled = account.is_two_factor_enabled
            model.name = account.name
            await self.session.commit()
