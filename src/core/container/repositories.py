"""Repository dependency factories.

Request-scoped repository instances. The backend is chosen by
settings.token_store_backend:
- memory: app-scoped in-process stores (development, tests)
- database: SQLAlchemy repositories sharing one session per request
"""

from functools import lru_cache
from typing import TYPE_CHECKING, AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from src.core.config import settings
from src.core.container.infrastructure import get_db_session, get_identifier_locks

if TYPE_CHECKING:
    from src.domain.protocols import AccountRepository, TokenRepository
    from src.infrastructure.persistence.memory import (
        InMemoryAccountRepository,
        InMemoryTokenRepository,
    )


# ============================================================================
# In-Process Stores (Application-Scoped)
# ============================================================================


@lru_cache()
def get_memory_account_repository() -> "InMemoryAccountRepository":
    """Get the in-process account store singleton."""
    from src.infrastructure.persistence.memory import InMemoryAccountRepository

    return InMemoryAccountRepository()


@lru_cache()
def get_memory_token_repository() -> "InMemoryTokenRepository":
    """Get the in-process token store singleton."""
    from src.infrastructure.persistence.memory import InMemoryTokenRepository

    return InMemoryTokenRepository(locks=get_identifier_locks())


# ============================================================================
# Repository Factories (Request-Scoped)
# ============================================================================


async def get_store_session() -> AsyncGenerator[AsyncSession | None, None]:
    """Database session for the request, or None with the memory backend.

    Yields:
        AsyncSession when token_store_backend is 'database', else None.
    """
    if settings.token_store_backend == "memory":
        yield None
        return
    async for session in get_db_session():
        yield session


async def get_account_repository(
    session: AsyncSession | None = Depends(get_store_session),
) -> "AccountRepository":
    """Get account repository (request-scoped).

    Args:
        session: Database session for request duration, None for memory.

    Returns:
        Repository implementing AccountRepository.
    """
    if session is None:
        return get_memory_account_repository()

    from src.infrastructure.persistence.repositories import (
        SqlAlchemyAccountRepository,
    )

    return SqlAlchemyAccountRepository(session=session)


async def get_token_repository(
    session: AsyncSession | None = Depends(get_store_session),
) -> "TokenRepository":
    """Get token repository (request-scoped).

    Args:
        session: Database session for request duration, None for memory.

    Returns:
        Repository implementing TokenRepository.
    """
    if session is None:
        return get_memory_token_repository()

    from src.infrastructure.persistence.repositories import (
        SqlAlchemyTokenRepository,
    )

    return SqlAlchemyTokenRepository(session=session, locks=get_identifier_locks())
