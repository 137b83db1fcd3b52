# mypy: disable-error-code="arg-type"
"""Infrastructure dependency factories.

Application-scoped singletons for core infrastructure services:
- Logging (structlog console adapter)
- Password hashing (bcrypt)
- Token generation (JWT)
- Notifications (stub sender, bounded by timeout)
- Key locks for token refreshes
- Database (PostgreSQL)
"""

from functools import lru_cache
from typing import TYPE_CHECKING, AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession

from src.core.config import settings
from src.infrastructure.persistence.database import Database

if TYPE_CHECKING:
    from src.domain.protocols.logger_protocol import LoggerProtocol
    from src.domain.protocols.notification_protocol import NotificationSenderProtocol
    from src.domain.protocols.password_hashing_protocol import PasswordHashingProtocol
    from src.domain.protocols.token_generation_protocol import TokenGenerationProtocol
    from src.infrastructure.persistence.identifier_locks import IdentifierLocks


# ============================================================================
# Application-Scoped Dependencies (Singletons)
# ============================================================================


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    Adapter selection is centralized here (composition root):
    - development: ConsoleAdapter (human-readable)
    - testing/ci/production: ConsoleAdapter (JSON)

    Returns:
        LoggerProtocol: Logger instance implementing the protocol.
    """
    from src.infrastructure.logging.console_adapter import ConsoleAdapter

    return ConsoleAdapter(
        use_json=not settings.is_development,
        level=settings.log_level,
    )


@lru_cache()
def get_password_service() -> "PasswordHashingProtocol":
    """Get password hashing service singleton (app-scoped).

    Returns:
        BcryptPasswordService with cost factor from settings.bcrypt_rounds.
    """
    from src.infrastructure.security.bcrypt_password_service import (
        BcryptPasswordService,
    )

    return BcryptPasswordService(cost_factor=settings.bcrypt_rounds)


@lru_cache()
def get_token_service() -> "TokenGenerationProtocol":
    """Get JWT token service singleton (app-scoped).

    Returns:
        JWTService signing with settings.secret_key.
    """
    from src.infrastructure.security.jwt_service import JWTService

    return JWTService(
        secret_key=settings.secret_key,
        expiration_minutes=settings.access_token_expire_minutes,
    )


@lru_cache()
def get_notification_sender() -> "NotificationSenderProtocol":
    """Get notification sender singleton (app-scoped).

    Every call is bounded by settings.notification_timeout_seconds. Token
    values are only written to the log in development.

    Returns:
        Sender implementing NotificationSenderProtocol.
    """
    from src.infrastructure.email import (
        BoundedNotificationSender,
        StubNotificationSender,
    )

    return BoundedNotificationSender(
        StubNotificationSender(
            logger=get_logger(),
            url_base=settings.verification_url_base,
            expose_tokens=settings.is_development,
        ),
        timeout_seconds=settings.notification_timeout_seconds,
    )


@lru_cache()
def get_identifier_locks() -> "IdentifierLocks":
    """Get the key lock registry (app-scoped).

    Shared by every token store instance so that refreshes of one key are
    serialized across requests.
    """
    from src.infrastructure.persistence.identifier_locks import IdentifierLocks

    return IdentifierLocks()


@lru_cache()
def get_database() -> Database:
    """Get database manager singleton (app-scoped).

    Returns Database instance with connection pool.
    Use get_db_session() for per-request sessions.

    Raises:
        ValueError: If DATABASE_URL is not configured.
    """
    if not settings.database_url:
        msg = "DATABASE_URL must be set when token_store_backend is 'database'"
        raise ValueError(msg)
    return Database(
        database_url=settings.database_url,
        echo=settings.db_echo,
    )


# ============================================================================
# Request-Scoped Dependencies (Per-Request)
# ============================================================================


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """Get database session (request-scoped).

    Creates new session per request with automatic transaction management:
        - Commits on success
        - Rolls back on exception
        - Always closes session

    Yields:
        Database session for request duration.
    """
    db = get_database()
    async with db.get_session() as session:
        yield session
