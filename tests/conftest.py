"""Pytest configuration and shared fixtures.

Settings are loaded once at import time, so the test environment is put in
place before anything under src/ is imported:
1. ENVIRONMENT=testing (JSON logs)
2. A 32+ character SECRET_KEY
3. Low bcrypt cost factor so hashing stays fast
4. In-memory token store
"""

import inspect
import os

os.environ.setdefault("ENVIRONMENT", "testing")
os.environ.setdefault("SECRET_KEY", "test-secret-key-that-is-at-least-32-chars")
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("TOKEN_STORE_BACKEND", "memory")

from datetime import UTC, datetime  # noqa: E402
from unittest.mock import AsyncMock, Mock  # noqa: E402
from uuid import UUID  # noqa: E402

import pytest  # noqa: E402
from uuid_extensions import uuid7  # noqa: E402

from src.domain.entities.account import Account  # noqa: E402
from src.domain.entities.auth_token import AuthToken  # noqa: E402
from src.infrastructure.persistence.identifier_locks import IdentifierLocks  # noqa: E402
from src.infrastructure.persistence.memory import (  # noqa: E402
    InMemoryAccountRepository,
    InMemoryTokenRepository,
)
from src.infrastructure.security.bcrypt_password_service import (  # noqa: E402
    BcryptPasswordService,
)

# Shared test password service (cost factor 4 keeps hashing fast)
PASSWORD_SERVICE = BcryptPasswordService(cost_factor=4)
PASSWORD = "p1"
PASSWORD_HASH = PASSWORD_SERVICE.hash_password(PASSWORD)


def create_account(
    account_id: UUID | None = None,
    email: str = "a@x.com",
    password_hash: str | None = PASSWORD_HASH,
    verified: bool = True,
    two_factor: bool = False,
) -> Account:
    """Helper to create an Account for testing.

    Args:
        account_id: Account id (default: fresh uuid7).
        email: Email address.
        password_hash: Bcrypt hash of "p1" by default; None for a
            password-less (federated) account.
        verified: Whether the email is verified.
        two_factor: Whether two-factor login is enabled.
    """
    return Account(
        id=account_id or uuid7(),
        email=email,
        password_hash=password_hash,
        email_verified=datetime(2024, 1, 1, tzinfo=UTC) if verified else None,
        is_two_factor_enabled=two_factor,
    )


def stored_tokens(token_repo: InMemoryTokenRepository) -> list[AuthToken]:
    """Every token currently held by an in-memory store."""
    return list(token_repo._tokens.values())


@pytest.fixture
def account_repo() -> InMemoryAccountRepository:
    """Empty in-memory account store."""
    return InMemoryAccountRepository()


@pytest.fixture
def token_repo() -> InMemoryTokenRepository:
    """Empty in-memory token store with its own lock registry."""
    return InMemoryTokenRepository(locks=IdentifierLocks())


@pytest.fixture
def mock_logger() -> Mock:
    """Logger double; bind() returns the same mock so calls are observable."""
    logger = Mock()
    logger.bind.return_value = logger
    return logger


@pytest.fixture
def mock_sender() -> AsyncMock:
    """Notification sender double recording every delivery."""
    return AsyncMock()


# Pytest markers for different test types
def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests with mocked dependencies")
    config.addinivalue_line(
        "markers", "integration: Integration tests with real libraries or database"
    )
    config.addinivalue_line("markers", "api: HTTP tests against the FastAPI app")


# Test execution configuration
def pytest_collection_modifyitems(config, items):
    """Automatically add asyncio marker to async test functions.

    This ensures all async tests are properly marked even if
    the developer forgets to add @pytest.mark.asyncio.
    """
    for item in items:
        if inspect.iscoroutinefunction(getattr(item, "function", None)):
            item.add_marker(pytest.mark.asyncio)
