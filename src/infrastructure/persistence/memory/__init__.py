"""In-process stores for development and tests (no database required)."""

from src.infrastructure.persistence.memory.account_repository import (
    InMemoryAccountRepository,
)
from src.infrastructure.persistence.memory.token_repository import (
    InMemoryTokenRepository,
)

__all__ = [
    "InMemoryAccountRepository",
    "InMemoryTokenRepository",
]
