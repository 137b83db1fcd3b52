"""Repository implementations (adapters for hexagonal architecture).

This package contains concrete implementations of repository protocols
defined in the domain layer.
"""

from src.infrastructure.persistence.repositories.account_repository import (
    SqlAlchemyAccountRepository,
)
from src.infrastructure.persistence.repositories.token_repository import (
    SqlAlchemyTokenRepository,
)

__all__ = [
    "SqlAlchemyAccountRepository",
    "SqlAlchemyTokenRepository",
]
