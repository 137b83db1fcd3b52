"""Persistence infrastructure.

This module provides:
- Base model for all database entities
- Database connection and session management
- Per-key lock registry used by token stores
- SQLAlchemy repositories (repositories/) and in-process stores (memory/)
"""

from src.infrastructure.persistence.base import BaseModel
from src.infrastructure.persistence.database import Database
from src.infrastructure.persistence.identifier_locks import IdentifierLocks

__all__ = [
    "BaseModel",
    "Database",
    "IdentifierLocks",
]
