"""Domain errors package.

Usage:
    from src.domain.errors import SessionError
"""

from src.domain.errors.session_error import SessionError

__all__ = [
    "SessionError",
]
