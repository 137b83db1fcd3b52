"""Domain-level error codes (machine-readable).

Error codes follow ENTITY_ACTION_REASON naming convention.
Used with Result types for railway-oriented programming.
"""

from enum import Enum


class ErrorCode(Enum):
    """Domain-level error codes (machine-readable)."""

    # Session establishment
    CREDENTIALS_INVALID = "credentials_invalid"
    SESSION_FAILED = "session_failed"
