"""Domain enums for business logic.

This package contains enumerations used throughout the domain layer.

Available Enums:
    - TokenKind: Verification, two-factor and password reset tokens
    - LoginOutcome: Closed set of login results with user-facing messages
"""

from src.domain.enums.login_outcome import LoginOutcome
from src.domain.enums.token_kind import TokenKind

__all__ = [
    "LoginOutcome",
    "TokenKind",
]
