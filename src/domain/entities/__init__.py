"""Domain entities for business logic.

Pure business logic entities with no framework dependencies.
"""

from src.domain.entities.account import Account
from src.domain.entities.auth_token import AuthToken
from src.domain.entities.session import Session
from src.domain.entities.two_factor_confirmation import TwoFactorConfirmation

__all__ = [
    "Account",
    "AuthToken",
    "Session",
    "TwoFactorConfirmation",
]
