"""Database models for persistence layer.

This package contains SQLAlchemy database models that map to database
tables. These are infrastructure concerns and should not be imported by the
domain layer.

Models Organization:
    - account.py: Account model (credentials, verification, 2FA flag)
    - auth_token.py: Verification, two-factor and password reset tokens
    - two_factor_confirmation.py: Accepted two-factor challenge per account

Note:
    Domain entities (dataclasses) live in src/domain/entities/
    Database models live here in src/infrastructure/persistence/models/
    They are separate and mapped via repository layer.
"""

from src.infrastructure.persistence.models.account import AccountModel
from src.infrastructure.persistence.models.auth_token import AuthTokenModel
from src.infrastructure.persistence.models.two_factor_confirmation import (
    TwoFactorConfirmationModel,
)

__all__ = [
    "AccountModel",
    "AuthTokenModel",
    "TwoFactorConfirmationModel",
]
