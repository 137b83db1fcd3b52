"""Annotated types with centralized validation (DRY principle).

Define validation once, use everywhere.
All custom types use Pydantic's Annotated with Field constraints and AfterValidator.

Usage:
    from src.domain.types import Email, LoginPassword, TwoFactorCode

    class LoginCredentials(BaseModel):
        email: Email  # Validation included!
        password: LoginPassword
"""

from typing import Annotated

from pydantic import AfterValidator, Field

from src.domain.validators import (
    validate_email,
    validate_new_password,
    validate_token_format,
    validate_two_factor_code,
)

# ============================================================================
# Authentication Types
# ============================================================================

Email = Annotated[
    str,
    Field(
        min_length=5,
        max_length=255,
        description="Email address",
        examples=["user@example.com"],
    ),
    AfterValidator(validate_email),
]
"""Email address with format validation (kept exactly as submitted)."""

LoginPassword = Annotated[
    str,
    Field(
        min_length=1,
        max_length=128,
        description="Password as typed at login",
    ),
]
"""Password submitted at login. Only presence is checked here; strength is
a registration concern."""

TwoFactorCode = Annotated[
    str,
    Field(
        min_length=6,
        max_length=6,
        description="Six-digit two-factor code",
        examples=["482913"],
    ),
    AfterValidator(validate_two_factor_code),
]
"""Six-digit code sent by email during two-factor login."""

OpaqueToken = Annotated[
    str,
    Field(
        min_length=8,
        max_length=128,
        description="Email verification or password reset token",
        examples=["verify.3f9c0a..."],
    ),
    AfterValidator(validate_token_format),
]
"""Email verification or password reset token from a link."""

NewPassword = Annotated[
    str,
    Field(
        min_length=6,
        max_length=128,
        description="New password (minimum 6 characters)",
    ),
    AfterValidator(validate_new_password),
]
"""Password chosen during password reset."""
