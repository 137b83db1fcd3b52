"""Validators package exports."""

from src.domain.validators.functions import (
    validate_email,
    validate_new_password,
    validate_token_format,
    validate_two_factor_code,
)

__all__ = [
    "validate_email",
    "validate_new_password",
    "validate_token_format",
    "validate_two_factor_code",
]
