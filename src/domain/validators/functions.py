"""Centralized validation functions (DRY principle).

All validation logic defined once, reused everywhere via Annotated types.
Validators are pure functions that raise ValueError on validation failure.
"""

import re

from src.core.constants import TWO_FACTOR_CODE_LENGTH

_EMAIL_PATTERN = re.compile(r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$")
_CODE_PATTERN = re.compile(rf"^[0-9]{{{TWO_FACTOR_CODE_LENGTH}}}$")
_TOKEN_PATTERN = re.compile(r"^[A-Za-z0-9._-]+$")


def validate_email(v: str) -> str:
    """Validate email format.

    The address is returned exactly as given. Accounts are looked up by
    the stored address, which is case-sensitive.

    Args:
        v: Email address to validate.

    Returns:
        Email unchanged.

    Raises:
        ValueError: If email format is invalid.

    Example:
        >>> validate_email("A@x.com")
        'A@x.com'
        >>> validate_email("invalid")
        ValueError: Invalid email format
    """
    if not _EMAIL_PATTERN.match(v):
        raise ValueError("Invalid email format")
    return v


def validate_two_factor_code(v: str) -> str:
    """Validate a two-factor code: exactly six ASCII digits.

    Raises:
        ValueError: If the code is not six digits.
    """
    if not _CODE_PATTERN.match(v):
        raise ValueError(f"Code must be {TWO_FACTOR_CODE_LENGTH} digits")
    return v


def validate_token_format(v: str) -> str:
    """Validate an opaque token (verification or password reset).

    Args:
        v: Token string to validate.

    Returns:
        Token unchanged (validation only).

    Raises:
        ValueError: If token format is invalid.

    Example:
        >>> validate_token_format("verify.abc123")
        'verify.abc123'
        >>> validate_token_format("has space")
        ValueError: Invalid token format
    """
    if not v:
        raise ValueError("Token cannot be empty")
    if not _TOKEN_PATTERN.match(v):
        raise ValueError("Invalid token format")
    return v


def validate_new_password(v: str) -> str:
    """Validate a password chosen during password reset.

    Raises:
        ValueError: If the password is blank.
    """
    if not v.strip():
        raise ValueError("Password cannot be blank")
    return v
