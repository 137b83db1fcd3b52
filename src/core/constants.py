"""Centralized constants for internal implementation details.

This module contains constants that are internal implementation details,
NOT environment-specific configuration. For environment-specific settings,
use `src/core/config.py` instead.

Example:
    >>> from src.core.constants import TOKEN_BYTES, VERIFICATION_TOKEN_PREFIX
    >>> token = f"{VERIFICATION_TOKEN_PREFIX}{secrets.token_hex(TOKEN_BYTES)}"
"""

# =============================================================================
# Token Values
# =============================================================================

TOKEN_BYTES: int = 32
"""Number of bytes of entropy in opaque tokens (32 bytes = 256 bits)."""

VERIFICATION_TOKEN_PREFIX: str = "verify."
"""Prefix marking an opaque value as an email verification token."""

PASSWORD_RESET_TOKEN_PREFIX: str = "reset."
"""Prefix marking an opaque value as a password reset token."""

TWO_FACTOR_CODE_MIN: int = 100_000
"""Smallest two-factor code (six digits, no leading zero)."""

TWO_FACTOR_CODE_MAX: int = 999_999
"""Largest two-factor code (inclusive)."""

TWO_FACTOR_CODE_LENGTH: int = 6
"""Number of digits in a two-factor code."""


# =============================================================================
# Security
# =============================================================================

BCRYPT_ROUNDS_DEFAULT: int = 12
"""Default bcrypt work factor (cost parameter)."""

JWT_SECRET_MIN_LENGTH: int = 32
"""Minimum JWT signing secret length in bytes (256 bits)."""
