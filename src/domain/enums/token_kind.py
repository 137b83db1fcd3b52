"""Kinds of short-lived tokens held in the token store.

Usage:
    from src.domain.enums import TokenKind

    token = await token_repo.find_by_identifier(TokenKind.TWO_FACTOR, email)
"""

from enum import Enum


class TokenKind(str, Enum):
    """Token kinds.

    String Enum:
        Value is the discriminator stored with each token record.
    """

    VERIFICATION = "verification"
    TWO_FACTOR = "two_factor"
    PASSWORD_RESET = "password_reset"
