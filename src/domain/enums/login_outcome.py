"""Closed set of results the login flow reports to its caller.

Every login attempt ends in exactly one of these outcomes, each with one
human-readable message. Nothing else (stack traces, store errors, token
values) leaves the login flow.

Usage:
    from src.domain.enums import LoginOutcome

    LoginOutcome.CODE_EXPIRED.message  # "Code expired!"
"""

from enum import Enum


class LoginOutcome(str, Enum):
    """Outcome of one login attempt."""

    INVALID_FIELDS = "invalid_fields"
    ACCOUNT_NOT_FOUND = "account_not_found"
    CONFIRMATION_EMAIL_SENT = "confirmation_email_sent"
    TWO_FACTOR_REQUIRED = "two_factor_required"
    INVALID_CODE = "invalid_code"
    CODE_EXPIRED = "code_expired"
    LOGIN_SUCCESSFUL = "login_successful"
    INVALID_CREDENTIALS = "invalid_credentials"
    UNKNOWN_ERROR = "unknown_error"

    @property
    def message(self) -> str:
        """User-facing message for this outcome."""
        return _MESSAGES[self]

    @property
    def is_error(self) -> bool:
        """True for outcomes that reject the attempt."""
        return self not in _NON_ERROR_OUTCOMES


_MESSAGES: dict[LoginOutcome, str] = {
    LoginOutcome.INVALID_FIELDS: "Invalid fields!",
    # Also covers accounts without a password (no enumeration)
    LoginOutcome.ACCOUNT_NOT_FOUND: "Account does not exist!",
    LoginOutcome.CONFIRMATION_EMAIL_SENT: "Confirmation email sent!",
    LoginOutcome.TWO_FACTOR_REQUIRED: "Two-factor code sent!",
    LoginOutcome.INVALID_CODE: "Invalid code!",
    LoginOutcome.CODE_EXPIRED: "Code expired!",
    LoginOutcome.LOGIN_SUCCESSFUL: "Login successful!",
    LoginOutcome.INVALID_CREDENTIALS: "Invalid credentials!",
    LoginOutcome.UNKNOWN_ERROR: "Something went wrong!",
}

_NON_ERROR_OUTCOMES = frozenset(
    {
        LoginOutcome.CONFIRMATION_EMAIL_SENT,
        LoginOutcome.TWO_FACTOR_REQUIRED,
        LoginOutcome.LOGIN_SUCCESSFUL,
    }
)
