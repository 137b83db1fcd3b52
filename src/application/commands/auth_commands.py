"""Authentication commands (CQRS write operations).

Commands represent user intent to change system state.
All commands are immutable (frozen=True) and use keyword-only arguments (kw_only=True).

Pattern:
- Commands are data containers (no logic)
- Handlers validate input shape and execute business logic
- Handlers return Result types
"""

from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class LoginUser:
    """Log in with email and password, optionally with a two-factor code.

    Fields carry the raw submitted values; the handler validates them and
    answers `invalid_fields` before touching any store.

    Attributes:
        email: Submitted email address.
        password: Submitted password.
        code: Six-digit two-factor code, when resubmitting after a challenge.

    Example:
        >>> command = LoginUser(email="b@x.com", password="p1", code="482913")
        >>> result = await handler.handle(command)
    """

    email: str
    password: str
    code: str | None = None


@dataclass(frozen=True, kw_only=True)
class VerifyEmail:
    """Confirm control of an email address with a verification token.

    Attributes:
        token: Token from the verification link.
    """

    token: str


@dataclass(frozen=True, kw_only=True)
class RequestPasswordReset:
    """Request a password reset link.

    Always reported as accepted (no account enumeration).

    Attributes:
        email: Account email address.
    """

    email: str


@dataclass(frozen=True, kw_only=True)
class ConfirmPasswordReset:
    """Set a new password using a password reset token.

    Attributes:
        token: Token from the reset link.
        new_password: Replacement password (plaintext, hashed by the handler).
    """

    token: str
    new_password: str
