"""Session establishment errors.

The session issuer reports a failure as one of two cases:
    - CREDENTIALS_INVALID: password missing or wrong
    - SESSION_FAILED: anything else (sign-in refused, issuer fault)

Architecture:
    - Domain layer errors (no infrastructure dependencies)
    - Returned in Failure(...), never raised

Usage:
    match await session_issuer.establish(account, password):
        case Failure(error=SessionError(code=ErrorCode.CREDENTIALS_INVALID)):
            ...
"""

from dataclasses import dataclass

from src.core.enums import ErrorCode
from src.core.errors import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class SessionError(DomainError):
    """Session could not be established.

    Attributes:
        code: CREDENTIALS_INVALID or SESSION_FAILED.
        message: Internal description (never shown to the caller).
        details: Optional context for debugging.
    """

    @property
    def is_credentials_invalid(self) -> bool:
        """True if the failure is a bad-credentials rejection."""
        return self.code == ErrorCode.CREDENTIALS_INVALID

    @classmethod
    def credentials_invalid(cls) -> "SessionError":
        """Bad or missing password."""
        return cls(
            code=ErrorCode.CREDENTIALS_INVALID,
            message="Email or password is incorrect",
        )

    @classmethod
    def failed(cls, reason: str) -> "SessionError":
        """Sign-in refused for a reason other than credentials."""
        return cls(code=ErrorCode.SESSION_FAILED, message=reason)
