"""Authentication DTOs (Data Transfer Objects).

Validated inputs and result dataclasses for authentication command handlers.

DTOs:
    - LoginCredentials: Validated LoginUser input
    - PasswordResetRequestInput: Validated RequestPasswordReset input
    - PasswordResetConfirmInput: Validated ConfirmPasswordReset input
    - LoginResponse: Non-error result of the login flow
"""

from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, field_validator

from src.domain.entities.session import Session
from src.domain.enums.login_outcome import LoginOutcome
from src.domain.types import Email, LoginPassword, NewPassword, OpaqueToken, TwoFactorCode


class LoginCredentials(BaseModel):
    """Login input after shape validation.

    An empty code counts as no code (the form sends "" before a challenge).
    """

    model_config = ConfigDict(frozen=True)

    email: Email
    password: LoginPassword
    code: TwoFactorCode | None = None

    @field_validator("code", mode="before")
    @classmethod
    def blank_code_is_absent(cls, v: object) -> object:
        """Treat an empty code as absent."""
        if v == "":
            return None
        return v


class PasswordResetRequestInput(BaseModel):
    """Password reset request after shape validation."""

    model_config = ConfigDict(frozen=True)

    email: Email


class PasswordResetConfirmInput(BaseModel):
    """Password reset confirmation after shape validation."""

    model_config = ConfigDict(frozen=True)

    token: OpaqueToken
    new_password: NewPassword


@dataclass(frozen=True, kw_only=True)
class LoginResponse:
    """Non-error login result.

    Attributes:
        outcome: CONFIRMATION_EMAIL_SENT, TWO_FACTOR_REQUIRED or LOGIN_SUCCESSFUL.
        session: Established session (LOGIN_SUCCESSFUL only).
    """

    outcome: LoginOutcome
    session: Session | None = None

    @property
    def message(self) -> str:
        """User-facing message for the outcome."""
        return self.outcome.message
