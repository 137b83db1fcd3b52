"""Authentication request/response schemas.

Pydantic models for API request validation and response serialization.
Kept separate from domain entities - these are HTTP-layer concerns.

Login and reset request fields are plain strings: shape rules (email
format, code digits, token characters) are checked by the command
handlers, so a malformed value yields the same outcome whichever surface
submitted it.

RESTful Endpoints (resource-based):
    POST   /api/v1/sessions                 - Create session (login)
    POST   /api/v1/email-verifications      - Create verification (verify email)
    POST   /api/v1/password-resets          - Create reset (request link)
    PATCH  /api/v1/password-resets/{token}  - Apply reset (set new password)
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from src.domain.enums.login_outcome import LoginOutcome


# =============================================================================
# Session (Login)
# =============================================================================


class SessionCreateRequest(BaseModel):
    """Request schema for session creation (login).

    POST /api/v1/sessions
    Returns: 201 Created, or 202 Accepted when a challenge was sent
    """

    email: str = Field(
        default="",
        description="Account email address",
        examples=["user@example.com"],
    )
    password: str = Field(
        default="",
        description="Account password",
        examples=["SecurePass123!"],
    )
    code: str | None = Field(
        default=None,
        description="Six-digit two-factor code (second step of a 2FA login)",
        examples=["482913"],
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "email": "user@example.com",
                "password": "SecurePass123!",
            }
        }
    )


class SessionCreateResponse(BaseModel):
    """Response schema for session creation (201 Created)."""

    outcome: LoginOutcome = Field(..., description="Login outcome")
    message: str = Field(..., description="Human-readable outcome message")
    access_token: str = Field(..., description="Session access token")
    token_type: str = Field(default="bearer", description="Token type")
    expires_at: datetime = Field(..., description="Access token expiry (UTC)")


class SessionChallengeResponse(BaseModel):
    """Response schema when login needs another step (202 Accepted).

    Sent for confirmation_email_sent and two_factor_required.
    """

    outcome: LoginOutcome = Field(..., description="Login outcome")
    message: str = Field(..., description="Human-readable outcome message")


# =============================================================================
# Email Verification
# =============================================================================


class EmailVerificationCreateRequest(BaseModel):
    """Request schema for email verification.

    POST /api/v1/email-verifications
    Returns: 201 Created
    """

    token: str = Field(
        ...,
        description="Verification token from the emailed link",
        examples=["verify.3f2a9c..."],
    )


class EmailVerificationCreateResponse(BaseModel):
    """Response schema for email verification (201 Created)."""

    message: str = Field(
        default="Email verified!",
        description="Success message",
    )


# =============================================================================
# Password Reset
# =============================================================================


class PasswordResetCreateRequest(BaseModel):
    """Request schema for a password reset link.

    POST /api/v1/password-resets
    Returns: 202 Accepted (always, to prevent account enumeration)
    """

    email: str = Field(
        ...,
        description="Account email address",
        examples=["user@example.com"],
    )


class PasswordResetCreateResponse(BaseModel):
    """Response schema for a password reset request (202 Accepted)."""

    message: str = Field(..., description="Always the same message")


class PasswordResetUpdateRequest(BaseModel):
    """Request schema for applying a password reset.

    PATCH /api/v1/password-resets/{token}
    Returns: 200 OK
    """

    new_password: str = Field(
        ...,
        description="Replacement password",
        examples=["NewSecurePass123!"],
    )


class PasswordResetUpdateResponse(BaseModel):
    """Response schema for an applied password reset (200 OK)."""

    message: str = Field(
        default="Password updated!",
        description="Success message",
    )
