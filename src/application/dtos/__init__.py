"""Data Transfer Objects (DTOs) for application layer.

DTOs are validated inputs and result dataclasses used by command handlers.

Usage:
    from src.application.dtos import LoginCredentials, LoginResponse

Note:
    DTOs are NOT the same as API schemas (Pydantic models in
    src/schemas/), which describe the HTTP contract.
"""

from src.application.dtos.auth_dtos import (
    LoginCredentials,
    LoginResponse,
    PasswordResetConfirmInput,
    PasswordResetRequestInput,
)

__all__ = [
    "LoginCredentials",
    "LoginResponse",
    "PasswordResetConfirmInput",
    "PasswordResetRequestInput",
]
