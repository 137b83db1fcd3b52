"""Commands - Write operations that change state.

Commands represent user intent to perform an action. They are immutable
dataclasses with imperative names (LoginUser, VerifyEmail).

Each command has a corresponding handler that contains the business logic
to execute the command.
"""

from src.application.commands.auth_commands import (
    ConfirmPasswordReset,
    LoginUser,
    RequestPasswordReset,
    VerifyEmail,
)

__all__ = [
    "ConfirmPasswordReset",
    "LoginUser",
    "RequestPasswordReset",
    "VerifyEmail",
]
