"""NotificationSenderProtocol - outbound delivery of tokens.

Following hexagonal architecture:
- Domain defines what it needs (protocol/port)
- Infrastructure provides implementation (adapter)

Delivery is fire-and-forget for the caller, but a sender must raise on
failure instead of hanging. Callers bound each call with a timeout.
"""

from typing import Protocol


class NotificationSenderProtocol(Protocol):
    """Protocol for delivering verification links and codes.

    Implementations:
        - StubNotificationSender: src/infrastructure/email/ (dev/test)
    """

    async def send_verification(self, identifier: str, token: str) -> None:
        """Send an email verification link.

        Args:
            identifier: Destination email address.
            token: Verification token to embed in the link.
        """
        ...

    async def send_two_factor_code(self, identifier: str, token: str) -> None:
        """Send a two-factor login code.

        Args:
            identifier: Destination email address.
            token: Six-digit code.
        """
        ...

    async def send_password_reset(self, identifier: str, token: str) -> None:
        """Send a password reset link.

        Args:
            identifier: Destination email address.
            token: Password reset token to embed in the link.
        """
        ...
