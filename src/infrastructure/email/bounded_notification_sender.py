"""Timeout wrapper for notification senders.

A sender that hangs would hold a login request open indefinitely. The
wrapper bounds every call; on expiry it raises TimeoutError, which the
login handler reports as UNKNOWN_ERROR. Tokens already issued stay issued.
"""

import asyncio

from src.domain.protocols.notification_protocol import NotificationSenderProtocol


class BoundedNotificationSender:
    """NotificationSenderProtocol adapter delegating with a timeout.

    Args:
        inner: Sender doing the actual delivery.
        timeout_seconds: Upper bound for each call.
    """

    def __init__(
        self, inner: NotificationSenderProtocol, timeout_seconds: float
    ) -> None:
        if timeout_seconds <= 0:
            msg = "timeout_seconds must be positive"
            raise ValueError(msg)
        self._inner = inner
        self._timeout = timeout_seconds

    async def send_verification(self, identifier: str, token: str) -> None:
        async with asyncio.timeout(self._timeout):
            await self._inner.send_verification(identifier, token)

    async def send_two_factor_code(self, identifier: str, token: str) -> None:
        async with asyncio.timeout(self._timeout):
            await self._inner.send_two_factor_code(identifier, token)

    async def send_password_reset(self, identifier: str, token: str) -> None:
        async with asyncio.timeout(self._timeout):
            await self._inner.send_password_reset(identifier, token)
