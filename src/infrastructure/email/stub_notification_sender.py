"""Stub notification sender for verification links and codes.

Logs when an email would be sent instead of sending it. Token values only
appear in the log when `expose_tokens` is set (development), so a developer
can follow the link or read the code from the console.

Email Templates:
    - verification_email: "Confirm your email" with
      {verification_url_base}/new-verification?token={token}
    - two_factor_email: "2FA Code" with the six-digit code
    - password_reset_email: "Reset your password" with
      {verification_url_base}/new-password?token={token}
"""

from urllib.parse import urlencode

from src.domain.protocols.logger_protocol import LoggerProtocol


class StubNotificationSender:
    """NotificationSenderProtocol adapter that logs instead of emailing.

    Attributes:
        _logger: Logger protocol implementation (from container).
        _url_base: Base URL for links (settings.verification_url_base).
        _expose_tokens: Include links and codes in the log record.

    Example:
        >>> sender = StubNotificationSender(
        ...     logger=get_logger(),
        ...     url_base="http://localhost:3000",
        ...     expose_tokens=True,
        ... )
        >>> await sender.send_two_factor_code("a@x.com", "482913")
        >>> # Log output: {"event": "email_would_be_sent", "template": "two_factor_email", ...}
    """

    def __init__(
        self,
        logger: LoggerProtocol,
        url_base: str,
        expose_tokens: bool = False,
    ) -> None:
        self._logger = logger.bind(adapter="stub_notification_sender")
        self._url_base = url_base.rstrip("/")
        self._expose_tokens = expose_tokens

    async def send_verification(self, identifier: str, token: str) -> None:
        self._emit(
            template="verification_email",
            recipient=identifier,
            subject="Confirm your email",
            link=self.build_link("new-verification", token),
        )

    async def send_two_factor_code(self, identifier: str, token: str) -> None:
        self._emit(
            template="two_factor_email",
            recipient=identifier,
            subject="2FA Code",
            code=token,
        )

    async def send_password_reset(self, identifier: str, token: str) -> None:
        self._emit(
            template="password_reset_email",
            recipient=identifier,
            subject="Reset your password",
            link=self.build_link("new-password", token),
        )

    def build_link(self, path: str, token: str) -> str:
        """Link a recipient follows to redeem `token`.

        Example:
            >>> sender.build_link("new-verification", "verify.ab12")
            'http://localhost:3000/new-verification?token=verify.ab12'
        """
        return f"{self._url_base}/{path}?{urlencode({'token': token})}"

    def _emit(
        self, *, template: str, recipient: str, subject: str, **secret: str
    ) -> None:
        context = secret if self._expose_tokens else {}
        self._logger.info(
            "email_would_be_sent",
            template=template,
            recipient=recipient,
            subject=subject,
            **context,
        )
