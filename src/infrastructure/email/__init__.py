"""Notification sender implementations.

This package contains NotificationSenderProtocol adapters:
- StubNotificationSender: Structured log instead of email (development/testing)
- BoundedNotificationSender: Wraps any sender with a per-call timeout
"""

from src.infrastructure.email.bounded_notification_sender import (
    BoundedNotificationSender,
)
from src.infrastructure.email.stub_notification_sender import StubNotificationSender

__all__ = [
    "BoundedNotificationSender",
    "StubNotificationSender",
]
