"""Domain protocols (ports) package.

This package contains protocol definitions that the domain layer needs.
Infrastructure adapters implement these protocols without inheritance.

IMPORTANT: Re-exports are ONLY for protocols defined in this package.

Usage:
    from src.domain.protocols import TokenRepository, SessionIssuerProtocol
"""

# Service protocols
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.notification_protocol import NotificationSenderProtocol
from src.domain.protocols.password_hashing_protocol import PasswordHashingProtocol
from src.domain.protocols.session_issuer_protocol import SessionIssuerProtocol
from src.domain.protocols.token_generation_protocol import TokenGenerationProtocol

# Repository protocols
from src.domain.protocols.account_repository import AccountRepository
from src.domain.protocols.token_repository import TokenRepository

__all__ = [
    # Service protocols
    "LoggerProtocol",
    "NotificationSenderProtocol",
    "PasswordHashingProtocol",
    "SessionIssuerProtocol",
    "TokenGenerationProtocol",
    # Repository protocols
    "AccountRepository",
    "TokenRepository",
]
