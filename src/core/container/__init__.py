"""Container module - Centralized dependency injection.

This module re-exports all factory functions from submodules:

    from src.core.container import get_logger, get_login_user_handler, ...

The container is organized into modules:
- infrastructure: Core services (logging, hashing, JWT, notifications, db)
- repositories: Account and token store factories (memory or database)
- auth_handlers: Authentication handler factories
"""

# Infrastructure services
from src.core.container.infrastructure import (
    get_database,
    get_db_session,
    get_identifier_locks,
    get_logger,
    get_notification_sender,
    get_password_service,
    get_token_service,
)

# Repositories
from src.core.container.repositories import (
    get_account_repository,
    get_memory_account_repository,
    get_memory_token_repository,
    get_store_session,
    get_token_repository,
)

# Auth handlers
from src.core.container.auth_handlers import (
    get_confirm_password_reset_handler,
    get_login_user_handler,
    get_request_password_reset_handler,
    get_session_issuer,
    get_token_generator,
    get_verify_email_handler,
)

__all__ = [
    # Infrastructure
    "get_database",
    "get_db_session",
    "get_identifier_locks",
    "get_logger",
    "get_notification_sender",
    "get_password_service",
    "get_token_service",
    # Repositories
    "get_account_repository",
    "get_memory_account_repository",
    "get_memory_token_repository",
    "get_store_session",
    "get_token_repository",
    # Auth handlers
    "get_confirm_password_reset_handler",
    "get_login_user_handler",
    "get_request_password_reset_handler",
    "get_session_issuer",
    "get_token_generator",
    "get_verify_email_handler",
]
