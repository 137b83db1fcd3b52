"""Session establishment adapters (SessionIssuerProtocol)."""

from src.infrastructure.session.credentials_session_issuer import (
    CredentialsSessionIssuer,
)

__all__ = ["CredentialsSessionIssuer"]
