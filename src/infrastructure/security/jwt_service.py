"""JWT token service (adapter).

This service implements the TokenGenerationProtocol using PyJWT with
HMAC-SHA256. Access tokens are what the session issuer hands back after a
successful login.

Architecture:
    - Implements TokenGenerationProtocol (no inheritance required)
    - Structural typing via Protocol
    - Injected via dependency container

Security:
    - HMAC-SHA256 (HS256) algorithm
    - 256-bit secret key minimum
    - Expiration from settings.access_token_expire_minutes
    - Unique JWT ID (jti) for tracking
"""

from datetime import UTC, datetime, timedelta
from typing import Any
from uuid import UUID
from uuid_extensions import uuid7

import jwt
from jwt.exceptions import InvalidTokenError

from src.core.constants import JWT_SECRET_MIN_LENGTH
from src.core.result import Failure, Result, Success


class JWTService:
    """JWT access token generation and validation service.

    Usage:
        from src.core.container import get_token_service

        token_service = get_token_service()
        token, expires_at = token_service.generate_access_token(
            account_id=account.id,
            email=account.email,
        )
        result = token_service.validate_access_token(token)
    """

    def __init__(self, secret_key: str, expiration_minutes: int = 30) -> None:
        """Initialize JWT service.

        Args:
            secret_key: Secret key for HMAC-SHA256 signing.
                MUST be at least 256 bits (32 bytes) for security.
            expiration_minutes: Token expiration in minutes (default: 30).

        Raises:
            ValueError: If secret_key is too short (< 32 bytes).
        """
        if len(secret_key) < JWT_SECRET_MIN_LENGTH:
            msg = "JWT secret key must be at least 32 bytes (256 bits)"
            raise ValueError(msg)

        self._secret_key = secret_key
        self._expiration_minutes = expiration_minutes
        self._algorithm = "HS256"  # HMAC-SHA256

    def generate_access_token(
        self, account_id: UUID, email: str
    ) -> tuple[str, datetime]:
        """Generate JWT access token.

        Args:
            account_id: Account's unique identifier.
            email: Account's email address.

        Returns:
            Tuple of (token, expires_at).

        Example:
            >>> service = JWTService(secret_key="x" * 32)
            >>> token, _ = service.generate_access_token(uuid7(), "a@x.com")
            >>> len(token.split("."))
            3
        """
        now = datetime.now(UTC)
        expires_at = now + timedelta(minutes=self._expiration_minutes)

        payload = {
            "sub": str(account_id),  # Subject (account ID)
            "email": email,
            "iat": int(now.timestamp()),  # Issued at
            "exp": int(expires_at.timestamp()),  # Expires at
            "jti": str(uuid7()),  # JWT ID (unique identifier)
        }

        token: str = jwt.encode(payload, self._secret_key, algorithm=self._algorithm)
        return token, expires_at

    def validate_access_token(self, token: str) -> Result[dict[str, Any], str]:
        """Validate JWT access token and extract payload.

        Args:
            token: JWT access token string to validate.

        Returns:
            Success(payload) if valid, Failure("invalid_token") otherwise
            (bad signature, expired, malformed).
        """
        try:
            payload: dict[str, Any] = jwt.decode(
                token, self._secret_key, algorithms=[self._algorithm]
            )
            return Success(value=payload)
        except InvalidTokenError:
            return Failure(error="invalid_token")
