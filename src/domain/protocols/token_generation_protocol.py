"""Token generation protocol for session access tokens.

Architecture:
    - Domain defines protocol (port)
    - Infrastructure implements adapter (JWTService)
"""

from datetime import datetime
from typing import Protocol
from uuid import UUID


class TokenGenerationProtocol(Protocol):
    """Signed access token generation interface.

    Implementations:
        - JWTService: HMAC-SHA256 signed JWT
    """

    def generate_access_token(
        self, account_id: UUID, email: str
    ) -> tuple[str, datetime]:
        """Generate an access token for an authenticated account.

        Args:
            account_id: Account's unique identifier (token subject).
            email: Account email claim.

        Returns:
            Tuple of (token, expires_at).
        """
        ...
