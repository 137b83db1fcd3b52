"""Bcrypt password hashing service (adapter).

This service implements the PasswordHashingProtocol using bcrypt. It is the
credential verifier behind the session issuer and hashes new passwords set
through the password reset flow.

Architecture:
    - Implements PasswordHashingProtocol (no inheritance required)
    - Structural typing via Protocol
    - Injected via dependency container

Security:
    - Bcrypt with configurable cost factor (settings.bcrypt_rounds, default 12)
    - Adaptive algorithm (can increase cost over time)
    - Constant-time verification

Performance:
    - Cost factor 12 = ~250ms per hash or verify
    - Test suites run with a low cost factor (4) to stay fast
"""

import bcrypt

# bcrypt only hashes the first 72 bytes of a password
BCRYPT_MAX_PASSWORD_BYTES = 72


class BcryptPasswordService:
    """Bcrypt password hashing service.

    Usage:
        # Via dependency injection
        from src.core.container import get_password_service
        from src.domain.protocols import PasswordHashingProtocol

        password_service: PasswordHashingProtocol = get_password_service()

        # Hash password
        password_hash = password_service.hash_password("p1")

        # Verify password
        is_valid = password_service.verify_password("p1", password_hash)
    """

    def __init__(self, cost_factor: int = 12) -> None:
        """Initialize bcrypt password service.

        Args:
            cost_factor: Bcrypt cost factor (default: 12).
                Cost factor is logarithmic: each +1 doubles computation time.

        Raises:
            ValueError: If cost factor is outside bcrypt's 4..31 range.
        """
        if cost_factor < 4:
            msg = "Cost factor must be at least 4"
            raise ValueError(msg)
        if cost_factor > 31:
            msg = "Cost factor must be at most 31"
            raise ValueError(msg)

        self._cost_factor = cost_factor

    def hash_password(self, password: str) -> str:
        """Hash a plaintext password using bcrypt.

        Args:
            password: Plaintext password to hash.

        Returns:
            Hashed password string (bcrypt format: $2b$<cost>$...).
            Always 60 characters long.

        Example:
            >>> service = BcryptPasswordService(cost_factor=4)
            >>> service.hash_password("p1") != service.hash_password("p1")
            True
        """
        salt = bcrypt.gensalt(rounds=self._cost_factor)
        password_hash = bcrypt.hashpw(_encode(password), salt)
        return password_hash.decode("utf-8")

    def verify_password(self, password: str, password_hash: str) -> bool:
        """Verify a plaintext password against a bcrypt hash.

        Args:
            password: Plaintext password to verify.
            password_hash: Hashed password from the account store.

        Returns:
            True if password matches hash, False otherwise (including a
            malformed hash).
        """
        try:
            return bcrypt.checkpw(_encode(password), password_hash.encode("utf-8"))
        except (ValueError, AttributeError):
            # Invalid hash format or encoding error
            return False


def _encode(password: str) -> bytes:
    # bcrypt >= 4.1 rejects inputs longer than 72 bytes instead of truncating
    return password.encode("utf-8")[:BCRYPT_MAX_PASSWORD_BYTES]
