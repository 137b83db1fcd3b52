"""Account domain entity for credential login.

Pure business logic, no framework dependencies.

An account is created by the registration flow (outside this service).
`email_verified` moves from None to a timestamp exactly once, through the
email verification flow.
"""

from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import UUID


@dataclass(slots=True, kw_only=True)
class Account:
    """Identity record used by the login flow.

    Business Rules:
        - Email is unique and compared exactly as stored (case-sensitive)
        - An account without a password hash cannot use password login
          (e.g. an account that only ever signed in through a federated provider)
        - An unverified account is always steered into email verification
          before any other login step

    Attributes:
        id: Unique account identifier.
        email: Email address as stored.
        password_hash: Bcrypt hash, or None when password login is unavailable.
        email_verified: When the email was verified (None = unverified).
        is_two_factor_enabled: Whether login requires an emailed code.
        name: Display name (optional).

    Example:
        >>> account = Account(
        ...     id=uuid7(),
        ...     email="a@x.com",
        ...     password_hash="$2b$12$...",
        ... )
        >>> account.is_verified
        False
    """

    id: UUID
    email: str
    password_hash: str | None = None
    email_verified: datetime | None = None
    is_two_factor_enabled: bool = False
    name: str | None = None

    @property
    def is_verified(self) -> bool:
        """True once the email address has been verified."""
        return self.email_verified is not None

    @property
    def has_password(self) -> bool:
        """True if the account can log in with a password."""
        return bool(self.password_hash)

    def mark_email_verified(self, email: str, at: datetime | None = None) -> None:
        """Record that `email` has been verified.

        The verified address replaces the stored one so that an email change
        confirmed through a verification link takes effect.

        Args:
            email: Address the verification token was issued for.
            at: Verification time (defaults to now, UTC).
        """
        self.email = email
        self.email_verified = at or datetime.now(UTC)
