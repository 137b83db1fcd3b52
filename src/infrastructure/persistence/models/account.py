"""Account database model.

Registration writes these rows; the auth flows read them and set
`email_verified` or a new `password_hash`.
"""

from datetime import datetime

from sqlalchemy import Boolean, DateTime, String
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.persistence.base import BaseMutableModel


class AccountModel(BaseMutableModel):
    """Account model for credential login.

    Fields:
        id: UUID primary key (from BaseModel)
        created_at: Timestamp when created (from BaseModel)
        updated_at: Timestamp when last updated (from TimestampMixin)
        email: Email address (unique, case-sensitive, indexed)
        password_hash: Bcrypt hash (NULL for federated-only accounts)
        email_verified: When the email was verified (NULL = unverified)
        is_two_factor_enabled: Login requires an emailed code
        name: Display name

    Indexes:
        - ix_accounts_email: (email) unique, for login lookup
    """

    __tablename__ = "accounts"

    email: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        unique=True,
        index=True,
        comment="Email address (compared exactly as stored)",
    )

    password_hash: Mapped[str | None] = mapped_column(
        String(255),
        nullable=True,
        comment="Bcrypt password hash (NULL when password login is unavailable)",
    )

    email_verified: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
        default=None,
        comment="Timestamp of email verification (NULL = unverified)",
    )

    is_two_factor_enabled: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=False,
        server_default="false",
        comment="Whether login requires an emailed two-factor code",
    )

    name: Mapped[str | None] = mapped_column(
        String(255),
        nullable=True,
        comment="Display name",
    )

    def __repr__(self) -> str:
        return (
            f"<AccountModel("
            f"id={self.id}, "
            f"email={self.email!r}, "
            f"verified={self.email_verified is not None}"
            f")>"
        )
