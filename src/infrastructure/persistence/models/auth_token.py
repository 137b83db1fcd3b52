"""Auth token database model.

One table holds all three token kinds. The unique (kind, identifier)
constraint backs the one-live-token-per-key rule at the database level.

Security:
    - token: Six-digit code or prefixed 32-byte hex string
    - expires_at: Checked by the application (rows are not used after expiry)
"""

from datetime import datetime

from sqlalchemy import DateTime, Enum, Index, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from src.domain.enums.token_kind import TokenKind
from src.infrastructure.persistence.base import BaseModel


class AuthTokenModel(BaseModel):
    """Verification, two-factor and password reset tokens.

    Token Lifecycle:
        1. Issued by replacement (previous row for the key deleted first)
        2. Sent to the identifier's email address
        3. Deleted when accepted (two-factor, verification, reset)

    Fields:
        id: UUID primary key (from BaseModel)
        created_at: Timestamp when token created (from BaseModel)
        kind: Token kind (verification, two_factor, password_reset)
        identifier: Email address the token was issued for
        token: Token value (indexed for link lookup)
        expires_at: Expiry timestamp

    Indexes:
        - uq_auth_tokens_kind_identifier: (kind, identifier) unique
        - idx_auth_tokens_kind_token: (kind, token) for link lookup
        - idx_auth_tokens_expires_at: (expires_at) for cleanup

    Note:
        Inherits from BaseModel (NOT BaseMutableModel); rows are never
        updated, only replaced.
    """

    __tablename__ = "auth_tokens"

    kind: Mapped[TokenKind] = mapped_column(
        Enum(
            TokenKind,
            name="auth_token_kind",
            values_callable=lambda kinds: [k.value for k in kinds],
        ),
        nullable=False,
        comment="Token kind",
    )

    identifier: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Email address the token was issued for",
    )

    token: Mapped[str] = mapped_column(
        String(128),
        nullable=False,
        comment="Token value (six-digit code or prefixed hex string)",
    )

    expires_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        comment="Timestamp when token expires",
    )

    __table_args__ = (
        UniqueConstraint("kind", "identifier", name="uq_auth_tokens_kind_identifier"),
        Index("idx_auth_tokens_kind_token", "kind", "token"),
        Index("idx_auth_tokens_expires_at", "expires_at"),
    )

    def __repr__(self) -> str:
        return (
            f"<AuthTokenModel("
            f"id={self.id}, "
            f"kind={self.kind}, "
            f"identifier={self.identifier!r}, "
            f"expires_at={self.expires_at}"
            f")>"
        )
