"""Two-factor confirmation database model."""

from uuid import UUID

from sqlalchemy import ForeignKey
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.persistence.base import BaseModel


class TwoFactorConfirmationModel(BaseModel):
    """Accepted two-factor challenge, at most one per account.

    Fields:
        id: UUID primary key (from BaseModel)
        created_at: Timestamp when the code was accepted (from BaseModel)
        account_id: Foreign key to accounts (unique, cascade delete)
    """

    __tablename__ = "two_factor_confirmations"

    account_id: Mapped[UUID] = mapped_column(
        ForeignKey("accounts.id", ondelete="CASCADE"),
        nullable=False,
        unique=True,
        index=True,
        comment="Account that passed its two-factor challenge",
    )
