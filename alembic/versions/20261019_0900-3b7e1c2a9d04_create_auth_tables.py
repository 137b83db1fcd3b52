"""create_auth_tables

Revision ID: 3b7e1c2a9d04
Revises:
Create Date: 2026-10-19 09:00:00.000000+00:00

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "3b7e1c2a9d04"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create accounts, auth_tokens and two_factor_confirmations tables."""
    op.create_table(
        "accounts",
        # Primary key and timestamps from BaseMutableModel
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column(
            "email",
            sa.String(length=255),
            nullable=False,
            comment="Email address (compared exactly as stored)",
        ),
        sa.Column(
            "password_hash",
            sa.String(length=255),
            nullable=True,
            comment="Bcrypt password hash (NULL when password login is unavailable)",
        ),
        sa.Column(
            "email_verified",
            sa.DateTime(timezone=True),
            nullable=True,
            comment="Timestamp of email verification (NULL = unverified)",
        ),
        sa.Column(
            "is_two_factor_enabled",
            sa.Boolean(),
            server_default="false",
            nullable=False,
            comment="Whether login requires an emailed two-factor code",
        ),
        sa.Column(
            "name",
            sa.String(length=255),
            nullable=True,
            comment="Display name",
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_accounts_email"), "accounts", ["email"], unique=True)

    op.create_table(
        "auth_tokens",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column(
            "kind",
            sa.Enum(
                "verification",
                "two_factor",
                "password_reset",
                name="auth_token_kind",
            ),
            nullable=False,
            comment="Token kind",
        ),
        sa.Column(
            "identifier",
            sa.String(length=255),
            nullable=False,
            comment="Email address the token was issued for",
        ),
        sa.Column(
            "token",
            sa.String(length=128),
            nullable=False,
            comment="Token value (six-digit code or prefixed hex string)",
        ),
        sa.Column(
            "expires_at",
            sa.DateTime(timezone=True),
            nullable=False,
            comment="Timestamp when token expires",
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint(
            "kind", "identifier", name="uq_auth_tokens_kind_identifier"
        ),
    )
    op.create_index(
        "idx_auth_tokens_kind_token", "auth_tokens", ["kind", "token"], unique=False
    )
    op.create_index(
        "idx_auth_tokens_expires_at", "auth_tokens", ["expires_at"], unique=False
    )

    op.create_table(
        "two_factor_confirmations",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column(
            "account_id",
            sa.Uuid(),
            nullable=False,
            comment="Account that passed its two-factor challenge",
        ),
        sa.ForeignKeyConstraint(["account_id"], ["accounts.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        op.f("ix_two_factor_confirmations_account_id"),
        "two_factor_confirmations",
        ["account_id"],
        unique=True,
    )


def downgrade() -> None:
    """Drop auth tables."""
    op.drop_index(
        op.f("ix_two_factor_confirmations_account_id"),
        table_name="two_factor_confirmations",
    )
    op.drop_table("two_factor_confirmations")
    op.drop_index("idx_auth_tokens_expires_at", table_name="auth_tokens")
    op.drop_index("idx_auth_tokens_kind_token", table_name="auth_tokens")
    op.drop_table("auth_tokens")
    sa.Enum(name="auth_token_kind").drop(op.get_bind(), checkfirst=True)
    op.drop_index(op.f("ix_accounts_email"), table_name="accounts")
    op.drop_table("accounts")
