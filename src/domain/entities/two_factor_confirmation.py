"""Marker that an account passed its two-factor challenge."""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True, slots=True, kw_only=True)
class TwoFactorConfirmation:
    """Two-factor confirmation for the current login.

    At most one exists per account: it is reset, then set, after every
    accepted code. The session layer removes it on logout or expiry.

    Attributes:
        id: Record identifier in the token store.
        account_id: Owning account.
    """

    id: UUID
    account_id: UUID
