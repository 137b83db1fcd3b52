"""Authenticated session handed back after a successful login."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True, slots=True, kw_only=True)
class Session:
    """Session established by the session issuer.

    Attributes:
        account_id: Authenticated account.
        email: Account email at login time.
        access_token: Signed session token for the caller.
        expires_at: When the access token stops being accepted.
    """

    account_id: UUID
    email: str
    access_token: str
    expires_at: datetime
