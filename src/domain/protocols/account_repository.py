"""AccountRepository protocol for account persistence.

Port (interface) for hexagonal architecture.
Infrastructure layer implements this protocol.
"""

from typing import Protocol
from uuid import UUID

from src.domain.entities.account import Account


class AccountRepository(Protocol):
    """Account repository protocol (port).

    Accounts are created by registration, outside this service; the auth
    flows only read them and record email verification or a new password.

    Methods:
        find_by_id: Retrieve account by ID
        find_by_email: Retrieve account by exact email
        update: Persist changes to an existing account
    """

    async def find_by_id(self, account_id: UUID) -> Account | None:
        """Find account by ID.

        Args:
            account_id: Account's unique identifier.

        Returns:
            Account if found, None otherwise.
        """
        ...

    async def find_by_email(self, email: str) -> Account | None:
        """Find account by email address.

        Args:
            email: Email address, compared exactly as stored.

        Returns:
            Account if found, None otherwise.
        """
        ...

    async def update(self, account: Account) -> None:
        """Update existing account.

        Args:
            account: Account entity with changes.

        Raises:
            NoResultFound: If the account does not exist.
        """
        ...
