"""InMemoryAccountRepository - dict-backed account store.

Accounts are created by registration elsewhere; `add` exists so that
development seeding and tests can put accounts in place.
"""

from dataclasses import replace
from uuid import UUID

from sqlalchemy.exc import NoResultFound

from src.domain.entities.account import Account


class InMemoryAccountRepository:
    """Account store keyed by id, with exact-match email lookup.

    Stored entities are copied on the way in and out so that callers
    mutating an Account do not change the store until `update`.
    """

    def __init__(self, accounts: list[Account] | None = None) -> None:
        self._accounts: dict[UUID, Account] = {}
        for account in accounts or []:
            self.add(account)

    def add(self, account: Account) -> None:
        """Insert or overwrite an account."""
        self._accounts[account.id] = replace(account)

    async def find_by_id(self, account_id: UUID) -> Account | None:
        account = self._accounts.get(account_id)
        return replace(account) if account else None

    async def find_by_email(self, email: str) -> Account | None:
        for account in self._accounts.values():
            if account.email == email:
                return replace(account)
        return None

    async def update(self, account: Account) -> None:
        if account.id not in self._accounts:
            raise NoResultFound(f"Account {account.id} not found")
        self._accounts[account.id] = replace(account)
