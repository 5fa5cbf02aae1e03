"""Abstract repository for Account aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod
from decimal import Decimal

from orderhub.domain.model.account import Account


class AccountRepository(ABC):

    @abstractmethod
    def get_by_username(self, username: str) -> Account | None:
        """Return the account for *username*, or None."""

    @abstractmethod
    def save(self, account: Account) -> None:
        """Persist a new or updated account."""

    @abstractmethod
    def adjust_balance(self, username: str, delta: Decimal) -> Account | None:
        """Apply a signed balance change as one atomic step.

        Returns the updated account, or None if it does not exist. Raises
        ValidationError (and stores nothing) if the balance would go negative.
        """
