"""JSON-file-backed implementation of AccountRepository."""

from __future__ import annotations

from decimal import Decimal
from pathlib import Path

from orderhub.domain.model.account import Account
from orderhub.domain.model.value_objects import Money
from orderhub.domain.repository.account_repository import AccountRepository
from orderhub.infrastructure.persistence.json_store import JsonFile


class JsonAccountRepository(AccountRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path)

    # --- AccountRepository interface ------------------------------------------

    def get_by_username(self, username: str) -> Account | None:
        return self._load().get(username)

    def save(self, account: Account) -> None:
        with self._file.locked():
            accounts = self._load()
            accounts[account.username] = account
            self._persist(accounts)

    def adjust_balance(self, username: str, delta: Decimal) -> Account | None:
        with self._file.locked():
            accounts = self._load()
            account = accounts.get(username)
            if account is None:
                return None
            account.adjust_balance(delta)
            self._persist(accounts)
            return account

    # --- Serialization helpers ------------------------------------------------

    def _load(self) -> dict[str, Account]:
        raw = self._file.read()
        return {
            item["username"]: Account(
                username=item["username"],
                password_hash=item["password_hash"],
                wallet=Money(Decimal(item["wallet"]), item.get("currency", "USD")),
            )
            for item in raw
        }

    def _persist(self, accounts: dict[str, Account]) -> None:
        raw = [
            {
                "username": a.username,
                "password_hash": a.password_hash,
                "wallet": str(a.wallet.amount),
                "currency": a.wallet.currency,
            }
            for a in accounts.values()
        ]
        self._file.write(raw)
