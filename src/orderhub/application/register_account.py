"""Application service: Register Account use case."""

from __future__ import annotations

import logging

from orderhub.domain.exceptions import ValidationError
from orderhub.domain.model.account import Account
from orderhub.domain.model.value_objects import Money
from orderhub.domain.repository.account_repository import AccountRepository
from orderhub.domain.service.security import PasswordHasher

logger = logging.getLogger(__name__)


class RegisterAccountHandler:

    def __init__(self, account_repo: AccountRepository, hasher: PasswordHasher) -> None:
        self._account_repo = account_repo
        self._hasher = hasher

    def handle(self, username: str, password: str, balance: str = "0") -> Account:
        """Register a new account with an opening wallet balance."""
        if not username or not username.strip():
            raise ValidationError("Username is required")
        if not password:
            raise ValidationError("Password is required")

        username = username.strip()
        if self._account_repo.get_by_username(username) is not None:
            raise ValidationError(f"Account '{username}' already exists")

        account = Account.register(
            username=username,
            password_hash=self._hasher.hash(password),
            opening_balance=Money.of(balance),
        )
        self._account_repo.save(account)

        logger.info("Account %s registered", account.username)
        return account
