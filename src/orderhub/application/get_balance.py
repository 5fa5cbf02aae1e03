"""Application service: Get Balance use case (query).

The account is always the one named by the token, never one chosen by
the caller.
"""

from __future__ import annotations

from orderhub.application.identity import authenticate
from orderhub.domain.exceptions import NotFoundError
from orderhub.domain.model.value_objects import Money
from orderhub.domain.repository.account_repository import AccountRepository
from orderhub.domain.service.security import TokenService


class GetBalanceHandler:

    def __init__(self, account_repo: AccountRepository, tokens: TokenService) -> None:
        self._account_repo = account_repo
        self._tokens = tokens

    def handle(self, token: str | None) -> Money:
        username = authenticate(self._tokens, token)
        account = self._account_repo.get_by_username(username)
        if account is None:
            raise NotFoundError(f"Account '{username}' not found")
        return account.wallet
