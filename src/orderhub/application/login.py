"""Application service: Login use case, exchanging credentials for a token."""

from __future__ import annotations

import logging

from orderhub.domain.exceptions import AuthError
from orderhub.domain.repository.account_repository import AccountRepository
from orderhub.domain.service.security import PasswordHasher, TokenService

logger = logging.getLogger(__name__)


class LoginHandler:

    def __init__(
        self,
        account_repo: AccountRepository,
        hasher: PasswordHasher,
        tokens: TokenService,
    ) -> None:
        self._account_repo = account_repo
        self._hasher = hasher
        self._tokens = tokens

    def handle(self, username: str, password: str) -> str:
        account = self._account_repo.get_by_username(username)
        # Unknown user and wrong password are indistinguishable to the caller.
        if account is None or not self._hasher.verify(account.password_hash, password):
            logger.warning("Failed login for %s", username)
            raise AuthError("Invalid credentials")
        return self._tokens.issue(account.username)
