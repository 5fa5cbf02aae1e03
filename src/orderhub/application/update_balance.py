"""Application service: Update Balance use case.

Reports success as a boolean instead of raising: a missing account, a
malformed amount or a balance that would go negative all yield False.
"""

from __future__ import annotations

import logging
from decimal import Decimal

from orderhub.domain.exceptions import ValidationError
from orderhub.domain.model.value_objects import parse_decimal
from orderhub.domain.repository.account_repository import AccountRepository

logger = logging.getLogger(__name__)


class UpdateBalanceHandler:

    def __init__(self, account_repo: AccountRepository) -> None:
        self._account_repo = account_repo

    def handle(self, username: str, delta: str | Decimal) -> bool:
        try:
            amount = parse_decimal(delta)
            account = self._account_repo.adjust_balance(username, amount)
        except ValidationError as exc:
            logger.warning("Balance update for %s rejected: %s", username, exc)
            return False

        if account is None:
            logger.warning("Balance update for unknown account %s", username)
            return False

        logger.info("Balance of %s adjusted by %s to %s", username, amount, account.wallet)
        return True
