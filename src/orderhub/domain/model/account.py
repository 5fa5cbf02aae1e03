"""Account aggregate: a user's identity and wallet."""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal

from orderhub.domain.exceptions import ValidationError
from orderhub.domain.model.value_objects import Money


@dataclass
class Account:
    """A registered user.

    ``username`` is the identity carried by bearer tokens and the key every
    order's ownership is checked against. The wallet never goes negative.
    """

    username: str
    password_hash: str
    wallet: Money = field(default_factory=Money.zero)

    @staticmethod
    def register(username: str, password_hash: str, opening_balance: Money) -> Account:
        if not username or not username.strip():
            raise ValidationError("Username is required")
        return Account(
            username=username.strip(),
            password_hash=password_hash,
            wallet=opening_balance,
        )

    def adjust_balance(self, delta: Decimal) -> None:
        """Move the wallet by a signed *delta*; rejects a negative result."""
        self.wallet = self.wallet.shifted(delta)
