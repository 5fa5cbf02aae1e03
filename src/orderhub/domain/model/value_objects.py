"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, DecimalException

from orderhub.domain.exceptions import ValidationError

CENTS = Decimal("0.01")
MAX_AMOUNT = Decimal("1000000000000")  # one trillion


@dataclass(frozen=True)
class Money:
    """Non-negative monetary amount with currency, in whole cents.

    Uses Decimal to avoid floating-point rounding errors that would be
    unacceptable in financial calculations.
    """

    amount: Decimal
    currency: str = "USD"

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise ValidationError(
                f"Money amount must be a Decimal, got {type(self.amount).__name__}"
            )
        _check_amount(self.amount)
        if self.amount < Decimal("0"):
            raise ValidationError(
                f"Money amount cannot be negative, got {self.amount}"
            )

    # --- Arithmetic helpers ---------------------------------------------------

    def __add__(self, other: Money) -> Money:
        self._assert_same_currency(other)
        return Money(self.amount + other.amount, self.currency)

    def shifted(self, delta: Decimal) -> Money:
        """Return this amount moved by a signed *delta*.

        Raises ValidationError if the result would be negative.
        """
        _check_amount(delta)
        result = self.amount + delta
        if result < Decimal("0"):
            raise ValidationError(
                f"Balance cannot go below zero ({self} {delta:+})"
            )
        return Money(result, self.currency)

    # --- Display --------------------------------------------------------------

    def __str__(self) -> str:
        return f"${self.amount:.2f}"

    # --- Internal helpers -----------------------------------------------------

    def _assert_same_currency(self, other: Money) -> None:
        if self.currency != other.currency:
            raise ValidationError(
                f"Cannot combine {self.currency} with {other.currency}"
            )

    # --- Factories ------------------------------------------------------------

    @staticmethod
    def zero() -> Money:
        return Money(Decimal("0.00"))

    @staticmethod
    def of(amount: str | float | int | Decimal) -> Money:
        """Convenient factory that coerces to Decimal safely."""
        return Money(parse_decimal(amount))


def parse_decimal(raw: str | float | int | Decimal) -> Decimal:
    """Coerce user input to a Decimal amount, or raise ValidationError."""
    try:
        value = Decimal(str(raw).strip())
    except (DecimalException, ValueError) as exc:
        raise ValidationError(f"Invalid money amount: {raw!r}") from exc
    _check_amount(value, raw)
    return value


def _check_amount(value: Decimal, raw: object = None) -> None:
    """Finite, at most MAX_AMOUNT in size, no fractions of a cent."""
    shown = value if raw is None else raw
    if not value.is_finite():
        raise ValidationError(f"Invalid money amount: {shown!r}")
    if value.copy_abs() > MAX_AMOUNT:
        raise ValidationError(f"Money amount out of range: {shown!r}")
    try:
        exact = value == value.quantize(CENTS)
    except DecimalException as exc:
        raise ValidationError(f"Invalid money amount: {shown!r}") from exc
    if not exact:
        raise ValidationError(
            f"Money amount cannot have fractions of a cent: {shown!r}"
        )
