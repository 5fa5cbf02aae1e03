"""Unit tests for domain value objects."""

from decimal import Decimal

import pytest

from orderhub.domain.exceptions import ValidationError
from orderhub.domain.model.value_objects import Money, parse_decimal


class TestMoney:

    def test_creation(self):
        m = Money(Decimal("10.50"))
        assert m.amount == Decimal("10.50")
        assert m.currency == "USD"

    def test_of_factory_from_string(self):
        assert Money.of("25.99").amount == Decimal("25.99")

    def test_of_factory_from_int(self):
        assert Money.of(10).amount == Decimal("10")

    def test_of_rejects_garbage(self):
        with pytest.raises(ValidationError, match="Invalid money amount"):
            Money.of("ten")

    def test_of_rejects_infinity(self):
        with pytest.raises(ValidationError, match="Invalid money amount"):
            Money.of("Infinity")

    def test_negative_amount_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            Money(Decimal("-1"))

    def test_addition(self):
        assert Money.of("10") + Money.of("5.50") == Money.of("15.50")

    def test_currency_mismatch_rejected(self):
        with pytest.raises(ValidationError, match="Cannot combine"):
            Money(Decimal("10"), "USD") + Money(Decimal("5"), "EUR")

    def test_str_formatting(self):
        assert str(Money.of("15")) == "$15.00"
        assert str(Money.of("9.5")) == "$9.50"

    def test_zero(self):
        assert Money.zero() == Money.of("0.00")

    def test_fractions_of_a_cent_rejected(self):
        with pytest.raises(ValidationError, match="fractions of a cent"):
            Money.of("0.005")

    def test_trailing_zeros_are_whole_cents(self):
        assert str(Money.of("1.500")) == "$1.50"

    def test_huge_amount_rejected(self):
        with pytest.raises(ValidationError, match="out of range"):
            Money.of("1E+999999999")

    def test_money_has_no_ordering_or_subtraction(self):
        with pytest.raises(TypeError):
            Money.of("1") < Money.of("2")
        with pytest.raises(TypeError):
            Money.of("2") - Money.of("1")


class TestShifted:

    def test_positive_delta(self):
        assert Money.of("10").shifted(Decimal("2.5")) == Money.of("12.5")

    def test_negative_delta(self):
        assert Money.of("10").shifted(Decimal("-10")) == Money.of("0")

    def test_below_zero_rejected(self):
        with pytest.raises(ValidationError, match="below zero"):
            Money.of("10").shifted(Decimal("-10.01"))

    def test_huge_delta_rejected(self):
        with pytest.raises(ValidationError, match="out of range"):
            Money.of("10").shifted(Decimal("1E+999999999"))


class TestParseDecimal:

    def test_strips_whitespace(self):
        assert parse_decimal(" -12.50 ") == Decimal("-12.50")

    def test_rejects_nan(self):
        with pytest.raises(ValidationError):
            parse_decimal("NaN")
