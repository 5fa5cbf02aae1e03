"""Integration tests for the account use cases."""

from decimal import Decimal

import pytest

from orderhub.application.get_balance import GetBalanceHandler
from orderhub.application.login import LoginHandler
from orderhub.application.register_account import RegisterAccountHandler
from orderhub.application.update_balance import UpdateBalanceHandler
from orderhub.domain.exceptions import AuthError, ValidationError
from orderhub.domain.model.value_objects import Money
from tests.fakes import (
    FakeAccountRepository,
    FakePasswordHasher,
    FakeTokenService,
    make_account,
)


class TestRegisterAccount:

    def test_registers_with_hashed_password(self):
        repo = FakeAccountRepository()
        account = RegisterAccountHandler(repo, FakePasswordHasher()).handle(
            "alice", "s3cret", "40.00"
        )
        assert account.username == "alice"
        assert account.password_hash == "hashed:s3cret"
        assert repo.get_by_username("alice").wallet == Money.of("40.00")

    def test_default_balance_is_zero(self):
        repo = FakeAccountRepository()
        RegisterAccountHandler(repo, FakePasswordHasher()).handle("alice", "pw")
        assert repo.get_by_username("alice").wallet == Money.zero()

    def test_duplicate_username_rejected(self):
        repo = FakeAccountRepository([make_account("alice")])
        with pytest.raises(ValidationError, match="already exists"):
            RegisterAccountHandler(repo, FakePasswordHasher()).handle("alice", "pw")

    @pytest.mark.parametrize("username,password", [("", "pw"), ("  ", "pw"), ("alice", "")])
    def test_blank_fields_rejected(self, username, password):
        with pytest.raises(ValidationError, match="required"):
            RegisterAccountHandler(FakeAccountRepository(), FakePasswordHasher()).handle(
                username, password
            )

    def test_negative_opening_balance_rejected(self):
        with pytest.raises(ValidationError, match="negative"):
            RegisterAccountHandler(FakeAccountRepository(), FakePasswordHasher()).handle(
                "alice", "pw", "-5"
            )


class TestLogin:

    def _handler(self):
        repo = FakeAccountRepository([make_account("alice")])
        return LoginHandler(repo, FakePasswordHasher(), FakeTokenService())

    def test_valid_credentials_return_token(self):
        assert self._handler().handle("alice", "alice-pw") == "token-alice"

    def test_wrong_password(self):
        with pytest.raises(AuthError, match="Invalid credentials"):
            self._handler().handle("alice", "nope")

    def test_unknown_user(self):
        with pytest.raises(AuthError, match="Invalid credentials"):
            self._handler().handle("mallory", "alice-pw")


class TestUpdateBalance:

    def test_credit(self):
        repo = FakeAccountRepository([make_account("alice", "10.00")])
        assert UpdateBalanceHandler(repo).handle("alice", "5.50") is True
        assert repo.get_by_username("alice").wallet == Money.of("15.50")

    def test_debit_to_zero(self):
        repo = FakeAccountRepository([make_account("alice", "10.00")])
        assert UpdateBalanceHandler(repo).handle("alice", Decimal("-10")) is True
        assert repo.get_by_username("alice").wallet == Money.zero()

    def test_overdraw_returns_false_and_keeps_balance(self):
        repo = FakeAccountRepository([make_account("alice", "10.00")])
        assert UpdateBalanceHandler(repo).handle("alice", "-10.01") is False
        assert repo.get_by_username("alice").wallet == Money.of("10.00")

    def test_unknown_account_returns_false(self):
        assert UpdateBalanceHandler(FakeAccountRepository()).handle("ghost", "1") is False

    def test_malformed_amount_returns_false(self):
        repo = FakeAccountRepository([make_account("alice")])
        assert UpdateBalanceHandler(repo).handle("alice", "lots") is False

    @pytest.mark.parametrize("amount", ["1E+999999999", "-1E+999999999", "0.001"])
    def test_unrepresentable_amount_returns_false(self, amount):
        repo = FakeAccountRepository([make_account("alice", "10.00")])
        assert UpdateBalanceHandler(repo).handle("alice", amount) is False
        assert repo.get_by_username("alice").wallet == Money.of("10.00")


class TestGetBalance:

    def _handler(self):
        repo = FakeAccountRepository([
            make_account("alice", "42.00"),
            make_account("bob", "7.00"),
        ])
        return GetBalanceHandler(repo, FakeTokenService())

    def test_returns_token_owners_balance(self):
        assert self._handler().handle("token-alice") == Money.of("42.00")
        assert self._handler().handle("token-bob") == Money.of("7.00")

    def test_accepts_authorization_header_value(self):
        assert self._handler().handle("Bearer token-alice") == Money.of("42.00")

    def test_missing_token(self):
        with pytest.raises(AuthError, match="Token is missing"):
            self._handler().handle(None)

    def test_invalid_token(self):
        with pytest.raises(AuthError):
            self._handler().handle("garbage")
