"""Integration tests for the ConfirmCompoundOrder use case."""

import dataclasses

import pytest

from orderhub.application.cancel_order import CancelOrderHandler
from orderhub.application.confirm_compound_order import ConfirmCompoundOrderHandler
from orderhub.application.confirm_order import ConfirmOrderHandler
from orderhub.application.place_order import PlaceSimpleOrderHandler
from orderhub.application.show_order import ShowOrderHandler
from orderhub.domain.exceptions import (
    AuthError,
    ConflictError,
    NotFoundError,
    ValidationError,
)
from orderhub.domain.model.order import OrderKind, OrderStatus
from tests.fakes import RacingOrderRepository


@pytest.fixture
def place(orders, products, accounts):
    return PlaceSimpleOrderHandler(orders, products, accounts).handle


@pytest.fixture
def handler(orders):
    return ConfirmCompoundOrderHandler(orders)


class TestConfirmCompoundHappyPath:

    def test_creates_confirmed_compound_order(self, place, handler, orders):
        alice_order = place("alice", ["p1", "p2"])
        bob_order = place("bob", ["p3"])

        compound_id = handler.handle({"alice": alice_order.id, "bob": bob_order.id}, "carol")

        compound = orders.get_by_id(compound_id)
        assert compound.kind is OrderKind.COMPOUND
        assert compound.owner == "carol"
        assert compound.status is OrderStatus.CONFIRMED
        assert compound.member_ids == [alice_order.id, bob_order.id]
        assert str(compound.total) == "$55.00"

    def test_members_are_not_modified(self, place, handler, orders):
        alice_order = place("alice", ["p1"])
        handler.handle({"alice": alice_order.id}, "alice")
        assert orders.get_by_id(alice_order.id).status is OrderStatus.PENDING

    def test_members_are_references(self, place, handler, orders):
        alice_order = place("alice", ["p1"])
        compound_id = handler.handle({"alice": alice_order.id}, "alice")
        compound = orders.get_by_id(compound_id)
        assert compound.members[0] is orders.get_by_id(alice_order.id)

    def test_show_lists_members(self, place, handler, orders):
        a = place("alice", ["p1"])
        b = place("bob", ["p2"])
        compound_id = handler.handle({"alice": a.id, "bob": b.id}, "alice")

        dto = ShowOrderHandler(orders).handle(compound_id)
        assert dto.is_compound
        assert dto.member_ids == [a.id, b.id]
        assert dto.products == []
        assert dto.total == "$25.00"

    def test_compound_can_be_cancelled_by_its_owner(self, place, handler, orders):
        a = place("alice", ["p1"])
        compound_id = handler.handle({"alice": a.id}, "carol")
        with pytest.raises(AuthError):
            CancelOrderHandler(orders).handle(compound_id, "alice")
        CancelOrderHandler(orders).handle(compound_id, "carol")
        assert orders.get_by_id(compound_id).status is OrderStatus.CANCELLED


class TestConfirmCompoundFailures:

    def test_missing_identity(self, place, handler):
        a = place("alice", ["p1"])
        with pytest.raises(AuthError, match="Token is missing"):
            handler.handle({"alice": a.id}, None)

    def test_empty_mapping(self, handler):
        with pytest.raises(ValidationError, match="at least one member"):
            handler.handle({}, "alice")

    def test_unknown_member(self, place, handler, orders):
        a = place("alice", ["p1"])
        with pytest.raises(NotFoundError, match="#77"):
            handler.handle({"alice": a.id, "bob": 77}, "alice")
        assert len(orders.all()) == 1

    def test_declared_owner_mismatch(self, place, handler, orders):
        a = place("alice", ["p1"])
        with pytest.raises(AuthError, match="not authorized"):
            handler.handle({"bob": a.id}, "alice")
        assert len(orders.all()) == 1

    def test_confirmed_member_conflicts_and_nothing_is_saved(self, orders, place, handler):
        alice_order = place("alice", ["p1", "p2"])   # $25, Pending
        bob_order = place("bob", ["p3"])             # $30
        ConfirmOrderHandler(orders).handle(bob_order.id, "bob")
        saves_before = orders.saves

        with pytest.raises(ConflictError, match="already confirmed"):
            handler.handle({"alice": alice_order.id, "bob": bob_order.id}, "alice")

        assert orders.saves == saves_before
        assert len(orders.all()) == 2

    def test_cancelled_member_conflicts(self, orders, place, handler):
        a = place("alice", ["p1"])
        CancelOrderHandler(orders).handle(a.id, "alice")
        with pytest.raises(ConflictError, match="cancelled"):
            handler.handle({"alice": a.id}, "alice")

    def test_compound_member_rejected(self, place, handler):
        a = place("alice", ["p1"])
        compound_id = handler.handle({"alice": a.id}, "alice")
        with pytest.raises(ValidationError, match="not a simple order"):
            handler.handle({"alice": compound_id}, "alice")


class TestConfirmCompoundRaces:

    def test_lost_insert_is_a_conflict(self, products, accounts):
        orders = RacingOrderRepository()
        a = PlaceSimpleOrderHandler(orders, products, accounts).handle("alice", ["p1"])
        with pytest.raises(ConflictError, match="modified concurrently"):
            ConfirmCompoundOrderHandler(orders).handle({"alice": a.id}, "alice")
        assert len(orders.all()) == 1

    def test_member_confirmed_after_validation(self, monkeypatch, orders, place, handler):
        a = place("alice", ["p1"])
        stored_get = orders.get_by_id

        def read_then_lose_race(order_id):
            snapshot = dataclasses.replace(stored_get(order_id))
            # Another writer confirms the member right after our read.
            orders.update_status(order_id, OrderStatus.PENDING, OrderStatus.CONFIRMED)
            return snapshot

        monkeypatch.setattr(orders, "get_by_id", read_then_lose_race)
        with pytest.raises(ConflictError, match="modified concurrently"):
            handler.handle({"alice": a.id}, "alice")
        assert len(orders.all()) == 1
