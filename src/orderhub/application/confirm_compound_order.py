"""Application service: Confirm Compound Order use case.

Aggregates existing simple orders, each declared under its owner's
username, into one compound order owned by the requester, and confirms
it in the same step. Every member is validated before anything is
written; a single failing member means no compound order is stored.
"""

from __future__ import annotations

import logging

from orderhub.application.identity import require_identity
from orderhub.domain.exceptions import (
    AuthError,
    ConflictError,
    NotFoundError,
    ValidationError,
)
from orderhub.domain.model.order import Order, OrderKind
from orderhub.domain.repository.order_repository import OrderRepository

logger = logging.getLogger(__name__)


class ConfirmCompoundOrderHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, members_by_owner: dict[str, int], username: str | None) -> int:
        """Create and confirm a compound order; return its ID.

        *members_by_owner* maps the declared owner of each slot to the ID
        of a simple order that owner placed.
        """
        username = require_identity(username)
        if not members_by_owner:
            raise ValidationError("A compound order needs at least one member order")

        members = [
            self._load_member(owner, order_id)
            for owner, order_id in members_by_owner.items()
        ]

        compound = Order.compound(owner=username, members=members)
        compound.confirm()
        if not self._order_repo.insert_compound(compound):
            raise ConflictError(
                "A member order was modified concurrently; compound order not created"
            )

        logger.info(
            "Compound order #%s confirmed by %s over %s (total %s)",
            compound.id, username, compound.member_ids, compound.total,
        )
        return compound.id  # type: ignore[return-value]

    def _load_member(self, declared_owner: str, order_id: int) -> Order:
        member = self._order_repo.get_by_id(order_id)
        if member is None:
            raise NotFoundError(f"Order #{order_id} not found")
        if member.kind is not OrderKind.SIMPLE:
            raise ValidationError(f"Order #{order_id} is not a simple order")
        if not member.is_owned_by(declared_owner):
            raise AuthError("You are not authorized to confirm this order!")
        member.assert_can_confirm()
        return member
