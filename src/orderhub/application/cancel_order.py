"""Application service: Cancel Order use case.

Shares the check order of confirmation (identity, existence, state,
ownership), then routes on the order kind. Cancelling a compound order
cancels only the compound order itself; its member simple orders keep
their own status.
"""

from __future__ import annotations

import logging

from orderhub.application.dto import OrderDTO, to_order_dto
from orderhub.application.identity import require_identity
from orderhub.domain.exceptions import AuthError, ConflictError, NotFoundError
from orderhub.domain.model.order import Order, OrderKind
from orderhub.domain.repository.order_repository import OrderRepository

logger = logging.getLogger(__name__)


class CancelOrderHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, order_id: int, username: str | None) -> OrderDTO:
        username = require_identity(username)

        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise NotFoundError(f"Order #{order_id} not found")

        order.assert_can_cancel()

        if not order.is_owned_by(username):
            logger.warning("%s tried to cancel order #%s owned by %s", username, order_id, order.owner)
            raise AuthError("You are not authorized to cancel this order!")

        if order.kind is OrderKind.COMPOUND:
            self._cancel_compound(order)
        else:
            self._cancel_simple(order)

        return to_order_dto(order)

    def _cancel_simple(self, order: Order) -> None:
        self._transition(order)
        logger.info("Order #%s cancelled by %s", order.id, order.owner)

    def _cancel_compound(self, order: Order) -> None:
        self._transition(order)
        logger.info(
            "Compound order #%s cancelled by %s; members %s left unchanged",
            order.id, order.owner, order.member_ids,
        )

    def _transition(self, order: Order) -> None:
        previous = order.status
        order.cancel()
        if not self._order_repo.update_status(order.id, previous, order.status):  # type: ignore[arg-type]
            raise ConflictError(f"Order #{order.id} was modified concurrently")
