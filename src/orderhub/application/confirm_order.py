"""Application service: Confirm Order use case.

The checks run in a fixed order: identity, existence, state, ownership.
A non-owner confirming an already-confirmed order is therefore told the
order is already confirmed rather than that they are not authorized.
"""

from __future__ import annotations

import logging

from orderhub.application.dto import OrderDTO, to_order_dto
from orderhub.application.identity import require_identity
from orderhub.domain.exceptions import AuthError, ConflictError, NotFoundError
from orderhub.domain.repository.order_repository import OrderRepository

logger = logging.getLogger(__name__)


class ConfirmOrderHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, order_id: int, username: str | None) -> OrderDTO:
        username = require_identity(username)

        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise NotFoundError(f"Order #{order_id} not found")

        order.assert_can_confirm()

        if not order.is_owned_by(username):
            logger.warning("%s tried to confirm order #%s owned by %s", username, order_id, order.owner)
            raise AuthError("You are not authorized to confirm this order!")

        previous = order.status
        order.confirm()
        if not self._order_repo.update_status(order_id, previous, order.status):
            raise ConflictError(f"Order #{order_id} was modified concurrently")

        logger.info("Order #%s confirmed by %s", order_id, username)
        return to_order_dto(order)
