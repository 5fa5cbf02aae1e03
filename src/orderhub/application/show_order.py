"""Application service: Show Order use case (query)."""

from __future__ import annotations

from orderhub.application.dto import OrderDTO, to_order_dto
from orderhub.domain.exceptions import NotFoundError
from orderhub.domain.repository.order_repository import OrderRepository


class ShowOrderHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, order_id: int) -> OrderDTO:
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise NotFoundError(f"Order #{order_id} not found")
        return to_order_dto(order)
