"""Application service: Place Simple Order use case.

Coordinates the account lookup, the product catalog and Order creation.
"""

from __future__ import annotations

import logging

from orderhub.application.dto import OrderDTO, to_order_dto
from orderhub.application.identity import require_identity
from orderhub.domain.exceptions import NotFoundError, ValidationError
from orderhub.domain.model.order import Order
from orderhub.domain.repository.account_repository import AccountRepository
from orderhub.domain.repository.order_repository import OrderRepository
from orderhub.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class PlaceSimpleOrderHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        product_repo: ProductRepository,
        account_repo: AccountRepository,
    ) -> None:
        self._order_repo = order_repo
        self._product_repo = product_repo
        self._account_repo = account_repo

    def handle(self, username: str | None, product_ids: list[str]) -> OrderDTO:
        """Place a PENDING simple order for *username*.

        Steps:
        1. Resolve the placing account (fail if unknown).
        2. Resolve every product ID (fail on the first unknown batch,
           before anything is written).
        3. Let the Order aggregate validate its creation rules.
        4. Persist and return a DTO.
        """
        username = require_identity(username)
        account = self._account_repo.get_by_username(username)
        if account is None:
            raise NotFoundError(f"Account '{username}' not found")

        if not product_ids:
            raise ValidationError("At least one product ID is required")
        products = self._product_repo.find_by_ids(product_ids)

        order = Order.simple(owner=account.username, products=products)
        self._order_repo.save(order)

        logger.info(
            "Order #%s placed by %s (%d products, total %s)",
            order.id, order.owner, len(order.products), order.total,
        )
        return to_order_dto(order)
