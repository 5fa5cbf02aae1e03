"""Abstract repository for Order aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from orderhub.domain.model.order import Order, OrderStatus


class OrderRepository(ABC):

    @abstractmethod
    def next_id(self) -> int:
        """Generate the next unique order ID."""

    @abstractmethod
    def get_by_id(self, order_id: int) -> Order | None:
        """Return an order by its ID, or None if not found.

        Compound orders come back with their member orders loaded.
        """

    @abstractmethod
    def save(self, order: Order) -> None:
        """Persist a new or updated order, assigning an ID to new ones."""

    @abstractmethod
    def update_status(
        self, order_id: int, expected: OrderStatus, new: OrderStatus
    ) -> bool:
        """Atomically set the status of *order_id* to *new*.

        Only succeeds if the stored status is still *expected*. Returns
        False when the order is missing or another writer got there first.
        """

    @abstractmethod
    def insert_compound(self, order: Order) -> bool:
        """Store a new compound *order* only if all its members are still PENDING.

        The member check and the write happen as one step. Returns False,
        storing nothing, when a member was confirmed, cancelled or removed
        since it was validated.
        """
