"""JSON-file-backed implementation of OrderRepository.

Simple orders store a snapshot of each product. Compound orders store
only their member IDs; members are loaded from the same file whenever
the compound order is read.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from pathlib import Path

from orderhub.domain.model.order import Order, OrderKind, OrderStatus
from orderhub.domain.model.product import Product
from orderhub.domain.model.value_objects import Money
from orderhub.domain.repository.order_repository import OrderRepository
from orderhub.infrastructure.persistence.json_store import JsonFile


class JsonOrderRepository(OrderRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path)

    # --- OrderRepository interface --------------------------------------------

    def next_id(self) -> int:
        return self._next_id(self._load_raw())

    def get_by_id(self, order_id: int) -> Order | None:
        by_id = {raw["id"]: raw for raw in self._load_raw()}
        raw = by_id.get(order_id)
        if raw is None:
            return None
        return self._to_domain(raw, by_id)

    def save(self, order: Order) -> None:
        with self._file.locked():
            orders = self._load_raw()
            self._upsert(orders, order)
            self._file.write(orders)

    def insert_compound(self, order: Order) -> bool:
        with self._file.locked():
            orders = self._load_raw()
            by_id = {raw["id"]: raw for raw in orders}
            for member_id in order.member_ids:
                stored = by_id.get(member_id)
                if stored is None or stored["status"] != OrderStatus.PENDING.value:
                    return False
            self._upsert(orders, order)
            self._file.write(orders)
            return True

    def update_status(
        self, order_id: int, expected: OrderStatus, new: OrderStatus
    ) -> bool:
        with self._file.locked():
            orders = self._load_raw()
            for raw in orders:
                if raw["id"] == order_id:
                    if raw["status"] != expected.value:
                        return False
                    raw["status"] = new.value
                    self._file.write(orders)
                    return True
            return False

    def _upsert(self, orders: list[dict], order: Order) -> None:
        if order.id is None:
            order.id = self._next_id(orders)

        # Upsert: replace if exists, otherwise append
        for i, raw in enumerate(orders):
            if raw["id"] == order.id:
                orders[i] = self._to_raw(order)
                break
        else:
            orders.append(self._to_raw(order))

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(order: Order) -> dict:
        raw = {
            "id": order.id,
            "kind": order.kind.value,
            "owner": order.owner,
            "status": order.status.value,
            "created_at": order.created_at.isoformat(),
        }
        if order.kind is OrderKind.COMPOUND:
            raw["member_ids"] = order.member_ids
        else:
            raw["products"] = [
                {
                    "id": p.id,
                    "name": p.name,
                    "price": str(p.price.amount),
                    "currency": p.price.currency,
                }
                for p in order.products
            ]
        return raw

    @classmethod
    def _to_domain(cls, raw: dict, by_id: dict[int, dict]) -> Order:
        kind = OrderKind(raw["kind"])
        products: list[Product] = []
        members: list[Order] = []
        if kind is OrderKind.COMPOUND:
            members = [
                cls._to_domain(by_id[member_id], by_id)
                for member_id in raw["member_ids"]
                if member_id in by_id
            ]
        else:
            products = [
                Product(
                    id=p["id"],
                    name=p["name"],
                    price=Money(Decimal(p["price"]), p.get("currency", "USD")),
                )
                for p in raw["products"]
            ]
        return Order(
            id=raw["id"],
            kind=kind,
            owner=raw["owner"],
            status=OrderStatus(raw["status"]),
            products=products,
            members=members,
            created_at=datetime.fromisoformat(raw["created_at"]),
        )

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> list[dict]:
        return self._file.read()

    @staticmethod
    def _next_id(orders: list[dict]) -> int:
        return max((o["id"] for o in orders), default=0) + 1
