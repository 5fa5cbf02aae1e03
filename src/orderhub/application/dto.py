"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass

from orderhub.domain.model.order import Order, OrderKind


@dataclass(frozen=True)
class ProductLineDTO:
    """Output: one product of a simple order as displayed to the user."""

    product_id: str
    name: str
    price: str  # formatted, e.g. "$15.00"


@dataclass(frozen=True)
class OrderDTO:
    """Output: a complete order as displayed to the user."""

    id: int
    kind: str
    owner: str
    status: str
    products: list[ProductLineDTO]
    member_ids: list[int]
    total: str
    created_at: str

    @property
    def is_compound(self) -> bool:
        return self.kind == OrderKind.COMPOUND.value


def to_order_dto(order: Order) -> OrderDTO:
    return OrderDTO(
        id=order.id,  # type: ignore[arg-type]
        kind=order.kind.value,
        owner=order.owner,
        status=order.status.value,
        products=[
            ProductLineDTO(product_id=p.id, name=p.name, price=str(p.price))
            for p in order.products
        ],
        member_ids=order.member_ids,
        total=str(order.total),
        created_at=order.created_at.strftime("%Y-%m-%d %H:%M UTC"),
    )
