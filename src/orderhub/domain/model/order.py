"""Order aggregate, the core of the domain.

An order is either SIMPLE (backed by a list of products) or COMPOUND
(aggregating existing simple orders, possibly owned by other accounts).
Both variants share one type tagged by ``kind``; code that needs
variant-specific behaviour dispatches on the tag.

Status only moves forward::

    PENDING --> CONFIRMED --> CANCELLED
       |                         ^
       +-------------------------+

CANCELLED is terminal. CONFIRMED can only be cancelled.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from orderhub.domain.exceptions import ConflictError, ValidationError
from orderhub.domain.model.product import Product
from orderhub.domain.model.value_objects import Money


class OrderKind(Enum):
    SIMPLE = "SIMPLE"
    COMPOUND = "COMPOUND"


class OrderStatus(Enum):
    PENDING = "Pending"
    CONFIRMED = "Confirmed"
    CANCELLED = "Cancelled"


@dataclass
class Order:
    """Aggregate root for simple and compound orders.

    Use the ``Order.simple()`` / ``Order.compound()`` factories for new
    orders; they enforce the creation rules. The ``__init__`` is kept
    plain so repositories can reconstitute persisted orders.

    ``members`` holds references to the member orders themselves, so a
    compound total always reflects the members' current contents.
    """

    id: int | None
    kind: OrderKind
    owner: str
    status: OrderStatus = OrderStatus.PENDING
    products: list[Product] = field(default_factory=list)
    members: list[Order] = field(default_factory=list)
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def __setattr__(self, name: str, value: object) -> None:
        # Ownership is fixed once assigned.
        if name == "owner" and "owner" in self.__dict__ and value != self.owner:
            raise ValidationError("The owner of an order cannot be changed")
        super().__setattr__(name, value)

    # --- Factories (used for NEW orders only) ---------------------------------

    @staticmethod
    def simple(owner: str, products: list[Product]) -> Order:
        """Create a PENDING simple order for *owner*."""
        if not owner:
            raise ValidationError("An order needs an owner")
        if not products:
            raise ValidationError("Order must contain at least one product")
        return Order(id=None, kind=OrderKind.SIMPLE, owner=owner, products=list(products))

    @staticmethod
    def compound(owner: str, members: list[Order]) -> Order:
        """Create a PENDING compound order for *owner* over *members*."""
        if not owner:
            raise ValidationError("An order needs an owner")
        if not members:
            raise ValidationError("A compound order needs at least one member order")
        for member in members:
            if member.kind is not OrderKind.SIMPLE:
                raise ValidationError(
                    f"Order #{member.id} is not a simple order and cannot be aggregated"
                )
        return Order(id=None, kind=OrderKind.COMPOUND, owner=owner, members=list(members))

    # --- State transitions ----------------------------------------------------

    def assert_can_confirm(self) -> None:
        if self.status is OrderStatus.CONFIRMED:
            raise ConflictError("Order is already confirmed!")
        if self.status is OrderStatus.CANCELLED:
            raise ConflictError("Order is cancelled and cannot be confirmed!")

    def confirm(self) -> None:
        """Transition PENDING -> CONFIRMED."""
        self.assert_can_confirm()
        self.status = OrderStatus.CONFIRMED

    def assert_can_cancel(self) -> None:
        if self.status is OrderStatus.CANCELLED:
            raise ConflictError("Order is already cancelled!")

    def cancel(self) -> None:
        """Transition PENDING|CONFIRMED -> CANCELLED."""
        self.assert_can_cancel()
        self.status = OrderStatus.CANCELLED

    # --- Computed properties --------------------------------------------------

    @property
    def total(self) -> Money:
        result = Money.zero()
        if self.kind is OrderKind.SIMPLE:
            for product in self.products:
                result = result + product.price
        else:
            for member in self.members:
                result = result + member.total
        return result

    @property
    def member_ids(self) -> list[int]:
        return [m.id for m in self.members if m.id is not None]

    def is_owned_by(self, username: str | None) -> bool:
        return bool(username) and self.owner == username
