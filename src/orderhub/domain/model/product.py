"""Product aggregate.

Products live independently of orders. The lifecycle core only reads
them; a simple order keeps its own copy of each product it was placed with.
"""

from __future__ import annotations

from dataclasses import dataclass

from orderhub.domain.exceptions import ValidationError
from orderhub.domain.model.value_objects import Money


@dataclass(frozen=True)
class Product:
    """A product in the catalog."""

    id: str
    name: str
    price: Money

    @staticmethod
    def create(product_id: str, name: str, price: Money) -> Product:
        if not name or not name.strip():
            raise ValidationError("Product name is required")
        if price.amount <= 0:
            raise ValidationError("Product price must be greater than zero")
        return Product(id=product_id, name=name.strip(), price=price)
