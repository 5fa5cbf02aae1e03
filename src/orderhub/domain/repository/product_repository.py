"""Abstract repository for Product aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (JSON, in-memory)
live in the infrastructure layer and the tests.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from orderhub.domain.exceptions import NotFoundError
from orderhub.domain.model.product import Product


class ProductRepository(ABC):

    @abstractmethod
    def get_by_id(self, product_id: str) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def get_by_name(self, name: str) -> Product | None:
        """Return a product by its exact name, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every product in the catalog."""

    @abstractmethod
    def save(self, product: Product) -> None:
        """Persist a new or updated product."""

    def find_by_ids(self, product_ids: list[str]) -> list[Product]:
        """Resolve every ID, in order, or raise NotFoundError naming the misses."""
        found: list[Product] = []
        missing: list[str] = []
        for product_id in product_ids:
            product = self.get_by_id(product_id)
            if product is None:
                missing.append(product_id)
            else:
                found.append(product)
        if missing:
            raise NotFoundError(f"Product(s) not found: {', '.join(missing)}")
        return found
