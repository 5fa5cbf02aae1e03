"""JSON-file-backed implementation of ProductRepository."""

from __future__ import annotations

from decimal import Decimal
from pathlib import Path

from orderhub.domain.model.product import Product
from orderhub.domain.model.value_objects import Money
from orderhub.domain.repository.product_repository import ProductRepository
from orderhub.infrastructure.persistence.json_store import JsonFile


class JsonProductRepository(ProductRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path)

    # --- ProductRepository interface ------------------------------------------

    def get_by_id(self, product_id: str) -> Product | None:
        return self._load().get(product_id)

    def get_by_name(self, name: str) -> Product | None:
        for product in self._load().values():
            if product.name.lower() == name.lower():
                return product
        return None

    def list_all(self) -> list[Product]:
        return list(self._load().values())

    def save(self, product: Product) -> None:
        with self._file.locked():
            products = self._load()
            products[product.id] = product
            self._persist(products)

    # --- Serialization helpers ------------------------------------------------

    def _load(self) -> dict[str, Product]:
        raw = self._file.read()
        return {
            item["id"]: Product(
                id=item["id"],
                name=item["name"],
                price=Money(Decimal(item["price"]), item.get("currency", "USD")),
            )
            for item in raw
        }

    def _persist(self, products: dict[str, Product]) -> None:
        raw = [
            {
                "id": p.id,
                "name": p.name,
                "price": str(p.price.amount),
                "currency": p.price.currency,
            }
            for p in products.values()
        ]
        self._file.write(raw)
