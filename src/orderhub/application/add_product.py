"""Application service: Add Product use case."""

from __future__ import annotations

import logging

from orderhub.domain.exceptions import ValidationError
from orderhub.domain.model.product import Product
from orderhub.domain.model.value_objects import Money
from orderhub.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class AddProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, name: str, price: str) -> Product:
        """Add a new product to the catalog."""
        if not name or not name.strip():
            raise ValidationError("Product name is required")

        existing = self._product_repo.get_by_name(name.strip())
        if existing is not None:
            raise ValidationError(f"Product '{name}' already exists")

        # Auto-assign ID based on existing products
        numeric_ids = [int(p.id) for p in self._product_repo.list_all() if p.id.isdecimal()]
        next_id = str(max(numeric_ids, default=0) + 1)

        product = Product.create(next_id, name, Money.of(price))
        self._product_repo.save(product)
        logger.info("Product #%s '%s' added at %s", product.id, product.name, product.price)
        return product
