"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from orderhub.infrastructure.config import Settings
from orderhub.infrastructure.persistence.json_account_repository import (
    JsonAccountRepository,
)
from orderhub.infrastructure.persistence.json_order_repository import (
    JsonOrderRepository,
)
from orderhub.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)
from orderhub.infrastructure.security.passwords import Argon2PasswordHasher
from orderhub.infrastructure.security.tokens import HmacTokenService


def account_repository(settings: Settings) -> JsonAccountRepository:
    return JsonAccountRepository(settings.data_dir / "accounts.json")


def product_repository(settings: Settings) -> JsonProductRepository:
    return JsonProductRepository(settings.data_dir / "products.json")


def order_repository(settings: Settings) -> JsonOrderRepository:
    return JsonOrderRepository(settings.data_dir / "orders.json")


def token_service(settings: Settings) -> HmacTokenService:
    return HmacTokenService(settings.secret_key, ttl_seconds=settings.token_ttl)


def password_hasher(settings: Settings) -> Argon2PasswordHasher:
    return Argon2PasswordHasher()
