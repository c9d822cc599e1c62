"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Settings are re-read on every call so the environment in effect when a
command runs is the one that counts.
"""

from __future__ import annotations

from agrimarket.application.checkout import CheckoutHandler
from agrimarket.infrastructure.config import Settings
from agrimarket.infrastructure.persistence.json_cart_repository import (
    JsonCartRepository,
)
from agrimarket.infrastructure.persistence.json_order_repository import (
    JsonOrderRepository,
)
from agrimarket.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)
from agrimarket.infrastructure.persistence.json_user_repository import (
    JsonUserRepository,
)


def settings() -> Settings:
    return Settings()


def product_repository() -> JsonProductRepository:
    return JsonProductRepository(settings().DATA_DIR / "products.json")


def cart_repository() -> JsonCartRepository:
    return JsonCartRepository(settings().DATA_DIR / "carts.json")


def order_repository() -> JsonOrderRepository:
    return JsonOrderRepository(settings().DATA_DIR / "orders.json")


def user_repository() -> JsonUserRepository:
    return JsonUserRepository(settings().DATA_DIR / "users.json")


def checkout_handler() -> CheckoutHandler:
    return CheckoutHandler(
        cart_repo=cart_repository(),
        order_repo=order_repository(),
        product_repo=product_repository(),
        user_repo=user_repository(),
        missing_product_policy=settings().MISSING_PRODUCT_POLICY,
    )
