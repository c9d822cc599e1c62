"""In-memory fake repositories for testing.

These implement the same abstract interfaces as the JSON repositories
but keep everything in a dict. No file I/O, no side effects.
"""

from __future__ import annotations

import copy

from agrimarket.domain.model.cart import Cart
from agrimarket.domain.model.order import Order
from agrimarket.domain.model.product import Product
from agrimarket.domain.model.user import User
from agrimarket.domain.repository.cart_repository import CartRepository
from agrimarket.domain.repository.order_repository import OrderRepository
from agrimarket.domain.repository.product_repository import ProductRepository
from agrimarket.domain.repository.user_repository import UserRepository


class FakeOrderRepository(OrderRepository):

    def __init__(self) -> None:
        self._store: dict[int, Order] = {}
        self._next_id = 1

    def next_id(self) -> int:
        return self._next_id

    def get_by_id(self, order_id: int) -> Order | None:
        return self._store.get(order_id)

    def save(self, order: Order) -> None:
        if order.id is None:
            order.id = self._next_id
            self._next_id += 1
        self._store[order.id] = order

    def delete_many(self, order_ids: list[int]) -> None:
        for order_id in order_ids:
            self._store.pop(order_id, None)

    def find_by_buyer(self, buyer_id: str) -> list[Order]:
        return [o for o in self._store.values() if o.buyer_id == buyer_id]

    def find_by_seller(self, seller_id: str) -> list[Order]:
        return [o for o in self._store.values() if o.seller_id == seller_id]

    def all(self) -> list[Order]:
        return list(self._store.values())


class FakeProductRepository(ProductRepository):

    def __init__(self, products: list[Product] | None = None) -> None:
        self._store: dict[str, Product] = {}
        for p in products or []:
            self._store[p.id] = p

    def next_id(self) -> str:
        ids = [int(pid) for pid in self._store]
        return str(max(ids) + 1) if ids else "1"

    def get_by_id(self, product_id: str) -> Product | None:
        return self._store.get(product_id)

    def list_all(self) -> list[Product]:
        return list(self._store.values())

    def list_by_seller(self, seller_id: str) -> list[Product]:
        return [p for p in self._store.values() if p.seller_id == seller_id]

    def save(self, product: Product) -> None:
        self._store[product.id] = product

    def delete(self, product_id: str) -> None:
        self._store.pop(product_id, None)

    def decrement_stock(self, product_id: str, amount: int) -> Product | None:
        product = self._store.get(product_id)
        if product is None:
            return None
        product.decrement(amount)
        return product

    def restock(self, product_id: str, amount: int) -> None:
        product = self._store.get(product_id)
        if product is not None:
            product.restock(amount)


class FakeCartRepository(CartRepository):
    """Stores deep copies so tests only see what was explicitly saved."""

    def __init__(self, carts: list[Cart] | None = None) -> None:
        self._store: dict[str, Cart] = {}
        for cart in carts or []:
            self.save(cart)

    def get(self, buyer_id: str) -> Cart | None:
        cart = self._store.get(buyer_id)
        return copy.deepcopy(cart) if cart is not None else None

    def save(self, cart: Cart) -> None:
        self._store[cart.buyer_id] = copy.deepcopy(cart)


class FakeUserRepository(UserRepository):

    def __init__(self, users: list[User] | None = None) -> None:
        self._store: dict[str, User] = {}
        for user in users or []:
            self._store[user.id] = user

    def next_id(self) -> str:
        ids = [int(uid) for uid in self._store]
        return str(max(ids) + 1) if ids else "1"

    def get_by_id(self, user_id: str) -> User | None:
        return self._store.get(user_id)

    def get_by_email(self, email: str) -> User | None:
        for user in self._store.values():
            if user.email.lower() == email.lower():
                return user
        return None

    def save(self, user: User) -> None:
        self._store[user.id] = user
