"""JSON-file-backed implementation of CartRepository."""

from __future__ import annotations

from pathlib import Path

from agrimarket.domain.model.cart import Cart, CartLine
from agrimarket.domain.model.value_objects import Quantity
from agrimarket.domain.repository.cart_repository import CartRepository
from agrimarket.infrastructure.persistence.json_file import JsonFile


class JsonCartRepository(CartRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path)

    # --- CartRepository interface ---------------------------------------------

    def get(self, buyer_id: str) -> Cart | None:
        for cart in self._file.load_as(self._to_domain):
            if cart.buyer_id == buyer_id:
                return cart
        return None

    def save(self, cart: Cart) -> None:
        with self._file.lock:
            carts = [c for c in self._file.load_as(self._to_domain) if c.buyer_id != cart.buyer_id]
            carts.append(cart)
            self._file.persist([self._to_raw(c) for c in carts])

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(cart: Cart) -> dict:
        return {
            "buyer_id": cart.buyer_id,
            "lines": [
                {"product_id": line.product_id, "quantity": line.quantity.value}
                for line in cart.lines
            ],
        }

    @staticmethod
    def _to_domain(raw: dict) -> Cart:
        return Cart(
            buyer_id=raw["buyer_id"],
            lines=[
                CartLine(product_id=line["product_id"], quantity=Quantity(line["quantity"]))
                for line in raw["lines"]
            ],
        )
