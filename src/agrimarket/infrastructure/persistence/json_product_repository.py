"""JSON-file-backed implementation of ProductRepository."""

from __future__ import annotations

from decimal import Decimal
from pathlib import Path

from agrimarket.domain.model.product import Product
from agrimarket.domain.model.value_objects import Money
from agrimarket.domain.repository.product_repository import ProductRepository
from agrimarket.infrastructure.persistence.json_file import JsonFile


class JsonProductRepository(ProductRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path)

    # --- ProductRepository interface ------------------------------------------

    def next_id(self) -> str:
        ids = [int(pid) for pid in self._load() if pid.isdigit()]
        return str(max(ids) + 1) if ids else "1"

    def get_by_id(self, product_id: str) -> Product | None:
        return self._load().get(product_id)

    def list_all(self) -> list[Product]:
        return list(self._load().values())

    def list_by_seller(self, seller_id: str) -> list[Product]:
        return [p for p in self._load().values() if p.seller_id == seller_id]

    def save(self, product: Product) -> None:
        with self._file.lock:
            products = self._load()
            products[product.id] = product
            self._persist(products)

    def decrement_stock(self, product_id: str, amount: int) -> Product | None:
        with self._file.lock:
            products = self._load()
            product = products.get(product_id)
            if product is None:
                return None
            product.decrement(amount)  # raises before anything is written
            self._persist(products)
            return product

    def restock(self, product_id: str, amount: int) -> None:
        with self._file.lock:
            products = self._load()
            product = products.get(product_id)
            if product is None:
                return
            product.restock(amount)
            self._persist(products)

    # --- Serialization helpers ------------------------------------------------

    def _load(self) -> dict[str, Product]:
        return {p.id: p for p in self._file.load_as(self._to_domain)}

    @staticmethod
    def _to_domain(item: dict) -> Product:
        return Product(
            id=item["id"],
            name=item["name"],
            price=Money(Decimal(item["price"]), item.get("currency", "USD")),
            quantity=item["quantity"],
            seller_id=item["seller_id"],
            description=item.get("description"),
        )

    def _persist(self, products: dict[str, Product]) -> None:
        self._file.persist(
            [
                {
                    "id": p.id,
                    "name": p.name,
                    "price": str(p.price.amount),
                    "currency": p.price.currency,
                    "quantity": p.quantity,
                    "seller_id": p.seller_id,
                    "description": p.description,
                }
                for p in products.values()
            ]
        )
