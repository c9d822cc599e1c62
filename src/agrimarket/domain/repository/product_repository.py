"""Abstract repository for the Product aggregate.

Defined in the domain layer so the domain never depends on
infrastructure.  Besides plain persistence it exposes conditional
stock updates, which must be atomic with respect to other callers of
the same repository.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from agrimarket.domain.model.product import Product


class ProductRepository(ABC):

    @abstractmethod
    def next_id(self) -> str:
        """Generate the next unique product ID."""

    @abstractmethod
    def get_by_id(self, product_id: str) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every product in the catalog."""

    @abstractmethod
    def list_by_seller(self, seller_id: str) -> list[Product]:
        """Return the products listed by one seller."""

    @abstractmethod
    def save(self, product: Product) -> None:
        """Persist a new or updated product (last write wins)."""

    @abstractmethod
    def decrement_stock(self, product_id: str, amount: int) -> Product | None:
        """Atomically take *amount* out of stock if enough is on hand.

        Returns the updated product, or None if the product no longer
        exists.  Raises InsufficientStockError, leaving stock untouched,
        when current stock is below *amount*.
        """

    @abstractmethod
    def restock(self, product_id: str, amount: int) -> None:
        """Atomically add *amount* back to stock (no-op if the product is gone)."""
