"""Product aggregate.

A product is a seller's listing together with its live stock counter.
Orders never point back at a product's price; they snapshot it.
"""

from __future__ import annotations

from dataclasses import dataclass

from agrimarket.domain.exceptions import InsufficientStockError, ValidationError
from agrimarket.domain.model.value_objects import Money


def _check_stock_value(quantity: object) -> int:
    if not isinstance(quantity, int) or isinstance(quantity, bool) or quantity < 0:
        raise ValidationError("Quantity must be a non-negative integer")
    return quantity


@dataclass
class Product:
    """A listing in the marketplace catalog.

    Invariant: ``quantity`` is never negative.
    """

    id: str
    name: str
    price: Money
    quantity: int
    seller_id: str
    description: str | None = None

    def __post_init__(self) -> None:
        _check_stock_value(self.quantity)

    def has_stock_for(self, requested: int) -> bool:
        return requested <= self.quantity

    def update_price(self, new_price: Money) -> None:
        """Existing orders keep the price they were placed at."""
        self.price = new_price

    def set_stock(self, quantity: int) -> None:
        self.quantity = _check_stock_value(quantity)

    def decrement(self, amount: int) -> None:
        """Take *amount* units out of stock, refusing to go below zero."""
        if amount <= 0:
            raise ValidationError("Decrement amount must be positive")
        if amount > self.quantity:
            raise InsufficientStockError(self.name, self.quantity)
        self.quantity -= amount

    def restock(self, amount: int) -> None:
        if amount <= 0:
            raise ValidationError("Restock amount must be positive")
        self.quantity += amount
