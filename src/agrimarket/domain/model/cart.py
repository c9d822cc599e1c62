"""Cart aggregate: a buyer's pending line items.

The cart only knows product ids and quantities.  Stock checks need the
live product and therefore happen in the application handlers.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from agrimarket.domain.exceptions import EntityNotFoundError
from agrimarket.domain.model.value_objects import Quantity


@dataclass
class CartLine:
    product_id: str
    quantity: Quantity


@dataclass
class Cart:
    """Aggregate root for a buyer's cart.

    Invariant: a product id appears at most once in ``lines``.
    """

    buyer_id: str
    lines: list[CartLine] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.lines

    def quantity_of(self, product_id: str) -> int:
        line = self._find_line(product_id)
        return line.quantity.value if line is not None else 0

    def add(self, product_id: str, quantity: Quantity) -> None:
        """Add units of a product, merging with an existing line."""
        line = self._find_line(product_id)
        if line is None:
            self.lines.append(CartLine(product_id=product_id, quantity=quantity))
        else:
            line.quantity = Quantity(line.quantity.value + quantity.value)

    def set_quantity(self, product_id: str, quantity: Quantity) -> None:
        line = self._find_line(product_id)
        if line is None:
            raise EntityNotFoundError("Product not found in cart")
        line.quantity = quantity

    def remove(self, product_id: str) -> None:
        remaining = [line for line in self.lines if line.product_id != product_id]
        if len(remaining) == len(self.lines):
            raise EntityNotFoundError("Product not found in cart")
        self.lines = remaining

    def clear(self) -> None:
        self.lines = []

    def _find_line(self, product_id: str) -> CartLine | None:
        for line in self.lines:
            if line.product_id == product_id:
                return line
        return None
