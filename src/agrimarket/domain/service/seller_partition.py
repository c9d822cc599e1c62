"""Domain service: split a cart into per-seller groups.

Every Order belongs to exactly one seller, so a cart spanning N
sellers has to become N orders.  Groups come out in the order each
seller first appears in the cart, which keeps order IDs predictable.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from agrimarket.domain.model.order import OrderLine
from agrimarket.domain.model.product import Product
from agrimarket.domain.model.value_objects import Money, Quantity


@dataclass
class SellerGroup:
    seller_id: str
    lines: list[OrderLine] = field(default_factory=list)
    total: Money = field(default_factory=Money.zero)

    def add(self, line: OrderLine) -> None:
        self.lines.append(line)
        self.total = self.total + line.line_total


def partition_by_seller(items: list[tuple[Product, Quantity]]) -> list[SellerGroup]:
    """Group resolved (product, quantity) pairs by the product's seller.

    Each line snapshots the product's current name and price.
    """
    groups: dict[str, SellerGroup] = {}
    for product, quantity in items:
        group = groups.get(product.seller_id)
        if group is None:
            group = groups[product.seller_id] = SellerGroup(seller_id=product.seller_id)
        group.add(
            OrderLine(
                product_id=product.id,
                product_name=product.name,
                quantity=quantity,
                unit_price=product.price,  # <-- price snapshot
            )
        )
    return list(groups.values())
