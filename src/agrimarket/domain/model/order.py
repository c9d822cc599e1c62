"""Order aggregate: one seller's share of a buyer's checkout.

An order is a historical record: created once by the checkout, after
which only its status may change (pending -> completed, by the seller).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from agrimarket.domain.exceptions import (
    AuthorizationError,
    OrderAlreadyCompletedError,
    ValidationError,
)
from agrimarket.domain.model.value_objects import Money, Quantity

ADDRESS_NOT_PROVIDED = "Not provided"


class OrderStatus(Enum):
    PENDING = "pending"
    COMPLETED = "completed"


@dataclass(frozen=True)
class OrderLine:
    """A product/quantity pair with the name and price captured at checkout."""

    product_id: str
    product_name: str
    quantity: Quantity
    unit_price: Money

    @property
    def line_total(self) -> Money:
        return self.unit_price * self.quantity.value


@dataclass
class Order:
    """Aggregate root for a per-seller order.

    Use ``Order.create()`` for new orders; ``__init__`` is left plain so
    repositories can reconstitute stored orders without re-validating.
    ``total_amount`` is fixed at creation and never recomputed.
    """

    id: int | None
    buyer_id: str
    seller_id: str
    lines: list[OrderLine]
    total_amount: Money
    payment_method: str
    buyer_address: str = ADDRESS_NOT_PROVIDED
    status: OrderStatus = OrderStatus.PENDING
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @staticmethod
    def create(
        buyer_id: str,
        seller_id: str,
        lines: list[OrderLine],
        payment_method: str,
        buyer_address: str | None = None,
    ) -> Order:
        if not payment_method or not payment_method.strip():
            raise ValidationError("Payment method is required")
        if not lines:
            raise ValidationError("Order must contain at least one item")

        total = Money.zero()
        for line in lines:
            total = total + line.line_total

        return Order(
            id=None,
            buyer_id=buyer_id,
            seller_id=seller_id,
            lines=list(lines),
            total_amount=total,
            payment_method=payment_method.strip(),
            buyer_address=buyer_address or ADDRESS_NOT_PROVIDED,
        )

    def mark_completed(self, caller_id: str) -> None:
        """Transition PENDING -> COMPLETED on behalf of *caller_id*.

        Only the order's seller may do this, and only once: a repeat call
        is rejected rather than treated as a no-op.
        """
        if caller_id != self.seller_id:
            raise AuthorizationError("Not authorized to mark this order as done")
        if self.status == OrderStatus.COMPLETED:
            raise OrderAlreadyCompletedError("Order is already marked as done")
        self.status = OrderStatus.COMPLETED
