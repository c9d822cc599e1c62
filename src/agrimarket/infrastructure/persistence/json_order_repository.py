"""JSON-file-backed implementation of OrderRepository.

Order IDs come from a high-water mark stored next to the orders file
(``orders.seq.json``), so IDs of rolled-back orders are never handed
out again.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from pathlib import Path

from agrimarket.domain.model.order import Order, OrderLine, OrderStatus
from agrimarket.domain.model.value_objects import Money, Quantity
from agrimarket.domain.repository.order_repository import OrderRepository
from agrimarket.infrastructure.persistence.json_file import HighWaterMark, JsonFile


class JsonOrderRepository(OrderRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path)
        self._last_id = HighWaterMark(file_path.with_suffix(".seq.json"))

    # --- OrderRepository interface --------------------------------------------

    def next_id(self) -> int:
        # Existing orders count too, for files written before the mark existed
        highest = max((o.id or 0 for o in self._load()), default=0)
        return max(highest, self._last_id.read()) + 1

    def get_by_id(self, order_id: int) -> Order | None:
        for order in self._load():
            if order.id == order_id:
                return order
        return None

    def save(self, order: Order) -> None:
        with self._file.lock:
            orders = self._load()

            if order.id is None:
                order.id = self.next_id()
                self._last_id.advance(order.id)

            # Upsert: replace if exists, otherwise append
            for i, existing in enumerate(orders):
                if existing.id == order.id:
                    orders[i] = order
                    break
            else:
                orders.append(order)

            self._persist(orders)

    def delete_many(self, order_ids: list[int]) -> None:
        if not order_ids:
            return
        doomed = set(order_ids)
        with self._file.lock:
            self._persist([o for o in self._load() if o.id not in doomed])

    def find_by_buyer(self, buyer_id: str) -> list[Order]:
        return [o for o in self._load() if o.buyer_id == buyer_id]

    def find_by_seller(self, seller_id: str) -> list[Order]:
        return [o for o in self._load() if o.seller_id == seller_id]

    # --- Serialization --------------------------------------------------------

    def _load(self) -> list[Order]:
        return self._file.load_as(self._to_domain)

    def _persist(self, orders: list[Order]) -> None:
        self._file.persist([self._to_raw(o) for o in orders])

    @staticmethod
    def _to_raw(order: Order) -> dict:
        return {
            "id": order.id,
            "buyer_id": order.buyer_id,
            "seller_id": order.seller_id,
            "status": order.status.value,
            "payment_method": order.payment_method,
            "buyer_address": order.buyer_address,
            "total_amount": str(order.total_amount.amount),
            "currency": order.total_amount.currency,
            "created_at": order.created_at.isoformat(),
            "lines": [
                {
                    "product_id": line.product_id,
                    "product_name": line.product_name,
                    "quantity": line.quantity.value,
                    "unit_price": str(line.unit_price.amount),
                }
                for line in order.lines
            ],
        }

    @staticmethod
    def _to_domain(raw: dict) -> Order:
        currency = raw.get("currency", "USD")
        lines = [
            OrderLine(
                product_id=line["product_id"],
                product_name=line["product_name"],
                quantity=Quantity(line["quantity"]),
                unit_price=Money(Decimal(line["unit_price"]), currency),
            )
            for line in raw["lines"]
        ]
        return Order(
            id=raw["id"],
            buyer_id=raw["buyer_id"],
            seller_id=raw["seller_id"],
            lines=lines,
            total_amount=Money(Decimal(raw["total_amount"]), currency),
            payment_method=raw["payment_method"],
            buyer_address=raw["buyer_address"],
            status=OrderStatus(raw["status"]),
            created_at=datetime.fromisoformat(raw["created_at"]),
        )
