"""Application service: order history queries.

Buyers see their most recent orders first.  Sellers work through a
fulfilment queue, so they see the oldest first.  Ties on creation time
(orders from the same checkout) fall back to the order ID.
"""

from __future__ import annotations

from agrimarket.application.dto import OrderDTO
from agrimarket.application.mappers import order_to_dto
from agrimarket.domain.model.order import Order
from agrimarket.domain.repository.order_repository import OrderRepository


def _chronological(order: Order) -> tuple:
    return (order.created_at, order.id or 0)


class ListBuyerOrdersHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, buyer_id: str) -> list[OrderDTO]:
        orders = sorted(
            self._order_repo.find_by_buyer(buyer_id), key=_chronological, reverse=True
        )
        return [order_to_dto(o) for o in orders]


class ListSellerOrdersHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, seller_id: str) -> list[OrderDTO]:
        orders = sorted(self._order_repo.find_by_seller(seller_id), key=_chronological)
        return [order_to_dto(o) for o in orders]
