"""Application service: Mark Order Done use case (seller side)."""

from __future__ import annotations

import logging

from agrimarket.application.dto import OrderDTO
from agrimarket.application.mappers import order_to_dto
from agrimarket.domain.exceptions import EntityNotFoundError
from agrimarket.domain.repository.order_repository import OrderRepository

logger = logging.getLogger(__name__)


class MarkOrderDoneHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, order_id: int, caller_id: str) -> OrderDTO:
        """Complete a pending order.

        Raises AuthorizationError if *caller_id* is not the order's seller
        and OrderAlreadyCompletedError on a repeat call.  Callers wanting
        idempotent behaviour should check the status first.
        """
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError("Order not found")

        order.mark_completed(caller_id)
        self._order_repo.save(order)

        logger.info("Order #%s marked as done by seller %s", order_id, caller_id)
        return order_to_dto(order)
