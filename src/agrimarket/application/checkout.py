"""Application service: Checkout use case.

Turns a buyer's cart into one pending order per seller.  The store has
no multi-document transactions, so the flow is create -> validate ->
commit-or-compensate:

1. Reject bad input (blank payment method, empty cart, unknown buyer)
   before anything is written.
2. Partition the cart by seller and persist one order per group.
3. Reconcile stock (validate all lines, then decrement).  If that
   fails for any reason the orders from step 2 are deleted, so a
   failed checkout leaves no orders behind.
4. Clear the cart.
"""

from __future__ import annotations

import logging

from agrimarket.application.dto import CheckoutResultDTO, SellerTransferDTO
from agrimarket.application.mappers import order_to_dto
from agrimarket.domain.exceptions import EntityNotFoundError, ValidationError
from agrimarket.domain.model.order import Order
from agrimarket.domain.model.value_objects import Money
from agrimarket.domain.repository.cart_repository import CartRepository
from agrimarket.domain.repository.order_repository import OrderRepository
from agrimarket.domain.repository.product_repository import ProductRepository
from agrimarket.domain.repository.user_repository import UserRepository
from agrimarket.domain.service.seller_partition import partition_by_seller
from agrimarket.domain.service.stock_reconciliation_service import (
    MissingProductPolicy,
    StockReconciliationService,
)

logger = logging.getLogger(__name__)


class CheckoutHandler:

    def __init__(
        self,
        cart_repo: CartRepository,
        order_repo: OrderRepository,
        product_repo: ProductRepository,
        user_repo: UserRepository,
        missing_product_policy: MissingProductPolicy = MissingProductPolicy.SKIP,
    ) -> None:
        self._cart_repo = cart_repo
        self._order_repo = order_repo
        self._user_repo = user_repo
        self._stock = StockReconciliationService(product_repo, missing_product_policy)

    def handle(self, buyer_id: str, payment_method: str) -> CheckoutResultDTO:
        if not payment_method or not payment_method.strip():
            raise ValidationError("Payment method is required")

        cart = self._cart_repo.get(buyer_id)
        if cart is None or cart.is_empty:
            raise ValidationError("Cart is empty")

        buyer = self._user_repo.get_by_id(buyer_id)
        if buyer is None:
            raise EntityNotFoundError("User not found")

        resolved = self._stock.resolve(cart.lines)
        if not resolved:
            raise ValidationError("Cart is empty")

        logger.info(
            "Checkout started for buyer %s (%d lines)", buyer_id, len(resolved)
        )

        groups = partition_by_seller([(product, line.quantity) for product, line in resolved])
        orders: list[Order] = []
        try:
            for group in groups:
                order = Order.create(
                    buyer_id=buyer_id,
                    seller_id=group.seller_id,
                    lines=group.lines,
                    payment_method=payment_method,
                    buyer_address=buyer.address,
                )
                self._order_repo.save(order)
                orders.append(order)

            self._stock.reconcile([line for _, line in resolved])
        except Exception:
            created = [o.id for o in orders if o.id is not None]
            logger.warning(
                "Checkout for buyer %s failed, rolling back orders %s", buyer_id, created
            )
            self._order_repo.delete_many(created)
            raise

        cart.clear()
        self._cart_repo.save(cart)

        grand_total = Money.zero()
        for order in orders:
            grand_total = grand_total + order.total_amount

        logger.info(
            "Checkout for buyer %s placed %d order(s) totalling %s",
            buyer_id,
            len(orders),
            grand_total,
        )
        return CheckoutResultDTO(
            orders=[order_to_dto(o) for o in orders],
            total_amount=str(grand_total),
            transfers=[
                SellerTransferDTO(seller_id=o.seller_id, amount=str(o.total_amount))
                for o in orders
            ],
        )
