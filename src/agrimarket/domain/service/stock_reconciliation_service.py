"""Domain service: Stock Reconciliation.

Checks a checkout's lines against *current* stock and commits the
decrements.  Stock may have changed since the items were put in the
cart (there is no reservation), so this re-check is the one that
counts.

The two-phase approach (validate-then-mutate) means a short line is
detected before any stock moves.  Phase 2 uses the repository's
conditional decrement; if one of those still loses a race, the
decrements already applied are put back before the error propagates.
"""

from __future__ import annotations

import logging
from enum import Enum

from agrimarket.domain.exceptions import (
    DomainException,
    EntityNotFoundError,
    InsufficientStockError,
)
from agrimarket.domain.model.cart import CartLine
from agrimarket.domain.model.product import Product
from agrimarket.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class MissingProductPolicy(Enum):
    """What to do with a cart line whose product was deleted."""

    SKIP = "skip"  # drop the line, log a warning
    FAIL = "fail"  # abort the whole checkout


class StockReconciliationService:

    def __init__(
        self,
        product_repo: ProductRepository,
        missing_product_policy: MissingProductPolicy = MissingProductPolicy.SKIP,
    ) -> None:
        self._product_repo = product_repo
        self._policy = missing_product_policy

    def resolve(self, lines: list[CartLine]) -> list[tuple[Product, CartLine]]:
        """Load the live product behind every line, applying the missing-product policy."""
        resolved: list[tuple[Product, CartLine]] = []
        for line in lines:
            product = self._product_repo.get_by_id(line.product_id)
            if product is None:
                self._handle_missing(line.product_id)
                continue
            resolved.append((product, line))
        return resolved

    def reconcile(self, lines: list[CartLine]) -> None:
        """Validate every line against current stock, then decrement.

        Raises InsufficientStockError naming the first short product;
        in that case no stock has been changed.
        """
        # Phase 1: validate against fresh stock
        to_decrement: list[tuple[str, int]] = []
        for product, line in self.resolve(lines):
            qty = line.quantity.value
            if not product.has_stock_for(qty):
                raise InsufficientStockError(product.name, product.quantity)
            to_decrement.append((product.id, qty))

        # Phase 2: conditional decrements, undone on a lost race
        applied: list[tuple[str, int]] = []
        try:
            for product_id, qty in to_decrement:
                updated = self._product_repo.decrement_stock(product_id, qty)
                if updated is None:
                    self._handle_missing(product_id)
                    continue
                applied.append((product_id, qty))
        except DomainException:
            for product_id, qty in applied:
                self._product_repo.restock(product_id, qty)
            raise

    def _handle_missing(self, product_id: str) -> None:
        if self._policy is MissingProductPolicy.FAIL:
            raise EntityNotFoundError(f"Product {product_id} no longer exists")
        logger.warning("Product %s not found during checkout, skipping line", product_id)
