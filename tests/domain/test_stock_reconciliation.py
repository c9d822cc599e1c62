"""Unit tests for the StockReconciliationService domain service."""

import logging

import pytest

from agrimarket.domain.exceptions import EntityNotFoundError, InsufficientStockError
from agrimarket.domain.model.cart import CartLine
from agrimarket.domain.model.product import Product
from agrimarket.domain.model.value_objects import Money, Quantity
from agrimarket.domain.service.stock_reconciliation_service import (
    MissingProductPolicy,
    StockReconciliationService,
)
from tests.fakes import FakeProductRepository


def _repo(*stock: tuple[str, str, int]) -> FakeProductRepository:
    """Create repo with (product_id, name, quantity) tuples."""
    return FakeProductRepository([
        Product(id=pid, name=name, price=Money.of("1.00"), quantity=qty, seller_id="S1")
        for pid, name, qty in stock
    ])


def _lines(*specs: tuple[str, int]) -> list[CartLine]:
    return [CartLine(product_id=pid, quantity=Quantity(qty)) for pid, qty in specs]


class LosesRaceOn(FakeProductRepository):
    """Stock for one product drains between validation and decrement."""

    def __init__(self, product_id: str, products: list[Product]) -> None:
        super().__init__(products)
        self._racy = product_id

    def decrement_stock(self, product_id: str, amount: int):
        if product_id == self._racy:
            self.get_by_id(product_id).set_stock(0)
        return super().decrement_stock(product_id, amount)


class TestReconcile:

    def test_decrements_every_line(self):
        repo = _repo(("1", "Tomatoes", 5), ("2", "Maize", 3))
        StockReconciliationService(repo).reconcile(_lines(("1", 2), ("2", 3)))
        assert repo.get_by_id("1").quantity == 3
        assert repo.get_by_id("2").quantity == 0

    def test_short_line_rejected_with_nothing_decremented(self):
        repo = _repo(("1", "Tomatoes", 5), ("2", "Maize", 2))
        with pytest.raises(InsufficientStockError, match="Maize. Available: 2") as exc_info:
            StockReconciliationService(repo).reconcile(_lines(("1", 2), ("2", 3)))
        assert exc_info.value.available == 2
        assert repo.get_by_id("1").quantity == 5
        assert repo.get_by_id("2").quantity == 2

    def test_lost_race_restores_earlier_decrements(self):
        products = [
            Product(id="1", name="Tomatoes", price=Money.of("1"), quantity=5, seller_id="S1"),
            Product(id="2", name="Maize", price=Money.of("1"), quantity=5, seller_id="S2"),
        ]
        repo = LosesRaceOn("2", products)
        with pytest.raises(InsufficientStockError, match="Maize"):
            StockReconciliationService(repo).reconcile(_lines(("1", 2), ("2", 3)))
        assert repo.get_by_id("1").quantity == 5


class TestMissingProducts:

    def test_skip_policy_warns_and_continues(self, caplog):
        repo = _repo(("1", "Tomatoes", 5))
        svc = StockReconciliationService(repo, MissingProductPolicy.SKIP)
        with caplog.at_level(logging.WARNING):
            svc.reconcile(_lines(("1", 2), ("gone", 1)))
        assert repo.get_by_id("1").quantity == 3
        assert "gone" in caplog.text

    def test_fail_policy_rejects_before_any_decrement(self):
        repo = _repo(("1", "Tomatoes", 5))
        svc = StockReconciliationService(repo, MissingProductPolicy.FAIL)
        with pytest.raises(EntityNotFoundError, match="no longer exists"):
            svc.reconcile(_lines(("1", 2), ("gone", 1)))
        assert repo.get_by_id("1").quantity == 5

    def test_resolve_drops_missing_lines_under_skip(self):
        repo = _repo(("1", "Tomatoes", 5))
        resolved = StockReconciliationService(repo).resolve(_lines(("gone", 1), ("1", 2)))
        assert [(p.id, line.quantity.value) for p, line in resolved] == [("1", 2)]
