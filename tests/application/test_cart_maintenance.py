"""Integration tests for the cart use cases."""

import pytest

from agrimarket.application.add_to_cart import AddToCartHandler
from agrimarket.application.remove_from_cart import RemoveFromCartHandler
from agrimarket.application.show_cart import ShowCartHandler
from agrimarket.application.update_cart_quantity import UpdateCartQuantityHandler
from agrimarket.domain.exceptions import (
    EntityNotFoundError,
    InsufficientStockError,
    ValidationError,
)
from agrimarket.domain.model.product import Product
from agrimarket.domain.model.value_objects import Money
from tests.fakes import FakeCartRepository, FakeProductRepository


def _setup():
    products = FakeProductRepository([
        Product(id="1", name="Onions", price=Money.of("1.50"), quantity=10, seller_id="S1"),
        Product(id="2", name="Honey", price=Money.of("8.00"), quantity=2, seller_id="S2"),
    ])
    return FakeCartRepository(), products


class TestAddToCart:

    def test_first_add_creates_cart(self):
        carts, products = _setup()
        dto = AddToCartHandler(carts, products).handle("B1", "1", 4)
        assert dto.total == "$6.00"
        assert carts.get("B1").quantity_of("1") == 4

    def test_repeat_add_accumulates(self):
        carts, products = _setup()
        handler = AddToCartHandler(carts, products)
        handler.handle("B1", "1", 4)
        dto = handler.handle("B1", "1", 6)
        assert dto.items[0].quantity == 10

    def test_accumulated_quantity_checked_against_stock(self):
        carts, products = _setup()
        handler = AddToCartHandler(carts, products)
        handler.handle("B1", "2", 2)
        with pytest.raises(InsufficientStockError, match="Honey. Available: 2 kg"):
            handler.handle("B1", "2", 1)
        assert carts.get("B1").quantity_of("2") == 2

    def test_unknown_product(self):
        carts, products = _setup()
        with pytest.raises(EntityNotFoundError, match="Product not found"):
            AddToCartHandler(carts, products).handle("B1", "99", 1)
        assert carts.get("B1") is None

    def test_zero_quantity(self):
        carts, products = _setup()
        with pytest.raises(ValidationError, match="greater than 0"):
            AddToCartHandler(carts, products).handle("B1", "1", 0)


class TestUpdateCartQuantity:

    def test_replaces_quantity(self):
        carts, products = _setup()
        AddToCartHandler(carts, products).handle("B1", "1", 4)
        dto = UpdateCartQuantityHandler(carts, products).handle("B1", "1", 9)
        assert dto.items[0].quantity == 9

    def test_over_stock_rejected(self):
        carts, products = _setup()
        AddToCartHandler(carts, products).handle("B1", "2", 1)
        with pytest.raises(InsufficientStockError):
            UpdateCartQuantityHandler(carts, products).handle("B1", "2", 3)

    def test_no_cart(self):
        carts, products = _setup()
        with pytest.raises(EntityNotFoundError, match="Cart not found"):
            UpdateCartQuantityHandler(carts, products).handle("B1", "1", 1)

    def test_product_not_in_cart(self):
        carts, products = _setup()
        AddToCartHandler(carts, products).handle("B1", "1", 1)
        with pytest.raises(EntityNotFoundError, match="not found in cart"):
            UpdateCartQuantityHandler(carts, products).handle("B1", "2", 1)


class TestRemoveAndShow:

    def test_remove(self):
        carts, products = _setup()
        AddToCartHandler(carts, products).handle("B1", "1", 1)
        dto = RemoveFromCartHandler(carts, products).handle("B1", "1")
        assert dto.items == []

    def test_remove_without_cart(self):
        carts, products = _setup()
        with pytest.raises(EntityNotFoundError, match="Cart not found"):
            RemoveFromCartHandler(carts, products).handle("B1", "1")

    def test_show_missing_cart_is_empty(self):
        carts, products = _setup()
        dto = ShowCartHandler(carts, products).handle("B1")
        assert dto.items == []
        assert dto.total == "$0.00"

    def test_show_flags_delisted_product(self):
        carts, products = _setup()
        handler = AddToCartHandler(carts, products)
        handler.handle("B1", "1", 2)
        handler.handle("B1", "2", 1)
        products.delete("2")

        dto = ShowCartHandler(carts, products).handle("B1")
        assert dto.items[1].product_name == "(no longer listed)"
        assert dto.total == "$3.00"
