"""Application service: Update Cart Quantity use case."""

from __future__ import annotations

from agrimarket.application.dto import CartDTO
from agrimarket.application.mappers import cart_to_dto
from agrimarket.domain.exceptions import EntityNotFoundError, InsufficientStockError
from agrimarket.domain.model.value_objects import Quantity
from agrimarket.domain.repository.cart_repository import CartRepository
from agrimarket.domain.repository.product_repository import ProductRepository


class UpdateCartQuantityHandler:

    def __init__(
        self,
        cart_repo: CartRepository,
        product_repo: ProductRepository,
    ) -> None:
        self._cart_repo = cart_repo
        self._product_repo = product_repo

    def handle(self, buyer_id: str, product_id: str, quantity: int) -> CartDTO:
        """Replace (not add to) the quantity of a product already in the cart."""
        qty = Quantity(quantity)

        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError("Product not found")

        cart = self._cart_repo.get(buyer_id)
        if cart is None:
            raise EntityNotFoundError("Cart not found")
        if cart.quantity_of(product_id) == 0:
            raise EntityNotFoundError("Product not found in cart")

        if not product.has_stock_for(qty.value):
            raise InsufficientStockError(product.name, product.quantity)

        cart.set_quantity(product_id, qty)
        self._cart_repo.save(cart)
        return cart_to_dto(cart, self._product_repo)
