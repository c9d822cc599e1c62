"""Application service: Add To Cart use case.

The stock check here is advisory: nothing is reserved, so checkout
checks again against whatever stock is current by then.
"""

from __future__ import annotations

from agrimarket.application.dto import CartDTO
from agrimarket.application.mappers import cart_to_dto
from agrimarket.domain.exceptions import EntityNotFoundError, InsufficientStockError
from agrimarket.domain.model.cart import Cart
from agrimarket.domain.model.value_objects import Quantity
from agrimarket.domain.repository.cart_repository import CartRepository
from agrimarket.domain.repository.product_repository import ProductRepository


class AddToCartHandler:

    def __init__(
        self,
        cart_repo: CartRepository,
        product_repo: ProductRepository,
    ) -> None:
        self._cart_repo = cart_repo
        self._product_repo = product_repo

    def handle(self, buyer_id: str, product_id: str, quantity: int) -> CartDTO:
        qty = Quantity(quantity)

        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError("Product not found")

        # First add creates the cart
        cart = self._cart_repo.get(buyer_id) or Cart(buyer_id=buyer_id)

        requested = cart.quantity_of(product_id) + qty.value
        if not product.has_stock_for(requested):
            raise InsufficientStockError(product.name, product.quantity)

        cart.add(product_id, qty)
        self._cart_repo.save(cart)
        return cart_to_dto(cart, self._product_repo)
