"""Application service: Remove From Cart use case."""

from __future__ import annotations

from agrimarket.application.dto import CartDTO
from agrimarket.application.mappers import cart_to_dto
from agrimarket.domain.exceptions import EntityNotFoundError
from agrimarket.domain.repository.cart_repository import CartRepository
from agrimarket.domain.repository.product_repository import ProductRepository


class RemoveFromCartHandler:

    def __init__(
        self,
        cart_repo: CartRepository,
        product_repo: ProductRepository,
    ) -> None:
        self._cart_repo = cart_repo
        self._product_repo = product_repo

    def handle(self, buyer_id: str, product_id: str) -> CartDTO:
        cart = self._cart_repo.get(buyer_id)
        if cart is None:
            raise EntityNotFoundError("Cart not found")

        cart.remove(product_id)
        self._cart_repo.save(cart)
        return cart_to_dto(cart, self._product_repo)
