"""Application service: Show Cart use case (query)."""

from __future__ import annotations

from agrimarket.application.dto import CartDTO
from agrimarket.application.mappers import cart_to_dto
from agrimarket.domain.model.cart import Cart
from agrimarket.domain.repository.cart_repository import CartRepository
from agrimarket.domain.repository.product_repository import ProductRepository


class ShowCartHandler:

    def __init__(
        self,
        cart_repo: CartRepository,
        product_repo: ProductRepository,
    ) -> None:
        self._cart_repo = cart_repo
        self._product_repo = product_repo

    def handle(self, buyer_id: str) -> CartDTO:
        cart = self._cart_repo.get(buyer_id) or Cart(buyer_id=buyer_id)
        return cart_to_dto(cart, self._product_repo)
