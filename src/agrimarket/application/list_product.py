"""Application service: List Product use case (seller puts produce up for sale)."""

from __future__ import annotations

from agrimarket.application.dto import ProductDTO
from agrimarket.application.mappers import product_to_dto
from agrimarket.domain.exceptions import ValidationError
from agrimarket.domain.model.product import Product
from agrimarket.domain.model.value_objects import Money
from agrimarket.domain.repository.product_repository import ProductRepository


class ListProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        seller_id: str,
        name: str,
        price: str,
        quantity: int,
        description: str | None = None,
    ) -> ProductDTO:
        if not name or not name.strip():
            raise ValidationError("Name, price, and quantity are required")

        product = Product(
            id=self._product_repo.next_id(),
            name=name.strip(),
            price=Money.of(price),
            quantity=quantity,
            seller_id=seller_id,
            description=description,
        )
        self._product_repo.save(product)
        return product_to_dto(product)
