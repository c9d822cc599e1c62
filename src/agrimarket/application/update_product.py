"""Application service: Update Product use case.

A direct seller-side edit of price and/or stock.  Stock is written
as-is (last write wins); it is not reconciled with carts or with a
checkout running at the same time.
"""

from __future__ import annotations

from agrimarket.application.dto import ProductDTO
from agrimarket.application.mappers import product_to_dto
from agrimarket.domain.exceptions import AuthorizationError, EntityNotFoundError
from agrimarket.domain.model.value_objects import Money
from agrimarket.domain.repository.product_repository import ProductRepository


class UpdateProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        product_id: str,
        caller_id: str,
        price: str | None = None,
        quantity: int | None = None,
    ) -> ProductDTO:
        """Update whichever of price and quantity are given.

        Price changes do not touch existing orders; they captured the
        price at checkout.
        """
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError("Product not found")
        if product.seller_id != caller_id:
            raise AuthorizationError("Not authorized to update this product")

        if price is not None:
            product.update_price(Money.of(price))
        if quantity is not None:
            product.set_stock(quantity)

        self._product_repo.save(product)
        return product_to_dto(product)
