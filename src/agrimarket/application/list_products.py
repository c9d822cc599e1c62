"""Application service: catalog queries."""

from __future__ import annotations

from agrimarket.application.dto import ProductDTO
from agrimarket.application.mappers import product_to_dto
from agrimarket.domain.repository.product_repository import ProductRepository


class ListCatalogHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self) -> list[ProductDTO]:
        return [product_to_dto(p) for p in self._product_repo.list_all()]


class ListSellerProductsHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, seller_id: str) -> list[ProductDTO]:
        return [product_to_dto(p) for p in self._product_repo.list_by_seller(seller_id)]
