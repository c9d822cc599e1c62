"""Abstract repository for the Order aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from agrimarket.domain.model.order import Order


class OrderRepository(ABC):

    @abstractmethod
    def next_id(self) -> int:
        """Generate the next unique order ID."""

    @abstractmethod
    def get_by_id(self, order_id: int) -> Order | None:
        """Return an order by its ID, or None if not found."""

    @abstractmethod
    def save(self, order: Order) -> None:
        """Persist a new order (assigning its ID) or an updated status."""

    @abstractmethod
    def delete_many(self, order_ids: list[int]) -> None:
        """Remove the given orders; unknown IDs are ignored."""

    @abstractmethod
    def find_by_buyer(self, buyer_id: str) -> list[Order]:
        """Return every order placed by a buyer, in no particular order."""

    @abstractmethod
    def find_by_seller(self, seller_id: str) -> list[Order]:
        """Return every order addressed to a seller, in no particular order."""
