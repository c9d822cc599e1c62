"""Abstract repository for the Cart aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from agrimarket.domain.model.cart import Cart


class CartRepository(ABC):

    @abstractmethod
    def get(self, buyer_id: str) -> Cart | None:
        """Return the buyer's cart, or None if they never added anything."""

    @abstractmethod
    def save(self, cart: Cart) -> None:
        """Persist the cart, replacing its stored lines."""
