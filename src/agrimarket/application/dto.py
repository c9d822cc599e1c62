"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals.  Money is pre-formatted (e.g. "$15.00").
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ProductDTO:
    id: str
    name: str
    price: str
    quantity: int
    seller_id: str
    description: str | None


@dataclass(frozen=True)
class CartLineDTO:
    """A cart line with its product resolved against the live catalog."""

    product_id: str
    product_name: str
    quantity: int
    unit_price: str
    line_total: str
    available: int


@dataclass(frozen=True)
class CartDTO:
    buyer_id: str
    items: list[CartLineDTO]
    total: str


@dataclass(frozen=True)
class OrderLineDTO:
    product_id: str
    product_name: str
    quantity: int
    unit_price: str  # as charged at checkout
    line_total: str


@dataclass(frozen=True)
class OrderDTO:
    id: int
    buyer_id: str
    seller_id: str
    status: str
    payment_method: str
    buyer_address: str
    items: list[OrderLineDTO]
    total: str
    created_at: str


@dataclass(frozen=True)
class SellerTransferDTO:
    """Amount owed to one seller, for the payment page."""

    seller_id: str
    amount: str


@dataclass(frozen=True)
class CheckoutResultDTO:
    orders: list[OrderDTO]
    total_amount: str
    transfers: list[SellerTransferDTO]


@dataclass(frozen=True)
class UserDTO:
    id: str
    name: str
    email: str
    role: str
    address: str | None
    created_at: str
