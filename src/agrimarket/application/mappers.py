"""Domain -> DTO mapping shared by the handlers."""

from __future__ import annotations

from agrimarket.application.dto import (
    CartDTO,
    CartLineDTO,
    OrderDTO,
    OrderLineDTO,
    ProductDTO,
    UserDTO,
)
from agrimarket.domain.model.cart import Cart
from agrimarket.domain.model.order import Order
from agrimarket.domain.model.product import Product
from agrimarket.domain.model.user import User
from agrimarket.domain.model.value_objects import Money
from agrimarket.domain.repository.product_repository import ProductRepository

UNLISTED = "(no longer listed)"


def order_to_dto(order: Order) -> OrderDTO:
    return OrderDTO(
        id=order.id,  # type: ignore[arg-type]
        buyer_id=order.buyer_id,
        seller_id=order.seller_id,
        status=order.status.value,
        payment_method=order.payment_method,
        buyer_address=order.buyer_address,
        items=[
            OrderLineDTO(
                product_id=line.product_id,
                product_name=line.product_name,
                quantity=line.quantity.value,
                unit_price=str(line.unit_price),
                line_total=str(line.line_total),
            )
            for line in order.lines
        ],
        total=str(order.total_amount),
        created_at=order.created_at.strftime("%Y-%m-%d %H:%M UTC"),
    )


def product_to_dto(product: Product) -> ProductDTO:
    return ProductDTO(
        id=product.id,
        name=product.name,
        price=str(product.price),
        quantity=product.quantity,
        seller_id=product.seller_id,
        description=product.description,
    )


def cart_to_dto(cart: Cart, product_repo: ProductRepository) -> CartDTO:
    """Resolve each line against the catalog.

    Lines whose product was deleted are still shown, but priced at
    nothing and left out of the total.
    """
    items: list[CartLineDTO] = []
    total = Money.zero()
    for line in cart.lines:
        product = product_repo.get_by_id(line.product_id)
        if product is None:
            items.append(
                CartLineDTO(
                    product_id=line.product_id,
                    product_name=UNLISTED,
                    quantity=line.quantity.value,
                    unit_price="n/a",
                    line_total="n/a",
                    available=0,
                )
            )
            continue
        line_total = product.price * line.quantity.value
        total = total + line_total
        items.append(
            CartLineDTO(
                product_id=product.id,
                product_name=product.name,
                quantity=line.quantity.value,
                unit_price=str(product.price),
                line_total=str(line_total),
                available=product.quantity,
            )
        )
    return CartDTO(buyer_id=cart.buyer_id, items=items, total=str(total))


def user_to_dto(user: User) -> UserDTO:
    return UserDTO(
        id=user.id,
        name=user.name,
        email=user.email,
        role=user.role.value,
        address=user.address,
        created_at=user.created_at.strftime("%Y-%m-%d %H:%M UTC"),
    )
