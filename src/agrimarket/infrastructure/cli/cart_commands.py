"""CLI commands for the buyer's cart."""

from __future__ import annotations

import click

from agrimarket.application.add_to_cart import AddToCartHandler
from agrimarket.application.dto import CartDTO
from agrimarket.application.remove_from_cart import RemoveFromCartHandler
from agrimarket.application.show_cart import ShowCartHandler
from agrimarket.application.update_cart_quantity import UpdateCartQuantityHandler
from agrimarket.infrastructure.auth import authenticate
from agrimarket.infrastructure.bootstrap import (
    cart_repository,
    product_repository,
    user_repository,
)
from agrimarket.infrastructure.cli.errors import reports_errors, user_option


def _display_cart(dto: CartDTO) -> None:
    if not dto.items:
        click.echo("Your cart is empty.")
        return

    click.echo(f"  {'ID':<6} {'Product':<20} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*54}")
    for item in dto.items:
        click.echo(
            f"  {item.product_id:<6} {item.product_name:<20} {item.quantity:>5} "
            f"{item.unit_price:>10} {item.line_total:>10}"
        )
    click.echo(f"  {'-'*54}")
    click.echo(f"  {'Cart Total':<34} {dto.total:>20}")


@click.command("add")
@user_option
@click.option("--product", "product_id", required=True, help="Product ID.")
@click.option("--quantity", required=True, type=int, help="Quantity in kg.")
@reports_errors
def cart_add(user_id: str, product_id: str, quantity: int) -> None:
    """Add a product to your cart."""
    principal = authenticate(user_repository(), user_id)
    handler = AddToCartHandler(
        cart_repo=cart_repository(),
        product_repo=product_repository(),
    )
    _display_cart(handler.handle(principal.id, product_id, quantity))


@click.command("update")
@user_option
@click.option("--product", "product_id", required=True, help="Product ID.")
@click.option("--quantity", required=True, type=int, help="New quantity in kg.")
@reports_errors
def cart_update(user_id: str, product_id: str, quantity: int) -> None:
    """Change the quantity of a product already in your cart."""
    principal = authenticate(user_repository(), user_id)
    handler = UpdateCartQuantityHandler(
        cart_repo=cart_repository(),
        product_repo=product_repository(),
    )
    _display_cart(handler.handle(principal.id, product_id, quantity))


@click.command("remove")
@user_option
@click.option("--product", "product_id", required=True, help="Product ID.")
@reports_errors
def cart_remove(user_id: str, product_id: str) -> None:
    """Remove a product from your cart."""
    principal = authenticate(user_repository(), user_id)
    handler = RemoveFromCartHandler(
        cart_repo=cart_repository(),
        product_repo=product_repository(),
    )
    _display_cart(handler.handle(principal.id, product_id))


@click.command("show")
@user_option
@reports_errors
def cart_show(user_id: str) -> None:
    """Show your cart."""
    principal = authenticate(user_repository(), user_id)
    handler = ShowCartHandler(
        cart_repo=cart_repository(),
        product_repo=product_repository(),
    )
    _display_cart(handler.handle(principal.id))
