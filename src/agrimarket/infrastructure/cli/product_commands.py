"""CLI commands for the Product aggregate."""

from __future__ import annotations

import click

from agrimarket.application.dto import ProductDTO
from agrimarket.application.list_product import ListProductHandler
from agrimarket.application.list_products import (
    ListCatalogHandler,
    ListSellerProductsHandler,
)
from agrimarket.application.update_product import UpdateProductHandler
from agrimarket.infrastructure.auth import authenticate
from agrimarket.infrastructure.bootstrap import product_repository, user_repository
from agrimarket.infrastructure.cli.errors import reports_errors, user_option


def _display_products(products: list[ProductDTO]) -> None:
    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Name':<20} {'Price':>10} {'Stock':>8} {'Seller':>8}")
    click.echo("-" * 56)
    for p in products:
        click.echo(f"{p.id:<6} {p.name:<20} {p.price:>10} {p.quantity:>8} {p.seller_id:>8}")


@click.command("add")
@user_option
@click.option("--name", required=True, help="Product name.")
@click.option("--price", required=True, help="Price per kg (e.g. 2.50).")
@click.option("--quantity", required=True, type=int, help="Stock on hand, in kg.")
@click.option("--description", default=None, help="Optional description.")
@reports_errors
def product_add(
    user_id: str, name: str, price: str, quantity: int, description: str | None
) -> None:
    """List a new product for sale."""
    principal = authenticate(user_repository(), user_id)
    handler = ListProductHandler(product_repo=product_repository())
    product = handler.handle(
        seller_id=principal.id,
        name=name,
        price=price,
        quantity=quantity,
        description=description,
    )
    click.echo(f"Product #{product.id} '{product.name}' listed at {product.price}")


@click.command("list")
@reports_errors
def product_list() -> None:
    """List every product in the marketplace."""
    _display_products(ListCatalogHandler(product_repo=product_repository()).handle())


@click.command("mine")
@user_option
@reports_errors
def product_mine(user_id: str) -> None:
    """List the products you are selling."""
    principal = authenticate(user_repository(), user_id)
    handler = ListSellerProductsHandler(product_repo=product_repository())
    _display_products(handler.handle(principal.id))


@click.command("update")
@user_option
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--price", default=None, help="New price (e.g. 2.75).")
@click.option("--quantity", default=None, type=int, help="New stock level, in kg.")
@reports_errors
def product_update(
    user_id: str, product_id: str, price: str | None, quantity: int | None
) -> None:
    """Change the price and/or stock of one of your products."""
    if price is None and quantity is None:
        raise click.UsageError("Give --price and/or --quantity")

    principal = authenticate(user_repository(), user_id)
    handler = UpdateProductHandler(product_repo=product_repository())
    product = handler.handle(
        product_id=product_id, caller_id=principal.id, price=price, quantity=quantity
    )
    click.echo(f"Product #{product.id} updated: {product.price}, {product.quantity} kg in stock")
