"""CLI commands for checkout and the Order aggregate."""

from __future__ import annotations

import click

from agrimarket.application.dto import OrderDTO
from agrimarket.application.list_orders import (
    ListBuyerOrdersHandler,
    ListSellerOrdersHandler,
)
from agrimarket.application.mark_order_done import MarkOrderDoneHandler
from agrimarket.infrastructure.auth import authenticate
from agrimarket.infrastructure.bootstrap import (
    checkout_handler,
    order_repository,
    user_repository,
)
from agrimarket.infrastructure.cli.errors import reports_errors, user_option


def _display_order(dto: OrderDTO) -> None:
    """Shared formatting for displaying an order."""
    click.echo(f"Order #{dto.id}  (status={dto.status})")
    click.echo(f"Buyer: {dto.buyer_id}  Seller: {dto.seller_id}")
    click.echo(f"Ship to:  {dto.buyer_address}")
    click.echo(f"Payment:  {dto.payment_method}")
    click.echo(f"Created:  {dto.created_at}")
    click.echo()
    click.echo(f"  {'Product':<20} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*47}")
    for item in dto.items:
        click.echo(
            f"  {item.product_name:<20} {item.quantity:>5} {item.unit_price:>10} {item.line_total:>10}"
        )
    click.echo(f"  {'-'*47}")
    click.echo(f"  {'Order Total':<27} {dto.total:>20}")


def _display_orders(orders: list[OrderDTO]) -> None:
    if not orders:
        click.echo("No orders found.")
        return
    for i, dto in enumerate(orders):
        if i:
            click.echo()
        _display_order(dto)


@click.command("checkout")
@user_option
@click.option("--payment", "payment_method", required=True, help="Payment method, e.g. 'cash'.")
@reports_errors
def order_checkout(user_id: str, payment_method: str) -> None:
    """Place orders for everything in your cart (one per seller)."""
    principal = authenticate(user_repository(), user_id)
    result = checkout_handler().handle(principal.id, payment_method)

    click.echo("Orders placed successfully")
    click.echo()
    _display_orders(result.orders)
    click.echo()
    for transfer in result.transfers:
        click.echo(f"  Pay seller {transfer.seller_id:<10} {transfer.amount:>12}")
    click.echo(f"  {'Grand Total':<27} {result.total_amount:>20}")


@click.command("mine")
@user_option
@reports_errors
def order_mine(user_id: str) -> None:
    """Show orders you placed, newest first."""
    principal = authenticate(user_repository(), user_id)
    _display_orders(ListBuyerOrdersHandler(order_repo=order_repository()).handle(principal.id))


@click.command("incoming")
@user_option
@reports_errors
def order_incoming(user_id: str) -> None:
    """Show orders placed with you, oldest first."""
    principal = authenticate(user_repository(), user_id)
    _display_orders(ListSellerOrdersHandler(order_repo=order_repository()).handle(principal.id))


@click.command("done")
@user_option
@click.option("--id", "order_id", required=True, type=int, help="Order ID to complete.")
@reports_errors
def order_done(user_id: str, order_id: int) -> None:
    """Mark one of your incoming orders as done."""
    principal = authenticate(user_repository(), user_id)
    handler = MarkOrderDoneHandler(order_repo=order_repository())
    handler.handle(order_id, principal.id)
    click.echo(f"Order #{order_id} marked as done.")
