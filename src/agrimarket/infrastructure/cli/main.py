import click

from agrimarket.infrastructure.bootstrap import settings
from agrimarket.infrastructure.cli.cart_commands import (
    cart_add,
    cart_remove,
    cart_show,
    cart_update,
)
from agrimarket.infrastructure.cli.order_commands import (
    order_checkout,
    order_done,
    order_incoming,
    order_mine,
)
from agrimarket.infrastructure.cli.product_commands import (
    product_add,
    product_list,
    product_mine,
    product_update,
)
from agrimarket.infrastructure.cli.user_commands import (
    user_address,
    user_me,
    user_register,
)
from agrimarket.infrastructure.logging_config import configure_logging


@click.group()
def cli() -> None:
    """Agrimarket: farm produce marketplace"""
    configure_logging(settings().LOG_LEVEL)


@cli.group()
def user() -> None:
    """Manage user profiles."""


@cli.group()
def product() -> None:
    """Manage product listings."""


@cli.group()
def cart() -> None:
    """Manage your cart."""


@cli.group()
def order() -> None:
    """Check out and manage orders."""


# Register subcommands
user.add_command(user_address)
user.add_command(user_me)
user.add_command(user_register)
product.add_command(product_add)
product.add_command(product_list)
product.add_command(product_mine)
product.add_command(product_update)
cart.add_command(cart_add)
cart.add_command(cart_remove)
cart.add_command(cart_show)
cart.add_command(cart_update)
order.add_command(order_checkout)
order.add_command(order_done)
order.add_command(order_incoming)
order.add_command(order_mine)
