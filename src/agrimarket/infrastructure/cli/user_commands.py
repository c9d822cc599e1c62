"""CLI commands for user profiles."""

from __future__ import annotations

import click

from agrimarket.application.dto import UserDTO
from agrimarket.application.register_user import RegisterUserHandler
from agrimarket.application.show_profile import ShowProfileHandler
from agrimarket.application.update_address import UpdateAddressHandler
from agrimarket.domain.model.user import Role
from agrimarket.infrastructure.auth import authenticate
from agrimarket.infrastructure.bootstrap import user_repository
from agrimarket.infrastructure.cli.errors import reports_errors, user_option


def _display_profile(dto: UserDTO) -> None:
    click.echo(f"User #{dto.id}  ({dto.role})")
    click.echo(f"Name:     {dto.name}")
    click.echo(f"Email:    {dto.email}")
    click.echo(f"Address:  {dto.address or 'Not provided'}")
    click.echo(f"Joined:   {dto.created_at}")


@click.command("register")
@click.option("--name", required=True, help="Display name.")
@click.option("--email", required=True, help="Email address (must be unique).")
@click.option(
    "--role",
    type=click.Choice([r.value for r in Role]),
    default=Role.BUYER.value,
    show_default=True,
    help="'community' members can sell produce.",
)
@click.option("--address", default=None, help="Shipping address.")
@reports_errors
def user_register(name: str, email: str, role: str, address: str | None) -> None:
    """Create a marketplace profile."""
    handler = RegisterUserHandler(user_repo=user_repository())
    user = handler.handle(name=name, email=email, role=role, address=address)
    click.echo(f"User #{user.id} '{user.name}' registered as {user.role.value}")


@click.command("me")
@user_option
@reports_errors
def user_me(user_id: str) -> None:
    """Show your profile."""
    principal = authenticate(user_repository(), user_id)
    _display_profile(ShowProfileHandler(user_repo=user_repository()).handle(principal.id))


@click.command("address")
@user_option
@click.option("--address", required=True, help="New shipping address.")
@reports_errors
def user_address(user_id: str, address: str) -> None:
    """Change the shipping address used for future orders."""
    principal = authenticate(user_repository(), user_id)
    dto = UpdateAddressHandler(user_repo=user_repository()).handle(principal.id, address)
    click.echo(f"Address updated to: {dto.address}")
