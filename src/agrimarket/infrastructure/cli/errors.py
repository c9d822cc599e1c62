"""Translate domain and store errors into click errors at the CLI boundary."""

from __future__ import annotations

import functools
import logging

import click

from agrimarket.domain.exceptions import DomainException, InternalError

logger = logging.getLogger(__name__)


def reports_errors(command):
    """Show business errors verbatim; log store failures and hide their detail."""

    @functools.wraps(command)
    def wrapper(*args, **kwargs):
        try:
            return command(*args, **kwargs)
        except DomainException as exc:
            raise click.ClickException(str(exc)) from exc
        except InternalError as exc:
            logger.exception("Store failure while running '%s'", command.__name__)
            raise click.ClickException("Server error") from exc

    return wrapper


def user_option(command):
    """The acting user's id, as vouched for by the authentication layer."""
    return click.option(
        "--user",
        "user_id",
        envvar="AGRIMARKET_USER",
        required=True,
        help="ID of the acting user (or set AGRIMARKET_USER).",
    )(command)
