import logging

import click

from storefront.infrastructure.bootstrap import build_context
from storefront.infrastructure.cli.auth_commands import (
    auth_login,
    auth_logout,
    auth_profile,
    auth_whoami,
)
from storefront.infrastructure.cli.cart_commands import (
    cart_add,
    cart_clear,
    cart_remove,
    cart_set,
    cart_show,
)
from storefront.infrastructure.cli.favorites_commands import (
    favorites_add,
    favorites_list,
    favorites_remove,
)
from storefront.infrastructure.cli.order_commands import (
    order_checkout,
    order_list,
    order_track,
)
from storefront.infrastructure.cli.product_commands import product_list, product_show
from storefront.infrastructure.config import ConfigError


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Log debug output to stderr.")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """Storefront — shop from the command line"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    if ctx.obj is None:
        try:
            ctx.obj = build_context()
        except ConfigError as exc:
            raise click.ClickException(str(exc))
        ctx.call_on_close(ctx.obj.close)


@cli.group()
def auth() -> None:
    """Sign in and out."""


@cli.group()
def product() -> None:
    """Browse the catalog."""


@cli.group()
def cart() -> None:
    """Manage the shopping cart."""


@cli.group()
def favorites() -> None:
    """Manage liked products."""


@cli.group()
def order() -> None:
    """Check out and track orders."""


# Register subcommands
auth.add_command(auth_login)
auth.add_command(auth_logout)
auth.add_command(auth_profile)
auth.add_command(auth_whoami)
product.add_command(product_list)
product.add_command(product_show)
cart.add_command(cart_add)
cart.add_command(cart_clear)
cart.add_command(cart_remove)
cart.add_command(cart_set)
cart.add_command(cart_show)
favorites.add_command(favorites_add)
favorites.add_command(favorites_list)
favorites.add_command(favorites_remove)
order.add_command(order_checkout)
order.add_command(order_list)
order.add_command(order_track)
