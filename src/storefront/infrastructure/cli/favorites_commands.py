"""CLI commands for liked products."""

from __future__ import annotations

import click

from storefront.domain.exceptions import EntityNotFoundError
from storefront.infrastructure.bootstrap import AppContext
from storefront.infrastructure.cli.errors import HANDLED, to_click


@click.command("add")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.pass_obj
def favorites_add(app: AppContext, product_id: str) -> None:
    """Like a product."""
    try:
        product = app.catalog.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")
    except HANDLED as exc:
        raise to_click(exc)

    app.favorites.add(product)
    click.echo(f"'{product.name}' added to favorites.")


@click.command("remove")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.pass_obj
def favorites_remove(app: AppContext, product_id: str) -> None:
    """Unlike a product."""
    app.favorites.remove(product_id)
    click.echo("Removed from favorites.")


@click.command("list")
@click.pass_obj
def favorites_list(app: AppContext) -> None:
    """List liked products."""
    items = app.favorites.items
    if not items:
        click.echo("No favorites yet.")
        return
    for p in items:
        click.echo(f"{p.id:<26} {p.name[:30]:<30} {str(p.effective_price):>12}")
