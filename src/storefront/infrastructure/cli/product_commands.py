"""CLI commands for browsing the catalog."""

from __future__ import annotations

import click

from storefront.domain.exceptions import EntityNotFoundError
from storefront.infrastructure.bootstrap import AppContext
from storefront.infrastructure.cli.errors import HANDLED, to_click


@click.command("list")
@click.option("--category", default=None, help="Category id or slug.")
@click.option("--search", "query", default=None, help="Free-text search.")
@click.option("--page", default=1, type=int, show_default=True)
@click.option("--limit", default=12, type=int, show_default=True)
@click.pass_obj
def product_list(
    app: AppContext, category: str | None, query: str | None, page: int, limit: int
) -> None:
    """List products in the catalog."""
    try:
        products = app.browse.handle(
            category=category, search=query, page=page, limit=limit
        )
    except HANDLED as exc:
        raise to_click(exc)
    if products is None:
        # a newer listing replaced this one
        return

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<26} {'Name':<30} {'Price':>12} {'Stock':>6}")
    click.echo("-" * 77)
    for p in products:
        heart = " *" if app.favorites.has(p.id) else ""
        click.echo(f"{p.id:<26} {p.name[:30]:<30} {str(p.effective_price):>12} {p.stock:>6}{heart}")


@click.command("show")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.pass_obj
def product_show(app: AppContext, product_id: str) -> None:
    """Show one product."""
    try:
        product = app.catalog.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")
    except HANDLED as exc:
        raise to_click(exc)

    click.echo(f"{product.name}  ({product.id})")
    if product.on_sale:
        click.echo(f"Price: {product.effective_price}  (was {product.price})")
    else:
        click.echo(f"Price: {product.price}")
    click.echo(f"Stock: {product.stock}")
    if not product.is_active:
        click.echo("No longer for sale.")
