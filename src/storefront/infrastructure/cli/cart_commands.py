"""CLI commands for the shopping cart."""

from __future__ import annotations

import click

from storefront.application.add_to_cart import AddToCartHandler
from storefront.application.checkout import cart_summary
from storefront.infrastructure.bootstrap import AppContext
from storefront.infrastructure.cli.errors import HANDLED, to_click


@click.command("add")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--quantity", default=1, type=int, show_default=True)
@click.pass_obj
def cart_add(app: AppContext, product_id: str, quantity: int) -> None:
    """Add a product to the cart."""
    handler = AddToCartHandler(catalog=app.catalog, cart_store=app.cart)

    try:
        product = handler.handle(product_id, quantity)
    except HANDLED as exc:
        raise to_click(exc)

    click.echo(f"Added {quantity} x {product.name}  (cart: {app.cart.total_items} items)")
    for line in app.cart.lines_over_stock():
        if line.product.id == product.id:
            click.echo(f"Warning: only {line.product.stock} in stock.", err=True)


@click.command("set")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--quantity", required=True, type=int, help="New quantity; 0 removes the line.")
@click.pass_obj
def cart_set(app: AppContext, product_id: str, quantity: int) -> None:
    """Change the quantity of a cart line."""
    app.cart.set_quantity(product_id, quantity)
    _display_cart(app)


@click.command("remove")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.pass_obj
def cart_remove(app: AppContext, product_id: str) -> None:
    """Remove a product from the cart."""
    app.cart.remove(product_id)
    _display_cart(app)


@click.command("clear")
@click.pass_obj
def cart_clear(app: AppContext) -> None:
    """Empty the cart."""
    app.cart.clear()
    click.echo("Cart cleared.")


@click.command("show")
@click.pass_obj
def cart_show(app: AppContext) -> None:
    """Show the cart with totals."""
    _display_cart(app)


def _display_cart(app: AppContext) -> None:
    """Shared formatting for displaying the cart."""
    dto = cart_summary(app.cart.state)
    if not dto.items:
        click.echo("Your cart is empty.")
        return

    click.echo(f"  {'Product':<30} {'Qty':>5} {'Price':>12} {'Total':>14}")
    click.echo(f"  {'-'*64}")
    for item in dto.items:
        flag = "  (exceeds stock)" if item.over_stock else ""
        click.echo(
            f"  {item.product_name[:30]:<30} {item.quantity:>5} "
            f"{item.unit_price:>12} {item.line_total:>14}{flag}"
        )
    click.echo(f"  {'-'*64}")
    click.echo(f"  {'Items':<37} {dto.total_items:>27}")
    click.echo(f"  {'Subtotal':<37} {dto.subtotal:>27}")
    click.echo(f"  {'Shipping':<37} {dto.shipping:>27}")
    click.echo(f"  {'Total':<37} {dto.total:>27}")
