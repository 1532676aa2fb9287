"""CLI commands for checkout and order tracking."""

from __future__ import annotations

import click

from storefront.application.checkout import PAYMENT_METHODS, CheckoutHandler
from storefront.application.dto import ShippingAddress
from storefront.application.track_order import TrackOrderHandler
from storefront.infrastructure.bootstrap import AppContext
from storefront.infrastructure.cli.errors import HANDLED, to_click


@click.command("checkout")
@click.option("--name", "full_name", required=True, help="Recipient's full name.")
@click.option("--phone", required=True, help="Recipient's phone.")
@click.option("--address", required=True, help="Street address.")
@click.option("--city", default=None, help="City / province.")
@click.option("--email", default=None, help="Contact email.")
@click.option(
    "--payment",
    "payment_method",
    type=click.Choice(PAYMENT_METHODS),
    default="cod",
    show_default=True,
)
@click.option("--note", default=None, help="Note for the shop.")
@click.option("--gift-message", default=None, help="Card message to include.")
@click.option("--delivery-date", default=None, help="Requested delivery date (YYYY-MM-DD).")
@click.pass_obj
def order_checkout(
    app: AppContext,
    full_name: str,
    phone: str,
    address: str,
    city: str | None,
    email: str | None,
    payment_method: str,
    note: str | None,
    gift_message: str | None,
    delivery_date: str | None,
) -> None:
    """Place an order for everything in the cart."""
    handler = CheckoutHandler(
        order_gateway=app.order_gateway,
        cart_store=app.cart,
        auth_store=app.auth,
    )
    shipping = ShippingAddress(
        full_name=full_name, phone=phone, address=address, email=email, city=city
    )

    try:
        result = handler.handle(
            shipping,
            payment_method,
            note=note,
            gift_message=gift_message,
            delivery_date=delivery_date,
        )
    except HANDLED as exc:
        raise to_click(exc)

    kind = "Guest order" if result.guest else "Order"
    click.echo(f"{kind} {result.order_ref} placed  (status={result.status}, total={result.total})")
    if result.guest:
        click.echo(f"Track it with: storefront order track --id {result.order_ref} --phone {phone}")


@click.command("list")
@click.pass_obj
def order_list(app: AppContext) -> None:
    """List your orders."""
    handler = TrackOrderHandler(order_gateway=app.order_gateway, auth_store=app.auth)

    try:
        orders = handler.my_orders()
    except HANDLED as exc:
        raise to_click(exc)

    if not orders:
        click.echo("No orders yet.")
        return
    click.echo(f"{'Order':<26} {'Status':<12} {'Total':>14}")
    click.echo("-" * 54)
    for order in orders:
        _echo_order_row(order)


@click.command("track")
@click.option("--id", "order_ref", required=True, help="Order code or id.")
@click.option("--phone", required=True, help="Phone used at checkout.")
@click.pass_obj
def order_track(app: AppContext, order_ref: str, phone: str) -> None:
    """Look up a guest order."""
    handler = TrackOrderHandler(order_gateway=app.order_gateway, auth_store=app.auth)

    try:
        order = handler.guest_order(order_ref, phone)
    except HANDLED as exc:
        raise to_click(exc)

    _echo_order_row(order)
    for entry in order.get("statusHistory") or []:
        click.echo(f"  {entry.get('date', ''):<26} {entry.get('status', '')}")


def _echo_order_row(order: dict) -> None:
    ref = order.get("orderCode") or order.get("_id", "")
    total = order.get("total", "")
    click.echo(f"{ref:<26} {order.get('orderStatus', ''):<12} {total!s:>14}")
