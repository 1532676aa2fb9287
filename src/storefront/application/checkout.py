"""Application service: Checkout use case.

Turns the cart into an order request. Signed-in shoppers place member
orders; everyone else goes through guest checkout. The cart is cleared
only once the server has accepted the order.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Any

from storefront.application.auth_store import AuthStore
from storefront.application.cart_store import CartStore
from storefront.application.dto import (
    CartDTO,
    CartLineDTO,
    CheckoutResultDTO,
    ShippingAddress,
)
from storefront.domain.exceptions import ValidationError
from storefront.domain.model.cart import CartState, total_items, total_price
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.order_gateway import OrderGateway

logger = logging.getLogger(__name__)

FREE_SHIPPING_FROM = Money(Decimal("750000"))
SHIPPING_FEE = Money(Decimal("30000"))
PAYMENT_METHODS = ("cod", "bank_transfer")


@dataclass(frozen=True)
class Quote:
    subtotal: Money
    shipping: Money
    total: Money


def quote(state: CartState) -> Quote:
    """Subtotal at effective prices plus flat shipping below the free threshold."""
    subtotal = total_price(state)
    if not state.items or subtotal >= FREE_SHIPPING_FROM:
        shipping = Money.zero()
    else:
        shipping = SHIPPING_FEE
    return Quote(subtotal=subtotal, shipping=shipping, total=subtotal + shipping)


def cart_summary(state: CartState) -> CartDTO:
    q = quote(state)
    return CartDTO(
        items=[
            CartLineDTO(
                product_id=line.product.id,
                product_name=line.product.name,
                quantity=line.quantity,
                unit_price=str(line.product.effective_price),
                line_total=str(line.line_total),
                over_stock=line.exceeds_stock,
            )
            for line in state.items
        ],
        total_items=total_items(state),
        subtotal=str(q.subtotal),
        shipping=str(q.shipping),
        total=str(q.total),
    )


class CheckoutHandler:

    def __init__(
        self,
        order_gateway: OrderGateway,
        cart_store: CartStore,
        auth_store: AuthStore,
    ) -> None:
        self._orders = order_gateway
        self._cart = cart_store
        self._auth = auth_store

    def handle(
        self,
        address: ShippingAddress,
        payment_method: str = "cod",
        *,
        note: str | None = None,
        gift_message: str | None = None,
        delivery_date: str | None = None,
        coupon_code: str | None = None,
    ) -> CheckoutResultDTO:
        """Place an order for everything in the cart.

        Steps:
        1. Refuse an empty cart or an unknown payment method.
        2. Build the order request from the cart lines.
        3. Submit as member or guest depending on the session.
        4. Clear the cart and return a DTO.
        """
        state = self._cart.state
        if not state.items:
            raise ValidationError("Cart is empty")
        if payment_method not in PAYMENT_METHODS:
            raise ValidationError(
                f"Unknown payment method '{payment_method}' "
                f"(expected one of {', '.join(PAYMENT_METHODS)})"
            )
        if not address.full_name.strip() or not address.phone.strip():
            raise ValidationError("Full name and phone are required for delivery")

        payload = self._build_payload(
            state, address, payment_method, note, gift_message, delivery_date, coupon_code
        )
        guest = not self._auth.is_authenticated
        order = self._orders.place(payload, guest=guest)

        self._cart.clear()
        order_ref = str(order.get("orderCode") or order.get("_id", ""))
        logger.info("Order %s placed (%s)", order_ref, "guest" if guest else "member")

        total = order.get("total")
        return CheckoutResultDTO(
            order_ref=order_ref,
            status=str(order.get("orderStatus", "pending")),
            total=str(Money.of(total)) if total is not None else str(quote(state).total),
            guest=guest,
        )

    # --- Mapping --------------------------------------------------------------

    @staticmethod
    def _build_payload(
        state: CartState,
        address: ShippingAddress,
        payment_method: str,
        note: str | None,
        gift_message: str | None,
        delivery_date: str | None,
        coupon_code: str | None,
    ) -> dict[str, Any]:
        return {
            "items": [
                {"product": line.product.id, "quantity": line.quantity}
                for line in state.items
            ],
            "shippingAddress": {
                "fullName": address.full_name,
                "phone": address.phone,
                "email": address.email,
                "address": address.address,
                "ward": address.ward,
                "district": address.district,
                "province": address.city,
                "city": address.city,
            },
            "paymentMethod": payment_method,
            "deliveryDate": delivery_date,
            "giftMessage": gift_message,
            "note": note,
            "couponCode": coupon_code,
        }
