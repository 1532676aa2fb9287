"""DTOs handed to the CLI: display-ready strings instead of domain objects."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ShippingAddress:
    """Input: where the order goes."""

    full_name: str
    phone: str
    address: str
    email: str | None = None
    ward: str | None = None
    district: str | None = None
    city: str | None = None


@dataclass(frozen=True)
class CartLineDTO:
    """Output: a single cart line as displayed to the user."""

    product_id: str
    product_name: str
    quantity: int
    unit_price: str  # formatted, e.g. "40.000₫"
    line_total: str
    over_stock: bool


@dataclass(frozen=True)
class CartDTO:
    items: list[CartLineDTO]
    total_items: int
    subtotal: str
    shipping: str
    total: str


@dataclass(frozen=True)
class CheckoutResultDTO:
    order_ref: str  # order code when the server issued one, else its id
    status: str
    total: str
    guest: bool
