"""Cart state and its reducers.

The cart is an insertion-ordered sequence of lines, at most one line per
product id. Every reducer is a pure function ``(state, ...) -> state``
that returns a new ``CartState``; totals are never stored on the state,
they are computed from the lines by ``total_items`` / ``total_price``.

Reducers are total over their inputs: an unknown product id or a
non-positive quantity is absorbed, never raised.
"""

from __future__ import annotations

from dataclasses import dataclass

from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money


@dataclass(frozen=True)
class CartLine:
    """A (product, quantity) pair. ``quantity`` is always >= 1."""

    product: Product
    quantity: int

    @property
    def line_total(self) -> Money:
        return self.product.effective_price * self.quantity

    @property
    def exceeds_stock(self) -> bool:
        return self.quantity > self.product.stock


@dataclass(frozen=True)
class CartState:
    items: tuple[CartLine, ...] = ()

    def find(self, product_id: str) -> CartLine | None:
        for line in self.items:
            if line.product.id == product_id:
                return line
        return None


EMPTY_CART = CartState()


# --- Derived values -----------------------------------------------------------


def total_items(state: CartState) -> int:
    return sum(line.quantity for line in state.items)


def total_price(state: CartState) -> Money:
    result = Money.zero()
    for line in state.items:
        result = result + line.line_total
    return result


def lines_over_stock(state: CartState) -> list[CartLine]:
    """Lines asking for more units than the snapshot's stock count.

    Informational only: the cart accepts any positive quantity and leaves
    stock enforcement to the server at checkout.
    """
    return [line for line in state.items if line.exceeds_stock]


# --- Reducers -----------------------------------------------------------------


def add_line(state: CartState, product: Product, quantity: int = 1) -> CartState:
    """Increment the existing line for ``product`` or append a new one."""
    if quantity <= 0:
        return state
    if state.find(product.id) is None:
        return CartState(items=state.items + (CartLine(product, quantity),))
    return CartState(
        items=tuple(
            CartLine(line.product, line.quantity + quantity)
            if line.product.id == product.id
            else line
            for line in state.items
        )
    )


def remove_line(state: CartState, product_id: str) -> CartState:
    if state.find(product_id) is None:
        return state
    return CartState(
        items=tuple(line for line in state.items if line.product.id != product_id)
    )


def set_line_quantity(state: CartState, product_id: str, quantity: int) -> CartState:
    """Replace a line's quantity; ``quantity <= 0`` deletes the line."""
    if quantity <= 0:
        return remove_line(state, product_id)
    if state.find(product_id) is None:
        return state
    return CartState(
        items=tuple(
            CartLine(line.product, quantity) if line.product.id == product_id else line
            for line in state.items
        )
    )


def clear_lines(state: CartState) -> CartState:
    return EMPTY_CART
