"""Cart store: the shopper's line items, persisted across runs.

No operation raises. Unknown product ids and non-positive quantities
are absorbed as no-ops or removals.
"""

from __future__ import annotations

from storefront.application.persistent_store import StoreHandle
from storefront.domain.model import cart
from storefront.domain.model.cart import CartLine, CartState
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money

REDUCERS = {
    "add": cart.add_line,
    "remove": cart.remove_line,
    "set_quantity": cart.set_line_quantity,
    "clear": cart.clear_lines,
}


class CartStore:

    def __init__(self, handle: StoreHandle[CartState]) -> None:
        self._handle = handle

    # --- Mutations ------------------------------------------------------------

    def add(self, product: Product, quantity: int = 1) -> None:
        """Add ``quantity`` units; merges into an existing line for the product.

        Stock is not checked here. See ``lines_over_stock``.
        """
        self._handle.dispatch("add", product, quantity)

    def remove(self, product_id: str) -> None:
        self._handle.dispatch("remove", product_id)

    def set_quantity(self, product_id: str, quantity: int) -> None:
        self._handle.dispatch("set_quantity", product_id, quantity)

    def clear(self) -> None:
        self._handle.dispatch("clear")

    # --- Queries --------------------------------------------------------------

    @property
    def state(self) -> CartState:
        return self._handle.get_state()

    @property
    def items(self) -> tuple[CartLine, ...]:
        return self.state.items

    @property
    def total_items(self) -> int:
        return cart.total_items(self.state)

    @property
    def total_price(self) -> Money:
        return cart.total_price(self.state)

    @property
    def is_empty(self) -> bool:
        return not self.state.items

    def lines_over_stock(self) -> list[CartLine]:
        return cart.lines_over_stock(self.state)
