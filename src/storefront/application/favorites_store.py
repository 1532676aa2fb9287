"""Favorites store: products the shopper has liked."""

from __future__ import annotations

from storefront.application.persistent_store import StoreHandle
from storefront.domain.model import favorites
from storefront.domain.model.favorites import FavoritesState
from storefront.domain.model.product import Product

REDUCERS = {
    "add": favorites.add_favorite,
    "remove": favorites.remove_favorite,
    "clear": favorites.clear_favorites,
}


class FavoritesStore:

    def __init__(self, handle: StoreHandle[FavoritesState]) -> None:
        self._handle = handle

    def add(self, product: Product) -> None:
        self._handle.dispatch("add", product)

    def remove(self, product_id: str) -> None:
        self._handle.dispatch("remove", product_id)

    def clear(self) -> None:
        self._handle.dispatch("clear")

    def has(self, product_id: str) -> bool:
        return favorites.is_favorite(self._handle.get_state(), product_id)

    @property
    def items(self) -> tuple[Product, ...]:
        return self._handle.get_state().items
