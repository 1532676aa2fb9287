"""Favorites (liked products) state and reducers."""

from __future__ import annotations

from dataclasses import dataclass

from storefront.domain.model.product import Product


@dataclass(frozen=True)
class FavoritesState:
    """Liked products in the order they were added; ids are unique."""

    items: tuple[Product, ...] = ()


EMPTY_FAVORITES = FavoritesState()


def is_favorite(state: FavoritesState, product_id: str) -> bool:
    return any(item.id == product_id for item in state.items)


def add_favorite(state: FavoritesState, product: Product) -> FavoritesState:
    if is_favorite(state, product.id):
        return state
    return FavoritesState(items=state.items + (product,))


def remove_favorite(state: FavoritesState, product_id: str) -> FavoritesState:
    if not is_favorite(state, product_id):
        return state
    return FavoritesState(
        items=tuple(item for item in state.items if item.id != product_id)
    )


def clear_favorites(state: FavoritesState) -> FavoritesState:
    return EMPTY_FAVORITES
