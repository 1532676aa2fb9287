"""Unit tests for favorites reducers."""

from storefront.domain.model.favorites import (
    EMPTY_FAVORITES,
    add_favorite,
    clear_favorites,
    is_favorite,
    remove_favorite,
)
from tests.fakes import make_product


class TestFavorites:

    def test_add_twice_keeps_one_entry(self):
        p = make_product("A")
        state = add_favorite(add_favorite(EMPTY_FAVORITES, p), p)
        assert len(state.items) == 1

    def test_insertion_order_preserved(self):
        state = add_favorite(EMPTY_FAVORITES, make_product("B"))
        state = add_favorite(state, make_product("A"))
        assert [p.id for p in state.items] == ["B", "A"]

    def test_remove_absent_is_noop(self):
        state = add_favorite(EMPTY_FAVORITES, make_product("A"))
        assert remove_favorite(state, "Z") == state

    def test_remove_and_query(self):
        state = add_favorite(EMPTY_FAVORITES, make_product("A"))
        assert is_favorite(state, "A")
        state = remove_favorite(state, "A")
        assert not is_favorite(state, "A")

    def test_clear(self):
        state = add_favorite(EMPTY_FAVORITES, make_product("A"))
        assert clear_favorites(state).items == ()
