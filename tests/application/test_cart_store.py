"""Tests for the cart store, including persistence across restarts."""

import json

from storefront.domain.model.value_objects import Money
from storefront.infrastructure.bootstrap import cart_store
from storefront.infrastructure.persistence.state_codecs import CART_KEY
from tests.fakes import InMemoryStateStorage, make_product


def _setup():
    storage = InMemoryStateStorage()
    return cart_store(storage), storage


class TestCartStore:

    def test_scenario_totals(self):
        store, _ = _setup()
        store.add(make_product("A", price=100_000), 2)
        store.add(make_product("B", price=50_000, sale_price=40_000), 3)
        assert store.total_items == 5
        assert store.total_price == Money.of(320_000)

    def test_set_quantity_zero_empties_cart(self):
        store, _ = _setup()
        store.add(make_product("A"), 2)
        store.set_quantity("A", 0)
        assert store.is_empty
        assert store.total_items == 0
        assert store.total_price == Money.zero()

    def test_remove_absent_leaves_cart_unchanged(self):
        store, _ = _setup()
        store.add(make_product("A"), 2)
        before = store.state
        store.remove("nope")
        assert store.state == before

    def test_clear(self):
        store, _ = _setup()
        store.add(make_product("A"), 2)
        store.clear()
        assert store.items == ()

    def test_lines_over_stock(self):
        store, _ = _setup()
        store.add(make_product("A", stock=1), 3)
        assert [line.product.id for line in store.lines_over_stock()] == ["A"]


class TestCartPersistence:

    def test_persisted_record_layout(self):
        store, storage = _setup()
        store.add(make_product("B", price=50_000, sale_price=40_000), 3)
        record = json.loads(storage.data[CART_KEY])
        assert record["totalItems"] == 3
        assert record["totalPrice"] == 120_000
        assert record["items"][0]["quantity"] == 3
        assert record["items"][0]["product"]["_id"] == "B"
        assert record["items"][0]["product"]["salePrice"] == 40_000

    def test_rehydrates_after_restart(self):
        store, storage = _setup()
        store.add(make_product("A", price=100_000), 2)
        restarted = cart_store(storage)
        assert restarted.total_items == 2
        assert restarted.total_price == Money.of(200_000)

    def test_stale_totals_in_file_are_recomputed(self):
        store, storage = _setup()
        store.add(make_product("A", price=100_000), 2)
        record = json.loads(storage.data[CART_KEY])
        record["totalItems"] = 99
        record["totalPrice"] = 1
        storage.data[CART_KEY] = json.dumps(record)
        restarted = cart_store(storage)
        assert restarted.total_items == 2
        assert restarted.total_price == Money.of(200_000)

    def test_corrupt_file_starts_empty(self):
        storage = InMemoryStateStorage({CART_KEY: '{"items": [{"quantity": 1}]}'})
        assert cart_store(storage).is_empty

    def test_overflowing_price_in_file_starts_empty(self):
        record = '{"items": [{"product": {"_id": "A", "name": "Rose", "price": 1e400}, "quantity": 1}]}'
        storage = InMemoryStateStorage({CART_KEY: record})
        store = cart_store(storage)
        assert store.is_empty
        store.add(make_product("B"), 1)
        assert json.loads(storage.data[CART_KEY])["totalItems"] == 1
