"""Tests for the JSON-file state storage."""

import pytest

from storefront.infrastructure.bootstrap import cart_store
from storefront.infrastructure.persistence.json_state_storage import JsonFileStateStorage
from tests.fakes import make_product


class TestJsonFileStateStorage:

    def test_read_absent_key(self, tmp_path):
        assert JsonFileStateStorage(tmp_path).read("cart-storage") is None

    def test_write_creates_directory_and_file(self, tmp_path):
        storage = JsonFileStateStorage(tmp_path / "nested" / "data")
        storage.write("cart-storage", '{"items": []}')
        assert (tmp_path / "nested" / "data" / "cart-storage.json").exists()
        assert storage.read("cart-storage").strip() == '{"items": []}'

    def test_remove_is_idempotent(self, tmp_path):
        storage = JsonFileStateStorage(tmp_path)
        storage.write("chat_session_id", "session_1_abc")
        storage.remove("chat_session_id")
        storage.remove("chat_session_id")
        assert storage.read("chat_session_id") is None

    def test_rejects_path_like_keys(self, tmp_path):
        with pytest.raises(ValueError, match="Invalid storage key"):
            JsonFileStateStorage(tmp_path).write("../escape", "x")

    def test_cart_survives_restart_on_disk(self, tmp_path):
        cart_store(JsonFileStateStorage(tmp_path)).add(make_product("A"), 3)
        assert cart_store(JsonFileStateStorage(tmp_path)).total_items == 3

    def test_corrupt_file_on_disk_starts_empty(self, tmp_path):
        (tmp_path / "cart-storage.json").write_text("{{{", encoding="utf-8")
        assert cart_store(JsonFileStateStorage(tmp_path)).is_empty
