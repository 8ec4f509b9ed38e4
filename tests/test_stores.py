"""Tests for the key-value stores."""

import json

import pytest
from terminal_portfolio.stores import JsonFileStore, MemoryStore


class TestMemoryStore:
    """Tests for MemoryStore."""

    def test_get_absent(self):
        assert MemoryStore().get("theme") is None

    def test_set_get(self):
        store = MemoryStore()
        store.set("theme", '"dark"')
        assert store.get("theme") == '"dark"'

    def test_initial_values_copied(self):
        """The initial mapping is not shared."""
        initial = {"a": "1"}
        store = MemoryStore(initial)
        store.set("a", "2")
        assert initial == {"a": "1"}
        assert store.get("a") == "2"


class TestJsonFileStore:
    """Tests for JsonFileStore."""

    @pytest.fixture
    def path(self, tmp_path):
        return tmp_path / "state" / "state.json"

    def test_missing_file_is_empty(self, path):
        assert JsonFileStore(path).get("theme") is None

    def test_set_creates_file(self, path):
        """The parent directory and file are created on first write."""
        JsonFileStore(path).set("theme", '"light"')
        assert json.loads(path.read_text()) == {"theme": '"light"'}

    def test_values_survive_new_instance(self, path):
        store = JsonFileStore(path)
        store.set("theme", '"matrix"')
        store.set("history", '["a"]')
        reopened = JsonFileStore(path)
        assert reopened.get("theme") == '"matrix"'
        assert reopened.get("history") == '["a"]'

    def test_corrupt_file_is_empty(self, path, caplog):
        """A corrupt file reads as empty and is replaced on write."""
        path.parent.mkdir(parents=True)
        path.write_text("{not json")
        store = JsonFileStore(path)
        assert store.get("theme") is None
        assert "Could not read state file" in caplog.text

        store.set("theme", '"dark"')
        assert json.loads(path.read_text()) == {"theme": '"dark"'}

    def test_non_object_file_is_empty(self, path):
        path.parent.mkdir(parents=True)
        path.write_text("[1, 2, 3]")
        assert JsonFileStore(path).get("theme") is None

    def test_non_string_values_dropped(self, path):
        path.parent.mkdir(parents=True)
        path.write_text(json.dumps({"theme": '"dark"', "count": 3}))
        store = JsonFileStore(path)
        assert store.get("theme") == '"dark"'
        assert store.get("count") is None

    def test_expands_home(self):
        store = JsonFileStore("~/state.json")
        assert "~" not in str(store.path)
