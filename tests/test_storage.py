"""Tests for the key-value store implementations."""

import json

import pytest

from calcsuite.services.storage import (
    CorruptStoreError,
    InMemoryKeyValueStore,
    JsonFileKeyValueStore,
    KeyValueStoreInterface,
)


class TestInMemoryKeyValueStore:

    def test_get_set_delete(self):
        store = InMemoryKeyValueStore()
        assert store.get("k") is None
        store.set("k", "v")
        assert store.get("k") == "v"
        assert store.delete("k") is True
        assert store.delete("k") is False

    def test_initial_data_is_copied(self):
        initial = {"k": "v"}
        store = InMemoryKeyValueStore(initial)
        store.set("k", "changed")
        assert initial["k"] == "v"

    def test_implements_interface(self):
        assert isinstance(InMemoryKeyValueStore(), KeyValueStoreInterface)


class TestJsonFileKeyValueStore:

    def test_missing_file_reads_as_empty(self, tmp_path):
        store = JsonFileKeyValueStore(tmp_path / "store.json")
        assert store.get("anything") is None

    def test_values_survive_a_new_instance(self, tmp_path):
        path = tmp_path / "nested" / "store.json"
        JsonFileKeyValueStore(path).set("calc_health_metrics", "[]")

        assert JsonFileKeyValueStore(path).get("calc_health_metrics") == "[]"
        assert json.loads(path.read_text(encoding="utf-8")) == {"calc_health_metrics": "[]"}

    def test_set_keeps_other_keys(self, tmp_path):
        store = JsonFileKeyValueStore(tmp_path / "store.json")
        store.set("a", "1")
        store.set("b", "2")
        assert store.get("a") == "1"
        assert store.get("b") == "2"

    def test_delete(self, tmp_path):
        store = JsonFileKeyValueStore(tmp_path / "store.json")
        store.set("a", "1")
        assert store.delete("a") is True
        assert store.delete("a") is False
        assert store.get("a") is None

    def test_corrupt_file_raises_on_read(self, tmp_path):
        path = tmp_path / "store.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(CorruptStoreError):
            JsonFileKeyValueStore(path).get("a")

    def test_non_object_file_is_corrupt(self, tmp_path):
        path = tmp_path / "store.json"
        path.write_text("[1, 2]", encoding="utf-8")
        with pytest.raises(CorruptStoreError):
            JsonFileKeyValueStore(path).get("a")

    def test_set_replaces_corrupt_file(self, tmp_path):
        path = tmp_path / "store.json"
        path.write_text("{not json", encoding="utf-8")
        store = JsonFileKeyValueStore(path)
        store.set("a", "1")
        assert store.get("a") == "1"

    def test_no_temporary_file_left_behind(self, tmp_path):
        store = JsonFileKeyValueStore(tmp_path / "store.json")
        store.set("a", "1")
        assert [p.name for p in tmp_path.iterdir()] == ["store.json"]
