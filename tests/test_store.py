import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import pytest

from pocket_notes.errors import StoreReadError, StoreWriteError
from pocket_notes.storage.store import JsonFileStore, MemoryStore, open_default_store


def test_missing_key_is_none(tmp_path):
    store = JsonFileStore(tmp_path)
    assert store.get("notes") is None


def test_set_then_get(tmp_path):
    store = JsonFileStore(tmp_path)
    store.set("notes", '[{"id": "1", "text": "ü"}]')
    assert store.get("notes") == '[{"id": "1", "text": "ü"}]'
    assert (tmp_path / "notes.json").exists()


def test_set_overwrites_and_leaves_no_temp_files(tmp_path):
    store = JsonFileStore(tmp_path)
    store.set("notes", "[]")
    store.set("notes", '[{"id": "1", "text": "a"}]')
    assert [p.name for p in tmp_path.iterdir()] == ["notes.json"]


def test_read_error(tmp_path):
    (tmp_path / "notes.json").mkdir()
    with pytest.raises(StoreReadError):
        JsonFileStore(tmp_path).get("notes")


def test_write_error(tmp_path):
    blocker = tmp_path / "file"
    blocker.write_text("x", encoding="utf-8")
    with pytest.raises(StoreWriteError):
        JsonFileStore(blocker / "sub").set("notes", "[]")


@pytest.mark.parametrize("key", ["", "../notes", ".hidden", "a/b"])
def test_bad_key_rejected(tmp_path, key):
    with pytest.raises(ValueError):
        JsonFileStore(tmp_path).path_for(key)


def test_memory_store():
    store = MemoryStore()
    assert store.get("notes") is None
    store.set("notes", "[]")
    assert store.get("notes") == "[]"


def test_open_default_store_creates_dir(tmp_path):
    store = open_default_store(tmp_path / "data")
    assert isinstance(store, JsonFileStore)
    assert (tmp_path / "data").is_dir()


def test_open_default_store_falls_back_to_memory(tmp_path):
    blocker = tmp_path / "file"
    blocker.write_text("x", encoding="utf-8")
    assert isinstance(open_default_store(blocker / "data"), MemoryStore)
