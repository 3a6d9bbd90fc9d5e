"""Tests for key-value stores and the session store."""

import json

import pytest

from safeplots.storage import (
    InMemoryKeyValueStore,
    JsonFileKeyValueStore,
    KeyValueStore,
    SessionStore,
)


@pytest.fixture(params=["memory", "file"])
def store(request, tmp_path) -> KeyValueStore:
    if request.param == "memory":
        return InMemoryKeyValueStore()
    return JsonFileKeyValueStore(tmp_path / "state" / "kv.json")


def test_stores_satisfy_protocol(store):
    assert isinstance(store, KeyValueStore)


def test_set_get_remove(store):
    assert store.get("k") is None

    store.set("k", "v1")
    store.set("k", "v2")
    assert store.get("k") == "v2"

    store.remove("k")
    store.remove("k")
    assert store.get("k") is None


def test_file_store_persists_across_instances(tmp_path):
    path = tmp_path / "kv.json"
    JsonFileKeyValueStore(path).set("safeplots_user", '{"id": "u-1"}')

    assert JsonFileKeyValueStore(path).get("safeplots_user") == '{"id": "u-1"}'
    assert json.loads(path.read_text(encoding="utf-8")) == {"safeplots_user": '{"id": "u-1"}'}


def test_file_store_malformed_file_reads_empty(tmp_path):
    path = tmp_path / "kv.json"
    path.write_text("{not json", encoding="utf-8")
    store = JsonFileKeyValueStore(path)

    assert store.get("anything") is None
    store.set("k", "v")
    assert store.get("k") == "v"


def test_file_store_leaves_no_temp_files(tmp_path):
    store = JsonFileKeyValueStore(tmp_path / "kv.json")
    store.set("a", "1")
    store.set("b", "2")

    assert [p.name for p in tmp_path.iterdir()] == ["kv.json"]


def test_session_round_trip(kv_store):
    session = SessionStore(kv_store)
    assert session.current_user() is None
    assert not session.is_authenticated()

    session.save({"id": "u-1", "token": "abc"})

    assert session.is_authenticated()
    assert session.current_user() == {"id": "u-1", "token": "abc"}
    assert session.token() == "abc"

    session.clear()
    assert session.current_user() is None
    assert session.token() is None


def test_session_without_token(kv_store):
    session = SessionStore(kv_store)
    session.save({"id": "u-1"})
    assert session.token() is None


def test_corrupt_session_reads_as_signed_out(kv_store):
    kv_store.set("safeplots_user", "{broken")
    session = SessionStore(kv_store)

    assert session.current_user() is None
    assert session.token() is None
