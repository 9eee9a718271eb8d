# tests/test_table_cache.py
import logging

import pytest

from tabletree.cache.table_cache import (
    MANIFEST_VERSION,
    MANIFEST_VERSION_KEY,
    TableCache,
    TableCacheConfig,
    create_table_cache,
)


@pytest.fixture
def storage():
    return {MANIFEST_VERSION_KEY: MANIFEST_VERSION}


def test_get_table_reads_stored_json(storage):
    cache = TableCache(storage)
    storage["FOO"] = '{"foo": "bar"}'

    assert cache.get_table("FOO") == {"foo": "bar"}


def test_set_then_get_table(storage):
    cache = TableCache(storage)
    data = {"fooo": "barr", "rows": [["表", 1]]}

    cache.set_table("FOO2", data)

    assert cache.get_table("FOO2") == data
    assert "表" in storage["FOO2"]


def test_get_table_missing(storage):
    assert TableCache(storage).get_table("nope") is None


def test_get_table_undecodable_entry(storage, caplog):
    storage["BAD"] = "{not json"
    cache = TableCache(storage)

    with caplog.at_level(logging.WARNING, logger="table-traverse"):
        assert cache.get_table("BAD") is None

    assert "BAD" in caplog.text


def test_version_mismatch_clears_storage():
    storage = {MANIFEST_VERSION_KEY: "0", "OLD": '{"a": 1}'}

    cache = TableCache(storage, TableCacheConfig(manifest_version="2"))

    assert storage == {MANIFEST_VERSION_KEY: "2"}
    assert cache.get_table("OLD") is None


def test_matching_version_keeps_storage(storage):
    storage["KEEP"] = "[1, 2]"

    assert TableCache(storage).get_table("KEEP") == [1, 2]


def test_version_key_is_reserved(storage):
    cache = TableCache(storage)

    with pytest.raises(ValueError):
        cache.set_table(MANIFEST_VERSION_KEY, "x")
    assert cache.get_table(MANIFEST_VERSION_KEY) is None


def test_set_table_rejects_unserializable(storage):
    with pytest.raises(TypeError):
        TableCache(storage).set_table("FOO", object())


def test_disabled_cache():
    cache = TableCache()

    cache.set_table("FOO", {"a": 1})

    assert not cache.enabled
    assert cache.get_table("FOO") is None


def test_create_table_cache_in_memory():
    cache = create_table_cache()
    cache.set_table("FOO", {"a": 1})

    assert cache.enabled
    assert cache.get_table("FOO") == {"a": 1}
    cache.close()


def test_create_table_cache_persists(tmp_path):
    path = str(tmp_path / "tables")

    cache = create_table_cache(path)
    cache.set_table("FOO", {"rows": [1, 2]})
    cache.close()

    reopened = create_table_cache(path)
    assert reopened.get_table("FOO") == {"rows": [1, 2]}
    reopened.close()
