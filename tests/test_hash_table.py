import pytest

from vgengine.hash_table import (
    HashTable,
    default_hash,
    fnv1a,
    golden_hash,
    murmur32,
    murmur64,
)


def collide(_key):
    return 0


def test_fnv1a_empty_is_offset_basis():
    assert fnv1a(b"") == 14695981039346656037


def test_fnv1a_text_matches_bytes():
    assert fnv1a("engine") == fnv1a(b"engine")
    assert fnv1a("ab") != fnv1a("ba")


def test_golden_hash_of_one_is_constant():
    assert golden_hash(1) == 0x9E3779B97F4A7C15


def test_murmur_of_zero():
    assert murmur64(0) == 0
    assert murmur32(0) == 0


def test_murmur_stays_in_range():
    for x in (1, 12345, -1, 2**40):
        assert 0 <= murmur32(x) < 2**32
        assert 0 <= murmur64(x) < 2**64


def test_default_hash_dispatch():
    assert default_hash("key") == fnv1a("key")
    assert default_hash(99) == murmur64(99)


def test_capacity_must_be_pow2():
    with pytest.raises(ValueError):
        HashTable(3)


def test_slot_count_is_pow2_and_roomy():
    table = HashTable(8)
    assert table.capacity >= 8
    assert table.capacity & (table.capacity - 1) == 0


def test_insert_and_get():
    table = HashTable(8)
    table.insert("one", 1)
    table.insert(2, "two")
    assert table["one"] == 1
    assert table.get(2) == "two"
    assert table.get("missing", "dflt") == "dflt"
    assert len(table) == 2


def test_insert_overwrites():
    table = HashTable(4)
    table.insert("k", 1)
    table.insert("k", 5)
    assert table["k"] == 5
    assert len(table) == 1


def test_missing_key_raises():
    table = HashTable(4)
    table.insert("present", 1)
    with pytest.raises(KeyError):
        table.__getitem__("nothing")
    assert table.get("nothing", "absent") == "absent"
    assert len(table) == 1


def test_remove_leaves_probe_chain_intact():
    table = HashTable(2, collide)
    for key in ("a", "b", "c"):
        table.insert(key, key.upper())
    assert table.remove("b") is True
    assert "b" not in table
    assert table["c"] == "C"
    assert table.tombstone_count == 1


def test_remove_missing_does_nothing():
    table = HashTable(2)
    table.insert("a", 1)
    assert table.remove("z") is False
    assert len(table) == 1
    assert table.tombstone_count == 0


def test_insert_reuses_tombstone():
    table = HashTable(2, collide)
    table.insert("a", 1)
    table.insert("b", 2)
    table.remove("a")
    table.insert("c", 3)
    assert table.tombstone_count == 0
    assert table["b"] == 2
    assert table["c"] == 3


def test_full_table_raises():
    table = HashTable(2, collide)
    keys = [f"k{i}" for i in range(table.capacity)]
    for key in keys:
        table.insert(key, key)
    table.insert(keys[0], "updated")
    assert table[keys[0]] == "updated"
    with pytest.raises(OverflowError):
        table.insert("extra", 0)


def test_clear():
    table = HashTable(4)
    table.insert("x", 1)
    table.remove("x")
    table.insert("y", 2)
    table.clear()
    assert len(table) == 0
    assert "y" not in table
    assert table.tombstone_count == 0
    assert list(table) == []


def test_iteration_yields_live_keys():
    table = HashTable(8)
    for key in ("a", "b", "c"):
        table.insert(key, None)
    table.remove("b")
    assert sorted(table) == ["a", "c"]