"""Open-addressing hash table with linear probing and tombstones.

The table never grows: it is sized once from the expected capacity and
raises when an insert finds no free slot.
"""

from __future__ import annotations

from typing import Any, Callable, Hashable, Iterator

from vgengine.basic import align_up, floori, is_pow2

HASH_TABLE_LOAD_FACTOR = 0.7

_MASK32 = 0xFFFFFFFF
_MASK64 = 0xFFFFFFFFFFFFFFFF
_GOLDEN = 0x9E3779B97F4A7C15
_FNV_OFFSET = 14695981039346656037
_FNV_PRIME = 1099511628211


def golden_hash(x: int) -> int:
    """Golden-ratio multiplicative hash, meant for small integer keys."""
    return ((x & _MASK64) * _GOLDEN) & _MASK64


def murmur32(x: int) -> int:
    """32-bit MurmurHash3 finalizer."""
    x &= _MASK32
    x ^= x >> 16
    x = (x * 0x85EBCA6B) & _MASK32
    x ^= x >> 13
    x = (x * 0xC2B2AE35) & _MASK32
    x ^= x >> 16
    return x


def murmur64(x: int) -> int:
    """64-bit MurmurHash3 finalizer."""
    x &= _MASK64
    x ^= x >> 33
    x = (x * 0xFF51AFD7ED558CCD) & _MASK64
    x ^= x >> 33
    x = (x * 0xC4CEB9FE1A85EC53) & _MASK64
    x ^= x >> 33
    return x


def fnv1a(data: bytes | str) -> int:
    """64-bit FNV-1a hash of a byte string (text is hashed as UTF-8)."""
    if isinstance(data, str):
        data = data.encode("utf-8")
    h = _FNV_OFFSET
    for byte in data:
        h = ((h ^ byte) * _FNV_PRIME) & _MASK64
    return h


def default_hash(key: Hashable) -> int:
    """Hash used when a table is given no hasher."""
    if isinstance(key, (str, bytes)):
        return fnv1a(key)
    if isinstance(key, int):
        return murmur64(key)
    return murmur64(hash(key))


class _Slot:
    __slots__ = ("_name",)

    def __init__(self, name: str) -> None:
        self._name = name

    def __repr__(self) -> str:
        return self._name


_EMPTY = _Slot("<empty>")
_TOMBSTONE = _Slot("<tombstone>")


class HashTable:
    """Fixed-size map from keys to values."""

    def __init__(
        self, capacity: int, hasher: Callable[[Any], int] = default_hash
    ) -> None:
        if not is_pow2(capacity):
            raise ValueError(f"capacity {capacity} is not a power of two")
        wanted = align_up(floori(capacity * (1 + HASH_TABLE_LOAD_FACTOR)), 2)
        slots = 1
        while slots < wanted:
            slots <<= 1
        self._hasher = hasher
        self._keys: list[Any] = [_EMPTY] * slots
        self._values: list[Any] = [None] * slots
        self._used = 0
        self.tombstone_count = 0

    @property
    def capacity(self) -> int:
        """Number of slots in the table."""
        return len(self._keys)

    def _find_slot(self, key: Any) -> tuple[int | None, bool]:
        mask = len(self._keys) - 1
        index = self._hasher(key) & mask
        tombstone: int | None = None
        for _ in range(len(self._keys)):
            current = self._keys[index]
            if current is _EMPTY:
                return (index if tombstone is None else tombstone), False
            if current is _TOMBSTONE:
                if tombstone is None:
                    tombstone = index
            elif current == key:
                return index, True
            index = (index + 1) & mask
        return tombstone, False

    def insert(self, key: Any, value: Any) -> None:
        """Insert ``key`` or replace its value."""
        index, found = self._find_slot(key)
        if index is None:
            raise OverflowError("hash table is full")
        if not found:
            if self._keys[index] is _TOMBSTONE:
                self.tombstone_count -= 1
            self._used += 1
        self._keys[index] = key
        self._values[index] = value

    def remove(self, key: Any) -> bool:
        """Remove ``key``; returns whether it was present."""
        index, found = self._find_slot(key)
        if not found:
            return False
        self._keys[index] = _TOMBSTONE
        self._values[index] = None
        self.tombstone_count += 1
        self._used -= 1
        return True

    def get(self, key: Any, default: Any = None) -> Any:
        index, found = self._find_slot(key)
        return self._values[index] if found else default

    def __getitem__(self, key: Any) -> Any:
        index, found = self._find_slot(key)
        if not found:
            raise KeyError(key)
        return self._values[index]

    def __contains__(self, key: Any) -> bool:
        return self._find_slot(key)[1]

    def __len__(self) -> int:
        return self._used

    def __iter__(self) -> Iterator[Any]:
        return (k for k in self._keys if k is not _EMPTY and k is not _TOMBSTONE)

    def clear(self) -> None:
        """Remove every key."""
        self._keys = [_EMPTY] * len(self._keys)
        self._values = [None] * len(self._values)
        self._used = 0
        self.tombstone_count = 0