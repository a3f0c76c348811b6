"""Fixed number of slots with occupancy tracking."""

from __future__ import annotations

from typing import Any

from vgengine.bit_array import BitArray


class Pool:
    """Slots that can be acquired and released.

    When every slot is taken, :meth:`insert` overwrites the most recently
    used slot.
    """

    def __init__(self, num_slots: int) -> None:
        if num_slots < 1:
            raise ValueError("a pool needs at least one slot")
        self._slots: list[Any] = [None] * num_slots
        self._flags = BitArray(num_slots)
        self.mru: int | None = None
        self.first_free: int | None = 0

    @property
    def num_slots(self) -> int:
        return len(self._slots)

    def __len__(self) -> int:
        return len(self._slots)

    def _check(self, i: int) -> None:
        if not 0 <= i < len(self._slots):
            raise IndexError(f"slot {i} out of range for {len(self._slots)} slots")

    def acquire(self, i: int) -> None:
        """Mark slot ``i`` as occupied."""
        self._check(i)
        self._flags.set(i)
        if self.first_free == i:
            self.first_free = self._flags.find_first_zero()

    def release(self, i: int) -> None:
        """Mark slot ``i`` as free."""
        self._check(i)
        self._flags.unset(i)
        if self.first_free is None:
            self.first_free = i

    def __getitem__(self, i: int) -> Any:
        self._check(i)
        self.mru = i
        return self._slots[i]

    def __setitem__(self, i: int, value: Any) -> None:
        self._check(i)
        self.mru = i
        self._slots[i] = value

    def release_all(self) -> None:
        self._flags.unset_all()
        self.first_free = 0

    def acquire_all(self) -> None:
        self._flags.set_all()
        self.first_free = None

    def is_occupied(self, i: int) -> bool:
        self._check(i)
        return self._flags[i]

    def all_occupied(self) -> bool:
        return self.first_free is None

    def insert(self, value: Any) -> int:
        """Store ``value`` in the first free slot, or the most recently used one."""
        i = self.mru if self.first_free is None else self.first_free
        if i is None:
            raise IndexError("pool is full and no slot has been used yet")
        self.acquire(i)
        self[i] = value
        return i