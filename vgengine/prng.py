"""Xorshift32 pseudo-random number generator."""

from __future__ import annotations

RANDOM_DEFAULT_SEED = 0xA5A5A5A5

_MASK32 = 0xFFFFFFFF


class Xorshift32:
    """32-bit xorshift generator; the state must never be zero."""

    def __init__(self, seed: int = RANDOM_DEFAULT_SEED) -> None:
        self.reseed(seed)

    @property
    def state(self) -> int:
        return self._state

    def reseed(self, seed: int) -> None:
        seed &= _MASK32
        if seed == 0:
            raise ValueError("xorshift32 seed must be non-zero")
        self._state = seed

    def next_u32(self) -> int:
        """Advance the state and return it."""
        x = self._state
        x ^= (x << 13) & _MASK32
        x ^= x >> 17
        x ^= (x << 5) & _MASK32
        self._state = x
        return x

    def random01(self) -> float:
        """A float in ``[0, 1)`` with 24 bits of precision."""
        return (self.next_u32() >> 8) * (1.0 / 16777216.0)

    def randint(self, low: int, high: int) -> int:
        """An integer in ``[low, high]``."""
        if high < low:
            raise ValueError(f"empty range [{low}, {high}]")
        return low + self.next_u32() % (high - low + 1)

    def uniform(self, low: float, high: float) -> float:
        """A float in ``[low, high)``."""
        if high < low:
            raise ValueError(f"empty range [{low}, {high}]")
        return low + self.random01() * (high - low)