"""Fixed-size array of bits, for variable numbers of flags."""

from __future__ import annotations

from typing import Iterator


class BitArray:
    """A fixed number of bits, all initially unset."""

    __slots__ = ("_count", "_value")

    def __init__(self, bit_count: int) -> None:
        if bit_count < 1:
            raise ValueError("a bit array needs at least one bit")
        self._count = bit_count
        self._value = 0

    @property
    def _mask(self) -> int:
        return (1 << self._count) - 1

    def _check(self, bit: int) -> int:
        if not 0 <= bit < self._count:
            raise IndexError(f"bit {bit} out of range for {self._count} bits")
        return 1 << bit

    def _check_same_size(self, other: BitArray) -> None:
        if len(other) != self._count:
            raise ValueError("bit arrays differ in size")

    def __len__(self) -> int:
        return self._count

    def __getitem__(self, bit: int) -> bool:
        return bool(self._value & self._check(bit))

    def __iter__(self) -> Iterator[bool]:
        return (bool(self._value >> bit & 1) for bit in range(self._count))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BitArray):
            return NotImplemented
        return self._count == other._count and self._value == other._value

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        bits = "".join("1" if b else "0" for b in self)
        return f"BitArray({bits!r})"

    def set(self, bit: int) -> None:
        """Set one bit."""
        self._value |= self._check(bit)

    def unset(self, bit: int) -> None:
        """Clear one bit."""
        self._value &= ~self._check(bit)

    def toggle(self, bit: int) -> None:
        """Flip one bit."""
        self._value ^= self._check(bit)

    def set_from(self, other: BitArray) -> None:
        """Set every bit that is set in ``other``."""
        self._check_same_size(other)
        self._value |= other._value

    def unset_from(self, other: BitArray) -> None:
        """Clear every bit that is set in ``other``."""
        self._check_same_size(other)
        self._value &= ~other._value

    def toggle_from(self, other: BitArray) -> None:
        """Flip every bit that is set in ``other``."""
        self._check_same_size(other)
        self._value ^= other._value

    def _derived(self, value: int) -> BitArray:
        result = BitArray(self._count)
        result._value = value & self._mask
        return result

    def diff(self, other: BitArray) -> BitArray:
        """Bits that differ between the two arrays."""
        self._check_same_size(other)
        return self._derived(self._value ^ other._value)

    def diff_in_1(self, old: BitArray) -> BitArray:
        """Bits that changed from ``old`` and were set there (cleared bits)."""
        self._check_same_size(old)
        return self._derived((self._value ^ old._value) & old._value)

    def diff_in_0(self, old: BitArray) -> BitArray:
        """Bits that changed from ``old`` and were clear there (newly set bits)."""
        self._check_same_size(old)
        return self._derived((self._value ^ old._value) & ~old._value)

    def is_all_set(self) -> bool:
        return self._value == self._mask

    def is_all_unset(self) -> bool:
        return self._value == 0

    def set_all(self) -> None:
        self._value = self._mask

    def unset_all(self) -> None:
        self._value = 0

    def find_first_zero(self) -> int | None:
        """Index of the lowest clear bit, or ``None`` when every bit is set."""
        zeros = ~self._value & self._mask
        if not zeros:
            return None
        return (zeros & -zeros).bit_length() - 1