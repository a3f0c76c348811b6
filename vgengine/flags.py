"""Bit-flag helpers for plain integers.

Flags are passed already shifted (e.g. ``1 << 5``), and the second operand
may hold several flags combined with ``|``.
"""

from __future__ import annotations


def set_flags(flags: int, flags2: int) -> int:
    """Turn on every flag of ``flags2``."""
    return flags | flags2


def unset_flags(flags: int, flags2: int) -> int:
    """Turn off every flag of ``flags2``."""
    return flags & ~flags2


def toggle_flags(flags: int, flags2: int) -> int:
    """Flip every flag of ``flags2``."""
    return flags ^ flags2


def get_flags(flags: int, flags2: int) -> int:
    """The subset of ``flags2`` that is set in ``flags``."""
    return flags & flags2


def diff_flags(new: int, old: int) -> int:
    """Flags that differ between two states."""
    return new ^ old


def diff_flags_in_1(new: int, old: int) -> int:
    """Flags that changed and were set in the old state (i.e. were cleared)."""
    return (new ^ old) & old


def diff_flags_in_0(new: int, old: int) -> int:
    """Flags that changed and were clear in the old state (i.e. were set)."""
    return (new ^ old) & ~old


def all_flags(bits: int) -> int:
    """A value with the lowest ``bits`` flags all set."""
    if bits < 1:
        raise ValueError("a flag word needs at least one bit")
    return (1 << bits) - 1


def flags_all_are_set(flags: int, bits: int = 8) -> bool:
    """True when every flag of a ``bits``-wide word is set."""
    return flags == all_flags(bits)


def flags_all_are_unset(flags: int) -> bool:
    """True when no flag is set."""
    return flags == 0