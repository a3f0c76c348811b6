"""In-place sorting of mutable sequences."""

from __future__ import annotations

from typing import MutableSequence


def insertion_sort(values: MutableSequence) -> None:
    """Sort ``values`` in place, ascending and stable."""
    for i in range(1, len(values)):
        value = values[i]
        j = i
        while j > 0 and values[j - 1] > value:
            values[j] = values[j - 1]
            j -= 1
        values[j] = value


def partition(values: MutableSequence, low: int, high: int) -> int:
    """Lomuto partition of ``values[low:high + 1]`` around ``values[high]``.

    Returns the final index of the pivot; everything before it is not greater
    and everything after it is greater.
    """
    pivot = values[high]
    i = low - 1
    for j in range(low, high):
        if values[j] <= pivot:
            i += 1
            values[i], values[j] = values[j], values[i]
    values[i + 1], values[high] = values[high], values[i + 1]
    return i + 1


def quicksort(values: MutableSequence, low: int = 0, high: int | None = None) -> None:
    """Sort ``values[low:high + 1]`` in place with an iterative quicksort.

    ``high`` defaults to the last index; an empty sequence is left as is.
    """
    if high is None:
        if not values:
            return
        high = len(values) - 1
    if high < low:
        raise ValueError(f"invalid range [{low}, {high}]")
    if low < 0 or high >= len(values):
        raise IndexError(f"range [{low}, {high}] outside sequence of {len(values)}")

    stack = [(low, high)]
    while stack:
        lo, hi = stack.pop()
        p = partition(values, lo, hi)
        if p - 1 > lo:
            stack.append((lo, p - 1))
        if p + 1 < hi:
            stack.append((p + 1, hi))