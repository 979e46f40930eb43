"""One-dimensional arrays: filling, printing and three in-place sorts."""

from __future__ import annotations

import random
from collections.abc import MutableSequence, Sequence


def _check_size(size: int) -> None:
    if size < 0:
        raise ValueError(f"vector size must not be negative, got {size}")


def ordered_vector(size: int) -> list[int]:
    """Return ``0, 1, ..., size - 1``."""
    _check_size(size)
    return list(range(size))


def back_ordered_vector(size: int) -> list[int]:
    """Return ``size, size - 1, ..., 1``."""
    _check_size(size)
    return list(range(size, 0, -1))


def random_vector(size: int, limit: int, rng: random.Random | None = None) -> list[int]:
    """Return ``size`` random values drawn from ``range(limit)``."""
    _check_size(size)
    if limit <= 0:
        raise ValueError(f"random limit must be positive, got {limit}")
    rng = rng if rng is not None else random.Random()
    return [rng.randrange(limit) for _ in range(size)]


def format_vector(vt: Sequence[int]) -> str:
    """Render a vector as space-terminated values followed by a blank line."""
    return "".join(f"{value} " for value in vt) + "\n\n"


def selection3_vector(vt: MutableSequence[int]) -> None:
    """Sort in place, placing the minimum and maximum of the unsorted span per pass."""
    left, right = 0, len(vt) - 1
    while left < right:
        lo = hi = left
        lo_val = hi_val = vt[left]
        for idx in range(left + 1, right + 1):
            value = vt[idx]
            if value < lo_val:
                lo, lo_val = idx, value
            elif value > hi_val:
                hi, hi_val = idx, value
        vt[lo] = vt[left]
        vt[left] = lo_val
        if hi == left:
            vt[lo] = vt[right]
        else:
            vt[hi] = vt[right]
        vt[right] = hi_val
        left += 1
        right -= 1


def selection5_vector(vt: MutableSequence[int]) -> None:
    """Sort in place by straight selection of the minimum."""
    for start in range(len(vt) - 1):
        lo, lo_val = start, vt[start]
        for idx in range(start + 1, len(vt)):
            if vt[idx] < lo_val:
                lo, lo_val = idx, vt[idx]
        if lo != start:
            vt[lo] = vt[start]
            vt[start] = lo_val


def exchange1_vector(vt: MutableSequence[int]) -> None:
    """Sort in place by plain bubble exchange."""
    for end in range(len(vt) - 1, 0, -1):
        for idx in range(end):
            if vt[idx] > vt[idx + 1]:
                vt[idx], vt[idx + 1] = vt[idx + 1], vt[idx]