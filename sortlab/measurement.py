"""Repeated timing of a sort and a trimmed average of the timings."""

from __future__ import annotations

import time
from collections.abc import Callable, Sequence
from enum import Enum
from typing import Any

MEASUREMENTS = 28
REJECTED = 2
EXTREMES = 3


class Order(Enum):
    """How the data is arranged before it is sorted."""

    ORDERED = 1
    BACK_ORDERED = 2
    RANDOM = 3

    @property
    def label(self) -> str:
        return _LABELS[self]


_LABELS = {
    Order.ORDERED: "Ordered",
    Order.BACK_ORDERED: "Back-ordered",
    Order.RANDOM: "Random",
}


def trimmed_mean(
    results: Sequence[float],
    rejected: int = REJECTED,
    extremes: int = EXTREMES,
) -> float:
    """Average ``results`` after dropping the first ``rejected`` entries
    and then the ``extremes`` smallest and largest of the rest."""
    if rejected < 0 or extremes < 0:
        raise ValueError("rejected and extremes must not be negative")
    kept = sorted(list(results)[rejected:])
    if len(kept) <= 2 * extremes:
        raise ValueError(
            f"{len(results)} results leave nothing to average after discarding "
            f"{rejected} and trimming {extremes} from each end"
        )
    middle = kept[extremes : len(kept) - extremes]
    return sum(middle) / len(middle)


def measure(
    sort: Callable[[Any], object],
    fill: Callable[[], Any],
    count: int = MEASUREMENTS,
) -> list[float]:
    """Sort freshly filled data ``count`` times; return each sort's duration in seconds."""
    if count <= 0:
        raise ValueError(f"measurement count must be positive, got {count}")
    timings = []
    for _ in range(count):
        data = fill()
        start = time.perf_counter()
        sort(data)
        timings.append(time.perf_counter() - start)
    return timings


def average_time(
    sort: Callable[[Any], object],
    fill: Callable[[], Any],
    count: int = MEASUREMENTS,
    rejected: int = REJECTED,
    extremes: int = EXTREMES,
) -> float:
    """Measure ``sort`` ``count`` times and return the trimmed mean duration."""
    return trimmed_mean(measure(sort, fill, count), rejected, extremes)