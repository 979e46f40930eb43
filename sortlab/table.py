"""Timing tables for all sorts over ordered, random and back-ordered data."""

from __future__ import annotations

import random
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any

from sortlab.matrix import (
    back_ordered_matrix,
    exchange1_matrix,
    ordered_matrix,
    random_matrix,
    selection3_matrix,
    selection5_matrix,
)
from sortlab.measurement import Order, average_time
from sortlab.vector import (
    back_ordered_vector,
    exchange1_vector,
    ordered_vector,
    random_vector,
    selection3_vector,
    selection5_vector,
)

Timer = Callable[[Callable[[Any], object], Callable[[], Any]], float]

COLUMNS = (Order.ORDERED, Order.RANDOM, Order.BACK_ORDERED)

_MATRIX_SORTS = (
    ("Selection3", selection3_matrix),
    ("Selection5", selection5_matrix),
    ("Exchange1", exchange1_matrix),
)

_VECTOR_SORTS = (
    ("Selection3", selection3_vector),
    ("Selection5", selection5_vector),
    ("Exchange1", exchange1_vector),
)


@dataclass(frozen=True)
class TableRow:
    """Average times of one algorithm for each arrangement of the data."""

    name: str
    ordered: float
    random: float
    back_ordered: float


def _rows(
    sorts: Sequence[tuple[str, Callable[[Any], object]]],
    fills: dict[Order, Callable[[], Any]],
    timer: Timer,
) -> list[TableRow]:
    rows = []
    for name, sort in sorts:
        times = {order: timer(sort, fills[order]) for order in COLUMNS}
        rows.append(
            TableRow(name, times[Order.ORDERED], times[Order.RANDOM], times[Order.BACK_ORDERED])
        )
    return rows


def matrix_rows(
    p: int,
    m: int,
    n: int,
    rng: random.Random | None = None,
    timer: Timer | None = None,
) -> list[TableRow]:
    """Time every matrix sort on a ``p`` x ``m`` x ``n`` array."""
    rng = rng if rng is not None else random.Random()
    fills = {
        Order.ORDERED: lambda: ordered_matrix(p, m, n),
        Order.RANDOM: lambda: random_matrix(p, m, n, rng),
        Order.BACK_ORDERED: lambda: back_ordered_matrix(p, m, n),
    }
    return _rows(_MATRIX_SORTS, fills, timer or average_time)


def vector_rows(
    size: int,
    limit: int,
    rng: random.Random | None = None,
    timer: Timer | None = None,
) -> list[TableRow]:
    """Time every vector sort on a vector of ``size`` values."""
    rng = rng if rng is not None else random.Random()
    fills = {
        Order.ORDERED: lambda: ordered_vector(size),
        Order.RANDOM: lambda: random_vector(size, limit, rng),
        Order.BACK_ORDERED: lambda: back_ordered_vector(size),
    }
    return _rows(_VECTOR_SORTS, fills, timer or average_time)


def format_rows(title: str, rows: Sequence[TableRow]) -> str:
    """Render a titled table of rows."""
    parts = [
        f"\t\t\t\t  {title}\n\n",
        "\t\t\t" + "\t\t\t".join(order.label for order in COLUMNS) + "\n\n",
    ]
    parts.extend(
        f"{row.name}\t\t{row.ordered:f}\t\t{row.random:f}\t\t{row.back_ordered:f}\n\n"
        for row in rows
    )
    return "".join(parts)


def render_table(
    p: int,
    m: int,
    n: int,
    v: int,
    rng: random.Random | None = None,
) -> str:
    """Measure all sorts on a matrix and a vector and render both tables."""
    rng = rng if rng is not None else random.Random()
    array_title = f"Table for the array: P = {p}, M = {m}, N = {n}"
    vector_title = f"Table for the vector: V = {v}"
    return format_rows(array_title, matrix_rows(p, m, n, rng)) + format_rows(
        vector_title, vector_rows(v, p * m * n, rng)
    )