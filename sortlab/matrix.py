"""Three-dimensional arrays sorted layer by layer in column-major order.

A matrix is a list of ``p`` layers; each layer is a list of ``m`` rows of
``n`` columns, addressed as ``mt[k][i][j]``.  Within a layer the sort order
runs down each column, then on to the next column.
"""

from __future__ import annotations

import random
from collections.abc import Callable
from itertools import chain

from sortlab.vector import exchange1_vector, selection5_vector

Layer = list[list[int]]
Matrix = list[Layer]


def _check_dims(p: int, m: int, n: int) -> None:
    if p <= 0 or m <= 0 or n <= 0:
        raise ValueError(f"matrix dimensions must be positive, got {p}x{m}x{n}")


def _flatten(layer: Layer) -> list[int]:
    """Return the layer's cells in column-major order."""
    if not layer:
        return []
    return [row[j] for j in range(len(layer[0])) for row in layer]


def _store(layer: Layer, cells: list[int]) -> None:
    """Write column-major ``cells`` back into ``layer``."""
    m = len(layer)
    for pos, value in enumerate(cells):
        layer[pos % m][pos // m] = value


def _build(p: int, m: int, n: int, values: Callable[[int, int, int], int]) -> Matrix:
    mt: Matrix = [[[0] * n for _ in range(m)] for _ in range(p)]
    for k in range(p):
        for j in range(n):
            for i in range(m):
                mt[k][i][j] = values(k, i, j)
    return mt


def ordered_matrix(p: int, m: int, n: int) -> Matrix:
    """Fill with ``1 .. p*m*n`` in column-major order, layer after layer."""
    _check_dims(p, m, n)
    return _build(p, m, n, lambda k, i, j: k * m * n + j * m + i + 1)


def back_ordered_matrix(p: int, m: int, n: int) -> Matrix:
    """Fill with ``p*m*n .. 1`` in column-major order, layer after layer."""
    _check_dims(p, m, n)
    total = p * m * n
    return _build(p, m, n, lambda k, i, j: total - (k * m * n + j * m + i))


def random_matrix(p: int, m: int, n: int, rng: random.Random | None = None) -> Matrix:
    """Fill with random values from ``range(p*m*n)``."""
    _check_dims(p, m, n)
    rng = rng if rng is not None else random.Random()
    limit = p * m * n
    return _build(p, m, n, lambda k, i, j: rng.randrange(limit))


def format_matrix(mt: Matrix) -> str:
    """Render each layer under a ``P = k`` heading, one row per line."""
    parts = []
    for k, layer in enumerate(mt):
        parts.append(f"\nP = {k}\n")
        parts.extend("".join(f"{value} " for value in row) + "\n" for row in layer)
    return "".join(parts)


def column_order(mt: Matrix) -> list[list[int]]:
    """Return every layer's cells as one column-major list."""
    return [_flatten(layer) for layer in mt]


def _selection3_layer(cells: list[int], m: int, n: int) -> None:
    left, right = 0, n - 1
    a_row, b_row = 0, m - 1
    while left <= right:
        a = left * m + a_row
        b = right * m + b_row
        scan = chain(
            range(a, left * m + m),
            range((left + 1) * m, right * m),
            range(right * m, b + 1),
        )
        lo = hi = a
        lo_val = hi_val = cells[a]
        for idx in scan:
            value = cells[idx]
            if value < lo_val:
                lo, lo_val = idx, value
            elif value > hi_val:
                hi, hi_val = idx, value
        cells[lo] = cells[a]
        cells[a] = lo_val
        if hi == a:
            cells[lo] = cells[b]
        else:
            cells[hi] = cells[b]
        cells[b] = hi_val
        a_row += 1
        b_row -= 1
        if a_row == m:
            left += 1
            right -= 1
            a_row, b_row = 0, m - 1

    # An odd column count leaves the middle column for a final pass.
    if left - right == 2:
        base = (left - 1) * m
        top, bottom = 0, m - 1
        while top < bottom:
            lo = hi = top
            lo_val = hi_val = cells[base + top]
            for row in range(top + 1, bottom + 1):
                value = cells[base + row]
                if value < lo_val:
                    lo, lo_val = row, value
                elif value > hi_val:
                    hi, hi_val = row, value
            cells[base + lo] = cells[base + top]
            cells[base + top] = lo_val
            if hi == top:
                cells[base + lo] = cells[base + bottom]
            else:
                cells[base + hi] = cells[base + bottom]
            top += 1
            bottom -= 1


def selection3_matrix(mt: Matrix) -> None:
    """Sort each layer in place, placing a minimum and a maximum per pass."""
    for layer in mt:
        if not layer or not layer[0]:
            continue
        cells = _flatten(layer)
        _selection3_layer(cells, len(layer), len(layer[0]))
        _store(layer, cells)


def selection5_matrix(mt: Matrix) -> None:
    """Sort each layer in place by straight selection of the minimum."""
    for layer in mt:
        cells = _flatten(layer)
        selection5_vector(cells)
        _store(layer, cells)


def exchange1_matrix(mt: Matrix) -> None:
    """Sort each layer in place by bubble exchange."""
    for layer in mt:
        cells = _flatten(layer)
        exchange1_vector(cells)
        _store(layer, cells)