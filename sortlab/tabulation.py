"""Tabulate three trigonometric functions, one worker thread per function."""

from __future__ import annotations

import argparse
import math
import threading
from collections.abc import Callable, Sequence

Row = tuple[float, float, float, float]

HEADER = "\tx\t|  sin^2+cos  | cos^2*(1+sin) | cos*(1+sin^2) |\n"
SEPARATOR = "----------------|-------------|---------------|---------------|\n"


def f1(x: float) -> float:
    """sin(x)^2 * cos(x)."""
    return math.sin(x) * math.sin(x) * math.cos(x)


def f2(x: float) -> float:
    """cos(x)^2 * (1 + sin(x))."""
    return math.cos(x) * math.cos(x) * (1 + math.sin(x))


def f3(x: float) -> float:
    """cos(x) * (1 + sin(x)^2)."""
    return math.cos(x) * (1 + math.sin(x) * math.sin(x))


def tabulate(a: float, h: float, n: int) -> list[Row]:
    """Evaluate f1, f2 and f3 at ``a + i*h`` for ``i`` in ``0..n``.

    Each function runs in its own thread; the threads and the caller meet
    at a barrier once a step's values are ready and again before the next step.
    """
    if n < 0:
        raise ValueError(f"step count must not be negative, got {n}")
    xs = [a + h * i for i in range(n + 1)]
    current = [0.0, 0.0, 0.0]
    functions: tuple[Callable[[float], float], ...] = (f1, f2, f3)
    barrier = threading.Barrier(len(functions) + 1)

    def worker(slot: int, fn: Callable[[float], float]) -> None:
        for x in xs:
            current[slot] = fn(x)
            barrier.wait()
            barrier.wait()

    threads = [
        threading.Thread(target=worker, args=(slot, fn), daemon=True)
        for slot, fn in enumerate(functions)
    ]
    for thread in threads:
        thread.start()

    rows: list[Row] = []
    for x in xs:
        barrier.wait()
        rows.append((x, current[0], current[1], current[2]))
        barrier.wait()

    for thread in threads:
        thread.join()
    return rows


def format_table(rows: Sequence[Row]) -> str:
    """Render tabulated rows between a header and a closing rule."""
    lines = [HEADER, SEPARATOR]
    lines.extend(
        f" {x:8.5f}\t| {v1:8.5f}    | {v2:8.5f}      | {v3:8.5f}      |\n"
        for x, v1, v2, v3 in rows
    )
    lines.append(SEPARATOR)
    return "".join(lines)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Tabulate three trigonometric functions.")
    parser.add_argument("--start", type=float, default=-2 * math.pi, help="first x")
    parser.add_argument("--step", type=float, default=2 * math.pi / 10, help="x increment")
    parser.add_argument("--steps", type=int, default=10, help="number of increments")
    args = parser.parse_args(argv)
    print(format_table(tabulate(args.start, args.step, args.steps)), end="")
    return 0