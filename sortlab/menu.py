"""Interactive menu for demonstrating and timing the sorts."""

from __future__ import annotations

import argparse
import random
import sys
from collections.abc import Callable, Sequence
from enum import Enum
from typing import TextIO

from sortlab.matrix import (
    Matrix,
    back_ordered_matrix,
    exchange1_matrix,
    format_matrix,
    ordered_matrix,
    random_matrix,
    selection3_matrix,
    selection5_matrix,
)
from sortlab.measurement import Order, average_time
from sortlab.table import render_table
from sortlab.vector import (
    back_ordered_vector,
    exchange1_vector,
    format_vector,
    ordered_vector,
    random_vector,
    selection3_vector,
    selection5_vector,
)

P = 2
M = 3
N = 4
V = 10

MAIN_OPTIONS = ("selection3", "selection5", "exchange1", "Table&Exit")
SUB_OPTIONS = ("Ordered", "Back-ordered", "Random", "Back to main menu")
SUB_ORDERS = (Order.ORDERED, Order.BACK_ORDERED, Order.RANDOM)
QUIT_WORDS = frozenset({"q", "quit", "exit"})


class Algorithm(Enum):
    """The sorting algorithms offered by the menu."""

    SELECTION3 = "selection3"
    SELECTION5 = "selection5"
    EXCHANGE1 = "exchange1"

    @property
    def matrix_sort(self) -> Callable[[Matrix], None]:
        return _MATRIX_SORTS[self]

    @property
    def vector_sort(self) -> Callable[[list[int]], None]:
        return _VECTOR_SORTS[self]


_MATRIX_SORTS = {
    Algorithm.SELECTION3: selection3_matrix,
    Algorithm.SELECTION5: selection5_matrix,
    Algorithm.EXCHANGE1: exchange1_matrix,
}

_VECTOR_SORTS = {
    Algorithm.SELECTION3: selection3_vector,
    Algorithm.SELECTION5: selection5_vector,
    Algorithm.EXCHANGE1: exchange1_vector,
}


def _matrix_fill(order: Order, rng: random.Random) -> Callable[[], Matrix]:
    if order is Order.ORDERED:
        return lambda: ordered_matrix(P, M, N)
    if order is Order.BACK_ORDERED:
        return lambda: back_ordered_matrix(P, M, N)
    return lambda: random_matrix(P, M, N, rng)


def _vector_fill(order: Order, rng: random.Random) -> Callable[[], list[int]]:
    if order is Order.ORDERED:
        return lambda: ordered_vector(V)
    if order is Order.BACK_ORDERED:
        return lambda: back_ordered_vector(V)
    return lambda: random_vector(V, P * M * N, rng)


def run_demo(
    algorithm: Algorithm,
    order: Order,
    out: TextIO | None = None,
    rng: random.Random | None = None,
) -> tuple[Matrix, list[int]]:
    """Show a matrix and a vector before and after sorting, with average times.

    Returns the sorted matrix and vector.
    """
    out = out if out is not None else sys.stdout
    rng = rng if rng is not None else random.Random()
    fill_matrix = _matrix_fill(order, rng)
    fill_vector = _vector_fill(order, rng)

    out.write(
        f"You chose {order.label.lower()} array and {algorithm.value} sorting\n"
    )
    out.write("3D array before:\n")
    mt = fill_matrix()
    out.write(format_matrix(mt))
    out.write("After sorting:\n")
    algorithm.matrix_sort(mt)
    out.write(format_matrix(mt))
    elapsed = average_time(algorithm.matrix_sort, fill_matrix)
    out.write(f"  Array[{P}][{M}][{N}], Time= {elapsed:f}\n\n")

    out.write("Vector array before:\n")
    vt = fill_vector()
    out.write(format_vector(vt))
    out.write("After sorting:\n")
    algorithm.vector_sort(vt)
    out.write(format_vector(vt))
    elapsed = average_time(algorithm.vector_sort, fill_vector)
    out.write(f"Vector`s size= {V}: Time= {elapsed:f}\n")
    return mt, vt


def choose(
    options: Sequence[str],
    prompt: str,
    read: Callable[[str], str] = input,
) -> int | None:
    """Ask until one of ``options`` is picked by its number.

    Returns the zero-based index of the choice, or None when the user quits
    or input runs out.
    """
    if not options:
        raise ValueError("there must be at least one option")
    listing = "".join(f"  {number}. {option}\n" for number, option in enumerate(options, 1))
    text = f"{prompt}\n{listing}Choice (q to quit): "
    while True:
        try:
            answer = read(text).strip()
        except EOFError:
            return None
        if answer.lower() in QUIT_WORDS:
            return None
        if answer.isdigit() and 1 <= int(answer) <= len(options):
            return int(answer) - 1
        text = f"Please enter a number from 1 to {len(options)}.\n{prompt}\n{listing}Choice (q to quit): "


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Demonstrate and time sorting algorithms.")
    parser.add_argument("--seed", type=int, default=None, help="seed for random data")
    args = parser.parse_args(argv)
    rng = random.Random(args.seed)
    algorithms = list(Algorithm)

    while True:
        picked = choose(MAIN_OPTIONS, "Select an option:", input)
        if picked is None:
            return 0
        if picked == len(MAIN_OPTIONS) - 1:
            print(render_table(P, M, N, V, rng), end="")
            return 0
        algorithm = algorithms[picked]
        while True:
            sub = choose(SUB_OPTIONS, "Select how the data is arranged:", input)
            if sub is None:
                return 0
            if sub == len(SUB_OPTIONS) - 1:
                break
            run_demo(algorithm, SUB_ORDERS[sub], sys.stdout, rng)