import itertools
import random

import pytest

from sortlab.matrix import column_order
from sortlab.table import (
    TableRow,
    format_rows,
    matrix_rows,
    render_table,
    vector_rows,
)


def _counting_timer():
    counter = itertools.count()
    return lambda sort, fill: float(next(counter))


def test_matrix_rows_measure_ordered_random_back_ordered_in_turn():
    rows = matrix_rows(2, 3, 4, random.Random(1), _counting_timer())
    assert [row.name for row in rows] == ["Selection3", "Selection5", "Exchange1"]
    assert rows[0] == TableRow("Selection3", 0.0, 1.0, 2.0)
    assert rows[2] == TableRow("Exchange1", 6.0, 7.0, 8.0)


def test_matrix_rows_sorts_each_fill():
    def timer(sort, fill):
        data = fill()
        sort(data)
        return float(all(cells == sorted(cells) for cells in column_order(data)))

    rows = matrix_rows(2, 3, 5, random.Random(4), timer)
    for row in rows:
        assert (row.ordered, row.random, row.back_ordered) == (1.0, 1.0, 1.0)


def test_vector_rows_sorts_each_fill():
    def timer(sort, fill):
        data = fill()
        sort(data)
        return float(data == sorted(data))

    rows = vector_rows(9, 24, random.Random(2), timer)
    assert len(rows) == 3
    for row in rows:
        assert (row.ordered, row.random, row.back_ordered) == (1.0, 1.0, 1.0)


def test_vector_rows_random_fill_respects_limit():
    rows = vector_rows(50, 5, random.Random(7), lambda sort, fill: float(max(fill())))
    assert all(row.random < 5 for row in rows)
    assert all(row.ordered == 49.0 for row in rows)
    assert all(row.back_ordered == 50.0 for row in rows)


def test_format_rows_layout():
    text = format_rows("Title", [TableRow("Selection3", 1.5, 2.0, 0.25)])
    lines = text.split("\n")
    assert lines[0] == "\t\t\t\t  Title"
    assert lines[2] == "\t\t\tOrdered\t\t\tRandom\t\t\tBack-ordered"
    assert lines[4] == "Selection3\t\t1.500000\t\t2.000000\t\t0.250000"


def test_format_rows_one_block_per_row():
    rows = [TableRow(name, 0.0, 0.0, 0.0) for name in ("A", "B", "C")]
    text = format_rows("T", rows)
    assert text.count("\t\t0.000000\t\t0.000000\t\t0.000000\n\n") == 3


def test_render_table_contains_both_tables():
    text = render_table(1, 2, 2, 4, random.Random(0))
    assert "Table for the array: P = 1, M = 2, N = 2" in text
    assert "Table for the vector: V = 4" in text
    assert text.count("Selection3") == 2
    assert text.count("Exchange1") == 2
    assert text.index("array") < text.index("vector")


def test_render_table_rejects_bad_dimensions():
    with pytest.raises(ValueError):
        render_table(0, 2, 2, 4, random.Random(0))