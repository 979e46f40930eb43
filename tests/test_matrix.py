import random

import pytest

from sortlab.matrix import (
    back_ordered_matrix,
    column_order,
    exchange1_matrix,
    format_matrix,
    ordered_matrix,
    random_matrix,
    selection3_matrix,
    selection5_matrix,
)


def test_ordered_matrix_column_major():
    mt = ordered_matrix(2, 3, 4)
    assert column_order(mt) == [list(range(1, 13)), list(range(13, 25))]
    assert mt[0][0][1] == 4


def test_back_ordered_matrix_column_major():
    mt = back_ordered_matrix(2, 3, 4)
    assert column_order(mt) == [list(range(24, 12, -1)), list(range(12, 0, -1))]


def test_shape():
    mt = ordered_matrix(2, 3, 4)
    assert len(mt) == 2
    assert all(len(layer) == 3 for layer in mt)
    assert all(len(row) == 4 for layer in mt for row in layer)


def test_random_matrix_in_range_and_reproducible():
    first = random_matrix(2, 3, 4, random.Random(3))
    second = random_matrix(2, 3, 4, random.Random(3))
    assert first == second
    assert all(0 <= v < 24 for layer in column_order(first) for v in layer)


@pytest.mark.parametrize("dims", [(0, 3, 4), (2, 0, 4), (2, 3, 0), (-1, 3, 4)])
def test_bad_dimensions_rejected(dims):
    with pytest.raises(ValueError):
        ordered_matrix(*dims)
    with pytest.raises(ValueError):
        random_matrix(*dims, random.Random(0))


def test_format_matrix():
    assert format_matrix(ordered_matrix(1, 2, 2)) == "\nP = 0\n1 3 \n2 4 \n"


def test_format_matrix_layer_headings():
    text = format_matrix(ordered_matrix(2, 3, 4))
    assert "\nP = 0\n" in text
    assert "\nP = 1\n" in text
    assert text.count("\n") == 2 * 2 + 2 * 3


def _check_sorted(mt, original):
    for before, after in zip(original, column_order(mt)):
        assert after == sorted(before)


@pytest.mark.parametrize("sort", [selection3_matrix, selection5_matrix, exchange1_matrix])
@pytest.mark.parametrize("fill", [ordered_matrix, back_ordered_matrix])
@pytest.mark.parametrize("dims", [(2, 3, 4), (1, 2, 2), (1, 5, 6), (3, 1, 2)])
def test_sorts_fixed_fills_even_columns(sort, fill, dims):
    mt = fill(*dims)
    original = column_order(mt)
    sort(mt)
    _check_sorted(mt, original)


@pytest.mark.parametrize("sort", [selection3_matrix, selection5_matrix, exchange1_matrix])
@pytest.mark.parametrize("seed", range(6))
def test_sorts_random_fill_even_columns(sort, seed):
    mt = random_matrix(2, 3, 4, random.Random(seed))
    original = column_order(mt)
    sort(mt)
    _check_sorted(mt, original)


@pytest.mark.parametrize("sort", [selection5_matrix, exchange1_matrix])
@pytest.mark.parametrize("dims", [(2, 3, 3), (1, 4, 5), (1, 1, 1)])
def test_straight_sorts_odd_columns(sort, dims):
    mt = random_matrix(*dims, random.Random(11))
    original = column_order(mt)
    sort(mt)
    _check_sorted(mt, original)


def test_layers_sorted_independently():
    mt = back_ordered_matrix(2, 3, 4)
    selection5_matrix(mt)
    assert column_order(mt)[0] == list(range(13, 25))
    assert column_order(mt)[1] == list(range(1, 13))