import random

import pytest

from sortlab.vector import (
    back_ordered_vector,
    exchange1_vector,
    format_vector,
    ordered_vector,
    random_vector,
    selection3_vector,
    selection5_vector,
)

SORTS = [selection3_vector, selection5_vector, exchange1_vector]


def test_ordered_vector_counts_from_zero():
    assert ordered_vector(10) == list(range(10))


def test_back_ordered_vector_counts_down_to_one():
    vt = back_ordered_vector(10)
    assert vt[0] == 10
    assert vt[-1] == 1
    assert sorted(vt) == list(range(1, 11))


def test_random_vector_in_range_and_reproducible():
    first = random_vector(50, 24, random.Random(7))
    second = random_vector(50, 24, random.Random(7))
    assert first == second
    assert len(first) == 50
    assert all(0 <= v < 24 for v in first)


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        ordered_vector(-1)
    with pytest.raises(ValueError):
        back_ordered_vector(-3)


def test_non_positive_limit_rejected():
    with pytest.raises(ValueError):
        random_vector(5, 0, random.Random(1))


def test_format_vector():
    assert format_vector([1, 2, 3]) == "1 2 3 \n\n"
    assert format_vector([]) == "\n\n"


@pytest.mark.parametrize("sort", SORTS)
@pytest.mark.parametrize("fill", [ordered_vector, back_ordered_vector])
@pytest.mark.parametrize("size", [0, 1, 2, 3, 10, 11])
def test_sorts_fixed_fills(sort, fill, size):
    vt = fill(size)
    expected = sorted(vt)
    sort(vt)
    assert vt == expected


@pytest.mark.parametrize("sort", SORTS)
@pytest.mark.parametrize("seed", range(8))
def test_sorts_random_fill(sort, seed):
    rng = random.Random(seed)
    vt = random_vector(rng.randint(0, 30), 6, rng)
    expected = sorted(vt)
    sort(vt)
    assert vt == expected