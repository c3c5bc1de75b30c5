import random

import pytest

from dsakit.sorting import bubble_sort, insertion_sort, selection_sort

SAMPLES = [
    [64, 34, 25, 12, 22, 11, 90],
    [12, 11, 13, 5, 6],
    [64, 25, 12, 22, 11],
    [3, -1, 3, 0, -7, 3],
    [1, 2, 3, 4],
    [9, 8, 7, 6, 5],
]


@pytest.mark.parametrize("values", SAMPLES)
def test_matches_builtin_sorted(values):
    expected = sorted(values)
    assert bubble_sort(values) == expected
    assert insertion_sort(values) == expected
    assert selection_sort(values) == expected


def test_input_is_left_unchanged():
    values = [64, 34, 25, 12, 22, 11, 90]
    original = list(values)
    bubble_sort(values)
    insertion_sort(values)
    selection_sort(values)
    assert values == original


def test_empty_and_single():
    assert bubble_sort([]) == insertion_sort([]) == selection_sort([]) == []
    assert bubble_sort([42]) == insertion_sort([42]) == selection_sort([42]) == [42]


def test_accepts_any_iterable():
    assert bubble_sort(x for x in (5, 1, 4)) == [1, 4, 5]
    assert insertion_sort(x for x in (5, 1, 4)) == [1, 4, 5]
    assert selection_sort(x for x in (5, 1, 4)) == [1, 4, 5]


def test_random_lists():
    rng = random.Random(1234)
    for _ in range(50):
        values = [rng.randint(-100, 100) for _ in range(rng.randint(0, 30))]
        expected = sorted(values)
        assert bubble_sort(values) == expected
        assert insertion_sort(values) == expected
        assert selection_sort(values) == expected


def test_result_is_ordered_permutation():
    values = ["pear", "apple", "fig", "apple"]
    for result in (bubble_sort(values), insertion_sort(values), selection_sort(values)):
        assert all(a <= b for a, b in zip(result, result[1:]))
        assert sorted(result) == sorted(values)