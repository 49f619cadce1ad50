from bisect import bisect_left, bisect_right

import pytest

from algokit.searching import contains, lower_bound, upper_bound

BOUNDS_DATA = [10, 10, 40, 40, 40, 50, 60]
SEARCH_DATA = [1, 5, 7, 18, 19]


def test_bounds_of_repeated_key():
    assert lower_bound(BOUNDS_DATA, 40) == 2
    assert upper_bound(BOUNDS_DATA, 40) == 5


@pytest.mark.parametrize("key", [0, 10, 25, 40, 50, 60, 70])
def test_bounds_match_bisect(key):
    assert lower_bound(BOUNDS_DATA, key) == bisect_left(BOUNDS_DATA, key)
    assert upper_bound(BOUNDS_DATA, key) == bisect_right(BOUNDS_DATA, key)


@pytest.mark.parametrize("key", [0, 10, 25, 40, 50, 60, 70])
def test_bounds_count_occurrences(key):
    span = upper_bound(BOUNDS_DATA, key) - lower_bound(BOUNDS_DATA, key)
    assert span == BOUNDS_DATA.count(key)


@pytest.mark.parametrize("key", [0, 10, 25, 40, 70])
def test_lower_bound_partitions(key):
    index = lower_bound(BOUNDS_DATA, key)
    assert all(value < key for value in BOUNDS_DATA[:index])
    assert all(value >= key for value in BOUNDS_DATA[index:])


def test_bounds_on_empty_sequence():
    assert lower_bound([], 5) == 0
    assert upper_bound([], 5) == 0


@pytest.mark.parametrize("key", SEARCH_DATA)
def test_contains_present(key):
    assert contains(SEARCH_DATA, key) is True


@pytest.mark.parametrize("key", [0, 2, 6, 17, 20, 100])
def test_contains_absent(key):
    assert contains(SEARCH_DATA, key) is False


def test_contains_empty():
    assert contains([], 1) is False