from hypothesis import given
from hypothesis import strategies as st

from cpbook.search import count_in_range, lower_bound, upper_bound

sorted_lists = st.lists(st.integers(-50, 50), max_size=40).map(sorted)


@given(sorted_lists, st.integers(-60, 60))
def test_lower_bound_splits(values, key):
    index = lower_bound(values, key)
    assert all(v < key for v in values[:index])
    assert all(v >= key for v in values[index:])


@given(sorted_lists, st.integers(-60, 60))
def test_upper_bound_splits(values, key):
    index = upper_bound(values, key)
    assert all(v <= key for v in values[:index])
    assert all(v > key for v in values[index:])


@given(sorted_lists, st.integers(-60, 60))
def test_bounds_span_equal_elements(values, key):
    assert upper_bound(values, key) - lower_bound(values, key) == values.count(key)


@given(sorted_lists, st.integers(-60, 60), st.integers(-60, 60))
def test_count_in_range(values, low, high):
    expected = len([v for v in values if low <= v <= high])
    assert count_in_range(values, low, high) == expected


def test_empty_sequence():
    assert lower_bound([], 5) == 0
    assert upper_bound([], 5) == 0
    assert count_in_range([], 1, 9) == 0


def test_reversed_range_counts_nothing():
    assert count_in_range([1, 2, 3, 4], 4, 1) == 0