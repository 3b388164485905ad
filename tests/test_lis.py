import pytest
from hypothesis import given
from hypothesis import strategies as st

from cpbook.lis import (
    length_of_lis,
    length_of_lis_quadratic,
    length_of_lis_recursive,
    longest_increasing_subsequence,
)

SAMPLE = [0, 8, 4, 12, 2, 10, 6, 14, 1, 9, 5, 13, 3, 11, 7, 15]


def _is_subsequence(sub, seq):
    it = iter(seq)
    return all(any(x == y for y in it) for x in sub)


def test_worked_example_path():
    assert longest_increasing_subsequence(SAMPLE) == [0, 4, 6, 9, 13, 15]


@pytest.mark.parametrize(
    "func", [length_of_lis, length_of_lis_quadratic, length_of_lis_recursive]
)
def test_worked_example_length(func):
    assert func(SAMPLE) == len(longest_increasing_subsequence(SAMPLE))


@pytest.mark.parametrize(
    "func", [length_of_lis, length_of_lis_quadratic, length_of_lis_recursive]
)
def test_empty_input(func):
    assert func([]) == 0


def test_empty_path():
    assert longest_increasing_subsequence([]) == []


@pytest.mark.parametrize(
    "func", [length_of_lis, length_of_lis_quadratic, length_of_lis_recursive]
)
def test_duplicates_are_not_increasing(func):
    assert func([2, 2, 2]) == 1


@given(st.lists(st.integers(-20, 20), max_size=12))
def test_all_lengths_agree(nums):
    expected = length_of_lis_quadratic(nums)
    assert length_of_lis(nums) == expected
    assert length_of_lis_recursive(nums) == expected


@given(st.lists(st.integers(-50, 50), max_size=40))
def test_path_is_valid_witness(nums):
    path = longest_increasing_subsequence(nums)
    assert len(path) == length_of_lis(nums)
    assert all(a < b for a, b in zip(path, path[1:]))
    assert _is_subsequence(path, nums)


@given(st.lists(st.integers(-50, 50), max_size=40, unique=True))
def test_sorted_input_is_its_own_lis(nums):
    ordered = sorted(nums)
    assert longest_increasing_subsequence(ordered) == ordered
    assert length_of_lis(ordered[::-1]) == min(1, len(ordered))