import pytest
from hypothesis import given
from hypothesis import strategies as st

from cpbook.backtracking import quick_sort, solve_n_queens, subsets, subsets_by_mask


def _columns(board):
    return tuple(row.index("Q") for row in board)


def test_four_queens():
    assert solve_n_queens(4) == [
        [".Q..", "...Q", "Q...", "..Q."],
        ["..Q.", "Q...", "...Q", ".Q.."],
    ]


@pytest.mark.parametrize("n", range(1, 8))
def test_queens_solutions_are_valid(n):
    solutions = solve_n_queens(n)
    for board in solutions:
        assert len(board) == n
        assert all(len(row) == n and row.count("Q") == 1 for row in board)
        cols = _columns(board)
        assert len(set(cols)) == n
        assert len({r - c for r, c in enumerate(cols)}) == n
        assert len({r + c for r, c in enumerate(cols)}) == n
    keys = [_columns(board) for board in solutions]
    assert keys == sorted(set(keys))


@pytest.mark.parametrize("n", [2, 3])
def test_queens_without_solution(n):
    assert solve_n_queens(n) == []


def test_queens_negative_size():
    with pytest.raises(ValueError):
        solve_n_queens(-1)


def test_subsets_recursive_order():
    assert list(subsets([1, 2])) == [[], [2], [1], [1, 2]]


def test_subsets_mask_order():
    assert list(subsets_by_mask([1, 2])) == [[], [1], [2], [1, 2]]


@given(st.lists(st.integers(), max_size=7))
def test_subset_enumerations_agree(items):
    recursive = list(subsets(items))
    masked = list(subsets_by_mask(items))
    assert len(recursive) == 2 ** len(items)
    assert sorted(map(tuple, recursive)) == sorted(map(tuple, masked))
    assert recursive[0] == []
    assert recursive[-1] == items


@given(st.lists(st.integers(-1000, 1000), max_size=60))
def test_quick_sort_sorts(values):
    original = list(values)
    assert quick_sort(values) == sorted(values)
    assert values == original


def test_quick_sort_long_sorted_input():
    values = list(range(5000))
    assert quick_sort(reversed(values)) == values