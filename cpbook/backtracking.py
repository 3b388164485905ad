"""Backtracking and enumeration: N queens, subsets, and quicksort."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any, TypeVar

T = TypeVar("T")


def solve_n_queens(n: int) -> list[list[str]]:
    """All placements of n non-attacking queens, rows drawn with 'Q' and '.'.

    Solutions are produced row by row, trying columns left to right.
    """
    if n < 0:
        raise ValueError("board size must not be negative")
    solutions: list[list[str]] = []
    placed: list[int] = []
    columns: set[int] = set()
    diagonals: set[int] = set()
    anti_diagonals: set[int] = set()

    def place(row: int) -> None:
        if row == n:
            solutions.append(["." * col + "Q" + "." * (n - col - 1) for col in placed])
            return
        for col in range(n):
            if col in columns or row - col in diagonals or row + col in anti_diagonals:
                continue
            placed.append(col)
            columns.add(col)
            diagonals.add(row - col)
            anti_diagonals.add(row + col)
            place(row + 1)
            placed.pop()
            columns.remove(col)
            diagonals.remove(row - col)
            anti_diagonals.remove(row + col)

    place(0)
    return solutions


def subsets(items: Iterable[T]) -> Iterator[list[T]]:
    """Every subset, recursing on 'leave out' before 'take' for each item."""
    pool = list(items)
    chosen: list[T] = []

    def walk(index: int) -> Iterator[list[T]]:
        if index == len(pool):
            yield list(chosen)
            return
        yield from walk(index + 1)
        chosen.append(pool[index])
        yield from walk(index + 1)
        chosen.pop()

    yield from walk(0)


def subsets_by_mask(items: Iterable[T]) -> Iterator[list[T]]:
    """Every subset, in order of the bit mask that selects it."""
    pool = list(items)
    for mask in range(1 << len(pool)):
        yield [item for bit, item in enumerate(pool) if mask >> bit & 1]


def _partition(data: list[Any], lo: int, hi: int) -> int:
    pivot = data[hi]
    store = lo
    for j in range(lo, hi):
        if data[j] < pivot:
            data[store], data[j] = data[j], data[store]
            store += 1
    data[store], data[hi] = data[hi], data[store]
    return store


def quick_sort(values: Iterable[T]) -> list[T]:
    """A sorted copy of values, using quicksort with a last-element pivot."""
    data = list(values)
    pending = [(0, len(data) - 1)]
    while pending:
        lo, hi = pending.pop()
        if lo >= hi:
            continue
        split = _partition(data, lo, hi)
        pending.append((split + 1, hi))
        pending.append((lo, split - 1))
    return data