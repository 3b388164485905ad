"""Segment trees: point updates with sum/max/min queries, and lazy range addition."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True)
class Summary:
    """Sum, maximum and minimum of a run of values."""

    total: int
    maximum: int
    minimum: int

    @classmethod
    def _leaf(cls, value: int) -> "Summary":
        return cls(value, value, value)

    def __add__(self, other: "Summary") -> "Summary":
        if not isinstance(other, Summary):
            return NotImplemented
        return Summary(
            self.total + other.total,
            max(self.maximum, other.maximum),
            min(self.minimum, other.minimum),
        )


def _check_range(size: int, left: int, right: int) -> None:
    if not 0 <= left <= right < size:
        raise IndexError(f"range [{left}, {right}] is not within [0, {size - 1}]")


class SegmentTree:
    """Summaries over inclusive index ranges of a fixed-length sequence."""

    def __init__(self, values: Iterable[int]) -> None:
        data = list(values)
        if not data:
            raise ValueError("a segment tree needs at least one value")
        self._size = len(data)
        self._nodes: list[Summary | None] = [None] * (4 * self._size)
        self._build(1, 0, self._size - 1, data)

    def __len__(self) -> int:
        return self._size

    def _build(self, node: int, lo: int, hi: int, data: list[int]) -> None:
        if lo == hi:
            self._nodes[node] = Summary._leaf(data[lo])
            return
        mid = (lo + hi) // 2
        self._build(2 * node, lo, mid, data)
        self._build(2 * node + 1, mid + 1, hi, data)
        self._pull(node)

    def _pull(self, node: int) -> None:
        left, right = self._nodes[2 * node], self._nodes[2 * node + 1]
        assert left is not None and right is not None
        self._nodes[node] = left + right

    def query(self, left: int, right: int) -> Summary:
        """Summary of the values at indices left .. right, both included."""
        _check_range(self._size, left, right)
        result = self._query(1, 0, self._size - 1, left, right)
        assert result is not None
        return result

    def _query(self, node: int, lo: int, hi: int, left: int, right: int) -> Summary | None:
        if lo > right or hi < left:
            return None
        if left <= lo and hi <= right:
            return self._nodes[node]
        mid = (lo + hi) // 2
        parts = [
            part
            for part in (
                self._query(2 * node, lo, mid, left, right),
                self._query(2 * node + 1, mid + 1, hi, left, right),
            )
            if part is not None
        ]
        return parts[0] if len(parts) == 1 else parts[0] + parts[1]

    def update(self, index: int, value: int) -> None:
        """Replace the value at index."""
        _check_range(self._size, index, index)
        self._update(1, 0, self._size - 1, index, value)

    def _update(self, node: int, lo: int, hi: int, index: int, value: int) -> None:
        if lo == hi:
            self._nodes[node] = Summary._leaf(value)
            return
        mid = (lo + hi) // 2
        if index <= mid:
            self._update(2 * node, lo, mid, index, value)
        else:
            self._update(2 * node + 1, mid + 1, hi, index, value)
        self._pull(node)


class LazySegmentTree:
    """Range addition and range sums over a sequence that starts as zeros.

    Pending additions stay on the node that covers them and are carried
    down while summing instead of being pushed into the children.
    """

    def __init__(self, size: int) -> None:
        if size < 1:
            raise ValueError("size must be positive")
        self._size = size
        self._sums = [0] * (4 * size)
        self._pending = [0] * (4 * size)

    def __len__(self) -> int:
        return self._size

    def add(self, left: int, right: int, value: int) -> None:
        """Add value to every element at indices left .. right, both included."""
        _check_range(self._size, left, right)
        self._add(1, 0, self._size - 1, left, right, value)

    def _add(self, node: int, lo: int, hi: int, left: int, right: int, value: int) -> None:
        if lo > right or hi < left:
            return
        if left <= lo and hi <= right:
            self._sums[node] += (hi - lo + 1) * value
            self._pending[node] += value
            return
        mid = (lo + hi) // 2
        self._add(2 * node, lo, mid, left, right, value)
        self._add(2 * node + 1, mid + 1, hi, left, right, value)
        self._sums[node] = (
            self._sums[2 * node]
            + self._sums[2 * node + 1]
            + (hi - lo + 1) * self._pending[node]
        )

    def sum(self, left: int, right: int) -> int:
        """Sum of the elements at indices left .. right, both included."""
        _check_range(self._size, left, right)
        return self._sum(1, 0, self._size - 1, left, right, 0)

    def _sum(self, node: int, lo: int, hi: int, left: int, right: int, carry: int) -> int:
        if lo > right or hi < left:
            return 0
        if left <= lo and hi <= right:
            return self._sums[node] + carry * (hi - lo + 1)
        mid = (lo + hi) // 2
        carry += self._pending[node]
        return self._sum(2 * node, lo, mid, left, right, carry) + self._sum(
            2 * node + 1, mid + 1, hi, left, right, carry
        )