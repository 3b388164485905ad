"""Binary search bounds over sorted sequences."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from collections.abc import Sequence
from typing import Any


def lower_bound(values: Sequence[Any], key: Any) -> int:
    """Index of the first element not less than key."""
    return bisect_left(values, key)


def upper_bound(values: Sequence[Any], key: Any) -> int:
    """Index of the first element greater than key."""
    return bisect_right(values, key)


def count_in_range(values: Sequence[Any], low: Any, high: Any) -> int:
    """Number of elements v of the sorted values with low <= v <= high."""
    return max(0, upper_bound(values, high) - lower_bound(values, low))