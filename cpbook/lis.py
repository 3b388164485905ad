"""Longest strictly increasing subsequence: lengths and a witness sequence."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Iterable
from functools import lru_cache
from typing import Any


def length_of_lis(nums: Iterable[Any]) -> int:
    """Length of the longest strictly increasing subsequence in O(n log n)."""
    tails: list[Any] = []
    for value in nums:
        pos = bisect_left(tails, value)
        if pos == len(tails):
            tails.append(value)
        else:
            tails[pos] = value
    return len(tails)


def length_of_lis_quadratic(nums: Iterable[Any]) -> int:
    """Length of the longest strictly increasing subsequence in O(n^2)."""
    values = list(nums)
    ending_at: list[int] = []
    for value in values:
        ending_at.append(
            1
            + max(
                (length for prev, length in zip(values, ending_at) if prev < value),
                default=0,
            )
        )
    return max(ending_at, default=0)


def length_of_lis_recursive(nums: Iterable[Any]) -> int:
    """Length of the longest strictly increasing subsequence by include/exclude recursion."""
    values = tuple(nums)

    @lru_cache(maxsize=None)
    def best(index: int, prev: int) -> int:
        if index == len(values):
            return 0
        excluded = best(index + 1, prev)
        if prev < 0 or values[index] > values[prev]:
            return max(excluded, 1 + best(index + 1, index))
        return excluded

    return best(0, -1)


def longest_increasing_subsequence(nums: Iterable[Any]) -> list[Any]:
    """One longest strictly increasing subsequence.

    For each element the longest chain ending there is extended from the
    first strictly longer earlier chain; the first longest chain overall wins.
    """
    values = list(nums)
    chains: list[list[Any]] = []
    for value in values:
        chain: list[Any] = []
        for prev, candidate in zip(values, chains):
            if prev < value and len(candidate) > len(chain):
                chain = candidate
        chains.append([*chain, value])
    return max(chains, key=len, default=[])