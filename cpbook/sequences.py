"""Dynamic programming over strings and sequences."""

from __future__ import annotations

from collections.abc import Iterable, Iterator


def _lcs_suffix_table(first: str, second: str) -> list[list[int]]:
    """table[i][j] is the LCS length of first[i:] and second[j:]."""
    rows = [[0] * (len(second) + 1) for _ in range(len(first) + 1)]
    for i in reversed(range(len(first))):
        row, below = rows[i], rows[i + 1]
        for j in reversed(range(len(second))):
            if first[i] == second[j]:
                row[j] = below[j + 1] + 1
            else:
                row[j] = max(below[j], row[j + 1])
    return rows


def lcs_length(first: str, second: str) -> int:
    """Length of the longest common subsequence using a full table."""
    return _lcs_suffix_table(first, second)[0][0]


def lcs_length_compact(first: str, second: str) -> int:
    """Length of the longest common subsequence using a single row."""
    row = [0] * (len(second) + 1)
    for ch in first:
        diagonal = 0
        for j, other in enumerate(second, 1):
            above = row[j]
            row[j] = diagonal + 1 if ch == other else max(above, row[j - 1])
            diagonal = above
    return row[-1]


def longest_common_subsequence(first: str, second: str) -> str:
    """One longest common subsequence; ties step along the second string."""
    table = _lcs_suffix_table(first, second)
    i = j = 0
    picked: list[str] = []
    while i < len(first) and j < len(second):
        if first[i] == second[j]:
            picked.append(first[i])
            i += 1
            j += 1
        elif table[i + 1][j] > table[i][j + 1]:
            i += 1
        else:
            j += 1
    return "".join(picked)


def longest_palindromic_subsequence(text: str) -> int:
    """Length of the longest palindromic subsequence."""
    n = len(text)
    span = [0] * n  # span[j]: answer for text[i..j] of the current i
    for i in reversed(range(n)):
        inner = 0
        span[i] = 1
        for j in range(i + 1, n):
            previous = span[j]
            if text[i] == text[j]:
                span[j] = inner + 2
            else:
                span[j] = max(previous, span[j - 1])
            inner = previous
    return span[-1] if n else 0


def _expansions(text: str, lo: int, hi: int) -> Iterator[tuple[int, int]]:
    """Inclusive bounds of palindromes grown outward from (lo, hi)."""
    while lo >= 0 and hi < len(text) and text[lo] == text[hi]:
        yield lo, hi
        lo -= 1
        hi += 1


def longest_palindromic_substring(text: str) -> str:
    """The leftmost longest palindromic substring."""
    if len(text) < 2:
        return text
    start, length = 0, 1
    for centre in range(1, len(text)):
        for lo, hi in (*_expansions(text, centre - 1, centre),
                       *_expansions(text, centre - 1, centre + 1)):
            if hi - lo + 1 > length:
                start, length = lo, hi - lo + 1
    return text[start:start + length]


def count_palindromic_substrings(text: str) -> int:
    """Number of palindromic substrings, counted by position."""
    return sum(
        sum(1 for _ in _expansions(text, centre, centre))
        + sum(1 for _ in _expansions(text, centre, centre + 1))
        for centre in range(len(text))
    )


def longest_repeating_subsequence(text: str) -> int:
    """Longest subsequence occurring twice without sharing a position."""
    n = len(text)
    previous = [0] * (n + 1)
    for i in range(1, n + 1):
        current = [0] * (n + 1)
        for j in range(1, n + 1):
            if text[i - 1] == text[j - 1] and i != j:
                current[j] = previous[j - 1] + 1
            else:
                current[j] = max(previous[j], current[j - 1])
        previous = current
    return previous[n]


def _first_and_rest(values: Iterable[int]) -> tuple[int, Iterator[int]]:
    it = iter(values)
    try:
        first = next(it)
    except StopIteration:
        raise ValueError("sequence must not be empty") from None
    return first, it


def max_subarray_sum(values: Iterable[int]) -> int:
    """Largest sum of a non-empty contiguous run (Kadane)."""
    first, rest = _first_and_rest(values)
    best = current = first
    for value in rest:
        current = max(value, current + value)
        best = max(best, current)
    return best


def max_subarray_product(values: Iterable[int]) -> int:
    """Largest product of a non-empty contiguous run."""
    first, rest = _first_and_rest(values)
    best = high = low = first
    for value in rest:
        high, low = (
            max(value, high * value, low * value),
            min(value, high * value, low * value),
        )
        best = max(best, high)
    return best