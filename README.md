# cpbook

A small library of classic contest algorithms written as plain Python
functions and classes. It has no runtime dependencies.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `cpbook.lis` | `length_of_lis`, `length_of_lis_quadratic`, `length_of_lis_recursive`, `longest_increasing_subsequence` |
| `cpbook.sequences` | `lcs_length`, `lcs_length_compact`, `longest_common_subsequence`, `longest_palindromic_subsequence`, `longest_palindromic_substring`, `count_palindromic_substrings`, `longest_repeating_subsequence`, `max_subarray_sum`, `max_subarray_product` |
| `cpbook.backtracking` | `solve_n_queens`, `subsets`, `subsets_by_mask`, `quick_sort` |
| `cpbook.primes` | `primes_up_to`, `primes_in_range`, `count_primes_in_range`, `prime_factorization`, `totient`, `totient_table` |
| `cpbook.arithmetic` | `big_mod`, `extended_gcd`, `factorial_digit_count` |
| `cpbook.bigint` | `BigInt`, a signed decimal integer of any size |
| `cpbook.graph` | `Edge`, `adjacency_list`, `bfs_distances`, `count_components`, `dijkstra`, `is_bicolorable`, `topological_sort_dfs`, `topological_sort_lexicographic`, `prim`, `kruskal`, `best_and_second_best_mst`, `roads_and_railroads` |
| `cpbook.grids` | `grid_shortest_path`, `escape_maze`, `min_path_cost`, `count_islands` |
| `cpbook.segment_tree` | `Summary`, `SegmentTree` (point update, sum/max/min query), `LazySegmentTree` (range add, range sum) |
| `cpbook.search` | `lower_bound`, `upper_bound`, `count_in_range` |
| `cpbook.geometry` | `Vector`, `Line`, `Circle`, `Intersection`, `cosine_rule_angle`, `collinear` |

## Examples

```python
from cpbook.lis import longest_increasing_subsequence
from cpbook.sequences import longest_common_subsequence, max_subarray_sum
from cpbook.primes import primes_in_range
from cpbook.bigint import BigInt
from cpbook.segment_tree import SegmentTree

longest_increasing_subsequence([0, 8, 4, 12, 2, 10, 6, 14, 1, 9, 5, 13, 3, 11, 7, 15])
longest_common_subsequence("abcbdab", "bdcaba")
max_subarray_sum([-2, 1, -3, 4, -1, 2, 1, -5, 4])
primes_in_range(10, 30)

a = BigInt("123456789012345678901234567890")
b = BigInt("-987654321")
print(a + b, a - b, a * b, a // b, a % b)

tree = SegmentTree([5, 1, 4, 2, 3])
summary = tree.query(0, 4)
print(summary.total, summary.maximum, summary.minimum)
tree.update(2, 10)
```

## Notes

- Ranges taken by `SegmentTree` and `LazySegmentTree` are inclusive and
  zero-based; out-of-range indices raise `IndexError`.
- `BigInt` division and remainder truncate toward zero, and the remainder
  takes the sign of the dividend. Dividing by zero raises `ZeroDivisionError`.
- Graph functions take nodes numbered by the caller. `adjacency_list` accepts
  pairs `(u, v)`, triples `(u, v, weight)` or `Edge` records.
  `topological_sort_dfs` and `topological_sort_lexicographic` work on nodes
  `1 .. node_count`; `count_components` on nodes `0 .. node_count - 1`.
- Functions that have no answer for empty input, such as `max_subarray_sum`,
  raise `ValueError`.

## What it does not do

This is a library only. It has no command-line programs and does not read
problem input from standard input or print judge-formatted answers; callers
pass Python values in and get Python values back.