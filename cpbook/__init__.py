"""Classic contest algorithms: sequences, number theory, graphs, grids, segment trees and geometry."""

__version__ = "0.1.0"

__all__ = [
    "arithmetic",
    "backtracking",
    "bigint",
    "geometry",
    "graph",
    "grids",
    "lis",
    "primes",
    "search",
    "segment_tree",
    "sequences",
]