"""Graph traversal, shortest paths, topological orders and spanning trees."""

from __future__ import annotations

import heapq
import math
from collections import defaultdict, deque
from collections.abc import Hashable, Iterable, Mapping, Sequence
from dataclasses import dataclass
from itertools import count
from typing import Any


@dataclass(frozen=True)
class Edge:
    """An undirected weighted edge between ``u`` and ``v``."""

    u: Hashable
    v: Hashable
    weight: float


class _DisjointSet:
    """Union-find over arbitrary hashable items with path compression."""

    def __init__(self) -> None:
        self._parent: dict[Hashable, Hashable] = {}

    def find(self, item: Hashable) -> Hashable:
        root = item
        while self._parent.setdefault(root, root) != root:
            root = self._parent[root]
        while item != root:
            self._parent[item], item = root, self._parent[item]
        return root

    def attach(self, child_root: Hashable, parent_root: Hashable) -> None:
        self._parent[child_root] = parent_root


def _as_edge(edge: Any) -> Edge:
    if isinstance(edge, Edge):
        return edge
    parts = tuple(edge)
    if len(parts) != 3:
        raise ValueError(f"weighted edge must be (u, v, weight), got {edge!r}")
    return Edge(*parts)


def adjacency_list(edges: Iterable[Any]) -> dict[Hashable, list[Any]]:
    """Undirected adjacency lists.

    Pairs ``(u, v)`` give lists of neighbours; triples ``(u, v, weight)`` or
    :class:`Edge` objects give lists of ``(neighbour, weight)`` pairs.
    """
    graph: defaultdict[Hashable, list[Any]] = defaultdict(list)
    weighted: bool | None = None
    for edge in edges:
        if isinstance(edge, Edge):
            parts: tuple[Any, ...] = (edge.u, edge.v, edge.weight)
        else:
            parts = tuple(edge)
        if len(parts) not in (2, 3):
            raise ValueError(f"edge must have two or three parts, got {edge!r}")
        is_weighted = len(parts) == 3
        if weighted is None:
            weighted = is_weighted
        elif weighted != is_weighted:
            raise ValueError("cannot mix weighted and unweighted edges")
        if is_weighted:
            u, v, w = parts
            graph[u].append((v, w))
            graph[v].append((u, w))
        else:
            u, v = parts
            graph[u].append(v)
            graph[v].append(u)
    return dict(graph)


def bfs_distances(
    adjacency: Mapping[Hashable, Iterable[Hashable]], start: Hashable
) -> dict[Hashable, int]:
    """Edge counts of shortest paths from start to every reachable node."""
    distances = {start: 0}
    queue = deque([start])
    while queue:
        node = queue.popleft()
        for neighbour in adjacency.get(node, ()):
            if neighbour not in distances:
                distances[neighbour] = distances[node] + 1
                queue.append(neighbour)
    return distances


def count_components(node_count: int, edges: Iterable[tuple[int, int]]) -> int:
    """Number of connected components among the nodes 0 .. node_count - 1."""
    edges = list(edges)
    for u, v in edges:
        if not (0 <= u < node_count and 0 <= v < node_count):
            raise ValueError(f"edge ({u}, {v}) leaves the node range")
    graph = adjacency_list(edges)
    seen: set[int] = set()
    components = 0
    for node in range(node_count):
        if node not in seen:
            seen.update(bfs_distances(graph, node))
            components += 1
    return components


def dijkstra(
    adjacency: Mapping[Hashable, Iterable[tuple[Hashable, float]]], source: Hashable
) -> dict[Hashable, float]:
    """Shortest path lengths from source; unreachable nodes are absent."""
    distances: dict[Hashable, float] = {source: 0}
    done: set[Hashable] = set()
    tie = count()
    heap: list[tuple[float, int, Hashable]] = [(0, next(tie), source)]
    while heap:
        dist, _, node = heapq.heappop(heap)
        if node in done:
            continue
        done.add(node)
        for neighbour, weight in adjacency.get(node, ()):
            candidate = dist + weight
            if neighbour not in distances or candidate < distances[neighbour]:
                distances[neighbour] = candidate
                heapq.heappush(heap, (candidate, next(tie), neighbour))
    return distances


def is_bicolorable(
    adjacency: Mapping[Hashable, Iterable[Hashable]], start: Hashable
) -> bool:
    """Whether the component holding start can be two-coloured."""
    colour = {start: 0}
    queue = deque([start])
    while queue:
        node = queue.popleft()
        wanted = 1 - colour[node]
        for neighbour in adjacency.get(node, ()):
            if neighbour in colour:
                if colour[neighbour] != wanted:
                    return False
            else:
                colour[neighbour] = wanted
                queue.append(neighbour)
    return True


def _directed(edges: Iterable[tuple[int, int]]) -> dict[int, list[int]]:
    graph: defaultdict[int, list[int]] = defaultdict(list)
    for u, v in edges:
        graph[u].append(v)
    return dict(graph)


def topological_sort_dfs(node_count: int, edges: Iterable[tuple[int, int]]) -> list[int]:
    """Reverse depth-first finishing order over the nodes 1 .. node_count."""
    graph = _directed(edges)
    visited: set[int] = set()
    finished: list[int] = []
    for root in range(1, node_count + 1):
        if root in visited:
            continue
        visited.add(root)
        stack = [(root, iter(graph.get(root, ())))]
        while stack:
            node, neighbours = stack[-1]
            for nxt in neighbours:
                if nxt not in visited:
                    visited.add(nxt)
                    stack.append((nxt, iter(graph.get(nxt, ()))))
                    break
            else:
                stack.pop()
                finished.append(node)
    finished.reverse()
    return finished


def topological_sort_lexicographic(
    node_count: int, edges: Iterable[tuple[int, int]]
) -> list[int]:
    """Smallest-first topological order over the nodes 1 .. node_count.

    Nodes that lie on or behind a cycle never become free and are left out.
    """
    edges = list(edges)
    graph = _directed(edges)
    indegree: defaultdict[int, int] = defaultdict(int)
    for _, v in edges:
        indegree[v] += 1
    heap = [node for node in range(1, node_count + 1) if indegree[node] == 0]
    heapq.heapify(heap)
    order: list[int] = []
    while heap:
        node = heapq.heappop(heap)
        order.append(node)
        for nxt in graph.get(node, ()):
            indegree[nxt] -= 1
            if indegree[nxt] == 0:
                heapq.heappush(heap, nxt)
    return order


def prim(
    adjacency: Mapping[Hashable, Iterable[tuple[Hashable, float]]], start: Hashable
) -> tuple[float, frozenset[Hashable]]:
    """Weight of a minimum spanning tree of start's component, and its nodes."""
    reached: set[Hashable] = set()
    total: float = 0
    tie = count()
    heap: list[tuple[float, int, Hashable]] = [(0, next(tie), start)]
    while heap:
        weight, _, node = heapq.heappop(heap)
        if node in reached:
            continue
        reached.add(node)
        total += weight
        for neighbour, edge_weight in adjacency.get(node, ()):
            if neighbour not in reached:
                heapq.heappush(heap, (edge_weight, next(tie), neighbour))
    return total, frozenset(reached)


def kruskal(node_count: int, edges: Iterable[Any]) -> tuple[float, list[Edge]]:
    """Minimum spanning forest by Kruskal: total weight and chosen edges.

    Stops as soon as node_count - 1 edges are chosen; fewer edges mean the
    graph is not connected.
    """
    ordered = sorted((_as_edge(e) for e in edges), key=lambda e: e.weight)
    return _kruskal_sorted(node_count, ordered)


def _kruskal_sorted(node_count: int, ordered: Sequence[Edge]) -> tuple[float, list[Edge]]:
    sets = _DisjointSet()
    total: float = 0
    chosen: list[Edge] = []
    if node_count <= 1:
        return total, chosen
    for edge in ordered:
        a, b = sets.find(edge.u), sets.find(edge.v)
        if a != b:
            sets.attach(b, a)
            total += edge.weight
            chosen.append(edge)
            if len(chosen) == node_count - 1:
                break
    return total, chosen


def best_and_second_best_mst(
    node_count: int, edges: Iterable[Any]
) -> tuple[float, float | None]:
    """Weights of the minimum spanning tree and of the next best spanning tree.

    The second tree is the cheapest spanning tree that avoids one edge of the
    first; it is None when no such tree exists.
    """
    ordered = sorted((_as_edge(e) for e in edges), key=lambda e: e.weight)
    best, tree = _kruskal_sorted(node_count, ordered)
    second: float | None = None
    for removed in tree:
        cost, chosen = _kruskal_sorted(node_count, [e for e in ordered if e != removed])
        if len(chosen) < node_count - 1:
            continue
        if second is None or cost < second:
            second = cost
    return best, second


_EPS = 1e-9


def roads_and_railroads(
    points: Sequence[tuple[float, float]], threshold: float
) -> tuple[int, int, int]:
    """Join cities by a minimum spanning tree, split at a distance threshold.

    Tree edges no longer than threshold are roads and merge cities into one
    state; longer ones are railroads. Returns the number of states and the
    total road and railroad lengths, each rounded half up.
    """
    candidates = sorted(
        (math.dist(points[i], points[j]), i, j)
        for i in range(len(points))
        for j in range(i + 1, len(points))
    )
    sets = _DisjointSet()
    states = len(points)
    roads = railroads = 0.0
    for cost, i, j in candidates:
        a, b = sets.find(i), sets.find(j)
        if a == b:
            continue
        if cost - threshold <= _EPS:
            states -= 1
            roads += cost
        else:
            railroads += cost
        sets.attach(b, a)
    return states, math.floor(roads + 0.5), math.floor(railroads + 0.5)