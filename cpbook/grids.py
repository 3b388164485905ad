"""Shortest paths and region counting on 2D and 3D grids."""

from __future__ import annotations

import heapq
from collections import deque
from collections.abc import Sequence

_STEPS_2D = ((0, 1), (0, -1), (1, 0), (-1, 0))
_STEPS_3D = ((0, 0, 1), (0, 0, -1), (0, 1, 0), (0, -1, 0), (1, 0, 0), (-1, 0, 0))


def _inside(grid: Sequence[Sequence[object]], row: int, col: int) -> bool:
    return 0 <= row < len(grid) and 0 <= col < len(grid[row])


def grid_shortest_path(
    blocked: Sequence[Sequence[bool]],
    start: tuple[int, int],
    target: tuple[int, int],
) -> int | None:
    """Fewest 4-directional steps from start to target, both (row, col).

    Cells that are truthy in ``blocked`` cannot be entered. Returns None when
    the target cannot be reached.
    """
    for cell in (start, target):
        if not _inside(blocked, *cell):
            raise ValueError(f"cell {cell} lies outside the grid")
    distances = {start: 0}
    queue = deque([start])
    while queue:
        row, col = queue.popleft()
        for dr, dc in _STEPS_2D:
            nxt = (row + dr, col + dc)
            if nxt not in distances and _inside(blocked, *nxt) and not blocked[nxt[0]][nxt[1]]:
                distances[nxt] = distances[(row, col)] + 1
                queue.append(nxt)
    return distances.get(target)


def _locate(levels: Sequence[Sequence[str]], mark: str) -> tuple[int, int, int]:
    for z, level in enumerate(levels):
        for y, row in enumerate(level):
            x = row.find(mark)
            if x >= 0:
                return z, y, x
    raise ValueError(f"maze has no {mark!r} cell")


def escape_maze(levels: Sequence[Sequence[str]]) -> int | None:
    """Minutes from 'S' to 'E' in a stack of levels, or None if trapped.

    Each level is a list of rows; '#' cells are rock. A minute moves one cell
    north, south, east, west, up or down.
    """
    start = _locate(levels, "S")
    exit_cell = _locate(levels, "E")
    distances = {start: 0}
    queue = deque([start])
    while queue:
        z, y, x = queue.popleft()
        if (z, y, x) == exit_cell:
            return distances[exit_cell]
        for dz, dy, dx in _STEPS_3D:
            nz, ny, nx = z + dz, y + dy, x + dx
            if (nz, ny, nx) in distances or not 0 <= nz < len(levels):
                continue
            if not _inside(levels[nz], ny, nx) or levels[nz][ny][nx] == "#":
                continue
            distances[(nz, ny, nx)] = distances[(z, y, x)] + 1
            queue.append((nz, ny, nx))
    return None


def min_path_cost(costs: Sequence[Sequence[int]]) -> int:
    """Cheapest sum of cell costs from the top-left to the bottom-right cell.

    Both end cells are counted; moves go in the four directions.
    """
    if not costs or not costs[0]:
        raise ValueError("grid must not be empty")
    target = (len(costs) - 1, len(costs[-1]) - 1)
    best = {(0, 0): costs[0][0]}
    heap = [(costs[0][0], 0, 0)]
    while heap:
        cost, row, col = heapq.heappop(heap)
        if cost > best[(row, col)]:
            continue
        for dr, dc in _STEPS_2D:
            r, c = row + dr, col + dc
            if not _inside(costs, r, c):
                continue
            candidate = cost + costs[r][c]
            if (r, c) not in best or candidate < best[(r, c)]:
                best[(r, c)] = candidate
                heapq.heappush(heap, (candidate, r, c))
    return best[target]


def count_islands(grid: Sequence[Sequence[int]]) -> int:
    """Number of 4-connected regions of cells equal to 1."""
    land = {
        (r, c)
        for r, row in enumerate(grid)
        for c, value in enumerate(row)
        if value == 1
    }
    islands = 0
    while land:
        islands += 1
        stack = [land.pop()]
        while stack:
            row, col = stack.pop()
            for dr, dc in _STEPS_2D:
                nxt = (row + dr, col + dc)
                if nxt in land:
                    land.remove(nxt)
                    stack.append(nxt)
    return islands