"""Breadth-first search over the open cells of a maze grid.

Used by the generator to pick the exit and to verify connectivity, and by
``MazeData.from_rows`` to validate hand-written mazes.
"""

from __future__ import annotations

from collections import deque
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from alien_maze.core.grid import MazeGrid
    from alien_maze.core.models import GridPoint


def distances_from(grid: MazeGrid, start: GridPoint) -> dict[GridPoint, int]:
    """Return the BFS step count from *start* to every reachable open cell."""
    if not grid.is_open(start):
        return {}
    dist = {start: 0}
    q = deque([start])
    while q:
        cur = q.popleft()
        for nxt in grid.open_neighbors(cur):
            if nxt not in dist:
                dist[nxt] = dist[cur] + 1
                q.append(nxt)
    return dist


def _reconstruct(prev: dict[GridPoint, GridPoint | None], goal: GridPoint) -> list[GridPoint]:
    path = []
    cur: GridPoint | None = goal
    while cur is not None:
        path.append(cur)
        cur = prev[cur]
    path.reverse()
    return path


def find_path(grid: MazeGrid, start: GridPoint, goal: GridPoint) -> list[GridPoint] | None:
    """Shortest open-cell path from *start* to *goal*, both inclusive.

    Returns None when either end is a wall or the two are disconnected.
    """
    if not grid.is_open(start) or not grid.is_open(goal):
        return None
    if start == goal:
        return [start]

    prev: dict[GridPoint, GridPoint | None] = {start: None}
    q = deque([start])
    while q:
        cur = q.popleft()
        for nxt in grid.open_neighbors(cur):
            if nxt in prev:
                continue
            prev[nxt] = cur
            if nxt == goal:
                return _reconstruct(prev, goal)
            q.append(nxt)
    return None
