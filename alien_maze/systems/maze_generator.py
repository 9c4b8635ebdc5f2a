"""Maze generation: recursive backtracker over odd-indexed cells.

Room cells sit on odd coordinates and the cells between them start as
walls. Carving knocks out the wall between a room and a random unvisited
neighbour two cells away, backtracking when a room has none left. The
border stays solid, so the result is a perfect maze: every open cell is
reachable from every other.
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Protocol

from alien_maze.core.enums import Cell
from alien_maze.core.grid import MazeData, MazeGrid
from alien_maze.core.models import CARDINAL_OFFSETS, GridPoint
from alien_maze.systems.pathfinding import distances_from, find_path

if TYPE_CHECKING:
    from alien_maze.config import GameConfig
    from alien_maze.systems.rng import RandomSource

logger = logging.getLogger(__name__)

START = GridPoint(1, 1)


class GenerationError(Exception):
    """Maze synthesis failed; the session falls back to the error screen."""


class MazeGenerator:
    """Builds ``config.maze_size`` square mazes from an injected random source."""

    __slots__ = ("_config",)

    def __init__(self, config: GameConfig) -> None:
        self._config = config

    def generate(self, rng: RandomSource) -> MazeData:
        size = self._config.maze_size
        cells = [[Cell.WALL] * size for _ in range(size)]

        cells[START.z][START.x] = Cell.OPEN
        stack = [START]
        while stack:
            cur = stack[-1]
            candidates = []
            for step in CARDINAL_OFFSETS:
                nx, nz = cur.x + 2 * step.x, cur.z + 2 * step.z
                if 0 < nx < size - 1 and 0 < nz < size - 1 and cells[nz][nx] == Cell.WALL:
                    candidates.append(GridPoint(nx, nz))
            if not candidates:
                stack.pop()
                continue
            nxt = rng.choice(candidates)
            cells[(cur.z + nxt.z) // 2][(cur.x + nxt.x) // 2] = Cell.OPEN
            cells[nxt.z][nxt.x] = Cell.OPEN
            stack.append(nxt)

        grid = MazeGrid.from_rows(cells)
        end = self._farthest_from(grid, START)
        self._verify(grid, START, end)
        logger.debug("Generated %dx%d maze, exit at %s", size, size, end)
        return MazeData(grid=grid, start=START, end=end)

    @staticmethod
    def _farthest_from(grid: MazeGrid, start: GridPoint) -> GridPoint:
        dist = distances_from(grid, start)
        # BFS order makes max() pick the first cell found on ties
        return max(dist, key=dist.__getitem__)

    @staticmethod
    def _verify(grid: MazeGrid, start: GridPoint, end: GridPoint) -> None:
        if start == end:
            raise GenerationError("maze has no distinct exit cell")
        if not grid.is_open(start) or not grid.is_open(end):
            raise GenerationError(f"start {start} or end {end} is not open")
        reachable = distances_from(grid, start)
        open_count = sum(1 for _ in grid.open_cells())
        if len(reachable) != open_count:
            raise GenerationError(
                f"{open_count - len(reachable)} open cells are unreachable from {start}"
            )
        if find_path(grid, start, end) is None:
            raise GenerationError(f"no path from {start} to {end}")


# ---------------------------------------------------------------------------
# Maze sources: where a session gets its maze from
# ---------------------------------------------------------------------------

class MazeSource(Protocol):
    """Asynchronous supplier of mazes. Failures must raise GenerationError."""

    async def generate(self, rng: RandomSource) -> MazeData: ...


class LocalMazeSource:
    """Runs ``MazeGenerator`` in a worker thread so the event loop stays free."""

    __slots__ = ("_generator",)

    def __init__(self, config: GameConfig) -> None:
        self._generator = MazeGenerator(config)

    async def generate(self, rng: RandomSource) -> MazeData:
        return await asyncio.to_thread(self._generator.generate, rng)
