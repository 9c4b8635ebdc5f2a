"""Maze grid and maze data."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Sequence

from alien_maze.core.enums import Cell
from alien_maze.core.models import CARDINAL_OFFSETS, GridPoint


class MazeGrid:
    """Square tile grid backed by a flat tuple. Immutable once built."""

    __slots__ = ("size", "_cells")

    def __init__(self, size: int, cells: Sequence[Cell | int]) -> None:
        if len(cells) != size * size:
            raise ValueError(f"expected {size * size} cells, got {len(cells)}")
        self.size = size
        self._cells: tuple[Cell, ...] = tuple(Cell(c) for c in cells)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]]) -> MazeGrid:
        """Build a grid from ``rows[z][x]`` cell values."""
        size = len(rows)
        if any(len(row) != size for row in rows):
            raise ValueError("maze rows must form a square matrix")
        return cls(size, [c for row in rows for c in row])

    # -- access --

    def _idx(self, x: int, z: int) -> int:
        return z * self.size + x

    def in_bounds(self, pos: GridPoint) -> bool:
        return 0 <= pos.x < self.size and 0 <= pos.z < self.size

    def get(self, pos: GridPoint) -> Cell:
        if not self.in_bounds(pos):
            return Cell.WALL
        return self._cells[self._idx(pos.x, pos.z)]

    def get_xz(self, x: int, z: int) -> Cell:
        if 0 <= x < self.size and 0 <= z < self.size:
            return self._cells[z * self.size + x]
        return Cell.WALL

    def is_open(self, pos: GridPoint) -> bool:
        return self.get(pos) == Cell.OPEN

    def open_neighbors(self, pos: GridPoint) -> Iterator[GridPoint]:
        for offset in CARDINAL_OFFSETS:
            nxt = pos + offset
            if self.is_open(nxt):
                yield nxt

    def open_cells(self) -> Iterator[GridPoint]:
        for z in range(self.size):
            for x in range(self.size):
                if self._cells[self._idx(x, z)] == Cell.OPEN:
                    yield GridPoint(x, z)

    # -- export --

    def rows(self) -> list[list[int]]:
        """Return the grid as ``rows[z][x]`` of plain ints."""
        s = self.size
        return [[int(c) for c in self._cells[z * s:(z + 1) * s]] for z in range(s)]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MazeGrid):
            return NotImplemented
        return self.size == other.size and self._cells == other._cells

    def __hash__(self) -> int:
        return hash((self.size, self._cells))

    def __repr__(self) -> str:
        return f"MazeGrid(size={self.size})"


@dataclass(frozen=True, slots=True)
class MazeData:
    """A generated maze: the grid plus its distinct, open start and end cells."""

    grid: MazeGrid
    start: GridPoint
    end: GridPoint

    @property
    def size(self) -> int:
        return self.grid.size

    @classmethod
    def from_rows(
        cls,
        rows: Sequence[Sequence[int]],
        start: GridPoint,
        end: GridPoint,
    ) -> MazeData:
        """Build and validate a maze from plain rows.

        Raises ValueError if start/end are equal, out of bounds, walls, or
        not connected by open cells.
        """
        from alien_maze.systems.pathfinding import find_path

        grid = MazeGrid.from_rows(rows)
        if start == end:
            raise ValueError("start and end must be distinct")
        for label, point in (("start", start), ("end", end)):
            if not grid.in_bounds(point):
                raise ValueError(f"{label} {point} is outside the grid")
            if not grid.is_open(point):
                raise ValueError(f"{label} {point} is a wall")
        if find_path(grid, start, end) is None:
            raise ValueError(f"no open path from {start} to {end}")
        return cls(grid=grid, start=start, end=end)
