"""Core data models: GridPoint, WorldPosition, Laser, AlienTarget."""

from __future__ import annotations

import math
from dataclasses import dataclass, replace
from typing import Iterable

from alien_maze.core.enums import Orientation


@dataclass(frozen=True, slots=True)
class GridPoint:
    """Immutable integer cell coordinate on the maze grid."""

    x: int = 0
    z: int = 0

    def __add__(self, other: GridPoint) -> GridPoint:
        return GridPoint(self.x + other.x, self.z + other.z)

    def __repr__(self) -> str:
        return f"({self.x}, {self.z})"


# Cardinal neighbour offsets: north, east, south, west
NORTH = GridPoint(0, -1)
EAST = GridPoint(1, 0)
SOUTH = GridPoint(0, 1)
WEST = GridPoint(-1, 0)
CARDINAL_OFFSETS: tuple[GridPoint, ...] = (NORTH, EAST, SOUTH, WEST)


@dataclass(frozen=True, slots=True)
class WorldPosition:
    """Immutable continuous 3D coordinate in world units."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @classmethod
    def of(cls, values: Iterable[float]) -> WorldPosition:
        x, y, z = values
        return cls(float(x), float(y), float(z))

    def as_tuple(self) -> tuple[float, float, float]:
        return (self.x, self.y, self.z)

    def __add__(self, other: WorldPosition) -> WorldPosition:
        return WorldPosition(self.x + other.x, self.y + other.y, self.z + other.z)

    def scaled(self, factor: float) -> WorldPosition:
        return WorldPosition(self.x * factor, self.y * factor, self.z * factor)

    def length(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def normalized(self) -> WorldPosition:
        """Return the unit vector along this one. Raises ValueError for a zero vector."""
        n = self.length()
        if n == 0.0:
            raise ValueError("cannot normalize a zero-length vector")
        return self.scaled(1.0 / n)


@dataclass(frozen=True, slots=True)
class Laser:
    """A projectile fired by the player."""

    id: int
    position: WorldPosition
    direction: WorldPosition


@dataclass(slots=True)
class AlienTarget:
    """The destructible target placed across a straight corridor.

    Destruction is logical: the target stays in memory with ``is_destroyed``
    set until the session is reset, and the flag gates collision and drawing.
    """

    position: WorldPosition
    orientation: Orientation
    grid_pos: GridPoint
    is_destroyed: bool = False

    def copy(self) -> AlienTarget:
        return replace(self)
