"""Enumerations used throughout the game core."""

from __future__ import annotations

from enum import IntEnum, unique


@unique
class Cell(IntEnum):
    """Maze cell contents. Values match the wire format of the grid."""

    OPEN = 0
    WALL = 1


@unique
class SessionState(IntEnum):
    """Lifecycle states of a game session."""

    LOADING = 0
    INTRO = 1
    PLAYING = 2
    WON = 3
    ERROR = 4

    @property
    def label(self) -> str:
        return self.name.lower()


@unique
class Orientation(IntEnum):
    """Corridor axis an alien target sits across."""

    ALONG_X = 0
    ALONG_Z = 1

    @property
    def label(self) -> str:
        return "x" if self is Orientation.ALONG_X else "z"


@unique
class Domain(IntEnum):
    """RNG domains for deterministic randomness isolation."""

    MAZE_GEN = 0
    PLACEMENT = 1
    SESSION = 2
