"""Alien target placement across a straight one-wide corridor."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from alien_maze.core.enums import Cell, Orientation
from alien_maze.core.geometry import grid_to_world_center
from alien_maze.core.models import AlienTarget, GridPoint

if TYPE_CHECKING:
    from alien_maze.config import GameConfig
    from alien_maze.core.grid import MazeData
    from alien_maze.systems.rng import RandomSource

logger = logging.getLogger(__name__)


def corridor_candidates(maze: MazeData) -> list[tuple[GridPoint, Orientation]]:
    """List every (cell, orientation) pair that can host the target.

    A cell qualifies along Z when north and south are open and east and
    west are walls, and along X in the transposed case. Border cells,
    ``start`` and ``end`` never qualify.
    """
    grid = maze.grid
    size = grid.size
    candidates: list[tuple[GridPoint, Orientation]] = []
    for z in range(1, size - 1):
        for x in range(1, size - 1):
            point = GridPoint(x, z)
            if point == maze.start or point == maze.end:
                continue
            if grid.get_xz(x, z) != Cell.OPEN:
                continue
            north = grid.get_xz(x, z - 1)
            south = grid.get_xz(x, z + 1)
            west = grid.get_xz(x - 1, z)
            east = grid.get_xz(x + 1, z)

            if north == Cell.OPEN and south == Cell.OPEN and west == Cell.WALL and east == Cell.WALL:
                candidates.append((point, Orientation.ALONG_Z))
            if west == Cell.OPEN and east == Cell.OPEN and north == Cell.WALL and south == Cell.WALL:
                candidates.append((point, Orientation.ALONG_X))
    return candidates


def place_target(maze: MazeData, config: GameConfig, rng: RandomSource) -> AlienTarget | None:
    """Pick one corridor candidate uniformly; None when the maze has none."""
    candidates = corridor_candidates(maze)
    if not candidates:
        logger.debug("No straight corridor cell available; session has no alien target")
        return None

    point, orientation = rng.choice(candidates)
    position = grid_to_world_center(point, config, y=config.wall_height / 2)
    logger.debug("Placed alien target at %s (%s) from %d candidates", point, orientation.name, len(candidates))
    return AlienTarget(position=position, orientation=orientation, grid_pos=point)
