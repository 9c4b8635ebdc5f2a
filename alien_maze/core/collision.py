"""Wall and target collision queries, resolved in grid space."""

from __future__ import annotations

from typing import TYPE_CHECKING

from alien_maze.core.enums import Cell
from alien_maze.core.geometry import world_to_grid

if TYPE_CHECKING:
    from alien_maze.config import GameConfig
    from alien_maze.core.grid import MazeData
    from alien_maze.core.models import AlienTarget, WorldPosition


class CollisionResolver:
    """Answers "would this position collide?" against one maze.

    Queries are advisory: movement collaborators ask before committing a
    candidate position. With no maze bound every query reports no collision.
    """

    __slots__ = ("_config", "_maze")

    def __init__(self, config: GameConfig, maze: MazeData | None = None) -> None:
        self._config = config
        self._maze = maze

    @property
    def maze(self) -> MazeData | None:
        return self._maze

    def check_wall_collision(self, pos: WorldPosition) -> bool:
        if self._maze is None:
            return False
        cell = world_to_grid(pos, self._config)
        grid = self._maze.grid
        if not grid.in_bounds(cell):
            return True
        return grid.get(cell) == Cell.WALL

    def check_player_collision(self, pos: WorldPosition, target: AlienTarget | None) -> bool:
        """Walls block the player, and so does a target that is still standing."""
        if self.check_wall_collision(pos):
            return True
        if self._maze is None or target is None or target.is_destroyed:
            return False
        return world_to_grid(pos, self._config) == target.grid_pos

    def is_at_exit(self, pos: WorldPosition) -> bool:
        if self._maze is None:
            return False
        return world_to_grid(pos, self._config) == self._maze.end
