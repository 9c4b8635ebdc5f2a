"""Core data models and maze representation."""

from alien_maze.core.enums import Cell, Domain, Orientation, SessionState
from alien_maze.core.models import AlienTarget, GridPoint, Laser, WorldPosition
from alien_maze.core.grid import MazeData, MazeGrid
from alien_maze.core.collision import CollisionResolver
from alien_maze.core.entities import EntityManager
from alien_maze.core.snapshot import SessionSnapshot

__all__ = [
    "AlienTarget",
    "Cell",
    "CollisionResolver",
    "Domain",
    "EntityManager",
    "GridPoint",
    "Laser",
    "MazeData",
    "MazeGrid",
    "Orientation",
    "SessionSnapshot",
    "SessionState",
    "WorldPosition",
]
