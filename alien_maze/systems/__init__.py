"""Game systems: RNG, maze generation, pathfinding, target placement."""

from alien_maze.systems.rng import DeterministicRNG, RandomSource, RngStream
from alien_maze.systems.maze_generator import GenerationError, LocalMazeSource, MazeGenerator, MazeSource
from alien_maze.systems.placement import place_target

__all__ = [
    "DeterministicRNG",
    "GenerationError",
    "LocalMazeSource",
    "MazeGenerator",
    "MazeSource",
    "RandomSource",
    "RngStream",
    "place_target",
]
