"""Engine layer: session state machine and game lifecycle management."""

from alien_maze.engine.session import GameSession
from alien_maze.engine.game_manager import GameManager

__all__ = ["GameManager", "GameSession"]
