"""GameSession — the session state machine.

    LOADING ──success──▶ INTRO ──play──▶ PLAYING ──win──▶ WON
       │ ▲                 ▲                │
    failure│retry           └──focus lost───┘
       ▼ │
      ERROR

New games may be requested from LOADING, INTRO, WON and ERROR. A reset
(same maze, fresh entities) is accepted from INTRO, PLAYING and WON and
always lands in PLAYING.

Every call to ``begin_loading`` issues a new generation token. Results
delivered with an older token are stale and discarded, so the last request
always wins. Events that the current state does not accept are ignored and
reported with a False return value.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from alien_maze.core.collision import CollisionResolver
from alien_maze.core.entities import EntityManager
from alien_maze.core.enums import SessionState
from alien_maze.core.geometry import grid_to_world_center
from alien_maze.core.snapshot import SessionSnapshot
from alien_maze.systems.placement import place_target
from alien_maze.utils.event_log import EventLog

if TYPE_CHECKING:
    from alien_maze.config import GameConfig
    from alien_maze.core.grid import MazeData
    from alien_maze.core.models import Laser, WorldPosition
    from alien_maze.systems.rng import RandomSource

logger = logging.getLogger(__name__)

NEW_GAME_STATES = frozenset({SessionState.LOADING, SessionState.INTRO, SessionState.WON, SessionState.ERROR})
RESET_STATES = frozenset({SessionState.INTRO, SessionState.PLAYING, SessionState.WON})


class GameSession:
    """One game session: lifecycle state, the maze, and its transient entities."""

    def __init__(self, config: GameConfig, event_log: EventLog | None = None) -> None:
        self.config = config
        self.event_log = event_log if event_log is not None else EventLog()
        self.state: SessionState = SessionState.LOADING
        self.maze: MazeData | None = None
        self.entities = EntityManager()
        self.collision = CollisionResolver(config)
        self.error: str = ""
        self.has_started: bool = False
        self.reset_count: int = 0
        self._generation: int = 0

    # -- properties --

    @property
    def generation(self) -> int:
        """Token of the most recent maze request."""
        return self._generation

    def is_current(self, token: int) -> bool:
        return token == self._generation

    # -- transitions --

    def _transition(self, new_state: SessionState, reason: str) -> None:
        old = self.state
        self.state = new_state
        logger.info("Session %s -> %s (%s)", old.name, new_state.name, reason)
        self.event_log.append("state", f"{old.label} -> {new_state.label}: {reason}")

    def _reject(self, event: str) -> bool:
        logger.debug("Ignoring %s in state %s", event, self.state.name)
        return False

    def begin_loading(self) -> int | None:
        """Start a new game: wipe the session and issue a fresh generation token.

        Returns the token, or None when a new game cannot start from the
        current state.
        """
        if self.state not in NEW_GAME_STATES:
            self._reject("new game")
            return None
        self._generation += 1
        self.maze = None
        self.collision = CollisionResolver(self.config)
        self.entities.clear()
        self.error = ""
        self.has_started = False
        self.reset_count = 0
        self._transition(SessionState.LOADING, f"generation {self._generation} requested")
        return self._generation

    def complete_generation(self, token: int, maze: MazeData, rng: RandomSource) -> bool:
        """Install a generated maze, place the target and open the intro screen."""
        if not self.is_current(token):
            logger.debug("Discarding stale maze for generation %d (current %d)", token, self._generation)
            return False
        if self.state != SessionState.LOADING:
            return self._reject("generation result")

        self.maze = maze
        self.collision = CollisionResolver(self.config, maze)
        self.entities.clear()
        self.entities.set_target(place_target(maze, self.config, rng))
        self.entities.reset()
        target = self.entities.alien_target
        self.event_log.append(
            "generation",
            f"maze {maze.size}x{maze.size} ready, start {maze.start}, end {maze.end}, "
            f"alien {'at ' + repr(target.grid_pos) if target else 'absent'}",
        )
        self._transition(SessionState.INTRO, "maze ready")
        return True

    def fail_generation(self, token: int, message: str) -> bool:
        if not self.is_current(token):
            logger.debug("Discarding stale failure for generation %d (current %d)", token, self._generation)
            return False
        if self.state != SessionState.LOADING:
            return self._reject("generation failure")

        self.error = message or "An unknown error occurred."
        logger.warning("Maze generation %d failed: %s", token, self.error)
        self.event_log.append("generation", f"failed: {self.error}")
        self._transition(SessionState.ERROR, "generation failed")
        return True

    def play(self) -> bool:
        if self.state != SessionState.INTRO:
            return self._reject("play")
        self.has_started = True
        self._transition(SessionState.PLAYING, "play requested")
        return True

    def focus_lost(self) -> bool:
        if self.state != SessionState.PLAYING:
            return self._reject("focus lost")
        self._transition(SessionState.INTRO, "focus lost")
        return True

    def win(self) -> bool:
        if self.state != SessionState.PLAYING:
            return self._reject("win")
        self._transition(SessionState.WON, "exit reached")
        return True

    def reset_current_game(self) -> bool:
        """Replay the same maze: clear the trail and lasers, stand the target back up."""
        if self.state not in RESET_STATES or self.maze is None:
            return self._reject("reset")
        self.entities.reset()
        self.reset_count += 1
        self.has_started = True
        self._transition(SessionState.PLAYING, f"reset #{self.reset_count}")
        return True

    # -- player --

    def spawn_position(self) -> WorldPosition | None:
        """Centre of the start cell at eye height; None while no maze is loaded."""
        if self.maze is None:
            return None
        return grid_to_world_center(self.maze.start, self.config, y=self.config.player_height)

    def report_player_position(self, pos: WorldPosition) -> bool:
        """Let the movement collaborator report a committed position; wins at the exit."""
        if self.state != SessionState.PLAYING:
            return False
        if self.collision.is_at_exit(pos):
            return self.win()
        return False

    # -- collision queries --

    def check_wall_collision(self, pos: WorldPosition) -> bool:
        return self.collision.check_wall_collision(pos)

    def check_player_collision(self, pos: WorldPosition) -> bool:
        return self.collision.check_player_collision(pos, self.entities.alien_target)

    # -- entity callbacks --

    def add_breadcrumb(self, pos: WorldPosition) -> bool:
        if self.maze is None:
            return self._reject("breadcrumb")
        self.entities.add_breadcrumb(pos)
        return True

    def add_laser(self, pos: WorldPosition, direction: WorldPosition) -> Laser | None:
        if self.maze is None:
            self._reject("laser")
            return None
        return self.entities.add_laser(pos, direction)

    def remove_laser(self, laser_id: int) -> bool:
        return self.entities.remove_laser(laser_id)

    def on_alien_hit(self, laser_id: int) -> bool:
        if self.maze is None:
            return self._reject("alien hit")
        destroyed = self.entities.on_alien_hit(laser_id)
        if destroyed:
            target = self.entities.alien_target
            self.event_log.append("alien", f"alien at {target.grid_pos} destroyed by laser {laser_id}")
        return destroyed

    def on_explosion_complete(self) -> None:
        self.entities.on_explosion_complete()

    # -- snapshot --

    def snapshot(self) -> SessionSnapshot:
        return SessionSnapshot.from_session(self)

    def __repr__(self) -> str:
        return f"GameSession(state={self.state.name}, generation={self._generation})"
