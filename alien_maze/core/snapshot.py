"""Immutable snapshot of a session for the rendering layer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from alien_maze.core.enums import SessionState
from alien_maze.core.grid import MazeData
from alien_maze.core.models import AlienTarget, Laser, WorldPosition

if TYPE_CHECKING:
    from alien_maze.engine.session import GameSession


@dataclass(frozen=True, slots=True)
class SessionSnapshot:
    """Read-only view of a session taken once per tick.

    Lists are copied into tuples and the target is copied, so later session
    mutations never show through an existing snapshot.
    """

    state: SessionState
    generation: int
    maze: MazeData | None
    breadcrumbs: tuple[WorldPosition, ...]
    lasers: tuple[Laser, ...]
    alien_target: AlienTarget | None
    exploding_position: WorldPosition | None
    error: str
    has_started: bool
    reset_count: int

    @classmethod
    def from_session(cls, session: GameSession) -> SessionSnapshot:
        entities = session.entities
        target = entities.alien_target
        return cls(
            state=session.state,
            generation=session.generation,
            maze=session.maze,  # maze is immutable for the session's lifetime
            breadcrumbs=tuple(entities.breadcrumbs),
            lasers=tuple(entities.lasers.values()),
            alien_target=target.copy() if target is not None else None,
            exploding_position=entities.exploding_position,
            error=session.error,
            has_started=session.has_started,
            reset_count=session.reset_count,
        )
