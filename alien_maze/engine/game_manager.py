"""GameManager — owns the session and drives maze generation on the event loop.

Generation is awaited through a ``MazeSource`` and may suspend for as long
as the source needs. The session's generation token decides whether a
finished result is still wanted; ``request_new_game`` also cancels any
earlier in-flight generation task.
"""

from __future__ import annotations

import asyncio
import logging
import secrets
from typing import TYPE_CHECKING

from alien_maze.core.enums import Domain, SessionState
from alien_maze.engine.session import GameSession
from alien_maze.systems.maze_generator import GenerationError, LocalMazeSource
from alien_maze.systems.rng import DeterministicRNG
from alien_maze.utils.event_log import EventLog

if TYPE_CHECKING:
    from alien_maze.config import GameConfig
    from alien_maze.core.snapshot import SessionSnapshot
    from alien_maze.systems.maze_generator import MazeSource

logger = logging.getLogger(__name__)

_SEED_BITS = 62


class GameManager:
    """Lifecycle wrapper around a single GameSession.

    All session mutations happen on the thread running the event loop;
    only the maze source may do work elsewhere.
    """

    def __init__(self, config: GameConfig, source: MazeSource | None = None) -> None:
        self.config = config
        self._source: MazeSource = source if source is not None else LocalMazeSource(config)
        self._event_log = EventLog()
        self._session = GameSession(config, self._event_log)
        self._pending: set[asyncio.Task] = set()

    # -- public properties --

    @property
    def session(self) -> GameSession:
        return self._session

    @property
    def state(self) -> SessionState:
        return self._session.state

    @property
    def event_log(self) -> EventLog:
        return self._event_log

    @property
    def generating(self) -> bool:
        return any(not t.done() for t in self._pending)

    def get_snapshot(self) -> SessionSnapshot:
        return self._session.snapshot()

    # -- randomness --

    def _rng_for(self, token: int) -> DeterministicRNG:
        """Seed for one generation: derived from the configured seed, else fresh entropy."""
        base = self.config.maze_seed
        if base is None:
            return DeterministicRNG(secrets.randbits(_SEED_BITS))
        derived = DeterministicRNG(base).next_int(Domain.SESSION, 0, token, 0, (1 << _SEED_BITS) - 1)
        return DeterministicRNG(derived)

    # -- lifecycle --

    async def new_game(self) -> SessionState:
        """Request a maze and wait for it. Returns the resulting session state."""
        token = self._session.begin_loading()
        if token is None:
            return self._session.state
        await self._generate(token)
        return self._session.state

    async def retry(self) -> SessionState:
        return await self.new_game()

    def request_new_game(self) -> int | None:
        """Start generation in the background and return its token.

        Must be called from a running event loop. Earlier generation tasks
        are cancelled; their results would be stale anyway.
        """
        token = self._session.begin_loading()
        if token is None:
            return None
        for task in list(self._pending):
            task.cancel()
        task = asyncio.get_running_loop().create_task(self._generate(token), name=f"maze-gen-{token}")
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)
        return token

    async def shutdown(self) -> None:
        tasks = list(self._pending)
        for task in tasks:
            task.cancel()
        if tasks:
            await asyncio.gather(*tasks, return_exceptions=True)
        logger.info("GameManager stopped.")

    # -- internals --

    async def _generate(self, token: int) -> None:
        try:
            rng = self._rng_for(token)
            logger.info("Generating maze %d (seed=%d)", token, rng.seed)
            maze = await self._source.generate(rng.stream(Domain.MAZE_GEN))
        except GenerationError as exc:
            self._session.fail_generation(token, str(exc))
            return
        except Exception as exc:
            logger.exception("Maze source crashed during generation %d", token)
            self._session.fail_generation(token, str(exc) or type(exc).__name__)
            return
        if not self._session.complete_generation(token, maze, rng.stream(Domain.PLACEMENT)):
            logger.info("Maze %d arrived after a newer request; discarded", token)
