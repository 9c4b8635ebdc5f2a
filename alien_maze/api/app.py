"""FastAPI application factory with lifespan management."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from alien_maze.api.dependencies import set_game_manager
from alien_maze.api.routes import api_router
from alien_maze.config import GameConfig
from alien_maze.engine.game_manager import GameManager
from alien_maze.utils.logging import setup_logging

logger = logging.getLogger(__name__)


def create_app(config: GameConfig | None = None) -> FastAPI:
    """Build and return the fully-configured FastAPI application."""
    if config is None:
        config = GameConfig()

    _config = config

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        setup_logging(_config.log_level)
        manager = GameManager(_config)
        set_game_manager(manager)
        manager.request_new_game()
        logger.info("API server started — first maze generating.")
        yield
        await manager.shutdown()
        set_game_manager(None)
        logger.info("API server shutting down.")

    app = FastAPI(
        title="Alien Maze Core",
        description=(
            "Maze generation, collision and session lifecycle for a first-person maze game.\n\n"
            "## API Groups\n\n"
            "- **State** — Live session snapshot and event feed (polled every tick)\n"
            "- **Map** — The maze grid of the current session (fetch once per game)\n"
            "- **Control** — Session lifecycle: new game, retry, play, focus lost, win, reset\n"
            "- **Entities** — Breadcrumb, laser and alien-hit callbacks from the renderer\n"
            "- **Collision** — Pre-move wall and player collision queries\n"
            "- **Config** — Read-only geometry and timing constants\n"
        ),
        version="0.1.0",
        lifespan=lifespan,
    )

    # CORS: allow any origin in dev
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(api_router)
    return app
