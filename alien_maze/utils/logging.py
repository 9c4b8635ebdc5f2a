"""Structured logging configuration."""

from __future__ import annotations

import logging
import sys

# Loggers uvicorn installs its own handlers on; they are routed to the root
# handler so server and game-core lines share one format.
_SERVER_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


def setup_logging(level: str = "INFO") -> None:
    """Configure root logger with a clean format for game-core output.

    Call after uvicorn has configured itself (e.g. from the app lifespan).
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(numeric_level)

    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)-5s] %(name)-32s | %(message)s",
        datefmt="%H:%M:%S",
    )
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.setLevel(numeric_level)
    root.handlers.clear()
    root.addHandler(handler)

    for name in _SERVER_LOGGERS:
        server_logger = logging.getLogger(name)
        server_logger.handlers.clear()
        server_logger.propagate = True

    logging.getLogger("alien_maze").debug("Logging configured at %s", logging.getLevelName(numeric_level))
