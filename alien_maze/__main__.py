"""Entry point: ``python -m alien_maze``.

Supports two modes:
  - ``python -m alien_maze``            → Launch the FastAPI server for a renderer
  - ``python -m alien_maze cli``        → Generate one maze and print it as ASCII
"""

from __future__ import annotations

import argparse
import asyncio
import logging

from alien_maze.core.models import GridPoint

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Alien Maze game core")
    sub = parser.add_subparsers(dest="command")

    # --- Server mode (default) ---
    srv = sub.add_parser("serve", help="Start the FastAPI server (default)")
    srv.add_argument("--host", type=str, default="127.0.0.1")
    srv.add_argument("--port", type=int, default=8000)
    srv.add_argument("--size", type=int, default=17, help="Maze side length (odd)")
    srv.add_argument("--seed", type=int, default=None)
    srv.add_argument("--log-level", type=str, default="INFO", choices=["DEBUG", "INFO", "WARNING"])

    # --- Headless CLI mode ---
    cli = sub.add_parser("cli", help="Generate a maze and print it")
    cli.add_argument("--size", type=int, default=17, help="Maze side length (odd)")
    cli.add_argument("--seed", type=int, default=None)
    cli.add_argument("--log-level", type=str, default="WARNING", choices=["DEBUG", "INFO", "WARNING"])

    return parser


def _run_server(args: argparse.Namespace) -> None:
    import uvicorn

    from alien_maze.api.app import create_app
    from alien_maze.config import GameConfig

    config = GameConfig(maze_size=args.size, maze_seed=args.seed, log_level=args.log_level)
    app = create_app(config)
    uvicorn.run(app, host=args.host, port=args.port, log_level=args.log_level.lower())


def render_ascii(snapshot) -> str:
    """Draw a loaded session: # wall, S start, E exit, A alien target."""
    maze = snapshot.maze
    if maze is None:
        return f"<no maze: {snapshot.state.label} {snapshot.error}>".rstrip()
    marks = {maze.start: "S", maze.end: "E"}
    if snapshot.alien_target is not None:
        marks[snapshot.alien_target.grid_pos] = "A"

    lines = []
    for z, row in enumerate(maze.grid.rows()):
        lines.append("".join(
            marks.get(GridPoint(x, z), "#" if cell else " ") for x, cell in enumerate(row)
        ))
    return "\n".join(lines)


def _run_cli(args: argparse.Namespace) -> None:
    from alien_maze.config import GameConfig
    from alien_maze.engine.game_manager import GameManager
    from alien_maze.utils.logging import setup_logging

    config = GameConfig(maze_size=args.size, maze_seed=args.seed, log_level=args.log_level)
    setup_logging(config.log_level)

    manager = GameManager(config)
    state = asyncio.run(manager.new_game())
    snapshot = manager.get_snapshot()
    print(render_ascii(snapshot))

    target = snapshot.alien_target
    print(f"state={state.label} start={snapshot.maze.start if snapshot.maze else None} "
          f"end={snapshot.maze.end if snapshot.maze else None} "
          f"alien={(target.grid_pos, target.orientation.label) if target else None}")


def main() -> None:
    parser = _build_parser()
    args = parser.parse_args()

    # Default to serve mode if no subcommand given
    if args.command is None or args.command == "serve":
        if args.command is None:
            args = parser.parse_args(["serve"])
        _run_server(args)
    elif args.command == "cli":
        _run_cli(args)


if __name__ == "__main__":
    main()
