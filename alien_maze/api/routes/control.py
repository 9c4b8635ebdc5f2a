"""POST /api/v1/control/{action} — session lifecycle controls."""

from __future__ import annotations

from enum import Enum

from fastapi import APIRouter, Depends

from alien_maze.api.dependencies import get_game_manager
from alien_maze.api.schemas import ControlResponse
from alien_maze.engine.game_manager import GameManager

router = APIRouter()


class ControlAction(str, Enum):
    new_game = "new-game"
    retry = "retry"
    play = "play"
    focus_lost = "focus-lost"
    win = "win"
    reset = "reset"


def _response(manager: GameManager, accepted: bool, message: str) -> ControlResponse:
    status = "ok" if accepted else "noop"
    if not accepted:
        message = f"Ignored in state '{manager.state.label}'."
    return ControlResponse(status=status, message=message, state=manager.state.label)


@router.post("/control/{action}", response_model=ControlResponse)
async def control(
    action: ControlAction,
    manager: GameManager = Depends(get_game_manager),
) -> ControlResponse:
    session = manager.session

    match action:
        case ControlAction.new_game | ControlAction.retry:
            token = manager.request_new_game()
            return _response(manager, token is not None, f"Generating maze {token}.")

        case ControlAction.play:
            return _response(manager, session.play(), "Playing.")

        case ControlAction.focus_lost:
            return _response(manager, session.focus_lost(), "Paused on intro screen.")

        case ControlAction.win:
            return _response(manager, session.win(), "Exit reached.")

        case ControlAction.reset:
            return _response(manager, session.reset_current_game(), "Maze reset.")
