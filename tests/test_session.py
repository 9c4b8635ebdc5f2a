"""Tests for the GameSession state machine.

Covers:
- The transition table (happy path, focus loss, win, reset, new game)
- Stale generation tokens (last request wins)
- Events ignored in the wrong state
- Reset keeps the maze and stands the target back up
"""

import random

from alien_maze.core.enums import SessionState
from alien_maze.core.geometry import grid_to_world_center
from alien_maze.core.models import GridPoint, WorldPosition
from alien_maze.engine.session import GameSession
from tests.helpers.mazes import (
    no_corridor_maze,
    ring_maze,
    single_corridor_maze,
    small_config,
)

FORWARD = WorldPosition(0.0, 0.0, 1.0)


def _loaded(maze=None) -> GameSession:
    session = GameSession(small_config())
    token = session.begin_loading()
    session.complete_generation(token, maze or single_corridor_maze(), random.Random(0))
    return session


def _playing(maze=None) -> GameSession:
    session = _loaded(maze)
    session.play()
    return session


def _center(session: GameSession, x: int, z: int) -> WorldPosition:
    return grid_to_world_center(GridPoint(x, z), session.config, y=1.8)


# ---------------------------------------------------------------------------
# Happy path
# ---------------------------------------------------------------------------

class TestLifecycle:
    def test_starts_loading_without_maze(self):
        session = GameSession(small_config())
        assert session.state == SessionState.LOADING
        assert session.maze is None
        assert session.generation == 0

    def test_generation_success_enters_intro(self):
        session = _loaded()
        assert session.state == SessionState.INTRO
        assert session.maze is not None
        assert session.entities.alien_target is not None
        assert session.entities.alien_target.grid_pos == GridPoint(1, 2)

    def test_generation_without_corridor_has_no_target(self):
        session = _loaded(no_corridor_maze())
        assert session.state == SessionState.INTRO
        assert session.entities.alien_target is None

    def test_generation_failure_enters_error(self):
        session = GameSession(small_config())
        token = session.begin_loading()
        assert session.fail_generation(token, "upstream unavailable")
        assert session.state == SessionState.ERROR
        assert session.error == "upstream unavailable"

    def test_empty_failure_message_gets_default(self):
        session = GameSession(small_config())
        session.fail_generation(session.begin_loading(), "")
        assert session.error

    def test_retry_from_error(self):
        session = GameSession(small_config())
        session.fail_generation(session.begin_loading(), "boom")
        token = session.begin_loading()
        assert token == 2
        assert session.state == SessionState.LOADING
        assert session.error == ""
        assert session.complete_generation(token, ring_maze(), random.Random(1))
        assert session.state == SessionState.INTRO

    def test_play_marks_started(self):
        session = _loaded()
        assert not session.has_started
        assert session.play()
        assert session.state == SessionState.PLAYING
        assert session.has_started

    def test_focus_lost_returns_to_intro_keeping_entities(self):
        session = _playing()
        session.add_breadcrumb(_center(session, 1, 1))
        laser = session.add_laser(_center(session, 1, 1), FORWARD)
        assert session.focus_lost()
        assert session.state == SessionState.INTRO
        assert len(session.entities.breadcrumbs) == 1
        assert laser.id in session.entities.lasers
        assert session.has_started

    def test_resume_after_focus_lost(self):
        session = _playing()
        session.focus_lost()
        assert session.play()
        assert session.state == SessionState.PLAYING

    def test_win(self):
        session = _playing()
        assert session.win()
        assert session.state == SessionState.WON

    def test_new_game_from_won(self):
        session = _playing()
        session.win()
        token = session.begin_loading()
        assert token is not None
        assert session.state == SessionState.LOADING
        assert session.maze is None
        assert session.entities.alien_target is None
        assert not session.has_started

    def test_new_game_from_intro(self):
        session = _loaded()
        assert session.begin_loading() is not None


# ---------------------------------------------------------------------------
# Rejected events
# ---------------------------------------------------------------------------

class TestIgnoredEvents:
    def test_play_while_loading(self):
        session = GameSession(small_config())
        assert session.play() is False
        assert session.state == SessionState.LOADING

    def test_win_outside_playing(self):
        session = _loaded()
        assert session.win() is False
        assert session.state == SessionState.INTRO

    def test_focus_lost_outside_playing(self):
        session = _loaded()
        assert session.focus_lost() is False

    def test_new_game_while_playing_ignored(self):
        session = _playing()
        generation = session.generation
        assert session.begin_loading() is None
        assert session.state == SessionState.PLAYING
        assert session.generation == generation

    def test_won_is_terminal_for_play(self):
        session = _playing()
        session.win()
        assert session.play() is False
        assert session.focus_lost() is False
        assert session.state == SessionState.WON

    def test_reset_without_maze(self):
        session = GameSession(small_config())
        assert session.reset_current_game() is False

    def test_reset_from_error(self):
        session = GameSession(small_config())
        session.fail_generation(session.begin_loading(), "boom")
        assert session.reset_current_game() is False
        assert session.state == SessionState.ERROR

    def test_entity_callbacks_without_maze(self):
        session = GameSession(small_config())
        assert session.add_breadcrumb(WorldPosition()) is False
        assert session.add_laser(WorldPosition(), FORWARD) is None
        assert session.on_alien_hit(1) is False
        assert session.remove_laser(1) is False
        assert session.entities.breadcrumbs == []

    def test_collision_without_maze(self):
        session = GameSession(small_config())
        assert not session.check_wall_collision(WorldPosition(999, 0, 999))
        assert not session.check_player_collision(WorldPosition(999, 0, 999))


# ---------------------------------------------------------------------------
# Stale generation
# ---------------------------------------------------------------------------

class TestStaleGeneration:
    def test_older_result_discarded(self):
        session = GameSession(small_config())
        first = session.begin_loading()
        second = session.begin_loading()
        assert session.complete_generation(first, ring_maze(), random.Random(0)) is False
        assert session.state == SessionState.LOADING
        assert session.maze is None
        assert session.complete_generation(second, single_corridor_maze(), random.Random(0))
        assert session.maze == single_corridor_maze()

    def test_stale_failure_discarded(self):
        session = GameSession(small_config())
        first = session.begin_loading()
        second = session.begin_loading()
        assert session.fail_generation(first, "late failure") is False
        assert session.state == SessionState.LOADING
        assert session.complete_generation(second, ring_maze(), random.Random(0))

    def test_late_result_after_newer_completed(self):
        session = GameSession(small_config())
        first = session.begin_loading()
        second = session.begin_loading()
        session.complete_generation(second, single_corridor_maze(), random.Random(0))
        assert session.complete_generation(first, ring_maze(), random.Random(0)) is False
        assert session.maze == single_corridor_maze()
        assert session.state == SessionState.INTRO

    def test_duplicate_delivery_ignored(self):
        session = GameSession(small_config())
        token = session.begin_loading()
        session.complete_generation(token, ring_maze(), random.Random(0))
        session.play()
        assert session.complete_generation(token, single_corridor_maze(), random.Random(0)) is False
        assert session.state == SessionState.PLAYING
        assert session.maze == ring_maze()


# ---------------------------------------------------------------------------
# Reset
# ---------------------------------------------------------------------------

class TestResetCurrentGame:
    def test_reset_clears_entities_and_keeps_grid(self):
        session = _playing()
        maze_before = session.maze
        rows_before = session.maze.grid.rows()
        session.add_breadcrumb(_center(session, 1, 1))
        laser = session.add_laser(_center(session, 1, 1), FORWARD)
        session.on_alien_hit(laser.id)
        session.add_laser(_center(session, 1, 1), FORWARD)

        assert session.reset_current_game()
        assert session.state == SessionState.PLAYING
        assert session.entities.breadcrumbs == []
        assert session.entities.lasers == {}
        assert session.entities.exploding_position is None
        assert not session.entities.alien_target.is_destroyed
        assert session.maze is maze_before
        assert session.maze.grid.rows() == rows_before
        assert session.reset_count == 1

    def test_reset_from_won(self):
        session = _playing()
        session.win()
        assert session.reset_current_game()
        assert session.state == SessionState.PLAYING

    def test_reset_from_intro(self):
        session = _loaded()
        assert session.reset_current_game()
        assert session.state == SessionState.PLAYING


# ---------------------------------------------------------------------------
# Player helpers, collision, entities
# ---------------------------------------------------------------------------

class TestPlayerInteraction:
    def test_spawn_position_at_start_eye_height(self):
        session = _loaded()
        assert session.spawn_position() == WorldPosition(-4.0, 1.8, -4.0)
        assert GameSession(small_config()).spawn_position() is None

    def test_reaching_exit_wins(self):
        session = _playing(ring_maze())
        assert session.report_player_position(_center(session, 2, 1)) is False
        assert session.report_player_position(_center(session, 3, 3)) is True
        assert session.state == SessionState.WON

    def test_exit_ignored_on_intro(self):
        session = _loaded(ring_maze())
        assert session.report_player_position(_center(session, 3, 3)) is False
        assert session.state == SessionState.INTRO

    def test_target_blocks_player_until_destroyed(self):
        session = _playing()
        target_cell = _center(session, 1, 2)
        assert session.check_player_collision(target_cell)
        assert not session.check_wall_collision(target_cell)
        laser = session.add_laser(_center(session, 1, 1), FORWARD)
        assert session.on_alien_hit(laser.id)
        assert not session.check_player_collision(target_cell)

    def test_alien_hit_logs_event(self):
        session = _playing()
        laser = session.add_laser(_center(session, 1, 1), FORWARD)
        session.on_alien_hit(laser.id)
        assert any(e.category == "alien" for e in session.event_log.latest())

    def test_snapshot_is_detached(self):
        session = _playing()
        session.add_breadcrumb(_center(session, 1, 1))
        snap = session.snapshot()
        laser = session.add_laser(_center(session, 1, 1), FORWARD)
        session.on_alien_hit(laser.id)
        assert len(snap.breadcrumbs) == 1
        assert snap.lasers == ()
        assert not snap.alien_target.is_destroyed
        assert snap.state == SessionState.PLAYING
