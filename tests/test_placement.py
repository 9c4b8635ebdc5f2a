"""Tests for alien target placement across straight corridors."""

import random

from alien_maze.core.enums import Domain, Orientation
from alien_maze.core.models import GridPoint, WorldPosition
from alien_maze.systems.maze_generator import MazeGenerator
from alien_maze.systems.placement import corridor_candidates, place_target
from alien_maze.systems.rng import DeterministicRNG
from alien_maze.config import GameConfig
from tests.helpers.mazes import (
    no_corridor_maze,
    ring_maze,
    single_corridor_maze,
    small_config,
)


class TestCorridorCandidates:
    def test_ring_has_four_corridor_cells(self):
        candidates = corridor_candidates(ring_maze())
        assert len(candidates) == 4
        assert set(candidates) == {
            (GridPoint(2, 1), Orientation.ALONG_X),
            (GridPoint(1, 2), Orientation.ALONG_Z),
            (GridPoint(3, 2), Orientation.ALONG_Z),
            (GridPoint(2, 3), Orientation.ALONG_X),
        }

    def test_start_and_end_excluded(self):
        maze = ring_maze()
        cells = {p for p, _ in corridor_candidates(maze)}
        assert maze.start not in cells
        assert maze.end not in cells

    def test_candidates_are_open_interior_cells(self):
        cfg = GameConfig(maze_size=15)
        maze = MazeGenerator(cfg).generate(DeterministicRNG(11).stream(Domain.MAZE_GEN))
        for point, _ in corridor_candidates(maze):
            assert 1 <= point.x <= 13 and 1 <= point.z <= 13
            assert maze.grid.is_open(point)

    def test_generated_mazes_offer_candidates(self):
        cfg = GameConfig()
        maze = MazeGenerator(cfg).generate(DeterministicRNG(5).stream(Domain.MAZE_GEN))
        assert corridor_candidates(maze)


class TestPlaceTarget:
    def test_single_candidate_is_chosen(self):
        cfg = small_config()
        for seed in range(5):
            target = place_target(single_corridor_maze(), cfg, random.Random(seed))
            assert target is not None
            assert target.grid_pos == GridPoint(1, 2)
            assert target.orientation == Orientation.ALONG_Z
            assert not target.is_destroyed

    def test_position_is_cell_center_at_half_wall_height(self):
        cfg = small_config()
        target = place_target(single_corridor_maze(), cfg, random.Random(0))
        assert target.position == WorldPosition(-4.0, cfg.wall_height / 2, 0.0)

    def test_no_candidate_means_no_target(self):
        assert place_target(no_corridor_maze(), small_config(), random.Random(0)) is None

    def test_choice_comes_from_candidates(self):
        maze = ring_maze()
        candidates = corridor_candidates(maze)
        rng = DeterministicRNG(3).stream(Domain.PLACEMENT)
        for _ in range(10):
            target = place_target(maze, small_config(), rng)
            assert (target.grid_pos, target.orientation) in candidates

    def test_seeded_placement_is_reproducible(self):
        maze = ring_maze()
        a = place_target(maze, small_config(), DeterministicRNG(77).stream(Domain.PLACEMENT))
        b = place_target(maze, small_config(), DeterministicRNG(77).stream(Domain.PLACEMENT))
        assert a == b
