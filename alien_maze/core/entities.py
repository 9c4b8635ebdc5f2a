"""Transient entities of a session: breadcrumbs, lasers and the alien target."""

from __future__ import annotations

import logging

from alien_maze.core.models import AlienTarget, Laser, WorldPosition

logger = logging.getLogger(__name__)


class EntityManager:
    """Owns the transient entity lists and their creation/removal rules.

    Lifetime expiry is not tracked here: the caller's update loop removes a
    laser once it has outlived ``laser_lifetime``.
    """

    __slots__ = ("breadcrumbs", "lasers", "alien_target", "exploding_position", "_next_laser_id")

    def __init__(self) -> None:
        self.breadcrumbs: list[WorldPosition] = []
        self.lasers: dict[int, Laser] = {}
        self.alien_target: AlienTarget | None = None
        self.exploding_position: WorldPosition | None = None
        # Never rewound, so an id is unique for the life of the manager
        self._next_laser_id: int = 1

    # -- breadcrumbs --

    def add_breadcrumb(self, pos: WorldPosition) -> None:
        self.breadcrumbs.append(pos)

    # -- lasers --

    def allocate_laser_id(self) -> int:
        lid = self._next_laser_id
        self._next_laser_id += 1
        return lid

    def add_laser(self, pos: WorldPosition, direction: WorldPosition) -> Laser:
        laser = Laser(id=self.allocate_laser_id(), position=pos, direction=direction.normalized())
        self.lasers[laser.id] = laser
        return laser

    def remove_laser(self, laser_id: int) -> bool:
        """Remove a laser by id. Unknown ids are ignored."""
        return self.lasers.pop(laser_id, None) is not None

    # -- alien target --

    def set_target(self, target: AlienTarget | None) -> None:
        self.alien_target = target

    def on_alien_hit(self, laser_id: int) -> bool:
        """Consume the laser and destroy the target if it is still standing.

        Returns True only for the hit that actually destroyed the target.
        """
        self.remove_laser(laser_id)
        target = self.alien_target
        if target is None or target.is_destroyed:
            return False
        target.is_destroyed = True
        self.exploding_position = target.position
        logger.info("Alien target at %s destroyed by laser %d", target.grid_pos, laser_id)
        return True

    def on_explosion_complete(self) -> None:
        self.exploding_position = None

    # -- lifecycle --

    def reset(self) -> None:
        """Clear the trail and projectiles and stand the target back up."""
        self.breadcrumbs.clear()
        self.lasers.clear()
        self.exploding_position = None
        if self.alien_target is not None:
            self.alien_target.is_destroyed = False

    def clear(self) -> None:
        """Drop everything, including the target (new maze)."""
        self.reset()
        self.alien_target = None
