"""A ship-mounted cannon that follows its ship and fires cannon balls."""

from __future__ import annotations

import math
from typing import Any, Optional

from .cannon_ball import CannonBall
from .object_manager import GameObject, Point

MUZZLE_DISTANCE = 8.0
VEL_SHOT = 275.0


class Cannon(GameObject):
    """A cannon on one side of a ship.

    The ship must provide ``manager``, ``collisions``, ``rng``, ``position``,
    ``rotation`` (degrees), ``velocity``, ``disabled``, ``can_damage``,
    ``can_range`` and ``can_reload_time``.
    """

    def __init__(self, ship: Any, offset: Point, left: bool) -> None:
        super().__init__(ship.manager)
        self.z_index = 490
        self.ship = ship
        self.offset: Point = (float(offset[0]), float(offset[1]))
        self.left = left
        self.vel_shot = VEL_SHOT
        self.loading_state = 0.0
        self.position: Point = (0.0, 0.0)
        self.rotation = -90.0 if left else 90.0

    def update(self, delta: float) -> None:
        ship = self.ship
        if ship.disabled:
            return
        rad = math.radians(ship.rotation)
        cos, sin = math.cos(rad), math.sin(rad)
        ox, oy = self.offset
        sx, sy = ship.position
        self.position = (sx + ox * cos - oy * sin, sy + ox * sin + oy * cos)
        self.rotation = ship.rotation + (-90.0 if self.left else 90.0)
        self.loading_state = max(0.0, self.loading_state - delta)

    def fire(self) -> Optional[CannonBall]:
        """Fire if loaded and return the ball, otherwise return None."""
        if not self.is_loaded():
            return None
        ship = self.ship
        rad = math.radians(self.rotation)
        dx, dy = math.cos(rad), math.sin(rad)
        svx, svy = ship.velocity
        ball = CannonBall(
            self.manager,
            ship.collisions,
            ship.can_damage,
            ship.can_range,
            (dx * self.vel_shot + svx, dy * self.vel_shot + svy),
            ship.rng,
        )
        x, y = self.position
        ball.position = (x + dx * MUZZLE_DISTANCE, y + dy * MUZZLE_DISTANCE)
        self.loading_state = ship.can_reload_time
        return ball

    def is_loaded(self) -> bool:
        return self.loading_state == 0