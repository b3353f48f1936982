"""Cannon balls: fly in a straight line, turn critical late, hit or miss."""

from __future__ import annotations

import enum
import math
import random
from typing import Any, Optional

from .object_manager import (
    Collidable,
    CollisionHandler,
    ConvexPolygon,
    ObjectManager,
    Point,
)

DAMAGE_DEVIATION = 0.1
CRITICAL_DAMAGE = 2.0
CRITICAL_RANGE_PORTION = 0.2
BALL_SIZE = (8.0, 8.0)


class Impact(enum.Enum):
    """How a cannon ball's flight ended."""

    HIT = "hit"
    MISS = "miss"


def _box(center: Point, size: tuple[float, float]) -> ConvexPolygon:
    x, y = center
    hw, hh = size[0] / 2.0, size[1] / 2.0
    return ConvexPolygon(((x - hw, y - hh), (x + hw, y - hh), (x + hw, y + hh), (x - hw, y + hh)))


class CannonBall(Collidable):
    """A shot that travels until its range is used up or it strikes something.

    ``rng`` must provide ``uniform(a, b)`` like :class:`random.Random`.
    The ball registers itself as active when created.
    """

    def __init__(
        self,
        manager: ObjectManager,
        collisions: CollisionHandler,
        damage: float,
        range_: float,
        velocity: Point,
        rng: Optional[Any] = None,
    ) -> None:
        super().__init__(manager, collisions)
        rng = rng if rng is not None else random.Random()
        self.z_index = 600
        deviation = DAMAGE_DEVIATION * damage
        self.damage = damage + rng.uniform(-deviation, deviation)
        self.range = range_
        self.range_left = range_
        self.velocity: Point = (float(velocity[0]), float(velocity[1]))
        self.position: Point = (0.0, 0.0)
        self.size = BALL_SIZE
        self.critical = False
        self.impact: Optional[Impact] = None
        self.impact_position: Optional[Point] = None
        Collidable.set_active(self, True)

    def update(self, delta: float) -> None:
        vx, vy = self.velocity
        x, y = self.position
        self.position = (x + vx * delta, y + vy * delta)
        self.range_left -= math.hypot(vx, vy) * delta
        if not self.critical and self.range_left <= CRITICAL_RANGE_PORTION * self.range:
            self.damage *= CRITICAL_DAMAGE
            self.critical = True
        if self.range_left < 0.0:
            self.miss()

    def on_collision(self, other: Collidable, contacts: list[Point]) -> None:
        if not getattr(other, "stops_cannon_balls", True):
            return
        self.hit()

    def collision_bounds(self) -> ConvexPolygon:
        return _box(self.position, self.size)

    def _end(self, impact: Impact) -> None:
        self.impact = impact
        self.impact_position = self.position
        self.destroy()

    def hit(self) -> None:
        """End the flight by striking a target."""
        self._end(Impact.HIT)

    def miss(self) -> None:
        """End the flight by splashing into the water."""
        self._end(Impact.MISS)