"""Sailing ships: movement, turning, cannons, damage and collisions."""

from __future__ import annotations

import math
import random
from typing import Any, Optional

from .cannon import Cannon
from .cannon_ball import CannonBall
from .object_manager import (
    Collidable,
    CollisionHandler,
    ConvexPolygon,
    ObjectManager,
    Point,
)
from .ship_configuration import ShipConfiguration

MAX_SAIL_STATE = 3

# Hull outlines in hull-texture coordinates, per hull type.
TYPE_BOUNDS: dict[int, tuple[Point, ...]] = {
    1: ((2.0, 11.0), (4.0, 7.0), (21.0, 2.0), (50.0, 2.0), (72.0, 9.0), (84.0, 20.0),
        (72.0, 31.0), (50.0, 38.0), (21.0, 38.0), (4.0, 33.0), (2.0, 29.0)),
    2: ((2.0, 14.0), (5.0, 9.0), (29.0, 2.0), (66.0, 2.0), (94.0, 10.0), (109.0, 23.0),
        (94.0, 36.0), (66.0, 44.0), (29.0, 44.0), (5.0, 37.0), (2.0, 32.0)),
    3: ((2.0, 19.0), (6.0, 9.0), (35.0, 2.0), (83.0, 2.0), (114.0, 10.0), (136.0, 26.0),
        (114.0, 42.0), (83.0, 50.0), (35.0, 50.0), (6.0, 43.0), (2.0, 33.0)),
}

# Sail positions relative to the hull centre, by hull type and number of sails.
_SAIL_OFFSETS: dict[int, dict[int, tuple[Point, ...]]] = {
    1: {1: ((-13.0, 0.0),)},
    2: {1: ((-14.0, 0.0),), 2: ((14.0, 0.0), (-28.0, 0.0))},
    3: {
        1: ((-7.0, 0.0),),
        2: ((-42.0, 0.0), (8.0, 0.0)),
        3: ((-7.0, 0.0), (-42.0, 0.0), (28.0, 0.0)),
    },
}

# Cannon positions relative to the hull centre, left and right in pairs.
_CANNON_COLUMNS: dict[int, dict[int, tuple[float, ...]]] = {
    1: {2: (5.0,)},
    2: {2: (8.0,), 4: (-16.0, 8.0)},
    3: {2: (-10.0,), 4: (-10.0, 14.0), 6: (-10.0, 14.0, -34.0), 8: (-10.0, 5.0, 20.0, -34.0)},
}
_CANNON_SIDE = {1: 27.0, 2: 30.0, 3: 33.0}


def _hull_size(hull_type: int) -> tuple[float, float]:
    points = TYPE_BOUNDS[hull_type]
    return max(p[0] for p in points) + 2.0, max(p[1] for p in points) + 2.0


def _sail_offsets(hull_type: int, num_sails: int) -> tuple[Point, ...]:
    options = _SAIL_OFFSETS[hull_type]
    if hull_type == 1:
        return options[1]
    if num_sails in options:
        return options[num_sails]
    return options[max(options)]


def _cannon_columns(hull_type: int, num_cannons: int) -> tuple[float, ...]:
    options = _CANNON_COLUMNS[hull_type]
    if hull_type == 1:
        return options[2]
    if num_cannons in options:
        return options[num_cannons]
    return options[max(options)]


class Ship(Collidable):
    """A ship whose stats come from a ship configuration.

    ``rng`` must provide ``uniform(a, b)`` like :class:`random.Random`; it is
    handed to the cannon balls the ship fires.
    """

    is_player = False

    def __init__(
        self,
        manager: ObjectManager,
        collisions: CollisionHandler,
        config: ShipConfiguration,
        rng: Optional[Any] = None,
    ) -> None:
        super().__init__(manager, collisions)
        self.rng = rng if rng is not None else random.Random()
        self.contacts_needed = True
        self.z_index = 500

        self.hull_type = 1
        self.max_health = 100.0
        self.num_cannons = 2
        self.can_damage = 25.0
        self.can_range = 420.0
        self.can_reload_time = 2.0
        self.num_sails = 1
        self.vel_per_sail_state = 45.0
        self.turn_per_sec = 45.0
        self.invincible = False
        self.disabled = False
        self.sunk = False

        self.vel_inc_per_sec = 30.0
        self.max_turn = 70.0
        self.collision_damage_per_sec = 150.0
        self.collision_damage_factor = 0
        self.push_vel_per_sec = 175.0

        self.position: Point = (0.0, 0.0)
        self.rotation = 0.0
        self.velocity: Point = (0.0, 0.0)
        self.target_velocity = 0.0
        self.sail_state = 0
        self.turn = 0.0
        self._push: Point = (0.0, 0.0)
        self._outside_border = False
        self._in_collision = False

        config.apply_all(self)
        self.health = float(self.max_health)
        self.border_damage_per_sec = self.max_health * 0.15

        self.hull_size = _hull_size(self.hull_type)
        self._bounds = TYPE_BOUNDS[self.hull_type]
        self.sail_offsets = _sail_offsets(self.hull_type, self.num_sails)
        side = _CANNON_SIDE[self.hull_type]
        self.cannons: list[Cannon] = []
        for x in _cannon_columns(self.hull_type, self.num_cannons):
            self.cannons.append(Cannon(self, (x, -side), True))
            self.cannons.append(Cannon(self, (x, side), False))

    # --- simulation ------------------------------------------------------

    def update(self, delta: float) -> None:
        if self.disabled:
            return
        if self._outside_border:
            self.damage(self.border_damage_per_sec * delta)
            self._outside_border = False
        if self._in_collision:
            self.damage(self.collision_damage_factor * self.collision_damage_per_sec * delta)
            scale = self.push_vel_per_sec * delta
            self._push = (self._push[0] * scale, self._push[1] * scale)
            self._in_collision = False
            self.collision_damage_factor = 0
        push_len = math.hypot(*self._push)
        if push_len > 0.0:
            factor = 1 - self.vel_inc_per_sec * delta / push_len
            if factor < 0.0:
                self._push = (0.0, 0.0)
            else:
                self._push = (self._push[0] * factor, self._push[1] * factor)

        sign = (self.turn > 0) - (self.turn < 0)
        turn_per_upd = self.turn_per_sec * delta * sign
        if self.turn > 0:
            self.turn = max(self.turn - turn_per_upd, 0.0)
        else:
            self.turn = min(self.turn - turn_per_upd, 0.0)
        self.rotation += turn_per_upd

        dx, dy = self.direction()
        speed = math.hypot(*self.velocity)
        vx, vy = dx * speed, dy * speed
        step = self.vel_inc_per_sec * delta
        if speed < self.target_velocity:
            vx, vy = vx + dx * step, vy + dy * step
            if math.hypot(vx, vy) > self.target_velocity:
                vx, vy = dx * self.target_velocity, dy * self.target_velocity
        elif speed > self.target_velocity:
            vx, vy = vx - dx * step, vy - dy * step
            if vx * dx + vy * dy < 0.0:
                vx, vy = 0.0, 0.0
        self.velocity = (vx, vy)

        x, y = self.position
        self.position = (x + vx * delta + self._push[0], y + vy * delta + self._push[1])

    def on_collision(self, other: Collidable, contacts: list[Point]) -> None:
        if self.disabled:
            return
        if isinstance(other, Ship) or getattr(other, "is_island", False):
            self._in_collision = True
            if contacts:
                mid = (
                    sum(p[0] for p in contacts) / len(contacts),
                    sum(p[1] for p in contacts) / len(contacts),
                )
            else:
                mid = other.collision_bounds().center
            cx, cy = self.collision_bounds().center
            px, py = cx - mid[0], cy - mid[1]
            length = math.hypot(px, py)
            if length > 0.0:
                px, py = px / length, py / length
            self._push = (px, py)
        elif isinstance(other, CannonBall):
            self.damage(other.damage)
        elif getattr(other, "is_border", False):
            self._outside_border = True

    def collision_bounds(self) -> ConvexPolygon:
        ox, oy = self.hull_size[0] / 2.0, self.hull_size[1] / 2.0
        rad = math.radians(self.rotation)
        cos, sin = math.cos(rad), math.sin(rad)
        x, y = self.position
        return ConvexPolygon(tuple(
            (x + (px - ox) * cos - (py - oy) * sin, y + (px - ox) * sin + (py - oy) * cos)
            for px, py in self._bounds
        ))

    # --- sails and steering ----------------------------------------------

    def increase_sails(self) -> None:
        self.set_sail_state(self.sail_state + 1)

    def decrease_sails(self) -> None:
        self.set_sail_state(self.sail_state - 1)

    def set_sail_state(self, state: int) -> None:
        """Set how far the sails are deployed; out-of-range states are ignored."""
        if state == self.sail_state or state < 0 or state > MAX_SAIL_STATE:
            return
        self.sail_state = state
        self.target_velocity = self.determine_velocity(state)

    def determine_velocity(self, sail_state: int) -> float:
        vel_sail = self.vel_per_sail_state * sail_state
        return vel_sail + 0.25 * vel_sail * (self.num_sails - 1)

    def direction(self) -> Point:
        rad = math.radians(self.rotation)
        return math.cos(rad), math.sin(rad)

    def turn_angle(self, angle: float) -> None:
        """Add to the pending turn, limited to the maximum rudder angle."""
        self.turn = max(-self.max_turn, min(self.max_turn, self.turn + angle))

    # --- cannons ---------------------------------------------------------

    def fire_cannons(self) -> list[CannonBall]:
        """Fire the first loaded pair of cannons and return the balls."""
        for left, right in zip(self.cannons[::2], self.cannons[1::2]):
            if left.is_loaded():
                return [b for b in (left.fire(), right.fire()) if b is not None]
        return []

    def cannons_loaded(self) -> list[bool]:
        return [c.is_loaded() for c in self.cannons]

    # --- health ----------------------------------------------------------

    def heal(self, amount: float) -> None:
        self.health = min(self.health + amount, self.max_health)

    def damage(self, amount: float) -> None:
        if self.invincible or amount == 0:
            return
        self.health -= amount
        if self.health <= 0:
            self.disabled = True
            self.sink()

    def sink(self) -> None:
        """Go down: mark as sunk and remove the ship."""
        self.sunk = True
        self.destroy()

    # --- lifecycle -------------------------------------------------------

    def set_active(self, state: bool) -> None:
        for cannon in self.cannons:
            cannon.set_active(state)
        super().set_active(state)

    def destroy(self) -> None:
        for cannon in self.cannons:
            cannon.destroy()
        super().destroy()