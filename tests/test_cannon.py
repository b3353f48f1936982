from types import SimpleNamespace

import pytest

from oceangoing.cannon import MUZZLE_DISTANCE, Cannon
from oceangoing.cannon_ball import CannonBall
from oceangoing.object_manager import CollisionHandler, ObjectManager


class _ZeroRng:
    def uniform(self, a, b):
        return 0.0


def _ship(**overrides):
    values = dict(
        manager=ObjectManager(),
        collisions=CollisionHandler(),
        rng=_ZeroRng(),
        position=(100.0, 50.0),
        rotation=0.0,
        velocity=(0.0, 0.0),
        disabled=False,
        can_damage=33.0,
        can_range=250.0,
        can_reload_time=2.0,
    )
    values.update(overrides)
    return SimpleNamespace(**values)


def test_new_cannon_is_loaded():
    cannon = Cannon(_ship(), (5.0, 27.0), False)
    assert cannon.is_loaded()
    assert cannon.manager is not None


def test_update_follows_ship_offset():
    ship = _ship()
    cannon = Cannon(ship, (5.0, -27.0), True)
    cannon.update(0.0)
    assert cannon.position == pytest.approx((100.0 + 5.0, 50.0 - 27.0))


def test_update_rotates_offset_with_ship():
    ship = _ship(rotation=90.0)
    cannon = Cannon(ship, (5.0, 0.0), False)
    cannon.update(0.0)
    assert cannon.position == pytest.approx((100.0, 55.0))


def test_left_and_right_face_opposite_sides():
    ship = _ship(rotation=30.0)
    left = Cannon(ship, (0.0, -27.0), True)
    right = Cannon(ship, (0.0, 27.0), False)
    left.update(0.0)
    right.update(0.0)
    assert right.rotation - left.rotation == pytest.approx(180.0)


def test_disabled_ship_freezes_cannon():
    ship = _ship(disabled=True)
    cannon = Cannon(ship, (5.0, 27.0), False)
    cannon.update(1.0)
    assert cannon.position == (0.0, 0.0)


def test_fire_creates_ball_and_reloads():
    ship = _ship(velocity=(10.0, 0.0))
    cannon = Cannon(ship, (0.0, 0.0), False)
    cannon.update(0.0)
    ball = cannon.fire()
    assert isinstance(ball, CannonBall)
    assert ball in ship.manager
    assert ball in ship.collisions
    assert ball.damage == ship.can_damage
    assert ball.range == ship.can_range
    assert ball.velocity == pytest.approx((10.0, cannon.vel_shot))
    assert ball.position == pytest.approx(
        (cannon.position[0], cannon.position[1] + MUZZLE_DISTANCE)
    )
    assert cannon.loading_state == ship.can_reload_time
    assert not cannon.is_loaded()


def test_cannot_fire_while_reloading():
    ship = _ship()
    cannon = Cannon(ship, (0.0, 0.0), True)
    assert cannon.fire() is not None
    assert cannon.fire() is None
    cannon.update(ship.can_reload_time / 2)
    assert cannon.fire() is None


def test_reload_completes_and_clamps_to_zero():
    ship = _ship()
    cannon = Cannon(ship, (0.0, 0.0), True)
    cannon.fire()
    cannon.update(ship.can_reload_time * 3)
    assert cannon.loading_state == 0
    assert cannon.is_loaded()