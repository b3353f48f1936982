import math
import random

import pytest

from oceangoing.cannon_ball import CannonBall
from oceangoing.object_manager import (
    Collidable,
    CollisionHandler,
    ConvexPolygon,
    ObjectManager,
)
from oceangoing.ship import MAX_SAIL_STATE, Ship
from oceangoing.ship_configuration import ShipConfiguration


def make_ship(config=None):
    manager = ObjectManager()
    collisions = CollisionHandler()
    ship = Ship(manager, collisions, config or ShipConfiguration.new_default(), random.Random(1))
    return ship, manager, collisions


class _Border(Collidable):
    is_border = True

    def collision_bounds(self):
        return ConvexPolygon(((0, 0), (1, 0), (1, 1), (0, 1)))


def test_default_ship_stats():
    ship, _, _ = make_ship()
    assert ship.hull_type == 1
    assert ship.max_health == 100
    assert ship.health == 100
    assert ship.can_damage == 33.0
    assert ship.can_range == 250.0
    assert ship.can_reload_time == 2.66
    assert len(ship.cannons) == 2


def test_maxed_out_ship_has_largest_hull():
    ship, _, _ = make_ship(ShipConfiguration.new_maxed_out())
    assert ship.hull_type == 3
    assert ship.num_sails == 3
    assert len(ship.sail_offsets) == 3
    assert len(ship.cannons) == 2 * len(ship.cannons) // 2
    assert len(ship.cannons) == ship.num_cannons


def test_small_hull_keeps_two_cannons():
    ship, _, _ = make_ship(ShipConfiguration.new_custom())
    assert ship.hull_type == 1
    assert len(ship.cannons) == 2
    assert len(ship.sail_offsets) == 1


def test_determine_velocity_scales_with_state():
    ship, _, _ = make_ship()
    assert ship.determine_velocity(0) == 0
    assert ship.determine_velocity(2) == pytest.approx(2 * ship.determine_velocity(1))


def test_sail_state_bounds():
    ship, _, _ = make_ship()
    ship.set_sail_state(MAX_SAIL_STATE + 1)
    assert ship.sail_state == 0
    ship.set_sail_state(-1)
    assert ship.sail_state == 0
    ship.increase_sails()
    assert ship.sail_state == 1
    assert ship.target_velocity == ship.determine_velocity(1)
    ship.decrease_sails()
    ship.decrease_sails()
    assert ship.sail_state == 0


def test_turn_angle_is_clamped():
    ship, _, _ = make_ship()
    ship.turn_angle(1000)
    assert ship.turn == ship.max_turn
    ship.turn_angle(-5000)
    assert ship.turn == -ship.max_turn


def test_turn_is_consumed_by_rotation():
    ship, _, _ = make_ship()
    ship.turn_angle(10)
    ship.update(0.1)
    assert 0 < ship.rotation < 10
    assert ship.rotation + ship.turn == pytest.approx(10)


def test_speed_converges_to_target():
    ship, _, _ = make_ship()
    ship.set_sail_state(1)
    for _ in range(100):
        ship.update(0.1)
    assert math.hypot(*ship.velocity) == pytest.approx(ship.target_velocity)
    assert ship.position[0] > 0
    assert ship.position[1] == pytest.approx(0)


def test_lowering_sails_stops_ship():
    ship, _, _ = make_ship()
    ship.set_sail_state(2)
    for _ in range(50):
        ship.update(0.1)
    ship.set_sail_state(0)
    for _ in range(200):
        ship.update(0.1)
    assert math.hypot(*ship.velocity) == 0


def test_disabled_ship_does_not_move():
    ship, _, _ = make_ship()
    ship.set_sail_state(3)
    ship.disabled = True
    ship.update(1.0)
    assert ship.position == (0.0, 0.0)


def test_damage_and_heal():
    ship, _, _ = make_ship()
    ship.damage(30)
    assert ship.health == ship.max_health - 30
    ship.heal(1000)
    assert ship.health == ship.max_health


def test_invincible_ship_takes_no_damage():
    ship, _, _ = make_ship()
    ship.invincible = True
    ship.damage(500)
    assert ship.health == ship.max_health
    assert not ship.disabled


def test_lethal_damage_sinks_and_removes_ship():
    ship, manager, collisions = make_ship()
    ship.set_active(True)
    ship.damage(ship.max_health)
    assert ship.disabled
    assert ship.sunk
    manager.update_all(0.0)
    assert ship not in manager
    assert ship not in collisions
    assert all(c not in manager for c in ship.cannons)


def test_set_active_and_destroy():
    ship, manager, collisions = make_ship()
    ship.set_active(True)
    assert ship in manager and ship in collisions
    assert all(c in manager for c in ship.cannons)
    ship.destroy()
    manager.update_all(0.0)
    assert ship not in manager
    assert ship.destroyed


def test_fire_cannons_pairs_and_reload():
    ship, manager, _ = make_ship()
    ship.set_active(True)
    balls = ship.fire_cannons()
    assert len(balls) == 2
    assert ship.cannons_loaded() == [False, False]
    assert ship.fire_cannons() == []
    for cannon in ship.cannons:
        cannon.update(ship.can_reload_time)
    assert ship.cannons_loaded() == [True, True]


def test_fire_cannons_uses_next_pair():
    ship, _, _ = make_ship(ShipConfiguration.new_maxed_out())
    ship.set_active(True)
    ship.fire_cannons()
    ship.fire_cannons()
    loaded = ship.cannons_loaded()
    assert loaded[:4] == [False, False, False, False]
    assert all(loaded[4:])


def test_collision_bounds_follow_position_and_rotation():
    ship, _, _ = make_ship()
    base = ship.collision_bounds().points
    ship.position = (100.0, 50.0)
    moved = ship.collision_bounds().points
    for (bx, by), (mx, my) in zip(base, moved):
        assert mx == pytest.approx(bx + 100.0)
        assert my == pytest.approx(by + 50.0)
    ship.position = (0.0, 0.0)
    ship.rotation = 180.0
    turned = ship.collision_bounds().points
    for (bx, by), (tx, ty) in zip(base, turned):
        assert tx == pytest.approx(-bx)
        assert ty == pytest.approx(-by)


def test_cannon_ball_damages_ship():
    ship, manager, collisions = make_ship()
    ball = CannonBall(manager, collisions, 20.0, 300.0, (0.0, 0.0), random.Random(3))
    ship.on_collision(ball, [])
    assert ship.health == pytest.approx(ship.max_health - ball.damage)


def test_border_damages_once_per_contact():
    ship, manager, collisions = make_ship()
    border = _Border(manager, collisions)
    ship.on_collision(border, [])
    ship.update(0.5)
    after_first = ship.health
    assert after_first < ship.max_health
    ship.update(0.5)
    assert ship.health == after_first


def test_overlapping_ships_push_apart():
    manager = ObjectManager()
    collisions = CollisionHandler()
    a = Ship(manager, collisions, ShipConfiguration.new_default(), random.Random(1))
    b = Ship(manager, collisions, ShipConfiguration.new_default(), random.Random(2))
    b.position = (30.0, 0.0)
    a.set_active(True)
    b.set_active(True)
    collisions.handle_collision()
    a.update(0.1)
    b.update(0.1)
    assert a.position[0] < 0
    assert b.position[0] > 30.0
    assert a.health == a.max_health
    assert b.health == b.max_health