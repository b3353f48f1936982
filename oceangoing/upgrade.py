"""Ship upgrades: per-type level chains with costs and ship effects."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from functools import cache
from itertools import pairwise
from typing import Any, Callable, Optional

MAX_LEVEL = 10
NUM_UPGRADES = 9


class UpgradeType(enum.IntEnum):
    HULL = 0
    HULL_STRENGTH = 1
    CANNONS = 2
    CANNON_STRENGTH = 3
    CANNON_RANGE = 4
    CANNON_RELOADING = 5
    SAILS = 6
    SAIL_VELOCITY = 7
    RUDER_TURN = 8


Effect = Callable[[Any, int], None]


def _hull(ship: Any, level: int) -> None:
    ship.hull_type = level
    if level == 1:
        ship.max_health = 100
    elif level == 2:
        ship.max_health = 150
    elif level == 3:
        ship.max_health = 275
    ship.vel_per_sail_state = 28.0 - 8.0 * (level - 1)
    ship.turn_per_sec = 45.0 - 6.0 * (level - 1)


def _hull_strength(ship: Any, level: int) -> None:
    if level > 1:
        ship.max_health *= 1.26


def _cannons(ship: Any, level: int) -> None:
    if level == 1:
        ship.num_cannons = 2
    else:
        ship.num_cannons += 2


def _cannon_strength(ship: Any, level: int) -> None:
    if level == 1:
        ship.can_damage = 33.0
    else:
        ship.can_damage *= 1.4


def _cannon_range(ship: Any, level: int) -> None:
    if level == 1:
        ship.can_range = 250.0
    else:
        ship.can_range *= 1.26


def _cannon_reloading(ship: Any, level: int) -> None:
    if level == 1:
        ship.can_reload_time = 2.66
    else:
        ship.can_reload_time *= 0.825


def _sails(ship: Any, level: int) -> None:
    if level == 1:
        ship.num_sails = 1
    else:
        ship.num_sails += 1


def _sail_velocity(ship: Any, level: int) -> None:
    if level > 1:
        ship.vel_per_sail_state *= 1.19


def _ruder_turn(ship: Any, level: int) -> None:
    if level > 1:
        ship.turn_per_sec *= 1.115


@dataclass(frozen=True)
class _Spec:
    max_level: int
    name: str
    description: str
    gold: Callable[[int], int]
    parts: Callable[[int], int]
    effect: Effect


_SPECS: dict[UpgradeType, _Spec] = {
    UpgradeType.HULL: _Spec(
        3, "Ship Hull",
        "A bigger, sturdier vessel fit for a true pirate captain. "
        "Gives ye room for more cannons and sails.",
        lambda lvl: 1200 * (lvl - 1) * (lvl - 1), lambda lvl: 15 * (lvl - 1), _hull),
    UpgradeType.HULL_STRENGTH: _Spec(
        7, "Hull Strength",
        "Thicker planks and stronger build, so yer ship can take a beatin' "
        "and stay afloat when the cannons start flyin'.",
        lambda lvl: 300 * (lvl - 1), lambda lvl: 2 * (lvl - 1), _hull_strength),
    UpgradeType.CANNONS: _Spec(
        4, "Number o' Cannons",
        "More iron spitters along the sides! Unleash a deadly broadside "
        "and tear through enemy ships.",
        lambda lvl: 650 * (lvl - 1), lambda lvl: 6 * (lvl - 1), _cannons),
    UpgradeType.CANNON_STRENGTH: _Spec(
        5, "Cannon Strength",
        "Upgrade to cannons that pack a wallop and blast even bigger holes "
        "in yer enemy hulls.",
        lambda lvl: 350 * (lvl - 1), lambda lvl: 0, _cannon_strength),
    UpgradeType.CANNON_RANGE: _Spec(
        4, "Cannon Range",
        "Let yer shots fly farther than ever. Hit 'em before they even see ye comin'.",
        lambda lvl: 400 * (lvl - 1), lambda lvl: 1 * (lvl - 1), _cannon_range),
    UpgradeType.CANNON_RELOADING: _Spec(
        3, "Cannon Reload Time",
        "Train yer gunners, so ye can fire again faster and keep the pressure on.",
        lambda lvl: 500 * (lvl - 1), lambda lvl: 0, _cannon_reloading),
    UpgradeType.SAILS: _Spec(
        3, "Number o' Sails",
        " More canvas catchin' the wind means more speed. Raise 'em high "
        "and leave yer enemies in the spray.",
        lambda lvl: 550 * (lvl - 1), lambda lvl: 9 * (lvl - 1), _sails),
    UpgradeType.SAIL_VELOCITY: _Spec(
        7, "Better Sails",
        "Finer sails and riggin' make yer ship cut through the waves fast "
        "and fierce, just how pirates like it.",
        lambda lvl: 300 * (lvl - 1), lambda lvl: 2 * (lvl - 1), _sail_velocity),
    UpgradeType.RUDER_TURN: _Spec(
        5, "Maneuverability",
        "With a sturdier rudder, ye can turn on a dime and outmaneuver any "
        "scurvy dog that dares chase ye.",
        lambda lvl: 250 * (lvl - 1), lambda lvl: 3 * (lvl - 1), _ruder_turn),
}


@dataclass(eq=False)
class Upgrade:
    """One level of one upgrade type, linked to its neighbouring levels."""

    type: UpgradeType
    level: int
    max_level: int
    name: str
    description: str
    cost_gold: int
    cost_ship_parts: int
    prev_level: Optional[Upgrade] = field(default=None, repr=False)
    next_level: Optional[Upgrade] = field(default=None, repr=False)

    def apply(self, ship: Any) -> None:
        """Apply this level and every level below it to the ship, lowest first."""
        chain = []
        node: Optional[Upgrade] = self
        while node is not None:
            chain.append(node)
            node = node.prev_level
        for upgrade in reversed(chain):
            _SPECS[upgrade.type].effect(ship, upgrade.level)


@cache
def _registry() -> dict[UpgradeType, tuple[Upgrade, ...]]:
    registry: dict[UpgradeType, tuple[Upgrade, ...]] = {}
    for upgrade_type in UpgradeType:
        spec = _SPECS[upgrade_type]
        top = min(MAX_LEVEL, spec.max_level)
        chain = tuple(
            Upgrade(
                type=upgrade_type,
                level=level,
                max_level=spec.max_level,
                name=spec.name,
                description=spec.description,
                cost_gold=spec.gold(level),
                cost_ship_parts=spec.parts(level),
            )
            for level in range(1, top + 1)
        )
        for lower, higher in pairwise(chain):
            lower.next_level = higher
            higher.prev_level = lower
        registry[upgrade_type] = chain
    return registry


def get_upgrade(upgrade_type: UpgradeType, level: int) -> Upgrade:
    """Return the shared upgrade of the given type, clamping level to its maximum."""
    upgrade_type = UpgradeType(upgrade_type)
    if level < 1:
        raise ValueError(f"upgrade level must be at least 1, got {level}")
    chain = _registry()[upgrade_type]
    return chain[min(level, len(chain)) - 1]


def overall_cost() -> tuple[int, int]:
    """Return the summed (gold, ship parts) cost of every upgrade level."""
    upgrades = [u for chain in _registry().values() for u in chain]
    return (
        sum(u.cost_gold for u in upgrades),
        sum(u.cost_ship_parts for u in upgrades),
    )