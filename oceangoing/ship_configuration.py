"""A ship's chosen upgrade levels and the rules that keep them consistent."""

from __future__ import annotations

from typing import Any, Mapping, Optional

from .upgrade import MAX_LEVEL, Upgrade, UpgradeType, get_upgrade


class ShipConfiguration:
    """Maps every upgrade type to its current upgrade level."""

    def __init__(self, levels: Optional[Mapping[UpgradeType, int]] = None) -> None:
        levels = dict(levels or {})
        self._upgrades: dict[UpgradeType, Upgrade] = {
            t: get_upgrade(t, levels.get(t, 1)) for t in UpgradeType
        }

    @classmethod
    def new_default(cls) -> ShipConfiguration:
        return cls({t: 1 for t in UpgradeType})

    @classmethod
    def new_maxed_out(cls) -> ShipConfiguration:
        return cls({t: MAX_LEVEL for t in UpgradeType})

    @classmethod
    def new_custom(cls) -> ShipConfiguration:
        return cls({
            UpgradeType.HULL: 1,
            UpgradeType.HULL_STRENGTH: 1,
            UpgradeType.CANNONS: 2,
            UpgradeType.CANNON_STRENGTH: 1,
            UpgradeType.CANNON_RANGE: 1,
            UpgradeType.CANNON_RELOADING: 1,
            UpgradeType.SAILS: 2,
            UpgradeType.SAIL_VELOCITY: 1,
            UpgradeType.RUDER_TURN: 1,
        })

    @property
    def levels(self) -> dict[UpgradeType, int]:
        """Current level of every upgrade type."""
        return {t: u.level for t, u in self._upgrades.items()}

    def get_upgrade(self, upgrade_type: UpgradeType) -> Upgrade:
        return self._upgrades[UpgradeType(upgrade_type)]

    def _replace(self, upgrade_type: UpgradeType, candidate: Optional[Upgrade]) -> bool:
        if candidate is None:
            return False
        current = self._upgrades[upgrade_type]
        self._upgrades[upgrade_type] = candidate
        if not self.is_valid():
            self._upgrades[upgrade_type] = current
            return False
        return True

    def level_up(self, upgrade_type: UpgradeType) -> bool:
        """Raise one level; return False if at maximum or the result is invalid."""
        upgrade_type = UpgradeType(upgrade_type)
        return self._replace(upgrade_type, self._upgrades[upgrade_type].next_level)

    def level_down(self, upgrade_type: UpgradeType) -> bool:
        """Lower one level; return False if at level 1 or the result is invalid."""
        upgrade_type = UpgradeType(upgrade_type)
        return self._replace(upgrade_type, self._upgrades[upgrade_type].prev_level)

    def apply_all(self, ship: Any) -> None:
        """Apply every upgrade to the ship, the hull first."""
        self._upgrades[UpgradeType.HULL].apply(ship)
        for upgrade_type, upgrade in self._upgrades.items():
            if upgrade_type is not UpgradeType.HULL:
                upgrade.apply(ship)

    def copy(self) -> ShipConfiguration:
        return ShipConfiguration(self.levels)

    def is_valid(self) -> bool:
        """Check that cannons and sails fit on the chosen hull."""
        hull = self._upgrades[UpgradeType.HULL].level
        cannons = self._upgrades[UpgradeType.CANNONS].level
        sails = self._upgrades[UpgradeType.SAILS].level
        if hull == 1:
            return cannons == 1 and sails == 1
        if hull == 2:
            return cannons <= 2 and sails <= 2
        if hull == 3:
            return cannons <= 4 and sails <= 3
        return False

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ShipConfiguration):
            return NotImplemented
        return self.levels == other.levels

    def __repr__(self) -> str:
        inner = ", ".join(f"{t.name}={lvl}" for t, lvl in self.levels.items())
        return f"ShipConfiguration({inner})"