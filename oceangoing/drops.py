"""Loot floating in the water: treasure, healing barrels and ship parts."""

from __future__ import annotations

from typing import Any, Optional

from .constants import (
    TEXTURE_DEFAULT,
    TEXTURE_GOLD_ICON,
    TEXTURE_HEAL_ICON,
    TEXTURE_HEALING_BARREL,
    TEXTURE_SHIP_PARTS,
    TEXTURE_SHIP_PARTS_ICON,
    TEXTURE_TREASURE,
)
from .object_manager import (
    Collidable,
    CollisionHandler,
    ConvexPolygon,
    ObjectManager,
    Point,
)

LABEL_FADEOUT_PER_SEC = 0.5
DROP_SIZE = (24.0, 24.0)


class Drop(Collidable):
    """Loot collected by the player's ship on contact.

    An island, if given, must provide ``drop_loot()`` and ``spawn_enemies()``;
    both are called when the drop is collected.
    """

    stops_cannon_balls = False
    texture = TEXTURE_DEFAULT
    label_icon: Optional[str] = None

    def __init__(
        self,
        manager: ObjectManager,
        collisions: CollisionHandler,
        position: Point = (0.0, 0.0),
        island: Optional[Any] = None,
    ) -> None:
        super().__init__(manager, collisions)
        self.z_index = 700
        self.position: Point = (float(position[0]), float(position[1]))
        self.size = DROP_SIZE
        self.island = island
        self.collected = False
        self.label: Optional[str] = None
        self.label_opacity = 1.0

    def update(self, delta: float) -> None:
        """Fade the collect label, then remove the collected drop."""
        if self.label is not None:
            opacity = self.label_opacity - delta * LABEL_FADEOUT_PER_SEC
            if opacity < 0:
                self.label = None
            else:
                self.label_opacity = opacity
        elif self.collected:
            self.destroy()

    def collision_bounds(self) -> ConvexPolygon:
        x, y = self.position
        hw, hh = self.size[0] / 2.0, self.size[1] / 2.0
        return ConvexPolygon(
            ((x - hw, y - hh), (x + hw, y - hh), (x + hw, y + hh), (x - hw, y + hh))
        )

    def on_collision(self, other: Collidable, contacts: list[Point]) -> None:
        if self.collected:
            return
        if getattr(other, "is_player", False):
            self.collect(other)

    def collect(self, ship: Any) -> None:
        """Mark as collected and alert the home island."""
        if self.island is not None:
            self.island.drop_loot()
            self.island.spawn_enemies()
        if self.label is not None:
            self.label_opacity = 1.0
        self.collected = True


class Treasure(Drop):
    """Gold for the player."""

    texture = TEXTURE_TREASURE
    label_icon = TEXTURE_GOLD_ICON

    def __init__(
        self,
        manager: ObjectManager,
        collisions: CollisionHandler,
        position: Point,
        amount: int,
        level_manager: Any,
        island: Optional[Any] = None,
    ) -> None:
        super().__init__(manager, collisions, position, island)
        self.amount = amount
        self.level_manager = level_manager

    def collect(self, ship: Any) -> None:
        self.level_manager.add_gold(self.amount)
        self.label = f"+{self.amount}"
        super().collect(ship)


class HealingBarrel(Drop):
    """Restores health to the ship that collects it."""

    texture = TEXTURE_HEALING_BARREL
    label_icon = TEXTURE_HEAL_ICON

    def __init__(
        self,
        manager: ObjectManager,
        collisions: CollisionHandler,
        position: Point,
        heal: float,
        island: Optional[Any] = None,
    ) -> None:
        super().__init__(manager, collisions, position, island)
        self.heal_amount = heal

    def collect(self, ship: Any) -> None:
        self.label = f"+{int(self.heal_amount)}"
        ship.heal(self.heal_amount)
        super().collect(ship)


class ShipParts(Drop):
    """Parts used to buy ship upgrades."""

    texture = TEXTURE_SHIP_PARTS
    label_icon = TEXTURE_SHIP_PARTS_ICON

    def __init__(
        self,
        manager: ObjectManager,
        collisions: CollisionHandler,
        position: Point,
        amount: int,
        level_manager: Any,
        island: Optional[Any] = None,
    ) -> None:
        super().__init__(manager, collisions, position, island)
        self.amount = amount
        self.level_manager = level_manager

    def collect(self, ship: Any) -> None:
        self.level_manager.add_ship_parts(self.amount)
        self.label = f"+{self.amount}"
        super().collect(ship)