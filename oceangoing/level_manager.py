"""Level progression, currencies and random level generation parameters."""

from __future__ import annotations

import enum
import math
import random
from typing import Any, Optional

from .game_saver import STANDARD_SAVEFILE, GameSaver, SaveData
from .ship_configuration import ShipConfiguration
from .upgrade import UpgradeType

START_GOLD = 750
START_PARTS = 5
LEVEL_MAX = 30


class Scene(enum.Enum):
    MAIN_MENU = 0
    SHIP_MENU = 1
    TUTORIAL = 2
    IN_GAME = 3
    DEATH_SCREEN = 4
    COMPLETED_SCREEN = 5


class LevelManager:
    """Tracks the player's progress and derives level parameters from it.

    ``rng`` must provide ``random()``, ``uniform(a, b)`` and ``randint(a, b)``
    like :class:`random.Random`.
    """

    def __init__(self, saver: Optional[GameSaver] = None, rng: Optional[Any] = None) -> None:
        self._saver = saver if saver is not None else GameSaver()
        self._rng = rng if rng is not None else random.Random()
        self.scene = Scene.MAIN_MENU
        self.level = 1
        self.gold_player = START_GOLD
        self.gold_player_level = 0
        self.parts_player = START_PARTS
        self.parts_player_level = 0
        self.gold_global = 0
        self.gold_level = 0
        self.player_config = ShipConfiguration.new_default()
        self.level_changed = False
        self.load_game_save()

    # --- currencies ------------------------------------------------------

    @property
    def _in_game(self) -> bool:
        return self.scene is Scene.IN_GAME

    @property
    def gold(self) -> int:
        """Gold collected this level while sailing, otherwise the banked gold."""
        return self.gold_player_level if self._in_game else self.gold_player

    def add_gold(self, amount: int) -> None:
        if self._in_game:
            self.gold_player_level += amount
        else:
            self.gold_player += amount

    @property
    def ship_parts(self) -> int:
        """Parts collected this level while sailing, otherwise the banked parts."""
        return self.parts_player_level if self._in_game else self.parts_player

    def add_ship_parts(self, amount: int) -> None:
        if self._in_game:
            self.parts_player_level += amount
        else:
            self.parts_player += amount

    # --- progression -----------------------------------------------------

    def next_level(self) -> None:
        """Bank this level's loot, advance the level and save."""
        self.level += 1
        self.gold_player += self.gold_player_level
        self.gold_player_level = 0
        self.parts_player += self.parts_player_level
        self.parts_player_level = 0
        self.gold_global += self.gold_level
        self.gold_level = 0
        self.save_current_game()

    def reset_level(self) -> None:
        """Start over from the first level and save."""
        self.level = 1
        self.gold_player = START_GOLD
        self.gold_player_level = 0
        self.parts_player = START_PARTS
        self.parts_player_level = 0
        self.gold_global = 0
        self.gold_level = 0
        self.player_config = ShipConfiguration.new_default()
        self.save_current_game()

    def load_game_save(self, filename: str = STANDARD_SAVEFILE) -> None:
        """Load progress; a missing save file yields a fresh save."""
        try:
            data = self._saver.load_game(filename)
        except FileNotFoundError:
            data = SaveData()
        self.level = data.level
        self.gold_global = data.gold_global
        self.gold_player = data.gold_player
        self.parts_player = data.parts_player
        self.player_config = data.config
        self.level_changed = True

    def save_current_game(self, filename: str = STANDARD_SAVEFILE) -> None:
        data = SaveData(
            level=self.level,
            gold_global=self.gold_global,
            gold_player=self.gold_player,
            parts_player=self.parts_player,
            config=self.player_config,
        )
        self._saver.save_game(filename, data)

    # --- level parameters ------------------------------------------------

    def determine_map_size(self, num_islands: int) -> tuple[int, int]:
        size = 2 * num_islands + 12
        return size, size

    def determine_island_number(self) -> int:
        return self._logistic_floored_plus_prob(1.0, 4.0, 0.1)

    def determine_drop_number_per_island(self) -> int:
        return self._logistic_floored_plus_prob(1.0, 5.0, 0.075)

    def determine_drop_value(self) -> int:
        return self._logistic_floored_plus_prob(80.0, 160.0, 0.175)

    def determine_enemy_number_per_drop(self) -> int:
        return self._floored_plus_prob(self._linear_prob(0.6, 2.25))

    def determine_enemy_gold_portion(self) -> float:
        return self._linear_prob(0.5, 1.0)

    def determine_heal_amount(self) -> float:
        num = (30.0 - 4.0) / LEVEL_MAX * self.level + 4.0
        return self._floored_plus_prob(num) * 10.0

    def determine_enemy_config(self) -> ShipConfiguration:
        """Buy random upgrades for an enemy with a share of the global gold."""
        budget = int(self.gold_global * self.determine_enemy_gold_portion())
        config = ShipConfiguration.new_default()
        available = list(UpgradeType)
        invalid: list[UpgradeType] = []
        while available:
            index = self._rng.randint(0, len(available) - 1)
            upgrade_type = available[index]
            upgrade = config.get_upgrade(upgrade_type).next_level
            if upgrade is None or upgrade.cost_gold > budget:
                del available[index]
                continue
            # encourage small ships
            if upgrade_type is UpgradeType.HULL and self._chance(0.5):
                continue
            if not config.level_up(upgrade_type):
                invalid.append(upgrade_type)
                del available[index]
                continue
            budget -= upgrade.cost_gold
            if upgrade.next_level is None:
                del available[index]
            available.extend(invalid)
            invalid.clear()
        return config

    # --- random helpers --------------------------------------------------

    def _chance(self, probability: float) -> bool:
        return self._rng.random() < probability

    def _floored_plus_prob(self, num: float) -> int:
        floor = math.floor(num)
        return floor + 1 if self._chance(num - floor) else floor

    def _logistic_floored_plus_prob(self, start: float, end: float, growth: float) -> int:
        return self._floored_plus_prob(end - (end - start) * math.exp(-growth * self.level))

    def _linear_prob(self, start: float, end: float) -> float:
        return self._rng.uniform(start, (end - start) / LEVEL_MAX * self.level + start)