"""Saving and loading of game progress as JSON files."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping, Union

from .constants import GAMESAVE_PATH
from .ship_configuration import ShipConfiguration
from .upgrade import UpgradeType

STANDARD_SAVEFILE = "standard.json"


def _read_int(data: Mapping[str, Any], key: str) -> int:
    try:
        value = data[key]
    except (KeyError, TypeError) as exc:
        raise ValueError(f"save data is missing {key!r}") from exc
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"save data field {key!r} is not a number: {value!r}")
    return int(value)


@dataclass
class SaveData:
    """Progress that survives between sessions."""

    level: int = 1
    gold_global: int = 0
    gold_player: int = 0
    parts_player: int = 0
    config: ShipConfiguration = field(default_factory=ShipConfiguration.new_default)

    def to_json(self) -> dict[str, Any]:
        """Return the JSON document for this save."""
        return {
            "level": self.level,
            "goldGlobal": self.gold_global,
            "goldPlayer": self.gold_player,
            "partsPlayer": self.parts_player,
            "config": {
                str(int(t)): self.config.get_upgrade(t).level for t in UpgradeType
            },
        }

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> SaveData:
        """Build save data from a JSON document.

        Upgrade levels are reached by levelling up from the default ship, so
        levels that would make the configuration invalid are dropped.
        """
        level = _read_int(data, "level")
        gold_global = _read_int(data, "goldGlobal")
        gold_player = _read_int(data, "goldPlayer")
        parts_player = _read_int(data, "partsPlayer")
        try:
            config_json = data["config"]
        except KeyError as exc:
            raise ValueError("save data is missing 'config'") from exc
        if not isinstance(config_json, Mapping):
            raise ValueError("save data field 'config' is not an object")

        config = ShipConfiguration.new_default()
        for key in sorted(config_json):
            try:
                upgrade_type = UpgradeType(int(key))
            except ValueError as exc:
                raise ValueError(f"unknown upgrade type in save data: {key!r}") from exc
            for _ in range(_read_int(config_json, key) - 1):
                if not config.level_up(upgrade_type):
                    break
        return cls(level, gold_global, gold_player, parts_player, config)


class GameSaver:
    """Reads and writes save files inside one directory."""

    def __init__(self, directory: Union[str, Path] = GAMESAVE_PATH) -> None:
        self.directory = Path(directory)

    def save_game(self, filename: str, data: SaveData) -> None:
        """Write the save data to the named file."""
        text = json.dumps(data.to_json(), indent=4, sort_keys=True)
        (self.directory / filename).write_text(text, encoding="utf-8")

    def load_game(self, filename: str) -> SaveData:
        """Read the named save file."""
        with (self.directory / filename).open(encoding="utf-8") as handle:
            return SaveData.from_json(json.load(handle))