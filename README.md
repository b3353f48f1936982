# oceangoing

The game logic of a pirate ship arcade game, with no graphics or sound attached.
It covers the upgrade tree, ship configurations, level progression, JSON save
files, object lifetime and collision checks, ships, cannons, cannon balls and
collectable drops. It uses only the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `oceangoing.constants`: the `Color` dataclass (RGBA, channels 0–255, with
  `with_alpha`), the game's named colours, display settings such as `RESOLUTION`,
  `VIEW_SIZE` and `SOUND_MIN_DIST`, and the relative paths of textures, sounds,
  fonts and the shader under `assets/`. The save directory is `GAMESAVE_PATH` (`saves/`).
- `oceangoing.upgrade`: `UpgradeType` has nine types, from `HULL` to `RUDER_TURN`.
  Each type has a chain of shared `Upgrade` levels, each with `name`, `description`,
  `cost_gold`, `cost_ship_parts`, `prev_level` and `next_level`.
  `get_upgrade(upgrade_type, level)` returns a level and clamps it to the type's
  maximum. It raises `ValueError` for levels below 1. `Upgrade.apply(ship)` sets the
  ship's attributes from this level and every level below it. `overall_cost()`
  returns the summed `(gold, ship_parts)` of all levels.
- `oceangoing.ship_configuration`: `ShipConfiguration` holds one level per upgrade
  type. Create one with `new_default()`, `new_maxed_out()` or `new_custom()`.
  `level_up` and `level_down` return `False` and leave the configuration unchanged
  when the step is not possible, or when cannons or sails would no longer fit the
  hull (`is_valid()`). Other members are `get_upgrade`, `levels`, `copy()` and
  `apply_all(ship)`, which applies the hull first.
- `oceangoing.game_saver`: `SaveData` converts to and from JSON with `to_json()` and
  `SaveData.from_json(data)`. A malformed document raises `ValueError`. Upgrade
  levels are rebuilt by levelling up from the default ship, so invalid levels are
  dropped. `GameSaver(directory)` writes files with `save_game(filename, data)` and
  reads them with `load_game(filename)`.
- `oceangoing.level_manager`: `Scene` and `LevelManager(saver, rng)`. The manager
  loads the standard save (`standard.json`) when it is created. If that file is
  missing, it starts from a fresh `SaveData`. It tracks gold and ship parts: while
  `scene` is `Scene.IN_GAME`, gold and parts go to the current level, otherwise to
  the player's bank. `next_level()` and `reset_level()` save after they run. The
  `determine_*` methods give the random parameters of a level: map size, number of
  islands, drops, drop value, enemies, heal amount, and an enemy ship configuration
  bought from a share of the global gold.
- `oceangoing.object_manager`: `GameObject`, `Collidable`, `ObjectManager`,
  `CollisionHandler` and `ConvexPolygon`.
  - Activation registers an object. Removal is deferred until the next
    `update_all`.
  - `render_order()` splits objects into a world layer and a UI layer, each sorted
    by descending `z_index`.
  - `handle_collision()` checks pairs, first with bounding rectangles and then with
    a separating-axis test. It passes contact points to `on_collision` when either
    object asks for them.
- `oceangoing.cannon_ball`: `CannonBall` flies straight and its damage varies by
  ±10%. Damage doubles for the last 20% of its range. The flight ends as
  `Impact.HIT` on collision, or as `Impact.MISS` when the range runs out.
- `oceangoing.cannon`: `Cannon` follows its ship, reloads over time, and `fire()`
  returns a new `CannonBall`, or `None` when the cannon is not loaded.
- `oceangoing.drops`: `Drop`, `Treasure`, `HealingBarrel` and `ShipParts`.
  - A drop is collected when a ship with `is_player` set to true touches it.
  - Collecting credits gold or parts to a level manager, or heals the ship.
  - A home island, if one is given, is told through `drop_loot()` and
    `spawn_enemies()`.
- `oceangoing.ship`: `Ship`, configured by a `ShipConfiguration`.
  - Sails (`set_sail_state`, `increase_sails`, `decrease_sails`) set the target
    speed.
  - Steering uses `turn_angle`, capped at ±70 degrees.
  - `fire_cannons()` fires the first loaded pair of cannons.
  - Health is handled by `damage`, `heal` and `sink`.
  - Collisions with other ships or island-like objects push the ship away and
    cause damage. Cannon balls cause damage. Objects flagged `is_border` cause
    damage over time.

## Example

```python
from oceangoing.ship_configuration import ShipConfiguration
from oceangoing.upgrade import UpgradeType

config = ShipConfiguration.new_default()
config.level_up(UpgradeType.HULL)
config.level_up(UpgradeType.CANNONS)
print(config.get_upgrade(UpgradeType.CANNONS).level)  # 2
```

## What this package does not do

There is no window, rendering, sound playback, input handling, main loop or
command to start a game. There is also no world map, island or enemy-ship
behaviour. Ships and drops work with such objects only through the attributes
described above (`is_island`, `is_border`, `is_player`, `drop_loot`,
`spawn_enemies`), which the caller must provide.