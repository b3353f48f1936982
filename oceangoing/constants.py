"""Colours, asset paths and display settings shared across the game."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Color:
    """An RGBA colour with 8-bit channels."""

    r: int
    g: int
    b: int
    a: int = 255

    def __post_init__(self) -> None:
        for channel in (self.r, self.g, self.b, self.a):
            if not 0 <= channel <= 255:
                raise ValueError(f"colour channel out of range: {channel}")

    def with_alpha(self, alpha: int) -> Color:
        """Return the same colour with a different alpha channel."""
        return Color(self.r, self.g, self.b, alpha)


# --- display -------------------------------------------------------------

WINDOW_TITLE = "Ocean-Going"
RESOLUTION = (1920.0, 1080.0)
VIEW_SIZE = (1365.0, 768.0)
SOUND_MIN_DIST = VIEW_SIZE[1] * 0.25
NS_UPDATE = 1e9 / 60.0  # 60 updates per second
FRAMERATE_LIMIT = 144

# --- colours -------------------------------------------------------------

BORDER_OVERLAY = Color(0, 0, 0, 50)
SHIP_BROWN = Color(139, 103, 74)
SHIP_BROWN_DARK = Color(80, 60, 44)
HEALTH_RED = Color(155, 27, 26)
HEALTH_RED_LIGHT = Color(255, 180, 180)
HEALTH_RED_DARK = Color(88, 44, 44)
HEALTH_RED_DARK_TRANS = Color(88, 44, 44, 70)
MAP_WHITE = Color(247, 235, 208)
MAP_WHITE_TRANS = Color(247, 235, 208, 125)
MAP_WHITE_GREY = Color(230, 223, 208)
MAP_WHITE_DARK = Color(234, 221, 191)
MAP_SELECTED = Color(224, 181, 85)
MAP_SELECTED_RED = Color(255, 85, 85)
TEXT_GREY = Color(115, 115, 115)
STATS_GREY = Color(115, 115, 115)
STATS_GREY_LIGHT = Color(170, 170, 170)
MINIMAP_GRID_GREY = Color(102, 102, 102)
MINIMAP_ISLAND_GREY = Color(240, 240, 240)

# --- paths ---------------------------------------------------------------

GAMESAVE_PATH = "saves/"
ASSETS_PATH = "assets/"

_TEX = ASSETS_PATH + "textures/"
TEXTURE_DEFAULT = _TEX + "default.png"

TEXTURE_HULL = _TEX + "ship/hull/hull_type.png"
TEXTURE_HULL_STRENGTH = _TEX + "ship/hull/strength/type_level.png"
TEXTURE_CANNON = _TEX + "ship/cannon/cannon.png"
TEXTURE_CANNON_STRENGTH = _TEX + "ship/cannon/strength/level.png"
TEXTURE_CANNON_RANGE = _TEX + "ship/cannon/range/level.png"
TEXTURE_CANNON_RELOAD = _TEX + "ship/cannon/reload/level.png"
TEXTURE_SAIL = _TEX + "ship/sail/sail.png"
TEXTURE_SAIL_ENEMY = _TEX + "ship/sail/sail_enemy.png"
TEXTURE_SAIL_VELOCITY = _TEX + "ship/sail/velocity/level.png"
TEXTURE_RUDER = _TEX + "ship/ruder/ruder.png"
TEXTURE_RUDER_TURN = _TEX + "ship/ruder/turn/level.png"

TEXTURE_WATER = _TEX + "world/water.png"
TEXTURE_WATER_DARK = _TEX + "world/water_dark.png"
TEXTURE_VORTEX = _TEX + "world/vortex.png"
TEXTURE_ISLAND = _TEX + "world/island/island_type.png"
TEXTURE_ISLAND_DECO = _TEX + "world/island/decoration/type.png"

TEXTURE_CANNON_BALL = _TEX + "entity/cannon_ball.png"
TEXTURE_CANNON_BALL_MISS = _TEX + "entity/cannon_ball_miss.png"
TEXTURE_CANNON_BALL_HIT = _TEX + "entity/cannon_ball_hit.png"
TEXTURE_SHIP_WRECK = _TEX + "entity/ship_wreck_type.png"

TEXTURE_TREASURE = _TEX + "drop/treasure.png"
TEXTURE_HEALING_BARREL = _TEX + "drop/healing_barrel.png"
TEXTURE_SHIP_PARTS = _TEX + "drop/ship_parts.png"
TEXTURE_GOLD_ICON = _TEX + "drop/gold_icon.png"
TEXTURE_HEAL_ICON = _TEX + "drop/heal_icon.png"
TEXTURE_SHIP_PARTS_ICON = _TEX + "drop/ship_parts_icon.png"

TEXTURE_PLANK_BUTTON = _TEX + "ui/plank_button.png"
TEXTURE_LOGO = _TEX + "ui/logo.png"
TEXTURE_ICON = _TEX + "ui/icon.png"
TEXTURE_CANNON_DISPLAY = _TEX + "ui/cannon_display.png"
TEXTURE_HEALTH_BAR = _TEX + "ui/health_bar.png"
TEXTURE_SHIP_MENU_MAP = _TEX + "ui/ship_menu_map.png"
TEXTURE_SHIP_PREVIEW = _TEX + "ui/ship_preview.png"
TEXTURE_MINIMAP = _TEX + "ui/minimap.png"

TEXTURE_PRELOAD = (
    TEXTURE_DEFAULT, TEXTURE_CANNON, TEXTURE_SAIL, TEXTURE_SAIL_ENEMY, TEXTURE_RUDER,
    TEXTURE_WATER, TEXTURE_WATER_DARK, TEXTURE_VORTEX, TEXTURE_CANNON_BALL,
    TEXTURE_CANNON_BALL_MISS, TEXTURE_CANNON_BALL_HIT, TEXTURE_TREASURE,
    TEXTURE_HEALING_BARREL, TEXTURE_SHIP_PARTS, TEXTURE_GOLD_ICON,
    TEXTURE_SHIP_PARTS_ICON, TEXTURE_HEAL_ICON, TEXTURE_MINIMAP,
    TEXTURE_CANNON_DISPLAY, TEXTURE_HEALTH_BAR,
)

_SND = ASSETS_PATH + "sounds/"
SOUND_VORTEX = _SND + "ambient/vortex.ogg"
SOUND_SEAGULL = _SND + "ambient/seagull.ogg"
SOUND_WAVES_SHORE = _SND + "ambient/waves_shore.ogg"
SOUND_WAVES_HULL_CALM = _SND + "ambient/waves_hull_calm_id.ogg"
SOUND_WAVES_HULL_MEDIUM = _SND + "ambient/waves_hull_medium_id.ogg"
SOUND_WAVES_HULL_HARD = _SND + "ambient/waves_hull_hard_id.ogg"

SOUND_CANNON_SHOT = _SND + "entity/cannon_shot.ogg"
SOUND_CANNON_BALL_SWOOSH = _SND + "entity/cannon_ball_swoosh.ogg"
SOUND_CANNON_BALL_HIT = _SND + "entity/cannon_ball_hit.ogg"
SOUND_CANNON_BALL_MISS = _SND + "entity/cannon_ball_miss.ogg"
SOUND_SHIP_DAMAGE = _SND + "entity/ship_damage_id.ogg"
SOUND_SHIP_HEAL = _SND + "entity/ship_heal.ogg"
SOUND_SHIP_SINK = _SND + "entity/ship_sink.ogg"
SOUND_SAIL_DEPLOY = _SND + "entity/sail_deploy_id.ogg"
SOUND_TREASURE_COLLECT = _SND + "entity/treasure_collect.ogg"

SOUND_PLANK_BUTTON_HOVER = _SND + "ui/plank_button_hover.ogg"
SOUND_UPGRADE_BUTTON_HOVER = _SND + "ui/upgrade_button_hover.ogg"
SOUND_LEVEL_DONE = _SND + "ui/level_done.ogg"
SOUND_GAME_OVER = _SND + "ui/game_over.ogg"

SOUND_TITLE_MUSIC = _SND + "music/Ocean Going - Get Ready To Sail.mp3"

SOUND_PRELOAD = (
    SOUND_VORTEX, SOUND_SEAGULL, SOUND_WAVES_SHORE, SOUND_CANNON_SHOT,
    SOUND_CANNON_BALL_MISS, SOUND_CANNON_BALL_HIT, SOUND_CANNON_BALL_SWOOSH,
    SOUND_SHIP_HEAL, SOUND_SHIP_SINK, SOUND_TREASURE_COLLECT,
    SOUND_PLANK_BUTTON_HOVER, SOUND_UPGRADE_BUTTON_HOVER, SOUND_LEVEL_DONE,
    SOUND_GAME_OVER,
)

FONT_TUFFY = ASSETS_PATH + "fonts/tuffy.ttf"
FONT_TREAMD = ASSETS_PATH + "fonts/Treamd.ttf"
FONT_BLACKSHIP = ASSETS_PATH + "fonts/BlackShip.ttf"

SHADER_BLEND = ASSETS_PATH + "shaders/blend.frag"