"""Screen geometry, spawn points, ship statistics and asset paths."""

from dataclasses import dataclass
from enum import IntEnum

SCREEN_WIDTH = 1000
SCREEN_HEIGHT = 600

# Starting coordinates for the ships and their health bars.
P1_X_COORD = 500
P1_Y_COORD = 50
P2_X_COORD = 500
P2_Y_COORD = 550

P2_HP_X_COORD = SCREEN_WIDTH - 115
P2_HP_Y_COORD = SCREEN_HEIGHT - 86
P1_HP_X_COORD = 38
P1_HP_Y_COORD = 85

FLEA_HITBOX_RADIUS = 15
GOLIATH_HITBOX_RADIUS = 40
ARACHNE_HITBOX_RADIUS = 30

FLEA_HEALTH = 20
GOLIATH_HEALTH = 200
ARACHNE_HEALTH = 100

FLEA_SPEED = 20
GOLIATH_SPEED = 8
ARACHNE_SPEED = 10

# Minimum time between two shots, in milliseconds.
FLEA_FIRERATE = 150
GOLIATH_FIRERATE = 300
ARACHNE_FIRERATE = 120

MAIN_MENU_BACKGROUND_FILEPATH = "Assets/Main_Menu_1000_600_title.jpg"
PLAY_SCREEN_BACKGROUND_FILEPATH = "Assets/PlayBackground.jpg"
CHARACTER_SELECT_BACKGROUND_FILEPATH_P1 = "Assets/char_select_P1.png"
CHARACTER_SELECT_BACKGROUND_FILEPATH_P2 = "Assets/char_select_P2.png"
MAIN_MENU_TITLE_PATH = "Assets/Title.jpg"
GOLIATH_PATH = "Assets/lf_goliath_white.png"
FLEA_PATH = "Assets/lf_flea_white.png"
ARACHNE_PATH = "Assets/lf_arachne_white.png"
GAMEOVER_FONT_PATH = "Assets/MAGNETOB.TTF"
MENU_FONT_PATH = "Assets/PLANK___.TTF"
GAMEOVER_BACKGROUND_FILEPATH = "Assets/EndScreenBackground.jpg"


class ShipKind(IntEnum):
    """The selectable ships, numbered in the order of the selection screens."""

    GOLIATH = 0
    ARACHNE = 1
    FLEA = 2

    @property
    def display_name(self) -> str:
        return self.name.capitalize()


@dataclass(frozen=True)
class ShipStats:
    """The fixed characteristics of one kind of ship."""

    hitbox_radius: int
    health: int
    speed: int
    fire_rate: int
    texture_path: str


_STATS = {
    ShipKind.GOLIATH: ShipStats(
        GOLIATH_HITBOX_RADIUS, GOLIATH_HEALTH, GOLIATH_SPEED, GOLIATH_FIRERATE, GOLIATH_PATH
    ),
    ShipKind.ARACHNE: ShipStats(
        ARACHNE_HITBOX_RADIUS, ARACHNE_HEALTH, ARACHNE_SPEED, ARACHNE_FIRERATE, ARACHNE_PATH
    ),
    ShipKind.FLEA: ShipStats(
        FLEA_HITBOX_RADIUS, FLEA_HEALTH, FLEA_SPEED, FLEA_FIRERATE, FLEA_PATH
    ),
}


def stats_for(kind) -> ShipStats:
    """Return the statistics of a ship kind, given as a ShipKind or its index.

    Raises ValueError for an index that names no ship.
    """
    return _STATS[ShipKind(kind)]