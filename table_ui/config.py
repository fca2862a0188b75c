"""Look and layout of the table window."""

from dataclasses import dataclass
from typing import Tuple

RGB = Tuple[int, int, int]
RGBA = Tuple[int, int, int, int]


@dataclass(frozen=True)
class Colors:
    """Table palette."""

    FELT_GREEN: RGB = (21, 96, 58)
    GOLD: RGB = (236, 190, 74)

    CARD_WHITE: RGB = (250, 249, 244)
    CARD_RED: RGB = (200, 38, 46)
    CARD_BLACK: RGB = (20, 20, 24)
    CARD_BACK: RGB = (128, 24, 36)
    CARD_BACK_PATTERN: RGB = (164, 48, 58)
    CARD_SHADOW: RGBA = (0, 0, 0, 80)

    # Status line once the round is over
    RESULT_WIN: RGB = (120, 220, 120)
    RESULT_LOSE: RGB = (235, 110, 100)
    RESULT_DRAW: RGB = (215, 215, 215)

    TEXT_WHITE: RGB = (244, 244, 240)
    TEXT_MUTED: RGB = (160, 185, 168)

    BUTTON_DEFAULT: RGB = (32, 58, 44)
    BUTTON_HOVER: RGB = (46, 82, 62)
    BUTTON_PRESSED: RGB = (24, 44, 34)
    BUTTON_DISABLED: RGB = (52, 60, 56)


@dataclass(frozen=True)
class Dimensions:
    """Window size and element positions, in pixels."""

    SCREEN_WIDTH: int = 1024
    SCREEN_HEIGHT: int = 680
    TARGET_FPS: int = 30
    CENTER_X: int = SCREEN_WIDTH // 2

    CARD_WIDTH: int = 90
    CARD_HEIGHT: int = 126
    CARD_CORNER_RADIUS: int = 8
    CARD_SHADOW_OFFSET: int = 4
    # Gap between neighbouring cards in a hand
    HAND_SPACING: int = 24

    # Vertical centers of each row
    DEALER_HAND_Y: int = 170
    PLAYER_HAND_Y: int = 450
    BUTTON_ROW_Y: int = 620

    BUTTON_WIDTH: int = 120
    BUTTON_HEIGHT: int = 45
    BUTTON_SPACING: int = 150
    BUTTON_CORNER_RADIUS: int = 6


COLORS = Colors()
DIMENSIONS = Dimensions()
