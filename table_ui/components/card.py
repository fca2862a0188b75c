"""Card sprite drawn with pygame primitives."""

from typing import List, Optional

import pygame

from table_ui.config import COLORS, DIMENSIONS
from table_ui.core.table_adapter import UICardInfo

SUIT_SYMBOLS = {
    "hearts": "♥",
    "diamonds": "♦",
    "clubs": "♣",
    "spades": "♠",
}


class CardSprite:
    """A single card at a fixed position, face up or face down.

    Surfaces are rendered once per sprite; a new round builds new sprites.
    """

    def __init__(self, x: float, y: float, info: UICardInfo):
        self.x = x
        self.y = y
        self.info = info
        self._surface: Optional[pygame.Surface] = None

    @property
    def is_face_up(self) -> bool:
        return self.info.face_up

    def _render_card_face(self, width: int, height: int) -> pygame.Surface:
        """Render the face-up side of the card."""
        surface = pygame.Surface((width, height), pygame.SRCALPHA)

        rect = pygame.Rect(0, 0, width, height)
        radius = DIMENSIONS.CARD_CORNER_RADIUS
        pygame.draw.rect(surface, COLORS.CARD_WHITE, rect, border_radius=radius)
        pygame.draw.rect(surface, COLORS.CARD_BLACK, rect, width=2, border_radius=radius)

        is_red = self.info.suit in ("hearts", "diamonds")
        color = COLORS.CARD_RED if is_red else COLORS.CARD_BLACK
        suit_symbol = SUIT_SYMBOLS.get(self.info.suit, "?")

        # Value and suit in the top-left corner
        font_size = max(16, int(height * 0.18))
        font = pygame.font.Font(None, font_size)
        surface.blit(font.render(self.info.value, True, color), (8, 6))
        surface.blit(font.render(suit_symbol, True, color), (8, font_size))

        # Large center suit
        center_font = pygame.font.Font(None, int(height * 0.45))
        center_suit = center_font.render(suit_symbol, True, color)
        surface.blit(center_suit, center_suit.get_rect(center=(width // 2, height // 2)))

        # Bottom-right corner, upside down
        value_br = pygame.transform.rotate(font.render(self.info.value, True, color), 180)
        surface.blit(
            value_br,
            (width - 8 - value_br.get_width(), height - 6 - value_br.get_height()),
        )

        return surface

    def _render_card_back(self, width: int, height: int) -> pygame.Surface:
        """Render the face-down (back) side of the card."""
        surface = pygame.Surface((width, height), pygame.SRCALPHA)

        rect = pygame.Rect(0, 0, width, height)
        radius = DIMENSIONS.CARD_CORNER_RADIUS
        pygame.draw.rect(surface, COLORS.CARD_BACK, rect, border_radius=radius)
        pygame.draw.rect(surface, COLORS.CARD_BLACK, rect, width=2, border_radius=radius)

        inner_rect = rect.inflate(-12, -12)
        pygame.draw.rect(surface, COLORS.CARD_BACK_PATTERN, inner_rect, border_radius=4)

        # Diamond grid
        pattern_color = COLORS.CARD_BACK
        for i in range(-height, width + height, 16):
            pygame.draw.line(surface, pattern_color, (i, 6), (i + height, height - 6), 1)
            pygame.draw.line(surface, pattern_color, (i + height, 6), (i, height - 6), 1)

        return surface

    def _render(self) -> pygame.Surface:
        width, height = DIMENSIONS.CARD_WIDTH, DIMENSIONS.CARD_HEIGHT
        if self.is_face_up:
            return self._render_card_face(width, height)
        return self._render_card_back(width, height)

    def draw(self, surface: pygame.Surface) -> None:
        """Draw the card centered on its position, with a drop shadow."""
        if self._surface is None:
            self._surface = self._render()

        card_rect = self._surface.get_rect(center=(int(self.x), int(self.y)))

        shadow = pygame.Surface(card_rect.size, pygame.SRCALPHA)
        pygame.draw.rect(
            shadow,
            COLORS.CARD_SHADOW,
            shadow.get_rect(),
            border_radius=DIMENSIONS.CARD_CORNER_RADIUS,
        )
        offset = DIMENSIONS.CARD_SHADOW_OFFSET
        surface.blit(shadow, card_rect.move(offset // 2, offset))
        surface.blit(self._surface, card_rect)


def layout_hand(cards: List[UICardInfo], center_x: float, y: float) -> List[CardSprite]:
    """Lay a hand out left to right, centered on center_x.

    Long hands overlap so they always fit the screen width.
    """
    step = DIMENSIONS.CARD_WIDTH + DIMENSIONS.HAND_SPACING
    if len(cards) > 1:
        usable = DIMENSIONS.SCREEN_WIDTH - DIMENSIONS.CARD_WIDTH - 2 * DIMENSIONS.HAND_SPACING
        step = min(step, usable / (len(cards) - 1))
    start_x = center_x - step * (len(cards) - 1) / 2
    return [CardSprite(start_x + i * step, y, info) for i, info in enumerate(cards)]
