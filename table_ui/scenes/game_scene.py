"""Main table scene - draws the round and wires the action buttons."""

from typing import List, Optional

import pygame

from blackjack.game.state import GameResult, Turn
from table_ui.components.button import ActionButton
from table_ui.components.card import CardSprite, layout_hand
from table_ui.config import COLORS, DIMENSIONS
from table_ui.core.table_adapter import TableAdapter, TableSnapshot
from table_ui.scenes.base_scene import BaseScene

RESULT_COLORS = {
    GameResult.PLAYER_WIN: COLORS.RESULT_WIN,
    GameResult.DEALER_WIN: COLORS.RESULT_LOSE,
    GameResult.DRAW: COLORS.RESULT_DRAW,
}


class GameScene(BaseScene):
    """Blackjack table with Hit, Stand and Reset controls."""

    def __init__(self, adapter: Optional[TableAdapter] = None):
        super().__init__()
        self._adapter = adapter
        self.engine: Optional[TableAdapter] = None

        self.buttons: List[ActionButton] = []
        self.dealer_cards: List[CardSprite] = []
        self.player_cards: List[CardSprite] = []
        self.snapshot: Optional[TableSnapshot] = None
        self.message: str = ""

        self._font: Optional[pygame.font.Font] = None
        self._large_font: Optional[pygame.font.Font] = None

    def on_enter(self) -> None:
        """Initialize the table scene."""
        super().on_enter()

        self.engine = self._adapter or TableAdapter()
        self.engine.set_callbacks(on_message=self._on_message)

        self._font = pygame.font.Font(None, 30)
        self._large_font = pygame.font.Font(None, 44)
        self._setup_ui()
        self._refresh()

    def _setup_ui(self) -> None:
        """Create the action buttons."""
        y = DIMENSIONS.BUTTON_ROW_Y
        spacing = DIMENSIONS.BUTTON_SPACING
        center = DIMENSIONS.CENTER_X

        self.buttons = [
            ActionButton(center - spacing, y, "Hit", "hit", self._on_hit, hotkey="H"),
            ActionButton(center, y, "Stand", "stand", self._on_stand, hotkey="S"),
            ActionButton(center + spacing, y, "Reset", "reset", self._on_reset, hotkey="R"),
        ]

    def _refresh(self) -> None:
        """Rebuild sprites and button states from the current table."""
        self.snapshot = self.engine.get_snapshot()

        self.dealer_cards = layout_hand(
            self.snapshot.dealer_hand, DIMENSIONS.CENTER_X, DIMENSIONS.DEALER_HAND_Y
        )
        self.player_cards = layout_hand(
            self.snapshot.player_hand, DIMENSIONS.CENTER_X, DIMENSIONS.PLAYER_HAND_Y
        )

        for button in self.buttons:
            if button.action == "hit":
                button.set_enabled(self.snapshot.can_hit)
            elif button.action == "stand":
                button.set_enabled(self.snapshot.can_stand)

    # Actions

    def _on_hit(self) -> None:
        self.message = ""
        self.engine.hit()
        self._refresh()

    def _on_stand(self) -> None:
        self.message = ""
        self.engine.stand()
        self._refresh()

    def _on_reset(self) -> None:
        self.message = ""
        self.engine.reset()
        self._refresh()

    def _on_message(self, message: str) -> None:
        self.message = message

    def handle_event(self, event: pygame.event.Event) -> bool:
        """Handle input events."""
        for button in self.buttons:
            if button.handle_event(event):
                return True

        if event.type == pygame.KEYDOWN:
            if event.key == pygame.K_h:
                self._on_hit()
                return True
            elif event.key == pygame.K_s:
                self._on_stand()
                return True
            elif event.key == pygame.K_r:
                self._on_reset()
                return True

        return False

    def update(self, dt: float) -> None:
        # Nothing moves between actions; the table only changes on input.
        pass

    def _blit_centered(
        self, surface: pygame.Surface, text: str, y: int, color, font=None
    ) -> None:
        rendered = (font or self._font).render(text, True, color)
        surface.blit(rendered, rendered.get_rect(center=(DIMENSIONS.CENTER_X, y)))

    def draw(self, surface: pygame.Surface) -> None:
        """Draw the table."""
        surface.fill(COLORS.FELT_GREEN)
        snapshot = self.snapshot
        if snapshot is None:
            return

        half_card = DIMENSIONS.CARD_HEIGHT // 2

        # Deck count
        deck_text = self._font.render(snapshot.deck_text, True, COLORS.TEXT_MUTED)
        surface.blit(deck_text, (20, 20))

        # Dealer
        dealer_label_y = DIMENSIONS.DEALER_HAND_Y - half_card - 24
        self._blit_centered(surface, "Dealer Cards", dealer_label_y, COLORS.GOLD)
        for card in self.dealer_cards:
            card.draw(surface)
        if not snapshot.dealer_hole_card_hidden:
            self._blit_centered(
                surface,
                f"Dealer Score {snapshot.dealer_score}",
                DIMENSIONS.DEALER_HAND_Y + half_card + 20,
                COLORS.TEXT_WHITE,
            )

        # Player
        player_label_y = DIMENSIONS.PLAYER_HAND_Y - half_card - 24
        self._blit_centered(surface, "Player Cards", player_label_y, COLORS.GOLD)
        for card in self.player_cards:
            card.draw(surface)
        self._blit_centered(
            surface,
            f"Player Score {snapshot.player_score}",
            DIMENSIONS.PLAYER_HAND_Y + half_card + 20,
            COLORS.TEXT_WHITE,
        )

        # Status line between the hands
        status_y = (DIMENSIONS.DEALER_HAND_Y + DIMENSIONS.PLAYER_HAND_Y) // 2
        color = COLORS.TEXT_WHITE
        if snapshot.turn is Turn.DEALER_TURN:
            color = RESULT_COLORS.get(snapshot.result, COLORS.TEXT_WHITE)
        self._blit_centered(surface, snapshot.status_text, status_y, color, self._large_font)
        if self.message:
            self._blit_centered(surface, self.message, status_y + 34, COLORS.GOLD)

        for button in self.buttons:
            button.draw(surface)
