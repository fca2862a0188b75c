"""Adapter connecting the blackjack table to the PyGame UI."""

import logging
from dataclasses import dataclass
from random import Random
from typing import Callable, Optional

from blackjack.cards import Card
from blackjack.game.events import EventType, GameEvent
from blackjack.game.state import GameResult, Turn
from blackjack.game.table import GameTable
from config import GameConfig, config

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UICardInfo:
    """Card information for the UI layer."""

    value: str  # "A", "2", "K", etc.
    suit: str   # "hearts", "diamonds", "clubs", "spades"
    face_up: bool = True

    @classmethod
    def from_core_card(cls, card: Card, face_up: bool = True) -> "UICardInfo":
        """Create UICardInfo from a core Card."""
        return cls(
            value=str(card.rank),
            suit=card.suit.name.lower(),
            face_up=face_up,
        )


@dataclass(frozen=True)
class TableSnapshot:
    """Everything the table scene draws for one frame."""

    turn: Turn
    result: GameResult
    player_hand: list[UICardInfo]
    dealer_hand: list[UICardInfo]
    dealer_hole_card_hidden: bool
    player_score: int
    dealer_score: Optional[int]  # None while the hole card is hidden
    cards_remaining: int
    can_hit: bool
    can_stand: bool

    @property
    def status_text(self) -> str:
        """Result once the round is over, otherwise whose turn it is."""
        if self.turn is Turn.DEALER_TURN and self.result is not GameResult.NO_RESULT:
            return str(self.result)
        return str(self.turn)

    @property
    def deck_text(self) -> str:
        return f"There are {self.cards_remaining} cards left in deck"


class TableAdapter:
    """Adapter between the core GameTable and the PyGame UI.

    Owns the table, forwards button presses to it and turns its state into
    plain snapshots the scene can draw.
    """

    def __init__(self, game_config: GameConfig | None = None):
        """Initialize the adapter.

        Args:
            game_config: Table settings (defaults to the global config)
        """
        self.game_config = game_config or config.game
        rng = Random(self.game_config.seed) if self.game_config.seed is not None else None
        self.table = GameTable(rng=rng)

        self._on_message: Optional[Callable[[str], None]] = None
        self.table.subscribe(self._handle_event)

    def set_callbacks(self, on_message: Callable[[str], None] = None) -> None:
        """Set UI callback functions.

        Args:
            on_message: Called with a short line of text for notable events
        """
        self._on_message = on_message

    def _handle_event(self, event: GameEvent) -> None:
        """Handle events from the table."""
        etype = event.event_type
        data = event.data

        if etype == EventType.INVALID_ACTION:
            message = data.get("message", "Invalid action")
        elif etype == EventType.PLAYER_BUSTS:
            message = "Bust!"
        elif etype == EventType.PLAYER_BLACKJACK:
            message = "Blackjack!"
        elif etype == EventType.DEALER_BUSTS:
            message = "Dealer busts"
        else:
            return

        logger.debug("UI message for %s: %s", etype.name, message)
        if self._on_message:
            self._on_message(message)

    def get_snapshot(self) -> TableSnapshot:
        """Get a snapshot of the current table state."""
        state = self.table.state
        hole_hidden = (
            self.table.turn is Turn.PLAYER_TURN and not self.game_config.reveal_hole_card
        )

        dealer_cards = [
            UICardInfo.from_core_card(card, face_up=not (i == 0 and hole_hidden))
            for i, card in enumerate(state.dealer_hand)
        ]

        return TableSnapshot(
            turn=self.table.turn,
            result=self.table.result,
            player_hand=[UICardInfo.from_core_card(c) for c in state.player_hand],
            dealer_hand=dealer_cards,
            dealer_hole_card_hidden=hole_hidden,
            player_score=self.table.player_score,
            dealer_score=None if hole_hidden else self.table.dealer_score,
            cards_remaining=state.cards_remaining,
            can_hit=self.table.can_hit,
            can_stand=self.table.can_stand,
        )

    # Table actions

    def hit(self) -> bool:
        """Player hits."""
        return self.table.hit()

    def stand(self) -> bool:
        """Player stands."""
        return self.table.stand()

    def reset(self) -> None:
        """Deal a new round."""
        self.table.reset()
