"""Immutable game state for a single round."""

from dataclasses import dataclass
from enum import Enum
from typing import Any

from blackjack.cards import Card
from blackjack.hand import Hand, calculate_hand_score


class Turn(Enum):
    """
    Which party is acting.

    Flow: PLAYER_TURN → DEALER_TURN. Only a fresh deal returns to PLAYER_TURN.
    """

    PLAYER_TURN = "player_turn"
    DEALER_TURN = "dealer_turn"

    def __str__(self) -> str:
        return self.name.replace("_", " ").title()


class GameResult(Enum):
    """Outcome of a round, derived from the state on demand."""

    PLAYER_WIN = "player_win"
    DEALER_WIN = "dealer_win"
    DRAW = "draw"
    NO_RESULT = "no_result"

    def __str__(self) -> str:
        return {
            GameResult.PLAYER_WIN: "Player wins",
            GameResult.DEALER_WIN: "Dealer wins",
            GameResult.DRAW: "Draw",
            GameResult.NO_RESULT: "In progress",
        }[self]


# Valid turn transitions for player actions
VALID_TRANSITIONS: dict[Turn, list[Turn]] = {
    Turn.PLAYER_TURN: [Turn.PLAYER_TURN, Turn.DEALER_TURN],
    Turn.DEALER_TURN: [],  # Terminal until the next deal
}


def is_valid_transition(from_turn: Turn, to_turn: Turn) -> bool:
    """
    Check if a turn transition is valid.

    Args:
        from_turn: Current turn
        to_turn: Desired turn

    Returns:
        True if the transition is allowed
    """
    return to_turn in VALID_TRANSITIONS.get(from_turn, [])


@dataclass(frozen=True)
class GameState:
    """
    Immutable snapshot of one round.

    Attributes:
        player_hand: Cards held by the player
        dealer_hand: Cards held by the dealer
        card_deck: Remaining draw pile, top card last
        turn: Whose turn it is
    """

    player_hand: Hand = ()
    dealer_hand: Hand = ()
    card_deck: tuple[Card, ...] = ()
    turn: Turn = Turn.PLAYER_TURN

    @property
    def cards_remaining(self) -> int:
        """Return the number of cards left in the deck."""
        return len(self.card_deck)

    @property
    def is_round_over(self) -> bool:
        """Once the dealer has played, no further actions are accepted."""
        return self.turn is Turn.DEALER_TURN

    def to_dict(self) -> dict[str, Any]:
        """
        Convert the state to a dictionary suitable for display or logging.

        Returns:
            Dictionary representation of the state
        """
        return {
            "turn": self.turn.value,
            "player_hand": [str(card) for card in self.player_hand],
            "dealer_hand": [str(card) for card in self.dealer_hand],
            "player_score": calculate_hand_score(self.player_hand),
            "dealer_score": calculate_hand_score(self.dealer_hand),
            "cards_remaining": self.cards_remaining,
        }
