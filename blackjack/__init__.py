"""Core blackjack engine - 100% UI-agnostic."""

from blackjack.cards import Card, Rank, Suit, new_card_deck, shuffle, take_card
from blackjack.exceptions import (
    BlackjackError,
    EmptyDeckError,
    InvalidActionError,
    InvalidRankError,
)
from blackjack.hand import Hand, calculate_hand_score

__all__ = [
    "Card",
    "Rank",
    "Suit",
    "Hand",
    "new_card_deck",
    "shuffle",
    "take_card",
    "calculate_hand_score",
    "BlackjackError",
    "EmptyDeckError",
    "InvalidActionError",
    "InvalidRankError",
]
