"""Pytest fixtures for blackjack table tests."""

import pytest
from random import Random

from blackjack.cards import Card, new_card_deck
from blackjack.game.state import GameState, Turn
from blackjack.game.table import GameTable


def cards(*codes: str) -> tuple[Card, ...]:
    """Build a hand from short strings like 'AS', '10H', 'KD'."""
    return tuple(Card.from_string(code) for code in codes)


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return Random(42)


@pytest.fixture
def make_state():
    """
    Factory for hand-built states.

    The deck defaults to every card not already in a hand, so the 52-card
    universe stays intact. ``top`` cards are placed on top of the deck in
    draw order (first one drawn first).
    """

    def _make(player=(), dealer=(), turn=Turn.PLAYER_TURN, top=(), deck=None):
        player_hand = cards(*player)
        dealer_hand = cards(*dealer)
        top_cards = cards(*top)
        if deck is None:
            used = set(player_hand) | set(dealer_hand) | set(top_cards)
            rest = tuple(c for c in new_card_deck() if c not in used)
        else:
            rest = cards(*deck)
        return GameState(
            player_hand=player_hand,
            dealer_hand=dealer_hand,
            card_deck=rest + tuple(reversed(top_cards)),
            turn=turn,
        )

    return _make


@pytest.fixture
def blackjack_hand():
    """A natural blackjack hand."""
    return cards("AS", "KH")


@pytest.fixture
def soft_17_hand():
    """A soft 17 hand (A-6)."""
    return cards("AS", "6H")


@pytest.fixture
def hard_16_hand():
    """A hard 16 hand (10-6)."""
    return cards("10S", "6H")


@pytest.fixture
def bust_hand():
    """A busted hand."""
    return cards("10S", "6H", "KC")


@pytest.fixture
def table(rng):
    """A table with a seeded round dealt."""
    return GameTable(rng=rng)
