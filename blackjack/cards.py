"""Cards and the immutable draw pile.

A deck is a plain tuple of cards. The top of the deck is the last element,
so dealing never reorders what is left underneath it.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from random import Random

from blackjack.exceptions import EmptyDeckError

logger = logging.getLogger(__name__)


class Suit(Enum):
    """Card suits, valued by their symbol."""

    CLUBS = "♣"
    DIAMONDS = "♦"
    HEARTS = "♥"
    SPADES = "♠"

    def __str__(self) -> str:
        return self.value


_FACE_LABELS = {11: "J", 12: "Q", 13: "K", 14: "A"}


class Rank(Enum):
    """Card ranks, valued by their order within a suit."""

    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14

    def __str__(self) -> str:
        return _FACE_LABELS.get(self.value, str(self.value))

    @property
    def blackjack_value(self) -> int:
        """Points before any ace adjustment: ace 11, pictures 10."""
        if self is Rank.ACE:
            return 11
        return min(self.value, 10)

    @property
    def is_ace(self) -> bool:
        return self is Rank.ACE


# Deck enumeration order: suit-major, rank-minor.
SUITS: tuple[Suit, ...] = (Suit.CLUBS, Suit.DIAMONDS, Suit.HEARTS, Suit.SPADES)
RANKS: tuple[Rank, ...] = (
    Rank.TWO,
    Rank.THREE,
    Rank.FOUR,
    Rank.FIVE,
    Rank.SIX,
    Rank.SEVEN,
    Rank.EIGHT,
    Rank.NINE,
    Rank.TEN,
    Rank.JACK,
    Rank.QUEEN,
    Rank.KING,
    Rank.ACE,
)

DECK_SIZE = len(SUITS) * len(RANKS)

# Short notation accepted by Card.from_string: "AS", "10h", "T♦"
_RANK_CODES = {str(rank): rank for rank in RANKS}
_RANK_CODES["T"] = Rank.TEN
_SUIT_CODES = {suit.name[0]: suit for suit in SUITS}
_SUIT_CODES.update({suit.value: suit for suit in SUITS})


@dataclass(frozen=True, slots=True)
class Card:
    """Immutable playing card."""

    rank: Rank
    suit: Suit

    def __post_init__(self) -> None:
        if not isinstance(self.rank, Rank):
            raise TypeError(f"Invalid rank: {self.rank!r}")
        if not isinstance(self.suit, Suit):
            raise TypeError(f"Invalid suit: {self.suit!r}")

    def __str__(self) -> str:
        return f"{self.rank}{self.suit}"

    def __repr__(self) -> str:
        return f"Card({self.rank.name}, {self.suit.name})"

    @property
    def value(self) -> int:
        return self.rank.blackjack_value

    @property
    def is_ace(self) -> bool:
        return self.rank.is_ace

    @classmethod
    def from_string(cls, s: str) -> "Card":
        """
        Parse short notation: rank code followed by one suit letter or symbol.

        Raises:
            ValueError: If either part is not recognised
        """
        code = s.strip().upper()
        if len(code) < 2:
            raise ValueError(f"Invalid card string: {s!r}")

        rank_code, suit_code = code[:-1], code[-1]
        if rank_code not in _RANK_CODES:
            raise ValueError(f"Invalid rank: {rank_code}")
        if suit_code not in _SUIT_CODES:
            raise ValueError(f"Invalid suit: {suit_code}")
        return cls(_RANK_CODES[rank_code], _SUIT_CODES[suit_code])


def new_card_deck() -> tuple[Card, ...]:
    """Return all 52 cards in a fixed, unshuffled order."""
    return tuple(Card(rank, suit) for suit in SUITS for rank in RANKS)


def shuffle(deck: tuple[Card, ...], rng: Random | None = None) -> tuple[Card, ...]:
    """
    Return a uniformly shuffled copy of a deck.

    Args:
        deck: Cards to shuffle; left untouched
        rng: Random number generator for reproducible shuffles

    Returns:
        A new tuple holding the same cards in random order
    """
    cards = list(deck)
    (rng or Random()).shuffle(cards)
    return tuple(cards)


def take_card(deck: tuple[Card, ...]) -> tuple[Card, tuple[Card, ...]]:
    """
    Take the card from the top of the deck.

    Returns:
        The drawn card and the remaining deck

    Raises:
        EmptyDeckError: If the deck has no cards left
    """
    if not deck:
        raise EmptyDeckError("Cannot draw from empty deck")
    card = deck[-1]
    logger.debug("Drew %s, %d cards remain", card, len(deck) - 1)
    return card, deck[:-1]
