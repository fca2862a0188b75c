"""Hand evaluation for blackjack."""

from blackjack.cards import Card, Rank
from blackjack.exceptions import InvalidRankError

# A hand is an ordered, immutable run of cards held by one party.
Hand = tuple[Card, ...]

BLACKJACK = 21


def _rank_value(card: Card) -> int:
    if not isinstance(card.rank, Rank):
        raise InvalidRankError(f"Unrecognised rank: {card.rank!r}")
    return card.value


def calculate_hand_score(hand: Hand) -> int:
    """
    Calculate the blackjack score of a hand.

    Aces count 11 and are dropped to 1, one at a time, while the total
    is over 21.

    Raises:
        InvalidRankError: If a card carries an unknown rank
    """
    total = 0
    aces = 0

    for card in hand:
        total += _rank_value(card)
        if card.rank is Rank.ACE:
            aces += 1

    # Reduce aces from 11 to 1 as needed
    while total > BLACKJACK and aces > 0:
        total -= 10
        aces -= 1

    return total


def is_soft(hand: Hand) -> bool:
    """Check if the hand still counts an ace as 11."""
    if not any(card.is_ace for card in hand):
        return False

    total_hard = sum(1 if card.is_ace else _rank_value(card) for card in hand)
    return total_hard + 10 <= BLACKJACK


def is_blackjack(hand: Hand) -> bool:
    """Check if the hand is a natural blackjack (21 with 2 cards)."""
    return len(hand) == 2 and calculate_hand_score(hand) == BLACKJACK


def is_busted(hand: Hand) -> bool:
    """Check if the hand has busted (value > 21)."""
    return calculate_hand_score(hand) > BLACKJACK


def format_hand(hand: Hand) -> str:
    cards_str = " ".join(str(card) for card in hand)
    if is_blackjack(hand):
        return f"{cards_str} (BLACKJACK)"
    if is_busted(hand):
        return f"{cards_str} (BUST)"
    value = calculate_hand_score(hand)
    if is_soft(hand):
        return f"{cards_str} (soft {value})"
    return f"{cards_str} ({value})"
