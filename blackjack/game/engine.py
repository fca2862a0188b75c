"""
Pure round transitions.

Every function here takes a GameState and returns a new one; the input is
never modified, so a caller's previous reference stays valid.
"""

import logging
from dataclasses import replace
from random import Random

from blackjack.cards import new_card_deck, shuffle, take_card
from blackjack.exceptions import InvalidActionError
from blackjack.hand import (
    BLACKJACK,
    Hand,
    calculate_hand_score,
    format_hand,
    is_blackjack,
)
from blackjack.game.state import GameResult, GameState, Turn, is_valid_transition

logger = logging.getLogger(__name__)

# Dealer draws on 16 or less and stands on any 17, soft or hard.
DEALER_STANDS_ON = 17


def setup_game(rng: Random | None = None) -> GameState:
    """
    Deal a fresh round from a newly shuffled deck.

    The two cards on top of the deck go to the player, the next two to
    the dealer.

    Args:
        rng: Random number generator for reproducible games

    Returns:
        A new state with the player to act
    """
    card_deck = shuffle(new_card_deck(), rng)
    state = GameState(
        player_hand=card_deck[-2:],
        dealer_hand=card_deck[-4:-2],
        card_deck=card_deck[:-4],
        turn=Turn.PLAYER_TURN,
    )
    logger.debug("New round dealt: %s", state.to_dict())
    return state


def _require_turn(state: GameState, to_turn: Turn, action: str) -> None:
    if not is_valid_transition(state.turn, to_turn):
        raise InvalidActionError(f"Cannot {action} during {state.turn.value}")


def player_hits(state: GameState) -> GameState:
    """
    Draw one card into the player's hand.

    Raises:
        InvalidActionError: If it is not the player's turn
        EmptyDeckError: If the deck is empty
    """
    _require_turn(state, Turn.PLAYER_TURN, "hit")

    card, remaining = take_card(state.card_deck)
    new_state = replace(
        state,
        card_deck=remaining,
        player_hand=state.player_hand + (card,),
    )
    logger.debug("Player hits %s: %s", card, format_hand(new_state.player_hand))
    return new_state


def dealer_should_hit(hand: Hand) -> bool:
    """Determine if the dealer draws another card."""
    return calculate_hand_score(hand) < DEALER_STANDS_ON


def player_stands(state: GameState) -> GameState:
    """
    End the player's turn and play out the dealer's hand.

    The dealer draws until reaching 17 or more. If the deck runs out first
    the dealer keeps the hand as it is.

    Raises:
        InvalidActionError: If it is not the player's turn
    """
    _require_turn(state, Turn.DEALER_TURN, "stand")

    new_state = replace(state, turn=Turn.DEALER_TURN)

    while dealer_should_hit(new_state.dealer_hand):
        if not new_state.card_deck:
            logger.warning(
                "Deck exhausted with dealer on %d",
                calculate_hand_score(new_state.dealer_hand),
            )
            break
        card, remaining = take_card(new_state.card_deck)
        new_state = replace(
            new_state,
            card_deck=remaining,
            dealer_hand=new_state.dealer_hand + (card,),
        )
        logger.debug("Dealer hits %s: %s", card, format_hand(new_state.dealer_hand))

    logger.debug("Dealer finishes on %s", format_hand(new_state.dealer_hand))
    return new_state


def determine_game_result(state: GameState) -> GameResult:
    """
    Derive the outcome of a round.

    While the player is still acting the round has no result, unless the
    player has already busted.

    Returns:
        The result for the current state; never cached
    """
    player_score = calculate_hand_score(state.player_hand)
    dealer_score = calculate_hand_score(state.dealer_hand)

    if state.turn is Turn.PLAYER_TURN:
        if player_score > BLACKJACK:
            return GameResult.DEALER_WIN
        return GameResult.NO_RESULT

    # Player natural beats anything but a dealer natural
    if is_blackjack(state.player_hand) and not is_blackjack(state.dealer_hand):
        return GameResult.PLAYER_WIN

    if player_score > BLACKJACK:
        return GameResult.DEALER_WIN

    if dealer_score > BLACKJACK:
        return GameResult.PLAYER_WIN

    if player_score == dealer_score:
        return GameResult.DRAW

    if player_score > dealer_score:
        return GameResult.PLAYER_WIN

    return GameResult.DEALER_WIN
