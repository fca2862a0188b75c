"""Blackjack table holding the current round, driven by a turn state machine."""

import logging
from random import Random
from typing import Callable

from transitions import Machine

from blackjack.cards import Card
from blackjack.hand import calculate_hand_score, is_blackjack, is_busted
from blackjack.game.engine import (
    determine_game_result,
    player_hits,
    player_stands,
    setup_game,
)
from blackjack.game.events import EventEmitter, EventType, GameEvent
from blackjack.game.state import GameResult, GameState, Turn

logger = logging.getLogger(__name__)


class GameTable:
    """
    Owner of the single current GameState.

    The round itself is advanced by the pure functions in
    ``blackjack.game.engine``; the table swaps in each new state, keeps the
    turn machine in step with it, and reports what changed through events.
    Actions that are not allowed return False and emit INVALID_ACTION.
    """

    # State machine states
    STATES = [turn.value for turn in Turn]

    # State machine transitions
    TRANSITIONS = [
        {"trigger": "player_action", "source": "player_turn", "dest": "player_turn"},
        {"trigger": "player_done", "source": "player_turn", "dest": "dealer_turn"},
        {"trigger": "deal_new_round", "source": "*", "dest": "player_turn"},
    ]

    def __init__(self, rng: Random | None = None) -> None:
        """
        Initialize a table with a round already dealt.

        Args:
            rng: Random number generator for reproducible games
        """
        self._rng = rng
        self.events = EventEmitter()

        # Guards which actions may follow each other; the turn itself is
        # read from the state.
        self.machine = Machine(
            model=self,
            states=self.STATES,
            transitions=self.TRANSITIONS,
            initial=Turn.PLAYER_TURN.value,
            auto_transitions=False,
            model_attribute="_machine_state",
        )

        self.state: GameState
        self.reset()

    @property
    def turn(self) -> Turn:
        return self.state.turn

    @property
    def result(self) -> GameResult:
        """Outcome of the current round, recomputed on every access."""
        return determine_game_result(self.state)

    @property
    def player_score(self) -> int:
        return calculate_hand_score(self.state.player_hand)

    @property
    def dealer_score(self) -> int:
        return calculate_hand_score(self.state.dealer_hand)

    @property
    def can_hit(self) -> bool:
        """Check if hitting is allowed."""
        if self.state.is_round_over:
            return False
        return not is_busted(self.state.player_hand) and bool(self.state.card_deck)

    @property
    def can_stand(self) -> bool:
        """Check if standing is allowed."""
        return not self.state.is_round_over

    def subscribe(
        self,
        handler: Callable[[GameEvent], None],
        event_type: EventType | None = None,
    ) -> None:
        """Subscribe to table events."""
        self.events.subscribe(handler, event_type)

    def reset(self) -> None:
        """Throw away the current round and deal a new one."""
        self.state = setup_game(self._rng)
        self.deal_new_round()  # Trigger state transition

        self.events.emit_new(
            EventType.ROUND_STARTED,
            cards_remaining=self.state.cards_remaining,
        )
        for card in self.state.player_hand:
            self._emit_card_dealt("player", card)
        # First dealer card stays face down until the dealer plays
        hole_card, *up_cards = self.state.dealer_hand
        self._emit_card_dealt("dealer", hole_card, face_up=False)
        for card in up_cards:
            self._emit_card_dealt("dealer", card)

        logger.info("Round started, %d cards in deck", self.state.cards_remaining)

    def hit(self) -> bool:
        """Player hits (takes another card)."""
        if not self.can_hit:
            self._reject("hit")
            return False

        self.state = player_hits(self.state)
        self._emit_card_dealt("player", self.state.player_hand[-1])
        self.events.emit_new(EventType.PLAYER_HIT, hand_value=self.player_score)

        if is_busted(self.state.player_hand):
            self.events.emit_new(EventType.PLAYER_BUSTS, hand_value=self.player_score)

        self.player_action()  # Stay in player turn
        return True

    def stand(self) -> bool:
        """Player stands and the dealer plays out the round."""
        if not self.can_stand:
            self._reject("stand")
            return False

        before = self.state
        self.state = player_stands(before)
        self.player_done()

        self.events.emit_new(EventType.PLAYER_STAND, hand_value=self.player_score)
        self._report_dealer_play(before)
        self._report_result()
        return True

    def _report_dealer_play(self, before: GameState) -> None:
        dealer_hand = self.state.dealer_hand
        if dealer_hand:
            self.events.emit_new(
                EventType.DEALER_REVEALS,
                card=str(dealer_hand[0]),
                hand_value=calculate_hand_score(before.dealer_hand),
            )

        drawn = dealer_hand[len(before.dealer_hand):]
        for i, card in enumerate(drawn, start=len(before.dealer_hand) + 1):
            self._emit_card_dealt("dealer", card)
            self.events.emit_new(
                EventType.DEALER_HITS,
                hand_value=calculate_hand_score(dealer_hand[:i]),
            )

        if is_busted(dealer_hand):
            self.events.emit_new(EventType.DEALER_BUSTS, hand_value=self.dealer_score)
        else:
            self.events.emit_new(EventType.DEALER_STANDS, hand_value=self.dealer_score)

    def _report_result(self) -> None:
        result = self.result
        scores = {"player_score": self.player_score, "dealer_score": self.dealer_score}

        if result is GameResult.PLAYER_WIN:
            if is_blackjack(self.state.player_hand):
                self.events.emit_new(EventType.PLAYER_BLACKJACK)
            self.events.emit_new(EventType.PLAYER_WINS, **scores)
        elif result is GameResult.DEALER_WIN:
            self.events.emit_new(EventType.PLAYER_LOSES, **scores)
        elif result is GameResult.DRAW:
            self.events.emit_new(EventType.PUSH, **scores)

        self.events.emit_new(EventType.ROUND_ENDED, result=result.value, **scores)
        logger.info(
            "Round ended: %s (player %d, dealer %d)",
            result.value,
            self.player_score,
            self.dealer_score,
        )

    def _emit_card_dealt(self, hand: str, card: Card, face_up: bool = True) -> None:
        self.events.emit_new(
            EventType.CARD_DEALT,
            card=str(card) if face_up else "??",
            hand=hand,
        )

    def _reject(self, action: str) -> None:
        logger.debug("Rejected %s during %s", action, self.turn.value)
        self.events.emit_new(
            EventType.INVALID_ACTION,
            message=f"Cannot {action} now",
            action=action,
            turn=self.turn.value,
        )
