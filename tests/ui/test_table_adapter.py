"""Tests for the adapter between the table and the pygame scene."""

from random import Random

from blackjack.cards import Card, Rank, Suit
from blackjack.game.state import GameResult, Turn
from blackjack.game.table import GameTable
from config import GameConfig
from table_ui.core.table_adapter import TableAdapter, UICardInfo


class TestUICardInfo:
    def test_from_core_card(self):
        info = UICardInfo.from_core_card(Card(Rank.TEN, Suit.DIAMONDS))
        assert info == UICardInfo(value="10", suit="diamonds", face_up=True)

    def test_face_down(self):
        info = UICardInfo.from_core_card(Card(Rank.ACE, Suit.SPADES), face_up=False)
        assert info.value == "A"
        assert info.suit == "spades"
        assert not info.face_up


class TestSnapshot:
    """Tests for what the scene is given to draw."""

    def test_hole_card_hidden_on_player_turn(self, adapter):
        snapshot = adapter.get_snapshot()
        assert snapshot.turn is Turn.PLAYER_TURN
        assert snapshot.dealer_hole_card_hidden
        assert not snapshot.dealer_hand[0].face_up
        assert all(card.face_up for card in snapshot.dealer_hand[1:])
        assert snapshot.dealer_score is None

    def test_player_cards_face_up(self, adapter):
        snapshot = adapter.get_snapshot()
        assert len(snapshot.player_hand) == 2
        assert all(card.face_up for card in snapshot.player_hand)
        assert snapshot.player_score == adapter.table.player_score

    def test_hole_card_revealed_after_stand(self, adapter):
        adapter.stand()
        snapshot = adapter.get_snapshot()
        assert not snapshot.dealer_hole_card_hidden
        assert all(card.face_up for card in snapshot.dealer_hand)
        assert snapshot.dealer_score == adapter.table.dealer_score

    def test_reveal_hole_card_setting(self):
        adapter = TableAdapter(GameConfig(seed=42, reveal_hole_card=True))
        snapshot = adapter.get_snapshot()
        assert not snapshot.dealer_hole_card_hidden
        assert snapshot.dealer_score is not None

    def test_status_text_during_play(self, adapter):
        assert adapter.get_snapshot().status_text == "Player Turn"

    def test_status_text_after_round(self, adapter):
        adapter.stand()
        snapshot = adapter.get_snapshot()
        assert snapshot.result is not GameResult.NO_RESULT
        assert snapshot.status_text == str(snapshot.result)

    def test_deck_text(self, adapter):
        assert adapter.get_snapshot().deck_text == "There are 48 cards left in deck"
        adapter.hit()
        assert adapter.get_snapshot().deck_text == "There are 47 cards left in deck"

    def test_buttons_follow_table(self, adapter):
        snapshot = adapter.get_snapshot()
        assert snapshot.can_hit and snapshot.can_stand
        adapter.stand()
        snapshot = adapter.get_snapshot()
        assert not snapshot.can_hit and not snapshot.can_stand

    def test_seed_makes_rounds_repeatable(self):
        first = TableAdapter(GameConfig(seed=7, reveal_hole_card=False))
        second = TableAdapter(GameConfig(seed=7, reveal_hole_card=False))
        assert first.table.state == second.table.state
        assert first.table.state == GameTable(rng=Random(7)).state


class TestActions:
    """Tests for forwarding actions and messages."""

    def test_hit_and_stand_forwarded(self, adapter):
        assert adapter.hit()
        assert len(adapter.table.state.player_hand) == 3
        assert adapter.stand()
        assert adapter.table.turn is Turn.DEALER_TURN

    def test_reset(self, adapter):
        adapter.stand()
        adapter.reset()
        assert adapter.table.turn is Turn.PLAYER_TURN
        assert adapter.get_snapshot().cards_remaining == 48

    def test_invalid_action_message(self, adapter):
        messages = []
        adapter.set_callbacks(on_message=messages.append)
        adapter.stand()
        messages.clear()

        assert not adapter.hit()
        assert messages == ["Cannot hit now"]

    def test_bust_message(self, adapter):
        messages = []
        adapter.set_callbacks(on_message=messages.append)
        while adapter.table.player_score <= 21:
            adapter.hit()
        assert messages[-1] == "Bust!"

    def test_no_callback_set(self, adapter):
        adapter.stand()
        assert not adapter.stand()
