"""Tests for the table event emitter."""

from blackjack.game.events import EventEmitter, EventType, GameEvent


class TestEventEmitter:
    """Tests for subscribing, emitting and history."""

    def test_subscribe_to_type(self):
        emitter = EventEmitter()
        received = []
        emitter.subscribe(received.append, EventType.PLAYER_HIT)

        emitter.emit_new(EventType.PLAYER_HIT, hand_value=15)
        emitter.emit_new(EventType.PLAYER_STAND, hand_value=15)

        assert len(received) == 1
        assert received[0].event_type is EventType.PLAYER_HIT
        assert received[0].data == {"hand_value": 15}

    def test_subscribe_to_all(self):
        emitter = EventEmitter()
        received = []
        emitter.subscribe(received.append)

        emitter.emit_new(EventType.ROUND_STARTED)
        emitter.emit_new(EventType.ROUND_ENDED, result="draw")

        assert [e.event_type for e in received] == [
            EventType.ROUND_STARTED,
            EventType.ROUND_ENDED,
        ]

    def test_typed_handlers_run_before_catch_all(self):
        emitter = EventEmitter()
        order = []
        emitter.subscribe(lambda e: order.append("all"))
        emitter.subscribe(lambda e: order.append("typed"), EventType.PUSH)

        emitter.emit_new(EventType.PUSH)

        assert order == ["typed", "all"]

    def test_unsubscribe(self):
        emitter = EventEmitter()
        received = []
        emitter.subscribe(received.append, EventType.PLAYER_HIT)
        emitter.unsubscribe(received.append, EventType.PLAYER_HIT)

        emitter.emit_new(EventType.PLAYER_HIT)

        assert received == []

    def test_unsubscribe_unknown_handler(self):
        emitter = EventEmitter()
        emitter.unsubscribe(print, EventType.PLAYER_HIT)

    def test_emit_new_returns_event(self):
        emitter = EventEmitter()
        event = emitter.emit_new(EventType.CARD_DEALT, card="A♠", hand="player")
        assert isinstance(event, GameEvent)
        assert emitter.history == [event]
        assert str(event) == "CARD_DEALT: {'card': 'A♠', 'hand': 'player'}"

    def test_history_limit(self):
        emitter = EventEmitter(history_limit=3)
        for value in range(5):
            emitter.emit_new(EventType.DEALER_HITS, hand_value=value)

        assert [e.data["hand_value"] for e in emitter.history] == [2, 3, 4]
