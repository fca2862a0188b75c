"""Notifications the table sends while a round is played."""

from collections import defaultdict, deque
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum, auto
from typing import Any, Callable


class EventType(Enum):
    """What happened at the table."""

    ROUND_STARTED = auto()
    ROUND_ENDED = auto()
    CARD_DEALT = auto()

    PLAYER_HIT = auto()
    PLAYER_STAND = auto()
    PLAYER_BLACKJACK = auto()
    PLAYER_BUSTS = auto()

    DEALER_REVEALS = auto()
    DEALER_HITS = auto()
    DEALER_STANDS = auto()
    DEALER_BUSTS = auto()

    PLAYER_WINS = auto()
    PLAYER_LOSES = auto()
    PUSH = auto()

    # Action refused; the state is unchanged
    INVALID_ACTION = auto()


@dataclass(frozen=True)
class GameEvent:
    """One table notification with its payload."""

    event_type: EventType
    data: dict[str, Any] = field(default_factory=dict)
    timestamp: datetime = field(default_factory=datetime.now)

    def __str__(self) -> str:
        return f"{self.event_type.name}: {self.data}"


EventHandler = Callable[[GameEvent], None]


class EventEmitter:
    """
    Delivers events to subscribers and remembers recent ones.

    Handlers registered for a specific type run before handlers registered
    for every type. Both run synchronously inside ``emit``.
    """

    def __init__(self, history_limit: int = 500) -> None:
        self._handlers: defaultdict[EventType | None, list[EventHandler]] = defaultdict(list)
        self._recent: deque[GameEvent] = deque(maxlen=history_limit)

    def subscribe(
        self,
        handler: EventHandler,
        event_type: EventType | None = None,
    ) -> None:
        """
        Register a handler.

        Args:
            handler: Called with each matching event
            event_type: Only deliver this type; None delivers everything
        """
        self._handlers[event_type].append(handler)

    def unsubscribe(
        self,
        handler: EventHandler,
        event_type: EventType | None = None,
    ) -> None:
        handlers = self._handlers.get(event_type)
        if handlers and handler in handlers:
            handlers.remove(handler)

    def emit(self, event: GameEvent) -> None:
        self._recent.append(event)
        targets = self._handlers.get(event.event_type, []) + self._handlers.get(None, [])
        for handler in targets:
            handler(event)

    def emit_new(self, event_type: EventType, **data: Any) -> GameEvent:
        """Build an event from keyword data, emit it and return it."""
        event = GameEvent(event_type=event_type, data=data)
        self.emit(event)
        return event

    @property
    def history(self) -> list[GameEvent]:
        """Recent events, oldest first; at most ``history_limit`` of them."""
        return list(self._recent)
