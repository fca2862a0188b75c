"""Round state, transitions and the table that holds them."""

from blackjack.game.events import EventEmitter, EventType, GameEvent
from blackjack.game.state import GameResult, GameState, Turn
from blackjack.game.engine import (
    determine_game_result,
    player_hits,
    player_stands,
    setup_game,
)
from blackjack.game.table import GameTable

__all__ = [
    "EventEmitter",
    "EventType",
    "GameEvent",
    "GameResult",
    "GameState",
    "Turn",
    "determine_game_result",
    "player_hits",
    "player_stands",
    "setup_game",
    "GameTable",
]
