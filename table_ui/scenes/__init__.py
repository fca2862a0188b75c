"""Scene classes for the blackjack table."""

from table_ui.scenes.base_scene import BaseScene
from table_ui.scenes.game_scene import GameScene

__all__ = ["BaseScene", "GameScene"]
