"""UI components for the blackjack table."""

from table_ui.components.button import ActionButton, Button, ButtonState
from table_ui.components.card import CardSprite, layout_hand

__all__ = [
    "ActionButton",
    "Button",
    "ButtonState",
    "CardSprite",
    "layout_hand",
]
