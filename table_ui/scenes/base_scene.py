"""Common interface for screens shown in the table window."""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Optional

import pygame

if TYPE_CHECKING:
    from table_ui.core.scene_manager import SceneManager


class BaseScene(ABC):
    """A screen driven by the main loop.

    The manager calls ``on_enter`` before the first frame and ``on_exit``
    when another scene takes over. Each frame then runs input, update and
    draw in that order.
    """

    def __init__(self):
        self.scene_manager: Optional["SceneManager"] = None
        self._is_active = False

    @property
    def is_active(self) -> bool:
        return self._is_active

    def on_enter(self) -> None:
        """Build fonts, widgets and state; pygame is initialized by now."""
        self._is_active = True

    def on_exit(self) -> None:
        self._is_active = False

    @abstractmethod
    def handle_event(self, event: pygame.event.Event) -> bool:
        """React to one input event; return True when it was used."""

    @abstractmethod
    def update(self, dt: float) -> None:
        """Advance time-based state by ``dt`` seconds."""

    @abstractmethod
    def draw(self, surface: pygame.Surface) -> None:
        """Render the whole scene onto ``surface``."""
