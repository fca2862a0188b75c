"""Clickable table buttons."""

from enum import Enum, auto
from typing import Callable, Optional, Tuple

import pygame

from table_ui.config import COLORS, DIMENSIONS


class ButtonState(Enum):
    """Visual state of a button."""

    NORMAL = auto()
    HOVERED = auto()
    PRESSED = auto()
    DISABLED = auto()


BACKGROUNDS = {
    ButtonState.NORMAL: COLORS.BUTTON_DEFAULT,
    ButtonState.HOVERED: COLORS.BUTTON_HOVER,
    ButtonState.PRESSED: COLORS.BUTTON_PRESSED,
    ButtonState.DISABLED: COLORS.BUTTON_DISABLED,
}


class Button:
    """A rectangle of text that calls ``on_click`` when clicked.

    A click is a left press followed by a left release, both inside the
    button. Disabled buttons ignore all input.
    """

    def __init__(
        self,
        x: float,
        y: float,
        width: float = DIMENSIONS.BUTTON_WIDTH,
        height: float = DIMENSIONS.BUTTON_HEIGHT,
        text: str = "Button",
        font_size: int = 28,
        on_click: Optional[Callable[[], None]] = None,
        text_color: Tuple[int, int, int] = COLORS.TEXT_WHITE,
        enabled: bool = True,
    ):
        """Create a button centered on (x, y)."""
        self.text = text
        self.font_size = font_size
        self.on_click = on_click
        self.text_color = text_color

        self.rect = pygame.Rect(0, 0, int(width), int(height))
        self.rect.center = (int(x), int(y))

        self.enabled = enabled
        self.state = ButtonState.NORMAL if enabled else ButtonState.DISABLED
        self._armed = False
        self._font: Optional[pygame.font.Font] = None

    @property
    def font(self) -> pygame.font.Font:
        if self._font is None:
            self._font = pygame.font.Font(None, self.font_size)
        return self._font

    def set_enabled(self, enabled: bool) -> None:
        if enabled == self.enabled:
            return
        self.enabled = enabled
        self._armed = False
        self.state = ButtonState.NORMAL if enabled else ButtonState.DISABLED

    def handle_event(self, event: pygame.event.Event) -> bool:
        """Track hover and press; return True only for a completed click."""
        if not self.enabled:
            return False

        if event.type == pygame.MOUSEMOTION and not self._armed:
            inside = self.rect.collidepoint(event.pos)
            self.state = ButtonState.HOVERED if inside else ButtonState.NORMAL
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self.rect.collidepoint(event.pos):
                self._armed = True
                self.state = ButtonState.PRESSED
        elif event.type == pygame.MOUSEBUTTONUP and event.button == 1 and self._armed:
            self._armed = False
            if not self.rect.collidepoint(event.pos):
                self.state = ButtonState.NORMAL
                return False
            self.state = ButtonState.HOVERED
            if self.on_click:
                self.on_click()
            return True

        return False

    def draw(self, surface: pygame.Surface) -> None:
        pygame.draw.rect(
            surface,
            BACKGROUNDS[self.state],
            self.rect,
            border_radius=DIMENSIONS.BUTTON_CORNER_RADIUS,
        )
        color = self.text_color if self.enabled else COLORS.TEXT_MUTED
        label = self.font.render(self.text, True, color)
        surface.blit(label, label.get_rect(center=self.rect.center))


class ActionButton(Button):
    """Button for one table action, with its keyboard shortcut shown below."""

    def __init__(
        self,
        x: float,
        y: float,
        text: str,
        action: str,
        on_click: Optional[Callable[[], None]] = None,
        hotkey: Optional[str] = None,
        **kwargs,
    ):
        super().__init__(x=x, y=y, text=text, on_click=on_click, **kwargs)
        self.action = action
        self.hotkey = hotkey

    def draw(self, surface: pygame.Surface) -> None:
        super().draw(surface)

        if self.hotkey and self.enabled:
            hint = pygame.font.Font(None, 18).render(
                f"[{self.hotkey}]", True, COLORS.TEXT_MUTED
            )
            surface.blit(
                hint, hint.get_rect(centerx=self.rect.centerx, top=self.rect.bottom + 4)
            )
