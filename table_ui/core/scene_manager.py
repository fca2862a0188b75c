"""Registry of named scenes with a single active one."""

import logging
from typing import Dict, Optional, TYPE_CHECKING

import pygame

if TYPE_CHECKING:
    from table_ui.scenes.base_scene import BaseScene

logger = logging.getLogger(__name__)


class SceneManager:
    """Owns the display surface and forwards the main loop to one scene."""

    def __init__(self, screen: pygame.Surface):
        self.screen = screen
        self._scenes: Dict[str, "BaseScene"] = {}
        self._current: Optional["BaseScene"] = None

    @property
    def current_scene(self) -> Optional["BaseScene"]:
        return self._current

    def register(self, name: str, scene: "BaseScene") -> None:
        """Make ``scene`` reachable under ``name`` and hand it this manager."""
        self._scenes[name] = scene
        scene.scene_manager = self

    def change_to(self, scene_name: str) -> None:
        """Exit the running scene, if any, and enter ``scene_name``.

        Raises:
            ValueError: If no scene was registered under that name
        """
        scene = self._scenes.get(scene_name)
        if scene is None:
            raise ValueError(f"Scene '{scene_name}' not registered")

        if self._current is not None:
            self._current.on_exit()
        logger.debug("Entering scene %s", scene_name)
        self._current = scene
        scene.on_enter()

    def handle_event(self, event: pygame.event.Event) -> bool:
        return self._current is not None and self._current.handle_event(event)

    def update(self, dt: float) -> None:
        if self._current is not None:
            self._current.update(dt)

    def draw(self) -> None:
        """Render one frame and present it."""
        if self._current is None:
            self.screen.fill((0, 0, 0))
        else:
            self._current.draw(self.screen)
        pygame.display.flip()
