"""Entry point for the pygame blackjack table."""

import logging
from typing import Optional

import pygame

from config import config
from table_ui.config import DIMENSIONS
from table_ui.core.scene_manager import SceneManager
from table_ui.core.table_adapter import TableAdapter
from table_ui.scenes.game_scene import GameScene

logger = logging.getLogger(__name__)


class Application:
    """Window, clock and the frame loop around the table scene."""

    def __init__(self, adapter: Optional[TableAdapter] = None):
        pygame.init()
        pygame.display.set_caption(config.window_title)

        self.screen = pygame.display.set_mode(
            (DIMENSIONS.SCREEN_WIDTH, DIMENSIONS.SCREEN_HEIGHT)
        )
        self.clock = pygame.time.Clock()
        self.running = True

        self.scene_manager = SceneManager(self.screen)
        self.scene_manager.register("game", GameScene(adapter))
        self.scene_manager.change_to("game")

    def process_events(self, events) -> None:
        for event in events:
            if event.type == pygame.QUIT or (
                event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE
            ):
                self.running = False
            else:
                self.scene_manager.handle_event(event)

    def step(self, dt: float) -> None:
        """Run one frame: input, update, draw."""
        self.process_events(pygame.event.get())
        self.scene_manager.update(dt)
        self.scene_manager.draw()

    def run(self) -> None:
        while self.running:
            self.step(self.clock.tick(DIMENSIONS.TARGET_FPS) / 1000.0)
        logger.info("Window closed")
        pygame.quit()


def configure_logging() -> None:
    """Set up root logging from the application config."""
    config.logging.apply()
    if config.debug:
        logging.getLogger().setLevel(logging.DEBUG)


def main() -> None:
    configure_logging()
    logger.info("Starting blackjack table (seed=%s)", config.game.seed)
    Application().run()


if __name__ == "__main__":
    main()
