"""Pytest fixtures for pygame UI tests."""

import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame
import pytest

from config import GameConfig
from table_ui.core.table_adapter import TableAdapter


@pytest.fixture(scope="session", autouse=True)
def pygame_headless():
    """Initialize pygame once against the dummy video driver."""
    pygame.init()
    yield
    pygame.quit()


@pytest.fixture
def surface():
    """Off-screen surface the size of the table window."""
    from table_ui.config import DIMENSIONS

    return pygame.Surface((DIMENSIONS.SCREEN_WIDTH, DIMENSIONS.SCREEN_HEIGHT))


@pytest.fixture
def adapter():
    """Adapter over a seeded table with the hole card hidden."""
    return TableAdapter(GameConfig(seed=42, reveal_hole_card=False))
