"""
conftest.py
-----------
Shared pytest configuration and fixtures for Fireball Dodge tests.

Contains:
- Headless SDL setup so pygame works without a display
- Common config, entity, and RNG fixtures
- Pytest markers
"""

import os
import random
import sys

# Must be set before pygame is imported anywhere
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pygame
import pytest
from unittest.mock import MagicMock

from src.core.debug.debug_logger import LoggerConfig
from src.core.runtime.game_config import GameConfig
from src.entities.character import Character, MoveIntent
from src.entities.projectile import ProjectileSpec


# Keep test output readable; tests that check logging re-enable it locally
LoggerConfig.ENABLE_LOGGING = False


# ===========================================================
# Pygame
# ===========================================================

@pytest.fixture(scope="module")
def pygame_init():
    pygame.init()
    yield
    pygame.quit()


@pytest.fixture
def mock_draw_manager():
    """Mock for DrawManager with the queueing API."""
    draw_manager = MagicMock()
    draw_manager.get_image.side_effect = lambda key: f"<{key}>"
    return draw_manager


# ===========================================================
# Game Fixtures
# ===========================================================

@pytest.fixture
def config():
    """Pure defaults, never touches game.json."""
    return GameConfig()


@pytest.fixture
def spec():
    return ProjectileSpec(width=50, height=50, speed=300.0)


@pytest.fixture
def map_size():
    return (2000, 1500)


@pytest.fixture
def character():
    return Character(x=100.0, y=100.0, width=90, height=90, speed=200.0)


@pytest.fixture
def intent():
    return MoveIntent()


@pytest.fixture
def rng():
    """Seeded random source for reproducible spawns."""
    return random.Random(1234)


# ===========================================================
# Pytest configuration
# ===========================================================

def pytest_configure(config):
    config.addinivalue_line("markers", "integration: marks tests as integration tests")
    config.addinivalue_line("markers", "unit: marks tests as unit tests")


def pytest_collection_modifyitems(config, items):
    for item in items:
        if "integration" not in item.nodeid:
            item.add_marker(pytest.mark.unit)
