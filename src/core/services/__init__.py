"""
Core services exports.

Provides the event system, input translation, display, and configuration loading.
"""

from src.core.services.config_manager import load_config
from src.core.services.event_manager import (
    EventManager,
    BaseEvent,
    GameStartedEvent,
    GameOverEvent,
)
from src.core.services.input_manager import (
    InputManager,
    Command,
    MoveTo,
    Stop,
    Restart,
    Quit,
    Resize,
)
from src.core.services.display_manager import DisplayManager

__all__ = [
    # Config
    'load_config',
    # Events
    'EventManager',
    'BaseEvent',
    'GameStartedEvent',
    'GameOverEvent',
    # Input
    'InputManager',
    'Command',
    'MoveTo',
    'Stop',
    'Restart',
    'Quit',
    'Resize',
    # Display
    'DisplayManager',
]
