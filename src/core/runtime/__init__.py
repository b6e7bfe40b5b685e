"""
Runtime configuration and session exports.

Provides game-wide constants, the loaded GameConfig, frame timing,
and the session state machine.
"""

from src.core.runtime.game_settings import (
    Display,
    World,
    CharacterDefaults,
    ProjectileDefaults,
    Spawning,
    Physics,
    Assets,
    Layers,
)
from src.core.runtime.game_config import GameConfig
from src.core.runtime.frame_clock import FrameClock
from src.core.runtime.game_state import GameState, GamePhase

__all__ = [
    # Constants
    'Display',
    'World',
    'CharacterDefaults',
    'ProjectileDefaults',
    'Spawning',
    'Physics',
    'Assets',
    'Layers',
    # Runtime
    'GameConfig',
    'FrameClock',
    'GameState',
    'GamePhase',
]
