"""
Scene module exports.
"""

from src.scenes.game_scene import GameScene, FrameView

__all__ = [
    'GameScene',
    'FrameView',
]
