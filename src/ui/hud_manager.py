"""
hud_manager.py
--------------
Score readout and game-over overlay.

Responsibilities
----------------
- Draw "Score: N" in the top-left corner while playing.
- Draw the dimmed game-over screen with the final score and restart prompt.
"""

import pygame

from src.core.debug.debug_logger import DebugLogger
from src.core.runtime.game_settings import Colors, Fonts, Layers


class HUDManager:
    """Renders text overlays through the DrawManager."""

    def __init__(self):
        self._fonts = {}
        DebugLogger.init_sub("HUDManager Initialized")

    def _font(self, size):
        font = self._fonts.get(size)
        if font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            font = pygame.font.Font(Fonts.NAME, size)
            self._fonts[size] = font
        return font

    def _text(self, message, size):
        return self._font(size).render(message, True, Colors.TEXT)

    # ===========================================================
    # Drawing
    # ===========================================================

    def draw_score(self, draw_manager, score):
        draw_manager.queue_text(self._text(f"Score: {score}", Fonts.SCORE_SIZE),
                                Fonts.SCORE_POS, layer=Layers.UI)

    def draw_game_over(self, draw_manager, score, viewport_size):
        """Dim the whole viewport and show the final score with a restart hint."""
        width, height = viewport_size
        cx, cy = width / 2, height / 2

        draw_manager.queue_rect((0, 0, width, height), Colors.OVERLAY, layer=Layers.OVERLAY)
        draw_manager.queue_text(self._text("GAME OVER", Fonts.TITLE_SIZE),
                                (cx, cy - 50), layer=Layers.OVERLAY + 1, center=True)
        draw_manager.queue_text(self._text(f"Final Score: {score}", Fonts.FINAL_SCORE_SIZE),
                                (cx, cy + 50), layer=Layers.OVERLAY + 1, center=True)
        draw_manager.queue_text(self._text("Press SPACE to restart", Fonts.PROMPT_SIZE),
                                (cx, cy + 100), layer=Layers.OVERLAY + 1, center=True)
