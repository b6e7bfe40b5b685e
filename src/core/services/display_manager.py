"""
display_manager.py
------------------
Window management for a resizable viewport.

Responsibilities:
- Window creation
- Tracking the visible viewport size through resizes
- Window-to-viewport mouse coordinate conversion
"""

import pygame

from src.core.debug.debug_logger import DebugLogger


class DisplayManager:
    """
    Owns the pygame window. The viewport is the window's full client area,
    so a resize changes how much of the map is visible rather than scaling it.
    """

    def __init__(self, width: int, height: int, caption: str = "", resizable: bool = True):
        """
        Args:
            width: Initial window width in pixels
            height: Initial window height in pixels
            caption: Window title
            resizable: Allow the user to resize the window
        """
        self.resizable = resizable
        self.flags = pygame.RESIZABLE if resizable else 0
        self.window = pygame.display.set_mode((width, height), self.flags)
        self.viewport_width, self.viewport_height = self.window.get_size()
        self.set_caption(caption)

        DebugLogger.init_entry("DisplayManager")
        DebugLogger.init_sub(f"Viewport {self.viewport_width}x{self.viewport_height}"
                             f"{' (resizable)' if resizable else ''}")

    @property
    def viewport_size(self):
        return self.viewport_width, self.viewport_height

    def set_caption(self, caption: str):
        pygame.display.set_caption(caption)

    def get_surface(self) -> pygame.Surface:
        return self.window

    # ===========================================================
    # Resize
    # ===========================================================

    def resize(self, width: int, height: int):
        """Recreate the window surface at the new size."""
        width, height = max(1, int(width)), max(1, int(height))
        self.window = pygame.display.set_mode((width, height), self.flags)
        self.viewport_width, self.viewport_height = self.window.get_size()
        DebugLogger.state(f"Viewport resized to {self.viewport_width}x{self.viewport_height}",
                          category="display")

    # ===========================================================
    # Coordinate Conversion
    # ===========================================================

    def window_to_viewport(self, pos):
        """
        Convert window pixel coordinates to viewport coordinates.

        Identity unless the OS reports a window size different from the
        surface size (high-DPI scaling).
        """
        window_w, window_h = pygame.display.get_window_size()
        scale_x = self.viewport_width / window_w if window_w else 1.0
        scale_y = self.viewport_height / window_h if window_h else 1.0
        return pos[0] * scale_x, pos[1] * scale_y

    def present(self):
        pygame.display.flip()
