"""
draw_manager.py
---------------
Centralized rendering manager for batching and layered draw calls.

Responsibilities:
- Load and cache images (failure is fatal: AssetLoadError)
- Generate solid-color placeholder images when asked
- Maintain layered draw queue
- Render the map background at the camera offset, or a solid fill
"""

import os

import pygame

from src.core.debug.debug_logger import DebugLogger
from src.core.runtime.game_settings import Colors


class AssetLoadError(RuntimeError):
    """Raised when a required image cannot be loaded."""

    def __init__(self, key, path, reason):
        super().__init__(f"Could not load '{key}' from {path}: {reason}")
        self.key = key
        self.path = path


class DrawManager:
    """Handles all rendering operations with layered batching."""

    # ===========================================================
    # Initialization
    # ===========================================================

    def __init__(self):
        # Image cache
        self.images = {}

        # Layer queues: {layer: [(kind, payload), ...]}
        self.layers = {}

        # Map background and where its top-left lands on screen this frame
        self.background = None
        self.background_offset = (0, 0)

        DebugLogger.init_entry("DrawManager")

    # ===========================================================
    # Image Loading
    # ===========================================================

    def load_image(self, key, path, size=None):
        """
        Load, scale, and cache an image.

        Args:
            key: Cache identifier
            path: File path to image
            size: Optional (width, height) to scale to

        Raises:
            AssetLoadError: If the file is missing or unreadable.
        """
        if not os.path.isfile(path):
            DebugLogger.fail(f"Missing image '{key}' at {path}", category="loading")
            raise AssetLoadError(key, path, "file not found")

        try:
            img = pygame.image.load(path)
        except pygame.error as e:
            DebugLogger.fail(f"Unreadable image '{key}' at {path}: {e}", category="loading")
            raise AssetLoadError(key, path, e) from e

        if pygame.display.get_surface() is not None:
            img = img.convert_alpha()

        if size is not None and img.get_size() != tuple(size):
            img = pygame.transform.smoothscale(img, size)

        self.images[key] = img
        DebugLogger.init_sub(f"Loaded '{key}' ({img.get_width()}x{img.get_height()})")
        return img

    def make_placeholder(self, key, size, color):
        """Cache a solid-color surface in place of an image file."""
        img = pygame.Surface(size, pygame.SRCALPHA)
        img.fill(color)
        self.images[key] = img
        DebugLogger.init_sub(f"Placeholder '{key}' ({size[0]}x{size[1]})")
        return img

    def get_image(self, key):
        """Retrieve cached image by key (None if never loaded)."""
        img = self.images.get(key)
        if img is None:
            DebugLogger.warn_once(f"No cached image for key '{key}'", category="render")
        return img

    def set_background(self, surface):
        self.background = surface

    # ===========================================================
    # Queue Management
    # ===========================================================

    def clear(self):
        """Clear all draw queues for new frame."""
        for items in self.layers.values():
            items.clear()

    def _queue(self, layer, kind, payload):
        self.layers.setdefault(layer, []).append((kind, payload))

    def queue_draw(self, surface, pos, layer=0):
        """
        Queue a surface for drawing.

        Args:
            surface: pygame.Surface to draw
            pos: (x, y) screen position of the top-left corner
            layer: Render layer (lower = first)
        """
        if surface is None:
            DebugLogger.warn_once(f"Skipped draw of missing surface at layer {layer}", category="render")
            return
        self._queue(layer, "surface", (surface, (round(pos[0]), round(pos[1]))))

    def queue_rect(self, rect, color, layer=0):
        """Queue a filled rectangle; RGBA colors are alpha-blended."""
        self._queue(layer, "rect", (pygame.Rect(rect), color))

    def queue_text(self, surface, pos, layer=0, center=False):
        """Queue pre-rendered text, optionally centered on pos."""
        if center:
            rect = surface.get_rect(center=(round(pos[0]), round(pos[1])))
            pos = rect.topleft
        self._queue(layer, "surface", (surface, pos))

    def queue_count(self) -> int:
        return sum(len(items) for items in self.layers.values())

    # ===========================================================
    # Rendering
    # ===========================================================

    def render(self, target_surface):
        """Render background then all queued layers in ascending order."""
        self._render_background(target_surface)

        for layer in sorted(self.layers):
            for kind, payload in self.layers[layer]:
                if kind == "surface":
                    surface, pos = payload
                    target_surface.blit(surface, pos)
                else:
                    rect, color = payload
                    self._fill_rect(target_surface, rect, color)

    def _render_background(self, target_surface):
        """Draw the map image at the camera offset, or fall back to a solid fill."""
        target_surface.fill(Colors.BACKGROUND_FILL)
        if self.background is None:
            DebugLogger.warn_once("Background image not loaded - using solid fill", category="render")
            return
        target_surface.blit(self.background, self.background_offset)

    @staticmethod
    def _fill_rect(target_surface, rect, color):
        if len(color) == 4 and color[3] < 255:
            overlay = pygame.Surface(rect.size, pygame.SRCALPHA)
            overlay.fill(color)
            target_surface.blit(overlay, rect.topleft)
        else:
            target_surface.fill(color, rect)
