"""
camera.py
---------
Viewport offset derived from the character position.

The camera is the world-coordinate position of the screen's top-left
corner. It is recomputed every frame and never stored beyond two scalars.
"""

from typing import NamedTuple, Tuple


class Camera(NamedTuple):
    x: float = 0.0
    y: float = 0.0

    def world_to_screen(self, x: float, y: float) -> Tuple[float, float]:
        return x - self.x, y - self.y

    def screen_to_world(self, x: float, y: float) -> Tuple[float, float]:
        return x + self.x, y + self.y


def _clamp_axis(value: float, map_extent: float, view_extent: float) -> float:
    upper = map_extent - view_extent
    if upper <= 0:
        # Map narrower than the viewport on this axis: pin to the map origin
        return 0.0
    return max(0.0, min(value, upper))


def update_camera(character_pos: Tuple[float, float],
                  viewport_size: Tuple[float, float],
                  map_size: Tuple[float, float]) -> Camera:
    """
    Center the viewport on a character position, clamped to the map.

    Args:
        character_pos: Point to follow, in world coordinates.
        viewport_size: (width, height) of the visible area.
        map_size: (width, height) of the world map.

    Returns:
        Camera: Top-left world position of the viewport.
    """
    pos_x, pos_y = character_pos
    view_w, view_h = viewport_size
    map_w, map_h = map_size

    return Camera(
        _clamp_axis(pos_x - view_w / 2, map_w, view_w),
        _clamp_axis(pos_y - view_h / 2, map_h, view_h),
    )
