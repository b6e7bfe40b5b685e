"""
test_camera.py
--------------
Tests for viewport offset computation.

Covers:
- Centering on the followed point
- Clamping at every map edge
- Maps smaller than the viewport
- Screen/world conversion
"""

import pytest

from src.systems.camera import Camera, update_camera

MAP = (2000, 1500)
VIEW = (800, 600)


# ===========================================================
# Centering & Clamping
# ===========================================================

def test_camera_centers_on_point_in_map_interior():
    cam = update_camera((1000, 750), VIEW, MAP)
    assert cam == Camera(600, 450)


@pytest.mark.parametrize("pos, expected", [
    ((0, 0), (0, 0)),                    # top-left corner
    ((2000, 1500), (1200, 900)),         # bottom-right corner
    ((100, 1400), (0, 900)),             # bottom-left region
    ((1950, 50), (1200, 0)),             # top-right region
])
def test_camera_clamps_to_map_edges(pos, expected):
    assert tuple(update_camera(pos, VIEW, MAP)) == expected


@pytest.mark.parametrize("x", range(-500, 2600, 137))
@pytest.mark.parametrize("y", range(-500, 2100, 211))
def test_viewport_always_contained_in_map(x, y):
    cam = update_camera((x, y), VIEW, MAP)
    assert 0 <= cam.x and cam.x + VIEW[0] <= MAP[0]
    assert 0 <= cam.y and cam.y + VIEW[1] <= MAP[1]


# ===========================================================
# Degenerate Maps
# ===========================================================

def test_map_narrower_than_viewport_pins_axis_to_zero():
    cam = update_camera((300, 700), (1000, 600), (500, 1500))
    assert cam.x == 0
    assert cam.y == 400


def test_map_smaller_than_viewport_on_both_axes():
    cam = update_camera((250, 250), (1920, 1080), (500, 500))
    assert cam == Camera(0, 0)


def test_map_exactly_viewport_size():
    cam = update_camera((1000, 1000), (2000, 1500), MAP)
    assert cam == Camera(0, 0)


# ===========================================================
# Coordinate Conversion
# ===========================================================

def test_world_screen_round_trip():
    cam = Camera(300, 200)
    assert cam.world_to_screen(450, 260) == (150, 60)
    assert cam.screen_to_world(150, 60) == (450, 260)
