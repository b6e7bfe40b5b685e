"""
test_spawn_manager.py
---------------------
Tests for fireball creation and the SpawnManager.

Covers:
- Unit direction and inward bias for every edge
- Spawn position just outside the chosen edge
- Degenerate draws are redrawn
- Optional cap on active fireballs
"""

import math
import random
from unittest.mock import MagicMock

import pytest

from src.systems.projectile_manager import ProjectileManager
from src.systems.spawn_manager import SpawnEdge, SpawnManager, create_projectile

MAP = (2000, 1500)

# Unit vector pointing into the map for each edge
INWARD = {
    SpawnEdge.TOP: (0, 1),
    SpawnEdge.RIGHT: (-1, 0),
    SpawnEdge.BOTTOM: (0, -1),
    SpawnEdge.LEFT: (1, 0),
}


# ===========================================================
# Direction
# ===========================================================

def test_random_spawns_are_unit_and_inward(spec, rng):
    for _ in range(2000):
        p = create_projectile(MAP, spec, rng)
        assert math.hypot(p.dx, p.dy) == pytest.approx(1.0, abs=1e-9)

        # Recover the edge from the spawn position
        if p.y < 0:
            edge = SpawnEdge.TOP
        elif p.x > MAP[0]:
            edge = SpawnEdge.RIGHT
        elif p.y > MAP[1]:
            edge = SpawnEdge.BOTTOM
        else:
            edge = SpawnEdge.LEFT
        ix, iy = INWARD[edge]
        assert p.dx * ix + p.dy * iy > 0


@pytest.mark.parametrize("edge", list(SpawnEdge))
def test_inward_component_before_normalization(edge, spec, rng):
    """Raw inward draw is in [0.5, 1]; after normalizing it stays >= 0.5/sqrt(2)."""
    for _ in range(500):
        p = create_projectile(MAP, spec, rng, edge=edge)
        ix, iy = INWARD[edge]
        inward = p.dx * ix + p.dy * iy
        assert inward >= 0.5 / math.sqrt(0.5 ** 2 + 1.0 ** 2) - 1e-12
        assert math.hypot(p.dx, p.dy) == pytest.approx(1.0, abs=1e-9)


@pytest.mark.parametrize("edge, inward_axis", [
    (SpawnEdge.TOP, "dy"), (SpawnEdge.BOTTOM, "dy"),
    (SpawnEdge.LEFT, "dx"), (SpawnEdge.RIGHT, "dx"),
])
def test_raw_inward_magnitude_at_least_half(edge, inward_axis, spec):
    """With a zero parallel draw the inward component is exactly the raw draw, normalized to 1."""
    rng = MagicMock()
    rng.uniform.side_effect = [0.5, 0.0, 300.0]
    p = create_projectile(MAP, spec, rng, edge=edge)
    assert abs(getattr(p, inward_axis)) == pytest.approx(1.0)


# ===========================================================
# Position
# ===========================================================

@pytest.mark.parametrize("edge", list(SpawnEdge))
def test_spawn_position_outside_edge(edge, spec, rng):
    for _ in range(200):
        p = create_projectile(MAP, spec, rng, edge=edge)
        if edge is SpawnEdge.TOP:
            assert p.y == -spec.height and 0 <= p.x <= MAP[0]
        elif edge is SpawnEdge.BOTTOM:
            assert p.y == MAP[1] + spec.height and 0 <= p.x <= MAP[0]
        elif edge is SpawnEdge.LEFT:
            assert p.x == -spec.width and 0 <= p.y <= MAP[1]
        else:
            assert p.x == MAP[0] + spec.width and 0 <= p.y <= MAP[1]


def test_all_edges_are_used(spec):
    rng = random.Random(7)
    seen = set()
    for _ in range(400):
        p = create_projectile(MAP, spec, rng)
        if p.y < 0:
            seen.add("top")
        elif p.y > MAP[1]:
            seen.add("bottom")
        elif p.x < 0:
            seen.add("left")
        else:
            seen.add("right")
    assert seen == {"top", "bottom", "left", "right"}


def test_degenerate_draw_is_redrawn(spec):
    rng = MagicMock()
    # First (inward, parallel) pair is zero-length, second is valid, then position
    rng.uniform.side_effect = [0.0, 0.0, 0.6, 0.8, 100.0]
    p = create_projectile(MAP, spec, rng, edge=SpawnEdge.LEFT, inward_range=(0.0, 1.0))

    assert (p.dx, p.dy) == pytest.approx((0.6, 0.8))
    assert rng.uniform.call_count == 5


# ===========================================================
# SpawnManager
# ===========================================================

def test_spawn_appends_to_active_set(spec, rng):
    manager = ProjectileManager(spec, MAP)
    spawner = SpawnManager(manager, MAP, spec, rng=rng)

    for _ in range(25):
        spawner.spawn()

    assert len(manager) == 25
    assert spawner.total_spawned == 25


def test_cap_blocks_spawns_until_room_frees(spec, rng):
    manager = ProjectileManager(spec, MAP)
    spawner = SpawnManager(manager, MAP, spec, max_projectiles=3, rng=rng)

    results = [spawner.spawn() for _ in range(5)]
    assert len(manager) == 3
    assert results[3] is None and results[4] is None

    manager.active.pop()
    assert spawner.spawn() is not None
    assert len(manager) == 3


def test_zero_cap_disables_spawning(spec, rng):
    manager = ProjectileManager(spec, MAP)
    spawner = SpawnManager(manager, MAP, spec, max_projectiles=0, rng=rng)
    assert spawner.spawn() is None
    assert len(manager) == 0
