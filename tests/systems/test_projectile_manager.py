"""
test_projectile_manager.py
--------------------------
Tests for fireball motion and expiry.

Covers:
- Constant-velocity movement
- Removal beyond one projectile size past each edge
- Move-then-filter ordering
- Zero/negative dt
- Clearing on reset
"""

import pytest

from src.entities.projectile import Projectile
from src.systems.projectile_manager import ProjectileManager, advance_projectiles

MAP = (2000, 1500)


# ===========================================================
# Movement
# ===========================================================

def test_projectiles_move_at_shared_speed(spec):
    p = Projectile(100.0, 200.0, 0.6, 0.8)
    survivors = advance_projectiles([p], 0.5, spec, MAP)

    assert survivors == [p]
    assert p.x == pytest.approx(100 + 0.6 * 300 * 0.5)
    assert p.y == pytest.approx(200 + 0.8 * 300 * 0.5)


@pytest.mark.parametrize("dt", [0.0, -1.0])
def test_non_positive_dt_leaves_positions(spec, dt):
    p = Projectile(10.0, 10.0, 1.0, 0.0)
    advance_projectiles([p], dt, spec, MAP)
    assert (p.x, p.y) == (10.0, 10.0)


# ===========================================================
# Expiry
# ===========================================================

@pytest.mark.parametrize("start, direction", [
    ((-45.0, 700.0), (-1.0, 0.0)),     # out the left
    ((2045.0, 700.0), (1.0, 0.0)),     # out the right
    ((900.0, -45.0), (0.0, -1.0)),     # out the top
    ((900.0, 1545.0), (0.0, 1.0)),     # out the bottom
])
def test_projectile_removed_after_crossing_margin(spec, start, direction):
    p = Projectile(start[0], start[1], *direction)
    survivors = advance_projectiles([p], 0.1, spec, MAP)   # moves 30 units
    assert survivors == []


def test_projectile_exactly_at_margin_survives(spec):
    p = Projectile(-50.0, 700.0, 0.0, 1.0)
    assert advance_projectiles([p], 0.0, spec, MAP) == [p]


def test_freshly_spawned_projectile_survives_first_frame(spec):
    """Spawned one size outside the edge and moving inward: must not be culled."""
    p = Projectile(-50.0, 700.0, 0.5, 0.866)
    assert advance_projectiles([p], 1 / 60, spec, MAP) == [p]


def test_moves_before_filtering(spec):
    """A fireball just inside the margin that moves out this frame is removed this frame."""
    p = Projectile(-49.0, 700.0, -1.0, 0.0)
    assert advance_projectiles([p], 0.01, spec, MAP) == []


# ===========================================================
# ProjectileManager
# ===========================================================

def test_manager_update_and_clear(spec):
    manager = ProjectileManager(spec, MAP)
    inside = Projectile(500.0, 500.0, 1.0, 0.0)
    leaving = Projectile(2049.0, 500.0, 1.0, 0.0)
    manager.add(inside)
    manager.add(leaving)

    manager.update(0.1)
    assert list(manager) == [inside]

    manager.clear()
    assert len(manager) == 0
