"""
test_collision_manager.py
-------------------------
Tests for character/fireball AABB collision.
"""

from unittest.mock import MagicMock

import pytest

from src.core.runtime.game_state import GameState, GamePhase
from src.entities.projectile import Projectile
from src.systems.collision_manager import (
    CollisionManager, boxes_overlap, check_collision, find_collision,
)
from src.systems.projectile_manager import ProjectileManager

MAP = (2000, 1500)


# ===========================================================
# Overlap Test
# ===========================================================

def test_overlapping_projectile_is_detected(character, spec):
    assert check_collision(character, [Projectile(150, 150, 1, 0)], spec)


def test_distant_projectile_is_ignored(character, spec):
    assert not check_collision(character, [Projectile(500, 500, 1, 0)], spec)


@pytest.mark.parametrize("x, y", [
    (190, 100),   # touching right edge
    (50, 100),    # touching left edge (50 + 50 == 100)
    (100, 190),   # touching bottom edge
    (100, 50),    # touching top edge
])
def test_edge_contact_is_not_a_collision(character, spec, x, y):
    assert not check_collision(character, [Projectile(x, y, 1, 0)], spec)


def test_boxes_overlap_by_a_sliver():
    assert boxes_overlap((0, 0, 10, 10), (9.999, 9.999, 20, 20))


def test_empty_set_never_collides(character, spec):
    assert check_collision(character, [], spec) is False


def test_short_circuits_on_first_hit(character, spec):
    first = Projectile(120, 120, 1, 0)
    second = MagicMock()
    assert find_collision(character, [first, second], spec) is first
    second.bounds.assert_not_called()


# ===========================================================
# CollisionManager
# ===========================================================

def _manager(character, spec, *projectiles):
    projectile_manager = ProjectileManager(spec, MAP)
    for p in projectiles:
        projectile_manager.add(p)
    state = GameState()
    state.start(0.0)
    return CollisionManager(character, projectile_manager, state), state


def test_hit_switches_to_game_over(character, spec):
    manager, state = _manager(character, spec, Projectile(150, 150, 1, 0))
    assert manager.detect(now=3.2) is True
    assert state.phase is GamePhase.GAME_OVER
    assert state.score == 3


def test_miss_keeps_playing(character, spec):
    manager, state = _manager(character, spec, Projectile(500, 500, 1, 0))
    assert manager.detect() is False
    assert state.phase is GamePhase.PLAYING


def test_repeated_hits_transition_once(character, spec):
    events = MagicMock()
    manager, state = _manager(character, spec, Projectile(150, 150, 1, 0))
    state.events = events

    manager.detect()
    manager.detect()
    assert events.dispatch.call_count == 1
