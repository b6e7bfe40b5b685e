"""
spawn_manager.py
----------------
Creates fireballs just outside a random map edge, aimed inward.

Responsibilities
----------------
- Pick one of the four map edges uniformly at random.
- Place the fireball one projectile size beyond that edge.
- Build an inward-biased unit direction (never parallel to the edge).
- Append new fireballs to the active set, honoring an optional cap.
"""

import math
import random
from enum import Enum
from typing import Optional, Tuple

from src.core.debug.debug_logger import DebugLogger
from src.core.runtime.game_settings import Spawning
from src.entities.projectile import Projectile, ProjectileSpec


class SpawnEdge(Enum):
    """Map edge a fireball enters from."""
    TOP = "top"
    RIGHT = "right"
    BOTTOM = "bottom"
    LEFT = "left"


# ===========================================================
# Direction Construction
# ===========================================================

def _draw_components(rng, inward_range, parallel_range) -> Tuple[float, float]:
    """Return (inward, parallel) components, redrawing degenerate vectors."""
    while True:
        inward = rng.uniform(*inward_range)
        parallel = rng.uniform(*parallel_range)
        if math.hypot(inward, parallel) >= Spawning.MIN_DIRECTION_MAGNITUDE:
            return inward, parallel


def _normalized(dx: float, dy: float) -> Tuple[float, float]:
    length = math.hypot(dx, dy)
    return dx / length, dy / length


# ===========================================================
# Per-Edge Constructors
# ===========================================================

def _from_top(map_w, map_h, spec, rng, inward, parallel):
    return Projectile(rng.uniform(0, map_w), -spec.height, *_normalized(parallel, inward))


def _from_right(map_w, map_h, spec, rng, inward, parallel):
    return Projectile(map_w + spec.width, rng.uniform(0, map_h), *_normalized(-inward, parallel))


def _from_bottom(map_w, map_h, spec, rng, inward, parallel):
    return Projectile(rng.uniform(0, map_w), map_h + spec.height, *_normalized(parallel, -inward))


def _from_left(map_w, map_h, spec, rng, inward, parallel):
    return Projectile(-spec.width, rng.uniform(0, map_h), *_normalized(inward, parallel))


EDGE_CONSTRUCTORS = {
    SpawnEdge.TOP: _from_top,
    SpawnEdge.RIGHT: _from_right,
    SpawnEdge.BOTTOM: _from_bottom,
    SpawnEdge.LEFT: _from_left,
}


def create_projectile(map_size: Tuple[float, float], spec: ProjectileSpec,
                      rng=random, edge: Optional[SpawnEdge] = None,
                      inward_range=Spawning.INWARD_RANGE,
                      parallel_range=Spawning.PARALLEL_RANGE) -> Projectile:
    """
    Create one fireball entering the map from a random edge.

    Args:
        map_size: (width, height) of the world map.
        spec: Shared fireball size and speed.
        rng: Random source (module `random` or a random.Random instance).
        edge: Force a specific edge instead of choosing one.
        inward_range: Magnitude range for the component pointing into the map.
        parallel_range: Range for the component along the edge.

    Returns:
        Projectile: New fireball with a unit direction vector.
    """
    map_w, map_h = map_size
    if edge is None:
        edge = rng.choice(list(SpawnEdge))

    inward, parallel = _draw_components(rng, inward_range, parallel_range)
    return EDGE_CONSTRUCTORS[edge](map_w, map_h, spec, rng, inward, parallel)


# ===========================================================
# Spawn Manager
# ===========================================================

class SpawnManager:
    """Feeds new fireballs into a ProjectileManager on each spawn tick."""

    def __init__(self, projectile_manager, map_size, spec: ProjectileSpec,
                 max_projectiles: Optional[int] = None, rng=None,
                 inward_range=Spawning.INWARD_RANGE,
                 parallel_range=Spawning.PARALLEL_RANGE):
        """
        Args:
            projectile_manager: Owner of the active fireball list.
            map_size: (width, height) of the world map.
            spec: Shared fireball size and speed.
            max_projectiles: Skip spawning while this many are active. None = no cap.
            rng: Random source; defaults to a private random.Random().
        """
        self.projectile_manager = projectile_manager
        self.map_size = map_size
        self.spec = spec
        self.max_projectiles = max_projectiles
        self.rng = rng if rng is not None else random.Random()
        self.inward_range = inward_range
        self.parallel_range = parallel_range
        self.total_spawned = 0

        cap = "unbounded" if max_projectiles is None else str(max_projectiles)
        DebugLogger.init_sub(f"SpawnManager ready (cap: {cap})")

    def spawn(self) -> Optional[Projectile]:
        """Create and register one fireball. Returns None when the cap is reached."""
        active = len(self.projectile_manager)
        if self.max_projectiles is not None and active >= self.max_projectiles:
            DebugLogger.trace(f"Spawn skipped: {active} active (cap {self.max_projectiles})",
                              category="entity_spawn")
            return None

        projectile = create_projectile(
            self.map_size, self.spec, self.rng,
            inward_range=self.inward_range,
            parallel_range=self.parallel_range,
        )
        self.projectile_manager.add(projectile)
        self.total_spawned += 1

        DebugLogger.trace(
            f"Spawned fireball at ({projectile.x:.0f}, {projectile.y:.0f}) "
            f"dir=({projectile.dx:.2f}, {projectile.dy:.2f})",
            category="entity_spawn"
        )
        return projectile
