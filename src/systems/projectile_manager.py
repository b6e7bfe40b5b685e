"""
projectile_manager.py
---------------------
Owns the active fireball set and moves it every frame.

Responsibilities
----------------
- Advance every fireball along its direction at the shared speed.
- Drop fireballs that have left the map by more than one projectile size.
- Clear the set on game reset.
"""

from typing import Iterable, List, Tuple

from src.core.debug.debug_logger import DebugLogger
from src.entities.projectile import Projectile, ProjectileSpec


def advance_projectiles(projectiles: Iterable[Projectile], dt: float,
                        spec: ProjectileSpec, map_size: Tuple[float, float]) -> List[Projectile]:
    """
    Move each fireball, then keep only those still near the map.

    Movement happens before the bounds check, so a fireball gets one more
    frame past the edge before it is removed.

    Args:
        projectiles: Current fireballs (positions are mutated).
        dt: Delta time in seconds. dt <= 0 moves nothing.
        spec: Shared fireball size and speed.
        map_size: (width, height) of the world map.

    Returns:
        list[Projectile]: The surviving fireballs.
    """
    map_w, map_h = map_size
    step = spec.speed * dt if dt > 0 else 0.0
    survivors = []

    for projectile in projectiles:
        projectile.x += projectile.dx * step
        projectile.y += projectile.dy * step

        if not projectile.is_expired(spec, map_w, map_h):
            survivors.append(projectile)

    return survivors


class ProjectileManager:
    """Container for the active fireballs."""

    def __init__(self, spec: ProjectileSpec, map_size: Tuple[float, float]):
        self.spec = spec
        self.map_size = map_size
        self.active: List[Projectile] = []

    def __len__(self):
        return len(self.active)

    def __iter__(self):
        return iter(self.active)

    def add(self, projectile: Projectile):
        self.active.append(projectile)

    def update(self, dt: float):
        """Advance all fireballs and discard the expired ones."""
        before = len(self.active)
        self.active = advance_projectiles(self.active, dt, self.spec, self.map_size)
        removed = before - len(self.active)

        if removed > 0:
            DebugLogger.trace(f"Removed {removed} fireballs outside the map",
                              category="entity_cleanup")

    def clear(self):
        """Remove every fireball (game reset)."""
        count = len(self.active)
        self.active = []
        if count:
            DebugLogger.state(f"Cleared {count} fireballs", category="entity_cleanup")
