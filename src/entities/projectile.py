"""
projectile.py
-------------
Fireball entity data.

All fireballs share one size and speed (ProjectileSpec); each instance
only carries its world position and unit direction.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ProjectileSpec:
    """Size and speed shared by every projectile."""
    width: int
    height: int
    speed: float


@dataclass
class Projectile:
    """A fireball travelling in a straight line."""
    x: float
    y: float
    dx: float
    dy: float

    def bounds(self, spec: ProjectileSpec):
        """Return (left, top, right, bottom) in world coordinates."""
        return self.x, self.y, self.x + spec.width, self.y + spec.height

    def is_expired(self, spec: ProjectileSpec, map_width: float, map_height: float) -> bool:
        """True once the fireball is more than one projectile size past any map edge."""
        return (
            self.x < -spec.width
            or self.x > map_width + spec.width
            or self.y < -spec.height
            or self.y > map_height + spec.height
        )
