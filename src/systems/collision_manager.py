"""
collision_manager.py
--------------------
Axis-aligned bounding-box checks between the character and fireballs.

Responsibilities
----------------
- Test the character against every active fireball.
- Stop at the first overlap.
- Report the hit to the game state (single, one-way transition).
"""

from typing import Iterable, Optional

from src.core.debug.debug_logger import DebugLogger
from src.entities.character import Character
from src.entities.projectile import Projectile, ProjectileSpec


def boxes_overlap(a, b) -> bool:
    """
    Open-interval overlap of two (left, top, right, bottom) boxes.
    Boxes that only touch along an edge do not overlap.
    """
    a_left, a_top, a_right, a_bottom = a
    b_left, b_top, b_right, b_bottom = b
    return a_left < b_right and a_right > b_left and a_top < b_bottom and a_bottom > b_top


def find_collision(character: Character, projectiles: Iterable[Projectile],
                   spec: ProjectileSpec) -> Optional[Projectile]:
    """Return the first fireball overlapping the character, or None."""
    char_box = character.bounds()
    for projectile in projectiles:
        if boxes_overlap(char_box, projectile.bounds(spec)):
            return projectile
    return None


def check_collision(character: Character, projectiles: Iterable[Projectile],
                    spec: ProjectileSpec) -> bool:
    """True if any fireball overlaps the character."""
    return find_collision(character, projectiles, spec) is not None


class CollisionManager:
    """Detects character hits and ends the session on the first one."""

    def __init__(self, character: Character, projectile_manager, game_state):
        """
        Args:
            character: The player character.
            projectile_manager: Source of active fireballs.
            game_state: GameState receiving the game-over transition.
        """
        self.character = character
        self.projectile_manager = projectile_manager
        self.game_state = game_state

    def detect(self, now: Optional[float] = None) -> bool:
        """
        Check for a hit and trigger game over if one is found.

        Args:
            now: Current time in seconds; when given, the final score counts up to it.

        Returns:
            bool: True if the character was hit this frame.
        """
        hit = find_collision(self.character, self.projectile_manager, self.projectile_manager.spec)
        if hit is None:
            return False

        DebugLogger.state(
            f"Collision: Character ({self.character.x:.0f}, {self.character.y:.0f}) "
            f"<-> Fireball ({hit.x:.0f}, {hit.y:.0f})",
            category="collision"
        )
        self.game_state.trigger_game_over(now)
        return True
