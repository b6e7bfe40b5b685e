"""
character.py
------------
Player character data and seek-to-target movement.

Responsibilities
----------------
- Hold the character's world position, size, and speed.
- Track the pending "move to" command (MoveIntent).
- Advance the character toward its target without overshooting.
- Clamp the character position to the map bounds.
"""

import math
from dataclasses import dataclass
from typing import Tuple


@dataclass
class Character:
    """Player-controlled character. (x, y) is the top-left corner in world units."""
    x: float
    y: float
    width: int = 90
    height: int = 90
    speed: float = 200.0

    @property
    def center(self) -> Tuple[float, float]:
        return self.x + self.width / 2, self.y + self.height / 2

    def bounds(self):
        """Return (left, top, right, bottom) in world coordinates."""
        return self.x, self.y, self.x + self.width, self.y + self.height


@dataclass
class MoveIntent:
    """Pending seek command. Idle when is_moving is False."""
    target_x: float = 0.0
    target_y: float = 0.0
    is_moving: bool = False

    def move_to(self, x: float, y: float):
        self.target_x = x
        self.target_y = y
        self.is_moving = True

    def stop(self, character: Character):
        """Cancel the seek, freezing the target at the character's position."""
        self.target_x = character.x
        self.target_y = character.y
        self.is_moving = False


# ===========================================================
# Movement
# ===========================================================

def move_character(character: Character, intent: MoveIntent, dt: float,
                   map_size: Tuple[float, float], snap_threshold: float = 1.0):
    """
    Step the character toward the intent target.

    Args:
        character: Character to move (mutated).
        intent: Active move intent (mutated; cleared on arrival).
        dt: Delta time in seconds. dt <= 0 moves nothing.
        map_size: (width, height) of the world map.
        snap_threshold: Distance under which the character snaps onto the target.
    """
    if not intent.is_moving or dt <= 0:
        return

    delta_x = intent.target_x - character.x
    delta_y = intent.target_y - character.y
    distance = math.hypot(delta_x, delta_y)

    if distance < snap_threshold:
        character.x = intent.target_x
        character.y = intent.target_y
        intent.is_moving = False
        clamp_to_map(character, map_size)
        return

    # Proportional step, capped so one large dt lands on the target instead of past it
    ratio = min(character.speed * dt / distance, 1.0)
    character.x += delta_x * ratio
    character.y += delta_y * ratio

    clamp_to_map(character, map_size)


def clamp_to_map(character: Character, map_size: Tuple[float, float]):
    """Keep the character fully inside [0, map - size] on both axes."""
    map_w, map_h = map_size
    max_x = max(0.0, map_w - character.width)
    max_y = max(0.0, map_h - character.height)
    character.x = max(0.0, min(character.x, max_x))
    character.y = max(0.0, min(character.y, max_y))


def center_in_viewport(character: Character, viewport_size: Tuple[float, float],
                       map_size: Tuple[float, float]):
    """Place the character at the middle of the visible viewport (used on reset)."""
    view_w, view_h = viewport_size
    character.x = view_w / 2
    character.y = view_h / 2
    clamp_to_map(character, map_size)
