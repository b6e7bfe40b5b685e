"""
src/entities/__init__.py
------------------------
Entity module exports.

Plain dataclasses with no pygame dependency.

Exports:
    Character      - Player position, size and speed
    MoveIntent     - Pending seek-to-point command
    Projectile     - One fireball (position + unit direction)
    ProjectileSpec - Size and speed shared by all fireballs
"""

from src.entities.character import Character, MoveIntent, move_character
from src.entities.projectile import Projectile, ProjectileSpec

__all__ = [
    'Character',
    'MoveIntent',
    'move_character',
    'Projectile',
    'ProjectileSpec',
]
