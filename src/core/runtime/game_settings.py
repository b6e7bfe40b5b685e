"""
game_settings.py
----------------
Centralized constants for all game systems.

These are the defaults. `src/config/game.json` may override them at
startup through GameConfig.load(); nothing is re-read while running.
"""


# ===========================================================
# Display & Performance
# ===========================================================

class Display:
    """Screen and window configuration."""
    WIDTH: int = 1280
    HEIGHT: int = 720
    FPS: int = 60
    CAPTION: str = "Fireball Dodge"
    RESIZABLE: bool = True


# ===========================================================
# World
# ===========================================================

class World:
    """Map dimensions in world units."""
    MAP_WIDTH: int = 2000
    MAP_HEIGHT: int = 1500


# ===========================================================
# Entities
# ===========================================================

class CharacterDefaults:
    """Player character configuration defaults."""
    WIDTH: int = 90
    HEIGHT: int = 90
    SPEED: float = 200.0        # units per second


class ProjectileDefaults:
    """Shared size and speed of every fireball."""
    WIDTH: int = 50
    HEIGHT: int = 50
    SPEED: float = 300.0        # units per second


# ===========================================================
# Spawning
# ===========================================================

class Spawning:
    """Fireball spawner timing and velocity construction."""
    INTERVAL_MS: int = 2000
    INWARD_RANGE: tuple = (0.5, 1.0)
    PARALLEL_RANGE: tuple = (-1.0, 1.0)
    MIN_DIRECTION_MAGNITUDE: float = 1e-6
    MAX_PROJECTILES = None      # None = unbounded


# ===========================================================
# Physics & Timing
# ===========================================================

class Physics:
    """Movement and frame timing."""
    SNAP_THRESHOLD: float = 1.0
    MAX_FRAME_TIME: float = 0.25


# ===========================================================
# Assets
# ===========================================================

class Assets:
    """Image files loaded once before the loop starts."""
    DIR: str = "assets/images"
    CHARACTER: str = "hero.png"
    PROJECTILE: str = "fireball.png"
    BACKGROUND: str = "midlane-bg.jpg"


# ===========================================================
# Colors & Fonts
# ===========================================================

class Colors:
    BACKGROUND_FILL = (0, 0, 0)
    TEXT = (255, 255, 255)
    OVERLAY = (0, 0, 0, 178)    # black at 0.7 alpha
    PLACEHOLDER_CHARACTER = (60, 160, 255)
    PLACEHOLDER_PROJECTILE = (255, 120, 30)
    PLACEHOLDER_BACKGROUND = (30, 70, 40)


class Fonts:
    NAME = None                 # pygame default font
    SCORE_SIZE: int = 20
    TITLE_SIZE: int = 48
    FINAL_SCORE_SIZE: int = 24
    PROMPT_SIZE: int = 18
    SCORE_POS: tuple = (10, 30)


# ===========================================================
# Rendering Layers
# ===========================================================

class Layers:
    """Z-order for rendering."""
    BACKGROUND: int = 0
    PROJECTILES: int = 200
    CHARACTER: int = 400
    UI: int = 600
    OVERLAY: int = 700
