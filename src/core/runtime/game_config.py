"""
game_config.py
--------------
Immutable runtime configuration assembled from game_settings defaults
and an optional JSON override file.
"""

import os
from dataclasses import dataclass, field, replace
from typing import Optional, Tuple

from src.core.runtime.game_settings import (
    Display, World, CharacterDefaults, ProjectileDefaults,
    Spawning, Physics, Assets,
)
from src.core.services.config_manager import load_config
from src.entities.projectile import ProjectileSpec


DEFAULT_CONFIG_FILE = "game.json"


def _default_projectile_spec():
    return ProjectileSpec(
        width=ProjectileDefaults.WIDTH,
        height=ProjectileDefaults.HEIGHT,
        speed=ProjectileDefaults.SPEED,
    )


@dataclass(frozen=True)
class GameConfig:
    """Every constant the game loop depends on, fixed for the process lifetime."""

    # Display
    viewport_width: int = Display.WIDTH
    viewport_height: int = Display.HEIGHT
    fps: int = Display.FPS
    caption: str = Display.CAPTION
    resizable: bool = Display.RESIZABLE

    # World
    map_width: int = World.MAP_WIDTH
    map_height: int = World.MAP_HEIGHT

    # Entities
    character_width: int = CharacterDefaults.WIDTH
    character_height: int = CharacterDefaults.HEIGHT
    character_speed: float = CharacterDefaults.SPEED
    projectile: ProjectileSpec = field(default_factory=_default_projectile_spec)

    # Spawning
    spawn_interval_ms: int = Spawning.INTERVAL_MS
    max_projectiles: Optional[int] = Spawning.MAX_PROJECTILES
    inward_range: Tuple[float, float] = Spawning.INWARD_RANGE
    parallel_range: Tuple[float, float] = Spawning.PARALLEL_RANGE

    # Physics
    snap_threshold: float = Physics.SNAP_THRESHOLD
    max_frame_time: float = Physics.MAX_FRAME_TIME

    # Assets
    asset_dir: str = Assets.DIR
    character_image: str = Assets.CHARACTER
    projectile_image: str = Assets.PROJECTILE
    background_image: str = Assets.BACKGROUND

    @property
    def map_size(self) -> Tuple[int, int]:
        return self.map_width, self.map_height

    @property
    def viewport_size(self) -> Tuple[int, int]:
        return self.viewport_width, self.viewport_height

    def asset_path(self, name: str) -> str:
        return os.path.join(self.asset_dir, name)

    def with_overrides(self, **changes) -> "GameConfig":
        """Return a copy with the given fields replaced (used for CLI flags)."""
        return replace(self, **changes)

    # ===========================================================
    # Loading
    # ===========================================================

    @classmethod
    def from_dict(cls, data: dict) -> "GameConfig":
        """
        Build a config from the nested dict layout used by game.json.

        Missing sections or keys keep their defaults.
        """
        base = cls()
        display = data.get("display", {})
        world = data.get("world", {})
        character = data.get("character", {})
        projectile = data.get("projectile", {})
        spawning = data.get("spawning", {})
        physics = data.get("physics", {})
        assets = data.get("assets", {})

        max_projectiles = spawning.get("max_projectiles", base.max_projectiles)
        if max_projectiles is not None:
            max_projectiles = int(max_projectiles)
            if max_projectiles < 0:
                raise ValueError("spawning.max_projectiles must be >= 0 or null")

        return cls(
            viewport_width=int(display.get("width", base.viewport_width)),
            viewport_height=int(display.get("height", base.viewport_height)),
            fps=int(display.get("fps", base.fps)),
            caption=str(display.get("caption", base.caption)),
            resizable=bool(display.get("resizable", base.resizable)),
            map_width=int(world.get("map_width", base.map_width)),
            map_height=int(world.get("map_height", base.map_height)),
            character_width=int(character.get("width", base.character_width)),
            character_height=int(character.get("height", base.character_height)),
            character_speed=float(character.get("speed", base.character_speed)),
            projectile=ProjectileSpec(
                width=int(projectile.get("width", base.projectile.width)),
                height=int(projectile.get("height", base.projectile.height)),
                speed=float(projectile.get("speed", base.projectile.speed)),
            ),
            spawn_interval_ms=int(spawning.get("interval_ms", base.spawn_interval_ms)),
            max_projectiles=max_projectiles,
            inward_range=tuple(spawning.get("inward_range", base.inward_range)),
            parallel_range=tuple(spawning.get("parallel_range", base.parallel_range)),
            snap_threshold=float(physics.get("snap_threshold", base.snap_threshold)),
            max_frame_time=float(physics.get("max_frame_time", base.max_frame_time)),
            asset_dir=str(assets.get("dir", base.asset_dir)),
            character_image=str(assets.get("character", base.character_image)),
            projectile_image=str(assets.get("projectile", base.projectile_image)),
            background_image=str(assets.get("background", base.background_image)),
        )

    @classmethod
    def load(cls, filename: str = DEFAULT_CONFIG_FILE, strict: bool = False) -> "GameConfig":
        """Load game.json (or another file) and merge it over the defaults."""
        return cls.from_dict(load_config(filename, {}, strict=strict))
