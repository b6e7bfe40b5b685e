"""
game_scene.py
-------------
The single gameplay scene: owns every piece of session state and runs
one simulation step per frame.

Frame order while playing:
    move character -> recompute camera -> advance fireballs
    -> collision check -> score
"""

from dataclasses import dataclass
from typing import List, Optional, Tuple

from src.core.debug.debug_logger import DebugLogger
from src.core.runtime.game_config import GameConfig
from src.core.runtime.game_settings import Layers
from src.core.runtime.game_state import GameState
from src.core.services.input_manager import MoveTo, Restart, Resize, Stop
from src.entities.character import Character, MoveIntent, center_in_viewport, clamp_to_map, move_character
from src.systems.camera import Camera, update_camera
from src.systems.collision_manager import CollisionManager
from src.systems.projectile_manager import ProjectileManager
from src.systems.spawn_manager import SpawnManager


Rect = Tuple[float, float, float, float]


@dataclass(frozen=True)
class FrameView:
    """Everything the renderer needs for one frame, in screen coordinates."""
    viewport_size: Tuple[int, int]
    background_offset: Tuple[float, float]
    character_rect: Rect
    projectile_rects: List[Rect]
    score: int
    game_over: bool


class GameScene:
    """Thin orchestrator over the character, fireballs, camera and session state."""

    IMAGE_CHARACTER = "character"
    IMAGE_PROJECTILE = "projectile"

    def __init__(self, config: GameConfig, viewport_size=None, events=None, rng=None):
        """
        Args:
            config: Game constants.
            viewport_size: Initial visible area; defaults to the configured window size.
            events: Optional EventManager for GameStarted/GameOver notifications.
            rng: Optional random source for the spawner (tests pass a seeded one).
        """
        self.config = config
        self.viewport_size = tuple(viewport_size or config.viewport_size)
        self.map_size = config.map_size

        self.character = Character(
            x=0.0, y=0.0,
            width=config.character_width,
            height=config.character_height,
            speed=config.character_speed,
        )
        self.intent = MoveIntent()
        self.camera = Camera()

        self.game_state = GameState(events)
        self.projectile_manager = ProjectileManager(config.projectile, self.map_size)
        self.spawn_manager = SpawnManager(
            self.projectile_manager, self.map_size, config.projectile,
            max_projectiles=config.max_projectiles, rng=rng,
            inward_range=config.inward_range,
            parallel_range=config.parallel_range,
        )
        self.collision_manager = CollisionManager(self.character, self.projectile_manager, self.game_state)

        DebugLogger.init_entry("GameScene")

    # ===========================================================
    # Lifecycle
    # ===========================================================

    def reset(self, now: float):
        """Fresh session: score 0, no fireballs, character centered, no pending move."""
        self._reset_world()
        self.game_state.start(now)

    def restart(self, now: float) -> bool:
        """Start over after a game over. Ignored while playing."""
        if not self.game_state.restart(now):
            return False
        self._reset_world()
        return True

    def _reset_world(self):
        self.projectile_manager.clear()
        center_in_viewport(self.character, self.viewport_size, self.map_size)
        self.intent.stop(self.character)
        self._refresh_camera()

    # ===========================================================
    # Simulation
    # ===========================================================

    def update(self, dt: float, now: float):
        """Run one frame of simulation. Does nothing once the game is over."""
        if self.game_state.is_game_over:
            return

        move_character(self.character, self.intent, dt, self.map_size, self.config.snap_threshold)
        self._refresh_camera()
        self.projectile_manager.update(dt)
        self.collision_manager.detect(now)
        self.game_state.update_score(now)

    def spawn(self) -> bool:
        """Spawn timer tick. Fireballs only appear while playing."""
        if not self.game_state.is_playing:
            return False
        return self.spawn_manager.spawn() is not None

    def _refresh_camera(self):
        self.camera = update_camera(self.character.center, self.viewport_size, self.map_size)

    # ===========================================================
    # Commands
    # ===========================================================

    def handle_command(self, command, now: float) -> bool:
        """
        Apply an input command.

        Returns:
            bool: True if the command was consumed.
        """
        if isinstance(command, MoveTo):
            if self.game_state.is_game_over:
                return False
            target_x, target_y = self._reachable(command.x, command.y)
            self.intent.move_to(target_x, target_y)
            return True

        if isinstance(command, Stop):
            self.intent.stop(self.character)
            return True

        if isinstance(command, Restart):
            return self.restart(now)

        if isinstance(command, Resize):
            self.on_resize(command.width, command.height)
            return True

        return False

    def _reachable(self, x: float, y: float) -> Tuple[float, float]:
        """Clamp a move target to positions the character can actually occupy."""
        map_w, map_h = self.map_size
        max_x = max(0.0, map_w - self.character.width)
        max_y = max(0.0, map_h - self.character.height)
        return max(0.0, min(x, max_x)), max(0.0, min(y, max_y))

    def on_resize(self, width: int, height: int):
        """Adopt a new viewport size and keep the character and camera valid."""
        self.viewport_size = (width, height)
        clamp_to_map(self.character, self.map_size)
        self._refresh_camera()

    # ===========================================================
    # Output
    # ===========================================================

    def frame_view(self) -> FrameView:
        """Screen-space snapshot of the current frame."""
        cam = self.camera
        char = self.character
        spec = self.projectile_manager.spec

        char_x, char_y = cam.world_to_screen(char.x, char.y)
        projectile_rects = []
        for projectile in self.projectile_manager:
            px, py = cam.world_to_screen(projectile.x, projectile.y)
            projectile_rects.append((px, py, spec.width, spec.height))

        return FrameView(
            viewport_size=self.viewport_size,
            background_offset=(-cam.x, -cam.y),
            character_rect=(char_x, char_y, char.width, char.height),
            projectile_rects=projectile_rects,
            score=self.game_state.score,
            game_over=self.game_state.is_game_over,
        )

    def draw(self, draw_manager, hud=None, frame: Optional[FrameView] = None):
        """Queue the scene and its overlays on the DrawManager."""
        frame = frame or self.frame_view()
        draw_manager.background_offset = frame.background_offset

        draw_manager.queue_draw(draw_manager.get_image(self.IMAGE_CHARACTER),
                                frame.character_rect[:2], layer=Layers.CHARACTER)

        projectile_image = draw_manager.get_image(self.IMAGE_PROJECTILE)
        for rect in frame.projectile_rects:
            draw_manager.queue_draw(projectile_image, rect[:2], layer=Layers.PROJECTILES)

        if hud is None:
            return
        if frame.game_over:
            hud.draw_game_over(draw_manager, frame.score, frame.viewport_size)
        else:
            hud.draw_score(draw_manager, frame.score)
