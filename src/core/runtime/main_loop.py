"""
main_loop.py
------------
Core game loop orchestrating timing, events, updates, and rendering.

Responsibilities:
- Initialize pygame and core systems
- Load image assets once, before the first frame
- Run the spawn timer as a pygame event, independent of the frame rate
- Coordinate event handling, updates, and rendering every frame
"""

import pygame

from src.core.debug.debug_logger import DebugLogger
from src.core.runtime.frame_clock import FrameClock
from src.core.runtime.game_config import GameConfig
from src.core.runtime.game_settings import Colors
from src.core.services.display_manager import DisplayManager
from src.core.services.event_manager import EventManager, GameOverEvent, GameStartedEvent
from src.core.services.input_manager import InputManager, Quit, Resize
from src.graphics.draw_manager import DrawManager
from src.scenes.game_scene import GameScene
from src.ui.hud_manager import HUDManager


SPAWN_EVENT = pygame.USEREVENT + 1


class MainLoop:
    """
    Core runtime controller managing the game's main loop.

    Variable timestep: each frame advances the simulation by the measured
    delta time. Fireball spawning is driven by SPAWN_EVENT on its own
    wall-clock interval.
    """

    # ===========================================================
    # Initialization
    # ===========================================================

    def __init__(self, config: GameConfig, placeholders: bool = False):
        """
        Initialize pygame and all core systems.

        Args:
            config: Game constants.
            placeholders: Use solid-color rectangles instead of image files.

        Raises:
            AssetLoadError: If an image cannot be loaded.
        """
        DebugLogger.section("Initializing MainLoop")
        self.config = config

        self._init_pygame()
        self._init_core_systems()
        self._load_assets(placeholders)
        self._init_scene()

    def _init_pygame(self):
        pygame.init()
        pygame.font.init()
        DebugLogger.init_entry("Pygame")

    def _init_core_systems(self):
        """Initialize display, input, drawing, and event systems."""
        cfg = self.config
        self.display = DisplayManager(cfg.viewport_width, cfg.viewport_height,
                                      cfg.caption, cfg.resizable)
        self.input_manager = InputManager(display_manager=self.display)
        self.draw_manager = DrawManager()
        self.hud = HUDManager()

        self.events = EventManager()
        self.events.subscribe(GameOverEvent, self._on_game_over)
        self.events.subscribe(GameStartedEvent, self._on_game_started)

        self.frame_clock = FrameClock(max_frame_time=cfg.max_frame_time)
        self.clock = pygame.time.Clock()
        self.running = True

    def _load_assets(self, placeholders: bool):
        """Load (or fake) the character, fireball and map images."""
        cfg = self.config
        char_size = (cfg.character_width, cfg.character_height)
        proj_size = (cfg.projectile.width, cfg.projectile.height)
        draw = self.draw_manager

        if placeholders:
            DebugLogger.init_entry("Assets", "PLACEHOLDER")
            draw.make_placeholder(GameScene.IMAGE_CHARACTER, char_size, Colors.PLACEHOLDER_CHARACTER)
            draw.make_placeholder(GameScene.IMAGE_PROJECTILE, proj_size, Colors.PLACEHOLDER_PROJECTILE)
            background = draw.make_placeholder("background", cfg.map_size, Colors.PLACEHOLDER_BACKGROUND)
        else:
            DebugLogger.init_entry("Assets", "LOADING")
            draw.load_image(GameScene.IMAGE_CHARACTER, cfg.asset_path(cfg.character_image), char_size)
            draw.load_image(GameScene.IMAGE_PROJECTILE, cfg.asset_path(cfg.projectile_image), proj_size)
            background = draw.load_image("background", cfg.asset_path(cfg.background_image), cfg.map_size)

        draw.set_background(background)

    def _init_scene(self):
        self.scene = GameScene(self.config, self.display.viewport_size, events=self.events)
        DebugLogger.init_entry("Main Loop Runtime")
        DebugLogger.init_sub(f"Spawn interval {self.config.spawn_interval_ms} ms")

    # ===========================================================
    # Event Callbacks
    # ===========================================================

    def _on_game_over(self, event: GameOverEvent):
        self.display.set_caption(f"{self.config.caption} - Final Score: {event.score}")

    def _on_game_started(self, event: GameStartedEvent):
        self.display.set_caption(self.config.caption)

    # ===========================================================
    # Main Loop
    # ===========================================================

    def run(self):
        """Execute the main game loop until the window is closed."""
        DebugLogger.section("Game Loop")

        self.scene.reset(self.frame_clock.now())
        pygame.time.set_timer(SPAWN_EVENT, self.config.spawn_interval_ms)

        try:
            while self.running:
                now = self.frame_clock.now()
                dt = self.frame_clock.tick(now)

                self._handle_events(now)
                if not self.running:
                    break

                self.scene.update(dt, now)
                self._draw()
                self.clock.tick(self.config.fps)
        finally:
            pygame.time.set_timer(SPAWN_EVENT, 0)
            pygame.quit()
            DebugLogger.system("Pygame terminated")

    # ===========================================================
    # Event Handling
    # ===========================================================

    def _handle_events(self, now: float):
        """Route spawn ticks to the scene and input events through InputManager."""
        for event in pygame.event.get():
            if event.type == SPAWN_EVENT:
                self.scene.spawn()
                continue

            command = self.input_manager.translate(event, self.scene.camera)
            if command is None:
                continue

            if isinstance(command, Quit):
                self.running = False
                DebugLogger.action("Quit signal received")
                return

            if isinstance(command, Resize):
                self.display.resize(command.width, command.height)
                self.scene.on_resize(*self.display.viewport_size)
                continue

            self.scene.handle_command(command, now)

    # ===========================================================
    # Rendering
    # ===========================================================

    def _draw(self):
        self.draw_manager.clear()
        self.scene.draw(self.draw_manager, self.hud)
        self.draw_manager.render(self.display.get_surface())
        self.display.present()
