"""
input_manager.py
----------------
Translates pygame events into game commands.

Provides:
- Right click  -> MoveTo(world x, world y)
- S key        -> Stop
- Space        -> Restart
- Escape/close -> Quit
- Window resize -> Resize
"""

from dataclasses import dataclass
from typing import Optional

import pygame

from src.core.debug.debug_logger import DebugLogger


RIGHT_MOUSE_BUTTON = 3


# ===========================================================
# Commands
# ===========================================================

@dataclass(frozen=True)
class Command:
    """Base class for all input commands."""
    pass


@dataclass(frozen=True)
class MoveTo(Command):
    x: float
    y: float


@dataclass(frozen=True)
class Stop(Command):
    pass


@dataclass(frozen=True)
class Restart(Command):
    pass


@dataclass(frozen=True)
class Quit(Command):
    pass


@dataclass(frozen=True)
class Resize(Command):
    width: int
    height: int


# ===========================================================
# Default Key Bindings
# ===========================================================

DEFAULT_KEY_BINDINGS = {
    pygame.K_s: Stop,
    pygame.K_SPACE: Restart,
    pygame.K_ESCAPE: Quit,
}


class InputManager:
    """
    Maps raw pygame events to Command objects.

    Usage:
        command = input_manager.translate(event, camera)
        if command:
            scene.handle_command(command)
    """

    def __init__(self, key_bindings=None, display_manager=None):
        """
        Args:
            key_bindings: {pygame key: Command class}. Defaults to DEFAULT_KEY_BINDINGS.
            display_manager: Optional DisplayManager for window -> viewport mouse scaling.
        """
        self.key_bindings = key_bindings or DEFAULT_KEY_BINDINGS
        self.display_manager = display_manager
        DebugLogger.init_entry("InputManager")

    def translate(self, event, camera) -> Optional[Command]:
        """
        Convert one pygame event into a command.

        Args:
            event: pygame.event.Event
            camera: Current Camera, used to turn screen clicks into world coordinates.

        Returns:
            Command or None if the event is not bound.
        """
        if event.type == pygame.QUIT:
            return Quit()

        if event.type == pygame.VIDEORESIZE:
            return Resize(event.w, event.h)

        if event.type == pygame.KEYDOWN:
            command_cls = self.key_bindings.get(event.key)
            if command_cls is None:
                return None
            DebugLogger.trace(f"Key {event.key} -> {command_cls.__name__}",
                              category="input")
            return command_cls()

        if event.type == pygame.MOUSEBUTTONDOWN and event.button == RIGHT_MOUSE_BUTTON:
            screen_x, screen_y = self._to_viewport(event.pos)
            world_x, world_y = camera.screen_to_world(screen_x, screen_y)
            DebugLogger.trace(f"Move target ({world_x:.0f}, {world_y:.0f})", category="input")
            return MoveTo(world_x, world_y)

        return None

    def _to_viewport(self, pos):
        if self.display_manager is None:
            return float(pos[0]), float(pos[1])
        return self.display_manager.window_to_viewport(pos)
