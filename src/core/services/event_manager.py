"""
event_manager.py
----------------
Event-driven system for decoupled game component communication.
Lets the game state announce phase changes without knowing who listens.
"""

from dataclasses import dataclass
from typing import Callable, Dict, List, Type
from src.core.debug.debug_logger import DebugLogger


# ===========================================================
# Event Definitions
# ===========================================================

@dataclass(frozen=True)
class BaseEvent:
    """Base class for all events."""
    pass


@dataclass(frozen=True)
class GameStartedEvent(BaseEvent):
    """Dispatched when a session starts or restarts."""
    start_time: float


@dataclass(frozen=True)
class GameOverEvent(BaseEvent):
    """Dispatched once when a fireball hits the character."""
    score: int


# ===========================================================
# Event Manager
# ===========================================================

class EventManager:
    """Central event dispatcher using pub-sub pattern."""

    def __init__(self):
        self._subscribers: Dict[Type[BaseEvent], List[Callable]] = {}

    # ===========================================================
    # Subscription
    # ===========================================================

    def subscribe(self, event_type: Type[BaseEvent], callback: Callable) -> None:
        """
        Register a callback for an event type.

        Args:
            event_type: Event class to listen for
            callback: Function to call when event fires
        """
        callbacks = self._subscribers.setdefault(event_type, [])
        if callback in callbacks:
            return

        callbacks.append(callback)
        callback_name = getattr(callback, '__name__', repr(callback))
        DebugLogger.trace(
            f"Subscribed '{callback_name}' to '{event_type.__name__}'",
            category="system"
        )

    def unsubscribe(self, event_type: Type[BaseEvent], callback: Callable) -> None:
        if event_type in self._subscribers:
            try:
                self._subscribers[event_type].remove(callback)
            except ValueError:
                pass

    # ===========================================================
    # Dispatch
    # ===========================================================

    def dispatch(self, event: BaseEvent) -> None:
        """
        Send event to all registered callbacks.

        A failing callback is logged and does not stop the others.
        """
        for callback in list(self._subscribers.get(type(event), ())):
            try:
                callback(event)
            except Exception as e:
                callback_name = getattr(callback, '__name__', repr(callback))
                DebugLogger.warn(f"Error in event callback {callback_name}: {e}")

    def clear_all(self) -> None:
        self._subscribers.clear()

    def get_subscriber_count(self, event_type: Type[BaseEvent] = None) -> int:
        if event_type:
            return len(self._subscribers.get(event_type, []))
        return sum(len(subs) for subs in self._subscribers.values())
