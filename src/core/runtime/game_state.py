"""
game_state.py
-------------
Session state for one run: score, phase, and start time.

Phases
------
PLAYING   -> GAME_OVER  on the first collision
GAME_OVER -> PLAYING    on an explicit restart (ignored while PLAYING)
"""

import math
from enum import Enum
from typing import Optional

from src.core.debug.debug_logger import DebugLogger
from src.core.services.event_manager import EventManager, GameOverEvent, GameStartedEvent


class GamePhase(Enum):
    PLAYING = "playing"
    GAME_OVER = "game_over"


class GameState:
    """Score and phase for the current session. Times are in seconds."""

    def __init__(self, events: Optional[EventManager] = None):
        self.events = events
        self.score = 0
        self.phase = GamePhase.PLAYING
        self.session_start = 0.0

    @property
    def is_game_over(self) -> bool:
        return self.phase is GamePhase.GAME_OVER

    @property
    def is_playing(self) -> bool:
        return self.phase is GamePhase.PLAYING

    # ===========================================================
    # Lifecycle
    # ===========================================================

    def start(self, now: float):
        """Enter PLAYING with a fresh score and start time."""
        self.score = 0
        self.session_start = now
        self.phase = GamePhase.PLAYING

        DebugLogger.state(f"Session started at t={now:.2f}s", category="game_state")
        if self.events:
            self.events.dispatch(GameStartedEvent(start_time=now))

    def restart(self, now: float) -> bool:
        """
        Start a new session, but only from GAME_OVER.

        Returns:
            bool: True if the session was restarted.
        """
        if not self.is_game_over:
            DebugLogger.trace("Restart ignored while playing", category="game_state")
            return False

        self.start(now)
        return True

    def trigger_game_over(self, now: Optional[float] = None) -> bool:
        """
        Freeze the score and switch to GAME_OVER.

        Args:
            now: If given, the score is brought up to this time before freezing.

        Returns:
            bool: True on the transition, False if already over.
        """
        if self.is_game_over:
            return False

        if now is not None:
            self.update_score(now)
        self.phase = GamePhase.GAME_OVER
        DebugLogger.state(f"Game over - final score {self.score}", category="game_state")
        if self.events:
            self.events.dispatch(GameOverEvent(score=self.score))
        return True

    # ===========================================================
    # Score
    # ===========================================================

    def update_score(self, now: float) -> int:
        """Recompute whole seconds survived. Frozen once the game is over."""
        if self.is_playing:
            self.score = max(0, math.floor(now - self.session_start))
        return self.score
