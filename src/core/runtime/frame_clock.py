"""
frame_clock.py
--------------
Per-frame delta time from a monotonic time source.
"""

import time
from typing import Callable, Optional


class FrameClock:
    """
    Tracks the previous frame timestamp and yields clamped deltas.

    - The first tick has no previous timestamp and returns 0.
    - A timestamp earlier than the previous one returns 0.
    - Deltas above max_frame_time are cut down to it (stalls, window drags).
    """

    def __init__(self, time_source: Callable[[], float] = time.perf_counter,
                 max_frame_time: Optional[float] = None):
        self.time_source = time_source
        self.max_frame_time = max_frame_time
        self.last_timestamp: Optional[float] = None

    def now(self) -> float:
        return self.time_source()

    def tick(self, timestamp: Optional[float] = None) -> float:
        """
        Advance the clock to timestamp (or the current time).

        Returns:
            float: Seconds since the previous tick, never negative.
        """
        if timestamp is None:
            timestamp = self.time_source()

        if self.last_timestamp is None:
            self.last_timestamp = timestamp
            return 0.0

        dt = timestamp - self.last_timestamp
        self.last_timestamp = timestamp

        if dt < 0:
            return 0.0
        if self.max_frame_time is not None and dt > self.max_frame_time:
            return self.max_frame_time
        return dt

    def reset(self):
        self.last_timestamp = None
