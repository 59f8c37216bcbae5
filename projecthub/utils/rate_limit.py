"""Fixed-window request limiter."""

import time
from typing import Callable, Dict, Hashable, Tuple

from projecthub.core.exceptions import RateLimitError


class FixedWindowRateLimiter:
    """Allows ``max_requests`` hits per key within each ``window_ms`` window.

    State is a plain dict mutated without awaits, so a single event loop
    needs no lock.
    """

    def __init__(self, max_requests: int, window_ms: int, clock: Callable[[], float] = time.monotonic):
        if max_requests <= 0 or window_ms <= 0:
            raise ValueError("max_requests and window_ms must be positive")
        self.max_requests = max_requests
        self.window_seconds = window_ms / 1000.0
        self._clock = clock
        self._windows: Dict[Hashable, Tuple[float, int]] = {}
        self._last_sweep = clock()

    @classmethod
    def from_settings(cls, settings) -> "FixedWindowRateLimiter":
        return cls(settings.rate_limit_max, settings.rate_limit_window_ms)

    def remaining(self, key: Hashable) -> int:
        """Hits left for ``key`` in its current window."""
        now = self._clock()
        started, count = self._windows.get(key, (now, 0))
        if now - started >= self.window_seconds:
            count = 0
        return max(self.max_requests - count, 0)

    def hit(self, key: Hashable) -> int:
        """Record one hit; returns hits left or raises ``RateLimitError``."""
        now = self._clock()
        if now - self._last_sweep >= self.window_seconds:
            self._sweep(now)

        started, count = self._windows.get(key, (now, 0))
        if now - started >= self.window_seconds:
            started, count = now, 0

        if count >= self.max_requests:
            self._windows[key] = (started, count)
            raise RateLimitError()

        count += 1
        self._windows[key] = (started, count)
        return self.max_requests - count

    def _sweep(self, now: float) -> None:
        # Runs at most once per window
        expired = [k for k, (started, _) in self._windows.items() if now - started >= self.window_seconds]
        for key in expired:
            del self._windows[key]
        self._last_sweep = now

    def reset(self) -> None:
        self._windows.clear()
