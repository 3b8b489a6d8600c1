"""Sliding-window rate limiter."""

import time
from collections import deque
from collections.abc import Callable


class RateLimiter:
    """Track requests inside a time window and refuse to exceed the limit.

    Args:
        max_requests: Requests allowed per window (default: 100)
        window: Window length in seconds (default: 60)
        clock: Monotonic time source, injectable for tests
    """

    def __init__(
        self,
        max_requests: int = 100,
        window: float = 60.0,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.max_requests = max_requests
        self.window = window
        self._clock = clock
        self._timestamps: deque[float] = deque()

    def can_make_request(self) -> bool:
        self._prune_expired()
        return len(self._timestamps) < self.max_requests

    def record_request(self) -> None:
        self._prune_expired()
        self._timestamps.append(self._clock())

    def remaining_requests(self) -> int:
        self._prune_expired()
        return max(0, self.max_requests - len(self._timestamps))

    def time_until_next_slot(self) -> float:
        """Seconds until a slot opens; 0 if one is available now."""
        self._prune_expired()
        if len(self._timestamps) < self.max_requests:
            return 0.0
        return max(0.0, self._timestamps[0] + self.window - self._clock())

    def _prune_expired(self) -> None:
        cutoff = self._clock() - self.window
        while self._timestamps and self._timestamps[0] <= cutoff:
            self._timestamps.popleft()
