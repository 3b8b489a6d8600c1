"""In-memory TTL cache for API responses."""

import json
import time
from collections.abc import Callable
from typing import Any


class ResponseCache:
    """Simple TTL cache keyed by string.

    Expired entries are dropped lazily on lookup.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic):
        self._entries: dict[str, tuple[Any, float]] = {}
        self._clock = clock

    def get(self, key: str) -> Any | None:
        """Return the cached value, or None if missing or expired."""
        entry = self._entries.get(key)
        if entry is None:
            return None

        value, expires_at = entry
        if self._clock() > expires_at:
            del self._entries[key]
            return None
        return value

    def set(self, key: str, value: Any, ttl: float) -> None:
        """Cache a value for ``ttl`` seconds."""
        self._entries[key] = (value, self._clock() + ttl)

    def delete(self, key: str) -> bool:
        return self._entries.pop(key, None) is not None

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        # Includes entries that have expired but not been looked up yet
        return len(self._entries)


def create_cache_key(url: str, method: str, params: Any = None) -> str:
    """Build a cache key from request parameters."""
    base = f"{method.upper()}:{url}"
    if params:
        return f"{base}:{json.dumps(params, sort_keys=True, default=str)}"
    return base
