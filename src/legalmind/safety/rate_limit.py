"""
Per-user request rate limiting.

Fixed-window counter keyed by user id. The table of tracked users is
bounded: expired windows are dropped on access and, once ``max_keys`` is
reached, the least recently used user is evicted.
"""

import logging
import threading
import time
from collections import OrderedDict
from dataclasses import dataclass
from typing import Callable

from legalmind.config.constants import (
    RATE_LIMIT_MAX_KEYS,
    RATE_LIMIT_MAX_REQUESTS,
    RATE_LIMIT_WINDOW_SECONDS,
)

logger = logging.getLogger(__name__)


@dataclass
class _Window:
    count: int
    reset_at: float


class RateLimiter:
    """
    Fixed-window rate limiter with bounded memory.

    Owned by the host process (one per web app), not a module singleton.
    Thread-safe.

    Attributes:
        max_requests: Requests allowed per key per window
        window_seconds: Window length
        max_keys: Keys tracked before LRU eviction
        _clock: Monotonic time source (injectable for tests)
        _windows: key -> _Window, ordered by recency of use

    Example:
        >>> limiter = RateLimiter(max_requests=2, window_seconds=60)
        >>> limiter.check("alice"), limiter.check("alice"), limiter.check("alice")
        (True, True, False)
    """

    def __init__(
        self,
        max_requests: int = RATE_LIMIT_MAX_REQUESTS,
        window_seconds: float = RATE_LIMIT_WINDOW_SECONDS,
        max_keys: int = RATE_LIMIT_MAX_KEYS,
        clock: Callable[[], float] = time.monotonic,
    ):
        if max_requests < 1:
            raise ValueError("max_requests must be at least 1")
        if window_seconds <= 0:
            raise ValueError("window_seconds must be positive")
        if max_keys < 1:
            raise ValueError("max_keys must be at least 1")

        self.max_requests = max_requests
        self.window_seconds = window_seconds
        self.max_keys = max_keys
        self._clock = clock
        self._windows: "OrderedDict[str, _Window]" = OrderedDict()
        self._lock = threading.Lock()

    def check(self, key: str) -> bool:
        """
        Count a request for ``key``.

        Returns:
            True if the request is allowed, False if the key is over its limit
        """
        now = self._clock()
        with self._lock:
            window = self._windows.get(key)
            if window is None or now >= window.reset_at:
                self._windows[key] = _Window(count=1, reset_at=now + self.window_seconds)
                self._windows.move_to_end(key)
                self._evict()
                return True

            self._windows.move_to_end(key)
            if window.count >= self.max_requests:
                logger.debug(f"Rate limit hit for {key!r}")
                return False
            window.count += 1
            return True

    def remaining(self, key: str) -> int:
        """Requests left for ``key`` in its current window."""
        now = self._clock()
        with self._lock:
            window = self._windows.get(key)
            if window is None or now >= window.reset_at:
                return self.max_requests
            return max(0, self.max_requests - window.count)

    def _evict(self) -> None:
        while len(self._windows) > self.max_keys:
            key, _ = self._windows.popitem(last=False)
            logger.debug(f"Evicted rate limit entry for {key!r}")

    def reset(self) -> None:
        """Forget all tracked keys."""
        with self._lock:
            self._windows.clear()

    def __len__(self) -> int:
        return len(self._windows)

    def __repr__(self) -> str:
        return (
            f"RateLimiter(max={self.max_requests}/{self.window_seconds}s, "
            f"keys={len(self._windows)}/{self.max_keys})"
        )
