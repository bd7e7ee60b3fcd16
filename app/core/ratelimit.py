"""Process-wide token bucket rate limiter.

One ``TokenBucket`` is built at import time from settings and shared by
every request.  Refill and take happen under a ``threading.Lock`` because
sync endpoints run on the server's thread pool.
"""

from __future__ import annotations

import threading
import time
from collections.abc import Callable

from app.core.config import settings
from app.core.errors import RateLimitError


class TokenBucket:
    """Classic token bucket: *rate* tokens per second, at most *capacity*."""

    def __init__(
        self,
        rate: float,
        capacity: int,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if rate <= 0 or capacity <= 0:
            raise ValueError("rate and capacity must be positive")
        self.rate = rate
        self.capacity = capacity
        self._clock = clock
        self._tokens = float(capacity)
        self._updated_at = clock()
        self._lock = threading.Lock()

    def allow(self) -> bool:
        """Take one token if available.  Never blocks on an empty bucket."""
        with self._lock:
            now = self._clock()
            elapsed = max(0.0, now - self._updated_at)
            self._tokens = min(self.capacity, self._tokens + elapsed * self.rate)
            self._updated_at = now
            if self._tokens >= 1.0:
                self._tokens -= 1.0
                return True
            return False


limiter = TokenBucket(
    rate=settings.RATE_LIMIT_PER_SECOND,
    capacity=settings.RATE_LIMIT_BURST,
)


def enforce_rate_limit() -> None:
    """Application-wide dependency raising 429 when the bucket is empty."""
    if not limiter.allow():
        raise RateLimitError()
