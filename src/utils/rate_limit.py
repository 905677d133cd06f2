"""
Request Rate Limiting

Sliding-window request counter keyed by client identity, used to throttle
photo extraction requests.
"""

import threading
import time
from collections import deque
from typing import Callable, Deque, Dict, Optional

from core.exceptions import RateLimitError, ValidationError
from utils.logging import get_logger

logger = get_logger(__name__)


class SlidingWindowRateLimiter:
    """Allows at most ``max_requests`` per client within a rolling time window."""

    def __init__(self, max_requests: int, window_seconds: float = 60.0,
                 clock: Callable[[], float] = time.monotonic):
        """
        Initialize the rate limiter.

        Args:
            max_requests: Maximum number of requests per client per window
            window_seconds: Window length in seconds
            clock: Monotonic time source (injectable for tests)
        """
        if max_requests < 1:
            raise ValidationError("max_requests must be at least 1",
                                  field_name="max_requests", invalid_value=max_requests)
        if window_seconds <= 0:
            raise ValidationError("window_seconds must be positive",
                                  field_name="window_seconds", invalid_value=window_seconds)

        self.max_requests = max_requests
        self.window_seconds = window_seconds
        self._clock = clock
        self._requests: Dict[str, Deque[float]] = {}
        self._lock = threading.Lock()

    def _expire(self, client_id: str, now: float) -> Deque[float]:
        bucket = self._requests.get(client_id)
        if bucket is None:
            return deque()

        cutoff = now - self.window_seconds
        while bucket and bucket[0] <= cutoff:
            bucket.popleft()

        if not bucket:
            del self._requests[client_id]
        return bucket

    def check(self, client_id: str) -> None:
        """
        Record a request for ``client_id`` or reject it.

        Raises:
            RateLimitError: If the client already used its window allowance
        """
        with self._lock:
            now = self._clock()
            bucket = self._expire(client_id, now)

            if len(bucket) >= self.max_requests:
                retry_after = self.window_seconds - (now - bucket[0])
                logger.warning(f"Rate limit hit for client {client_id}, retry in {retry_after:.1f}s",
                               extra={'client_id': client_id})
                raise RateLimitError(
                    f"Too many requests: at most {self.max_requests} per "
                    f"{self.window_seconds:g} seconds",
                    client_id=client_id,
                    retry_after=retry_after
                )

            bucket.append(now)
            self._requests[client_id] = bucket

    def remaining(self, client_id: str) -> int:
        """Number of requests the client may still make in the current window."""
        with self._lock:
            bucket = self._expire(client_id, self._clock())
            return self.max_requests - len(bucket)

    def reset(self, client_id: Optional[str] = None) -> None:
        """Forget the history of one client, or of every client."""
        with self._lock:
            if client_id is None:
                self._requests.clear()
            else:
                self._requests.pop(client_id, None)

    def tracked_clients(self) -> int:
        """Number of clients with requests inside the window."""
        with self._lock:
            now = self._clock()
            for client_id in list(self._requests):
                self._expire(client_id, now)
            return len(self._requests)
