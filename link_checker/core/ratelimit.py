"""Thread-safe token-bucket rate limiter shared by all check workers."""

import threading
import time

from link_checker.errors import RateLimitExceeded


class TokenBucket:
    """
    Classic token bucket: *rate* tokens per second, at most *capacity*
    stored.  ``acquire`` reserves a token and sleeps for as long as the
    reservation requires.
    """

    def __init__(self, rate: float, capacity: float | None = None) -> None:
        if rate <= 0:
            raise ValueError("rate must be positive")
        self.rate = float(rate)
        self.capacity = float(capacity if capacity is not None else rate)
        self.tokens = self.capacity
        self.ts = time.monotonic()
        self.lock = threading.Lock()

    def _refill(self) -> None:
        now = time.monotonic()
        delta = now - self.ts
        if delta > 0:
            self.tokens = min(self.capacity, self.tokens + delta * self.rate)
            self.ts = now

    def reserve(self, max_wait: float | None = None) -> float:
        """Take one token and return the seconds to wait before using it.

        Raises :class:`RateLimitExceeded` (without taking the token) when
        the wait would exceed *max_wait*.
        """
        with self.lock:
            self._refill()
            if self.tokens >= 1.0:
                self.tokens -= 1.0
                return 0.0
            wait = (1.0 - self.tokens) / self.rate
            if max_wait is not None and wait > max_wait:
                raise RateLimitExceeded(
                    f"rate limiter wait {wait:.2f}s exceeds {max_wait:.2f}s"
                )
            # Tokens may go negative: later callers queue behind this one.
            self.tokens -= 1.0
            return wait

    def acquire(self, max_wait: float | None = None) -> None:
        wait = self.reserve(max_wait)
        if wait > 0:
            time.sleep(wait)
