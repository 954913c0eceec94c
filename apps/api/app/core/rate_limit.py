"""Sliding-window limiter for login attempts, keyed by caller origin."""

from __future__ import annotations

import logging
import math
import threading
import time
from collections import deque
from typing import Callable, Deque, Dict

from app.core.config import Settings

logger = logging.getLogger(__name__)

_SWEEP_THRESHOLD = 1024


class LoginRateLimiter:
    """Track attempts per origin and refuse those beyond the window budget.

    Only attempts that were let through are recorded, so a blocked caller
    regains access as soon as its oldest recorded attempt ages out.
    """

    def __init__(
        self,
        max_attempts: int,
        window_seconds: float,
        *,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        if window_seconds <= 0:
            raise ValueError("window_seconds must be positive")
        self.max_attempts = max_attempts
        self.window_seconds = float(window_seconds)
        self._clock = clock
        self._attempts: Dict[str, Deque[float]] = {}
        self._lock = threading.Lock()

    @classmethod
    def from_settings(cls, settings: Settings) -> "LoginRateLimiter":
        return cls(
            settings.login_rate_limit_attempts,
            settings.login_rate_limit_window_seconds,
        )

    def hit(self, key: str) -> float | None:
        """Record an attempt for ``key``.

        Returns ``None`` when the attempt is allowed, otherwise the number of
        seconds until the caller may try again.
        """

        now = self._clock()
        with self._lock:
            if len(self._attempts) > _SWEEP_THRESHOLD:
                self._sweep(now)

            attempts = self._attempts.setdefault(key, deque())
            self._prune(attempts, now)
            if len(attempts) >= self.max_attempts:
                retry_after = attempts[0] + self.window_seconds - now
                logger.warning("Login rate limit exceeded for %s", key)
                return max(retry_after, 0.0)

            attempts.append(now)
            return None

    def remaining(self, key: str) -> int:
        """Return how many attempts ``key`` has left in the current window."""

        now = self._clock()
        with self._lock:
            attempts = self._attempts.get(key)
            if attempts is None:
                return self.max_attempts
            self._prune(attempts, now)
            return max(self.max_attempts - len(attempts), 0)

    def reset(self, key: str | None = None) -> None:
        with self._lock:
            if key is None:
                self._attempts.clear()
            else:
                self._attempts.pop(key, None)

    def close(self) -> None:
        """Drop all tracked state; called when the application shuts down."""

        self.reset()

    def _prune(self, attempts: Deque[float], now: float) -> None:
        cutoff = now - self.window_seconds
        while attempts and attempts[0] <= cutoff:
            attempts.popleft()

    def _sweep(self, now: float) -> None:
        for key in list(self._attempts):
            attempts = self._attempts[key]
            self._prune(attempts, now)
            if not attempts:
                del self._attempts[key]


def retry_after_header(seconds: float) -> dict[str, str]:
    return {"Retry-After": str(max(math.ceil(seconds), 1))}
