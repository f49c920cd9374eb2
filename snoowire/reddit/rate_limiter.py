"""
Sliding-window rate limiter for Reddit API requests.

Reddit allows OAuth clients 100 requests per 60 seconds. Services await
``acquire()`` before every request so a burst of concurrent calls never
trips the server-side limit.
"""

import asyncio
import time
from collections import deque
from typing import Any, Dict, Optional

import structlog

logger = structlog.get_logger(__name__)


class TokenBucketRateLimiter:
    """
    Rate limiter over a sliding time window.

    Timestamps of granted requests are kept in a deque; a request is
    granted when fewer than ``max_calls`` of them fall inside the last
    ``period_seconds``. Otherwise the caller sleeps until the oldest one
    leaves the window.

    Safe for concurrent coroutines on one event loop (asyncio.Lock).
    """

    def __init__(self, max_calls: int = 100, period_seconds: float = 60) -> None:
        """
        Initialize the rate limiter.

        Args:
            max_calls: Maximum number of requests per window (default: 100)
            period_seconds: Window length in seconds (default: 60)

        Raises:
            ValueError: If either argument is not positive
        """
        if max_calls <= 0:
            raise ValueError("max_calls must be positive")
        if period_seconds <= 0:
            raise ValueError("period_seconds must be positive")

        self.max_calls = max_calls
        self.period_seconds = period_seconds
        self.calls: deque[float] = deque()
        self.lock = asyncio.Lock()

        logger.debug(
            "rate_limiter_initialized",
            max_calls=max_calls,
            period_seconds=period_seconds,
        )

    def _prune(self, now: float) -> None:
        while self.calls and now - self.calls[0] >= self.period_seconds:
            self.calls.popleft()

    async def acquire(self) -> float:
        """
        Wait until a request may be sent, then record it.

        Returns:
            Seconds spent waiting (0.0 when capacity was available)

        Example:
            >>> limiter = TokenBucketRateLimiter(max_calls=100, period_seconds=60)
            >>> await limiter.acquire()
            0.0
        """
        waited = 0.0

        while True:
            async with self.lock:
                now = time.monotonic()
                self._prune(now)

                if len(self.calls) < self.max_calls:
                    self.calls.append(now)
                    if len(self.calls) > self.max_calls * 0.9:
                        logger.warning(
                            "rate_limit_approaching",
                            calls_made=len(self.calls),
                            max_calls=self.max_calls,
                        )
                    return waited

                # small buffer so the oldest call has really left the window
                wait_time = self.calls[0] + self.period_seconds - now + 0.01

            logger.warning(
                "rate_limit_hit",
                calls_made=len(self.calls),
                max_calls=self.max_calls,
                wait_seconds=round(wait_time, 2),
            )

            # lock released while sleeping
            await asyncio.sleep(wait_time)
            waited += wait_time

    def get_remaining(self) -> int:
        """Number of requests that can be sent right now without waiting."""
        now = time.monotonic()
        in_window = sum(1 for c in self.calls if now - c < self.period_seconds)
        return max(0, self.max_calls - in_window)

    async def reset(self) -> None:
        """Forget all recorded requests."""
        async with self.lock:
            self.calls.clear()
            logger.info("rate_limiter_reset")

    def get_stats(self) -> Dict[str, Any]:
        """
        Get current rate limiter statistics.

        Returns:
            Dictionary with calls made in the window, remaining capacity,
            limits, age of the oldest call and utilization percent.
        """
        now = time.monotonic()
        in_window = [c for c in self.calls if now - c < self.period_seconds]
        calls_made = len(in_window)

        oldest_call_age: Optional[float] = None
        if in_window:
            oldest_call_age = round(now - min(in_window), 3)

        return {
            "calls_made": calls_made,
            "remaining": self.max_calls - calls_made,
            "max_calls": self.max_calls,
            "period_seconds": self.period_seconds,
            "oldest_call_age_seconds": oldest_call_age,
            "utilization_percent": round(calls_made / self.max_calls * 100, 2),
        }
