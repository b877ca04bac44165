"""
Rate limiting -- prevents any single client from flooding the validators.

Uses a simple in-memory sliding window counter per client IP. The limiter
lives on app.state so each app instance (and each test) has its own window.

Limit comes from Settings.rate_limit_per_minute.
"""

import logging
import time
from collections import defaultdict

from fastapi import HTTPException, Request

logger = logging.getLogger(__name__)

WINDOW_SECONDS = 60.0


class RateLimiter:
    """Sliding-window request counter keyed by client id."""

    def __init__(self, limit_per_minute: int):
        self.limit = limit_per_minute
        self._request_log: dict[str, list[float]] = defaultdict(list)

    def _cleanup_old_entries(self, client_id: str, now: float) -> None:
        cutoff = now - WINDOW_SECONDS
        self._request_log[client_id] = [
            ts for ts in self._request_log[client_id] if ts > cutoff
        ]

    def allow(self, client_id: str) -> bool:
        """Record a request. False when the client is over the limit."""
        now = time.time()
        self._cleanup_old_entries(client_id, now)
        if len(self._request_log[client_id]) >= self.limit:
            return False
        self._request_log[client_id].append(now)
        return True


async def check_rate_limit(request: Request) -> None:
    """
    Check if the client has exceeded the rate limit.

    Call this as a dependency in routes that need rate limiting.
    Raises HTTP 429 if the limit is exceeded.
    """
    limiter: RateLimiter | None = getattr(request.app.state, "rate_limiter", None)
    if limiter is None:
        return

    client_ip = request.client.host if request.client else "unknown"
    if not limiter.allow(client_ip):
        logger.warning(f"[RateLimit] Client {client_ip} exceeded {limiter.limit}/min")
        raise HTTPException(
            status_code=429,
            detail=f"Rate limit exceeded ({limiter.limit} requests per minute)",
            headers={"Retry-After": "60"},
        )
