"""Rate limiting for order endpoints.

Counter-with-expiry per (function, caller): the first request in a window
creates a Redis counter with a TTL of the window length, and requests beyond
the limit are refused until the key expires.

If Redis is unreachable the limiter allows requests, so an outage of the
counter store never blocks checkout.
"""

import hashlib
import logging
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional

from fastapi import Depends, HTTPException, status
from redis import Redis
from redis.exceptions import RedisError

from config import Settings, get_settings
from observability.metrics import rate_limited_total
from .dependencies import AuthenticatedUser, get_current_user

logger = logging.getLogger(__name__)

ORDER_VALIDATION_FUNCTION = "validate-order"


def get_redis_client(redis_url: str) -> Redis:
    """Get Redis client for rate limiting.

    The client connects on first command and reconnects after failures, so an
    outage only affects the requests made while Redis is down.
    """
    return Redis.from_url(redis_url, decode_responses=True)


def hash_identifier(raw: str) -> str:
    """Hash a caller identifier so keys never carry personal data."""
    return hashlib.sha256(raw.encode()).hexdigest()[:32]


def _get_rate_limit_key(function_name: str, identifier: str) -> str:
    """Generate Redis key for rate limiting."""
    return f"rate_limit:{function_name}:{identifier}"


@dataclass(frozen=True)
class RateLimitDecision:
    allowed: bool
    retry_after: int = 0


class RateLimiter:
    """Rate limiter using Redis counters with expiry."""

    def __init__(self, redis: Optional[Redis]):
        self.redis = redis

    def hit(
        self,
        function_name: str,
        identifier: str,
        max_requests: int,
        window_seconds: int,
    ) -> RateLimitDecision:
        """Count a request and decide whether it may proceed.

        Args:
            function_name: Endpoint the limit applies to
            identifier: Hashed caller identifier
            max_requests: Requests allowed per window
            window_seconds: Window length in seconds

        Returns:
            RateLimitDecision; retry_after is the seconds left in the window
            when refused
        """
        if self.redis is None:
            return RateLimitDecision(allowed=True)

        key = _get_rate_limit_key(function_name, identifier)
        try:
            count = self.redis.incr(key)
            ttl = self.redis.ttl(key)
            if count == 1 or ttl < 0:
                self.redis.expire(key, window_seconds)
                ttl = window_seconds
        except RedisError as e:
            logger.warning(f"Rate limit check failed for {function_name}, allowing: {e}")
            return RateLimitDecision(allowed=True)

        if count > max_requests:
            return RateLimitDecision(allowed=False, retry_after=max(1, ttl))
        return RateLimitDecision(allowed=True)


@lru_cache()
def get_rate_limiter() -> RateLimiter:
    """Process-wide limiter sharing one Redis connection pool."""
    return RateLimiter(get_redis_client(get_settings().REDIS_URL))


def check_order_rate_limit(
    user: AuthenticatedUser = Depends(get_current_user),
    limiter: RateLimiter = Depends(get_rate_limiter),
    settings: Settings = Depends(get_settings),
) -> AuthenticatedUser:
    """Enforce the order validation rate limit for the calling customer.

    Use as a dependency in FastAPI endpoints; returns the authenticated user
    so endpoints need not depend on get_current_user separately.

    Raises:
        HTTPException 429: If the caller exceeded the limit
    """
    decision = limiter.hit(
        ORDER_VALIDATION_FUNCTION,
        hash_identifier(str(user.user_id)),
        max_requests=settings.RATE_LIMIT_ORDER_MAX_REQUESTS,
        window_seconds=settings.RATE_LIMIT_ORDER_WINDOW,
    )
    if not decision.allowed:
        rate_limited_total.labels(function=ORDER_VALIDATION_FUNCTION).inc()
        logger.info(f"Rate limit exceeded for user {user.user_id}")
        raise HTTPException(
            status_code=status.HTTP_429_TOO_MANY_REQUESTS,
            detail="Rate limit exceeded. Please try again later.",
            headers={"Retry-After": str(decision.retry_after)},
        )
    return user
