"""Health check utilities.

The only infrastructure dependency is Redis, which backs rate limiting.
Because the limiter degrades to allowing requests, a Redis outage makes the
service DEGRADED rather than UNHEALTHY.
"""

import time
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional

from redis import Redis
from redis.exceptions import RedisError

from .logging_config import get_logger

logger = get_logger(__name__)


class HealthStatus(str, Enum):
    """Health check status enum."""
    HEALTHY = "healthy"
    UNHEALTHY = "unhealthy"
    DEGRADED = "degraded"


@dataclass
class ComponentHealth:
    """Health status for a single component."""
    status: HealthStatus
    message: Optional[str] = None
    latency_ms: Optional[float] = None


def check_redis_health(redis_url: str) -> ComponentHealth:
    """Check Redis connectivity.

    Args:
        redis_url: Redis connection string

    Returns:
        ComponentHealth: HEALTHY with latency, or DEGRADED on failure
    """
    try:
        client = Redis.from_url(redis_url, decode_responses=True)

        start = time.perf_counter()
        client.ping()
        latency_ms = (time.perf_counter() - start) * 1000

        return ComponentHealth(
            status=HealthStatus.HEALTHY,
            message="Redis connection OK",
            latency_ms=round(latency_ms, 2)
        )
    except RedisError as e:
        logger.warning(f"Redis health check failed: {e}")
        return ComponentHealth(
            status=HealthStatus.DEGRADED,
            message=f"Redis error: {str(e)}; rate limiting disabled"
        )


def get_overall_health(components: Dict[str, ComponentHealth]) -> HealthStatus:
    """Determine overall health from component statuses."""
    if all(c.status == HealthStatus.HEALTHY for c in components.values()):
        return HealthStatus.HEALTHY

    if any(c.status == HealthStatus.UNHEALTHY for c in components.values()):
        return HealthStatus.UNHEALTHY

    return HealthStatus.DEGRADED
