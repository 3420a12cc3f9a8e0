"""Pytest fixtures for the order admission backend.

Provides reusable test fixtures for:
- A fixed clock so the ordering cutoff is deterministic
- An in-memory Redis stand-in for rate limiting
- Access tokens and authenticated test clients

Usage:
    def test_validate(authenticated_client, valid_payload):
        response = authenticated_client.post("/api/v1/orders/validate", json=valid_payload)
        assert response.status_code == 200
"""

import os
import sys
from datetime import date, datetime
from pathlib import Path
from typing import Generator
from uuid import UUID

# Set environment variables BEFORE any imports to ensure they take effect
os.environ.setdefault("JWT_SECRET", "test-jwt-secret-key-256-bits-minimum-length-required-for-security")
os.environ.setdefault("REDIS_URL", "redis://localhost:1/0")
os.environ.setdefault("LOG_JSON", "false")

backend_src = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(backend_src))

import pytest
from fastapi.testclient import TestClient

from auth.jwt import create_access_token
from auth.rate_limit import RateLimiter, get_rate_limiter
from domain.ordering.clock import ClockPort


TEST_USER_ID = UUID("550e8400-e29b-41d4-a716-446655440000")

# Monday of the weekly menu used throughout the tests
MENU_MONDAY = date(2025, 1, 6)


class FixedClock(ClockPort):
    """Clock frozen at a given instant."""

    def __init__(self, instant: datetime):
        self.instant = instant

    def now(self) -> datetime:
        return self.instant


class InMemoryRedis:
    """Minimal in-memory stand-in for the Redis commands the limiter uses.

    Time is advanced manually with `advance()` so key expiry is deterministic.
    """

    def __init__(self):
        self.values: dict[str, int] = {}
        self.expires_at: dict[str, float] = {}
        self.clock = 0.0

    def advance(self, seconds: float) -> None:
        self.clock += seconds
        for key, deadline in list(self.expires_at.items()):
            if deadline <= self.clock:
                self.values.pop(key, None)
                self.expires_at.pop(key, None)

    def incr(self, key: str) -> int:
        self.values[key] = self.values.get(key, 0) + 1
        return self.values[key]

    def expire(self, key: str, seconds: int) -> bool:
        if key not in self.values:
            return False
        self.expires_at[key] = self.clock + seconds
        return True

    def ttl(self, key: str) -> int:
        if key not in self.values:
            return -2
        if key not in self.expires_at:
            return -1
        return int(self.expires_at[key] - self.clock)

    def get(self, key: str):
        value = self.values.get(key)
        return None if value is None else str(value)


@pytest.fixture
def fake_redis() -> InMemoryRedis:
    return InMemoryRedis()


@pytest.fixture
def rate_limiter(fake_redis: InMemoryRedis) -> RateLimiter:
    return RateLimiter(fake_redis)


@pytest.fixture
def fixed_now() -> datetime:
    """Thursday before the menu week, 09:00 - every menu day is orderable."""
    return datetime(2025, 1, 2, 9, 0)


@pytest.fixture
def access_token() -> str:
    return create_access_token(user_id=TEST_USER_ID, email="jana@example.sk")


@pytest.fixture
def client(rate_limiter: RateLimiter, fixed_now: datetime) -> Generator[TestClient, None, None]:
    """Unauthenticated test client with clock and rate limiter overridden."""
    from main import app
    from api.v1.orders.router import get_clock

    app.dependency_overrides[get_clock] = lambda: FixedClock(fixed_now)
    app.dependency_overrides[get_rate_limiter] = lambda: rate_limiter

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def authenticated_client(client: TestClient, access_token: str) -> TestClient:
    """Test client with the customer's bearer token pre-configured."""
    client.headers.update({"Authorization": f"Bearer {access_token}"})
    return client


@pytest.fixture
def valid_payload() -> dict:
    """A cart the storefront would submit for a full weekly plan."""
    return {
        "cartItems": [
            {
                "type": "week",
                "size": "M",
                "isVegetarian": False,
                "selectedDays": ["Pondelok", "Utorok", "Streda", "Štvrtok", "Piatok"],
                "menu": {
                    "start_date": MENU_MONDAY.isoformat(),
                    "items": [{"day": "Pondelok"}, {"day": "Utorok"}, {"day": "Streda"},
                              {"day": "Štvrtok"}, {"day": "Piatok"}],
                },
            },
        ],
        "totalPrice": 89.90,
        "deliveryRegion": "nitra",
    }
