"""Unit tests for the counter-with-expiry rate limiter"""

from redis import Redis
from redis.exceptions import ConnectionError as RedisConnectionError

from auth.rate_limit import RateLimiter, get_redis_client, hash_identifier


class BrokenRedis:
    """Redis client whose every command fails."""

    def incr(self, key):
        raise RedisConnectionError("connection refused")


class FlakyRedis:
    """Wraps a Redis stand-in and refuses commands while `down` is set."""

    def __init__(self, redis):
        self.redis = redis
        self.down = False

    def _check(self):
        if self.down:
            raise RedisConnectionError("connection refused")

    def incr(self, key):
        self._check()
        return self.redis.incr(key)

    def expire(self, key, seconds):
        self._check()
        return self.redis.expire(key, seconds)

    def ttl(self, key):
        self._check()
        return self.redis.ttl(key)


class TestRateLimiter:
    def test_allows_up_to_limit_then_refuses(self, rate_limiter):
        decisions = [
            rate_limiter.hit("validate-order", "abc", max_requests=3, window_seconds=3600)
            for _ in range(4)
        ]

        assert [d.allowed for d in decisions] == [True, True, True, False]
        assert decisions[-1].retry_after == 3600

    def test_window_expiry_resets_counter(self, rate_limiter, fake_redis):
        for _ in range(2):
            rate_limiter.hit("validate-order", "abc", max_requests=2, window_seconds=60)
        assert rate_limiter.hit("validate-order", "abc", 2, 60).allowed is False

        fake_redis.advance(60)

        assert rate_limiter.hit("validate-order", "abc", 2, 60).allowed is True

    def test_retry_after_counts_down(self, rate_limiter, fake_redis):
        rate_limiter.hit("validate-order", "abc", 1, 600)
        fake_redis.advance(100)

        decision = rate_limiter.hit("validate-order", "abc", 1, 600)

        assert decision.allowed is False
        assert decision.retry_after == 500

    def test_limits_are_per_function_and_identifier(self, rate_limiter):
        assert rate_limiter.hit("validate-order", "abc", 1, 60).allowed is True
        assert rate_limiter.hit("validate-order", "abc", 1, 60).allowed is False
        assert rate_limiter.hit("validate-order", "xyz", 1, 60).allowed is True
        assert rate_limiter.hit("send-contact-email", "abc", 1, 60).allowed is True

    def test_no_redis_allows_everything(self):
        limiter = RateLimiter(None)
        for _ in range(5):
            assert limiter.hit("validate-order", "abc", 1, 60).allowed is True

    def test_redis_errors_allow_request(self):
        limiter = RateLimiter(BrokenRedis())

        assert limiter.hit("validate-order", "abc", 1, 60).allowed is True
        assert limiter.hit("validate-order", "abc", 1, 60).allowed is True


class TestRedisOutage:
    """Limiting resumes once Redis comes back, without a restart"""

    def test_outage_at_startup_then_recovery(self, fake_redis):
        redis = FlakyRedis(fake_redis)
        redis.down = True
        limiter = RateLimiter(redis)

        for _ in range(3):
            assert limiter.hit("validate-order", "abc", 1, 60).allowed is True

        redis.down = False

        decisions = [limiter.hit("validate-order", "abc", 1, 60) for _ in range(2)]
        assert [d.allowed for d in decisions] == [True, False]
        assert decisions[-1].retry_after == 60

    def test_outage_mid_window_then_recovery(self, fake_redis):
        redis = FlakyRedis(fake_redis)
        limiter = RateLimiter(redis)
        assert limiter.hit("validate-order", "abc", 2, 60).allowed is True

        redis.down = True
        assert limiter.hit("validate-order", "abc", 2, 60).allowed is True

        redis.down = False
        assert limiter.hit("validate-order", "abc", 2, 60).allowed is True
        assert limiter.hit("validate-order", "abc", 2, 60).allowed is False


class TestGetRedisClient:
    def test_unreachable_url_still_builds_a_client(self):
        """No connection is made until the first command"""
        client = get_redis_client("redis://localhost:1/0")

        assert isinstance(client, Redis)

    def test_unreachable_server_allows_requests(self):
        limiter = RateLimiter(get_redis_client("redis://localhost:1/0"))

        assert limiter.hit("validate-order", "abc", 1, 60).allowed is True
        assert limiter.hit("validate-order", "abc", 1, 60).allowed is True


class TestHashIdentifier:
    def test_is_stable_and_opaque(self):
        hashed = hash_identifier("jana@example.sk")

        assert hashed == hash_identifier("jana@example.sk")
        assert len(hashed) == 32
        assert "jana" not in hashed

    def test_distinct_inputs_differ(self):
        assert hash_identifier("a") != hash_identifier("b")
