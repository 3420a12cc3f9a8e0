"""Application configuration via environment variables.

Provides type-safe settings loading using pydantic-settings.
Environment variables can be loaded from a .env file.
"""

from decimal import Decimal
from functools import lru_cache

from pydantic_settings import BaseSettings

from domain.ordering.models import ValidationLimits


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    All settings have sensible defaults for development. JWT_SECRET is
    read directly by auth.jwt and MUST be set in every environment.

    Environment Variables:
        REDIS_URL: Redis connection string (rate limit counters)
        ORDER_TIMEZONE: Timezone used for the ordering cutoff
        LOG_LEVEL: Logging level (default INFO)
        LOG_JSON: Emit JSON log lines (default True)
    """

    # Application
    ENVIRONMENT: str = "development"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = True
    CORS_ORIGINS: str = "http://localhost:5173,http://localhost:8080"

    # Redis
    REDIS_URL: str = "redis://localhost:6379/0"

    # Rate Limiting (order validation)
    RATE_LIMIT_ORDER_MAX_REQUESTS: int = 10
    RATE_LIMIT_ORDER_WINDOW: int = 3600  # seconds

    # Order admission
    ORDER_MAX_QUANTITY_PER_ITEM: int = 50
    ORDER_MAX_TOTAL_VALUE: Decimal = Decimal("10000")
    ORDER_MAX_CART_ITEMS: int = 20
    ORDER_DEFAULT_WEEKLY_DAYS: int = 5
    ORDER_CUTOFF_HOUR: int = 12
    ORDER_TIMEZONE: str = "Europe/Bratislava"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = True
        extra = "ignore"

    @property
    def cors_origins(self) -> list[str]:
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]

    def validation_limits(self) -> ValidationLimits:
        """Build the immutable admission limits from settings."""
        return ValidationLimits(
            max_quantity_per_item=self.ORDER_MAX_QUANTITY_PER_ITEM,
            max_total_order_value=self.ORDER_MAX_TOTAL_VALUE,
            max_cart_items=self.ORDER_MAX_CART_ITEMS,
            default_weekly_days=self.ORDER_DEFAULT_WEEKLY_DAYS,
            order_cutoff_hour=self.ORDER_CUTOFF_HOUR,
        )


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance.

    Uses lru_cache for singleton behavior.
    Call get_settings.cache_clear() to reload settings.
    """
    return Settings()
