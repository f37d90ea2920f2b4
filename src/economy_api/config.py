import os
from dataclasses import dataclass
from functools import lru_cache

import redis
from dotenv import load_dotenv

load_dotenv()

CACHE_BACKENDS = ("memory", "redis")


@dataclass(frozen=True)
class Settings:
    """Application settings loaded from environment variables."""

    # Economy
    current_season: int = int(os.getenv("CURRENT_SEASON", "1"))
    default_days: int = int(os.getenv("DEFAULT_DAYS", "7"))
    default_listing_limit: int = int(os.getenv("DEFAULT_LISTING_LIMIT", "100"))

    # Database
    database_url: str = os.getenv("DATABASE_URL", "sqlite+aiosqlite:///economy.db")

    # Cache
    cache_backend: str = os.getenv("CACHE_BACKEND", "memory").lower()
    cache_ttl: int = int(os.getenv("CACHE_TTL", "300"))  # 0 disables expiry
    cache_key_prefix: str = os.getenv("CACHE_KEY_PREFIX", "")

    # Redis
    redis_url: str = os.getenv("REDIS_URL", "redis://localhost:6379")
    redis_password: str | None = os.getenv("REDIS_PASSWORD")

    # API
    api_host: str = os.getenv("API_HOST", "0.0.0.0")
    api_port: int = int(os.getenv("API_PORT", "8000"))
    api_reload: bool = os.getenv("API_RELOAD", "false").lower() == "true"

    # Logging
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_json: bool = os.getenv("LOG_JSON", "false").lower() == "true"

    @property
    def uses_redis(self) -> bool:
        """Check if responses are cached in Redis.

        Returns:
            True if the Redis backend is configured, False otherwise
        """
        return self.cache_backend == "redis"

    def __post_init__(self) -> None:
        """Validate settings after initialization."""
        if self.current_season < 1:
            raise ValueError("CURRENT_SEASON must be a positive integer")

        if self.default_days < 1:
            raise ValueError("DEFAULT_DAYS must be a positive integer")

        if self.default_listing_limit < 1:
            raise ValueError("DEFAULT_LISTING_LIMIT must be a positive integer")

        if self.cache_backend not in CACHE_BACKENDS:
            raise ValueError(
                f"CACHE_BACKEND must be one of {list(CACHE_BACKENDS)}, "
                f"got {self.cache_backend!r}"
            )

        if self.cache_ttl < 0:
            raise ValueError("CACHE_TTL must not be negative")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Global settings instance
settings = get_settings()


def get_redis_client() -> redis.Redis:
    """Create a Redis client instance."""
    return redis.from_url(
        settings.redis_url,
        password=settings.redis_password,
        decode_responses=True,
    )
