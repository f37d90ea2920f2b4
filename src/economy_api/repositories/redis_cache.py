"""Redis implementation of ResponseCache.

Payloads are stored as JSON strings under ``{prefix}{key}`` with an
optional expiry. The cache is best effort: Redis failures are logged and
read as misses.
"""

import json
from typing import Any

import redis

from economy_api.config import get_redis_client, settings
from economy_api.logging import get_logger

logger = get_logger(__name__)


class RedisResponseCache:
    """Redis-backed response cache.

    This class satisfies the ResponseCache protocol through structural
    typing - no explicit inheritance needed.
    """

    def __init__(
        self,
        redis_client: redis.Redis | None = None,
        ttl: int | None = None,
        key_prefix: str | None = None,
    ) -> None:
        """Initialize the Redis response cache.

        Args:
            redis_client: Redis client instance. If None, creates default.
            ttl: Time-to-live for entries in seconds, 0 for no expiry.
            key_prefix: Prefix prepended to every key.
        """
        self._client = redis_client or get_redis_client()
        self._ttl = settings.cache_ttl if ttl is None else ttl
        self._prefix = settings.cache_key_prefix if key_prefix is None else key_prefix

    @classmethod
    def create(
        cls,
        ttl: int | None = None,
        key_prefix: str | None = None,
    ) -> "RedisResponseCache":
        """Factory method to create RedisResponseCache with defaults.

        Args:
            ttl: Entry TTL in seconds. If None, uses settings.
            key_prefix: Key prefix. If None, uses settings.

        Returns:
            Configured RedisResponseCache
        """
        return cls(ttl=ttl, key_prefix=key_prefix)

    def _full_key(self, key: str) -> str:
        return f"{self._prefix}{key}"

    def get(self, key: str) -> Any | None:
        """Look up a cached payload.

        Args:
            key: The derived cache key

        Returns:
            The decoded payload, or None on a miss or Redis failure
        """
        try:
            raw = self._client.get(self._full_key(key))
        except redis.RedisError as e:
            logger.warning("Cache read failed", key=key, error=str(e))
            return None

        if raw is None:
            return None

        try:
            return json.loads(raw)
        except json.JSONDecodeError as e:
            logger.warning("Discarding undecodable cache entry", key=key, error=str(e))
            return None

    def set(self, key: str, value: Any) -> None:
        """Store a payload as JSON.

        Args:
            key: The derived cache key
            value: JSON-serializable payload
        """
        data = json.dumps(value)
        try:
            self._client.set(self._full_key(key), data, ex=self._ttl or None)
        except redis.RedisError as e:
            logger.warning("Cache write failed", key=key, error=str(e))

    def health_check(self) -> bool:
        """Check if Redis is accessible.

        Returns:
            True if healthy, False otherwise
        """
        try:
            return bool(self._client.ping())
        except redis.RedisError:
            return False
