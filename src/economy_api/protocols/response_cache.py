"""Response cache protocol.

Defines the interface for any key-value backend that can hold computed
API responses addressed by a derived cache key.

Implementations can include:
- In-process dictionary (default)
- Redis
- Memcached
"""

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class ResponseCache(Protocol):
    """Protocol for response cache backends.

    Any type that implements these methods satisfies the protocol,
    no explicit inheritance needed. Staleness policy (TTL, capacity)
    belongs to the backend.

    Example:
        ```python
        from economy_api.protocols import ResponseCache

        cache: ResponseCache = InMemoryResponseCache()
        cache: ResponseCache = RedisResponseCache(...)
        ```
    """

    def get(self, key: str) -> Any | None:
        """Look up a cached payload.

        Args:
            key: The derived cache key

        Returns:
            The stored payload, or None on a miss
        """
        ...

    def set(self, key: str, value: Any) -> None:
        """Store a payload, overwriting any prior value at the key.

        Args:
            key: The derived cache key
            value: JSON-serializable payload
        """
        ...

    def health_check(self) -> bool:
        """Check if the backend is accessible.

        Returns:
            True if healthy, False otherwise
        """
        ...
