"""Repository layer for data access.

This layer hides the database and the cache backend behind
protocol-based interfaces. This enables:
- Swapping the cache (in-memory for tests, Redis in production)
- Unit testing with mock implementations
- Clear separation of concerns
"""

from economy_api.protocols import EconomyStore, ResponseCache

from .memory_cache import InMemoryResponseCache
from .redis_cache import RedisResponseCache
from .sql_repository import SqlEconomyRepository

__all__ = [
    "EconomyStore",
    "ResponseCache",
    "InMemoryResponseCache",
    "RedisResponseCache",
    "SqlEconomyRepository",
]
