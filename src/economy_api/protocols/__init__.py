"""Protocol interfaces for swappable implementations.

Protocols enable:
- Swapping the response cache (in-memory in tests, Redis in production)
- Swapping the economy store (SQLite, PostgreSQL, mocks)
- Clear separation of concerns

Usage:
    ```python
    from economy_api.protocols import EconomyStore, ResponseCache

    cache: ResponseCache = InMemoryResponseCache()
    store: EconomyStore = SqlEconomyRepository()
    ```
"""

from .economy_store import EconomyStore
from .response_cache import ResponseCache

__all__ = [
    "EconomyStore",
    "ResponseCache",
]
