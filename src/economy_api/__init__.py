"""Economy API - read-only HTTP endpoints over market listings.

This package provides a layered architecture:

Layers:
    - protocols: Interface contracts (EconomyStore, ResponseCache)
    - repositories: Data access implementations (SQL store, caches)
    - services: Business logic returning Ok / Err results
    - handlers: HTTP endpoint handlers
    - dto: Data transfer objects (API contracts)
    - entities: Domain models (internal)

Usage:
    ```python
    from economy_api.repositories import InMemoryResponseCache, SqlEconomyRepository
    from economy_api.services import EconomyService

    service = EconomyService.create(
        store=SqlEconomyRepository.create(),
        cache=InMemoryResponseCache(),
    )
    ```

For HTTP API:
    ```python
    from economy_api.api.app import app, create_app
    ```
"""

from economy_api.config import get_redis_client, settings
from economy_api.dto import ItemDetailQuery, ItemsQuery, ListingsCountQuery, ListingsQuery
from economy_api.entities import (
    ItemDetailEntity,
    ItemSummaryEntity,
    ListingEntity,
    PricePointEntity,
)
from economy_api.handlers import EconomyHandler
from economy_api.protocols import EconomyStore, ResponseCache
from economy_api.repositories import (
    InMemoryResponseCache,
    RedisResponseCache,
    SqlEconomyRepository,
)
from economy_api.result import Err, ErrorKind, Ok
from economy_api.services import EconomyService
from economy_api.utils import derive_key

__all__ = [
    # Configuration
    "settings",
    "get_redis_client",
    # Protocols (interfaces)
    "EconomyStore",
    "ResponseCache",
    # Services (business logic)
    "EconomyService",
    "Ok",
    "Err",
    "ErrorKind",
    # Handlers (HTTP)
    "EconomyHandler",
    # Repositories (data access)
    "InMemoryResponseCache",
    "RedisResponseCache",
    "SqlEconomyRepository",
    # Entities (domain models)
    "ListingEntity",
    "ItemSummaryEntity",
    "ItemDetailEntity",
    "PricePointEntity",
    # DTOs (API contracts)
    "ItemsQuery",
    "ListingsQuery",
    "ItemDetailQuery",
    "ListingsCountQuery",
    # Cache keys
    "derive_key",
]
