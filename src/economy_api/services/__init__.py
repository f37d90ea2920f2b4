"""Service layer for business logic.

Services depend on protocols (interfaces), not concrete implementations,
making them testable and flexible.

Architecture:
    Handler -> Service -> Repository
    (HTTP)  -> (Business) -> (Data Access)

Usage:
    ```python
    from economy_api.services import EconomyService

    service = EconomyService.create(store=store, cache=cache)
    ```
"""

from .economy_service import EconomyService

__all__ = [
    "EconomyService",
]
