"""Data Transfer Objects for API contracts.

These Pydantic models define the external API contract.
Internal domain logic should use entities from the entities package.
"""

from .requests import ItemDetailQuery, ItemsQuery, ListingsCountQuery, ListingsQuery
from .responses import (
    ErrorResponse,
    HealthCheckResponse,
    ItemDetailResponse,
    ItemsSummaryResponse,
    ItemSummaryItem,
    ListingItem,
    ListingsCountResponse,
    PricePointItem,
)

__all__ = [
    "ItemsQuery",
    "ListingsQuery",
    "ItemDetailQuery",
    "ListingsCountQuery",
    "ErrorResponse",
    "HealthCheckResponse",
    "ItemDetailResponse",
    "ItemsSummaryResponse",
    "ItemSummaryItem",
    "ListingItem",
    "ListingsCountResponse",
    "PricePointItem",
]
