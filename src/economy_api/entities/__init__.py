"""Domain entities for internal representation.

These are pure dataclasses (frozen) used internally by services
and repositories. They are NOT used for API contracts - use DTOs
from the dto package for that.
"""

from .item_summary import ItemDetailEntity, ItemSummaryEntity, PricePointEntity
from .listing import ListingEntity

__all__ = [
    "ItemDetailEntity",
    "ItemSummaryEntity",
    "ListingEntity",
    "PricePointEntity",
]
