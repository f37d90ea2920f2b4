"""Utility modules for the economy API."""

from .cache_keys import (
    ITEM_DETAIL_NAMESPACE,
    ITEMS_NAMESPACE,
    LISTINGS_COUNT_NAMESPACE,
    UNDEFINED,
    derive_key,
)

__all__ = [
    "ITEM_DETAIL_NAMESPACE",
    "ITEMS_NAMESPACE",
    "LISTINGS_COUNT_NAMESPACE",
    "UNDEFINED",
    "derive_key",
]
