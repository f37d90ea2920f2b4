"""Aggregated item domain entities."""

from dataclasses import dataclass, field
from datetime import date

from .listing import ListingEntity


@dataclass(frozen=True)
class ItemSummaryEntity:
    """Aggregated price and listing data for one item.

    Attributes:
        item_name: Name of the item
        listing_count: Number of listings aggregated
        total_quantity: Sum of listed quantities
        min_price: Lowest listed price
        max_price: Highest listed price
        avg_price: Mean listed price
        last_seen: Latest data date among the listings
    """

    item_name: str
    listing_count: int
    total_quantity: int
    min_price: float
    max_price: float
    avg_price: float
    last_seen: date


@dataclass(frozen=True)
class PricePointEntity:
    """Price aggregate for one item on one data date."""

    date: date
    listing_count: int
    min_price: float
    max_price: float
    avg_price: float


@dataclass(frozen=True)
class ItemDetailEntity:
    """Detailed view of one item.

    Attributes:
        item_name: Name of the item
        season: Season filter applied, None for all seasons
        summary: Aggregate over every matching listing, None when there are none
        price_history: Daily aggregates, oldest first
        listings: Most recent listings, newest first
    """

    item_name: str
    season: int | None
    summary: ItemSummaryEntity | None
    price_history: list[PricePointEntity] = field(default_factory=list)
    listings: list[ListingEntity] = field(default_factory=list)
