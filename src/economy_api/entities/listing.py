"""Listing domain entity."""

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class ListingEntity:
    """Domain entity for a single market listing.

    Attributes:
        id: Storage identifier (None until persisted)
        item_name: Name of the listed item
        season: Season the listing belongs to
        price: Unit price asked or paid
        quantity: Number of units in the listing
        data_date: Date the market event happened
        ingestion_date: Date the record was recorded into the system
        seller: Optional seller identifier
    """

    item_name: str
    season: int
    price: float
    quantity: int
    data_date: date
    ingestion_date: date
    seller: str | None = None
    id: int | None = None
