"""Economy data store protocol.

Defines the read interface the service layer needs from the database
holding market listings.
"""

from datetime import date
from typing import Protocol, runtime_checkable

from economy_api.entities import ItemDetailEntity, ItemSummaryEntity, ListingEntity


@runtime_checkable
class EconomyStore(Protocol):
    """Protocol for economy data backends."""

    async def get_items_summary(self, season: int, days: int) -> list[ItemSummaryEntity]:
        """Aggregate listings per item over a trailing day window.

        Args:
            season: Season to aggregate
            days: Number of days of history, counting today

        Returns:
            One summary per item
        """
        ...

    async def get_total_listings_count(self, season: int) -> int:
        """Count every listing in a season."""
        ...

    async def get_listings_by_data_date(
        self,
        item_name: str,
        data_date: date,
        season: int | None = None,
    ) -> list[ListingEntity]:
        """Get an item's listings for the date the market event happened.

        Args:
            item_name: Name of the item
            data_date: Market event date
            season: Optional season filter

        Returns:
            Matching listings
        """
        ...

    async def get_listings_by_ingestion_date(
        self,
        item_name: str,
        ingestion_date: date,
        season: int | None = None,
    ) -> list[ListingEntity]:
        """Get an item's listings for the date they were recorded.

        Args:
            item_name: Name of the item
            ingestion_date: Ingestion date
            season: Optional season filter

        Returns:
            Matching listings
        """
        ...

    async def get_item_detail(
        self,
        item_name: str,
        season: int | None = None,
        limit: int = 100,
    ) -> ItemDetailEntity:
        """Get summary, price history and recent listings for an item.

        Args:
            item_name: Name of the item
            season: Optional season filter
            limit: Maximum number of recent listings to include

        Returns:
            The item detail
        """
        ...

    async def health_check(self) -> bool:
        """Check if the database is accessible."""
        ...
