"""Economy service for core business logic.

This service answers the economy queries by coordinating the response
cache and the economy store. Every operation returns an explicit result
(``Ok`` or ``Err``) instead of raising.
"""

from collections.abc import Callable
from datetime import date, datetime, timezone

from economy_api.config import settings
from economy_api.dto import (
    ItemDetailResponse,
    ItemsSummaryResponse,
    ItemSummaryItem,
    ListingItem,
    ListingsCountResponse,
)
from economy_api.logging import get_logger
from economy_api.protocols import EconomyStore, ResponseCache
from economy_api.result import Err, ErrorKind, Ok, Result
from economy_api.utils import (
    ITEM_DETAIL_NAMESPACE,
    ITEMS_NAMESPACE,
    LISTINGS_COUNT_NAMESPACE,
    derive_key,
)

logger = get_logger("economy_api.api")

ITEMS_ERROR = "Failed to fetch item data"
LISTINGS_ERROR = "Failed to fetch listings"
ITEM_DETAIL_ERROR = "Failed to fetch item detail"
LISTINGS_COUNT_ERROR = "Failed to fetch listings count"
MISSING_DATE_ERROR = "Either date or ingestionDate query parameter is required"
INVALID_DATE_ERROR = "Invalid date format, expected YYYY-MM-DD"
DATE_FORMAT = "%Y-%m-%d"


def parse_date(value: str) -> date:
    """Parse a strict YYYY-MM-DD date.

    Raises:
        ValueError: For any other spelling, e.g. ``20240101`` or ``2024-1-1``
    """
    parsed = datetime.strptime(value, DATE_FORMAT).date()
    if parsed.isoformat() != value:
        raise ValueError(f"{value!r} is not in YYYY-MM-DD format")
    return parsed


def utc_timestamp() -> str:
    """Current UTC time as ISO-8601 with millisecond precision and a Z suffix."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


class EconomyService:
    """Core economy query service.

    This service depends on PROTOCOLS, not concrete implementations:
    - EconomyStore: SQLite, PostgreSQL, a mock in tests
    - ResponseCache: in-memory dict, Redis

    Cached operations (items summary, item detail, listings count) read
    through the cache by hand: derive the key, return a hit verbatim,
    otherwise query the store and cache the assembled payload.

    Example:
        ```python
        from economy_api.repositories import InMemoryResponseCache, SqlEconomyRepository
        from economy_api.services import EconomyService

        service = EconomyService.create(
            store=SqlEconomyRepository.create(),
            cache=InMemoryResponseCache(),
        )
        result = await service.items_summary(season=3)
        ```
    """

    def __init__(
        self,
        store: EconomyStore,
        cache: ResponseCache,
        current_season: int | None = None,
        default_days: int | None = None,
        default_limit: int | None = None,
        clock: Callable[[], str] | None = None,
    ) -> None:
        """Initialize the economy service.

        Args:
            store: Economy data backend (required).
            cache: Response cache backend (required).
            current_season: Season used when a request names none. Defaults to settings.
            default_days: Items summary day window. Defaults to settings.
            default_limit: Item detail listing limit. Defaults to settings.
            clock: Produces the ``lastUpdated`` timestamp. Defaults to UTC now.
        """
        self._store = store
        self._cache = cache
        self._current_season = current_season or settings.current_season
        self._default_days = default_days or settings.default_days
        self._default_limit = default_limit or settings.default_listing_limit
        self._clock = clock or utc_timestamp

    @classmethod
    def create(
        cls,
        store: EconomyStore,
        cache: ResponseCache,
        current_season: int | None = None,
    ) -> "EconomyService":
        """Factory method to create EconomyService with settings defaults.

        Args:
            store: Economy data backend (required).
            cache: Response cache backend (required).
            current_season: Override the configured current season.

        Returns:
            Configured EconomyService instance
        """
        return cls(store=store, cache=cache, current_season=current_season)

    async def items_summary(self, season: int | None = None, days: int | None = None) -> Result:
        """Aggregated price data for every item in a season.

        The payload also carries the season's total listing count and the
        time it was computed; both are cached with the items.

        Args:
            season: Season, defaults to the current season
            days: Days of history, defaults to the configured window

        Returns:
            Ok with ``{items, totalListings, lastUpdated}`` or Err
        """
        try:
            season_number = season if season is not None else self._current_season
            days_of_history = days if days is not None else self._default_days
            cache_key = derive_key(ITEMS_NAMESPACE, season_number, days_of_history)

            cached = self._cache.get(cache_key)
            if cached is not None:
                logger.debug("Cache hit", key=cache_key)
                return Ok(cached)

            items = await self._store.get_items_summary(season_number, days_of_history)
            total_listings = await self._store.get_total_listings_count(season_number)

            payload = ItemsSummaryResponse(
                items=[ItemSummaryItem.from_entity(item) for item in items],
                total_listings=total_listings,
                last_updated=self._clock(),
            ).to_payload()

            self._cache.set(cache_key, payload)
            return Ok(payload)

        except Exception as e:
            logger.error("Error fetching item data", error=str(e))
            return Err(ErrorKind.DOWNSTREAM, ITEMS_ERROR)

    async def listings(
        self,
        item_name: str,
        data_date: str | None = None,
        ingestion_date: str | None = None,
        season: int | None = None,
    ) -> Result:
        """Listings of one item on a given date. Never cached.

        ``data_date`` selects by market event date and wins when both
        selectors are given; otherwise ``ingestion_date`` selects by the
        date the records were ingested.

        Args:
            item_name: Name of the item
            data_date: Market event date (YYYY-MM-DD)
            ingestion_date: Ingestion date (YYYY-MM-DD)
            season: Optional season filter

        Returns:
            Ok with a list of listings, or Err
        """
        if not data_date and not ingestion_date:
            return Err(ErrorKind.INVALID_INPUT, MISSING_DATE_ERROR)

        try:
            selected = parse_date(data_date or ingestion_date)
        except ValueError:
            return Err(ErrorKind.INVALID_INPUT, INVALID_DATE_ERROR)

        try:
            if data_date:
                listings = await self._store.get_listings_by_data_date(item_name, selected, season)
            else:
                listings = await self._store.get_listings_by_ingestion_date(
                    item_name, selected, season
                )

            return Ok([ListingItem.from_entity(listing).to_payload() for listing in listings])

        except Exception as e:
            logger.error("Error fetching listings", error=str(e))
            return Err(ErrorKind.DOWNSTREAM, LISTINGS_ERROR)

    async def item_detail(
        self,
        item_name: str,
        season: int | None = None,
        limit: int | None = None,
    ) -> Result:
        """Summary, price history and recent listings of one item.

        The season is not defaulted: without one, every season counts and
        the cache key carries the ``undefined`` placeholder.

        Args:
            item_name: Name of the item
            season: Optional season filter
            limit: Maximum number of recent listings

        Returns:
            Ok with the item detail, or Err
        """
        try:
            listing_limit = limit if limit is not None else self._default_limit
            cache_key = derive_key(ITEM_DETAIL_NAMESPACE, item_name, season, listing_limit)

            cached = self._cache.get(cache_key)
            if cached is not None:
                logger.debug("Cache hit", key=cache_key)
                return Ok(cached)

            detail = await self._store.get_item_detail(item_name, season, listing_limit)
            payload = ItemDetailResponse.from_entity(detail).to_payload()

            self._cache.set(cache_key, payload)
            return Ok(payload)

        except Exception as e:
            logger.error("Error fetching item detail", error=str(e))
            return Err(ErrorKind.DOWNSTREAM, ITEM_DETAIL_ERROR)

    async def listings_count(self, season: int | None = None) -> Result:
        """Total number of listings in a season.

        Args:
            season: Season, defaults to the current season

        Returns:
            Ok with ``{total}``, or Err
        """
        try:
            season_number = season if season is not None else self._current_season
            cache_key = derive_key(LISTINGS_COUNT_NAMESPACE, season_number)

            cached = self._cache.get(cache_key)
            if cached is not None:
                logger.debug("Cache hit", key=cache_key)
                return Ok(cached)

            total = await self._store.get_total_listings_count(season_number)
            payload = ListingsCountResponse(total=total).to_payload()

            self._cache.set(cache_key, payload)
            return Ok(payload)

        except Exception as e:
            logger.error("Error fetching listings count", error=str(e))
            return Err(ErrorKind.DOWNSTREAM, LISTINGS_COUNT_ERROR)

    async def is_healthy(self) -> dict[str, bool]:
        """Check the cache and store backends.

        Returns:
            ``{"cache": bool, "store": bool}``
        """
        return {
            "cache": self._cache.health_check(),
            "store": await self._store.health_check(),
        }

    @property
    def current_season(self) -> int:
        """Season used when a request names none."""
        return self._current_season

