"""Response DTOs for API endpoints.

Field names are snake_case in Python and camelCase on the wire.
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from economy_api.entities import (
    ItemDetailEntity,
    ItemSummaryEntity,
    ListingEntity,
    PricePointEntity,
)


class CamelModel(BaseModel):
    """Base model serializing to camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_payload(self) -> dict:
        """Dump to a JSON-ready dict with wire names."""
        return self.model_dump(mode="json", by_alias=True)


class ListingItem(CamelModel):
    """Single market listing."""

    id: int | None = Field(None, description="Storage identifier")
    item_name: str = Field(..., description="Name of the listed item")
    season: int = Field(..., description="Season of the listing")
    price: float = Field(..., description="Unit price")
    quantity: int = Field(..., description="Listed quantity")
    seller: str | None = Field(None, description="Seller identifier")
    data_date: str = Field(..., description="Market event date (ISO-8601)")
    ingestion_date: str = Field(..., description="Ingestion date (ISO-8601)")

    @classmethod
    def from_entity(cls, listing: ListingEntity) -> "ListingItem":
        return cls(
            id=listing.id,
            item_name=listing.item_name,
            season=listing.season,
            price=listing.price,
            quantity=listing.quantity,
            seller=listing.seller,
            data_date=listing.data_date.isoformat(),
            ingestion_date=listing.ingestion_date.isoformat(),
        )


class ItemSummaryItem(CamelModel):
    """Aggregated data for one item (in the items array)."""

    item_name: str = Field(..., description="Name of the item")
    listing_count: int = Field(..., description="Number of listings", ge=0)
    total_quantity: int = Field(..., description="Sum of listed quantities", ge=0)
    min_price: float = Field(..., description="Lowest price")
    max_price: float = Field(..., description="Highest price")
    avg_price: float = Field(..., description="Mean price")
    last_seen: str = Field(..., description="Latest market event date (ISO-8601)")

    @classmethod
    def from_entity(cls, summary: ItemSummaryEntity) -> "ItemSummaryItem":
        return cls(
            item_name=summary.item_name,
            listing_count=summary.listing_count,
            total_quantity=summary.total_quantity,
            min_price=summary.min_price,
            max_price=summary.max_price,
            avg_price=summary.avg_price,
            last_seen=summary.last_seen.isoformat(),
        )


class PricePointItem(CamelModel):
    """Daily price aggregate."""

    date: str = Field(..., description="Market event date (ISO-8601)")
    listing_count: int = Field(..., description="Number of listings that day", ge=0)
    min_price: float
    max_price: float
    avg_price: float

    @classmethod
    def from_entity(cls, point: PricePointEntity) -> "PricePointItem":
        return cls(
            date=point.date.isoformat(),
            listing_count=point.listing_count,
            min_price=point.min_price,
            max_price=point.max_price,
            avg_price=point.avg_price,
        )


class ItemsSummaryResponse(CamelModel):
    """Response DTO for the items summary."""

    items: list[ItemSummaryItem] = Field(default_factory=list)
    total_listings: int = Field(..., description="Listings in the season", ge=0)
    last_updated: str = Field(..., description="When the summary was computed (ISO-8601)")


class ItemDetailResponse(CamelModel):
    """Response DTO for a single item."""

    item_name: str
    season: int | None = Field(None, description="Season filter, null for all seasons")
    summary: ItemSummaryItem | None = None
    price_history: list[PricePointItem] = Field(default_factory=list)
    listings: list[ListingItem] = Field(default_factory=list)

    @classmethod
    def from_entity(cls, detail: ItemDetailEntity) -> "ItemDetailResponse":
        return cls(
            item_name=detail.item_name,
            season=detail.season,
            summary=ItemSummaryItem.from_entity(detail.summary) if detail.summary else None,
            price_history=[PricePointItem.from_entity(p) for p in detail.price_history],
            listings=[ListingItem.from_entity(listing) for listing in detail.listings],
        )


class ListingsCountResponse(CamelModel):
    """Response DTO for the listings count."""

    total: int = Field(..., description="Listings in the season", ge=0)


class ErrorDetail(BaseModel):
    message: str


class ErrorResponse(BaseModel):
    """Uniform error body: ``{"error": {"message": ...}}``."""

    error: ErrorDetail

    @classmethod
    def of(cls, message: str) -> "ErrorResponse":
        return cls(error=ErrorDetail(message=message))


class HealthCheckResponse(CamelModel):
    """Response DTO for health check."""

    status: str = Field(..., description="Health status: 'healthy' or 'unhealthy'")
    cache_healthy: bool = Field(..., description="Whether the cache backend is reachable")
    store_healthy: bool = Field(..., description="Whether the database is reachable")
