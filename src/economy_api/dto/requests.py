"""Request DTOs for API endpoints.

Routes collect query and path parameters into these models and the
handler passes their fields on to the service layer.
"""

from pydantic import BaseModel, Field


class ItemsQuery(BaseModel):
    """Query for GET /items."""

    season: int | None = Field(None, description="Season, defaults to the current season", ge=1)
    days: int | None = Field(None, description="Days of history to aggregate", ge=1)


class ListingsQuery(BaseModel):
    """Query for GET /listings/{item_name}.

    Exactly one date selector is used; ``date`` wins when both are given.
    """

    item_name: str = Field(..., description="Name of the item", min_length=1)
    date: str | None = Field(None, description="Market event date (YYYY-MM-DD)")
    ingestion_date: str | None = Field(None, description="Ingestion date (YYYY-MM-DD)")
    season: int | None = Field(None, description="Optional season filter", ge=1)


class ItemDetailQuery(BaseModel):
    """Query for GET /items/{item_name}."""

    item_name: str = Field(..., description="Name of the item", min_length=1)
    season: int | None = Field(None, description="Optional season filter", ge=1)
    limit: int | None = Field(None, description="Maximum number of recent listings", ge=1)


class ListingsCountQuery(BaseModel):
    """Query for GET /listings-count."""

    season: int | None = Field(None, description="Season, defaults to the current season", ge=1)
