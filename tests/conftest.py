"""Pytest configuration and shared fixtures."""

from datetime import date
from pathlib import Path
from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from economy_api.api.app import create_app
from economy_api.entities import (
    ItemDetailEntity,
    ItemSummaryEntity,
    ListingEntity,
    PricePointEntity,
)
from economy_api.repositories import InMemoryResponseCache, SqlEconomyRepository
from economy_api.services import EconomyService

CURRENT_SEASON = 3
TODAY = date(2024, 1, 10)


@pytest.fixture
def sample_summaries() -> list[ItemSummaryEntity]:
    """Two aggregated items."""
    return [
        ItemSummaryEntity(
            item_name="Iron Ore",
            listing_count=2,
            total_quantity=6,
            min_price=10.0,
            max_price=14.0,
            avg_price=12.0,
            last_seen=date(2024, 1, 10),
        ),
        ItemSummaryEntity(
            item_name="Copper",
            listing_count=1,
            total_quantity=10,
            min_price=3.0,
            max_price=3.0,
            avg_price=3.0,
            last_seen=date(2024, 1, 9),
        ),
    ]


@pytest.fixture
def sample_listing() -> ListingEntity:
    return ListingEntity(
        id=1,
        item_name="Iron Ore",
        season=CURRENT_SEASON,
        price=10.0,
        quantity=5,
        seller="trader-1",
        data_date=date(2024, 1, 1),
        ingestion_date=date(2024, 1, 2),
    )


@pytest.fixture
def sample_detail(sample_summaries, sample_listing) -> ItemDetailEntity:
    return ItemDetailEntity(
        item_name="Iron Ore",
        season=None,
        summary=sample_summaries[0],
        price_history=[
            PricePointEntity(
                date=date(2024, 1, 1),
                listing_count=1,
                min_price=10.0,
                max_price=10.0,
                avg_price=10.0,
            )
        ],
        listings=[sample_listing],
    )


@pytest.fixture
def store(sample_summaries, sample_listing, sample_detail) -> AsyncMock:
    """Economy store double with canned answers."""
    mock = AsyncMock(spec=SqlEconomyRepository)
    mock.get_items_summary.return_value = sample_summaries
    mock.get_total_listings_count.return_value = 42
    mock.get_listings_by_data_date.return_value = [sample_listing]
    mock.get_listings_by_ingestion_date.return_value = [sample_listing]
    mock.get_item_detail.return_value = sample_detail
    mock.health_check.return_value = True
    return mock


@pytest.fixture
def cache() -> InMemoryResponseCache:
    return InMemoryResponseCache()


@pytest.fixture
def service(store, cache) -> EconomyService:
    return EconomyService(
        store=store,
        cache=cache,
        current_season=CURRENT_SEASON,
        default_days=7,
        default_limit=100,
    )


@pytest.fixture
def client(service) -> TestClient:
    """Create a test client around the service doubles."""
    return TestClient(create_app(service=service))


@pytest.fixture
def tmp_db_url(tmp_path: Path) -> str:
    return f"sqlite+aiosqlite:///{tmp_path / 'economy.db'}"


@pytest.fixture
async def repository(tmp_db_url: str):
    """SQL repository on a temporary SQLite file, with today pinned."""
    repo = SqlEconomyRepository(database_url=tmp_db_url, today=lambda: TODAY)
    yield repo
    await repo.close()
