"""Unit tests for SqlEconomyRepository."""

from datetime import date

import pytest

from economy_api.entities import ListingEntity
from economy_api.protocols import EconomyStore
from economy_api.repositories import SqlEconomyRepository


def listing(item_name, season, price, quantity, data_date, ingestion_date, seller=None):
    return ListingEntity(
        item_name=item_name,
        season=season,
        price=price,
        quantity=quantity,
        data_date=data_date,
        ingestion_date=ingestion_date,
        seller=seller,
    )


class TestSqlEconomyRepository:
    """Tests for SqlEconomyRepository on a temporary SQLite database.

    Today is pinned to 2024-01-10.
    """

    @pytest.fixture
    async def seeded(self, repository: SqlEconomyRepository) -> SqlEconomyRepository:
        await repository.save_listings(
            [
                listing("Iron Ore", 3, 10.0, 5, date(2024, 1, 10), date(2024, 1, 11), "a"),
                listing("Iron Ore", 3, 14.0, 1, date(2024, 1, 8), date(2024, 1, 8), "b"),
                listing("Iron Ore", 3, 12.0, 2, date(2023, 12, 1), date(2023, 12, 2)),
                listing("Copper", 3, 3.0, 10, date(2024, 1, 9), date(2024, 1, 10)),
                listing("Iron Ore", 2, 8.0, 4, date(2024, 1, 10), date(2024, 1, 11)),
            ]
        )
        return repository

    async def test_satisfies_protocol(self, repository):
        assert isinstance(repository, EconomyStore)

    async def test_save_listings_assigns_ids(self, repository):
        saved = await repository.save_listings(
            [listing("Copper", 1, 3.0, 1, date(2024, 1, 1), date(2024, 1, 1))]
        )

        assert len(saved) == 1
        assert saved[0].id is not None
        assert saved[0].item_name == "Copper"

    async def test_items_summary_over_window(self, seeded):
        items = await seeded.get_items_summary(season=3, days=7)

        assert [item.item_name for item in items] == ["Iron Ore", "Copper"]

        iron = items[0]
        assert iron.listing_count == 2
        assert iron.total_quantity == 6
        assert iron.min_price == 10.0
        assert iron.max_price == 14.0
        assert iron.avg_price == 12.0
        assert iron.last_seen == date(2024, 1, 10)

    async def test_items_summary_one_day_is_today_only(self, seeded):
        items = await seeded.get_items_summary(season=3, days=1)

        assert len(items) == 1
        assert items[0].item_name == "Iron Ore"
        assert items[0].listing_count == 1
        assert items[0].avg_price == 10.0

    async def test_items_summary_empty_season(self, seeded):
        assert await seeded.get_items_summary(season=9, days=7) == []

    async def test_total_listings_count(self, seeded):
        assert await seeded.get_total_listings_count(3) == 4
        assert await seeded.get_total_listings_count(2) == 1
        assert await seeded.get_total_listings_count(9) == 0

    async def test_listings_by_data_date(self, seeded):
        all_seasons = await seeded.get_listings_by_data_date("Iron Ore", date(2024, 1, 10))
        assert sorted(entry.season for entry in all_seasons) == [2, 3]

        season_three = await seeded.get_listings_by_data_date("Iron Ore", date(2024, 1, 10), 3)
        assert len(season_three) == 1
        assert season_three[0].price == 10.0
        assert season_three[0].seller == "a"

    async def test_listings_by_ingestion_date(self, seeded):
        all_seasons = await seeded.get_listings_by_ingestion_date("Iron Ore", date(2024, 1, 11))
        assert len(all_seasons) == 2

        season_two = await seeded.get_listings_by_ingestion_date("Iron Ore", date(2024, 1, 11), 2)
        assert [entry.price for entry in season_two] == [8.0]

    async def test_listings_unknown_item(self, seeded):
        assert await seeded.get_listings_by_data_date("Gold", date(2024, 1, 10)) == []

    async def test_item_detail(self, seeded):
        detail = await seeded.get_item_detail("Iron Ore", season=3, limit=2)

        assert detail.item_name == "Iron Ore"
        assert detail.season == 3
        assert detail.summary is not None
        assert detail.summary.listing_count == 3
        assert detail.summary.min_price == 10.0
        assert detail.summary.max_price == 14.0
        assert detail.summary.avg_price == 12.0

        assert [point.date for point in detail.price_history] == [
            date(2023, 12, 1),
            date(2024, 1, 8),
            date(2024, 1, 10),
        ]
        assert [entry.data_date for entry in detail.listings] == [
            date(2024, 1, 10),
            date(2024, 1, 8),
        ]

    async def test_item_detail_all_seasons(self, seeded):
        detail = await seeded.get_item_detail("Iron Ore")

        assert detail.season is None
        assert detail.summary.listing_count == 4
        assert len(detail.listings) == 4

    async def test_item_detail_unknown_item(self, seeded):
        detail = await seeded.get_item_detail("Gold", season=3)

        assert detail.summary is None
        assert detail.price_history == []
        assert detail.listings == []

    async def test_health_check(self, repository):
        assert await repository.health_check() is True
