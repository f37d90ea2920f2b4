#!/usr/bin/env python3
"""
Demo script for the economy API.

Seeds the configured database with a few weeks of sample listings, then
runs each service query twice to show cache misses and hits.
"""

import asyncio
import random
from datetime import date, datetime, timedelta, timezone

from economy_api.config import settings
from economy_api.entities import ListingEntity
from economy_api.repositories import InMemoryResponseCache, SqlEconomyRepository
from economy_api.result import Ok
from economy_api.services import EconomyService

ITEMS = {
    "Iron Ore": 12.0,
    "Copper": 3.5,
    "Coal": 1.2,
    "Gold Nugget": 250.0,
    "Oak Log": 0.8,
}
SELLERS = ["ashfield", "brightwater", "copperton", "dunmore"]


def print_section(title: str) -> None:
    """Print a section header."""
    print("\n" + "=" * 70)
    print(f"  {title}")
    print("=" * 70)


def sample_listings(season: int, days: int, today: date) -> list[ListingEntity]:
    """Generate listings with prices drifting around a base price."""
    rng = random.Random(season)
    listings = []
    for offset in range(days):
        data_date = today - timedelta(days=offset)
        for item_name, base_price in ITEMS.items():
            for _ in range(rng.randint(1, 4)):
                listings.append(
                    ListingEntity(
                        item_name=item_name,
                        season=season,
                        price=round(base_price * rng.uniform(0.8, 1.2), 2),
                        quantity=rng.randint(1, 64),
                        seller=rng.choice(SELLERS),
                        data_date=data_date,
                        ingestion_date=data_date + timedelta(days=rng.randint(0, 1)),
                    )
                )
    return listings


async def seed(store: SqlEconomyRepository, season: int) -> None:
    print_section("Seeding database")

    today = datetime.now(timezone.utc).date()
    listings = sample_listings(season, days=21, today=today)
    await store.save_listings(listings)

    print(f"\n📝 Stored {len(listings)} listings for season {season}")
    print(f"  Database: {settings.database_url}")


async def demo_queries(service: EconomyService) -> None:
    print_section("Economy queries")

    for attempt in ("miss", "hit"):
        result = await service.items_summary()
        if isinstance(result, Ok):
            payload = result.value
            print(f"\n🔍 Items summary ({attempt}): {len(payload['items'])} items, "
                  f"{payload['totalListings']} listings, updated {payload['lastUpdated']}")

    result = await service.item_detail("Iron Ore", limit=5)
    if isinstance(result, Ok):
        summary = result.value["summary"]
        print(f"\n📊 Iron Ore: avg {summary['avgPrice']} "
              f"over {summary['listingCount']} listings")

    today = datetime.now(timezone.utc).date().isoformat()
    result = await service.listings("Copper", data_date=today)
    if isinstance(result, Ok):
        print(f"\n📦 Copper listings on {today}: {len(result.value)}")

    result = await service.listings("Copper")
    print(f"\n✗ Listings without a date: {result}")


async def main() -> None:
    store = SqlEconomyRepository.create()
    service = EconomyService.create(store=store, cache=InMemoryResponseCache())
    try:
        await seed(store, settings.current_season)
        await demo_queries(service)
    finally:
        await store.close()


if __name__ == "__main__":
    asyncio.run(main())
