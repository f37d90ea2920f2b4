"""
Tests for the economy HTTP API.
"""

from datetime import datetime, timezone


def test_root(client):
    """Test root endpoint."""
    response = client.get("/")
    assert response.status_code == 200
    data = response.json()
    assert data["name"] == "Economy API"
    assert data["endpoints"]["items"] == "/api/economy/items"


def test_root_reports_service_season(client):
    """The advertised season is the one the endpoints default to."""
    assert client.get("/").json()["currentSeason"] == 3


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "cacheHealthy": True, "storeHealthy": True}


def test_health_unhealthy_store(client, store):
    store.health_check.return_value = False
    response = client.get("/health")
    assert response.status_code == 503
    assert response.json()["status"] == "unhealthy"


class TestItems:
    """GET /api/economy/items"""

    def test_items(self, client, store):
        response = client.get("/api/economy/items")

        assert response.status_code == 200
        data = response.json()
        assert set(data) == {"items", "totalListings", "lastUpdated"}
        assert data["totalListings"] == 42
        assert data["items"][0] == {
            "itemName": "Iron Ore",
            "listingCount": 2,
            "totalQuantity": 6,
            "minPrice": 10.0,
            "maxPrice": 14.0,
            "avgPrice": 12.0,
            "lastSeen": "2024-01-10",
        }
        store.get_items_summary.assert_awaited_once_with(3, 7)

    def test_query_parameters(self, client, store):
        response = client.get("/api/economy/items", params={"season": 2, "days": 30})

        assert response.status_code == 200
        store.get_items_summary.assert_awaited_once_with(2, 30)
        store.get_total_listings_count.assert_awaited_once_with(2)

    def test_repeated_requests_are_byte_identical(self, client, store):
        first = client.get("/api/economy/items", params={"season": 3, "days": 7})
        second = client.get("/api/economy/items", params={"season": 3, "days": 7})

        assert first.content == second.content
        assert store.get_items_summary.await_count == 1

    def test_last_updated_is_not_before_request(self, client):
        start = datetime.now(timezone.utc)
        start = start.replace(microsecond=start.microsecond // 1000 * 1000)

        response = client.get("/api/economy/items")

        assert datetime.fromisoformat(response.json()["lastUpdated"]) >= start

    def test_database_failure(self, client, store):
        store.get_items_summary.side_effect = RuntimeError("password authentication failed")

        response = client.get("/api/economy/items")

        assert response.status_code == 500
        assert response.json() == {"error": {"message": "Failed to fetch item data"}}

    def test_invalid_days(self, client, store):
        response = client.get("/api/economy/items", params={"days": "0"})

        assert response.status_code == 400
        assert response.json() == {"error": {"message": "Invalid days parameter"}}
        store.get_items_summary.assert_not_awaited()

    def test_days_above_maximum(self, client, store):
        response = client.get("/api/economy/items", params={"days": "1000000"})

        assert response.status_code == 400
        assert response.json() == {"error": {"message": "Invalid days parameter"}}
        store.get_items_summary.assert_not_awaited()

    def test_days_at_maximum(self, client, store):
        response = client.get("/api/economy/items", params={"days": 3650})

        assert response.status_code == 200
        store.get_items_summary.assert_awaited_once_with(3, 3650)


class TestSeasonValidation:
    """Season validation runs before every economy route."""

    def test_non_numeric_season(self, client, store):
        response = client.get("/api/economy/items", params={"season": "abc"})

        assert response.status_code == 400
        assert response.json() == {"error": {"message": "Invalid season parameter"}}
        store.get_items_summary.assert_not_awaited()

    def test_zero_season(self, client):
        response = client.get("/api/economy/listings-count", params={"season": "0"})
        assert response.status_code == 400

    def test_non_ascii_digit_season(self, client, store):
        response = client.get("/api/economy/listings-count", params={"season": "\u00b2"})

        assert response.status_code == 400
        assert response.json() == {"error": {"message": "Invalid season parameter"}}
        store.get_total_listings_count.assert_not_awaited()

    def test_season_beyond_integer_range(self, client, store):
        response = client.get(
            "/api/economy/listings-count", params={"season": "9999999999999999999999999"}
        )

        assert response.status_code == 400
        assert response.json() == {"error": {"message": "Invalid season parameter"}}
        store.get_total_listings_count.assert_not_awaited()

    def test_largest_season_is_accepted(self, client, store):
        response = client.get("/api/economy/listings-count", params={"season": str(2**31 - 1)})

        assert response.status_code == 200
        store.get_total_listings_count.assert_awaited_once_with(2**31 - 1)

    def test_negative_season_on_item_detail(self, client, store):
        response = client.get("/api/economy/items/Iron Ore", params={"season": "-1"})

        assert response.status_code == 400
        store.get_item_detail.assert_not_awaited()


class TestListings:
    """GET /api/economy/listings/{itemName}"""

    def test_requires_date_or_ingestion_date(self, client, store):
        response = client.get("/api/economy/listings/Iron Ore")

        assert response.status_code == 400
        assert response.json() == {
            "error": {"message": "Either date or ingestionDate query parameter is required"}
        }
        store.get_listings_by_data_date.assert_not_awaited()
        store.get_listings_by_ingestion_date.assert_not_awaited()

    def test_by_date(self, client, store):
        response = client.get("/api/economy/listings/Iron Ore", params={"date": "2024-01-01"})

        assert response.status_code == 200
        data = response.json()
        assert isinstance(data, list)
        assert data[0]["itemName"] == "Iron Ore"
        assert store.get_listings_by_data_date.await_count == 1

    def test_by_ingestion_date_with_season(self, client, store):
        response = client.get(
            "/api/economy/listings/Iron Ore",
            params={"ingestionDate": "2024-01-02", "season": 3},
        )

        assert response.status_code == 200
        args = store.get_listings_by_ingestion_date.await_args.args
        assert args[0] == "Iron Ore"
        assert args[1].isoformat() == "2024-01-02"
        assert args[2] == 3

    def test_date_takes_precedence(self, client, store):
        response = client.get(
            "/api/economy/listings/Iron Ore",
            params={"date": "2024-01-01", "ingestionDate": "2024-01-02"},
        )

        assert response.status_code == 200
        assert store.get_listings_by_data_date.await_args.args[1].isoformat() == "2024-01-01"
        store.get_listings_by_ingestion_date.assert_not_awaited()

    def test_compact_date_is_rejected(self, client, store):
        response = client.get("/api/economy/listings/Iron Ore", params={"date": "20240101"})

        assert response.status_code == 400
        assert response.json() == {
            "error": {"message": "Invalid date format, expected YYYY-MM-DD"}
        }
        store.get_listings_by_data_date.assert_not_awaited()

    def test_database_failure(self, client, store):
        store.get_listings_by_ingestion_date.side_effect = RuntimeError("boom")

        response = client.get(
            "/api/economy/listings/Iron Ore", params={"ingestionDate": "2024-01-02"}
        )

        assert response.status_code == 500
        assert response.json() == {"error": {"message": "Failed to fetch listings"}}


class TestItemDetail:
    """GET /api/economy/items/{itemName}"""

    def test_item_detail(self, client, store):
        response = client.get("/api/economy/items/Iron Ore", params={"limit": 10})

        assert response.status_code == 200
        data = response.json()
        assert data["itemName"] == "Iron Ore"
        assert data["season"] is None
        assert data["summary"]["avgPrice"] == 12.0
        assert len(data["listings"]) == 1
        store.get_item_detail.assert_awaited_once_with("Iron Ore", None, 10)

    def test_limit_above_maximum(self, client, store):
        response = client.get("/api/economy/items/Iron Ore", params={"limit": 1001})

        assert response.status_code == 400
        assert response.json() == {"error": {"message": "Invalid limit parameter"}}
        store.get_item_detail.assert_not_awaited()

    def test_cached(self, client, store):
        client.get("/api/economy/items/Iron Ore")
        client.get("/api/economy/items/Iron Ore")

        assert store.get_item_detail.await_count == 1

    def test_database_failure(self, client, store):
        store.get_item_detail.side_effect = RuntimeError("boom")

        response = client.get("/api/economy/items/Iron Ore")

        assert response.status_code == 500
        assert response.json() == {"error": {"message": "Failed to fetch item detail"}}


class TestListingsCount:
    """GET /api/economy/listings-count"""

    def test_listings_count(self, client, store):
        response = client.get("/api/economy/listings-count", params={"season": 4})

        assert response.status_code == 200
        assert response.json() == {"total": 42}
        store.get_total_listings_count.assert_awaited_once_with(4)

    def test_database_failure(self, client, store):
        store.get_total_listings_count.side_effect = RuntimeError("boom")

        response = client.get("/api/economy/listings-count")

        assert response.status_code == 500
        assert response.json() == {"error": {"message": "Failed to fetch listings count"}}
