"""
Tests for the vendor analytics REST endpoints.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient

from app.config import ServerSettings
from app.main import create_app
from app.repositories.vendor_store import InMemoryVendorStore
from credibility.suggestions import CUSTOMERS_LOVE_FOOD, EFFICIENT_OPERATIONS, SALES_TRENDING_UP

_SETTINGS = ServerSettings(seed_demo_data=False, log_level="WARNING")


@pytest.fixture()
def store() -> InMemoryVendorStore:
    fresh = InMemoryVendorStore()
    # One second in the past keeps the oldest demo sale outside the week window.
    fresh.seed_demo_data(datetime.now(tz=timezone.utc) - timedelta(seconds=1))
    return fresh


@pytest.fixture()
def client(store: InMemoryVendorStore) -> TestClient:
    return TestClient(create_app(store=store, settings=_SETTINGS))


class TestHealthEndpoint:
    def test_health_check(self, client: TestClient) -> None:
        resp = client.get("/health")
        assert resp.status_code == 200
        assert resp.json() == {"status": "ok"}


class TestAnalyticsEndpoint:
    def test_unknown_vendor_returns_404(self, client: TestClient) -> None:
        resp = client.get("/api/vendor/analytics/ghost")
        assert resp.status_code == 404
        assert resp.json() == {"detail": "Vendor not found"}

    def test_payload_shape(self, client: TestClient) -> None:
        resp = client.get("/api/vendor/analytics/v1")
        assert resp.status_code == 200
        data = resp.json()

        assert set(data) == {"orderPlaced", "orderServed", "avgRating", "totalDishes", "earnings", "ai_insights"}
        assert set(data["earnings"]) == {"today", "thisWeek", "thisMonth", "total"}
        assert set(data["ai_insights"]) == {"credibility_score", "suggestions"}

    def test_demo_vendor_values(self, client: TestClient) -> None:
        data = client.get("/api/vendor/analytics/v1").json()

        assert (data["orderPlaced"], data["orderServed"], data["avgRating"], data["totalDishes"]) == (150, 135, 4.5, 25)
        assert data["earnings"] == {"today": 3500, "thisWeek": 4700, "thisMonth": 7700, "total": 7700}
        # 50 + 0 (rating exactly 4.5) + 10 (completion 0.9) + 0 (week 4700)
        assert data["ai_insights"]["credibility_score"] == 60
        assert data["ai_insights"]["suggestions"] == [
            {"en": s.en, "hi": s.hi} for s in (EFFICIENT_OPERATIONS, CUSTOMERS_LOVE_FOOD, SALES_TRENDING_UP)
        ]


class TestUpdateEndpoint:
    def test_unknown_vendor_returns_404(self, client: TestClient, store: InMemoryVendorStore) -> None:
        resp = client.post("/api/vendor/update/ghost", json={"amount": 100})
        assert resp.status_code == 404
        assert store.ledger_entries("ghost") == []
        assert store.get_metrics("ghost") is None

    def test_non_numeric_field_is_ignored(self, client: TestClient) -> None:
        resp = client.post("/api/vendor/update/v1", json={"orderPlaced": "abc"})
        assert resp.status_code == 200
        assert resp.json() == {"message": "Data updated successfully", "ignored_fields": ["orderPlaced"]}

        data = client.get("/api/vendor/analytics/v1").json()
        assert data["orderPlaced"] == 150

    def test_non_numeric_order_placed_keeps_stored_value(self, client: TestClient) -> None:
        resp = client.post("/api/vendor/update/v1", json={"orderPlaced": "abc", "orderServed": "140"})
        assert resp.status_code == 200
        assert resp.json()["ignored_fields"] == ["orderPlaced"]

        analytics = client.get("/api/vendor/analytics/v1")
        assert analytics.status_code == 200
        data = analytics.json()
        assert data["orderPlaced"] == 150
        assert data["orderServed"] == 140

    @pytest.mark.parametrize(
        "body, ignored, expected_placed",
        [
            ({"orderServed": "1e400", "orderPlaced": "1"}, ["orderServed"], 1),
            ({"avgRating": "1e400"}, ["avgRating"], 150),
            ({"avgRating": "Infinity"}, ["avgRating"], 150),
            ({"orderPlaced": "0"}, ["orderPlaced"], 150),
            ({"amount": "1e400"}, ["amount"], 150),
        ],
    )
    def test_out_of_range_values_do_not_break_reads(
        self,
        client: TestClient,
        store: InMemoryVendorStore,
        body: dict,
        ignored: list[str],
        expected_placed: int,
    ) -> None:
        entries_before = len(store.ledger_entries("v1"))

        resp = client.post("/api/vendor/update/v1", json=body)
        assert resp.status_code == 200
        assert resp.json()["ignored_fields"] == ignored

        analytics = client.get("/api/vendor/analytics/v1")
        assert analytics.status_code == 200
        data = analytics.json()
        assert data["avgRating"] == 4.5
        assert data["orderServed"] == 135
        assert data["orderPlaced"] == expected_placed
        assert 0 <= data["ai_insights"]["credibility_score"] <= 100
        assert len(store.ledger_entries("v1")) == entries_before

    def test_update_round_trip(self, client: TestClient) -> None:
        resp = client.post(
            "/api/vendor/update/v1",
            json={"amount": "5000", "orderPlaced": "200", "orderServed": 195, "avgRating": "4.8"},
        )
        assert resp.status_code == 200
        assert resp.json()["ignored_fields"] == []

        data = client.get("/api/vendor/analytics/v1").json()
        assert (data["orderPlaced"], data["orderServed"], data["avgRating"]) == (200, 195, 4.8)
        assert data["earnings"]["today"] == 8500
        assert data["earnings"]["thisWeek"] == 9700
        # 50 + 20 (rating 4.8) + 20 (completion 0.975) + 10 (week 9700)
        assert data["ai_insights"]["credibility_score"] == 100

    def test_empty_body_is_accepted(self, client: TestClient) -> None:
        resp = client.post("/api/vendor/update/v1", json={})
        assert resp.status_code == 200
        assert resp.json()["ignored_fields"] == []


class TestAppFactory:
    def test_each_app_gets_its_own_store(self) -> None:
        first = create_app(settings=ServerSettings(seed_demo_data=True, log_level="WARNING"))
        second = create_app(settings=ServerSettings(seed_demo_data=False, log_level="WARNING"))

        assert first.state.vendor_store is not second.state.vendor_store
        assert TestClient(first).get("/api/vendor/analytics/v1").status_code == 200
        assert TestClient(second).get("/api/vendor/analytics/v1").status_code == 404
