"""
tests/test_vendor_store.py

Pytest unit tests for InMemoryVendorStore and MetricFieldParser.

Coverage
--------
- Merge-don't-clobber metric updates
- Lenient numeric parsing
- Ledger append ordering and vendor filtering
- Demo seed contents
- Concurrent appends
"""

from __future__ import annotations

import threading
from datetime import datetime, timedelta, timezone

import pytest

from app.repositories.vendor_store import DEMO_VENDOR_ID, InMemoryVendorStore
from app.validators.metric_fields import MetricFieldParser
from credibility.models import VendorMetrics

NOW = datetime(2026, 10, 19, 12, 0, tzinfo=timezone.utc)


@pytest.fixture()
def store() -> InMemoryVendorStore:
    fresh = InMemoryVendorStore()
    fresh.register_vendor("v1", VendorMetrics(order_placed=150, order_served=135, avg_rating=4.5, total_dishes=25))
    return fresh


# ---------------------------------------------------------------------------
# Parser
# ---------------------------------------------------------------------------


class TestMetricFieldParser:
    @pytest.mark.parametrize(
        "raw, expected",
        [
            (12, 12),
            ("12", 12),
            (" 12 ", 12),
            ("12.9", 12),
            (12.9, 12),
            ("1e2", 100),
            ("1000000000000", 10**12),
        ],
    )
    def test_parse_count_accepts_numbers(self, raw: object, expected: int) -> None:
        assert MetricFieldParser().parse_count(raw) == expected

    @pytest.mark.parametrize(
        "raw",
        [None, "", "   ", "abc", "12abc", "0", 0, "-1", -5, True, float("nan"), "inf", "1e400", "1000000000001", [1]],
    )
    def test_parse_count_rejects(self, raw: object) -> None:
        assert MetricFieldParser().parse_count(raw) is None

    @pytest.mark.parametrize("raw, expected", [("4.2", 4.2), (3, 3.0), ("0.5", 0.5)])
    def test_parse_rating(self, raw: object, expected: float) -> None:
        assert MetricFieldParser().parse_rating(raw) == pytest.approx(expected)

    @pytest.mark.parametrize("raw", ["great", "", None, "nan", "0", 0.0, "-1", "1e400"])
    def test_parse_rating_rejects(self, raw: object) -> None:
        assert MetricFieldParser().parse_rating(raw) is None

    @pytest.mark.parametrize("raw, expected", [("0", 0), (0, 0), ("2500", 2500)])
    def test_parse_amount_allows_zero(self, raw: object, expected: int) -> None:
        assert MetricFieldParser().parse_amount(raw) == expected

    @pytest.mark.parametrize("raw", ["-10", "1e400", "abc"])
    def test_parse_amount_rejects(self, raw: object) -> None:
        assert MetricFieldParser().parse_amount(raw) is None


# ---------------------------------------------------------------------------
# Metrics
# ---------------------------------------------------------------------------


class TestUpdateMetrics:
    def test_unknown_vendor_returns_none(self, store: InMemoryVendorStore) -> None:
        assert store.get_metrics("ghost") is None
        assert store.update_metrics("ghost", {"orderPlaced": 10}) is None

    def test_non_numeric_order_placed_is_ignored(self, store: InMemoryVendorStore) -> None:
        outcome = store.update_metrics("v1", {"orderPlaced": "lots"})
        assert outcome is not None
        assert outcome.ignored_fields == ["orderPlaced"]
        assert store.get_metrics("v1").order_placed == 150

    def test_valid_fields_overwrite(self, store: InMemoryVendorStore) -> None:
        outcome = store.update_metrics("v1", {"orderPlaced": "100", "orderServed": 60, "avgRating": "3.5"})
        metrics = store.get_metrics("v1")
        assert (metrics.order_placed, metrics.order_served, metrics.avg_rating) == (100, 60, 3.5)
        assert outcome.applied_fields == ["orderPlaced", "orderServed", "avgRating"]
        assert outcome.ignored_fields == []

    def test_partial_update_keeps_other_fields(self, store: InMemoryVendorStore) -> None:
        store.update_metrics("v1", {"avgRating": 4.9})
        metrics = store.get_metrics("v1")
        assert metrics.avg_rating == pytest.approx(4.9)
        assert metrics.order_placed == 150
        assert metrics.total_dishes == 25

    def test_mixed_valid_and_invalid(self, store: InMemoryVendorStore) -> None:
        outcome = store.update_metrics("v1", {"orderPlaced": 200, "orderServed": "x", "avgRating": ""})
        metrics = store.get_metrics("v1")
        assert metrics.order_placed == 200
        assert metrics.order_served == 135
        assert metrics.avg_rating == 4.5
        assert outcome.ignored_fields == ["orderServed", "avgRating"]

    def test_absent_and_null_fields_are_not_reported(self, store: InMemoryVendorStore) -> None:
        outcome = store.update_metrics("v1", {"orderPlaced": None, "unrelated": "x"})
        assert outcome.applied_fields == []
        assert outcome.ignored_fields == []

    def test_zero_keeps_previous_values(self, store: InMemoryVendorStore) -> None:
        outcome = store.update_metrics("v1", {"orderPlaced": 0, "orderServed": "0", "avgRating": "0"})
        metrics = store.get_metrics("v1")
        assert (metrics.order_placed, metrics.order_served, metrics.avg_rating) == (150, 135, 4.5)
        assert outcome.ignored_fields == ["orderPlaced", "orderServed", "avgRating"]

    def test_overflowing_values_are_ignored(self, store: InMemoryVendorStore) -> None:
        outcome = store.update_metrics("v1", {"orderServed": "1e400", "avgRating": "1e400"})
        assert store.get_metrics("v1") == VendorMetrics(
            order_placed=150, order_served=135, avg_rating=4.5, total_dishes=25
        )
        assert outcome.ignored_fields == ["orderServed", "avgRating"]

    def test_snapshots_are_immutable(self, store: InMemoryVendorStore) -> None:
        before = store.get_metrics("v1")
        store.update_metrics("v1", {"orderPlaced": 999})
        assert before.order_placed == 150
        with pytest.raises((AttributeError, TypeError)):
            before.order_placed = 1  # type: ignore[misc]


# ---------------------------------------------------------------------------
# Ledger
# ---------------------------------------------------------------------------


class TestLedger:
    def test_append_assigns_sequential_ids(self, store: InMemoryVendorStore) -> None:
        first = store.append_ledger_entry("v1", 100, NOW)
        second = store.append_ledger_entry("v2", 200, NOW)
        assert (first.entry_id, second.entry_id) == (1, 2)

    def test_entries_filtered_by_vendor(self, store: InMemoryVendorStore) -> None:
        store.append_ledger_entry("v1", 100, NOW)
        store.append_ledger_entry("v2", 200, NOW)
        assert [e.amount for e in store.ledger_entries("v1")] == [100]
        assert len(store.ledger_entries()) == 2

    def test_returned_ledger_is_a_copy(self, store: InMemoryVendorStore) -> None:
        store.append_ledger_entry("v1", 100, NOW)
        store.ledger_entries().clear()
        assert len(store.ledger_entries()) == 1

    def test_concurrent_appends_are_not_lost(self, store: InMemoryVendorStore) -> None:
        def _worker() -> None:
            for _ in range(200):
                store.append_ledger_entry("v1", 1, NOW)

        threads = [threading.Thread(target=_worker) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        entries = store.ledger_entries("v1")
        assert len(entries) == 1600
        assert sorted(e.entry_id for e in entries) == list(range(1, 1601))


class TestSeedDemoData:
    def test_seed_contents(self) -> None:
        store = InMemoryVendorStore()
        store.seed_demo_data(NOW)

        metrics = store.get_metrics(DEMO_VENDOR_ID)
        assert metrics == VendorMetrics(order_placed=150, order_served=135, avg_rating=4.5, total_dishes=25)

        entries = store.ledger_entries(DEMO_VENDOR_ID)
        assert [e.amount for e in entries] == [1500, 2000, 1200, 3000]
        assert entries[2].recorded_at == NOW - timedelta(days=1)
        assert entries[3].recorded_at == NOW - timedelta(days=7)
