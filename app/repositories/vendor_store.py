"""
app/repositories/vendor_store.py

In-memory vendor record store: metrics per vendor plus a shared sales ledger.

One instance is built at process start and injected into request handlers.
Every read and write is serialised through a single lock; callers only ever
receive immutable snapshots.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field, replace
from datetime import datetime, timedelta, timezone
from typing import Any, Mapping

from app.validators.metric_fields import MetricFieldParser
from credibility.models import VendorMetrics
from ledger.models import LedgerEntry

logger = logging.getLogger(__name__)

DEMO_VENDOR_ID = "v1"


@dataclass(frozen=True)
class MetricsUpdateOutcome:
    """
    Result of a merge-style metrics update.
    """

    metrics: VendorMetrics
    applied_fields: list[str] = field(default_factory=list)
    ignored_fields: list[str] = field(default_factory=list)


class InMemoryVendorStore:
    """
    Thread-safe in-memory store for vendor metrics and ledger entries.

    Metric updates merge rather than clobber: a field that is missing,
    zero or fails numeric parsing leaves the stored value untouched.
    """

    # (wire name, VendorMetrics attribute, MetricFieldParser method)
    _UPDATABLE_FIELDS: tuple[tuple[str, str, str], ...] = (
        ("orderPlaced", "order_placed", "parse_count"),
        ("orderServed", "order_served", "parse_count"),
        ("avgRating", "avg_rating", "parse_rating"),
    )

    def __init__(self, parser: MetricFieldParser | None = None) -> None:
        self._metrics_by_vendor: dict[str, VendorMetrics] = {}
        self._ledger: list[LedgerEntry] = []
        self._parser = parser or MetricFieldParser()
        self._lock = threading.Lock()

    def register_vendor(self, vendor_id: str, metrics: VendorMetrics) -> None:
        """
        Create or replace the metrics record for *vendor_id*.
        """

        with self._lock:
            self._metrics_by_vendor[vendor_id] = metrics

    def get_metrics(self, vendor_id: str) -> VendorMetrics | None:
        """
        Return the current metrics snapshot, or ``None`` for unknown vendors.
        """

        with self._lock:
            return self._metrics_by_vendor.get(vendor_id)

    def update_metrics(
        self,
        vendor_id: str,
        fields: Mapping[str, Any],
    ) -> MetricsUpdateOutcome | None:
        """
        Merge parseable fields into the stored metrics.

        Only ``orderPlaced``, ``orderServed`` and ``avgRating`` are
        considered. A field is reported as ignored when it is present but
        does not parse to a positive number. Returns ``None`` for unknown
        vendors.
        """

        with self._lock:
            current = self._metrics_by_vendor.get(vendor_id)
            if current is None:
                return None

            changes: dict[str, Any] = {}
            applied: list[str] = []
            ignored: list[str] = []
            for wire_name, attribute, parser_name in self._UPDATABLE_FIELDS:
                if wire_name not in fields or fields[wire_name] is None:
                    continue
                parsed = getattr(self._parser, parser_name)(fields[wire_name])
                if parsed is None:
                    ignored.append(wire_name)
                    continue
                changes[attribute] = parsed
                applied.append(wire_name)

            updated = replace(current, **changes) if changes else current
            self._metrics_by_vendor[vendor_id] = updated

        if ignored:
            logger.warning(
                "Ignored unparseable metric fields vendor=%r fields=%s",
                vendor_id,
                ignored,
            )
        return MetricsUpdateOutcome(metrics=updated, applied_fields=applied, ignored_fields=ignored)

    def append_ledger_entry(
        self,
        vendor_id: str,
        amount: int,
        recorded_at: datetime,
    ) -> LedgerEntry:
        """
        Append one sale to the ledger and return the stored entry.
        """

        with self._lock:
            entry = LedgerEntry(
                entry_id=len(self._ledger) + 1,
                vendor_id=vendor_id,
                amount=amount,
                recorded_at=recorded_at,
            )
            self._ledger.append(entry)
        logger.debug("Ledger entry appended vendor=%r id=%d amount=%d", vendor_id, entry.entry_id, amount)
        return entry

    def ledger_entries(self, vendor_id: str | None = None) -> list[LedgerEntry]:
        """
        Return a copy of the ledger, optionally filtered to one vendor.
        """

        with self._lock:
            if vendor_id is None:
                return list(self._ledger)
            return [entry for entry in self._ledger if entry.vendor_id == vendor_id]

    def seed_demo_data(self, now: datetime | None = None) -> None:
        """
        Load the demo vendor and its sample sales relative to *now*.
        """

        now = now or datetime.now(tz=timezone.utc)
        self.register_vendor(
            DEMO_VENDOR_ID,
            VendorMetrics(order_placed=150, order_served=135, avg_rating=4.5, total_dishes=25),
        )
        for amount, age in (
            (1500, timedelta(0)),
            (2000, timedelta(0)),
            (1200, timedelta(days=1)),
            (3000, timedelta(days=7)),
        ):
            self.append_ledger_entry(DEMO_VENDOR_ID, amount, now - age)
        logger.info("Demo data seeded vendor=%r", DEMO_VENDOR_ID)
