"""
app/services/vendor_analytics_service.py

Orchestrates vendor analytics by coordinating InMemoryVendorStore,
LedgerAggregator and VendorInsightEngine. Contains no scoring or
aggregation math.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Callable, Mapping

from app.logging_utils import log_event
from app.repositories.vendor_store import InMemoryVendorStore
from app.services.errors import VendorNotFoundError
from app.validators.metric_fields import MetricFieldParser
from credibility.engine import VendorInsightEngine
from credibility.models import EarningsSummary, InsightResult, VendorMetrics
from ledger.aggregator import LedgerAggregator
from ledger.models import LedgerEntry

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def _utc_now() -> datetime:
    return datetime.now(tz=timezone.utc)


@dataclass(frozen=True)
class VendorAnalytics:
    """
    Metrics, earnings and insights for one vendor at one instant.
    """

    vendor_id: str
    metrics: VendorMetrics
    earnings: EarningsSummary
    insights: InsightResult
    generated_at: datetime


@dataclass(frozen=True)
class VendorUpdateResult:
    """
    Outcome of a simulation update: what was applied and what was dropped.
    """

    vendor_id: str
    metrics: VendorMetrics
    ledger_entry: LedgerEntry | None = None
    applied_fields: list[str] = field(default_factory=list)
    ignored_fields: list[str] = field(default_factory=list)


class VendorAnalyticsService:
    """
    Coordinates metric lookup, earnings aggregation and insight scoring.

    The store is injected so tests and the HTTP layer can each supply
    their own instance. ``clock`` defaults to the current UTC time.
    """

    def __init__(
        self,
        store: InMemoryVendorStore,
        engine: VendorInsightEngine | None = None,
        aggregator: LedgerAggregator | None = None,
        clock: Clock | None = None,
    ) -> None:
        self._store = store
        self._engine = engine or VendorInsightEngine()
        self._aggregator = aggregator or LedgerAggregator()
        self._clock = clock or _utc_now
        self._parser = MetricFieldParser()

    def get_analytics(self, vendor_id: str) -> VendorAnalytics:
        """
        Build the analytics snapshot for *vendor_id*.

        Raises
        ------
        VendorNotFoundError
            When the store has no metrics record for the vendor.
        """
        metrics = self._store.get_metrics(vendor_id)
        if metrics is None:
            raise VendorNotFoundError(vendor_id)

        now = self._clock()
        earnings = self._aggregator.summarize_earnings(
            self._store.ledger_entries(vendor_id),
            vendor_id,
            now,
        )
        insights = self._engine.compute_insights(metrics, earnings)

        log_event(
            logger,
            logging.INFO,
            "vendor_analytics_computed",
            vendor_id=vendor_id,
            credibility_score=insights.credibility_score,
            suggestions=len(insights.suggestions),
            this_week=earnings.this_week,
        )
        return VendorAnalytics(
            vendor_id=vendor_id,
            metrics=metrics,
            earnings=earnings,
            insights=insights,
            generated_at=now,
        )

    def apply_update(self, vendor_id: str, payload: Mapping[str, Any]) -> VendorUpdateResult:
        """
        Merge metric fields and optionally record one sale dated now.

        ``amount`` is appended to the ledger when present and parseable as
        a non-negative integer. Unparseable values of any field are
        dropped and listed in ``ignored_fields``.

        Raises
        ------
        VendorNotFoundError
            When the vendor is unknown. Nothing is written in that case.
        """
        outcome = self._store.update_metrics(vendor_id, payload)
        if outcome is None:
            raise VendorNotFoundError(vendor_id)

        ignored = list(outcome.ignored_fields)
        ledger_entry: LedgerEntry | None = None
        raw_amount = payload.get("amount")
        if raw_amount is not None and raw_amount != "":
            amount = self._parser.parse_amount(raw_amount)
            if amount is None:
                logger.warning("Ignored unparseable sale amount vendor=%r", vendor_id)
                ignored.append("amount")
            else:
                ledger_entry = self._store.append_ledger_entry(vendor_id, amount, self._clock())

        log_event(
            logger,
            logging.INFO,
            "vendor_updated",
            vendor_id=vendor_id,
            applied_fields=outcome.applied_fields,
            ignored_fields=ignored,
            ledger_entry_id=ledger_entry.entry_id if ledger_entry else None,
        )
        return VendorUpdateResult(
            vendor_id=vendor_id,
            metrics=outcome.metrics,
            ledger_entry=ledger_entry,
            applied_fields=list(outcome.applied_fields),
            ignored_fields=ignored,
        )
