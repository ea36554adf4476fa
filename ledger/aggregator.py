"""
ledger/aggregator.py

Earnings aggregation over a vendor's ledger.

Translates a list of dated LedgerEntry rows into the EarningsSummary the
insight engine consumes.

Windows
-------
today      – entries on the same UTC calendar date as ``as_of``
             (matched by ``YYYY-MM-DD`` prefix equality)
this_week  – entries with ``recorded_at >= as_of - 7 days``
total      – every entry for the vendor
this_month – mirrors ``total``; no monthly window is tracked

No scoring logic lives here. Threshold comparisons belong to the
credibility package.
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta
from typing import Iterable

from credibility.models import EarningsSummary
from ledger.models import LedgerEntry, as_utc

logger = logging.getLogger(__name__)

WEEK_WINDOW = timedelta(days=7)


class LedgerAggregator:
    """
    Reads ledger entries and produces an EarningsSummary.

    All methods are read-only and never mutate the supplied entries.
    """

    def __init__(self, week_window: timedelta = WEEK_WINDOW) -> None:
        self._week_window = week_window

    def summarize_earnings(
        self,
        entries: Iterable[LedgerEntry],
        vendor_id: str,
        as_of: datetime,
    ) -> EarningsSummary:
        """
        Sum the vendor's entries into today / trailing week / total buckets.

        Parameters
        ----------
        entries:
            Ledger rows, possibly belonging to several vendors.
        vendor_id:
            Only rows for this vendor are counted.
        as_of:
            Reference instant. Naive datetimes are treated as UTC.
        """
        as_of = as_utc(as_of)
        today_key = as_of.isoformat()[:10]
        week_start = as_of - self._week_window

        today = 0
        this_week = 0
        total = 0
        counted = 0
        for entry in entries:
            if entry.vendor_id != vendor_id:
                continue
            counted += 1
            total += entry.amount
            if entry.date_key == today_key:
                today += entry.amount
            if entry.recorded_at >= week_start:
                this_week += entry.amount

        logger.debug(
            "Earnings summarised vendor=%r entries=%d today=%d week=%d total=%d",
            vendor_id,
            counted,
            today,
            this_week,
            total,
        )
        return EarningsSummary(today=today, this_week=this_week, total=total)


def summarize_earnings(
    entries: Iterable[LedgerEntry],
    vendor_id: str,
    as_of: datetime,
) -> EarningsSummary:
    """Module-level shortcut around :class:`LedgerAggregator`."""
    return LedgerAggregator().summarize_earnings(entries, vendor_id, as_of)
