"""
ledger/models.py

Ledger entry model shared by the vendor store and the earnings aggregator.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone


def as_utc(value: datetime) -> datetime:
    """
    Return *value* as an aware UTC datetime. Naive values are taken as UTC.
    """

    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


@dataclass(frozen=True)
class LedgerEntry:
    """
    One dated sale recorded for a vendor.
    """

    entry_id: int
    vendor_id: str
    amount: int
    recorded_at: datetime

    def __post_init__(self) -> None:
        object.__setattr__(self, "recorded_at", as_utc(self.recorded_at))

    @property
    def date_key(self) -> str:
        """UTC calendar date of the entry as ``YYYY-MM-DD``."""
        return self.recorded_at.isoformat()[:10]
