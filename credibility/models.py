"""
credibility/models.py

Typed inputs and outputs for the vendor insight engine.

All structures are frozen dataclasses. The engine never mutates its inputs
and never mutates a result after construction.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union


# ---------------------------------------------------------------------------
# Inputs
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class VendorMetrics:
    """
    Operational metrics for one vendor.

    ``order_served`` is normally ``<= order_placed`` but nothing downstream
    relies on it.
    """

    order_placed: int
    """Count of orders received."""

    order_served: int
    """Count of orders fulfilled."""

    avg_rating: float
    """Average customer rating, nominally in [0.0, 5.0]."""

    total_dishes: int = 0
    """Menu size. Informational only, never used in scoring."""


@dataclass(frozen=True)
class EarningsSummary:
    """
    Ledger totals for one vendor, derived fresh for every request.
    """

    today: int
    this_week: int
    total: int
    this_month: int | None = None

    def __post_init__(self) -> None:
        if self.this_month is None:
            object.__setattr__(self, "this_month", self.total)


# ---------------------------------------------------------------------------
# Suggestion payloads
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Suggestion:
    """An English/Hindi improvement message pair."""

    en: str
    hi: str

    def text_for(self, language: str) -> str:
        return self.hi if language == "hi" else self.en


@dataclass(frozen=True)
class LegacyText:
    """Single-language suggestion emitted by older producers."""

    text: str

    def text_for(self, language: str) -> str:  # noqa: ARG002
        return self.text


SuggestionPayload = Union[Suggestion, LegacyText]


# ---------------------------------------------------------------------------
# Output
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class InsightResult:
    """
    Credibility score and ordered suggestions for one vendor snapshot.
    """

    credibility_score: int
    """Integer score clamped to [0, 100]."""

    suggestions: tuple[Suggestion, ...] = field(default_factory=tuple)
    """At most three suggestions, in rule order."""
