"""
dashboard/view_models.py

Pure presentation helpers for the Streamlit dashboard.

Nothing here imports Streamlit, so every helper can be unit-tested
without a running UI.
"""

from __future__ import annotations

import math
from typing import Any, Mapping

import pandas as pd

from credibility.models import LegacyText, Suggestion, SuggestionPayload

# Placeholder revenue for Mon..Sat; Sunday shows today's live earnings.
PLACEHOLDER_WEEKLY_REVENUE: tuple[tuple[str, int], ...] = (
    ("Mon", 4000),
    ("Tue", 3000),
    ("Wed", 2000),
    ("Thu", 2780),
    ("Fri", 1890),
    ("Sat", 2390),
)

MAX_RATING = 5.0


def parse_suggestion(raw: Any) -> SuggestionPayload:
    """
    Convert one wire suggestion into its typed variant.

    Plain strings become :class:`LegacyText`; ``{en, hi}`` objects become
    :class:`Suggestion`. A mapping with only one language is padded with
    the other.
    """

    if isinstance(raw, (Suggestion, LegacyText)):
        return raw
    if isinstance(raw, Mapping):
        en = str(raw.get("en") or raw.get("hi") or "")
        hi = str(raw.get("hi") or en)
        return Suggestion(en=en, hi=hi)
    return LegacyText(text="" if raw is None else str(raw))


def resolve_suggestion_text(raw: Any, language: str) -> str:
    """
    Return the display string of a suggestion in *language*.
    """

    return parse_suggestion(raw).text_for(language)


def completion_percentage(order_placed: int, order_served: int) -> int | None:
    """
    Rounded served/placed percentage, or ``None`` when nothing was placed.
    """

    if not order_placed:
        return None
    return round(order_served / order_placed * 100)


def efficiency_frame(order_placed: int, order_served: int, labels: Mapping[str, str]) -> pd.DataFrame:
    """
    Served vs missed orders for the efficiency chart.
    """

    missed = max(0, order_placed - order_served)
    return pd.DataFrame(
        {
            "status": [labels["served"], labels["missed"]],
            "orders": [order_served, missed],
        }
    ).set_index("status")


def weekly_growth_frame(today_earnings: int) -> pd.DataFrame:
    """
    Seven-day revenue series: six placeholder days plus today's earnings.
    """

    days = [day for day, _ in PLACEHOLDER_WEEKLY_REVENUE] + ["Sun"]
    revenue = [value for _, value in PLACEHOLDER_WEEKLY_REVENUE] + [today_earnings]
    return pd.DataFrame({"day": days, "revenue": revenue}).set_index("day")


def _is_number(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    try:
        number = float(value)
    except (TypeError, ValueError):
        return False
    return math.isfinite(number)


def validate_simulation_form(form: Mapping[str, Any]) -> str | None:
    """
    Validate the manual simulation form.

    Returns the translation key of the first failing check, or ``None``
    when the form may be submitted. ``amount`` is optional.
    """

    amount = form.get("amount")
    if amount not in (None, ""):
        if not _is_number(amount) or float(amount) < 0:
            return "valid_sales"

    order_placed = form.get("orderPlaced")
    order_served = form.get("orderServed")
    if not _is_number(order_placed) or not _is_number(order_served):
        return "valid_orders"
    if float(order_placed) < 0 or float(order_served) < 0:
        return "valid_orders"
    if int(float(order_served)) > int(float(order_placed)):
        return "valid_served"

    avg_rating = form.get("avgRating")
    if not _is_number(avg_rating) or not 0.0 <= float(avg_rating) <= MAX_RATING:
        return "valid_rating"

    return None
