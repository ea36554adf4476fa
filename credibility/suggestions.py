"""
credibility/suggestions.py

Deterministic, rule-based suggestion generator for vendor snapshots.
"""

from __future__ import annotations

from credibility.models import EarningsSummary, Suggestion, VendorMetrics
from credibility.normalizer import ScoreNormalizer


# ---------------------------------------------------------------------------
# Canned messages
# ---------------------------------------------------------------------------

LOW_COMPLETION = Suggestion(
    en="Order completion low! Consider hiring more staff or simplifying the menu.",
    hi="ऑर्डर पूरे करने की दर कम है! अधिक स्टाफ रखने या मेनू को सरल बनाने पर विचार करें।",
)

EFFICIENT_OPERATIONS = Suggestion(
    en="Operations are efficient. Good job keeping up with orders!",
    hi="कामकाज कुशल है। ऑर्डर समय पर पूरा करने के लिए बहुत बढ़िया!",
)

RATINGS_DROPPING = Suggestion(
    en="Customer ratings are dropping. Review recent feedback and food quality.",
    hi="ग्राहकों की रेटिंग गिर रही है। हालिया फीडबैक और भोजन की गुणवत्ता की समीक्षा करें।",
)

CUSTOMERS_LOVE_FOOD = Suggestion(
    en="Customers love your food! Launch a loyalty program to retain them.",
    hi="ग्राहक आपके भोजन को पसंद करते हैं! उन्हें बनाए रखने के लिए एक लॉयल्टी प्रोग्राम शुरू करें।",
)

SALES_TRENDING_UP = Suggestion(
    en="Sales are trending up! Perfect time to introduce a special dish.",
    hi="बिक्री बढ़ रही है! एक विशेष डिश पेश करने का सही समय है।",
)


# ---------------------------------------------------------------------------
# Engine
# ---------------------------------------------------------------------------


class SuggestionRuleEngine:
    """
    Rule-based suggestion engine for vendor operations.

    Rules evaluated (in order)
    --------------------------
    1. Completion   – rate below 0.85 → low completion, else efficient
                      operations. An undefined rate (no orders placed)
                      is not below the threshold.
    2. Rating       – average rating below 4.0 → ratings dropping, else
                      customers love your food.
    3. Sales trend  – today's earnings above the weekly daily average →
                      sales trending up.

    Rules 1 and 2 always emit exactly one message each. The output is
    capped at ``MAX_SUGGESTIONS`` entries.
    """

    MAX_SUGGESTIONS: int = 3
    COMPLETION_THRESHOLD: float = 0.85
    RATING_THRESHOLD: float = 4.0
    DAYS_PER_WEEK: int = 7

    def __init__(self) -> None:
        self._normalizer = ScoreNormalizer()

    def generate(
        self,
        metrics: VendorMetrics,
        earnings: EarningsSummary,
    ) -> tuple[Suggestion, ...]:
        """
        Apply the rules and return the ordered, capped suggestion tuple.

        Parameters
        ----------
        metrics:
            Operational metrics of the vendor.

        earnings:
            Earnings summary derived from the vendor's ledger.

        Returns
        -------
        tuple[Suggestion, ...]
            Between one and ``MAX_SUGGESTIONS`` suggestions.
        """
        suggestions: list[Suggestion] = []

        completion_rate = self._normalizer.safe_ratio(
            metrics.order_served, metrics.order_placed
        )
        if completion_rate is not None and completion_rate < self.COMPLETION_THRESHOLD:
            suggestions.append(LOW_COMPLETION)
        else:
            suggestions.append(EFFICIENT_OPERATIONS)

        if metrics.avg_rating < self.RATING_THRESHOLD:
            suggestions.append(RATINGS_DROPPING)
        else:
            suggestions.append(CUSTOMERS_LOVE_FOOD)

        if earnings.today > earnings.this_week / self.DAYS_PER_WEEK:
            suggestions.append(SALES_TRENDING_UP)

        return tuple(suggestions[: self.MAX_SUGGESTIONS])
