"""
credibility/engine.py

Vendor insight engine: combines CredibilityScoreModel and
SuggestionRuleEngine into a single InsightResult. Holds no state
between calls and is safe to share across threads.
"""

from __future__ import annotations

from credibility.base import BaseScoreModel
from credibility.models import EarningsSummary, InsightResult, VendorMetrics
from credibility.scoring import CredibilityScoreModel
from credibility.suggestions import SuggestionRuleEngine


class VendorInsightEngine:
    """Computes the credibility score and suggestions for a vendor snapshot.

    Delegates scoring to a BaseScoreModel and message selection to
    SuggestionRuleEngine. Contains no I/O and never raises for
    well-typed inputs.
    """

    def __init__(
        self,
        model: BaseScoreModel | None = None,
        suggestion_engine: SuggestionRuleEngine | None = None,
    ) -> None:
        self._model = model or CredibilityScoreModel()
        self._suggestion_engine = suggestion_engine or SuggestionRuleEngine()

    def compute_insights(
        self,
        metrics: VendorMetrics,
        earnings: EarningsSummary,
    ) -> InsightResult:
        """Score the snapshot and pick its suggestions.

        Args:
            metrics: Operational metrics of the vendor.
            earnings: Earnings summary for the same vendor.

        Returns:
            InsightResult with a score in [0, 100] and at most three
            suggestions.
        """
        return InsightResult(
            credibility_score=self._model.compute(metrics, earnings),
            suggestions=self._suggestion_engine.generate(metrics, earnings),
        )


_DEFAULT_ENGINE = VendorInsightEngine()


def compute_insights(metrics: VendorMetrics, earnings: EarningsSummary) -> InsightResult:
    """Module-level shortcut using a shared default engine."""
    return _DEFAULT_ENGINE.compute_insights(metrics, earnings)
