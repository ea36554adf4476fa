"""
credibility/scoring.py

Credibility score model implementing BaseScoreModel.
Applies fixed threshold adjustments for rating, order completion and
weekly earnings on top of a neutral base score.
"""

from credibility.base import BaseScoreModel
from credibility.models import EarningsSummary, VendorMetrics
from credibility.normalizer import ScoreNormalizer


class CredibilityScoreModel(BaseScoreModel):
    """Threshold-based credibility scoring for vendor health.

    Starts from BASE_SCORE and applies three independent adjustments.
    Each adjustment picks one mutually exclusive band using strict
    comparisons. A rating exactly on one of its thresholds (e.g. 4.5)
    falls into the neutral band. The final sum is clamped to [0, 100].
    """

    BASE_SCORE: int = 50
    MIN_SCORE: int = 0
    MAX_SCORE: int = 100

    # Rating thresholds (strict)
    RATING_EXCELLENT: float = 4.5
    RATING_GOOD: float = 4.0
    RATING_POOR: float = 3.0

    # Completion rate thresholds (strict)
    COMPLETION_EXCELLENT: float = 0.95
    COMPLETION_GOOD: float = 0.85
    COMPLETION_POOR: float = 0.70

    # Weekly earnings threshold, in currency units
    WEEKLY_EARNINGS_TARGET: int = 5000

    def __init__(self) -> None:
        """Initialize the model with a shared ScoreNormalizer instance."""
        self._normalizer = ScoreNormalizer()

    def compute(self, metrics: VendorMetrics, earnings: EarningsSummary) -> int:
        """Compute the credibility score for one vendor snapshot.

        Adjustments:
            - rating:     > 4.5 → +20, > 4.0 → +10, < 3.0 → -10
            - completion: > 0.95 → +20, > 0.85 → +10, < 0.70 → -15
            - earnings:   this_week > 5000 → +10

        Ratings of exactly 4.5, 4.0 or 3.0 score 0. Completion bands are
        strict in order, so exactly 0.95 earns +10.

        A vendor with zero placed orders has no completion rate; the
        completion adjustment is skipped entirely.

        Args:
            metrics: Operational metrics of the vendor.
            earnings: Earnings summary derived from the vendor's ledger.

        Returns:
            An integer in [0, 100].
        """
        completion_rate = self._normalizer.safe_ratio(
            metrics.order_served, metrics.order_placed
        )

        score: float = float(self.BASE_SCORE)
        score += self.rating_adjustment(metrics.avg_rating)
        score += self.completion_adjustment(completion_rate)
        score += self.earnings_adjustment(earnings.this_week)

        return int(round(self._normalizer.clamp(score, self.MIN_SCORE, self.MAX_SCORE)))

    def rating_adjustment(self, rating: float) -> int:
        """Return the rating band adjustment; exact thresholds score 0."""
        if rating in (self.RATING_EXCELLENT, self.RATING_GOOD, self.RATING_POOR):
            return 0
        if rating > self.RATING_EXCELLENT:
            return 20
        if rating > self.RATING_GOOD:
            return 10
        if rating < self.RATING_POOR:
            return -10
        return 0

    def completion_adjustment(self, completion_rate: float | None) -> int:
        """Return the completion band adjustment, or 0 for an undefined rate."""
        if completion_rate is None:
            return 0
        if completion_rate > self.COMPLETION_EXCELLENT:
            return 20
        if completion_rate > self.COMPLETION_GOOD:
            return 10
        if completion_rate < self.COMPLETION_POOR:
            return -15
        return 0

    def earnings_adjustment(self, this_week: float) -> int:
        """Return +10 when weekly earnings beat the target."""
        return 10 if this_week > self.WEEKLY_EARNINGS_TARGET else 0
