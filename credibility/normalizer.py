"""
credibility/normalizer.py

Deterministic numeric helpers for score computation.
"""


class ScoreNormalizer:
    """Provides stateless helpers for bounding and dividing score inputs.

    All methods are deterministic. No external dependencies, state,
    or side effects.
    """

    def safe_ratio(self, numerator: float, denominator: float) -> float | None:
        """Divide two values, returning ``None`` instead of failing on zero.

        Args:
            numerator: The dividend.
            denominator: The divisor.

        Returns:
            ``numerator / denominator``, or ``None`` when the divisor is zero
            or the quotient does not fit in a float.
        """
        if denominator == 0:
            return None
        try:
            return numerator / denominator
        except OverflowError:
            return None

    def clamp(self, value: float, min_value: float, max_value: float) -> float:
        """Clamp a value to the specified [min_value, max_value] range.

        Args:
            value: The float to clamp.
            min_value: The lower bound of the output range.
            max_value: The upper bound of the output range.

        Returns:
            value if within bounds, otherwise min_value or max_value.
        """
        return max(min_value, min(value, max_value))
