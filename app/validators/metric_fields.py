"""
app/validators/metric_fields.py

Lenient numeric parsing for vendor metric updates.

A value that cannot be parsed yields ``None`` so the caller keeps the
previously stored value instead of rejecting the whole update.
"""

from __future__ import annotations

import math
from decimal import Decimal, InvalidOperation
from typing import Any

# Upper bound for order counts and sale amounts.
MAX_COUNT = 10**12


class MetricFieldParser:
    """
    Parses raw update values (numbers or numeric strings) into typed values.

    Metric fields only overwrite stored values when they parse to a
    positive number, so ``0`` keeps the previous value. Sale amounts may
    be zero.
    """

    def parse_count(self, value: Any) -> int | None:
        """
        Parse a positive integer count.

        Fractional input is truncated toward zero (``"12.7"`` → ``12``).
        Zero, negative, oversized, blank, boolean or non-numeric input
        returns ``None``.
        """

        count = self._to_bounded_int(value)
        if count is None or count == 0:
            return None
        return count

    def parse_rating(self, value: Any) -> float | None:
        """
        Parse a positive finite float rating. Range checks are left to the caller.
        """

        decimal_value = self._to_decimal(value)
        if decimal_value is None:
            return None
        rating = float(decimal_value)
        return rating if rating > 0 else None

    def parse_amount(self, value: Any) -> int | None:
        """
        Parse a non-negative integer sale amount.
        """

        return self._to_bounded_int(value)

    def _to_bounded_int(self, value: Any) -> int | None:
        decimal_value = self._to_decimal(value)
        if decimal_value is None or decimal_value < 0 or decimal_value > MAX_COUNT:
            return None
        return int(decimal_value)

    def _to_decimal(self, value: Any) -> Decimal | None:
        if self._is_blank(value) or isinstance(value, bool):
            return None
        if isinstance(value, float) and not math.isfinite(value):
            return None
        if not isinstance(value, (int, float, str, Decimal)):
            return None

        try:
            decimal_value = Decimal(str(value).strip())
        except (InvalidOperation, ValueError):
            return None

        # Decimal keeps exponents like 1e400 finite; float() does not.
        if not decimal_value.is_finite() or not math.isfinite(float(decimal_value)):
            return None
        return decimal_value

    @staticmethod
    def _is_blank(value: Any) -> bool:
        if value is None:
            return True
        return isinstance(value, str) and value.strip() == ""
