"""
app/validators package marker.
"""

from app.validators.metric_fields import MetricFieldParser

__all__ = [
    "MetricFieldParser",
]
