"""
app/services package marker.
"""

from app.services.errors import VendorAnalyticsError, VendorNotFoundError
from app.services.vendor_analytics_service import (
    VendorAnalytics,
    VendorAnalyticsService,
    VendorUpdateResult,
)

__all__ = [
    "VendorAnalytics",
    "VendorAnalyticsError",
    "VendorAnalyticsService",
    "VendorNotFoundError",
    "VendorUpdateResult",
]
