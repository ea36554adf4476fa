"""
app/schemas package marker.
"""

from app.schemas.vendor_analytics import (
    BilingualSuggestionResponse,
    EarningsResponse,
    InsightsResponse,
    VendorAnalyticsResponse,
    VendorUpdateRequest,
    VendorUpdateResponse,
)

__all__ = [
    "BilingualSuggestionResponse",
    "EarningsResponse",
    "InsightsResponse",
    "VendorAnalyticsResponse",
    "VendorUpdateRequest",
    "VendorUpdateResponse",
]
