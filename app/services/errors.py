"""
Service-layer exceptions for vendor analytics flows.
"""

from __future__ import annotations


class VendorAnalyticsError(Exception):
    """Base exception for vendor analytics failures."""


class VendorNotFoundError(VendorAnalyticsError):
    """Raised when no metrics record exists for a vendor id."""

    def __init__(self, vendor_id: str) -> None:
        super().__init__(f"Vendor not found: {vendor_id!r}")
        self.vendor_id = vendor_id
