"""
app/repositories package marker.
"""

from app.repositories.vendor_store import InMemoryVendorStore, MetricsUpdateOutcome

__all__ = [
    "InMemoryVendorStore",
    "MetricsUpdateOutcome",
]
