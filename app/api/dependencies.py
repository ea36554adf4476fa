"""
app/api/dependencies.py

Shared FastAPI dependencies for vendor analytics handlers.
"""

from __future__ import annotations

from fastapi import Depends, HTTPException, Request, status

from app.repositories.vendor_store import InMemoryVendorStore
from app.services.vendor_analytics_service import VendorAnalyticsService


def get_vendor_store(request: Request) -> InMemoryVendorStore:
    """
    Return the store built at application startup.
    """

    store = getattr(request.app.state, "vendor_store", None)
    if store is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Vendor store is not initialised.",
        )
    return store


def get_vendor_analytics_service(
    store: InMemoryVendorStore = Depends(get_vendor_store),
) -> VendorAnalyticsService:
    """
    Build a request-scoped analytics service around the shared store.
    """

    return VendorAnalyticsService(store)
