"""
app/api/routers package marker.
"""

from app.api.routers.vendor_router import router as vendor_router

__all__ = [
    "vendor_router",
]
