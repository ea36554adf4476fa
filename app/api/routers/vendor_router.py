"""
app/api/routers/vendor_router.py

Vendor analytics and simulation endpoints.

    GET  /api/vendor/analytics/{vendor_id}  → metrics, earnings, ai_insights
    POST /api/vendor/update/{vendor_id}     → merge metrics, append a sale
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from app.api.dependencies import get_vendor_analytics_service
from app.schemas.vendor_analytics import (
    VendorAnalyticsResponse,
    VendorUpdateRequest,
    VendorUpdateResponse,
)
from app.services.errors import VendorNotFoundError
from app.services.vendor_analytics_service import VendorAnalyticsService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/vendor", tags=["vendor"])


@router.get(
    "/analytics/{vendor_id}",
    response_model=VendorAnalyticsResponse,
    status_code=status.HTTP_200_OK,
)
def get_vendor_analytics(
    vendor_id: str,
    service: VendorAnalyticsService = Depends(get_vendor_analytics_service),
) -> VendorAnalyticsResponse:
    """
    Return stored metrics, fresh earnings and the credibility insights.

    Raises HTTP 404 when the vendor has no metrics record.
    """
    try:
        analytics = service.get_analytics(vendor_id)
    except VendorNotFoundError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Vendor not found",
        ) from exc
    return VendorAnalyticsResponse.from_analytics(analytics)


@router.post(
    "/update/{vendor_id}",
    response_model=VendorUpdateResponse,
    status_code=status.HTTP_200_OK,
)
def update_vendor(
    vendor_id: str,
    body: VendorUpdateRequest,
    service: VendorAnalyticsService = Depends(get_vendor_analytics_service),
) -> VendorUpdateResponse:
    """
    Apply a manual simulation update.

    Unparseable fields are dropped and echoed back in ``ignored_fields``;
    they never fail the request. A zero count or rating keeps the stored
    value.

    Raises HTTP 404 for unknown vendors. Nothing is written in that case:
    a valid ``amount`` is not appended to the ledger and no metrics record
    is created for the id.
    """
    try:
        result = service.apply_update(vendor_id, body.to_payload())
    except VendorNotFoundError as exc:
        logger.info("Update rejected for unknown vendor=%r", vendor_id)
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Vendor not found",
        ) from exc
    return VendorUpdateResponse.from_result(result)
