"""
app/schemas/vendor_analytics.py

Request and response schemas for vendor analytics endpoints.

Wire names follow the dashboard's camelCase contract; Python attributes
stay snake_case through aliases.
"""

from __future__ import annotations

from typing import Any, Union

from pydantic import BaseModel, ConfigDict, Field

from app.services.vendor_analytics_service import VendorAnalytics, VendorUpdateResult


class BilingualSuggestionResponse(BaseModel):
    """
    One suggestion rendered in English and Hindi.
    """

    model_config = ConfigDict(frozen=True)

    en: str
    hi: str


class InsightsResponse(BaseModel):
    """
    Credibility score and suggestions. Suggestions may be legacy plain strings.
    """

    credibility_score: int = Field(..., ge=0, le=100)
    suggestions: list[Union[BilingualSuggestionResponse, str]] = Field(default_factory=list, max_length=3)


class EarningsResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    today: int = Field(..., ge=0)
    this_week: int = Field(..., ge=0, alias="thisWeek")
    this_month: int = Field(..., ge=0, alias="thisMonth")
    total: int = Field(..., ge=0)


class VendorAnalyticsResponse(BaseModel):
    """
    API response for ``GET /api/vendor/analytics/{vendor_id}``.
    """

    model_config = ConfigDict(populate_by_name=True)

    order_placed: int = Field(..., alias="orderPlaced")
    order_served: int = Field(..., alias="orderServed")
    avg_rating: float = Field(..., alias="avgRating")
    total_dishes: int = Field(..., alias="totalDishes")
    earnings: EarningsResponse
    ai_insights: InsightsResponse

    @classmethod
    def from_analytics(cls, analytics: VendorAnalytics) -> "VendorAnalyticsResponse":
        metrics = analytics.metrics
        earnings = analytics.earnings
        return cls(
            order_placed=metrics.order_placed,
            order_served=metrics.order_served,
            avg_rating=metrics.avg_rating,
            total_dishes=metrics.total_dishes,
            earnings=EarningsResponse(
                today=earnings.today,
                this_week=earnings.this_week,
                this_month=earnings.this_month,
                total=earnings.total,
            ),
            ai_insights=InsightsResponse(
                credibility_score=analytics.insights.credibility_score,
                suggestions=[
                    BilingualSuggestionResponse(en=s.en, hi=s.hi)
                    for s in analytics.insights.suggestions
                ],
            ),
        )


class VendorUpdateRequest(BaseModel):
    """
    Partial simulation update. Every field is optional and may be a string.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    amount: Any = None
    order_placed: Any = Field(default=None, alias="orderPlaced")
    order_served: Any = Field(default=None, alias="orderServed")
    avg_rating: Any = Field(default=None, alias="avgRating")

    def to_payload(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True)


class VendorUpdateResponse(BaseModel):
    """
    API response for ``POST /api/vendor/update/{vendor_id}``.
    """

    message: str = "Data updated successfully"
    ignored_fields: list[str] = Field(default_factory=list)

    @classmethod
    def from_result(cls, result: VendorUpdateResult) -> "VendorUpdateResponse":
        return cls(ignored_fields=list(result.ignored_fields))
