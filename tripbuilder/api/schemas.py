"""API request/response models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from tripbuilder.application.contracts import ItineraryRequest, PlanResult, RosterInput
from tripbuilder.domain.models import Accommodation, Activity, BookingValidation, PricingBreakdown


class QuoteResponse(BaseModel):
    activity_id: str
    pricing: PricingBreakdown
    validation: BookingValidation
    preview: str = Field(default="", description="Plain-text price preview")


class AccommodationListResponse(BaseModel):
    accommodations: list[Accommodation]


class ActivityListResponse(BaseModel):
    activities: list[Activity]


class HealthResponse(BaseModel):
    status: str = "ok"


__all__ = [
    "AccommodationListResponse",
    "ActivityListResponse",
    "HealthResponse",
    "ItineraryRequest",
    "PlanResult",
    "QuoteResponse",
    "RosterInput",
]
