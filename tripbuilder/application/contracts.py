"""Application request/response contracts."""

from __future__ import annotations

import datetime as dt
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from tripbuilder.domain.models import TripItinerary


class PlanStatus(str, Enum):
    DONE = "done"
    REJECTED = "rejected"


class RosterInput(BaseModel):
    adults: int = Field(default=2, ge=0, le=50)
    children: int = Field(default=0, ge=0, le=50)
    children_ages: list[int] = Field(default_factory=list)
    has_seniors: bool = Field(default=False, description="+60 flag; at most two adults become seniors")


class DaySelectionInput(BaseModel):
    day: int = Field(ge=1)
    activity_ids: list[str] = Field(default_factory=list)


class ItineraryRequest(BaseModel):
    arrival: dt.date
    departure: dt.date
    accommodation_id: str = Field(min_length=1)
    roster: RosterInput = Field(default_factory=RosterInput)
    selections: list[DaySelectionInput] = Field(default_factory=list)
    generated_at: Optional[dt.datetime] = Field(
        default=None,
        description="Timestamp printed in the text; defaults to the clock passed to plan_itinerary",
    )


class PlanResult(BaseModel):
    status: PlanStatus
    itinerary: Optional[TripItinerary] = None
    text: str = ""
    errors: list[str] = Field(default_factory=list)
    state_version: int = 0
