"""Pydantic domain models."""

from __future__ import annotations

import datetime as dt
import math
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field, model_validator

from tripbuilder.domain.enums import ActivityCategory, ActivityUnitType, TravelerType
from tripbuilder.domain.exceptions import InvalidTripDates

_SECONDS_PER_DAY = 24 * 60 * 60


class Traveler(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: TravelerType
    age: Optional[int] = Field(default=None, ge=0)


class ActivityPricing(BaseModel):
    model_config = ConfigDict(frozen=True)

    adu: float = Field(ge=0)
    chd: float = Field(ge=0)
    inf: float = Field(default=0.0, ge=0)


class ActivityDeposit(BaseModel):
    model_config = ConfigDict(frozen=True)

    adu: float = Field(ge=0)
    chd: float = Field(ge=0)
    inf: Optional[float] = Field(default=None, ge=0)


class Activity(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str = Field(min_length=1)
    name: str
    category: ActivityCategory
    type: ActivityUnitType
    duration: str = ""
    pricing: ActivityPricing
    deposit: Optional[ActivityDeposit] = None
    min_adults: int = Field(default=0, ge=0)
    max_capacity: int = Field(ge=0)
    description: str = ""
    requirements: tuple[str, ...] = ()
    schedule: Optional[str] = None
    includes: tuple[str, ...] = ()
    excludes: tuple[str, ...] = ()


class Accommodation(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str = Field(min_length=1)
    name: str
    location: str = ""
    type: Optional[str] = None


def count_trip_days(arrival: dt.datetime, departure: dt.datetime) -> int:
    """Whole days between two instants, rounded up."""
    seconds = abs((departure - arrival).total_seconds())
    return math.ceil(seconds / _SECONDS_PER_DAY)


class TripDates(BaseModel):
    model_config = ConfigDict(frozen=True)

    arrival: dt.datetime
    departure: dt.datetime

    @model_validator(mode="after")
    def _check_range(self) -> "TripDates":
        if self.departure < self.arrival:
            raise ValueError("departure must not be before arrival")
        if count_trip_days(self.arrival, self.departure) < 1:
            raise ValueError("trip must span at least one day")
        return self

    @computed_field  # type: ignore[prop-decorator]
    @property
    def days(self) -> int:
        return count_trip_days(self.arrival, self.departure)

    def date_for_day(self, day: int) -> dt.date:
        return self.arrival.date() + dt.timedelta(days=day - 1)

    @classmethod
    def from_range(cls, arrival: dt.date | dt.datetime, departure: dt.date | dt.datetime) -> "TripDates":
        start = _as_datetime(arrival)
        end = _as_datetime(departure)
        if end < start:
            raise InvalidTripDates(f"departure {end.isoformat()} is before arrival {start.isoformat()}")
        if count_trip_days(start, end) < 1:
            raise InvalidTripDates("arrival and departure must be at least one day apart")
        return cls(arrival=start, departure=end)


def _as_datetime(value: dt.date | dt.datetime) -> dt.datetime:
    if isinstance(value, dt.datetime):
        return value
    return dt.datetime.combine(value, dt.time.min)


class PricingBreakdown(BaseModel):
    model_config = ConfigDict(frozen=True)

    adults: float = 0.0
    children: float = 0.0
    infants: float = 0.0
    seniors: float = 0.0
    total: float = 0.0
    deposit: Optional[float] = None
    remaining: Optional[float] = None

    @property
    def has_deposit(self) -> bool:
        return self.deposit is not None


class SelectedActivity(BaseModel):
    model_config = ConfigDict(frozen=True)

    activity: Activity
    day: int = Field(ge=1)
    participants: tuple[Traveler, ...] = ()


class DayItinerary(BaseModel):
    model_config = ConfigDict(frozen=True)

    day: int = Field(ge=1)
    date: dt.date
    activities: tuple[SelectedActivity, ...] = ()
    pricing: PricingBreakdown = Field(default_factory=PricingBreakdown)

    @property
    def is_free(self) -> bool:
        return not self.activities


class TripItinerary(BaseModel):
    """Generated itinerary; only ``generated_text`` may be edited afterwards."""

    model_config = ConfigDict(validate_assignment=True)

    dates: TripDates = Field(frozen=True)
    accommodation: Accommodation = Field(frozen=True)
    people: tuple[Traveler, ...] = Field(default=(), frozen=True)
    days: tuple[DayItinerary, ...] = Field(default=(), frozen=True)
    total_pricing: PricingBreakdown = Field(default_factory=PricingBreakdown, frozen=True)
    generated_text: str = ""


class BookingValidation(BaseModel):
    model_config = ConfigDict(frozen=True)

    valid: bool
    errors: tuple[str, ...] = ()
