"""Domain package exports."""

from tripbuilder.domain.enums import ActivityCategory, ActivityUnitType, TravelerType
from tripbuilder.domain.exceptions import (
    DayOutOfRange,
    DomainError,
    IncompleteState,
    InvalidRoster,
    InvalidTripDates,
)
from tripbuilder.domain.models import (
    Accommodation,
    Activity,
    ActivityDeposit,
    ActivityPricing,
    BookingValidation,
    DayItinerary,
    PricingBreakdown,
    SelectedActivity,
    Traveler,
    TripDates,
    TripItinerary,
)

__all__ = [
    "Accommodation",
    "Activity",
    "ActivityCategory",
    "ActivityDeposit",
    "ActivityPricing",
    "ActivityUnitType",
    "BookingValidation",
    "DayItinerary",
    "DayOutOfRange",
    "DomainError",
    "IncompleteState",
    "InvalidRoster",
    "InvalidTripDates",
    "PricingBreakdown",
    "SelectedActivity",
    "Traveler",
    "TravelerType",
    "TripDates",
    "TripItinerary",
]
