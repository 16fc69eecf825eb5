"""Validator orchestration."""

from __future__ import annotations

from collections.abc import Sequence

from tripbuilder.domain.models import Activity, BookingValidation, Traveler
from tripbuilder.validators.booking_validator import validate_activity_booking
from tripbuilder.validators.scheduling import (
    FULL_DAY_CONFLICT,
    check_day_addition,
    check_scheduling_conflicts,
)


def validate_day_addition(
    current: Sequence[Activity],
    candidate: Activity,
    participants: Sequence[Traveler],
) -> BookingValidation:
    """Booking eligibility plus same-day conflicts, all evaluated."""
    booking = validate_activity_booking(candidate, participants)
    errors = [*booking.errors, *check_day_addition(current, candidate)]
    return BookingValidation(valid=not errors, errors=tuple(errors))


__all__ = [
    "FULL_DAY_CONFLICT",
    "check_day_addition",
    "check_scheduling_conflicts",
    "validate_activity_booking",
    "validate_day_addition",
]
