"""Itinerary assembly: day-by-day pricing folded into a trip itinerary.

The aggregator prices whatever selection map it is given; eligibility was
already enforced by the state mutators when each activity was added.
"""

from __future__ import annotations

import datetime as dt
from collections.abc import Callable, Mapping, Sequence

from tripbuilder.application.state import PlannerState, participants
from tripbuilder.domain.exceptions import DayOutOfRange, IncompleteState
from tripbuilder.domain.models import (
    Accommodation,
    Activity,
    DayItinerary,
    SelectedActivity,
    Traveler,
    TripDates,
    TripItinerary,
)
from tripbuilder.infrastructure.logging import get_logger
from tripbuilder.nlg.renderer import render_itinerary_text
from tripbuilder.pricing.engine import calculate_activity_pricing, calculate_trip_total, sum_breakdowns

Clock = Callable[[], dt.datetime]


def build_day_itinerary(
    dates: TripDates,
    day: int,
    activities: Sequence[Activity],
    people: Sequence[Traveler],
) -> DayItinerary:
    snapshot = tuple(people)
    selected = tuple(SelectedActivity(activity=item, day=day, participants=snapshot) for item in activities)
    pricing = sum_breakdowns(calculate_activity_pricing(item, snapshot) for item in activities)
    return DayItinerary(day=day, date=dates.date_for_day(day), activities=selected, pricing=pricing)


def build_trip_itinerary(
    dates: TripDates,
    accommodation: Accommodation,
    people: Sequence[Traveler],
    selections: Mapping[int, Sequence[Activity]],
    *,
    generated_at: dt.datetime,
) -> TripItinerary:
    for day in selections:
        if day < 1 or day > dates.days:
            raise DayOutOfRange(day, dates.days)

    days = tuple(
        build_day_itinerary(dates, day, selections.get(day, ()), people)
        for day in range(1, dates.days + 1)
    )
    itinerary = TripItinerary(
        dates=dates,
        accommodation=accommodation,
        people=tuple(people),
        days=days,
        total_pricing=calculate_trip_total(day.pricing for day in days),
    )
    itinerary.generated_text = render_itinerary_text(itinerary, generated_at=generated_at)
    return itinerary


def generate_itinerary(state: PlannerState, *, clock: Clock) -> TripItinerary:
    missing = [name for name in ("dates", "accommodation") if getattr(state, name) is None]
    if missing:
        raise IncompleteState(missing)

    logger = get_logger()
    logger.start("generate_itinerary", state_version=state.version)
    itinerary = build_trip_itinerary(
        state.dates,
        state.accommodation,
        participants(state),
        state.selections,
        generated_at=clock(),
    )
    logger.end(
        "generate_itinerary",
        state_version=state.version,
        days=itinerary.dates.days,
        activities=sum(len(day.activities) for day in itinerary.days),
        total=itinerary.total_pricing.total,
    )
    return itinerary


__all__ = ["Clock", "build_day_itinerary", "build_trip_itinerary", "generate_itinerary"]
