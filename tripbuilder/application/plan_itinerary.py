"""Single entrypoint turning a form payload into a priced itinerary."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from tripbuilder.adapters.catalog import get_accommodation, get_activity
from tripbuilder.application.aggregator import Clock, generate_itinerary
from tripbuilder.application.contracts import ItineraryRequest, PlanResult, PlanStatus
from tripbuilder.application.state import (
    PlannerState,
    StateUpdate,
    add_activity,
    set_accommodation,
    set_dates,
    set_roster,
)
from tripbuilder.domain.models import TripDates
from tripbuilder.infrastructure.logging import get_logger


def build_planner_state(request: ItineraryRequest, *, catalog_dir: Optional[Path] = None) -> StateUpdate:
    """Replay the form through the state mutators.

    Raises ``InvalidTripDates`` / ``InvalidRoster`` for malformed input and
    ``CatalogError`` for unknown ids; booking rejections come back as data.
    """
    state = PlannerState()

    update = set_dates(state, TripDates.from_range(request.arrival, request.departure))
    update = set_accommodation(update.state, get_accommodation(request.accommodation_id, catalog_dir))
    roster = request.roster
    update = set_roster(
        update.state,
        adults=roster.adults,
        children=roster.children,
        children_ages=roster.children_ages,
        has_seniors=roster.has_seniors,
    )
    state = update.state

    errors: list[str] = []
    for selection in sorted(request.selections, key=lambda row: row.day):
        for activity_id in selection.activity_ids:
            activity = get_activity(activity_id, catalog_dir)
            update = add_activity(state, selection.day, activity)
            if not update.accepted:
                errors.extend(f"Dia {selection.day} · {activity.name}: {reason}" for reason in update.errors)
                continue
            state = update.state

    return StateUpdate(state=state, accepted=not errors, errors=tuple(errors))


def plan_itinerary(
    request: ItineraryRequest,
    *,
    clock: Clock,
    catalog_dir: Optional[Path] = None,
) -> PlanResult:
    update = build_planner_state(request, catalog_dir=catalog_dir)
    if not update.accepted:
        get_logger().event("selection_rejected", errors=list(update.errors), state_version=update.state.version)
        return PlanResult(
            status=PlanStatus.REJECTED,
            errors=list(update.errors),
            state_version=update.state.version,
        )

    generated_at = request.generated_at
    itinerary = generate_itinerary(update.state, clock=(lambda: generated_at) if generated_at else clock)
    return PlanResult(
        status=PlanStatus.DONE,
        itinerary=itinerary,
        text=itinerary.generated_text,
        state_version=update.state.version,
    )


__all__ = ["build_planner_state", "plan_itinerary"]
