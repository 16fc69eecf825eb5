"""Versioned planner state and its selection mutators.

``PlannerState`` is immutable: every mutation returns a ``StateUpdate`` holding
the next state. Rejected mutations hand back the input state untouched, so a
selection map can only ever contain activities that passed the booking
validator and the same-day scheduling checks.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from types import MappingProxyType
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator, model_validator

from tripbuilder.domain.models import Accommodation, Activity, Traveler, TripDates
from tripbuilder.pricing.currency import round_money
from tripbuilder.pricing.engine import calculate_activity_pricing
from tripbuilder.pricing.participants import create_participants, normalize_children_ages
from tripbuilder.validators import validate_activity_booking, validate_day_addition

_logger = logging.getLogger("trip-builder.state")

FIRST_STEP = 1
LAST_STEP = 4
DEFAULT_ADULTS = 2

SelectionMap = Mapping[int, tuple[Activity, ...]]


def _freeze(selections: Mapping[int, Sequence[Activity]]) -> SelectionMap:
    """Read-only copy of a selection map; days in order, empty days dropped."""
    return MappingProxyType({day: tuple(items) for day, items in sorted(selections.items()) if items})


class PlannerState(BaseModel):
    model_config = ConfigDict(frozen=True)

    version: int = 0
    dates: Optional[TripDates] = None
    accommodation: Optional[Accommodation] = None
    adults: int = Field(default=DEFAULT_ADULTS, ge=0)
    children: int = Field(default=0, ge=0)
    children_ages: tuple[int, ...] = ()
    has_seniors: bool = False
    selections: SelectionMap = Field(default_factory=lambda: MappingProxyType({}))
    current_step: int = Field(default=FIRST_STEP, ge=FIRST_STEP, le=LAST_STEP)

    @field_validator("selections", mode="after")
    @classmethod
    def _freeze_selections(cls, value: Mapping[int, tuple[Activity, ...]]) -> SelectionMap:
        return _freeze(value)

    @field_serializer("selections")
    def _dump_selections(self, value: SelectionMap) -> dict[int, tuple[Activity, ...]]:
        return dict(value)

    @model_validator(mode="after")
    def _check_ages(self) -> "PlannerState":
        if len(self.children_ages) < self.children:
            raise ValueError(f"{self.children} children declared but only {len(self.children_ages)} ages given")
        return self


class StateUpdate(BaseModel):
    model_config = ConfigDict(frozen=True)

    state: PlannerState
    accepted: bool
    errors: tuple[str, ...] = ()
    notices: tuple[str, ...] = ()


def _commit(state: PlannerState, *, notices: Sequence[str] = (), **changes) -> StateUpdate:
    # model_copy skips validation; every version gets its own read-only map
    changes["selections"] = _freeze(changes.get("selections", state.selections))
    updated = state.model_copy(update={**changes, "version": state.version + 1})
    return StateUpdate(state=updated, accepted=True, notices=tuple(notices))


def _reject(state: PlannerState, errors: Sequence[str]) -> StateUpdate:
    _logger.info("state change rejected (version=%s): %s", state.version, "; ".join(errors))
    return StateUpdate(state=state, accepted=False, errors=tuple(errors))


def participants(state: PlannerState) -> list[Traveler]:
    return create_participants(state.adults, state.children, state.children_ages, state.has_seniors)


def available_days(state: PlannerState) -> int:
    return state.dates.days if state.dates is not None else 1


def day_activities(state: PlannerState, day: int) -> tuple[Activity, ...]:
    return state.selections.get(day, ())


def is_selected(state: PlannerState, day: int, activity_id: str) -> bool:
    return any(item.id == activity_id for item in day_activities(state, day))


def set_dates(state: PlannerState, dates: TripDates) -> StateUpdate:
    kept = {day: items for day, items in state.selections.items() if day <= dates.days}
    dropped = sorted(day for day in state.selections if day > dates.days)
    notices = [f"Dia {day} removido: fora do novo período" for day in dropped]
    return _commit(state, notices=notices, dates=dates, selections=kept)


def set_accommodation(state: PlannerState, accommodation: Accommodation) -> StateUpdate:
    return _commit(state, accommodation=accommodation)


def set_roster(
    state: PlannerState,
    *,
    adults: int,
    children: int = 0,
    children_ages: Sequence[int] = (),
    has_seniors: bool = False,
) -> StateUpdate:
    """Replace the head-counts and drop selections the new roster cannot book."""
    ages = normalize_children_ages(children, children_ages)
    roster = create_participants(adults, children, ages, has_seniors)

    kept: dict[int, tuple[Activity, ...]] = {}
    notices: list[str] = []
    for day, items in sorted(state.selections.items()):
        still_valid: list[Activity] = []
        for activity in items:
            result = validate_activity_booking(activity, roster)
            if result.valid:
                still_valid.append(activity)
                continue
            notices.append(f"Dia {day}: {activity.name} removida ({'; '.join(result.errors)})")
        kept[day] = tuple(still_valid)

    return _commit(
        state,
        notices=notices,
        adults=adults,
        children=children,
        children_ages=tuple(ages),
        has_seniors=has_seniors,
        selections=kept,
    )


def add_activity(state: PlannerState, day: int, activity: Activity) -> StateUpdate:
    days = available_days(state)
    if day < 1 or day > days:
        return _reject(state, [f"Dia {day} fora do período da viagem (1 a {days})"])

    current = day_activities(state, day)
    result = validate_day_addition(current, activity, participants(state))
    if not result.valid:
        return _reject(state, result.errors)

    selections = dict(state.selections)
    selections[day] = (*current, activity)
    return _commit(state, selections=selections)


def remove_activity(state: PlannerState, day: int, activity_id: str) -> StateUpdate:
    current = day_activities(state, day)
    remaining = tuple(item for item in current if item.id != activity_id)
    if len(remaining) == len(current):
        return _reject(state, [f"Atividade {activity_id} não está selecionada no dia {day}"])

    selections = dict(state.selections)
    selections[day] = remaining
    return _commit(state, selections=selections)


def toggle_activity(state: PlannerState, day: int, activity: Activity) -> StateUpdate:
    if is_selected(state, day, activity.id):
        return remove_activity(state, day, activity.id)
    return add_activity(state, day, activity)


def is_step_complete(state: PlannerState, step: int) -> bool:
    if step == 1:
        return state.dates is not None
    if step == 2:
        return state.accommodation is not None
    if step == 3:
        return state.adults > 0
    if step == 4:
        return selected_count(state) > 0
    return False


def can_generate(state: PlannerState) -> bool:
    return all(is_step_complete(state, step) for step in range(FIRST_STEP, LAST_STEP + 1))


def go_to_step(state: PlannerState, step: int) -> StateUpdate:
    if step < FIRST_STEP or step > LAST_STEP:
        return _reject(state, [f"Etapa inválida: {step}"])
    return _commit(state, current_step=step)


def advance_step(state: PlannerState) -> StateUpdate:
    return go_to_step(state, min(state.current_step + 1, LAST_STEP))


def reset_state(state: PlannerState) -> StateUpdate:
    return StateUpdate(state=PlannerState(version=state.version + 1), accepted=True)


def selected_count(state: PlannerState) -> int:
    return sum(len(items) for items in state.selections.values())


def day_total(state: PlannerState, day: int) -> float:
    roster = participants(state)
    total = sum(calculate_activity_pricing(item, roster).total for item in day_activities(state, day))
    return round_money(total)


__all__ = [
    "PlannerState",
    "SelectionMap",
    "StateUpdate",
    "add_activity",
    "advance_step",
    "available_days",
    "can_generate",
    "day_activities",
    "day_total",
    "go_to_step",
    "is_selected",
    "is_step_complete",
    "participants",
    "remove_activity",
    "reset_state",
    "selected_count",
    "set_accommodation",
    "set_dates",
    "set_roster",
    "toggle_activity",
]
