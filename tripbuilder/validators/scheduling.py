"""Same-day scheduling checks applied when an activity is added to a day."""

from __future__ import annotations

from collections.abc import Sequence

from tripbuilder.domain.enums import ActivityUnitType
from tripbuilder.domain.models import Activity

FULL_DAY_CONFLICT = "Não é possível ter mais de uma atividade de dia inteiro no mesmo dia"


def _duplicate_message(activity: Activity) -> str:
    return f"Atividade já selecionada neste dia: {activity.name}"


def check_scheduling_conflicts(activities: Sequence[Activity]) -> list[str]:
    conflicts: list[str] = []

    seen: set[str] = set()
    for activity in activities:
        if activity.id in seen:
            conflicts.append(_duplicate_message(activity))
        seen.add(activity.id)

    full_day = [a for a in activities if a.type == ActivityUnitType.FULL_DAY]
    if len(full_day) > 1:
        conflicts.append(FULL_DAY_CONFLICT)
    return conflicts


def check_day_addition(current: Sequence[Activity], candidate: Activity) -> list[str]:
    """Conflicts introduced by appending ``candidate`` to ``current``."""
    conflicts: list[str] = []
    if any(a.id == candidate.id for a in current):
        conflicts.append(_duplicate_message(candidate))
    if candidate.type == ActivityUnitType.FULL_DAY and any(
        a.type == ActivityUnitType.FULL_DAY for a in current
    ):
        conflicts.append(FULL_DAY_CONFLICT)
    return conflicts


__all__ = ["FULL_DAY_CONFLICT", "check_day_addition", "check_scheduling_conflicts"]
