"""Activity-specific exclusion rules keyed by activity id."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Protocol

from tripbuilder.domain.enums import TravelerType
from tripbuilder.domain.models import Activity, Traveler


class ExclusionRule(Protocol):
    """Single-responsibility eligibility rule for one activity.

    ``activity`` is passed to every rule so one rule class can be registered
    for several activities and read their fields (capacity, unit type).
    """

    def check(self, activity: Activity, participants: Sequence[Traveler]) -> list[str]:
        ...


class AdultsOnlyRule:
    message = "Apenas adultos podem participar desta atividade"

    def check(self, activity: Activity, participants: Sequence[Traveler]) -> list[str]:
        minors = (TravelerType.CHILD, TravelerType.INFANT)
        if any(person.type in minors for person in participants):
            return [self.message]
        return []


ACTIVITY_RULES: Mapping[str, tuple[ExclusionRule, ...]] = {
    "quadriciclo_praia": (AdultsOnlyRule(),),
}


__all__ = ["ACTIVITY_RULES", "AdultsOnlyRule", "ExclusionRule"]
