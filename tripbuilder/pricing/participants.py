"""Participant classification: head-counts and ages into a typed roster."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence

from tripbuilder.domain.enums import TravelerType
from tripbuilder.domain.exceptions import InvalidRoster
from tripbuilder.domain.models import Traveler

# Fixed cap: the form only carries a boolean "+60" flag, never a senior count.
SENIOR_CAP = 2
INFANT_AGE_LIMIT = 2
DEFAULT_CHILD_AGE = 5


def create_participants(
    adults: int,
    children: int,
    children_ages: Sequence[int],
    has_seniors: bool,
) -> list[Traveler]:
    if adults < 0 or children < 0:
        raise InvalidRoster(f"head-counts must be non-negative (adults={adults}, children={children})")
    if len(children_ages) < children:
        raise InvalidRoster(f"{children} children declared but only {len(children_ages)} ages given")

    seniors = min(adults, SENIOR_CAP) if has_seniors else 0
    participants: list[Traveler] = []
    participants.extend(Traveler(type=TravelerType.ADULT) for _ in range(adults - seniors))
    participants.extend(Traveler(type=TravelerType.SENIOR) for _ in range(seniors))

    for age in list(children_ages)[:children]:
        if age < 0:
            raise InvalidRoster(f"child age must be non-negative, got {age}")
        kind = TravelerType.INFANT if age < INFANT_AGE_LIMIT else TravelerType.CHILD
        participants.append(Traveler(type=kind, age=age))
    return participants


def normalize_children_ages(children: int, ages: Sequence[int]) -> list[int]:
    """Trim ``ages`` to ``children`` entries, padding with the default age."""
    rows = list(ages)[: max(children, 0)]
    while len(rows) < children:
        rows.append(DEFAULT_CHILD_AGE)
    return rows


def count_by_type(participants: Iterable[Traveler]) -> Counter[TravelerType]:
    counts: Counter[TravelerType] = Counter()
    for person in participants:
        counts[person.type] += 1
    return counts


def pricing_adults(participants: Iterable[Traveler]) -> int:
    """Adults for billing and minimum-adult checks; seniors count as adults."""
    counts = count_by_type(participants)
    return counts[TravelerType.ADULT] + counts[TravelerType.SENIOR]


__all__ = [
    "DEFAULT_CHILD_AGE",
    "SENIOR_CAP",
    "count_by_type",
    "create_participants",
    "normalize_children_ages",
    "pricing_adults",
]
