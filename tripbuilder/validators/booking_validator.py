"""Booking eligibility validator (read-only: never mutates the activity or roster)."""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from tripbuilder.domain.models import Activity, BookingValidation, Traveler
from tripbuilder.pricing.participants import pricing_adults
from tripbuilder.validators.rules import ACTIVITY_RULES, ExclusionRule


def validate_activity_booking(
    activity: Activity,
    participants: Sequence[Traveler],
    *,
    rules: Mapping[str, tuple[ExclusionRule, ...]] | None = None,
) -> BookingValidation:
    errors: list[str] = []

    # seniors count toward the adult minimum
    adults = pricing_adults(participants)
    if adults < activity.min_adults:
        errors.append(f"Mínimo de {activity.min_adults} adulto(s) necessário(s)")

    if len(participants) > activity.max_capacity:
        errors.append(f"Capacidade máxima de {activity.max_capacity} pessoas")

    registry = ACTIVITY_RULES if rules is None else rules
    for rule in registry.get(activity.id, ()):
        errors.extend(rule.check(activity, participants))

    return BookingValidation(valid=not errors, errors=tuple(errors))


__all__ = ["validate_activity_booking"]
