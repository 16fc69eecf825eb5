"""Per-activity pricing and breakdown aggregation.

Seniors are billed at the adult rate; the ``seniors`` subtotal is kept only
for display and is always zero. A deposit (and therefore a remaining balance)
is reported only when its computed value is non-zero.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from tripbuilder.domain.enums import TravelerType
from tripbuilder.domain.models import Activity, PricingBreakdown, Traveler
from tripbuilder.pricing.currency import round_money
from tripbuilder.pricing.participants import count_by_type


def _money(value: float) -> float:
    return round_money(value)


def _present_or_none(deposit: float, remaining: float) -> tuple[float | None, float | None]:
    if deposit <= 0:
        return None, None
    return _money(deposit), _money(remaining)


def calculate_activity_pricing(activity: Activity, participants: Sequence[Traveler]) -> PricingBreakdown:
    counts = count_by_type(participants)
    adults = counts[TravelerType.ADULT] + counts[TravelerType.SENIOR]
    children = counts[TravelerType.CHILD]
    infants = counts[TravelerType.INFANT]

    adult_price = _money(adults * activity.pricing.adu)
    child_price = _money(children * activity.pricing.chd)
    infant_price = _money(infants * activity.pricing.inf)
    total = _money(adult_price + child_price + infant_price)

    deposit = 0.0
    remaining = 0.0
    if activity.deposit is not None:
        deposit = _money(
            adults * activity.deposit.adu
            + children * activity.deposit.chd
            + infants * (activity.deposit.inf or 0.0)
        )
        remaining = total - deposit

    deposit_value, remaining_value = _present_or_none(deposit, remaining)
    return PricingBreakdown(
        adults=adult_price,
        children=child_price,
        infants=infant_price,
        seniors=0.0,
        total=total,
        deposit=deposit_value,
        remaining=remaining_value,
    )


def sum_breakdowns(breakdowns: Iterable[PricingBreakdown]) -> PricingBreakdown:
    """Fold breakdowns field by field; absent deposits contribute zero."""
    adults = children = infants = seniors = total = 0.0
    deposit = remaining = 0.0
    for row in breakdowns:
        adults += row.adults
        children += row.children
        infants += row.infants
        seniors += row.seniors
        total += row.total
        deposit += row.deposit or 0.0
        remaining += row.remaining or 0.0

    deposit_value, remaining_value = _present_or_none(deposit, remaining)
    return PricingBreakdown(
        adults=_money(adults),
        children=_money(children),
        infants=_money(infants),
        seniors=_money(seniors),
        total=_money(total),
        deposit=deposit_value,
        remaining=remaining_value,
    )


def calculate_trip_total(day_pricings: Iterable[PricingBreakdown]) -> PricingBreakdown:
    return sum_breakdowns(day_pricings)


__all__ = ["calculate_activity_pricing", "calculate_trip_total", "sum_breakdowns"]
