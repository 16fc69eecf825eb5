"""Roster classification, pricing and currency formatting."""

from tripbuilder.pricing.currency import format_currency, round_money
from tripbuilder.pricing.engine import calculate_activity_pricing, calculate_trip_total, sum_breakdowns
from tripbuilder.pricing.participants import (
    SENIOR_CAP,
    count_by_type,
    create_participants,
    normalize_children_ages,
    pricing_adults,
)

__all__ = [
    "SENIOR_CAP",
    "calculate_activity_pricing",
    "calculate_trip_total",
    "count_by_type",
    "create_participants",
    "format_currency",
    "round_money",
    "normalize_children_ages",
    "pricing_adults",
    "sum_breakdowns",
]
