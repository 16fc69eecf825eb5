"""Booking validator and same-day scheduling tests."""

from tripbuilder.domain.models import Activity, ActivityPricing
from tripbuilder.pricing.participants import create_participants
from tripbuilder.validators import (
    FULL_DAY_CONFLICT,
    check_scheduling_conflicts,
    validate_activity_booking,
    validate_day_addition,
)
from tripbuilder.validators.rules import AdultsOnlyRule


def _activity(aid: str, *, min_adults: int = 1, max_capacity: int = 10, unit: str = "half_day") -> Activity:
    return Activity(
        id=aid,
        name=f"Atividade {aid}",
        category="experiencias",
        type=unit,
        pricing=ActivityPricing(adu=100, chd=50),
        min_adults=min_adults,
        max_capacity=max_capacity,
    )


def test_seniors_count_toward_adult_minimum():
    roster = create_participants(2, 0, [], True)  # both adults flagged as seniors
    result = validate_activity_booking(_activity("a", min_adults=2), roster)
    assert result.valid
    assert result.errors == ()


def test_min_adults_violation():
    result = validate_activity_booking(_activity("a", min_adults=2), create_participants(1, 1, [6], False))
    assert not result.valid
    assert result.errors == ("Mínimo de 2 adulto(s) necessário(s)",)


def test_empty_roster_violates_min_adults():
    result = validate_activity_booking(_activity("a", min_adults=1), [])
    assert not result.valid
    assert len(result.errors) == 1


def test_empty_roster_valid_when_no_adult_required():
    assert validate_activity_booking(_activity("a", min_adults=0), []).valid


def test_capacity_violation():
    result = validate_activity_booking(_activity("a", max_capacity=2), create_participants(3, 0, [], False))
    assert not result.valid
    assert result.errors == ("Capacidade máxima de 2 pessoas",)


def test_adults_only_activity_rejects_children():
    result = validate_activity_booking(_activity("quadriciclo_praia"), create_participants(2, 1, [10], False))
    assert not result.valid
    assert result.errors == (AdultsOnlyRule.message,)


def test_adults_only_activity_rejects_infants():
    result = validate_activity_booking(_activity("quadriciclo_praia"), create_participants(2, 1, [1], False))
    assert not result.valid


def test_adults_only_activity_accepts_adults_and_seniors():
    assert validate_activity_booking(_activity("quadriciclo_praia"), create_participants(3, 0, [], True)).valid


def test_all_rules_are_reported_in_order():
    activity = _activity("quadriciclo_praia", min_adults=2, max_capacity=1)
    result = validate_activity_booking(activity, create_participants(1, 1, [4], False))
    assert result.errors == (
        "Mínimo de 2 adulto(s) necessário(s)",
        "Capacidade máxima de 1 pessoas",
        AdultsOnlyRule.message,
    )


def test_custom_rule_registry():
    rules = {"a": (AdultsOnlyRule(),)}
    roster = create_participants(1, 1, [5], False)
    assert not validate_activity_booking(_activity("a"), roster, rules=rules).valid
    assert validate_activity_booking(_activity("quadriciclo_praia"), roster, rules=rules).valid


def test_scheduling_conflicts_full_day_and_duplicates():
    full_a = _activity("a", unit="full_day")
    full_b = _activity("b", unit="full_day")
    half = _activity("c")
    assert check_scheduling_conflicts([full_a, half]) == []
    assert check_scheduling_conflicts([full_a, full_b]) == [FULL_DAY_CONFLICT]
    assert len(check_scheduling_conflicts([half, half])) == 1


def test_day_addition_combines_booking_and_schedule_checks():
    current = [_activity("a", unit="full_day")]
    candidate = _activity("b", unit="full_day", min_adults=3)
    result = validate_day_addition(current, candidate, create_participants(2, 0, [], False))
    assert not result.valid
    assert result.errors == ("Mínimo de 3 adulto(s) necessário(s)", FULL_DAY_CONFLICT)
