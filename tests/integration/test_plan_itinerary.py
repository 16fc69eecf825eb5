"""Form payload -> planner state -> itinerary, against the packaged catalog."""

import datetime as dt

import pytest

from tripbuilder.application.contracts import ItineraryRequest, PlanStatus
from tripbuilder.application.plan_itinerary import build_planner_state, plan_itinerary
from tripbuilder.domain.exceptions import InvalidTripDates
from tripbuilder.shared.exceptions import CatalogError

CLOCK_VALUE = dt.datetime(2025, 1, 1, 9, 30)


def _clock():
    return CLOCK_VALUE


def _request(**overrides) -> ItineraryRequest:
    payload = {
        "arrival": "2025-01-10",
        "departure": "2025-01-14",
        "accommodation_id": "trancoso_resort",
        "roster": {"adults": 3, "children": 2, "children_ages": [1, 5], "has_seniors": True},
        "selections": [
            {"day": 2, "activity_ids": ["recife_fora", "cultura_pataxo"]},
            {"day": 4, "activity_ids": ["lancha_privativa"]},
        ],
    }
    payload.update(overrides)
    return ItineraryRequest.model_validate(payload)


def test_build_planner_state_replays_the_form():
    update = build_planner_state(_request())
    state = update.state

    assert update.accepted
    assert state.dates.days == 4
    assert state.accommodation.id == "trancoso_resort"
    assert state.children_ages == (1, 5)
    assert [a.id for a in state.selections[2]] == ["recife_fora", "cultura_pataxo"]
    assert state.version > 0


def test_plan_itinerary_prices_every_day():
    result = plan_itinerary(_request(), clock=_clock)

    assert result.status == PlanStatus.DONE
    itinerary = result.itinerary
    assert [day.is_free for day in itinerary.days] == [True, False, True, False]

    # 3 adult-rate travellers (2 seniors), 1 child, 1 infant
    day2 = itinerary.days[1].pricing
    assert day2.total == 420.0 + 315.0
    assert day2.deposit == 105.0

    day_totals = sum(day.pricing.total for day in itinerary.days)
    assert itinerary.total_pricing.total == pytest.approx(day_totals)
    assert "👥 Pessoas: 1 ADU + 2 +60 + 1 CHD (5 anos) + 1 INF" in result.text
    assert result.text.endswith("Roteiro gerado em 01/01/2025 09:30")


def test_rejected_selection_reports_every_error():
    request = _request(
        roster={"adults": 1, "children": 1, "children_ages": [10]},
        selections=[{"day": 1, "activity_ids": ["lancha_privativa", "quadriciclo_praia"]}],
    )

    result = plan_itinerary(request, clock=_clock)

    assert result.status == PlanStatus.REJECTED
    assert result.itinerary is None
    assert result.text == ""
    assert result.errors == [
        "Dia 1 · Lancha Privativa Baía Cabrália: Mínimo de 2 adulto(s) necessário(s)",
        "Dia 1 · Quadriciclo pelas Praias: Apenas adultos podem participar desta atividade",
    ]


def test_bad_dates_raise():
    with pytest.raises(InvalidTripDates):
        build_planner_state(_request(departure="2025-01-10"))


def test_unknown_activity_raises():
    with pytest.raises(CatalogError):
        build_planner_state(_request(selections=[{"day": 1, "activity_ids": ["inexistente"]}]))
