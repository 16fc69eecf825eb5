"""Itinerary aggregation and text rendering tests."""

import datetime as dt

import pytest
from pydantic import ValidationError

from tripbuilder.application.aggregator import build_trip_itinerary, generate_itinerary
from tripbuilder.application.state import PlannerState, add_activity, set_accommodation, set_dates, set_roster
from tripbuilder.domain.exceptions import DayOutOfRange, IncompleteState
from tripbuilder.domain.models import (
    Accommodation,
    Activity,
    ActivityDeposit,
    ActivityPricing,
    TripDates,
)
from tripbuilder.nlg.renderer import (
    format_people_summary,
    generate_activity_summary,
    generate_pricing_preview,
    render_itinerary_text,
)
from tripbuilder.pricing.participants import create_participants

NBSP = "\u00a0"
GENERATED_AT = dt.datetime(2025, 1, 1, 9, 30)


def _dates() -> TripDates:
    return TripDates.from_range(dt.date(2025, 1, 10), dt.date(2025, 1, 13))


def _hotel() -> Accommodation:
    return Accommodation(id="porto_seguro_praia", name="Porto Seguro Praia Resort", location="Porto Seguro")


def _transfer() -> Activity:
    return Activity(
        id="transfer_aeroporto",
        name="Transfer Aeroporto - Hotel",
        category="transfers",
        type="transfer",
        duration="40 minutos",
        pricing=ActivityPricing(adu=45, chd=45),
        min_adults=1,
        max_capacity=15,
    )


def _schooner() -> Activity:
    return Activity(
        id="escuna",
        name="Passeio de Escuna",
        category="maritimos",
        type="half_day",
        duration="4 horas",
        schedule="09:00",
        pricing=ActivityPricing(adu=120, chd=60),
        deposit=ActivityDeposit(adu=30, chd=15),
        min_adults=1,
        max_capacity=20,
        includes=("Guia",),
        requirements=("Saber nadar",),
    )


def _itinerary():
    people = create_participants(2, 1, [7], False)
    return build_trip_itinerary(
        _dates(),
        _hotel(),
        people,
        {1: [_transfer()], 3: [_schooner()]},
        generated_at=GENERATED_AT,
    )


def test_trip_with_free_middle_day():
    itinerary = _itinerary()

    assert [day.day for day in itinerary.days] == [1, 2, 3]
    assert [day.date for day in itinerary.days] == [
        dt.date(2025, 1, 10),
        dt.date(2025, 1, 11),
        dt.date(2025, 1, 12),
    ]
    day1, day2, day3 = itinerary.days
    assert day1.pricing.total == 135.0
    assert day1.pricing.deposit is None
    assert day2.is_free
    assert day2.pricing.total == 0.0
    assert day3.pricing.total == 300.0
    assert day3.pricing.deposit == 75.0
    assert day3.pricing.remaining == 225.0

    totals = itinerary.total_pricing
    assert totals.total == day1.pricing.total + day3.pricing.total == 435.0
    assert totals.deposit == 75.0
    assert totals.remaining == 225.0


def test_selected_activities_carry_participant_snapshot():
    itinerary = _itinerary()
    selected = itinerary.days[0].activities[0]
    assert selected.day == 1
    assert selected.participants == itinerary.people


def test_day_outside_range_raises():
    with pytest.raises(DayOutOfRange) as excinfo:
        build_trip_itinerary(_dates(), _hotel(), [], {4: [_transfer()]}, generated_at=GENERATED_AT)
    assert excinfo.value.day == 4
    assert excinfo.value.days == 3


def test_only_generated_text_is_editable():
    itinerary = _itinerary()
    itinerary.generated_text = "texto editado"
    assert itinerary.generated_text == "texto editado"

    with pytest.raises(ValidationError):
        itinerary.total_pricing = itinerary.days[0].pricing
    with pytest.raises(ValidationError):
        itinerary.accommodation = Accommodation(id="x", name="Outro")


def test_generate_itinerary_requires_dates_and_accommodation():
    with pytest.raises(IncompleteState) as excinfo:
        generate_itinerary(PlannerState(), clock=lambda: GENERATED_AT)
    assert excinfo.value.missing == ["dates", "accommodation"]


def test_generate_itinerary_from_state_uses_injected_clock():
    state = set_dates(PlannerState(), _dates()).state
    state = set_accommodation(state, _hotel()).state
    state = set_roster(state, adults=2, children=1, children_ages=[7]).state
    state = add_activity(state, 1, _transfer()).state
    state = add_activity(state, 3, _schooner()).state

    itinerary = generate_itinerary(state, clock=lambda: GENERATED_AT)

    assert itinerary.generated_text == _itinerary().generated_text
    assert itinerary.generated_text.endswith("Roteiro gerado em 01/01/2025 09:30")


def test_rendered_text_matches_expected_layout():
    expected = "\n".join(
        [
            "🗺️ ROTEIRO RESUMIDO — 10/01 a 13/01 (3 dias)",
            "🏨 Hospedagem: Porto Seguro Praia Resort",
            "👥 Pessoas: 2 ADU + 1 CHD (7 anos)",
            "",
            "📅 DIA 1 — 10/01",
            "🎯 Transfer Aeroporto - Hotel",
            "⏱️ Duração: 40 minutos",
            f"💰 Total do dia: R${NBSP}135,00",
            "",
            "📅 DIA 2 — 11/01",
            "• Dia livre",
            "",
            "📅 DIA 3 — 12/01",
            "🎯 Passeio de Escuna",
            "🕐 09:00",
            "⏱️ Duração: 4 horas",
            "✅ Inclui: Guia",
            "⚠️ Requisitos: Saber nadar",
            f"💰 Total do dia: R${NBSP}300,00",
            f"📋 Pré-reserva: R${NBSP}75,00",
            f"💳 No dia: R${NBSP}225,00",
            "",
            f"💰 TOTAL DA VIAGEM: R${NBSP}435,00",
            f"📋 Pré-reserva total: R${NBSP}75,00",
            f"💳 A pagar nos dias: R${NBSP}225,00",
            "",
            "📌 Observações gerais:",
            "• Valores por pessoa conforme faixa etária",
            "• Sem taxas extras de serviço",
            "• Sujeito à disponibilidade no momento da reserva",
            "• Levar protetor solar, chapéu e água",
            "• Horários podem variar conforme condições climáticas",
            "",
            "📱 Entre em contato para confirmar sua reserva!",
            "Roteiro gerado em 01/01/2025 09:30",
        ]
    )
    assert _itinerary().generated_text == expected


def test_rendering_is_deterministic():
    itinerary = _itinerary()
    assert render_itinerary_text(itinerary, generated_at=GENERATED_AT) == itinerary.generated_text
    assert render_itinerary_text(itinerary, generated_at=GENERATED_AT) == render_itinerary_text(
        itinerary, generated_at=GENERATED_AT
    )


def test_trip_without_deposits_omits_deposit_lines():
    itinerary = build_trip_itinerary(
        _dates(), _hotel(), create_participants(2, 0, [], False), {1: [_transfer()]}, generated_at=GENERATED_AT
    )
    assert "Pré-reserva" not in itinerary.generated_text
    assert "A pagar nos dias" not in itinerary.generated_text


def test_people_summary_order_and_codes():
    people = create_participants(3, 2, [4, 1], True)
    assert format_people_summary(people) == "1 ADU + 2 +60 + 1 CHD (4 anos) + 1 INF"
    assert format_people_summary([]) == ""


def test_activity_summary_and_pricing_preview():
    summary = generate_activity_summary(_schooner(), create_participants(2, 0, [], False))
    assert summary == "Passeio de Escuna\n👥 2 ADU\n⏱️ 4 horas\n🕐 09:00\n"

    assert generate_pricing_preview(240) == f"💰 Total: R${NBSP}240,00"
    assert generate_pricing_preview(240, 60, 180) == (
        f"💰 Total: R${NBSP}240,00\n📋 Pré-reserva: R${NBSP}60,00\n💳 No local: R${NBSP}180,00"
    )
