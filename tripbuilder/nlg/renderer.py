"""Plain-text itinerary renderer for copy/paste sharing.

Output is a pure function of the itinerary and the injected ``generated_at``
timestamp; the system clock is never read here.
"""

from __future__ import annotations

import datetime as dt
from collections.abc import Sequence

from tripbuilder.domain.enums import TravelerType
from tripbuilder.domain.labels import traveler_code
from tripbuilder.domain.models import Activity, DayItinerary, PricingBreakdown, Traveler, TripItinerary
from tripbuilder.pricing.currency import format_currency
from tripbuilder.pricing.participants import count_by_type

GENERAL_NOTES = (
    "Valores por pessoa conforme faixa etária",
    "Sem taxas extras de serviço",
    "Sujeito à disponibilidade no momento da reserva",
    "Levar protetor solar, chapéu e água",
    "Horários podem variar conforme condições climáticas",
)
CALL_TO_ACTION = "📱 Entre em contato para confirmar sua reserva!"
FREE_DAY = "• Dia livre"


def _day_month(value: dt.date | dt.datetime) -> str:
    return value.strftime("%d/%m")


def _timestamp(value: dt.datetime) -> str:
    return value.strftime("%d/%m/%Y %H:%M")


def format_people_summary(people: Sequence[Traveler]) -> str:
    counts = count_by_type(people)
    parts: list[str] = []

    if counts[TravelerType.ADULT]:
        parts.append(f"{counts[TravelerType.ADULT]} {traveler_code(TravelerType.ADULT)}")
    if counts[TravelerType.SENIOR]:
        parts.append(f"{counts[TravelerType.SENIOR]} {traveler_code(TravelerType.SENIOR)}")
    if counts[TravelerType.CHILD]:
        ages = ", ".join(str(p.age) for p in people if p.type == TravelerType.CHILD)
        parts.append(f"{counts[TravelerType.CHILD]} {traveler_code(TravelerType.CHILD)} ({ages} anos)")
    if counts[TravelerType.INFANT]:
        parts.append(f"{counts[TravelerType.INFANT]} {traveler_code(TravelerType.INFANT)}")

    return " + ".join(parts)


def _activity_lines(activity: Activity) -> list[str]:
    lines = [f"🎯 {activity.name}"]
    if activity.schedule:
        lines.append(f"🕐 {activity.schedule}")
    if activity.duration:
        lines.append(f"⏱️ Duração: {activity.duration}")
    if activity.includes:
        lines.append(f"✅ Inclui: {', '.join(activity.includes)}")
    if activity.excludes:
        lines.append(f"❌ Não inclui: {', '.join(activity.excludes)}")
    if activity.requirements:
        lines.append(f"⚠️ Requisitos: {', '.join(activity.requirements)}")
    return lines


def _deposit_lines(pricing: PricingBreakdown, *, deposit_label: str, remaining_label: str) -> list[str]:
    if pricing.deposit is None:
        return []
    lines = [f"{deposit_label}: {format_currency(pricing.deposit)}"]
    if pricing.remaining is not None:
        lines.append(f"{remaining_label}: {format_currency(pricing.remaining)}")
    return lines


def _format_day(day: DayItinerary) -> list[str]:
    lines = [f"📅 DIA {day.day} — {_day_month(day.date)}"]
    if day.is_free:
        lines.append(FREE_DAY)
        lines.append("")
        return lines

    for selected in day.activities:
        lines.extend(_activity_lines(selected.activity))

    lines.append(f"💰 Total do dia: {format_currency(day.pricing.total)}")
    lines.extend(
        _deposit_lines(day.pricing, deposit_label="📋 Pré-reserva", remaining_label="💳 No dia")
    )
    lines.append("")
    return lines


def render_itinerary_text(itinerary: TripItinerary, *, generated_at: dt.datetime) -> str:
    dates = itinerary.dates
    lines: list[str] = [
        f"🗺️ ROTEIRO RESUMIDO — {_day_month(dates.arrival)} a {_day_month(dates.departure)} ({dates.days} dias)",
        f"🏨 Hospedagem: {itinerary.accommodation.name}",
        f"👥 Pessoas: {format_people_summary(itinerary.people)}",
        "",
    ]

    for day in itinerary.days:
        lines.extend(_format_day(day))

    totals = itinerary.total_pricing
    lines.append(f"💰 TOTAL DA VIAGEM: {format_currency(totals.total)}")
    lines.extend(
        _deposit_lines(totals, deposit_label="📋 Pré-reserva total", remaining_label="💳 A pagar nos dias")
    )

    lines.append("")
    lines.append("📌 Observações gerais:")
    lines.extend(f"• {note}" for note in GENERAL_NOTES)
    lines.append("")
    lines.append(CALL_TO_ACTION)
    lines.append(f"Roteiro gerado em {_timestamp(generated_at)}")
    return "\n".join(lines)


def generate_activity_summary(activity: Activity, participants: Sequence[Traveler]) -> str:
    lines = [activity.name, f"👥 {format_people_summary(participants)}", f"⏱️ {activity.duration}"]
    if activity.schedule:
        lines.append(f"🕐 {activity.schedule}")
    return "\n".join(lines) + "\n"


def generate_pricing_preview(total: float, deposit: float | None = None, remaining: float | None = None) -> str:
    preview = f"💰 Total: {format_currency(total)}"
    if deposit and remaining:
        preview += f"\n📋 Pré-reserva: {format_currency(deposit)}"
        preview += f"\n💳 No local: {format_currency(remaining)}"
    return preview


__all__ = [
    "format_people_summary",
    "generate_activity_summary",
    "generate_pricing_preview",
    "render_itinerary_text",
]
