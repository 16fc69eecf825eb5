"""trip-builder CLI: catalog listing and itinerary text rendering."""

from __future__ import annotations

import argparse
import datetime as dt
import json
import sys
from pathlib import Path

from dotenv import load_dotenv

from tripbuilder.adapters.catalog import list_accommodations, list_activities
from tripbuilder.application.contracts import ItineraryRequest, PlanStatus
from tripbuilder.application.plan_itinerary import plan_itinerary
from tripbuilder.domain.enums import ActivityCategory
from tripbuilder.domain.exceptions import DomainError
from tripbuilder.domain.labels import category_label, unit_type_label
from tripbuilder.pricing.currency import format_currency
from tripbuilder.shared.exceptions import CatalogError


def _cmd_lodgings(_: argparse.Namespace) -> int:
    for item in list_accommodations():
        suffix = f" [{item.type}]" if item.type else ""
        print(f"{item.id}\t{item.name} — {item.location}{suffix}")
    return 0


def _cmd_activities(args: argparse.Namespace) -> int:
    category = ActivityCategory(args.category) if args.category else None
    for item in list_activities(category):
        label = category_label(item.category)
        print(
            f"{item.id}\t{label.icon} {item.name} ({unit_type_label(item.type)}, {item.duration})"
            f"\tADU {format_currency(item.pricing.adu)} / CHD {format_currency(item.pricing.chd)}"
        )
    return 0


def _cmd_render(args: argparse.Namespace) -> int:
    raw = json.loads(Path(args.request).read_text(encoding="utf-8"))
    request = ItineraryRequest.model_validate(raw)
    if args.generated_at:
        request = request.model_copy(update={"generated_at": dt.datetime.fromisoformat(args.generated_at)})

    result = plan_itinerary(request, clock=dt.datetime.now)
    if result.status == PlanStatus.REJECTED:
        for error in result.errors:
            print(f"❌ {error}", file=sys.stderr)
        return 1

    print(result.text)
    if args.json_out:
        Path(args.json_out).write_text(result.model_dump_json(indent=2), encoding="utf-8")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="trip-builder", description="Itinerary pricing and text rendering")
    sub = parser.add_subparsers(dest="command", required=True)

    lodgings = sub.add_parser("lodgings", help="List catalog accommodations")
    lodgings.set_defaults(handler=_cmd_lodgings)

    activities = sub.add_parser("activities", help="List catalog activities")
    activities.add_argument("--category", choices=[c.value for c in ActivityCategory], default="")
    activities.set_defaults(handler=_cmd_activities)

    render = sub.add_parser("render", help="Render an itinerary request (JSON file) as text")
    render.add_argument("request", help="Path to the itinerary request JSON")
    render.add_argument("--generated-at", default="", help="ISO timestamp printed in the footer")
    render.add_argument("--json-out", default="", help="Also write the full result JSON to this path")
    render.set_defaults(handler=_cmd_render)
    return parser


def main(argv: list[str] | None = None) -> int:
    load_dotenv()
    args = build_parser().parse_args(argv)
    try:
        return args.handler(args)
    except (CatalogError, DomainError, ValueError, OSError) as exc:
        print(f"❌ {exc}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
