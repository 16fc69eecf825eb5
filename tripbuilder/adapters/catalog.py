"""Catalog adapter loading accommodations and activities from local JSON."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Optional

from pydantic import ValidationError

from tripbuilder.config.settings import resolve_settings
from tripbuilder.domain.enums import ActivityCategory
from tripbuilder.domain.models import Accommodation, Activity
from tripbuilder.shared.exceptions import CatalogError

LODGINGS_FILE = "lodgings.json"
ACTIVITIES_FILE = "activities.json"

_logger = logging.getLogger("trip-builder.catalog")
_cache: dict[Path, Any] = {}


def _load_json(path: Path) -> Any:
    if path in _cache:
        return _cache[path]
    if not path.exists():
        raise CatalogError("catalog", f"Data file not found: {path}")
    try:
        with open(path, encoding="utf-8") as f:
            payload = json.load(f)
    except json.JSONDecodeError as exc:
        raise CatalogError("catalog", f"Invalid JSON in {path.name}: {exc}") from exc
    _cache[path] = payload
    _logger.info("catalog file loaded: %s", path)
    return payload


def _records(filename: str, key: str, catalog_dir: Optional[Path]) -> list[dict[str, Any]]:
    base = catalog_dir or resolve_settings().catalog_dir
    payload = _load_json(base / filename)
    rows = payload.get(key) if isinstance(payload, dict) else payload
    if not isinstance(rows, list):
        raise CatalogError("catalog", f"{filename} must contain a list under '{key}'")
    return rows


def list_accommodations(catalog_dir: Optional[Path] = None) -> list[Accommodation]:
    try:
        return [Accommodation(**raw) for raw in _records(LODGINGS_FILE, "accommodations", catalog_dir)]
    except ValidationError as exc:
        raise CatalogError("catalog", f"Invalid accommodation record: {exc}") from exc


def get_accommodation(accommodation_id: str, catalog_dir: Optional[Path] = None) -> Accommodation:
    for item in list_accommodations(catalog_dir):
        if item.id == accommodation_id:
            return item
    raise CatalogError("catalog", f"Accommodation not found: {accommodation_id}")


def list_activities(
    category: Optional[ActivityCategory] = None,
    catalog_dir: Optional[Path] = None,
) -> list[Activity]:
    try:
        activities = [Activity(**raw) for raw in _records(ACTIVITIES_FILE, "activities", catalog_dir)]
    except ValidationError as exc:
        raise CatalogError("catalog", f"Invalid activity record: {exc}") from exc
    if category is None:
        return activities
    return [item for item in activities if item.category == category]


def get_activity(activity_id: str, catalog_dir: Optional[Path] = None) -> Activity:
    for item in list_activities(catalog_dir=catalog_dir):
        if item.id == activity_id:
            return item
    raise CatalogError("catalog", f"Activity not found: {activity_id}")


def activities_by_category(catalog_dir: Optional[Path] = None) -> dict[ActivityCategory, list[Activity]]:
    grouped: dict[ActivityCategory, list[Activity]] = {category: [] for category in ActivityCategory}
    for item in list_activities(catalog_dir=catalog_dir):
        grouped[item.category].append(item)
    return grouped


def reset_cache() -> None:
    _cache.clear()


__all__ = [
    "activities_by_category",
    "get_accommodation",
    "get_activity",
    "list_accommodations",
    "list_activities",
    "reset_cache",
]
