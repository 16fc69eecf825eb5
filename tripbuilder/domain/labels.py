"""Display labels for the closed domain enums.

Every enum member has exactly one entry; the lookup functions are total and
never fall back to a default label.
"""

from __future__ import annotations

from typing import NamedTuple

from tripbuilder.domain.enums import ActivityCategory, ActivityUnitType, TravelerType


class CategoryLabel(NamedTuple):
    label: str
    icon: str


# Ordered as the catalog tabs are presented.
CATEGORY_LABELS: dict[ActivityCategory, CategoryLabel] = {
    ActivityCategory.MOST_REQUESTED: CategoryLabel("Mais Procurados", "⭐"),
    ActivityCategory.EXPERIENCES: CategoryLabel("Experiências", "🌟"),
    ActivityCategory.MARITIME: CategoryLabel("Marítimos", "🚤"),
    ActivityCategory.QUAD_BIKE: CategoryLabel("Quadriciclos", "🏍️"),
    ActivityCategory.PRIVATE: CategoryLabel("Privativos", "👑"),
    ActivityCategory.PACKAGES: CategoryLabel("Pacotes", "📦"),
    ActivityCategory.TRANSFERS: CategoryLabel("Transfers", "🚗"),
}

UNIT_TYPE_LABELS: dict[ActivityUnitType, str] = {
    ActivityUnitType.FULL_DAY: "Dia Inteiro",
    ActivityUnitType.HALF_DAY: "Meio Dia",
    ActivityUnitType.TRANSFER: "Transfer",
    ActivityUnitType.EXPERIENCE: "Experiência",
}

TRAVELER_CODES: dict[TravelerType, str] = {
    TravelerType.ADULT: "ADU",
    TravelerType.SENIOR: "+60",
    TravelerType.CHILD: "CHD",
    TravelerType.INFANT: "INF",
}


def category_label(category: ActivityCategory) -> CategoryLabel:
    return CATEGORY_LABELS[ActivityCategory(category)]


def unit_type_label(unit_type: ActivityUnitType) -> str:
    return UNIT_TYPE_LABELS[ActivityUnitType(unit_type)]


def traveler_code(traveler_type: TravelerType) -> str:
    return TRAVELER_CODES[TravelerType(traveler_type)]


def _assert_total() -> None:
    for enum_cls, table in (
        (ActivityCategory, CATEGORY_LABELS),
        (ActivityUnitType, UNIT_TYPE_LABELS),
        (TravelerType, TRAVELER_CODES),
    ):
        missing = [member.value for member in enum_cls if member not in table]
        if missing:
            raise RuntimeError(f"{enum_cls.__name__} labels missing for: {', '.join(missing)}")


_assert_total()


__all__ = [
    "CATEGORY_LABELS",
    "CategoryLabel",
    "TRAVELER_CODES",
    "UNIT_TYPE_LABELS",
    "category_label",
    "traveler_code",
    "unit_type_label",
]
