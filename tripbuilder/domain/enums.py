"""Domain enums."""

from enum import Enum


class TravelerType(str, Enum):
    ADULT = "adult"
    SENIOR = "senior"
    CHILD = "child"
    INFANT = "infant"


class ActivityCategory(str, Enum):
    MOST_REQUESTED = "mais_procurados"
    EXPERIENCES = "experiencias"
    MARITIME = "maritimos"
    QUAD_BIKE = "quadriciclos"
    PRIVATE = "privativos"
    PACKAGES = "pacotes"
    TRANSFERS = "transfers"


class ActivityUnitType(str, Enum):
    FULL_DAY = "full_day"
    HALF_DAY = "half_day"
    TRANSFER = "transfer"
    EXPERIENCE = "experience"
