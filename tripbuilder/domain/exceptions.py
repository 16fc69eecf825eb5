"""Domain semantic exceptions."""


class DomainError(Exception):
    """Base domain exception."""


class InvalidTripDates(DomainError):
    """Raised when a date range cannot produce a trip of at least one day."""


class InvalidRoster(DomainError):
    """Raised when head-counts or ages are semantically invalid."""


class DayOutOfRange(DomainError):
    """Raised when a day index falls outside 1..days."""

    def __init__(self, day: int, days: int):
        self.day = day
        self.days = days
        super().__init__(f"day {day} outside trip range 1..{days}")


class IncompleteState(DomainError):
    """Raised when an itinerary is generated before dates/accommodation are set."""

    def __init__(self, missing: list[str]):
        self.missing = list(missing)
        super().__init__(f"cannot generate itinerary, missing: {', '.join(self.missing)}")
