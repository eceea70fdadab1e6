"""Service type domain model."""

from enum import Enum


class ServiceType(Enum):
    """Which of the three timetables applies to a calendar day."""

    WEEKDAY = "weekday"
    SATURDAY = "saturday"
    SUNDAY_HOLIDAY = "sunday_holiday"

    @property
    def label(self) -> str:
        return _LABELS[self]

    @property
    def precedence(self) -> int:
        """Higher wins: a holiday beats the weekend, the weekend beats a weekday."""
        return _PRECEDENCE[self]


_LABELS = {
    ServiceType.WEEKDAY: "Weekday",
    ServiceType.SATURDAY: "Saturday",
    ServiceType.SUNDAY_HOLIDAY: "Sunday/Holiday",
}

_PRECEDENCE = {
    ServiceType.WEEKDAY: 0,
    ServiceType.SATURDAY: 1,
    ServiceType.SUNDAY_HOLIDAY: 2,
}
