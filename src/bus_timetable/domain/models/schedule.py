"""Schedule domain models."""

from dataclasses import dataclass, field

from bus_timetable.domain.models.trip import Trip


@dataclass(frozen=True)
class DaySchedule:
    """Outbound trips of one service type, in source order."""

    outbound: tuple[Trip, ...] = ()


@dataclass(frozen=True)
class Schedule:
    """Timetable of a single route at a single stop."""

    route_name: str
    stop_name: str
    weekday: DaySchedule = field(default_factory=DaySchedule)
    saturday: DaySchedule = field(default_factory=DaySchedule)
    sunday_holiday: DaySchedule = field(default_factory=DaySchedule)
    destination_name: str | None = None  # Shown as "stop -> destination" in headers
