"""Domain layer - timetable models, errors and ports."""

from bus_timetable.domain.models import (
    Candidate,
    DaySchedule,
    HolidaySet,
    Schedule,
    ServiceType,
    TransitCalendar,
    Trip,
)
from bus_timetable.domain.ports import (
    DisplayAdapter,
    ReminderDelivery,
    ScheduleRepository,
)

__all__ = [
    "Candidate",
    "DaySchedule",
    "DisplayAdapter",
    "HolidaySet",
    "ReminderDelivery",
    "Schedule",
    "ScheduleRepository",
    "ServiceType",
    "TransitCalendar",
    "Trip",
]
