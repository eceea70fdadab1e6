"""Domain models for bus timetables."""

from bus_timetable.domain.models.board_snapshot import BoardSnapshot
from bus_timetable.domain.models.candidate import Candidate
from bus_timetable.domain.models.error_details import ErrorDetails
from bus_timetable.domain.models.holiday_set import HolidaySet
from bus_timetable.domain.models.parse_outcome import Parsed, Skipped
from bus_timetable.domain.models.reminder import Reminder
from bus_timetable.domain.models.schedule import DaySchedule, Schedule
from bus_timetable.domain.models.service_type import ServiceType
from bus_timetable.domain.models.time_of_day import TimeOfDay
from bus_timetable.domain.models.transit_calendar import TransitCalendar
from bus_timetable.domain.models.trip import Trip

__all__ = [
    "BoardSnapshot",
    "Candidate",
    "DaySchedule",
    "ErrorDetails",
    "HolidaySet",
    "Parsed",
    "Reminder",
    "Schedule",
    "ServiceType",
    "Skipped",
    "TimeOfDay",
    "TransitCalendar",
    "Trip",
]
