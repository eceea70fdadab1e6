"""Application services."""

from bus_timetable.application.services.day_classifier import DayClassifier
from bus_timetable.application.services.departure_board_service import DepartureBoardService
from bus_timetable.application.services.reminder_scheduler import ReminderScheduler
from bus_timetable.application.services.timetable_resolver import TimetableResolver

__all__ = [
    "DayClassifier",
    "DepartureBoardService",
    "ReminderScheduler",
    "TimetableResolver",
]
