"""Ports (interfaces) for the ports-and-adapters architecture."""

from bus_timetable.domain.ports.display_adapter import DisplayAdapter
from bus_timetable.domain.ports.reminder_delivery import ReminderDelivery
from bus_timetable.domain.ports.schedule_repository import ScheduleRepository

__all__ = [
    "DisplayAdapter",
    "ReminderDelivery",
    "ScheduleRepository",
]
