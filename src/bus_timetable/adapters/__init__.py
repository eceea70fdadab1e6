"""Adapters layer - files, terminals and timers around the core."""

from bus_timetable.adapters.config import AppConfig, JsonScheduleRepository
from bus_timetable.adapters.display import ConsoleBoardDisplay
from bus_timetable.adapters.formatters import DepartureFormatter
from bus_timetable.adapters.notifications import (
    ConsoleReminderDelivery,
    LoggingReminderDelivery,
)
from bus_timetable.adapters.pollers import RefreshPoller

__all__ = [
    "AppConfig",
    "ConsoleBoardDisplay",
    "ConsoleReminderDelivery",
    "DepartureFormatter",
    "JsonScheduleRepository",
    "LoggingReminderDelivery",
    "RefreshPoller",
]
