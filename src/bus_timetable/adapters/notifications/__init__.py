"""Reminder delivery adapters."""

from bus_timetable.adapters.notifications.reminder_delivery import (
    ConsoleReminderDelivery,
    LoggingReminderDelivery,
)

__all__ = [
    "ConsoleReminderDelivery",
    "LoggingReminderDelivery",
]
