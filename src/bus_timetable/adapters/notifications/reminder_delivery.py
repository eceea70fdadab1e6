"""Reminder delivery adapters."""

import logging
import sys
from typing import TextIO

from bus_timetable.domain.models.reminder import Reminder

logger = logging.getLogger(__name__)


class ConsoleReminderDelivery:
    """Writes due reminders to a terminal, ringing the bell."""

    def __init__(self, stream: TextIO | None = None, bell: bool = True) -> None:
        self.stream = stream or sys.stdout
        self.bell = bell

    async def deliver(self, reminder: Reminder) -> None:
        prefix = "\a" if self.bell else ""
        self.stream.write(f"{prefix}{reminder.title}: {reminder.body}\n")
        self.stream.flush()


class LoggingReminderDelivery:
    """Logs due reminders; used when no terminal is attached."""

    async def deliver(self, reminder: Reminder) -> None:
        logger.warning(f"{reminder.title}: {reminder.body}")
