"""Reminder delivery port."""

from typing import Protocol

from bus_timetable.domain.models.reminder import Reminder


class ReminderDelivery(Protocol):
    """Port for the mechanism that actually alerts the user."""

    async def deliver(self, reminder: Reminder) -> None:
        """Deliver a reminder whose trigger time has been reached."""
        ...
