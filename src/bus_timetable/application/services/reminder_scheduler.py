"""Reminder scheduling ahead of a departure."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from datetime import UTC, datetime, timedelta
from typing import TYPE_CHECKING

from bus_timetable.domain.models.reminder import Reminder

if TYPE_CHECKING:
    from bus_timetable.domain.models.candidate import Candidate
    from bus_timetable.domain.ports.reminder_delivery import ReminderDelivery

logger = logging.getLogger(__name__)

DEFAULT_LEAD = timedelta(minutes=5)


def build_reminder(
    candidate: Candidate, route_name: str, stop_name: str, lead: timedelta = DEFAULT_LEAD
) -> Reminder:
    """Build the reminder for a candidate without registering it."""
    lead_minutes = int(lead.total_seconds() // 60)
    return Reminder(
        key=candidate.trip.key,
        trip=candidate.trip,
        departure=candidate.departure,
        trigger_at=candidate.departure - lead,
        lead=lead,
        title="Your bus is leaving soon",
        body=(
            f"{route_name} {stop_name} departs at {candidate.departure.strftime('%H:%M')}, "
            f"{lead_minutes} minutes from now"
        ),
    )


class ReminderScheduler:
    """Keeps at most one pending reminder per trip and fires it on time.

    Scheduling the same trip again replaces the earlier reminder.
    """

    def __init__(
        self,
        delivery: ReminderDelivery,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        """Initialize the scheduler.

        Args:
            delivery: Mechanism that alerts the user once a reminder is due.
            clock: Returns the current aware instant; defaults to the system clock.
        """
        self._delivery = delivery
        self._clock = clock or (lambda: datetime.now(UTC))
        self._reminders: dict[str, Reminder] = {}
        self._tasks: dict[str, asyncio.Task[None]] = {}

    async def schedule(
        self,
        candidate: Candidate,
        route_name: str,
        stop_name: str,
        lead: timedelta = DEFAULT_LEAD,
    ) -> Reminder | None:
        """Register a reminder ``lead`` before the candidate departs.

        Returns None, registering nothing, when the trigger time has already passed.
        """
        reminder = build_reminder(candidate, route_name, stop_name, lead)
        now = self._clock()
        if reminder.trigger_at <= now:
            logger.info(
                f"Not scheduling reminder {reminder.key}: trigger time "
                f"{reminder.trigger_at.isoformat()} is not in the future"
            )
            return None

        if self.cancel(reminder.key):
            logger.debug(f"Replacing existing reminder {reminder.key}")

        self._reminders[reminder.key] = reminder
        self._tasks[reminder.key] = asyncio.create_task(self._fire_when_due(reminder))
        logger.info(f"Scheduled reminder {reminder.key} at {reminder.trigger_at.isoformat()}")
        return reminder

    def cancel(self, key: str) -> bool:
        """Cancel a pending reminder. Returns False if none was pending."""
        task = self._tasks.pop(key, None)
        reminder = self._reminders.pop(key, None)
        if task is not None and not task.done():
            task.cancel()
        if reminder is None:
            return False
        logger.info(f"Cancelled reminder {key}")
        return True

    def is_scheduled(self, key: str) -> bool:
        return key in self._reminders

    def pending(self) -> list[Reminder]:
        """Pending reminders, earliest trigger first."""
        return sorted(self._reminders.values(), key=lambda r: r.trigger_at)

    async def shutdown(self) -> None:
        """Cancel every pending reminder and wait for the tasks to finish."""
        tasks = list(self._tasks.values())
        for key in list(self._reminders):
            self.cancel(key)
        if tasks:
            await asyncio.gather(*tasks, return_exceptions=True)

    async def wait_idle(self) -> None:
        """Wait until every pending reminder has fired or been cancelled."""
        while self._tasks:
            await asyncio.gather(*list(self._tasks.values()), return_exceptions=True)

    async def _fire_when_due(self, reminder: Reminder) -> None:
        delay = (reminder.trigger_at - self._clock()).total_seconds()
        if delay > 0:
            await asyncio.sleep(delay)

        if self._tasks.get(reminder.key) is asyncio.current_task():
            del self._tasks[reminder.key]
            self._reminders.pop(reminder.key, None)

        try:
            await self._delivery.deliver(reminder)
            logger.info(f"Delivered reminder {reminder.key}")
        except Exception as e:
            logger.error(f"Failed to deliver reminder {reminder.key}: {e}")
