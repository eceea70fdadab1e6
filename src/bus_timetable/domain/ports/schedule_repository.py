"""Schedule repository port."""

from typing import Protocol

from bus_timetable.domain.models.holiday_set import HolidaySet
from bus_timetable.domain.models.schedule import Schedule


class ScheduleRepository(Protocol):
    """Port for loading the timetable and holiday list."""

    def load_schedule(self) -> Schedule:
        """Load the route's schedule.

        Raises:
            ScheduleLoadError: If the schedule cannot be found or parsed.
        """
        ...

    def load_holidays(self) -> HolidaySet:
        """Load the holiday set.

        Raises:
            ScheduleLoadError: If the holiday list cannot be found or read.
        """
        ...
