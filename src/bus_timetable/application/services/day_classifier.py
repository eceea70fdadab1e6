"""Day classification into service types."""

from datetime import datetime

from bus_timetable.domain.models.holiday_set import HolidaySet
from bus_timetable.domain.models.service_type import ServiceType
from bus_timetable.domain.models.transit_calendar import SATURDAY, SUNDAY, TransitCalendar


def service_type(
    instant: datetime, holidays: HolidaySet, calendar: TransitCalendar
) -> ServiceType:
    """Classify the calendar day of an instant.

    First match wins: a listed holiday or a Sunday runs the Sunday/holiday
    timetable, a Saturday runs the Saturday timetable, every other day the
    weekday timetable.
    """
    weekday = calendar.weekday_number(instant)
    if holidays.is_holiday(instant, calendar) or weekday == SUNDAY:
        return ServiceType.SUNDAY_HOLIDAY
    if weekday == SATURDAY:
        return ServiceType.SATURDAY
    return ServiceType.WEEKDAY


class DayClassifier:
    """Classifies days against a fixed holiday set and calendar."""

    def __init__(self, holidays: HolidaySet, calendar: TransitCalendar) -> None:
        self._holidays = holidays
        self._calendar = calendar

    @property
    def calendar(self) -> TransitCalendar:
        return self._calendar

    def service_type(self, instant: datetime) -> ServiceType:
        return service_type(instant, self._holidays, self._calendar)
