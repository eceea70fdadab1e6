"""Formatters for presenting departures."""

from bus_timetable.adapters.formatters.departure_formatter import DepartureFormatter

__all__ = ["DepartureFormatter"]
