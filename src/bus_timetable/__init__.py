"""Next-bus departures from a static weekly timetable."""

__version__ = "0.1.0"
