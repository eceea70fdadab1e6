"""Display adapters."""

from bus_timetable.adapters.display.console_display import ConsoleBoardDisplay

__all__ = ["ConsoleBoardDisplay"]
