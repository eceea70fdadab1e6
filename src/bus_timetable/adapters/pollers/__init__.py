"""Pollers that refresh the board on a timer."""

from bus_timetable.adapters.pollers.refresh_poller import (
    RefreshPoller,
    seconds_until_next_refresh,
)

__all__ = [
    "RefreshPoller",
    "seconds_until_next_refresh",
]
