"""Configuration adapters."""

from bus_timetable.adapters.config.app_config import AppConfig
from bus_timetable.adapters.config.schedule_loader import JsonScheduleRepository

__all__ = [
    "AppConfig",
    "JsonScheduleRepository",
]
