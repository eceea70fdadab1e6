"""Shared fixtures for timetable tests."""

import json
from pathlib import Path

import pytest

from bus_timetable.adapters.config import AppConfig
from bus_timetable.domain.models import DaySchedule, HolidaySet, Schedule, TransitCalendar, Trip


@pytest.fixture
def calendar() -> TransitCalendar:
    """Calendar in the route's time zone."""
    return TransitCalendar.for_zone("Asia/Tokyo")


@pytest.fixture
def schedule() -> Schedule:
    """Small schedule with distinct trips per service type."""
    return Schedule(
        route_name="浜11",
        stop_name="三ツ沢池",
        destination_name="横浜駅",
        weekday=DaySchedule(
            outbound=(
                Trip(depart="07:00", arrive="07:20"),
                Trip(depart="07:15", arrive="07:35"),
                Trip(depart="07:30", arrive="07:50"),
            )
        ),
        saturday=DaySchedule(
            outbound=(
                Trip(depart="08:00", arrive="08:20"),
                Trip(depart="09:00", arrive="09:20"),
            )
        ),
        sunday_holiday=DaySchedule(outbound=(Trip(depart="10:00", arrive="10:20"),)),
    )


@pytest.fixture
def holidays() -> HolidaySet:
    """Holiday set containing a Saturday and a Monday."""
    return HolidaySet.build(["2024/1/6", "2024/1/8"])


def schedule_document() -> dict:
    """Schedule file content in the on-disk camelCase layout."""
    return {
        "routeName": "浜11",
        "stopName": "三ツ沢池",
        "destinationName": "横浜駅",
        "weekday": {
            "outbound": [
                {"depart": "07:00", "arrive": "07:20"},
                {"depart": "07:15", "arrive": "07:35"},
                {"depart": "07:30", "arrive": "07:50"},
            ]
        },
        "saturday": {"outbound": [{"depart": "08:00", "arrive": "08:20"}]},
        "sundayHoliday": {"outbound": [{"depart": "10:00", "arrive": "10:20"}]},
    }


@pytest.fixture
def data_dir(tmp_path: Path) -> Path:
    """Directory holding a valid times.json and holidays.json."""
    (tmp_path / "times.json").write_text(
        json.dumps(schedule_document(), ensure_ascii=False), encoding="utf-8"
    )
    (tmp_path / "holidays.json").write_text("2024/1/6\n\n  2024/01/08  \nnot a date\n")
    return tmp_path


@pytest.fixture
def app_config(data_dir: Path) -> AppConfig:
    """App config reading from the temporary data directory only."""
    return AppConfig(_env_file=None, data_dir=[str(data_dir)])


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep host environment variables out of AppConfig."""
    for name in AppConfig.model_fields:
        monkeypatch.delenv(name.upper(), raising=False)
        monkeypatch.delenv(name, raising=False)
