"""Tests for domain models."""

from datetime import datetime, timedelta
from zoneinfo import ZoneInfo

import pytest

from bus_timetable.domain.models import (
    BoardSnapshot,
    Candidate,
    ErrorDetails,
    ServiceType,
    TimeOfDay,
    Trip,
)
from bus_timetable.domain.models.parse_outcome import Parsed, Skipped, parse_int
from bus_timetable.domain.models.time_of_day import parse_time_of_day

JST = ZoneInfo("Asia/Tokyo")


def test_trip_equality_and_hash_are_by_value() -> None:
    """Given two trips with the same times, when compared, then they are equal and hash alike."""
    first = Trip(depart="07:15", arrive="07:35")
    second = Trip(depart="07:15", arrive="07:35")

    assert first == second
    assert len({first, second}) == 1


def test_trip_is_frozen() -> None:
    """Given a trip, when trying to modify it, then raises an error."""
    trip = Trip(depart="07:15", arrive="07:35")

    with pytest.raises(AttributeError):
        trip.depart = "07:20"  # type: ignore[misc]


def test_trip_key_is_derived_from_times() -> None:
    """Given a trip, when reading its key, then it is built from depart and arrive."""
    assert Trip(depart="07:15", arrive="07:35").key == "bus_notify_07:15_07:35"


def test_candidate_minutes_until_floors() -> None:
    """Given a departure 5m59s ahead, when reading minutes_until, then it is 5."""
    reference = datetime(2024, 1, 9, 7, 9, 1, tzinfo=JST)
    candidate = Candidate(
        trip=Trip(depart="07:15", arrive="07:35"),
        departure=datetime(2024, 1, 9, 7, 15, tzinfo=JST),
        arrival=datetime(2024, 1, 9, 7, 35, tzinfo=JST),
        reference=reference,
    )

    assert candidate.minutes_until == 5
    assert candidate.is_departed is False
    assert candidate.id == "bus_notify_07:15_07:35"


def test_candidate_minutes_until_is_never_negative() -> None:
    """Given a departure in the past, when reading minutes_until, then it is 0 and departed."""
    departure = datetime(2024, 1, 9, 7, 15, tzinfo=JST)
    candidate = Candidate(
        trip=Trip(depart="07:15", arrive="07:35"),
        departure=departure,
        arrival=departure + timedelta(minutes=20),
        reference=departure + timedelta(minutes=3),
    )

    assert candidate.minutes_until == 0
    assert candidate.is_departed is True


def test_service_type_precedence_orders_holiday_first() -> None:
    """Given the service types, when comparing precedence, then holiday > Saturday > weekday."""
    assert (
        ServiceType.SUNDAY_HOLIDAY.precedence
        > ServiceType.SATURDAY.precedence
        > ServiceType.WEEKDAY.precedence
    )
    assert ServiceType.SUNDAY_HOLIDAY.label == "Sunday/Holiday"


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("07:05", TimeOfDay(7, 5)),
        ("7:5", TimeOfDay(7, 5)),
        ("24:10", TimeOfDay(24, 10)),
        ("07:60", TimeOfDay(7, 60)),
        ("-1:30", TimeOfDay(-1, 30)),
    ],
)
def test_parse_time_of_day_accepts_valid_times(raw: str, expected: TimeOfDay) -> None:
    """Given a well-formed time, when parsing, then the hour and minute are returned."""
    outcome = parse_time_of_day(raw)

    assert isinstance(outcome, Parsed)
    assert outcome.value == expected


@pytest.mark.parametrize("raw", ["0715", "07:15:00", "ab:cd", "07:", " 7:15", "7:1.5"])
def test_parse_time_of_day_skips_malformed_times(raw: str) -> None:
    """Given a malformed time, when parsing, then a Skipped outcome names the raw value."""
    outcome = parse_time_of_day(raw)

    assert isinstance(outcome, Skipped)
    assert outcome.raw == raw


def test_parse_int_rejects_whitespace_and_non_ascii_digits() -> None:
    """Given padded or non-ASCII digits, when parsing, then None is returned."""
    assert parse_int("+12") == 12
    assert parse_int(" 12") is None
    assert parse_int("１２") is None


def test_board_snapshot_distinguishes_error_from_end_of_service() -> None:
    """Given an error snapshot and an empty one, when checked, then only the empty one is end of service."""
    now = datetime(2024, 1, 9, 23, 0, tzinfo=JST)
    failed = BoardSnapshot(generated_at=now, error=ErrorDetails(kind="not_found", reason="x"))
    finished = BoardSnapshot(generated_at=now, route_name="浜11", stop_name="三ツ沢池")

    assert failed.has_error is True
    assert failed.is_end_of_service is False
    assert finished.has_error is False
    assert finished.is_end_of_service is True
