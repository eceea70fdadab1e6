"""Tests for the command line interface."""

import io
import json
from datetime import datetime
from pathlib import Path
from zoneinfo import ZoneInfo

import pytest

from bus_timetable.adapters.config import AppConfig
from bus_timetable.adapters.notifications import ConsoleReminderDelivery, LoggingReminderDelivery
from bus_timetable.cli import main, parse_instant, remind, reminder_delivery
from bus_timetable.domain.models import TransitCalendar

JST = ZoneInfo("Asia/Tokyo")


@pytest.fixture(autouse=True)
def isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run every CLI test from an empty directory."""
    cwd = tmp_path / "cwd"
    cwd.mkdir()
    monkeypatch.chdir(cwd)
    return cwd


def test_parse_instant_treats_naive_values_as_local(calendar: TransitCalendar) -> None:
    """Given a naive ISO time, when parsing, then it is wall time in the route's zone."""
    instant = parse_instant("2024-01-09T07:10", calendar)

    assert instant.utcoffset() is not None
    assert (instant.hour, instant.minute) == (7, 10)


def test_parse_instant_rejects_garbage(calendar: TransitCalendar) -> None:
    """Given an unparseable value, when parsing, then a ValueError names the value."""
    with pytest.raises(ValueError, match="tomorrow"):
        parse_instant("tomorrow", calendar)


@pytest.mark.asyncio
async def test_next_prints_board(data_dir: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """Given data files, when running 'next', then the board is printed."""
    code = await main(["--data-dir", str(data_dir), "next", "--at", "2024-01-09T07:10"])

    out = capsys.readouterr().out
    assert code == 0
    assert "Next buses:" in out
    assert "07:15 dep  arr 07:35" in out


@pytest.mark.asyncio
async def test_next_as_json(data_dir: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """Given --json, when running 'next', then departures are printed as JSON."""
    code = await main(
        ["--data-dir", str(data_dir), "next", "--at", "2024-01-09T07:10", "--limit", "1", "--json"]
    )

    payload = json.loads(capsys.readouterr().out)
    assert code == 0
    assert payload["service_type"] == "weekday"
    assert [d["depart"] for d in payload["departures"]] == ["07:15"]
    assert payload["departures"][0]["minutes_until"] == 5
    assert payload["departures"][0]["can_remind"] is True
    assert payload["end_of_service"] is False
    assert payload["error"] is None


@pytest.mark.asyncio
async def test_next_reports_malformed_schedule(
    data_dir: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """Given a broken schedule file, when running 'next --json', then the error state is printed."""
    (data_dir / "times.json").write_text('{"routeName": "浜11"}', encoding="utf-8")

    code = await main(["--data-dir", str(data_dir), "next", "--json"])

    payload = json.loads(capsys.readouterr().out)
    assert code == 1
    assert payload["error"]["kind"] == "malformed"
    assert payload["departures"] == []
    assert payload["end_of_service"] is False


@pytest.mark.asyncio
async def test_type_on_holiday(data_dir: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """Given a listed holiday, when running 'type', then the Sunday/holiday timetable is named."""
    code = await main(["--data-dir", str(data_dir), "type", "--at", "2024-01-08"])

    assert code == 0
    assert capsys.readouterr().out.strip() == "2024-01-08: Sunday/Holiday"


@pytest.mark.asyncio
async def test_find_departure(data_dir: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """Given a listed depart time, when running 'find', then the trip is printed."""
    code = await main(["--data-dir", str(data_dir), "find", "07:30", "--at", "2024-01-09"])

    assert code == 0
    assert capsys.readouterr().out.strip() == "07:30 dep  arr 07:50"


@pytest.mark.asyncio
async def test_find_unknown_departure(data_dir: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """Given a time not in today's timetable, when running 'find', then exit code is 1."""
    code = await main(["--data-dir", str(data_dir), "find", "07:31", "--at", "2024-01-09"])

    assert code == 1
    assert "No departure at 07:31" in capsys.readouterr().err


@pytest.mark.asyncio
async def test_timetable_for_saturday(data_dir: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """Given a Saturday, when running 'timetable', then the Saturday trips are listed."""
    code = await main(["--data-dir", str(data_dir), "timetable", "--at", "2024-01-13"])

    out = capsys.readouterr().out.splitlines()
    assert code == 0
    assert out[1] == "2024-01-13: Saturday"
    assert out[2:] == ["  08:00 dep  arr 08:20"]


@pytest.mark.asyncio
async def test_invalid_at_is_reported(data_dir: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """Given a bad --at value, when running a command, then an error is printed and exit code is 1."""
    code = await main(["--data-dir", str(data_dir), "type", "--at", "someday"])

    assert code == 1
    assert "Error:" in capsys.readouterr().err


@pytest.mark.asyncio
async def test_missing_config_file_is_reported(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """Given a --config path that does not exist, when running, then the error is printed."""
    code = await main(["--config", str(tmp_path / "missing.toml"), "type"])

    assert code == 1
    assert "missing.toml not found" in capsys.readouterr().err


@pytest.mark.asyncio
async def test_no_command_prints_help(capsys: pytest.CaptureFixture[str]) -> None:
    """Given no subcommand, when running, then help is printed and exit code is 1."""
    code = await main([])

    assert code == 1
    assert "usage:" in capsys.readouterr().out


@pytest.mark.asyncio
async def test_next_rejects_limit_below_one(
    data_dir: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """Given --limit 0, when parsing arguments, then the CLI exits with a usage error."""
    with pytest.raises(SystemExit) as exc_info:
        await main(["--data-dir", str(data_dir), "next", "--limit", "0"])

    assert exc_info.value.code == 2
    assert "must be at least 1" in capsys.readouterr().err


@pytest.mark.asyncio
async def test_remind_declines_when_lead_time_has_passed(
    app_config: AppConfig, capsys: pytest.CaptureFixture[str]
) -> None:
    """Given 3 minutes before the 07:15 bus, when asking for a 5 minute reminder, then it is declined."""
    code = await remind(app_config, "07:15", 5, now=datetime(2024, 1, 9, 7, 12, tzinfo=JST))

    assert code == 1
    assert "Too late to remind about the 07:15 bus." in capsys.readouterr().err


@pytest.mark.asyncio
async def test_remind_unknown_departure(
    app_config: AppConfig, capsys: pytest.CaptureFixture[str]
) -> None:
    """Given a time not in the timetable, when asking for a reminder, then exit code is 1."""
    code = await remind(app_config, "07:16", None, now=datetime(2024, 1, 9, 7, 0, tzinfo=JST))

    assert code == 1
    assert "No departure at 07:16" in capsys.readouterr().err


class TerminalStream(io.StringIO):
    def isatty(self) -> bool:
        return True


def test_reminder_delivery_depends_on_terminal() -> None:
    """Given a terminal or a pipe, when choosing a delivery, then only the terminal gets the bell."""
    assert isinstance(reminder_delivery(TerminalStream()), ConsoleReminderDelivery)
    assert isinstance(reminder_delivery(io.StringIO()), LoggingReminderDelivery)
