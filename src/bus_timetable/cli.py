"""Command line interface for timetable lookups and reminders."""

import argparse
import asyncio
import json
import sys
from datetime import UTC, datetime, timedelta
from typing import Any, TextIO

from bus_timetable.adapters.config import AppConfig, JsonScheduleRepository
from bus_timetable.adapters.display import ConsoleBoardDisplay
from bus_timetable.adapters.formatters import DepartureFormatter
from bus_timetable.adapters.notifications import (
    ConsoleReminderDelivery,
    LoggingReminderDelivery,
)
from bus_timetable.application.services import (
    DepartureBoardService,
    ReminderScheduler,
    TimetableResolver,
)
from bus_timetable.domain.errors import ScheduleLoadError
from bus_timetable.domain.models import Candidate, TransitCalendar
from bus_timetable.domain.ports import ReminderDelivery
from bus_timetable.main import configure_logging, run_board


def parse_instant(value: str | None, calendar: TransitCalendar) -> datetime:
    """Parse an ISO 8601 instant; naive values are wall time in the calendar's zone."""
    if value is None:
        return calendar.localize(datetime.now(UTC))
    try:
        parsed = datetime.fromisoformat(value)
    except ValueError as e:
        raise ValueError(f"Invalid date/time {value!r}, expected ISO 8601") from e
    return calendar.localize(parsed)


def candidate_to_dict(candidate: Candidate) -> dict[str, Any]:
    """JSON-friendly view of a candidate."""
    return {
        "id": candidate.id,
        "depart": candidate.depart_string,
        "arrive": candidate.arrive_string,
        "departure": candidate.departure.isoformat(),
        "arrival": candidate.arrival.isoformat(),
        "minutes_until": candidate.minutes_until,
    }


def load_resolver(config: AppConfig) -> TimetableResolver:
    """Load timetable data into a resolver.

    Raises:
        ScheduleLoadError: If the schedule or holiday list cannot be loaded.
    """
    board_service = DepartureBoardService(
        JsonScheduleRepository(config), config.calendar(), limit=config.next_departures_limit
    )
    return board_service.load()


def show_next(config: AppConfig, at: str | None, limit: int | None, format_json: bool) -> int:
    """Print the next departures."""
    calendar = config.calendar()
    now = parse_instant(at, calendar)
    board_service = DepartureBoardService(
        JsonScheduleRepository(config),
        calendar,
        limit=config.next_departures_limit if limit is None else limit,
    )
    snapshot = board_service.build_snapshot(now)

    formatter = DepartureFormatter(config)
    if format_json:
        payload: dict[str, Any] = {
            "now": now.isoformat(),
            "route": snapshot.route_name,
            "stop": snapshot.stop_name,
            "service_type": snapshot.service_type.value if snapshot.service_type else None,
            "departures": [
                {**candidate_to_dict(c), "can_remind": formatter.can_remind(c)}
                for c in snapshot.next_departures
            ],
            "end_of_service": snapshot.is_end_of_service,
            "error": snapshot.error.model_dump() if snapshot.error else None,
        }
        print(json.dumps(payload, indent=2, ensure_ascii=False))
    else:
        print(ConsoleBoardDisplay(formatter).render(snapshot))
    return 1 if snapshot.has_error else 0


def show_service_type(config: AppConfig, at: str | None) -> int:
    """Print the service type of a day."""
    resolver = load_resolver(config)
    instant = parse_instant(at, resolver.calendar)
    service = resolver.service_type(instant)
    print(f"{resolver.calendar.local_date(instant).isoformat()}: {service.label}")
    return 0


def show_departure(config: AppConfig, hhmm: str, at: str | None, format_json: bool) -> int:
    """Print a single departure looked up by its depart time."""
    resolver = load_resolver(config)
    instant = parse_instant(at, resolver.calendar)
    candidate = resolver.find_by_departure_time(hhmm, instant)
    if candidate is None:
        print(f"No departure at {hhmm} in today's timetable.", file=sys.stderr)
        return 1

    if format_json:
        print(json.dumps(candidate_to_dict(candidate), indent=2, ensure_ascii=False))
    else:
        print(f"{candidate.depart_string} dep  arr {candidate.arrive_string}")
    return 0


def show_timetable(config: AppConfig, at: str | None) -> int:
    """Print the whole timetable that applies on a day."""
    resolver = load_resolver(config)
    instant = parse_instant(at, resolver.calendar)
    schedule = resolver.schedule
    print(f"{schedule.route_name}  {schedule.stop_name}")
    day = resolver.calendar.local_date(instant)
    print(f"{day.isoformat()}: {resolver.service_type(instant).label}")
    for trip in resolver.timetable_for(instant):
        print(f"  {trip.depart} dep  arr {trip.arrive}")
    return 0


def reminder_delivery(stream: TextIO) -> ReminderDelivery:
    """Ring the terminal when attached to one, otherwise log the reminder."""
    if stream.isatty():
        return ConsoleReminderDelivery(stream)
    return LoggingReminderDelivery()


async def remind(
    config: AppConfig,
    hhmm: str,
    lead_minutes: int | None,
    now: datetime | None = None,
) -> int:
    """Schedule a reminder for today's departure at ``hhmm`` and wait for it."""
    resolver = load_resolver(config)
    if now is None:
        now = parse_instant(None, resolver.calendar)
    candidate = resolver.find_by_departure_time(hhmm, now)
    if candidate is None:
        print(f"No departure at {hhmm} in today's timetable.", file=sys.stderr)
        return 1

    lead_minutes = config.reminder_lead_minutes if lead_minutes is None else lead_minutes
    formatter = DepartureFormatter(config)
    if not formatter.can_remind(candidate, lead_minutes):
        print(f"Too late to remind about the {hhmm} bus.", file=sys.stderr)
        return 1

    scheduler = ReminderScheduler(reminder_delivery(sys.stdout))
    schedule = resolver.schedule
    reminder = await scheduler.schedule(
        candidate, schedule.route_name, schedule.stop_name, timedelta(minutes=lead_minutes)
    )
    if reminder is None:
        print(f"Too late to remind about the {hhmm} bus.", file=sys.stderr)
        return 1

    print(
        f"Reminder set for {formatter.format_clock(reminder.trigger_at)} ({reminder.key}), "
        f"bus leaves {formatter.format_countdown(candidate)}"
    )
    try:
        await scheduler.wait_idle()
    finally:
        await scheduler.shutdown()
    return 0


def positive_int(value: str) -> int:
    """Argparse type for counts of at least one."""
    try:
        number = int(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"invalid integer: {value!r}") from e
    if number < 1:
        raise argparse.ArgumentTypeError("must be at least 1")
    return number


def _setup_argparse() -> Any:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        description="Bus timetable lookups",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Next three buses from now
  bus-timetable next

  # Next buses at a given time
  bus-timetable next --at 2024-01-09T07:10

  # Which timetable runs on a day
  bus-timetable type --at 2024-01-06

  # Look up one departure
  bus-timetable find 07:15

  # Get a reminder five minutes before the 07:15 bus
  bus-timetable remind 07:15
        """,
    )
    parser.add_argument("--config", help="Path to TOML configuration file")
    parser.add_argument(
        "--data-dir",
        action="append",
        help="Directory containing times.json and holidays.json (repeatable)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    next_parser = subparsers.add_parser("next", help="Show the next departures")
    next_parser.add_argument("--at", help="Reference time (ISO 8601), default now")
    next_parser.add_argument("--limit", type=positive_int, help="Number of departures")
    next_parser.add_argument("--json", action="store_true", help="Output as JSON")

    type_parser = subparsers.add_parser("type", help="Show which timetable applies")
    type_parser.add_argument("--at", help="Day or time (ISO 8601), default today")

    find_parser = subparsers.add_parser("find", help="Look up a departure by time")
    find_parser.add_argument("depart", help="Departure time exactly as listed (e.g., 07:15)")
    find_parser.add_argument("--at", help="Day (ISO 8601), default today")
    find_parser.add_argument("--json", action="store_true", help="Output as JSON")

    timetable_parser = subparsers.add_parser("timetable", help="List a day's timetable")
    timetable_parser.add_argument("--at", help="Day (ISO 8601), default today")

    remind_parser = subparsers.add_parser("remind", help="Remind before a departure")
    remind_parser.add_argument("depart", help="Departure time exactly as listed (e.g., 07:15)")
    remind_parser.add_argument("--lead", type=int, help="Minutes before departure")

    subparsers.add_parser("watch", help="Show a board that refreshes every minute")

    return parser


def build_config(args: Any) -> AppConfig:
    """Create the app config, applying command line overrides."""
    config = AppConfig()
    if args.config:
        config.config_file = args.config
    config.load_config_file()
    if args.data_dir:
        config.data_dir = list(args.data_dir) + config.data_dir
    return config


async def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = _setup_argparse()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    try:
        config = build_config(args)
        configure_logging("WARNING" if args.command != "watch" else config.log_level)

        if args.command == "next":
            return show_next(config, args.at, args.limit, args.json)
        if args.command == "type":
            return show_service_type(config, args.at)
        if args.command == "find":
            return show_departure(config, args.depart, args.at, args.json)
        if args.command == "timetable":
            return show_timetable(config, args.at)
        if args.command == "remind":
            return await remind(config, args.depart, args.lead)
        if args.command == "watch":
            await run_board(config)
            return 0
    except (ScheduleLoadError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 1


def cli_main() -> None:
    """Synchronous entry point for the CLI command."""
    try:
        sys.exit(asyncio.run(main()))
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    cli_main()
