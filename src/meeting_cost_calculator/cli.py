"""Command-line interface for Meeting Cost Calculator.

This module provides the main entry point for the CLI application.
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import structlog

from meeting_cost_calculator import __version__
from meeting_cost_calculator.config import Settings, get_settings
from meeting_cost_calculator.exceptions import ConfigurationError, MeetingCostError
from meeting_cost_calculator.google_calendar import GoogleCalendarClient, dump_events, load_events
from meeting_cost_calculator.models import CalendarEvent, FilterOptions
from meeting_cost_calculator.report import format_methodology, format_report, format_share_text
from meeting_cost_calculator.stats import PERIOD_CHOICES, compute_stats, events_in_period, filter_meetings

logger = structlog.get_logger()


def _positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {value}")
    return number


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="meeting-cost", description="Meeting Cost Calculator")
    subparsers = parser.add_subparsers(dest="command", required=True)

    fetch_parser = subparsers.add_parser(
        "fetch",
        help="Download calendar events and save them as a JSON export",
    )
    fetch_parser.add_argument(
        "--days",
        type=int,
        default=None,
        help="Look-back window in days (default: settings fetch_window_days)",
    )
    fetch_parser.add_argument(
        "--output",
        type=Path,
        default=Path("events.json"),
        help="Where to write the export (default: events.json)",
    )

    report_parser = subparsers.add_parser("report", help="Show what your meetings cost")
    report_parser.add_argument(
        "--events-file",
        type=Path,
        default=None,
        help="Read events from a JSON export instead of Google Calendar",
    )
    report_parser.add_argument(
        "--period",
        type=int,
        choices=PERIOD_CHOICES,
        default=None,
        help="Reporting period in days (default: settings default_period_days)",
    )
    report_parser.add_argument(
        "--rate",
        type=float,
        default=None,
        help="Hourly cost of your time (default: settings hourly_rate)",
    )
    report_parser.add_argument(
        "--min-attendees",
        type=_positive_int,
        default=None,
        help="Minimum attendees for an event to count (default: settings min_attendees)",
    )
    report_parser.add_argument(
        "--participant",
        default=None,
        help="Only count meetings with an attendee whose email or name contains this text",
    )
    report_parser.add_argument(
        "--work-hours-only",
        action="store_true",
        help="Only count meetings starting Mon-Fri between 09:00 and 18:00",
    )
    report_parser.add_argument(
        "--methodology",
        action="store_true",
        help="Also print the annualized cost breakdown",
    )
    report_parser.add_argument(
        "--share",
        action="store_true",
        help="Also print a short text for sharing",
    )

    return parser


def _resolve_timezone(settings: Settings) -> ZoneInfo | None:
    if not settings.timezone:
        return None
    try:
        return ZoneInfo(settings.timezone)
    except ZoneInfoNotFoundError as exc:
        raise ConfigurationError(f"Unknown time zone: {settings.timezone}") from exc


async def _cmd_fetch(args: argparse.Namespace) -> int:
    settings = get_settings()
    client = GoogleCalendarClient(settings)
    await client.authenticate()
    items = await client.list_events(args.days)

    dump_events(items, args.output)
    logger.info("events_exported", event_count=len(items), output=str(args.output))
    print(f"Saved {len(items)} events to {args.output}")
    return 0


async def _load_live_events(settings: Settings) -> list[CalendarEvent]:
    client = GoogleCalendarClient(settings)
    await client.authenticate()
    user_email = await client.get_user_email()
    logger.info("calendar_connected", user_email=user_email)
    return await client.fetch_events(settings.fetch_window_days)


def _cmd_report(args: argparse.Namespace) -> int:
    settings = get_settings()
    tz = _resolve_timezone(settings)

    if args.events_file is not None:
        events = load_events(args.events_file)
    else:
        events = asyncio.run(_load_live_events(settings))
    logger.info("events_loaded", event_count=len(events), source=str(args.events_file or "google"))

    period_days = args.period or settings.default_period_days
    hourly_rate = args.rate if args.rate is not None else settings.hourly_rate
    filters = FilterOptions(
        min_attendees=args.min_attendees or settings.min_attendees,
        specific_participant=args.participant,
        work_hours_only=args.work_hours_only,
    )

    period_events = events_in_period(events, period_days)
    result = compute_stats(period_events, hourly_rate, period_days, filters, tz=tz)
    logger.info(
        "report_computed",
        period_days=period_days,
        total_events=len(period_events),
        total_meetings=result.total_meetings,
    )

    print(format_report(result))
    shown = len(filter_meetings(period_events, filters, tz=tz))
    print(f"\nShowing {shown} of {len(period_events)} events")
    if args.methodology:
        print()
        print(format_methodology(result, hourly_rate))
    if args.share:
        print()
        print(format_share_text(result))
    return 0


def main(args: list[str] | None = None) -> int:
    """Main entry point for the Meeting Cost Calculator CLI.

    Args:
        args: Command-line arguments. If None, uses sys.argv.

    Returns:
        Exit code (0 for success, non-zero for failure).
    """
    if args is None:
        args = sys.argv[1:]

    settings = get_settings()

    # Configure logging; stdout is reserved for the report itself.
    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, settings.log_level.upper(), logging.INFO)
        ),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )

    logger.info("meeting_cost_started", version=__version__, debug=settings.debug)

    parser = _build_parser()
    parsed = parser.parse_args(args)

    try:
        if parsed.command == "fetch":
            return asyncio.run(_cmd_fetch(parsed))
        if parsed.command == "report":
            return _cmd_report(parsed)
    except MeetingCostError as exc:
        logger.error("command_failed", command=parsed.command, error=str(exc))
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    logger.error("unknown_command", command=parsed.command)
    return 2


if __name__ == "__main__":
    sys.exit(main())
