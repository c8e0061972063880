"""Argument-vector parsing into command variants."""

from __future__ import annotations

import datetime as dt
from dataclasses import dataclass
from typing import Optional, Sequence, Union

from transport import TransportMode

DEFAULT_CALENDAR_ID = "primary"
DEFAULT_DAYS = 7

MOCK_FLAG = "--mock"
SUMMARY_FLAG = "--summary"
CALENDAR_ID_OPTION = "--calendarId"
DAYS_OPTION = "--days"

USAGE = """\
Google Calendar command-line client.

Usage:
    calendar-cli calendars [--mock]
    calendar-cli events [--calendarId <id>] [--days N] [--summary] [--mock]

Commands:
    calendars   List the calendars visible to the authorized user.
    events      List events from now until N days ahead (default 7) in the
                given calendar (default "primary").

Options:
    --mock      Answer from built-in fixtures; no network, no sign-in.
    --summary   Print a "Summary | Start -> End" table after the events.
"""


class CommandInputError(ValueError):
    """Raised when command-line arguments cannot be interpreted."""


@dataclass(frozen=True)
class ListCalendars:
    pass


@dataclass(frozen=True)
class ListEvents:
    calendar_id: str = DEFAULT_CALENDAR_ID
    days: int = DEFAULT_DAYS
    show_summary: bool = False


@dataclass(frozen=True)
class Unknown:
    token: Optional[str] = None


Command = Union[ListCalendars, ListEvents, Unknown]


@dataclass(frozen=True)
class Invocation:
    command: Command
    mode: TransportMode = TransportMode.LIVE


def has_flag(argv: Sequence[str], flag: str) -> bool:
    return any(arg.lower() == flag.lower() for arg in argv)


def option_value(argv: Sequence[str], key: str, default: str) -> str:
    """Return the token after the first case-insensitive ``key`` match."""
    for index, arg in enumerate(argv):
        if arg.lower() == key.lower() and index + 1 < len(argv):
            return argv[index + 1]
    return default


def parse_days(raw: str) -> int:
    try:
        days = int(raw.strip(), 10)
    except ValueError as error:
        raise CommandInputError(f"{DAYS_OPTION} must be an integer, got: {raw!r}") from error
    if days < 0:
        raise CommandInputError(f"{DAYS_OPTION} must be >= 0, got: {days}")
    try:
        dt.datetime.now(dt.timezone.utc) + dt.timedelta(days=days)
    except OverflowError as error:
        raise CommandInputError(f"{DAYS_OPTION} is out of range, got: {days}") from error
    return days


def parse_command(argv: Sequence[str]) -> Command:
    if not argv:
        return Unknown()
    name = argv[0]
    if name == "calendars":
        return ListCalendars()
    if name == "events":
        calendar_id = option_value(argv, CALENDAR_ID_OPTION, DEFAULT_CALENDAR_ID)
        if not calendar_id.strip():
            raise CommandInputError(f"{CALENDAR_ID_OPTION} cannot be empty")
        return ListEvents(
            calendar_id=calendar_id,
            days=parse_days(option_value(argv, DAYS_OPTION, str(DEFAULT_DAYS))),
            show_summary=has_flag(argv, SUMMARY_FLAG),
        )
    return Unknown(token=name)


def parse_invocation(argv: Sequence[str]) -> Invocation:
    mode = TransportMode.MOCK if has_flag(argv, MOCK_FLAG) else TransportMode.LIVE
    return Invocation(command=parse_command(argv), mode=mode)
