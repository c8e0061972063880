"""Command-line parsing, dispatch, and output for the calendar client."""

from .commands import (
    USAGE,
    Command,
    CommandInputError,
    Invocation,
    ListCalendars,
    ListEvents,
    Unknown,
    parse_command,
    parse_invocation,
)
from .dispatcher import CommandDispatcher
from .output import format_event_summary, format_result

__all__ = [
    "USAGE",
    "Command",
    "CommandDispatcher",
    "CommandInputError",
    "Invocation",
    "ListCalendars",
    "ListEvents",
    "Unknown",
    "format_event_summary",
    "format_result",
    "parse_command",
    "parse_invocation",
]
