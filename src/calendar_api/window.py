"""Time-bounded event query construction."""

from __future__ import annotations

import datetime as dt
from dataclasses import dataclass
from typing import Any, Optional

from .models import format_rfc3339

EVENT_FIELDS = "items(id,summary,start,end),nextPageToken"
CALENDAR_LIST_FIELDS = "items(id,summary)"


@dataclass(frozen=True)
class TimeWindow:
    start: dt.datetime
    end: dt.datetime

    def __post_init__(self) -> None:
        if self.start.tzinfo is None or self.end.tzinfo is None:
            raise ValueError("Time window bounds must include timezone information.")
        if self.end < self.start:
            raise ValueError("Time window end must not precede its start.")

    @property
    def span(self) -> dt.timedelta:
        return self.end - self.start

    @classmethod
    def starting_now(
        cls,
        days: int,
        *,
        now: Optional[dt.datetime] = None,
    ) -> "TimeWindow":
        """Window of ``days`` calendar days from a single wall-clock reading."""
        if days < 0:
            raise ValueError(f"days must be >= 0, got: {days}")
        if now is None:
            now = dt.datetime.now(tz=dt.timezone.utc)
        elif now.tzinfo is None:
            now = now.replace(tzinfo=dt.datetime.now().astimezone().tzinfo)
        start = now.astimezone(dt.timezone.utc)
        return cls(start=start, end=start + dt.timedelta(days=days))


@dataclass(frozen=True)
class EventQuery:
    """Parameters for one ``events.list`` call.

    Recurring events are expanded into single occurrences and ordered by
    start time. Only the first page is requested.
    """
    calendar_id: str
    window: TimeWindow
    fields: str = EVENT_FIELDS

    def to_request_params(self) -> dict[str, Any]:
        return {
            "calendarId": self.calendar_id,
            "timeMin": format_rfc3339(self.window.start),
            "timeMax": format_rfc3339(self.window.end),
            "singleEvents": True,
            "orderBy": "startTime",
            "fields": self.fields,
        }
