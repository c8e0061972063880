"""Typed views over the Calendar v3 payload subset the CLI prints."""

from __future__ import annotations

import datetime as dt
from dataclasses import dataclass
from typing import Any, Mapping, Optional

from .errors import CalendarResponseError


def _parse_rfc3339(value: str) -> dt.datetime:
    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    return dt.datetime.fromisoformat(text)


def format_rfc3339(value: dt.datetime) -> str:
    return value.isoformat().replace("+00:00", "Z")


@dataclass(frozen=True)
class DateOrDateTime:
    """Event boundary: a timestamp, or a calendar date for all-day events."""
    date_time: Optional[dt.datetime] = None
    date: Optional[dt.date] = None
    time_zone: Optional[str] = None

    def __post_init__(self) -> None:
        if (self.date_time is None) == (self.date is None):
            raise CalendarResponseError(
                "Event boundary must carry exactly one of dateTime or date."
            )

    @property
    def is_all_day(self) -> bool:
        return self.date is not None

    @classmethod
    def from_api(cls, raw: Any) -> "DateOrDateTime":
        if not isinstance(raw, Mapping):
            raise CalendarResponseError(f"Event boundary must be an object, got: {raw!r}")
        raw_date_time = raw.get("dateTime")
        raw_date = raw.get("date")
        try:
            date_time = _parse_rfc3339(raw_date_time) if raw_date_time else None
            date = dt.date.fromisoformat(raw_date) if raw_date else None
        except (TypeError, ValueError) as error:
            raise CalendarResponseError(f"Invalid event boundary {dict(raw)}: {error}") from error
        return cls(date_time=date_time, date=date, time_zone=raw.get("timeZone"))

    def to_payload(self) -> dict[str, str]:
        payload: dict[str, str] = {}
        if self.date_time is not None:
            payload["dateTime"] = format_rfc3339(self.date_time)
        if self.date is not None:
            payload["date"] = self.date.isoformat()
        if self.time_zone:
            payload["timeZone"] = self.time_zone
        return payload

    def __str__(self) -> str:
        if self.date_time is not None:
            return format_rfc3339(self.date_time)
        return self.date.isoformat() if self.date is not None else ""


@dataclass(frozen=True)
class CalendarListItem:
    id: str
    summary: str

    @classmethod
    def from_api(cls, raw: Any) -> "CalendarListItem":
        if not isinstance(raw, Mapping) or not raw.get("id"):
            raise CalendarResponseError(f"Calendar entry without id: {raw!r}")
        return cls(id=str(raw["id"]), summary=str(raw.get("summary") or ""))

    def to_payload(self) -> dict[str, str]:
        return {"id": self.id, "summary": self.summary}


@dataclass(frozen=True)
class CalendarList:
    items: tuple[CalendarListItem, ...]
    kind: Optional[str] = None

    @classmethod
    def from_api(cls, raw: Any) -> "CalendarList":
        if not isinstance(raw, Mapping):
            raise CalendarResponseError("Calendar list response must be an object.")
        return cls(
            items=tuple(CalendarListItem.from_api(item) for item in raw.get("items") or []),
            kind=raw.get("kind"),
        )

    def to_payload(self) -> dict[str, Any]:
        payload: dict[str, Any] = {}
        if self.kind:
            payload["kind"] = self.kind
        payload["items"] = [item.to_payload() for item in self.items]
        return payload


@dataclass(frozen=True)
class Event:
    id: str
    start: DateOrDateTime
    end: DateOrDateTime
    summary: Optional[str] = None

    @classmethod
    def from_api(cls, raw: Any) -> "Event":
        if not isinstance(raw, Mapping) or not raw.get("id"):
            raise CalendarResponseError(f"Event without id: {raw!r}")
        summary = raw.get("summary")
        return cls(
            id=str(raw["id"]),
            start=DateOrDateTime.from_api(raw.get("start")),
            end=DateOrDateTime.from_api(raw.get("end")),
            summary=str(summary) if summary is not None else None,
        )

    def to_payload(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"id": self.id}
        if self.summary is not None:
            payload["summary"] = self.summary
        payload["start"] = self.start.to_payload()
        payload["end"] = self.end.to_payload()
        return payload


@dataclass(frozen=True)
class EventPage:
    """A single page of events; ``next_page_token`` marks truncation."""
    items: tuple[Event, ...]
    next_page_token: Optional[str] = None
    kind: Optional[str] = None

    @property
    def truncated(self) -> bool:
        return bool(self.next_page_token)

    @classmethod
    def from_api(cls, raw: Any) -> "EventPage":
        if not isinstance(raw, Mapping):
            raise CalendarResponseError("Events response must be an object.")
        return cls(
            items=tuple(Event.from_api(item) for item in raw.get("items") or []),
            next_page_token=raw.get("nextPageToken") or None,
            kind=raw.get("kind"),
        )

    def to_payload(self) -> dict[str, Any]:
        payload: dict[str, Any] = {}
        if self.kind:
            payload["kind"] = self.kind
        payload["items"] = [event.to_payload() for event in self.items]
        if self.next_page_token:
            payload["nextPageToken"] = self.next_page_token
        return payload
