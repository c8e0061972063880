"""Calendar v3 queries and result models."""

from .client import CalendarClient
from .errors import (
    CalendarError,
    CalendarQueryError,
    CalendarRequestError,
    CalendarResponseError,
)
from .models import (
    CalendarList,
    CalendarListItem,
    DateOrDateTime,
    Event,
    EventPage,
)
from .window import EventQuery, TimeWindow

__all__ = [
    "CalendarClient",
    "CalendarError",
    "CalendarList",
    "CalendarListItem",
    "CalendarQueryError",
    "CalendarRequestError",
    "CalendarResponseError",
    "DateOrDateTime",
    "Event",
    "EventPage",
    "EventQuery",
    "TimeWindow",
]
