"""Canned Calendar v3 payloads and the URL routing table used by the mock transport."""

from __future__ import annotations

import json
from dataclasses import dataclass

CALENDAR_LIST_PATH = "/users/me/calendarList"
CALENDARS_SEGMENT = "/calendars/"
EVENTS_SEGMENT = "/events"

CALENDAR_LIST_FIXTURE = """
{
  "kind": "calendar#calendarList",
  "items": [
    { "id": "primary", "summary": "Primary" },
    { "id": "team@example.com", "summary": "Team Calendar" }
  ]
}
"""

EVENTS_FIXTURE = """
{
  "kind": "calendar#events",
  "items": [
    {
      "id": "evt1",
      "summary": "Daily standup",
      "start": { "dateTime": "2025-08-16T22:00:00Z" },
      "end":   { "dateTime": "2025-08-16T22:15:00Z" }
    },
    {
      "id": "evt2",
      "summary": "Company Holiday",
      "start": { "date": "2025-08-17" },
      "end":   { "date": "2025-08-18" }
    }
  ],
  "nextPageToken": null
}
"""


@dataclass(frozen=True)
class MockRoute:
    """A single routing rule: method plus every URL fragment must match."""
    method: str
    url_substrings: tuple[str, ...]
    fixture: str

    def matches(self, method: str, url: str) -> bool:
        if method != self.method:
            return False
        return all(fragment in url for fragment in self.url_substrings)


ROUTES: tuple[MockRoute, ...] = (
    MockRoute("GET", (CALENDAR_LIST_PATH,), CALENDAR_LIST_FIXTURE),
    MockRoute("GET", (CALENDARS_SEGMENT, EVENTS_SEGMENT), EVENTS_FIXTURE),
)


def unknown_fixture(url: str) -> str:
    return json.dumps({"kind": "calendar#unknown", "url": url})


def route(method: str, url: str) -> str:
    """Return the fixture body for a request; first matching rule wins."""
    for candidate in ROUTES:
        if candidate.matches(method, url):
            return candidate.fixture
    return unknown_fixture(url)
