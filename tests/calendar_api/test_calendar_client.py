import datetime as dt
import logging
import unittest
from urllib.parse import parse_qs, urlparse

from calendar_api import (
    CalendarClient,
    CalendarQueryError,
    CalendarRequestError,
    CalendarResponseError,
    TimeWindow,
)
from transport import MockTransport, TransportResponse


class _RecordingTransport:
    def __init__(self, inner=None) -> None:
        self._inner = inner or MockTransport()
        self.calls: list[dict[str, object]] = []

    def send(self, method, url, *, headers=None, body=None):
        self.calls.append({"method": method, "url": url, "headers": dict(headers or {})})
        return self._inner.send(method, url, headers=headers, body=body)


class _StaticTransport:
    def __init__(self, status: int, body: bytes) -> None:
        self._status = status
        self._body = body

    def send(self, method, url, *, headers=None, body=None):
        return TransportResponse(
            status=self._status,
            content_type="application/json",
            body=self._body,
        )


def _client(transport) -> CalendarClient:
    return CalendarClient(
        transport,
        application_name="calendar-cli-test",
        logger=logging.getLogger("test"),
    )


class CalendarClientTests(unittest.TestCase):
    def test_list_calendars_returns_fixture_entries(self) -> None:
        recorder = _RecordingTransport()

        calendars = _client(recorder).list_calendars()

        self.assertEqual(["primary", "team@example.com"], [c.id for c in calendars.items])
        self.assertEqual(1, len(recorder.calls))
        call = recorder.calls[0]
        self.assertEqual("GET", call["method"])
        self.assertIn("/users/me/calendarList", call["url"])
        query = parse_qs(urlparse(call["url"]).query)
        self.assertEqual(["items(id,summary)"], query["fields"])

    def test_list_events_returns_two_events_in_start_order(self) -> None:
        page = _client(_RecordingTransport()).list_events()

        self.assertEqual(["evt1", "evt2"], [event.id for event in page.items])
        self.assertEqual("Daily standup", page.items[0].summary)
        self.assertFalse(page.items[0].start.is_all_day)
        self.assertTrue(page.items[1].start.is_all_day)
        self.assertIsNone(page.next_page_token)

    def test_list_events_sends_single_page_windowed_query(self) -> None:
        recorder = _RecordingTransport()

        _client(recorder).list_events("team@example.com", 3)

        self.assertEqual(1, len(recorder.calls))
        url = urlparse(recorder.calls[0]["url"])
        self.assertIn("/calendars/team%40example.com/events", url.path)
        query = parse_qs(url.query)
        self.assertEqual(["true"], query["singleEvents"])
        self.assertEqual(["startTime"], query["orderBy"])
        self.assertEqual(["items(id,summary,start,end),nextPageToken"], query["fields"])
        self.assertNotIn("pageToken", query)

        time_min = dt.datetime.fromisoformat(query["timeMin"][0].replace("Z", "+00:00"))
        time_max = dt.datetime.fromisoformat(query["timeMax"][0].replace("Z", "+00:00"))
        self.assertEqual(dt.timedelta(days=3), time_max - time_min)

    def test_list_events_uses_given_window(self) -> None:
        recorder = _RecordingTransport()
        now = dt.datetime(2025, 8, 16, 0, 0, tzinfo=dt.timezone.utc)

        _client(recorder).list_events(
            "primary",
            window=TimeWindow.starting_now(1, now=now),
        )

        query = parse_qs(urlparse(recorder.calls[0]["url"]).query)
        self.assertEqual(["2025-08-16T00:00:00Z"], query["timeMin"])
        self.assertEqual(["2025-08-17T00:00:00Z"], query["timeMax"])

    def test_application_name_is_sent_as_user_agent(self) -> None:
        recorder = _RecordingTransport()

        _client(recorder).list_calendars()

        self.assertTrue(recorder.calls[0]["headers"]["user-agent"].startswith("calendar-cli-test"))

    def test_truncated_page_is_returned_without_fetching_more(self) -> None:
        body = (
            b'{"items": [{"id": "a", "start": {"date": "2025-08-17"},'
            b' "end": {"date": "2025-08-18"}}], "nextPageToken": "next"}'
        )
        transport = _RecordingTransport(_StaticTransport(200, body))

        with self.assertLogs("test", level="WARNING"):
            page = _client(transport).list_events()

        self.assertEqual(["a"], [event.id for event in page.items])
        self.assertTrue(page.truncated)
        self.assertEqual(1, len(transport.calls))

    def test_http_error_is_wrapped_without_retry(self) -> None:
        transport = _RecordingTransport(
            _StaticTransport(500, b'{"error": {"code": 500, "message": "boom"}}')
        )

        with self.assertRaises(CalendarRequestError):
            _client(transport).list_events()

        self.assertEqual(1, len(transport.calls))

    def test_malformed_event_payload_raises_response_error(self) -> None:
        body = b'{"items": [{"id": "x", "start": {}, "end": {"date": "2025-08-18"}}]}'

        with self.assertRaises(CalendarResponseError):
            _client(_StaticTransport(200, body)).list_events()

    def test_empty_calendar_id_is_rejected(self) -> None:
        with self.assertRaises(CalendarQueryError):
            _client(MockTransport()).list_events("  ")


if __name__ == "__main__":
    unittest.main()
