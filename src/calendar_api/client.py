"""Google Calendar v3 client executing requests over a pluggable transport."""

from __future__ import annotations

import logging
from typing import Any, Optional

from googleapiclient.discovery import build

from transport import Transport, TransportHttp

from .errors import CalendarQueryError, CalendarRequestError, CalendarResponseError
from .models import CalendarList, EventPage
from .window import CALENDAR_LIST_FIELDS, EventQuery, TimeWindow


class CalendarClient:
    """Calendar list and event window queries with normalized results."""

    def __init__(
        self,
        transport: Transport,
        *,
        application_name: str = "calendar-cli",
        logger: Optional[logging.Logger] = None,
    ):
        self._logger = logger or logging.getLogger(__name__)
        self._http = TransportHttp(transport, user_agent=application_name)
        self._api = self._build_api()

    def _build_api(self):
        try:
            return build(
                "calendar",
                "v3",
                http=self._http,
                cache_discovery=False,
                static_discovery=True,
            )
        except Exception as error:
            raise CalendarRequestError(
                f"Failed to build Calendar API client: {error}"
            ) from error

    def list_calendars(self) -> CalendarList:
        request = self._api.calendarList().list(fields=CALENDAR_LIST_FIELDS)
        return CalendarList.from_api(self._execute(request, "list calendars"))

    def list_events(
        self,
        calendar_id: str = "primary",
        days: int = 7,
        *,
        window: Optional[TimeWindow] = None,
    ) -> EventPage:
        """Fetch the first page of events inside ``[now, now + days]``."""
        if not calendar_id.strip():
            raise CalendarQueryError("calendar_id cannot be empty")
        query = EventQuery(
            calendar_id=calendar_id,
            window=window or TimeWindow.starting_now(days),
        )
        self._logger.debug(
            "Listing events for %s between %s and %s",
            calendar_id,
            query.window.start,
            query.window.end,
        )
        request = self._api.events().list(**query.to_request_params())
        page = EventPage.from_api(self._execute(request, "list events"))
        if page.truncated:
            self._logger.warning(
                "More events exist beyond the first page; only %d were fetched.",
                len(page.items),
            )
        return page

    def _execute(self, request: Any, action: str) -> Any:
        try:
            response = request.execute(num_retries=0)
        except Exception as error:
            raise CalendarRequestError(f"Failed to {action}: {error}") from error
        if not isinstance(response, dict):
            raise CalendarResponseError(
                f"Unexpected {action} response type: {type(response).__name__}"
            )
        return response
