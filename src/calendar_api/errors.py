class CalendarError(Exception):
    """Base exception for calendar API access."""


class CalendarRequestError(CalendarError):
    """Raised when a Calendar API request fails."""


class CalendarResponseError(CalendarError):
    """Raised when a Calendar API payload does not have the expected shape."""


class CalendarQueryError(CalendarError):
    """Raised when query arguments cannot form a valid Calendar API request."""
