class TransportError(Exception):
    """Base exception for calendar transports."""


class TransportRequestError(TransportError):
    """Raised when a live HTTP exchange fails before a response arrives."""
