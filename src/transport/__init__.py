"""Transport layer: live Google API access and an offline fixture-backed mock."""

from .contracts import Transport, TransportMode, TransportResponse
from .errors import TransportError, TransportRequestError
from .fixtures import MockRoute, route
from .http_adapter import TransportHttp
from .live import LiveTransport
from .mock import MockTransport
from .providers import create_transport

__all__ = [
    "LiveTransport",
    "MockRoute",
    "MockTransport",
    "Transport",
    "TransportError",
    "TransportHttp",
    "TransportMode",
    "TransportRequestError",
    "TransportResponse",
    "create_transport",
    "route",
]
