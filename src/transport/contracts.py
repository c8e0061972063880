"""Transport protocol and value types shared by live and mock transports."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Mapping, Optional, Protocol


class TransportMode(enum.Enum):
    """Which transport backs the calendar client for this process."""
    LIVE = "live"
    MOCK = "mock"


@dataclass(frozen=True)
class TransportResponse:
    """Status, content type, and raw body of a single HTTP exchange."""
    status: int
    content_type: str
    body: bytes

    def text(self, encoding: str = "utf-8") -> str:
        return self.body.decode(encoding)


class Transport(Protocol):
    """Capability turning an HTTP method and URL into a response."""
    def send(
        self,
        method: str,
        url: str,
        *,
        headers: Optional[Mapping[str, str]] = None,
        body: Optional[bytes] = None,
    ) -> TransportResponse:
        ...
