"""Network-free transport answering every request from the fixture table."""

from __future__ import annotations

from typing import Mapping, Optional

from .contracts import TransportResponse
from .fixtures import route

JSON_CONTENT_TYPE = "application/json"


class MockTransport:
    """Deterministic transport; never performs I/O and never fails."""

    def send(
        self,
        method: str,
        url: str,
        *,
        headers: Optional[Mapping[str, str]] = None,
        body: Optional[bytes] = None,
    ) -> TransportResponse:
        fixture = route(method, url)
        return TransportResponse(
            status=200,
            content_type=JSON_CONTENT_TYPE,
            body=fixture.encode("utf-8"),
        )
