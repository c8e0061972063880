"""Adapter exposing a Transport through the ``httplib2.Http.request`` interface.

``googleapiclient`` request objects execute against anything shaped like
``httplib2.Http``. Wrapping a ``Transport`` in ``TransportHttp`` lets the same
Calendar resource run over the live network or the fixture router.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional

import httplib2

from .contracts import Transport


class TransportHttp:
    def __init__(self, transport: Transport, *, user_agent: str = ""):
        self._transport = transport
        self._user_agent = user_agent.strip()

    @property
    def transport(self) -> Transport:
        return self._transport

    def request(
        self,
        uri: str,
        method: str = "GET",
        body: Optional[bytes] = None,
        headers: Optional[Mapping[str, str]] = None,
        redirections: int = httplib2.DEFAULT_MAX_REDIRECTS,
        connection_type: Any = None,
    ) -> tuple[httplib2.Response, bytes]:
        outgoing = dict(headers or {})
        if self._user_agent:
            existing = outgoing.get("user-agent", "")
            outgoing["user-agent"] = f"{self._user_agent} {existing}".strip()
        if isinstance(body, str):
            body = body.encode("utf-8")

        response = self._transport.send(method, uri, headers=outgoing, body=body)
        info = httplib2.Response(
            {
                "status": str(response.status),
                "content-type": response.content_type,
            }
        )
        return info, response.body
