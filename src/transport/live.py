"""Transport performing real HTTPS requests with an authorized httplib2 client."""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

import httplib2
from google_auth_httplib2 import AuthorizedHttp

from .contracts import TransportResponse
from .errors import TransportRequestError

DEFAULT_CONTENT_TYPE = "application/octet-stream"


class LiveTransport:
    """Sends requests to the Google API, signing them with the given credentials."""

    def __init__(
        self,
        credentials: Any,
        *,
        timeout_seconds: Optional[float] = None,
        logger: Optional[logging.Logger] = None,
    ):
        self._logger = logger or logging.getLogger(__name__)
        self._http = self._build_http(credentials, timeout_seconds)

    @staticmethod
    def _build_http(credentials: Any, timeout_seconds: Optional[float]) -> AuthorizedHttp:
        return AuthorizedHttp(credentials, http=httplib2.Http(timeout=timeout_seconds))

    def send(
        self,
        method: str,
        url: str,
        *,
        headers: Optional[Mapping[str, str]] = None,
        body: Optional[bytes] = None,
    ) -> TransportResponse:
        self._logger.debug("%s %s", method, url)
        try:
            response, content = self._http.request(
                url,
                method=method,
                body=body,
                headers=dict(headers or {}),
            )
        except Exception as error:
            raise TransportRequestError(
                f"{method} {url} failed: {error}"
            ) from error

        return TransportResponse(
            status=int(response.status),
            content_type=response.get("content-type", DEFAULT_CONTENT_TYPE),
            body=content if isinstance(content, bytes) else str(content).encode("utf-8"),
        )
