"""Factory selecting the transport for the current invocation."""

from __future__ import annotations

import logging
from typing import Any, Callable, Optional

from app_config_schema import AppConfig
from auth import authorize as authorize_user

from .contracts import Transport, TransportMode
from .live import LiveTransport
from .mock import MockTransport


def create_transport(
    mode: TransportMode,
    *,
    config: AppConfig,
    authorize: Optional[Callable[..., Any]] = None,
    logger: Optional[logging.Logger] = None,
) -> Transport:
    """Build the transport for ``mode``; only live mode touches credentials."""
    logger = logger or logging.getLogger(__name__)
    if mode is TransportMode.MOCK:
        logger.info("Using mock transport (no network)")
        return MockTransport()

    authorize = authorize or authorize_user
    credentials = authorize(config.auth, logger=logger.getChild("auth"))
    logger.info("Using live transport")
    return LiveTransport(
        credentials,
        timeout_seconds=config.api.http_timeout_seconds,
        logger=logger.getChild("live"),
    )
