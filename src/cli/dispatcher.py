"""Routes a parsed invocation to its handler and owns terminal output."""

from __future__ import annotations

import logging
import sys
from typing import Any, Callable, Optional, TextIO, assert_never

from app_config_schema import AppConfig
from calendar_api import CalendarClient
from transport import Transport, TransportMode, create_transport

from .commands import USAGE, Invocation, ListCalendars, ListEvents, Unknown
from .output import format_event_summary, format_result

TransportFactory = Callable[..., Transport]


class CommandDispatcher:
    """Executes exactly one command per process."""
    def __init__(
        self,
        *,
        config: AppConfig,
        logger: logging.Logger,
        transport_factory: Optional[TransportFactory] = None,
        stdout: Optional[TextIO] = None,
    ):
        self._config = config
        self._logger = logger
        self._transport_factory = transport_factory or create_transport
        self._stdout = stdout or sys.stdout

    def run(self, invocation: Invocation) -> None:
        command = invocation.command
        match command:
            case Unknown():
                if command.token is not None:
                    self._logger.info("Unknown command: %s", command.token)
                self._write(USAGE)
            case ListCalendars():
                client = self._client(invocation.mode)
                self._write(format_result(client.list_calendars(), indent=self._indent))
            case ListEvents():
                client = self._client(invocation.mode)
                page = client.list_events(command.calendar_id, command.days)
                self._write(format_result(page, indent=self._indent))
                if command.show_summary:
                    self._write("")
                    self._write(format_event_summary(page))
            case _:
                assert_never(command)

    @property
    def _indent(self) -> int:
        return self._config.output.indent

    def _client(self, mode: TransportMode) -> CalendarClient:
        transport = self._transport_factory(
            mode,
            config=self._config,
            logger=self._logger.getChild("transport"),
        )
        application_name = (
            self._config.api.mock_application_name
            if mode is TransportMode.MOCK
            else self._config.api.application_name
        )
        return CalendarClient(
            transport,
            application_name=application_name,
            logger=self._logger.getChild("calendar"),
        )

    def _write(self, text: Any) -> None:
        text = str(text)
        self._stdout.write(text)
        if not text.endswith("\n"):
            self._stdout.write("\n")
