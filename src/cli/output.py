"""Terminal rendering of command results."""

from __future__ import annotations

import json
import logging
from typing import Any

from calendar_api import EventPage

logger = logging.getLogger(__name__)


def format_result(result: Any, *, indent: int = 2) -> str:
    """Pretty-print ``result`` as JSON, falling back to ``str(result)``."""
    try:
        to_payload = getattr(result, "to_payload", None)
        payload = to_payload() if callable(to_payload) else result
        return json.dumps(payload, indent=indent, ensure_ascii=False)
    except (TypeError, ValueError) as error:
        logger.warning("Falling back to plain-text output: %s", error)
        return str(result)


def format_event_summary(page: EventPage) -> str:
    lines = ["Summary | Start -> End"]
    for event in page.items:
        title = event.summary or "(no title)"
        lines.append(f"{title} | {event.start} -> {event.end}")
    return "\n".join(lines)
