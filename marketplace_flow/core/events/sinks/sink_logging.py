"""
Logging event sink.
"""
from __future__ import annotations

import logging
from typing import Any

from marketplace_flow.core.events.events import (
    IllegalTransitionObservedEvent,
    UnknownStateObservedEvent,
)

# Contract drift is worth a warning; routine transitions are info.
_WARNING_EVENTS: tuple[type, ...] = (
    IllegalTransitionObservedEvent,
    UnknownStateObservedEvent,
)


class LoggingEventSink:
    """Logs observation events using the standard logging module."""

    def __init__(self, logger: logging.Logger) -> None:
        self._logger = logger

    def on_event(self, event: Any) -> None:
        level = logging.WARNING if isinstance(event, _WARNING_EVENTS) else logging.INFO
        self._logger.log(level, "status_event", extra={"event": event})
