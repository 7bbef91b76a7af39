"""
Event sink interface.

Sinks consume observation events emitted by the status observer: logging,
JSON-lines recording, or a UI notifier that surfaces contract drift.
"""
from __future__ import annotations

from typing import Any, Protocol


class EventSink(Protocol):
    def on_event(self, event: Any) -> None:
        """Consume an observation event."""
