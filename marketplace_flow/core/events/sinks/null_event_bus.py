"""
Silent event bus.
"""
from __future__ import annotations

from typing import Any

from marketplace_flow.core.events.event_bus import EventBus
from marketplace_flow.core.events.event_sink import EventSink


class NullEventBus(EventBus):
    """EventBus without sinks for silent observers and tests.

    Registration is ignored so a shared silent bus never starts emitting.
    """

    def __init__(self) -> None:
        super().__init__(sinks=())

    def register(self, sink: EventSink) -> None:
        return

    def emit(self, event: Any) -> None:
        return
