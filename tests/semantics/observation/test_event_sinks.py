"""
Semantic test: event sinks.

Invariant:
Every sink registered on the bus receives every emitted event, contract
drift is logged at WARNING, the file recorder writes one JSON line per
event, and closing the bus closes its sinks exactly once.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest

from marketplace_flow.core.domain.observer import StatusObserver
from marketplace_flow.core.events.event_bus import EventBus
from marketplace_flow.core.events.events import (
    IllegalTransitionObservedEvent,
    StateTransitionObservedEvent,
)
from marketplace_flow.core.events.sinks.file_recorder import FileRecorderSink
from marketplace_flow.core.events.sinks.null_event_bus import NullEventBus
from marketplace_flow.core.events.sinks.sink_logging import LoggingEventSink


def test_logging_sink_levels(caplog: pytest.LogCaptureFixture) -> None:
    logger = logging.getLogger("marketplace_flow.test.bus")
    bus = EventBus(sinks=[LoggingEventSink(logger)])

    with caplog.at_level(logging.INFO, logger="marketplace_flow.test.bus"):
        bus.emit(StateTransitionObservedEvent("order", "o-1", None, "pending"))
        bus.emit(IllegalTransitionObservedEvent("order", "o-1", "pending", "completed"))

    assert [r.levelno for r in caplog.records] == [logging.INFO, logging.WARNING]
    assert all(r.getMessage() == "status_event" for r in caplog.records)
    assert caplog.records[1].event.next_state == "completed"


def test_file_recorder_writes_json_lines(tmp_path: Path) -> None:
    path = tmp_path / "events" / "status.jsonl"
    recorder = FileRecorderSink(path)
    bus = EventBus(sinks=[recorder])

    observer = StatusObserver(event_bus=bus)
    observer.observe("rental", "r-1", "pending")
    observer.observe("rental", "r-1", "renewed")
    bus.close()

    lines = [json.loads(line) for line in path.read_text(encoding="utf-8").splitlines()]
    assert [line["type"] for line in lines] == [
        "StateTransitionObservedEvent",
        "IllegalTransitionObservedEvent",
    ]
    assert lines[1]["prev_state"] == "pending"
    assert lines[1]["next_state"] == "renewed"


def test_close_is_idempotent(tmp_path: Path) -> None:
    recorder = FileRecorderSink(tmp_path / "a.jsonl")
    bus = EventBus(sinks=[recorder])
    bus.close()
    bus.close()

    assert bus.closed
    bus.emit(StateTransitionObservedEvent("order", "o-1", None, "pending"))
    assert (tmp_path / "a.jsonl").read_text(encoding="utf-8") == ""


def test_register_after_close_is_rejected() -> None:
    bus = EventBus()
    bus.close()
    with pytest.raises(RuntimeError):
        bus.register(LoggingEventSink(logging.getLogger("x")))


def test_null_bus_stays_silent_after_register(tmp_path: Path) -> None:
    path = tmp_path / "silent.jsonl"
    bus = NullEventBus()
    bus.register(FileRecorderSink(path))

    observer = StatusObserver(event_bus=bus)
    observer.observe("order", "o-9", "pending")
    observer.observe("order", "o-9", "completed")

    assert path.read_text(encoding="utf-8") == ""
    assert observer.last_state("order", "o-9") == "completed"
