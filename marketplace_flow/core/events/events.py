"""
Observation events.

These events describe what the status observer saw in backend payloads.
They are facts for loggers and recorders; nothing in the engine reacts to
them.
"""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class StateTransitionObservedEvent:
    kind: str
    entity_id: str
    prev_state: str | None
    next_state: str


@dataclass(slots=True)
class IllegalTransitionObservedEvent:
    """The backend reported a change the mirrored contract does not allow."""

    kind: str
    entity_id: str
    prev_state: str
    next_state: str


@dataclass(slots=True)
class UnknownStateObservedEvent:
    """A backend state string outside the kind's known state space."""

    kind: str
    entity_id: str | None
    raw_state: str | None
