"""Backend status observation.

Tracks the last state reported by the backend for each entity and checks
every reported change against the mirrored transition contract. This is
observability only: an illegal change is reported on the event bus but still
recorded, because the backend is the system of record and the local mirror
may simply be stale.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from marketplace_flow.core.domain.presentation import normalize_state
from marketplace_flow.core.domain.transition_tables import is_known_state
from marketplace_flow.core.domain.transition_validator import can_transition
from marketplace_flow.core.domain.types import EntityKind, coerce_entity_kind
from marketplace_flow.core.events.events import (
    IllegalTransitionObservedEvent,
    StateTransitionObservedEvent,
    UnknownStateObservedEvent,
)

if TYPE_CHECKING:
    from marketplace_flow.core.events.event_bus import EventBus

LOGGER = logging.getLogger(__name__)


class StatusObserver:
    """Best-effort per-entity status tracker fed from backend payloads."""

    def __init__(self, event_bus: EventBus) -> None:
        self._event_bus = event_bus
        self._last: dict[tuple[EntityKind, str], str] = {}

    def parse_state(
        self,
        kind: EntityKind | str,
        raw: Any,
        entity_id: str | None = None,
    ) -> str | None:
        """Return the normalized state if it belongs to ``kind``, else None.

        Unknown values are reported on the bus, never raised.
        """
        entity_kind = coerce_entity_kind(kind)
        state = normalize_state(raw) if isinstance(raw, str) else ""
        if state and is_known_state(entity_kind, state):
            return state

        self._event_bus.emit(
            UnknownStateObservedEvent(
                kind=entity_kind.value,
                entity_id=entity_id,
                raw_state=None if raw is None else str(raw),
            )
        )
        return None

    def observe(self, kind: EntityKind | str, entity_id: str, raw_state: Any) -> str | None:
        """Record a backend-reported state and return it (None if unknown).

        Unknown states leave the last known state untouched.
        """
        entity_kind = coerce_entity_kind(kind)
        state = self.parse_state(entity_kind, raw_state, entity_id=entity_id)
        if state is None:
            return None

        key = (entity_kind, entity_id)
        prev_state = self._last.get(key)
        if prev_state == state:
            return state

        if prev_state is not None and not can_transition(entity_kind, prev_state, state):
            LOGGER.debug(
                "backend reported %s %s: %s -> %s outside mirrored contract",
                entity_kind.value,
                entity_id,
                prev_state,
                state,
            )
            self._event_bus.emit(
                IllegalTransitionObservedEvent(
                    kind=entity_kind.value,
                    entity_id=entity_id,
                    prev_state=prev_state,
                    next_state=state,
                )
            )
        else:
            self._event_bus.emit(
                StateTransitionObservedEvent(
                    kind=entity_kind.value,
                    entity_id=entity_id,
                    prev_state=prev_state,
                    next_state=state,
                )
            )

        self._last[key] = state
        return state

    def last_state(self, kind: EntityKind | str, entity_id: str) -> str | None:
        return self._last.get((coerce_entity_kind(kind), entity_id))

    def forget(self, kind: EntityKind | str, entity_id: str) -> None:
        self._last.pop((coerce_entity_kind(kind), entity_id), None)
