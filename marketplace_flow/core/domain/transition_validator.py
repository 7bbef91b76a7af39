"""
Transition legality checks.

Validation-only: these functions tell a caller whether it is allowed to *try*
a transition. They never call the backend and never mutate anything; the
backend response stays the only proof that a transition happened.
"""

from __future__ import annotations

from marketplace_flow.core.domain.transition_tables import transitions_for
from marketplace_flow.core.domain.types import EntityKind, coerce_entity_kind

# Kinds for which from == to is accepted as an idempotent no-op.
SELF_TRANSITION_KINDS: frozenset[EntityKind] = frozenset({EntityKind.WORKER})

_EMPTY: frozenset[str] = frozenset()


def next_states(kind: EntityKind | str, from_state: str) -> frozenset[str]:
    """Return the legal next states, or an empty set if ``from_state`` is unknown."""
    return transitions_for(kind).get(from_state, _EMPTY)


def can_transition(kind: EntityKind | str, from_state: str, to_state: str) -> bool:
    """Return True if the transition from_state -> to_state is allowed."""
    entity_kind = coerce_entity_kind(kind)
    if from_state == to_state and entity_kind in SELF_TRANSITION_KINDS:
        return True
    allowed = transitions_for(entity_kind).get(from_state)
    if allowed is None:
        return False
    return to_state in allowed
