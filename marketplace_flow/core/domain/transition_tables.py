"""
Entity lifecycle transition tables.

This module is the single in-process definition of the transition contract
enforced by the backend. Every consumer (badges, pipeline boards, admin
action menus) imports these tables; none re-declares them.

The tables are frozen at import time: rows are frozensets and each kind's
table is exposed through a read-only mapping.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from marketplace_flow.core.domain.types import EntityKind, coerce_entity_kind

TransitionTable = Mapping[str, frozenset[str]]


def _freeze(table: dict[str, set[str]]) -> TransitionTable:
    return MappingProxyType({state: frozenset(targets) for state, targets in table.items()})


# Worker onboarding and assignment (admin-driven).
#
# Notes:
# - suspended can fall back to applied or screening_unlocked for re-onboarding.
# - failed is not terminal: the worker may be allowed a retry.
WORKER_TRANSITIONS: TransitionTable = _freeze(
    {
        "applied": {"screening_unlocked", "suspended"},
        "screening_unlocked": {
            "training_viewed",
            "test_submitted",
            "ready_to_work",
            "suspended",
        },
        "training_viewed": {"test_submitted", "ready_to_work", "suspended"},
        "test_submitted": {
            "ready_to_work",
            "screening_unlocked",
            "failed",
            "suspended",
        },
        "failed": {"screening_unlocked", "suspended"},
        "ready_to_work": {"assigned", "suspended"},
        "assigned": {"working", "ready_to_work", "suspended"},
        "working": {"ready_to_work", "suspended"},
        "suspended": {"ready_to_work", "screening_unlocked", "applied"},
    }
)

# Service orders. completed must be reached through in_progress or waiting_user.
ORDER_TRANSITIONS: TransitionTable = _freeze(
    {
        "pending": {"in_progress", "cancelled"},
        "in_progress": {"waiting_user", "completed", "cancelled"},
        "waiting_user": {"in_progress", "completed", "cancelled"},
        "completed": set(),
        "cancelled": set(),
    }
)

RENTAL_TRANSITIONS: TransitionTable = _freeze(
    {
        "pending": {"active", "cancelled"},
        "active": {"expired", "cancelled"},
        "expired": {"renewed"},
        "cancelled": set(),
        "renewed": set(),
    }
)

TICKET_TRANSITIONS: TransitionTable = _freeze(
    {
        "open": {"in_progress", "waiting_user", "resolved", "closed"},
        "in_progress": {"waiting_user", "resolved", "closed"},
        "waiting_user": {"in_progress", "resolved", "closed"},
        "resolved": {"closed"},
        "closed": set(),
    }
)

# submitted -> in_progress is the "request changes" path.
PROJECT_TRANSITIONS: TransitionTable = _freeze(
    {
        "draft": {"active"},
        "active": {"assigned"},
        "assigned": {"in_progress"},
        "in_progress": {"submitted"},
        "submitted": {"completed", "in_progress"},
        "completed": set(),
    }
)

WALLET_TRANSACTION_TRANSITIONS: TransitionTable = _freeze(
    {
        "initiated": {"pending", "paid_unverified", "failed"},
        "pending": {"paid_unverified", "success", "failed"},
        "paid_unverified": {"success", "failed"},
        "success": set(),
        "failed": set(),
    }
)


_REGISTRY: Mapping[EntityKind, TransitionTable] = MappingProxyType(
    {
        EntityKind.ORDER: ORDER_TRANSITIONS,
        EntityKind.RENTAL: RENTAL_TRANSITIONS,
        EntityKind.TICKET: TICKET_TRANSITIONS,
        EntityKind.WORKER: WORKER_TRANSITIONS,
        EntityKind.PROJECT: PROJECT_TRANSITIONS,
        EntityKind.WALLET_TRANSACTION: WALLET_TRANSACTION_TRANSITIONS,
    }
)


def _collect_states(table: TransitionTable) -> frozenset[str]:
    states: set[str] = set(table)
    for targets in table.values():
        states.update(targets)
    return frozenset(states)


_ALL_STATES: Mapping[EntityKind, frozenset[str]] = MappingProxyType(
    {kind: _collect_states(table) for kind, table in _REGISTRY.items()}
)

_TERMINAL_STATES: Mapping[EntityKind, frozenset[str]] = MappingProxyType(
    {
        kind: frozenset(state for state, targets in table.items() if not targets)
        for kind, table in _REGISTRY.items()
    }
)


def transitions_for(kind: EntityKind | str) -> TransitionTable:
    """Return the full read-only transition table for ``kind``.

    Raises UnknownEntityKind if ``kind`` is not a recognized tag.
    """
    return _REGISTRY[coerce_entity_kind(kind)]


def all_states(kind: EntityKind | str) -> frozenset[str]:
    """Return every state appearing as a key or a target for ``kind``."""
    return _ALL_STATES[coerce_entity_kind(kind)]


def terminal_states(kind: EntityKind | str) -> frozenset[str]:
    """Return the states of ``kind`` that admit no further transitions."""
    return _TERMINAL_STATES[coerce_entity_kind(kind)]


def is_terminal_state(kind: EntityKind | str, state: str) -> bool:
    """Return True if the given state is terminal for ``kind``."""
    return state in terminal_states(kind)


def is_known_state(kind: EntityKind | str, state: str) -> bool:
    """Return True if ``state`` belongs to the state space of ``kind``."""
    return state in all_states(kind)
