"""
Action offering for UI surfaces.

Builds the list of actions a detail page, admin menu or pipeline board may
show for an entity in its current state. Every option targets a legal next
state; the catalogue below only adds a description and a danger flag to edges
that already exist in the transition tables.
"""

# pylint: disable=line-too-long
from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from marketplace_flow.core.domain.presentation import (
    color_category,
    confirm_message_for,
    display_label,
    label_for,
)
from marketplace_flow.core.domain.transition_tables import transitions_for
from marketplace_flow.core.domain.transition_validator import can_transition
from marketplace_flow.core.domain.types import ActionOption, EntityKind, coerce_entity_kind

# Kanban column order for the worker pipeline board.
WORKER_PIPELINE_COLUMNS: tuple[str, ...] = (
    "applied",
    "screening_unlocked",
    "training_viewed",
    "test_submitted",
    "ready_to_work",
    "assigned",
    "working",
    "suspended",
    "failed",
)


@dataclass(frozen=True, slots=True)
class WorkerAction:
    """Named admin action on a worker.

    ``sources`` lists the states the action is offered from; each
    (source, target) pair must be a legal worker transition. Button wording
    comes from ``label_for`` so it matches every other surface.
    """

    action_id: str
    target: str
    sources: frozenset[str]
    description: str
    dangerous: bool = False

    def label_from(self, state: str) -> str:
        return label_for(EntityKind.WORKER, state, self.target)


WORKER_ACTIONS: tuple[WorkerAction, ...] = (
    WorkerAction("approve", "screening_unlocked", frozenset({"applied"}), "Approve and unlock screening access"),
    WorkerAction("unlock_screening", "screening_unlocked", frozenset({"suspended"}), "Grant access to training & screening test"),
    WorkerAction("pass_test", "ready_to_work", frozenset({"test_submitted"}), "Mark screening as passed, enable project assignment"),
    WorkerAction("fail_test", "failed", frozenset({"test_submitted"}), "Mark screening as failed", dangerous=True),
    WorkerAction("allow_retry", "screening_unlocked", frozenset({"failed", "test_submitted"}), "Reset screening and allow another attempt"),
    WorkerAction("assign_project", "assigned", frozenset({"ready_to_work"}), "Assign a project to this worker"),
    WorkerAction("start_work", "working", frozenset({"assigned"}), "Mark worker as actively working"),
    WorkerAction("unassign", "ready_to_work", frozenset({"assigned", "working"}), "Remove current project assignment"),
    WorkerAction(
        "suspend",
        "suspended",
        frozenset({"applied", "screening_unlocked", "training_viewed", "test_submitted", "failed", "ready_to_work", "assigned", "working"}),
        "Temporarily block worker access",
        dangerous=True,
    ),
    WorkerAction("reactivate", "ready_to_work", frozenset({"suspended"}), "Restore worker access"),
)

WORKER_ACTIONS_BY_ID: Mapping[str, WorkerAction] = MappingProxyType(
    {action.action_id: action for action in WORKER_ACTIONS}
)

# Why a catalogue action is disabled in a given worker state.
# Only actions that are NOT offered from that state may appear here.
UNAVAILABLE_REASONS: Mapping[str, Mapping[str, str]] = MappingProxyType(
    {
        "applied": {
            "assign_project": "Worker must pass screening first",
            "pass_test": "Worker hasn't submitted a test yet",
            "fail_test": "Worker hasn't submitted a test yet",
        },
        "screening_unlocked": {
            "approve": "Application already approved",
            "assign_project": "Worker must pass screening first",
            "pass_test": "Worker hasn't submitted the test yet",
        },
        "test_submitted": {
            "assign_project": "Review and pass/fail the test first",
            "approve": "Application already approved",
        },
        "ready_to_work": {
            "pass_test": "Screening already passed",
            "approve": "Application already approved",
            "reactivate": "Worker is not suspended",
        },
        "assigned": {
            "assign_project": "Already assigned to a project",
            "pass_test": "Screening already passed",
        },
        "working": {
            "assign_project": "Already working on a project",
            "pass_test": "Screening already passed",
        },
        "suspended": {
            "assign_project": "Worker is suspended",
            "pass_test": "Worker is suspended",
            "suspend": "Already suspended",
        },
    }
)

# Passive states where the next move belongs to the entity's owner, not staff.
WAITING_MESSAGES: Mapping[tuple[EntityKind, str], str] = MappingProxyType(
    {
        (EntityKind.WORKER, "screening_unlocked"): "Waiting for worker to view training and submit test...",
        (EntityKind.WORKER, "training_viewed"): "Waiting for worker to submit screening test...",
        (EntityKind.ORDER, "waiting_user"): "Waiting for the customer to respond...",
        (EntityKind.TICKET, "waiting_user"): "Waiting for the customer to respond...",
        (EntityKind.WALLET_TRANSACTION, "paid_unverified"): "Payment reported, waiting for verification...",
    }
)

_DANGEROUS_TARGETS: frozenset[str] = frozenset({"cancelled", "failed", "suspended", "closed"})


def _is_offered(action: WorkerAction, state: str) -> bool:
    return state in action.sources and can_transition(EntityKind.WORKER, state, action.target)


def worker_actions_for(state: str) -> list[WorkerAction]:
    """Return catalogue actions offered from a worker state, in catalogue order."""
    return [action for action in WORKER_ACTIONS if _is_offered(action, state)]


def unavailable_reason(state: str, action_id: str) -> str | None:
    """Explain why a catalogue action is disabled for a worker in ``state``.

    Returns None when the action is offered from ``state`` or the id is not in
    the catalogue.
    """
    action = WORKER_ACTIONS_BY_ID.get(action_id)
    if action is None or _is_offered(action, state):
        return None
    reason = UNAVAILABLE_REASONS.get(state, {}).get(action_id)
    if reason is not None:
        return reason
    return f'Not available in "{display_label(state)}" state'


def unavailable_actions(state: str) -> list[tuple[WorkerAction, str]]:
    """Return (action, reason) for every catalogue action disabled in ``state``."""
    disabled: list[tuple[WorkerAction, str]] = []
    for action in WORKER_ACTIONS:
        reason = unavailable_reason(state, action.action_id)
        if reason is not None:
            disabled.append((action, reason))
    return disabled


def available_actions(kind: EntityKind | str, from_state: str) -> list[ActionOption]:
    """Return one ActionOption per legal next state, sorted by target state name.

    Unknown or terminal states yield an empty list.
    """
    entity_kind = coerce_entity_kind(kind)
    targets = transitions_for(entity_kind).get(from_state, frozenset())

    catalogue: dict[str, WorkerAction] = {}
    if entity_kind is EntityKind.WORKER:
        catalogue = {action.target: action for action in worker_actions_for(from_state)}

    options: list[ActionOption] = []
    for target in sorted(targets):
        action = catalogue.get(target)
        options.append(
            ActionOption(
                kind=entity_kind,
                from_state=from_state,
                target=target,
                label=label_for(entity_kind, from_state, target),
                confirm_message=confirm_message_for(entity_kind, from_state, target),
                severity=color_category(target),
                dangerous=action.dangerous if action is not None else target in _DANGEROUS_TARGETS,
                description=action.description if action is not None else None,
            )
        )
    return options


def waiting_message(kind: EntityKind | str, state: str) -> str | None:
    """Return a passive-state hint, or None when staff can act."""
    return WAITING_MESSAGES.get((coerce_entity_kind(kind), state))
