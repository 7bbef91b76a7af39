"""
Presentation metadata for states and transitions.

Resolves user-facing text (action labels, confirmation prompts, badge labels)
and a semantic severity for each state. Nothing here gates business logic:
every lookup degrades to generic text instead of raising. The only error is
UnknownEntityKind for an invalid kind tag.

Severities are semantic only. Mapping them to concrete styling is the job of
``marketplace_flow.core.config.presentation_config``.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from marketplace_flow.core.domain.types import (
    EntityKind,
    Severity,
    StatusBadge,
    TransitionDescriptor,
    coerce_entity_kind,
)

_UNKNOWN_LABEL: str = "Unknown"

# ---------------------------------------------------------------------------
# Transition labels and confirmation prompts
#
# Key: (kind, from_state, to_state)
# ---------------------------------------------------------------------------

_TransitionKey = tuple[EntityKind, str, str]

_K = EntityKind

TRANSITION_LABELS: Mapping[_TransitionKey, str] = MappingProxyType(
    {
        # order
        (_K.ORDER, "pending", "in_progress"): "Start Processing",
        (_K.ORDER, "pending", "cancelled"): "Cancel",
        (_K.ORDER, "in_progress", "waiting_user"): "Await User Response",
        (_K.ORDER, "in_progress", "completed"): "Mark Completed",
        (_K.ORDER, "in_progress", "cancelled"): "Cancel",
        (_K.ORDER, "waiting_user", "in_progress"): "Resume Processing",
        (_K.ORDER, "waiting_user", "completed"): "Mark Completed",
        (_K.ORDER, "waiting_user", "cancelled"): "Cancel",
        # rental
        (_K.RENTAL, "pending", "active"): "Activate",
        (_K.RENTAL, "pending", "cancelled"): "Cancel",
        (_K.RENTAL, "active", "expired"): "Expire",
        (_K.RENTAL, "active", "cancelled"): "Cancel",
        (_K.RENTAL, "expired", "renewed"): "Renew",
        # ticket
        (_K.TICKET, "open", "in_progress"): "Start Working",
        (_K.TICKET, "open", "waiting_user"): "Await User Response",
        (_K.TICKET, "open", "resolved"): "Resolve",
        (_K.TICKET, "open", "closed"): "Close",
        (_K.TICKET, "in_progress", "waiting_user"): "Await User Response",
        (_K.TICKET, "in_progress", "resolved"): "Resolve",
        (_K.TICKET, "in_progress", "closed"): "Close",
        (_K.TICKET, "waiting_user", "in_progress"): "Resume Working",
        (_K.TICKET, "waiting_user", "resolved"): "Resolve",
        (_K.TICKET, "waiting_user", "closed"): "Close",
        (_K.TICKET, "resolved", "closed"): "Close",
        # worker
        (_K.WORKER, "applied", "screening_unlocked"): "Unlock Screening",
        (_K.WORKER, "screening_unlocked", "training_viewed"): "Mark Training Viewed",
        (_K.WORKER, "screening_unlocked", "ready_to_work"): "Pass Screening",
        (_K.WORKER, "training_viewed", "ready_to_work"): "Pass Screening",
        (_K.WORKER, "test_submitted", "ready_to_work"): "Approve Worker",
        (_K.WORKER, "test_submitted", "screening_unlocked"): "Allow Retry",
        (_K.WORKER, "test_submitted", "failed"): "Reject Worker",
        (_K.WORKER, "failed", "screening_unlocked"): "Allow Retry",
        (_K.WORKER, "ready_to_work", "assigned"): "Assign Task",
        (_K.WORKER, "assigned", "working"): "Start Working",
        (_K.WORKER, "assigned", "ready_to_work"): "Unassign Project",
        (_K.WORKER, "working", "ready_to_work"): "Unassign",
        (_K.WORKER, "suspended", "ready_to_work"): "Reactivate Worker",
        (_K.WORKER, "suspended", "screening_unlocked"): "Reopen Screening",
        (_K.WORKER, "suspended", "applied"): "Reset Application",
        # project
        (_K.PROJECT, "draft", "active"): "Activate",
        (_K.PROJECT, "active", "assigned"): "Assign",
        (_K.PROJECT, "assigned", "in_progress"): "Start",
        (_K.PROJECT, "in_progress", "submitted"): "Submit",
        (_K.PROJECT, "submitted", "completed"): "Approve",
        (_K.PROJECT, "submitted", "in_progress"): "Request Changes",
        # wallet transaction
        (_K.WALLET_TRANSACTION, "initiated", "pending"): "Mark Pending",
        (_K.WALLET_TRANSACTION, "initiated", "paid_unverified"): "Mark Paid",
        (_K.WALLET_TRANSACTION, "initiated", "failed"): "Mark Failed",
        (_K.WALLET_TRANSACTION, "pending", "paid_unverified"): "Mark Paid",
        (_K.WALLET_TRANSACTION, "pending", "success"): "Approve",
        (_K.WALLET_TRANSACTION, "pending", "failed"): "Reject",
        (_K.WALLET_TRANSACTION, "paid_unverified", "success"): "Verify & Approve",
        (_K.WALLET_TRANSACTION, "paid_unverified", "failed"): "Reject",
    }
)

# Transitions into suspended share one label regardless of the source state.
_TARGET_LABELS: Mapping[tuple[EntityKind, str], str] = MappingProxyType(
    {
        (_K.WORKER, "suspended"): "Suspend Worker",
    }
)

CONFIRM_MESSAGES: Mapping[_TransitionKey, str] = MappingProxyType(
    {
        # order
        (_K.ORDER, "pending", "in_progress"): "Start processing this order?",
        (_K.ORDER, "pending", "cancelled"): "Cancel this order? This cannot be undone.",
        (_K.ORDER, "in_progress", "waiting_user"): "Pause this order until the customer responds?",
        (_K.ORDER, "in_progress", "completed"): "Mark this order as completed?",
        (_K.ORDER, "in_progress", "cancelled"): "Cancel this order? This cannot be undone.",
        (_K.ORDER, "waiting_user", "in_progress"): "Resume processing this order?",
        (_K.ORDER, "waiting_user", "completed"): "Mark this order as completed?",
        (_K.ORDER, "waiting_user", "cancelled"): "Cancel this order? This cannot be undone.",
        # rental
        (_K.RENTAL, "pending", "active"): "Activate this rental?",
        (_K.RENTAL, "pending", "cancelled"): "Are you sure you want to cancel this rental?",
        (_K.RENTAL, "active", "expired"): "Expire this rental now?",
        (_K.RENTAL, "active", "cancelled"): "Are you sure you want to cancel this rental?",
        (_K.RENTAL, "expired", "renewed"): "Renew this rental?",
        # ticket
        (_K.TICKET, "open", "resolved"): "Mark this ticket as resolved?",
        (_K.TICKET, "in_progress", "resolved"): "Mark this ticket as resolved?",
        (_K.TICKET, "waiting_user", "resolved"): "Mark this ticket as resolved?",
        (_K.TICKET, "open", "closed"): "Close this ticket? The customer can no longer reply.",
        (_K.TICKET, "in_progress", "closed"): "Close this ticket? The customer can no longer reply.",
        (_K.TICKET, "waiting_user", "closed"): "Close this ticket? The customer can no longer reply.",
        (_K.TICKET, "resolved", "closed"): "Close this ticket? The customer can no longer reply.",
        # worker
        (_K.WORKER, "applied", "screening_unlocked"): "Approve and unlock screening access?",
        (_K.WORKER, "test_submitted", "ready_to_work"): "Mark screening as passed and enable project assignment?",
        (_K.WORKER, "test_submitted", "screening_unlocked"): "Reset screening and allow another attempt?",
        (_K.WORKER, "test_submitted", "failed"): "Mark screening as failed?",
        (_K.WORKER, "failed", "screening_unlocked"): "Reset screening and allow another attempt?",
        (_K.WORKER, "ready_to_work", "assigned"): "Assign a project to this worker?",
        (_K.WORKER, "assigned", "working"): "Mark worker as actively working?",
        (_K.WORKER, "assigned", "ready_to_work"): "Remove the current project assignment?",
        (_K.WORKER, "working", "ready_to_work"): "Remove the current project assignment?",
        (_K.WORKER, "suspended", "ready_to_work"): "Restore worker access?",
        # project
        (_K.PROJECT, "draft", "active"): "Publish this project?",
        (_K.PROJECT, "in_progress", "submitted"): "Submit this project for review?",
        (_K.PROJECT, "submitted", "completed"): "Approve this submission and complete the project?",
        (_K.PROJECT, "submitted", "in_progress"): "Send this project back for changes?",
        # wallet transaction
        (_K.WALLET_TRANSACTION, "pending", "success"): "Approve this transaction?",
        (_K.WALLET_TRANSACTION, "paid_unverified", "success"): "Confirm payment was received and approve this transaction?",
        (_K.WALLET_TRANSACTION, "initiated", "failed"): "Reject this transaction?",
        (_K.WALLET_TRANSACTION, "pending", "failed"): "Reject this transaction?",
        (_K.WALLET_TRANSACTION, "paid_unverified", "failed"): "Reject this transaction?",
    }
)

_TARGET_CONFIRM_MESSAGES: Mapping[tuple[EntityKind, str], str] = MappingProxyType(
    {
        (_K.WORKER, "suspended"): "Suspend this worker and block their access?",
    }
)

# ---------------------------------------------------------------------------
# Badge labels and severities (kind-independent)
# ---------------------------------------------------------------------------

STATE_LABELS: Mapping[str, str] = MappingProxyType(
    {
        # orders / payments
        "pending": "Pending",
        "payment_pending": "Payment Pending",
        "payment_submitted": "Payment Submitted",
        "processing": "Processing",
        "in_progress": "In Progress",
        "waiting_user": "Waiting For You",
        "completed": "Completed",
        "cancelled": "Cancelled",
        "rejected": "Rejected",
        # rentals
        "active": "Active",
        "expired": "Expired",
        "renewed": "Renewed",
        # workers
        "fresh": "Fresh Applicant",
        "applied": "Applied",
        "screening_available": "Screening Available",
        "screening_unlocked": "Screening Unlocked",
        "training_viewed": "Training Viewed",
        "test_submitted": "Test Submitted",
        "ready_to_work": "Ready To Work",
        "assigned": "Assigned",
        "working": "Working",
        "suspended": "Suspended",
        "failed": "Failed",
        "inactive": "Inactive",
        "approved": "Approved",
        "under_review": "Under Review",
        # tickets
        "open": "Open",
        "resolved": "Resolved",
        "closed": "Closed",
        # projects
        "draft": "Draft",
        "submitted": "Submitted",
        # wallet
        "initiated": "Initiated",
        "paid_unverified": "Paid (Unverified)",
        "success": "Success",
    }
)

STATE_SEVERITIES: Mapping[str, Severity] = MappingProxyType(
    {
        "pending": Severity.WARNING,
        "payment_pending": Severity.WARNING,
        "payment_submitted": Severity.WARNING,
        "processing": Severity.INFO,
        "in_progress": Severity.INFO,
        "waiting_user": Severity.WARNING,
        "completed": Severity.SUCCESS,
        "cancelled": Severity.DANGER,
        "rejected": Severity.DANGER,
        "active": Severity.SUCCESS,
        "expired": Severity.NEUTRAL,
        "renewed": Severity.INFO,
        "fresh": Severity.NEUTRAL,
        "applied": Severity.INFO,
        "screening_available": Severity.WARNING,
        "screening_unlocked": Severity.INFO,
        "training_viewed": Severity.INFO,
        "test_submitted": Severity.WARNING,
        "ready_to_work": Severity.SUCCESS,
        "assigned": Severity.INFO,
        "working": Severity.SUCCESS,
        "suspended": Severity.DANGER,
        "failed": Severity.DANGER,
        "inactive": Severity.NEUTRAL,
        "approved": Severity.SUCCESS,
        "under_review": Severity.WARNING,
        "open": Severity.INFO,
        "resolved": Severity.SUCCESS,
        "closed": Severity.NEUTRAL,
        "draft": Severity.NEUTRAL,
        "submitted": Severity.WARNING,
        "initiated": Severity.NEUTRAL,
        "paid_unverified": Severity.WARNING,
        "success": Severity.SUCCESS,
    }
)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def humanize(value: str) -> str:
    """Convert an underscore-delimited identifier to space-delimited words."""
    return value.replace("_", " ").strip()


def normalize_state(state: str | None) -> str:
    """Normalize a backend state field for badge lookups."""
    if state is None:
        return ""
    return str(state).strip().lower()


# ---------------------------------------------------------------------------
# Transition text
# ---------------------------------------------------------------------------


def label_for(kind: EntityKind | str, from_state: str, to_state: str) -> str:
    """Return a short action label for from_state -> to_state.

    Falls back to ``"→ <target words>"`` for pairs without a curated label.
    """
    entity_kind = coerce_entity_kind(kind)
    label = TRANSITION_LABELS.get((entity_kind, from_state, to_state))
    if label is None:
        label = _TARGET_LABELS.get((entity_kind, to_state))
    if label is None:
        label = f"→ {humanize(to_state)}".rstrip()
    return label


def confirm_message_for(kind: EntityKind | str, from_state: str, to_state: str) -> str:
    """Return a generic confirmation prompt for from_state -> to_state.

    Amounts and identifiers are interpolated by the caller; this function has
    no access to entity data.
    """
    entity_kind = coerce_entity_kind(kind)
    message = CONFIRM_MESSAGES.get((entity_kind, from_state, to_state))
    if message is None:
        message = _TARGET_CONFIRM_MESSAGES.get((entity_kind, to_state))
    if message is None:
        target = humanize(to_state) or _UNKNOWN_LABEL.lower()
        message = f"Change {humanize(entity_kind.value)} status to {target}?"
    return message


def describe_transition(
    kind: EntityKind | str, from_state: str, to_state: str
) -> TransitionDescriptor:
    return TransitionDescriptor(
        label=label_for(kind, from_state, to_state),
        confirm_message=confirm_message_for(kind, from_state, to_state),
    )


# ---------------------------------------------------------------------------
# Badge text
# ---------------------------------------------------------------------------


def display_label(state: str | None) -> str:
    """Return the badge label for a bare state name."""
    normalized = normalize_state(state)
    if not normalized:
        return _UNKNOWN_LABEL
    label = STATE_LABELS.get(normalized)
    if label is not None:
        return label
    return humanize(normalized).title()


def color_category(state: str | None) -> Severity:
    """Return the semantic severity for a bare state name (neutral if unknown)."""
    return STATE_SEVERITIES.get(normalize_state(state), Severity.NEUTRAL)


def status_badge(state: str | None) -> StatusBadge:
    return StatusBadge(
        state=normalize_state(state),
        label=display_label(state),
        severity=color_category(state),
    )
