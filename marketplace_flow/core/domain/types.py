"""Core shared data models.

This module defines the entity kind and severity vocabularies, and the
Pydantic models handed to UI consumers (transition descriptors, status badges
and action options). These types are treated as schema definitions; the
matching JSON Schemas live in ``marketplace_flow/core/schemas``.
"""

# pylint: disable=missing-class-docstring
from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from marketplace_flow.core.domain.errors import UnknownEntityKind

# ---------------------------------------------------------------------------
# Vocabularies
# ---------------------------------------------------------------------------


class EntityKind(str, Enum):
    """Tag selecting which state machine applies."""

    ORDER = "order"
    RENTAL = "rental"
    TICKET = "ticket"
    WORKER = "worker"
    PROJECT = "project"
    WALLET_TRANSACTION = "wallet_transaction"


class Severity(str, Enum):
    """Semantic visual category for state badges and action buttons."""

    NEUTRAL = "neutral"
    INFO = "info"
    WARNING = "warning"
    SUCCESS = "success"
    DANGER = "danger"


ENTITY_KINDS: tuple[EntityKind, ...] = tuple(EntityKind)
SEVERITIES: tuple[Severity, ...] = tuple(Severity)


def coerce_entity_kind(kind: EntityKind | str) -> EntityKind:
    """Return ``kind`` as an EntityKind or raise UnknownEntityKind."""
    if isinstance(kind, EntityKind):
        return kind
    try:
        return EntityKind(kind)
    except ValueError:
        raise UnknownEntityKind(kind) from None


# ---------------------------------------------------------------------------
# UI-facing models
# ---------------------------------------------------------------------------


class TransitionDescriptor(BaseModel):
    label: str = Field(..., min_length=1)
    confirm_message: str = Field(..., min_length=1)

    model_config = ConfigDict(extra="forbid", frozen=True)


class StatusBadge(BaseModel):
    state: str
    label: str = Field(..., min_length=1)
    severity: Severity

    model_config = ConfigDict(extra="forbid", frozen=True)


class ActionOption(BaseModel):
    """
    One action a UI surface may offer for an entity in its current state.

    Notes:
    - target is always a legal next state at the time the option was built.
    - dangerous marks actions that deserve an extra warning in the dialog.
    - description is the tooltip / dialog body for catalogue actions, else None.
    """

    kind: EntityKind
    from_state: str
    target: str = Field(..., min_length=1)
    label: str = Field(..., min_length=1)
    confirm_message: str = Field(..., min_length=1)
    severity: Severity
    dangerous: bool = False
    description: str | None = Field(default=None, min_length=1)

    model_config = ConfigDict(extra="forbid", frozen=True)
