"""Public API for the marketplace_flow package.

Only symbols imported here are considered part of the stable,
supported external interface.
"""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

# ----------------------------------------------------------------------
# Config API
# ----------------------------------------------------------------------
from marketplace_flow.core.config.presentation_config import BadgeStyle, PresentationConfig

# ----------------------------------------------------------------------
# UI action offering
# ----------------------------------------------------------------------
from marketplace_flow.core.domain.actions import (
    WORKER_PIPELINE_COLUMNS,
    available_actions,
    unavailable_actions,
    unavailable_reason,
    waiting_message,
    worker_actions_for,
)
from marketplace_flow.core.domain.errors import UnknownEntityKind

# ----------------------------------------------------------------------
# Status observation
# ----------------------------------------------------------------------
from marketplace_flow.core.domain.observer import StatusObserver

# ----------------------------------------------------------------------
# Presentation resolver
# ----------------------------------------------------------------------
from marketplace_flow.core.domain.presentation import (
    color_category,
    confirm_message_for,
    describe_transition,
    display_label,
    humanize,
    label_for,
    status_badge,
)

# ----------------------------------------------------------------------
# Registry and validator
# ----------------------------------------------------------------------
from marketplace_flow.core.domain.transition_tables import (
    all_states,
    is_known_state,
    is_terminal_state,
    terminal_states,
    transitions_for,
)
from marketplace_flow.core.domain.transition_validator import can_transition, next_states

# ----------------------------------------------------------------------
# Domain types
# ----------------------------------------------------------------------
from marketplace_flow.core.domain.types import (
    ENTITY_KINDS,
    ActionOption,
    EntityKind,
    Severity,
    StatusBadge,
    TransitionDescriptor,
)

# ----------------------------------------------------------------------
# Public API definition
# ----------------------------------------------------------------------

__all__ = [
    # Registry
    "transitions_for",
    "all_states",
    "terminal_states",
    "is_terminal_state",
    "is_known_state",

    # Validator
    "can_transition",
    "next_states",

    # Presentation
    "label_for",
    "confirm_message_for",
    "describe_transition",
    "display_label",
    "color_category",
    "status_badge",
    "humanize",

    # Actions
    "available_actions",
    "worker_actions_for",
    "unavailable_reason",
    "unavailable_actions",
    "waiting_message",
    "WORKER_PIPELINE_COLUMNS",

    # Observation
    "StatusObserver",

    # Config
    "PresentationConfig",
    "BadgeStyle",

    # Types
    "EntityKind",
    "ENTITY_KINDS",
    "Severity",
    "TransitionDescriptor",
    "StatusBadge",
    "ActionOption",
    "UnknownEntityKind",

    # Version
    "__version__",
]

# ----------------------------------------------------------------------
# Package version
# ----------------------------------------------------------------------

try:
    __version__ = version("marketplace-flow")
except PackageNotFoundError:
    __version__ = "0.0.0"
