"""Schema conformance tests for the UI-facing Pydantic models.

UI consumers receive transition descriptors, status badges and action
options as JSON. These tests check that everything the resolver produces
validates against the published JSON Schemas, and that Pydantic is at least
as strict as the schemas for hand-written payloads.
"""

# pylint: disable=line-too-long,missing-function-docstring
# pylint: disable=redefined-outer-name,global-statement
from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest
from jsonschema import ValidationError as JsonSchemaValidationError
from jsonschema import validate as jsonschema_validate
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError
from referencing import Registry, Resource
from referencing.jsonschema import DRAFT202012

from marketplace_flow.core.domain.actions import available_actions
from marketplace_flow.core.domain.presentation import describe_transition, status_badge
from marketplace_flow.core.domain.transition_tables import all_states
from marketplace_flow.core.domain.types import (
    ENTITY_KINDS,
    ActionOption,
    StatusBadge,
    TransitionDescriptor,
)

SCHEMA_REGISTRY = Registry()

SCHEMA_DIR = Path(__file__).parent.parent.parent.parent / "marketplace_flow" / "core" / "schemas"


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def load_schema(name: str) -> dict:
    """
    Load a JSON schema from the package schema directory and register it.
    """
    global SCHEMA_REGISTRY

    with (SCHEMA_DIR / name).open("r", encoding="utf-8") as f:
        schema = json.load(f)

    schema_id = schema.get("$id")
    if isinstance(schema_id, str) and schema_id:
        resource = Resource.from_contents(schema, default_specification=DRAFT202012)
        SCHEMA_REGISTRY = SCHEMA_REGISTRY.with_resource(schema_id, resource)

    return schema


def dump_for_jsonschema(model: BaseModel) -> dict:
    return model.model_dump(mode="json", exclude_none=True)


def assert_schema_ok(model: BaseModel, schema: dict[str, Any]) -> None:
    jsonschema_validate(instance=dump_for_jsonschema(model), schema=schema, registry=SCHEMA_REGISTRY)


def assert_schema_invalid_but_pydantic_rejects(model_type: type[BaseModel], data: dict[str, Any], schema: dict[str, Any]) -> None:
    """
    If the schema rejects, Pydantic must reject too (otherwise the model is too lax).
    """
    with pytest.raises(JsonSchemaValidationError):
        jsonschema_validate(instance=data, schema=schema, registry=SCHEMA_REGISTRY)

    with pytest.raises(PydanticValidationError):
        model_type.model_validate(data)


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture(scope="module", autouse=True)
def _load_common_schema() -> None:
    load_schema("common.schema.json")


@pytest.fixture(scope="module")
def descriptor_schema() -> dict:
    return load_schema("transition_descriptor.schema.json")


@pytest.fixture(scope="module")
def badge_schema() -> dict:
    return load_schema("status_badge.schema.json")


@pytest.fixture(scope="module")
def action_schema() -> dict:
    return load_schema("action_option.schema.json")


# ---------------------------------------------------------------------------
# Produced models conform
# ---------------------------------------------------------------------------

def test_descriptors_conform(descriptor_schema: dict) -> None:
    for kind in ENTITY_KINDS:
        states = sorted(all_states(kind)) + ["unknown_state"]
        for s in states:
            for t in states:
                assert_schema_ok(describe_transition(kind, s, t), descriptor_schema)


def test_badges_conform(badge_schema: dict) -> None:
    for raw in ["completed", "failed", "totally_unknown_state", "", None]:
        assert_schema_ok(status_badge(raw), badge_schema)


def test_action_options_conform(action_schema: dict) -> None:
    for kind in ENTITY_KINDS:
        for state in all_states(kind):
            for option in available_actions(kind, state):
                assert_schema_ok(option, action_schema)


# ---------------------------------------------------------------------------
# Pydantic is at least as strict as the schemas
# ---------------------------------------------------------------------------

def test_descriptor_rejects_empty_label(descriptor_schema: dict) -> None:
    assert_schema_invalid_but_pydantic_rejects(TransitionDescriptor, {"label": "", "confirm_message": "Sure?"}, descriptor_schema)


def test_descriptor_rejects_extra_fields(descriptor_schema: dict) -> None:
    assert_schema_invalid_but_pydantic_rejects(
        TransitionDescriptor,
        {"label": "Approve", "confirm_message": "Sure?", "color": "green"},
        descriptor_schema,
    )


def test_badge_rejects_unknown_severity(badge_schema: dict) -> None:
    assert_schema_invalid_but_pydantic_rejects(StatusBadge, {"state": "x", "label": "X", "severity": "critical"}, badge_schema)


def test_action_rejects_unknown_kind(action_schema: dict) -> None:
    assert_schema_invalid_but_pydantic_rejects(
        ActionOption,
        {
            "kind": "invoice",
            "from_state": "pending",
            "target": "paid",
            "label": "Pay",
            "confirm_message": "Pay?",
            "severity": "info",
        },
        action_schema,
    )


def test_action_option_round_trips_through_json() -> None:
    option = available_actions("project", "submitted")[0]
    assert ActionOption.model_validate_json(option.model_dump_json()) == option


def test_action_rejects_empty_description(action_schema: dict) -> None:
    assert_schema_invalid_but_pydantic_rejects(
        ActionOption,
        {
            "kind": "worker",
            "from_state": "applied",
            "target": "suspended",
            "label": "Suspend Worker",
            "confirm_message": "Suspend?",
            "severity": "danger",
            "description": "",
        },
        action_schema,
    )
