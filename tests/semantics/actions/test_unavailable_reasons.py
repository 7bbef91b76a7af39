"""
Semantic test: reasons for disabled worker actions.

Invariant:
unavailable_reason explains only catalogue actions that are NOT offered
from a state. Offered actions and unknown action ids have no reason, and
every disabled action gets some non-empty text.
"""

from __future__ import annotations

from marketplace_flow.core.domain.actions import (
    UNAVAILABLE_REASONS,
    WORKER_ACTIONS,
    WORKER_ACTIONS_BY_ID,
    unavailable_actions,
    unavailable_reason,
    worker_actions_for,
)
from marketplace_flow.core.domain.transition_tables import all_states


def test_curated_reason() -> None:
    assert unavailable_reason("applied", "assign_project") == "Worker must pass screening first"
    assert unavailable_reason("suspended", "suspend") == "Already suspended"


def test_offered_action_has_no_reason() -> None:
    assert unavailable_reason("ready_to_work", "assign_project") is None
    assert unavailable_reason("applied", "suspend") is None


def test_unknown_action_id_has_no_reason() -> None:
    assert unavailable_reason("applied", "complete_project") is None


def test_generic_reason_names_the_state() -> None:
    assert unavailable_reason("working", "reactivate") == 'Not available in "Working" state'


def test_curated_reasons_never_cover_offered_actions() -> None:
    for state, reasons in UNAVAILABLE_REASONS.items():
        offered = {a.action_id for a in worker_actions_for(state)}
        for action_id in reasons:
            assert action_id in WORKER_ACTIONS_BY_ID
            assert action_id not in offered, (state, action_id)


def test_offered_and_disabled_partition_the_catalogue() -> None:
    for state in all_states("worker"):
        offered = {a.action_id for a in worker_actions_for(state)}
        disabled = {a.action_id for a, reason in unavailable_actions(state) if reason}
        assert offered | disabled == {a.action_id for a in WORKER_ACTIONS}
        assert not offered & disabled
