"""Thinking params validation — boundary checks for tool arguments.

Invariants:
    - Required fields and enum values rejected at the boundary
    - Cross-field rules pass through to the engine untouched
"""

import pytest
from pydantic import ValidationError

from occam_razor.core.domain_types import LoopbackTarget, Stage
from occam_razor.schemas.thinking import ThinkingParams


def _args(**overrides) -> dict:
    args = {
        "thought": "Looked at the header component.",
        "thought_number": 1,
        "thinking_stage": "context_analysis",
        "next_thought_needed": True,
        "user_request": "Add a login button",
    }
    args.update(overrides)
    return args


def test_valid_arguments_parse_to_enums():
    params = ThinkingParams.model_validate(_args(requested_stage_override="outcome_definition"))
    assert params.thinking_stage is Stage.CONTEXT_ANALYSIS
    assert params.requested_stage_override is LoopbackTarget.OUTCOME_DEFINITION


def test_empty_thought_rejected():
    with pytest.raises(ValidationError):
        ThinkingParams.model_validate(_args(thought=""))


@pytest.mark.parametrize("number", [0, -3, "2", 1.5, True])
def test_thought_number_must_be_positive_int(number):
    with pytest.raises(ValidationError):
        ThinkingParams.model_validate(_args(thought_number=number))


def test_unknown_stage_rejected():
    with pytest.raises(ValidationError):
        ThinkingParams.model_validate(_args(thinking_stage="daydreaming"))


def test_reporting_issue_is_not_a_loopback_target():
    with pytest.raises(ValidationError):
        ThinkingParams.model_validate(_args(requested_stage_override="reporting_issue"))


def test_missing_required_field_rejected():
    args = _args()
    del args["next_thought_needed"]
    with pytest.raises(ValidationError):
        ThinkingParams.model_validate(args)


def test_missing_user_request_is_left_to_the_engine():
    args = _args()
    del args["user_request"]
    assert ThinkingParams.model_validate(args).user_request is None


def test_extra_keys_ignored():
    params = ThinkingParams.model_validate(_args(session_hint="abc"))
    assert not hasattr(params, "session_hint")


def test_to_step_request_converts_questions_to_tuple():
    params = ThinkingParams.model_validate(_args(
        needs_clarification=True, clarification_questions=["Which page?", "Colour?"],
    ))
    request = params.to_step_request()
    assert request.clarification_questions == ("Which page?", "Colour?")
    assert request.needs_clarification is True
    assert request.thinking_stage is Stage.CONTEXT_ANALYSIS
