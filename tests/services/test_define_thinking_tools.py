"""Thinking tool schema tests — schema stays in sync with enums and the params model."""

from occam_razor.core.domain_types import LoopbackTarget, Stage
from occam_razor.schemas.thinking import ThinkingParams
from occam_razor.services.define_thinking_tools import THINKING_TOOL, TOOLS_THINKING


def _properties() -> dict:
    return THINKING_TOOL["inputSchema"]["properties"]


def test_tool_name():
    assert THINKING_TOOL["name"] == "occams_razor_thinking"
    assert TOOLS_THINKING == [THINKING_TOOL]


def test_stage_enum_matches_domain():
    assert _properties()["thinking_stage"]["enum"] == [s.value for s in Stage]


def test_loopback_enum_excludes_reporting_issue():
    values = _properties()["requested_stage_override"]["enum"]
    assert values == [t.value for t in LoopbackTarget]
    assert "reporting_issue" not in values


def test_properties_match_params_model():
    assert set(_properties()) == set(ThinkingParams.model_fields)


def test_required_fields():
    assert THINKING_TOOL["inputSchema"]["required"] == [
        "thought", "thought_number", "thinking_stage", "next_thought_needed",
    ]
