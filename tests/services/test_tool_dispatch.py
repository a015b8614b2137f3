"""Tool Dispatch — tests for explicit tool routing and in-band errors.

Tests cover:
    - occams_razor_thinking routes to the engine
    - Unknown tools return UNKNOWN_TOOL error
    - Invalid arguments return VALIDATION_ERROR with field details
    - Handler crashes never escape execute()
"""

from unittest.mock import MagicMock

from occam_razor.services.tool_dispatch import ToolDispatch, get_tool_dispatch


def _args(**overrides) -> dict:
    args = {
        "thought": "Analyzed the project context. It uses React and Tailwind.",
        "thought_number": 1,
        "thinking_stage": "context_analysis",
        "next_thought_needed": True,
        "user_request": "Add a login button to the header.",
    }
    args.update(overrides)
    return args


def test_dispatch_routes_thinking_tool(dispatch):
    result = dispatch.execute("occams_razor_thinking", _args())
    assert result["status"] == "NEXT_THOUGHT"
    assert result["next_stage"] == "outcome_definition"
    assert result["next_thought_number"] == 2


def test_dispatch_registers_thinking_tool(dispatch):
    assert dispatch.tool_names == ["occams_razor_thinking"]


def test_dispatch_returns_error_for_unknown_tool(dispatch):
    result = dispatch.execute("nonexistent_tool", {})
    assert result["status"] == "ERROR"
    assert result["details"]["error_code"] == "UNKNOWN_TOOL"
    assert "nonexistent_tool" in result["message"]


def test_dispatch_rejects_non_object_arguments(dispatch):
    result = dispatch.execute("occams_razor_thinking", ["not", "a", "dict"])
    assert result["status"] == "ERROR"
    assert result["details"]["error_code"] == "VALIDATION_ERROR"


def test_dispatch_reports_field_errors(dispatch):
    result = dispatch.execute("occams_razor_thinking", _args(thought_number=0))
    assert result["status"] == "ERROR"
    assert result["details"]["error_code"] == "VALIDATION_ERROR"
    fields = [e["field"] for e in result["details"]["errors"]]
    assert "thought_number" in fields


def test_dispatch_passes_engine_errors_through(dispatch):
    args = _args()
    del args["user_request"]
    result = dispatch.execute("occams_razor_thinking", args)
    assert result["status"] == "ERROR"
    assert "user_request" in result["message"]
    assert "details" not in result


def test_dispatch_clarification_round_trip(dispatch):
    result = dispatch.execute("occams_razor_thinking", _args(
        thought_number=2,
        thinking_stage="outcome_definition",
        needs_clarification=True,
        clarification_questions=["Desktop only?"],
    ))
    assert result == {
        "status": "CLARIFICATION_NEEDED",
        "action": "clarification_needed",
        "clarification_questions": ["Desktop only?"],
        "thought_number": 2,
    }


def test_dispatch_never_raises_on_engine_crash():
    engine = MagicMock()
    engine.decide.side_effect = RuntimeError("boom")
    result = ToolDispatch(engine).execute("occams_razor_thinking", _args())
    assert result["status"] == "ERROR"
    assert result["message"] == "Error processing tool request: boom"


def test_get_tool_dispatch_is_shared():
    assert get_tool_dispatch() is get_tool_dispatch()
