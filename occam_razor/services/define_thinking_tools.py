"""Define Thinking Tools — tool schema for the occams_razor_thinking tool.

Invariants:
    - Schema follows the MCP tool format (name, description, inputSchema)
    - Stage enums derived from core.domain_types: one source of truth
    - Required fields mirror ThinkingParams required fields
    - Cross-field requirements live in descriptions, enforced by the engine

Design Decisions:
    - Hand-written schema over model_json_schema(): descriptions are prompts for the
      calling model and are tuned by hand
"""

from occam_razor.core.domain_types import TOOL_NAME, LoopbackTarget, Stage

THINKING_TOOL = {
    "name": TOOL_NAME,
    "description": (
        "Guides systematic problem-solving for coding tasks using Occam's Razor. "
        "Breaks down problems into sequential steps (Context, Outcome, Explore, "
        "Evaluate, Implement) prioritizing simplicity. Call this tool sequentially, "
        "providing your 'thought' (reasoning/output) for the current step."
    ),
    "inputSchema": {
        "type": "object",
        "properties": {
            "thought": {
                "type": "string",
                "description": "Detailed thinking/analysis for the current stage.",
            },
            "thought_number": {
                "type": "integer",
                "minimum": 1,
                "description": "Sequential number of the thought (starts at 1).",
            },
            "thinking_stage": {
                "type": "string",
                "enum": [s.value for s in Stage],
                "description": "The current stage.",
            },
            "next_thought_needed": {
                "type": "boolean",
                "description": "`true` to continue, `false` to terminate.",
            },
            "user_request": {
                "type": "string",
                "description": "The original user request (required on first call).",
            },
            "needs_clarification": {
                "type": "boolean",
                "description": "Set to `true` if user input is needed.",
            },
            "clarification_questions": {
                "type": "array",
                "items": {"type": "string"},
                "description": "Questions for the user if `needs_clarification` is true.",
            },
            "user_clarification": {
                "type": "string",
                "description": "User's response to previous clarification request.",
            },
            "requested_stage_override": {
                "type": "string",
                "enum": [t.value for t in LoopbackTarget],
                "description": (
                    "Target stage for loopback. Justification MUST be in 'thought'."
                ),
            },
            "issue_description": {
                "type": "string",
                "description": "Summary if task is blocked/infeasible.",
            },
        },
        "required": [
            "thought", "thought_number", "thinking_stage", "next_thought_needed",
        ],
    },
}

TOOLS_THINKING = [THINKING_TOOL]
