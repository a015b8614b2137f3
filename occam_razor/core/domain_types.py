"""Domain Types — closed stage vocabulary and transition tables for the thinking process.

Invariants:
    - Stage is the single source of truth for stage names on the wire
    - LoopbackTarget is Stage minus REPORTING_ISSUE (a loopback never targets the terminal)
    - SEQUENTIAL_NEXT covers every Stage except REPORTING_ISSUE
    - ALLOWED_LOOPBACKS lists only backward transitions, never forward or self-loops

Design Decisions:
    - str Enums: serialize to JSON without custom encoders (tool results are JSON)
    - Tables as frozen module constants: read-only data, not mutable global state
"""

from enum import Enum
from types import MappingProxyType


# ─── Enums ───────────────────────────────────────────────────────

class Stage(str, Enum):
    """Stages of the Occam's Razor process, listed in default order."""
    CONTEXT_ANALYSIS = "context_analysis"
    OUTCOME_DEFINITION = "outcome_definition"
    SOLUTION_EXPLORATION = "solution_exploration"
    SIMPLICITY_EVALUATION = "simplicity_evaluation"
    IMPLEMENTATION = "implementation"
    REPORTING_ISSUE = "reporting_issue"


class LoopbackTarget(str, Enum):
    """Stages a caller may request to loop back to."""
    CONTEXT_ANALYSIS = "context_analysis"
    OUTCOME_DEFINITION = "outcome_definition"
    SOLUTION_EXPLORATION = "solution_exploration"
    SIMPLICITY_EVALUATION = "simplicity_evaluation"
    IMPLEMENTATION = "implementation"

    def as_stage(self) -> Stage:
        return Stage(self.value)


class StepStatus(str, Enum):
    """Response tags — one per outcome of a single decide() call."""
    NEXT_THOUGHT = "NEXT_THOUGHT"
    CLARIFICATION_NEEDED = "CLARIFICATION_NEEDED"
    COMPLETED = "COMPLETED"
    BLOCKED = "BLOCKED"
    ERROR = "ERROR"


# ─── Transition Tables ───────────────────────────────────────────

# IMPLEMENTATION self-loops while next_thought_needed is true.
SEQUENTIAL_NEXT: MappingProxyType = MappingProxyType({
    Stage.CONTEXT_ANALYSIS: Stage.OUTCOME_DEFINITION,
    Stage.OUTCOME_DEFINITION: Stage.SOLUTION_EXPLORATION,
    Stage.SOLUTION_EXPLORATION: Stage.SIMPLICITY_EVALUATION,
    Stage.SIMPLICITY_EVALUATION: Stage.IMPLEMENTATION,
    Stage.IMPLEMENTATION: Stage.IMPLEMENTATION,
})

ALLOWED_LOOPBACKS: frozenset[tuple[Stage, LoopbackTarget]] = frozenset({
    (Stage.SIMPLICITY_EVALUATION, LoopbackTarget.SOLUTION_EXPLORATION),
    (Stage.IMPLEMENTATION, LoopbackTarget.OUTCOME_DEFINITION),
    (Stage.IMPLEMENTATION, LoopbackTarget.SIMPLICITY_EVALUATION),
})

MIN_JUSTIFICATION_LENGTH = 10

TOOL_NAME = "occams_razor_thinking"
