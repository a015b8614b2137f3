"""Step Types — per-call request and response values for the transition engine.

Invariants:
    - Every value is frozen: constructed per call, discarded after the response
    - to_dict() emits the wire shape (status + action tag, snake_case fields)
    - ErrorStep carries no thought_number (errors may precede a valid sequence number)

Design Decisions:
    - Dataclasses over Pydantic in core: no validation framework inside the pure layer,
      validation happens once at the boundary (schemas/thinking.py)
    - Tuples for question lists: immutability without copying on read
"""

from dataclasses import dataclass
from typing import Any, Union

from occam_razor.core.domain_types import LoopbackTarget, Stage, StepStatus


@dataclass(frozen=True)
class StepRequest:
    """One call's worth of caller-supplied context."""
    thought: str
    thought_number: int
    thinking_stage: Stage
    next_thought_needed: bool
    user_request: str | None = None
    needs_clarification: bool | None = None
    clarification_questions: tuple[str, ...] | None = None
    user_clarification: str | None = None
    requested_stage_override: LoopbackTarget | None = None
    issue_description: str | None = None


@dataclass(frozen=True)
class NextThoughtStep:
    next_stage: Stage
    prompt: str
    thought_number: int
    next_thought_number: int

    status = StepStatus.NEXT_THOUGHT

    def to_dict(self) -> dict:
        return {
            "status": self.status.value,
            "action": "next_thought",
            "next_stage": self.next_stage.value,
            "prompt": self.prompt,
            "thought_number": self.thought_number,
            "next_thought_number": self.next_thought_number,
        }


@dataclass(frozen=True)
class ClarificationNeededStep:
    clarification_questions: tuple[str, ...]
    thought_number: int

    status = StepStatus.CLARIFICATION_NEEDED

    def to_dict(self) -> dict:
        return {
            "status": self.status.value,
            "action": "clarification_needed",
            "clarification_questions": list(self.clarification_questions),
            "thought_number": self.thought_number,
        }


@dataclass(frozen=True)
class CompletedStep:
    final_thought: str
    thought_number: int

    status = StepStatus.COMPLETED

    def to_dict(self) -> dict:
        return {
            "status": self.status.value,
            "action": "completed",
            "final_thought": self.final_thought,
            "thought_number": self.thought_number,
        }


@dataclass(frozen=True)
class BlockedStep:
    issue_description: str
    final_thought: str
    thought_number: int

    status = StepStatus.BLOCKED

    def to_dict(self) -> dict:
        return {
            "status": self.status.value,
            "action": "blocked",
            "issue_description": self.issue_description,
            "final_thought": self.final_thought,
            "thought_number": self.thought_number,
        }


@dataclass(frozen=True)
class ErrorStep:
    message: str
    details: Any = None

    status = StepStatus.ERROR

    def to_dict(self) -> dict:
        result: dict = {"status": self.status.value, "message": self.message}
        if self.details is not None:
            result["details"] = self.details
        return result


StepResponse = Union[
    NextThoughtStep,
    ClarificationNeededStep,
    CompletedStep,
    BlockedStep,
    ErrorStep,
]
