"""Thinking Schemas — Pydantic model for occams_razor_thinking tool arguments.

Invariants:
    - thought: non-empty string
    - thought_number: strictly positive integer
    - thinking_stage / requested_stage_override: validated against the core enums
    - Cross-field rules (user_request on first thought, questions with
      needs_clarification) are NOT checked here: the engine owns them and reports
      them in-band

Design Decisions:
    - extra="ignore": hosting protocols may add bookkeeping keys to arguments
    - Strict int/bool: "1" or 1.0 for thought_number is a caller bug, not a coercion
"""

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictInt

from occam_razor.core.domain_types import LoopbackTarget, Stage
from occam_razor.core.step_types import StepRequest


class ThinkingParams(BaseModel):
    """Arguments of one occams_razor_thinking call."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    thought: str = Field(min_length=1)
    thought_number: StrictInt = Field(gt=0)
    thinking_stage: Stage
    next_thought_needed: StrictBool
    user_request: str | None = None
    needs_clarification: StrictBool | None = None
    clarification_questions: list[str] | None = None
    user_clarification: str | None = None
    requested_stage_override: LoopbackTarget | None = None
    issue_description: str | None = None

    def to_step_request(self) -> StepRequest:
        questions = self.clarification_questions
        return StepRequest(
            thought=self.thought,
            thought_number=self.thought_number,
            thinking_stage=self.thinking_stage,
            next_thought_needed=self.next_thought_needed,
            user_request=self.user_request,
            needs_clarification=self.needs_clarification,
            clarification_questions=tuple(questions) if questions is not None else None,
            user_clarification=self.user_clarification,
            requested_stage_override=self.requested_stage_override,
            issue_description=self.issue_description,
        )
