"""Stage Transition Engine — decides the next step of the Occam's Razor process.

Invariants:
    - decide() is PURE with respect to its result: same request, same response
    - Rules are evaluated in fixed order, first match wins:
        bootstrap -> termination -> clarification -> loopback -> sequential -> guidance
    - Precondition failures become ErrorStep responses, never exceptions
    - A denied loopback falls back to sequential advance; the denial is only logged
    - No state survives a call: every continuity fact is re-supplied by the caller

Design Decisions:
    - Catalog injected through the constructor (no ambient singleton)
    - Loopback fallback kept silent for wire compatibility with existing callers
    - Missing guidance yields a placeholder string: one absent text must not fail the call
"""

import logging

from occam_razor.core.domain_types import SEQUENTIAL_NEXT, LoopbackTarget, Stage
from occam_razor.core.enforce_loopback import is_loopback_allowed
from occam_razor.core.prompt_catalog import PromptCatalog, guidance_key
from occam_razor.core.step_types import (
    BlockedStep,
    ClarificationNeededStep,
    CompletedStep,
    ErrorStep,
    NextThoughtStep,
    StepRequest,
    StepResponse,
)

logger = logging.getLogger(__name__)


class StageTransitionEngine:
    """Maps one StepRequest to exactly one StepResponse."""

    def __init__(self, catalog: PromptCatalog):
        self._catalog = catalog

    def decide(self, request: StepRequest) -> StepResponse:
        # --- 1. Bootstrap ----------------------------------------------------
        if request.thought_number == 1 and not request.user_request:
            return ErrorStep(
                "Missing required parameter 'user_request' for the first thought "
                "(thought_number: 1).",
            )

        stage = _coerce_stage(request.thinking_stage)
        if stage is None:
            logger.warning(
                f"Unknown thinking stage: {request.thinking_stage}",
                extra={"thought_number": request.thought_number},
            )
            return ErrorStep(f"Unknown thinking stage: {request.thinking_stage}")

        # --- 2. Termination --------------------------------------------------
        if not request.next_thought_needed:
            return _terminate(request, stage)

        # --- 3. Clarification ------------------------------------------------
        if request.needs_clarification:
            if not request.clarification_questions:
                return ErrorStep(
                    "'needs_clarification' is true, but 'clarification_questions' "
                    "is missing or empty.",
                )
            return ClarificationNeededStep(
                clarification_questions=tuple(request.clarification_questions),
                thought_number=request.thought_number,
            )

        # --- 4. Loopback -----------------------------------------------------
        next_stage: Stage | None = None
        loopback_source: Stage | None = None
        if request.requested_stage_override is not None:
            target = _coerce_target(request.requested_stage_override)
            if target is None:
                return ErrorStep(
                    f"Unknown loopback target: {request.requested_stage_override}",
                )
            if is_loopback_allowed(stage, target, request.thought):
                next_stage = target.as_stage()
                loopback_source = stage

        # --- 5. Sequential advance -------------------------------------------
        if next_stage is None:
            if stage == Stage.REPORTING_ISSUE:
                return ErrorStep(
                    "Invalid state: Reached REPORTING_ISSUE stage while "
                    "next_thought_needed is true.",
                )
            next_stage = SEQUENTIAL_NEXT[stage]

        # --- 6. Guidance -----------------------------------------------------
        is_refinement = (
            loopback_source is None
            and stage == Stage.IMPLEMENTATION
            and next_stage == Stage.IMPLEMENTATION
        )
        prompt = self._select_guidance(next_stage, is_refinement, loopback_source)
        if request.user_clarification:
            prompt = _acknowledge_clarification(request.user_clarification) + prompt

        # --- 7. Respond ------------------------------------------------------
        return NextThoughtStep(
            next_stage=next_stage,
            prompt=prompt,
            thought_number=request.thought_number,
            next_thought_number=request.thought_number + 1,
        )

    def _select_guidance(
        self,
        next_stage: Stage,
        is_refinement: bool,
        loopback_source: Stage | None,
    ) -> str:
        """Resolve guidance text. Loopbacks without dedicated text use the plain stage text."""
        key = guidance_key(next_stage, is_refinement, loopback_source)
        prompt = self._catalog.lookup(key)
        if prompt is None and loopback_source is not None:
            key = guidance_key(next_stage)
            prompt = self._catalog.lookup(key)
        if prompt is None:
            logger.warning(
                f"No prompt defined for stage key: {key}",
                extra={"target_stage": next_stage.value},
            )
            return f"Error: No prompt defined for stage key: {key}"
        return prompt


# ─── Helpers ─────────────────────────────────────────────────────

def _terminate(request: StepRequest, stage: Stage) -> StepResponse:
    if stage == Stage.REPORTING_ISSUE and request.issue_description:
        return BlockedStep(
            issue_description=request.issue_description,
            final_thought=request.thought,
            thought_number=request.thought_number,
        )
    if stage == Stage.IMPLEMENTATION:
        return CompletedStep(
            final_thought=request.thought,
            thought_number=request.thought_number,
        )
    return ErrorStep(
        "Invalid termination state. 'next_thought_needed' is false, but stage is "
        f"'{stage.value}' and no issue description provided for reporting_issue stage.",
    )


def _acknowledge_clarification(answer: str) -> str:
    escaped = answer.replace("'", "\\'")
    return (
        f"Received user clarification: '{escaped}'. Please incorporate this into "
        "your thinking for the following step.\n\n"
    )


def _coerce_stage(value: object) -> Stage | None:
    try:
        return Stage(value)
    except ValueError:
        return None


def _coerce_target(value: object) -> LoopbackTarget | None:
    try:
        return LoopbackTarget(value)
    except ValueError:
        return None
