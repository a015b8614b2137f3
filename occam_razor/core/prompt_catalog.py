"""Prompt Catalog — immutable guidance texts keyed by target stage and transition kind.

Invariants:
    - The catalog is built once and never mutated (MappingProxyType view)
    - Guidance keys are composed deterministically from
      (next stage, refinement flag, loopback source)
    - lookup() never raises: unknown keys return None

Design Decisions:
    - Catalog passed into the engine, not imported as a singleton: tests can inject
      a reduced catalog to exercise the missing-key fallback
    - Loopback keys name their source stage ("<target>_loopback_from_<source>") so a
      new sanctioned loopback gets its own text without touching key composition
"""

from types import MappingProxyType
from typing import Mapping

from occam_razor.core.domain_types import Stage

REFINEMENT_SUFFIX = "_refinement"
LOOPBACK_INFIX = "_loopback_from_"


# ─── Guidance Texts ──────────────────────────────────────────────

_CONTEXT_ANALYSIS = (
    "Start by grounding yourself in the existing situation before proposing anything. "
    "Analyze the user's request together with the relevant project context: the files, "
    "modules, conventions, dependencies and constraints that the change will touch. "
    "Identify existing patterns, abstractions and components that could be reused. "
    "Note anything that is ambiguous or missing. Keep the analysis focused on what the "
    "request actually needs; do not design a solution yet."
)

_OUTCOME_DEFINITION = (
    "Now that you've analyzed the context, the next step is crucial for ensuring we build "
    "the right thing simply: Clearly define the desired outcome. Focus specifically on the "
    "*minimal viable* result required by the user's request *at this time*. Specify clear, "
    "measurable success criteria. If any part of the outcome remains ambiguous based on the "
    "request and context, explicitly list the questions needing user clarification. Ensure "
    "your definition is thorough before proceeding."
)

_SOLUTION_EXPLORATION = (
    "With a clear outcome defined, let's explore potential paths. Generate 2-3 distinct "
    "approaches to achieve this outcome. Start with the most direct and minimal approach "
    "possible. For others, consider different strategies but always evaluate if existing "
    "project patterns, abstractions, or components (identified during context analysis) can "
    "be effectively reused. Briefly outline the implementation strategy and key changes for "
    "each approach. Ensure your exploration covers a reasonable range of alternatives before "
    "proceeding."
)

_SIMPLICITY_EVALUATION = (
    "Now, critically evaluate the explored approaches using Occam's Razor principles. The "
    "goal is to find the *simplest* solution that is also *fully effective*. Compare the "
    "approaches based on: **Simplicity** (considering code directness, conceptual "
    "understandability, consistency with existing patterns, number/complexity of "
    "dependencies, estimated computational efficiency/directness, and the cost/benefit of "
    "reuse vs. new code) and **Effectiveness** (how robustly it meets the defined outcome, "
    "acknowledging any project constraints identified earlier). Justify your choice for the "
    "simplest *effective* approach by explaining why it strikes the best balance, and "
    "briefly explain why the other options were rejected (e.g., too complex, ineffective, "
    "poor fit). **Explicitly note any significant complexities you are consciously avoiding "
    "by selecting the recommended path.** If no approach offers a good balance, consider "
    "requesting a loop back to 'solution_exploration' with refined criteria. Ensure your "
    "evaluation is rigorous before proceeding."
)

_IMPLEMENTATION = (
    "The evaluation points to the simplest effective path. Now, proceed to implement this "
    "chosen solution. **Focus strictly on executing this plan.** Adhere only to the code, "
    "patterns, and logic necessary to achieve the defined outcome. Avoid introducing "
    "unrelated changes, premature abstractions, or unrequested features ('gold plating'). "
    "Prepare a concise summary of the implementation details upon completion. Ensure your "
    "implementation plan is clear before starting."
)

_IMPLEMENTATION_REFINEMENT = (
    "Review the code you've just implemented. Does it faithfully represent the simplest "
    "effective approach chosen earlier? **If any minor clarifications or constraints emerged "
    "during implementation, ensure the code adapts appropriately without introducing "
    "significant new complexity.** Could any part be further simplified while still fully "
    "meeting the outcome? If the implementation is complete, minimal, and effective, "
    "summarize the key changes made and set 'next_thought_needed' to false. If further "
    "refinement or adaptation is needed, describe the specific next implementation step "
    "required."
)

_SOLUTION_EXPLORATION_LOOPBACK = (
    "Your evaluation indicated previous options were not sufficiently simple or effective. "
    "**Using the specific feedback from your evaluation (the reasons for rejection and "
    "complexities noted),** let's explore again. Generate 1-2 *new* or significantly revised "
    "approaches. Focus specifically on overcoming those previously identified limitations "
    "(e.g., finding ways to reduce complexity, improve effectiveness, enable better reuse, "
    "or work within constraints). Remember to leverage existing project abstractions where "
    "beneficial."
)

_OUTCOME_DEFINITION_LOOPBACK = (
    "Implementation revealed a potential misunderstanding or issue with the defined outcome. "
    "**Based on the implementation challenges encountered (explain them in your thought),** "
    "let's revisit and refine the desired outcome. Clearly restate the outcome, incorporating "
    "necessary adjustments or clarifications. If user input is now needed, specify the "
    "questions."
)

_REPORTING_ISSUE = (
    "It seems the request cannot be completed as planned. Summarize the blocking issue "
    "clearly and concisely so it can be presented effectively to the user. Explain *why* "
    "the original request cannot be fulfilled as specified, referencing specific constraints "
    "or findings from your analysis if applicable. Set 'next_thought_needed' to false."
)


# ─── Key Composition ─────────────────────────────────────────────

def guidance_key(
    next_stage: Stage,
    is_refinement: bool = False,
    loopback_source: Stage | None = None,
) -> str:
    """Compose the catalog key for a transition into next_stage.

    An accepted loopback wins over refinement: IMPLEMENTATION -> IMPLEMENTATION is
    never a sanctioned loopback, so both flags cannot meaningfully be set together.
    """
    if loopback_source is not None:
        return f"{next_stage.value}{LOOPBACK_INFIX}{loopback_source.value}"
    if is_refinement:
        return f"{next_stage.value}{REFINEMENT_SUFFIX}"
    return next_stage.value


# ─── Catalog ─────────────────────────────────────────────────────

class PromptCatalog:
    """Read-only mapping from guidance key to instructional text."""

    def __init__(self, prompts: Mapping[str, str]):
        self._prompts = MappingProxyType(dict(prompts))

    def lookup(self, key: str) -> str | None:
        return self._prompts.get(key)

    def __contains__(self, key: object) -> bool:
        return key in self._prompts

    def __len__(self) -> int:
        return len(self._prompts)


def build_prompt_catalog() -> PromptCatalog:
    """Build the default catalog. Called once at startup."""
    return PromptCatalog({
        Stage.CONTEXT_ANALYSIS.value: _CONTEXT_ANALYSIS,
        Stage.OUTCOME_DEFINITION.value: _OUTCOME_DEFINITION,
        Stage.SOLUTION_EXPLORATION.value: _SOLUTION_EXPLORATION,
        Stage.SIMPLICITY_EVALUATION.value: _SIMPLICITY_EVALUATION,
        Stage.IMPLEMENTATION.value: _IMPLEMENTATION,
        Stage.REPORTING_ISSUE.value: _REPORTING_ISSUE,
        guidance_key(Stage.IMPLEMENTATION, is_refinement=True): _IMPLEMENTATION_REFINEMENT,
        guidance_key(
            Stage.SOLUTION_EXPLORATION, loopback_source=Stage.SIMPLICITY_EVALUATION,
        ): _SOLUTION_EXPLORATION_LOOPBACK,
        guidance_key(
            Stage.OUTCOME_DEFINITION, loopback_source=Stage.IMPLEMENTATION,
        ): _OUTCOME_DEFINITION_LOOPBACK,
    })
