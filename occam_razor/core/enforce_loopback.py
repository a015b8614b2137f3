"""Loopback Enforcement — validates caller-requested jumps back to an earlier stage.

Invariants:
    - check_loopback is PURE: returns a denial reason on violation, None on success
    - Justification must be >= MIN_JUSTIFICATION_LENGTH chars after stripping
    - Only pairs in ALLOWED_LOOPBACKS pass; forward jumps and self-loops are denied

Design Decisions:
    - Reason string over bare bool: the engine logs why, the caller never sees it
    - Justification checked before the allow-list: a short thought is always the
      first thing to fix, whatever the requested pair
"""

import logging

from occam_razor.core.domain_types import (
    ALLOWED_LOOPBACKS,
    MIN_JUSTIFICATION_LENGTH,
    LoopbackTarget,
    Stage,
)

logger = logging.getLogger(__name__)


def check_loopback(
    current_stage: Stage,
    requested_stage: LoopbackTarget,
    justification: str | None,
) -> str | None:
    """Return why the loopback is denied, or None when it is allowed."""
    if not justification or len(justification.strip()) < MIN_JUSTIFICATION_LENGTH:
        return "Justification missing or too short."

    if (current_stage, requested_stage) not in ALLOWED_LOOPBACKS:
        return (
            f"Transition from {current_stage.value} to "
            f"{requested_stage.value} not standard."
        )

    return None


def is_loopback_allowed(
    current_stage: Stage,
    requested_stage: LoopbackTarget,
    justification: str | None,
) -> bool:
    """Predicate form of check_loopback. Logs the decision."""
    reason = check_loopback(current_stage, requested_stage, justification)
    extra = {
        "thinking_stage": current_stage.value,
        "target_stage": requested_stage.value,
    }
    if reason is None:
        logger.info(
            f"Loopback accepted: from {current_stage.value} to {requested_stage.value}",
            extra=extra,
        )
        return True

    logger.info(f"Loopback denied: {reason}", extra=extra)
    return False
