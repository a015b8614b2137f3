"""Tool Dispatch — explicit routing from tool_name to handler function.

Invariants:
    - Every tool->handler mapping is visible — no getattr magic, no auto-discovery
    - execute() never raises: unknown tools, invalid arguments and handler crashes
      all come back as in-band ERROR response dicts
    - Every call logged with tool name and resulting status

Design Decisions:
    - Explicit dict over getattr: every mapping visible in one place
    - Engine injected: the dispatcher owns no catalog and no state
    - Synchronous: the engine never blocks, async transports call it directly
"""

import logging
from functools import lru_cache
from typing import Any, Callable

from pydantic import ValidationError

from occam_razor.core.domain_types import TOOL_NAME
from occam_razor.core.errors import (
    ErrorContext,
    OccamError,
    ToolValidationError,
    UnknownToolError,
)
from occam_razor.core.prompt_catalog import build_prompt_catalog
from occam_razor.core.stage_transition import StageTransitionEngine
from occam_razor.schemas.thinking import ThinkingParams

logger = logging.getLogger(__name__)


class ToolDispatch:
    """Routes tool_name -> handler. Explicit registration, no auto-discovery."""

    def __init__(self, engine: StageTransitionEngine):
        self._engine = engine
        self._handlers: dict[str, Callable[[dict], dict]] = {
            TOOL_NAME: self.occams_razor_thinking,
        }

    @property
    def tool_names(self) -> list[str]:
        return list(self._handlers)

    def execute(self, tool_name: str, arguments: Any) -> dict:
        """Route tool_name to handler. Returns result dict. Logs every call."""
        try:
            handler = self._handlers.get(tool_name)
            if handler is None:
                raise UnknownToolError(str(tool_name))
            if not isinstance(arguments, dict):
                raise ToolValidationError(
                    f"Arguments for '{tool_name}' must be a JSON object.",
                    context=ErrorContext(tool_name=tool_name),
                )
            result = handler(arguments)
        except OccamError as e:
            logger.warning(
                f"Tool call rejected: {e.message}",
                extra={"tool_name": str(tool_name), "error_code": e.code},
            )
            return e.to_step_error()
        except Exception as e:
            logger.error(
                f"Error processing tool request '{tool_name}': {e}",
                exc_info=True,
                extra={"tool_name": str(tool_name)},
            )
            return {
                "status": "ERROR",
                "message": f"Error processing tool request: {str(e) or 'Unknown handler error.'}",
            }

        logger.info(
            f"Tool call '{tool_name}' -> {result.get('status')}",
            extra={
                "tool_name": tool_name,
                "status": result.get("status"),
                "thought_number": arguments.get("thought_number"),
                "thinking_stage": arguments.get("thinking_stage"),
            },
        )
        return result

    def occams_razor_thinking(self, arguments: dict) -> dict:
        try:
            params = ThinkingParams.model_validate(arguments)
        except ValidationError as e:
            raise ToolValidationError(
                f"Invalid parameters for {TOOL_NAME}.",
                errors=[
                    {
                        "field": ".".join(str(loc) for loc in err["loc"]),
                        "message": err["msg"],
                        "type": err["type"],
                    }
                    for err in e.errors()
                ],
                context=ErrorContext(
                    tool_name=TOOL_NAME,
                    thought_number=_maybe_int(arguments.get("thought_number")),
                ),
            ) from e
        return self._engine.decide(params.to_step_request()).to_dict()


def _maybe_int(value: Any) -> int | None:
    return value if isinstance(value, int) and not isinstance(value, bool) else None


@lru_cache
def get_tool_dispatch() -> ToolDispatch:
    """Process-wide dispatcher. The prompt catalog is built once here."""
    return ToolDispatch(StageTransitionEngine(build_prompt_catalog()))
