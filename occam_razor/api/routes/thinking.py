"""Thinking Routes — HTTP exposure of the occams_razor_thinking tool.

Invariants:
    - POST /step and POST /tools/{tool_name} bodies are the raw tool arguments object
    - Every engine outcome, ERROR included, is returned with HTTP 200
    - A tool name that is not registered is a 404 UNKNOWN_TOOL, never an in-band ERROR
    - Routes hold no state: the dispatcher is resolved per request via Depends

Design Decisions:
    - Body typed as dict, validated by the dispatcher: HTTP and stdio callers get the
      same in-band ERROR shape for invalid arguments
    - The tool name is checked before dispatch so a wrong URL is an HTTP error
"""

import logging
from typing import Any

from fastapi import APIRouter, Body, Depends

from occam_razor.core.domain_types import TOOL_NAME
from occam_razor.core.errors import UnknownToolError
from occam_razor.services.define_thinking_tools import TOOLS_THINKING
from occam_razor.services.tool_dispatch import ToolDispatch, get_tool_dispatch

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/thinking", tags=["thinking"])


@router.get("/tools")
async def list_tools():
    """Tool definitions for registration with a hosting tool-call protocol."""
    return {"tools": TOOLS_THINKING}


@router.post("/tools/{tool_name}")
async def call_tool(
    tool_name: str,
    arguments: dict[str, Any] = Body(...),
    dispatch: ToolDispatch = Depends(get_tool_dispatch),
):
    """Call a registered tool by name."""
    if tool_name not in dispatch.tool_names:
        raise UnknownToolError(tool_name)
    return dispatch.execute(tool_name, arguments)


@router.post("/step")
async def thinking_step(
    arguments: dict[str, Any] = Body(...),
    dispatch: ToolDispatch = Depends(get_tool_dispatch),
):
    """Decide the next step for one occams_razor_thinking call."""
    return dispatch.execute(TOOL_NAME, arguments)
