"""Structured Logging — JSON formatter and setup for diagnostic output.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Extra fields (tool_name, thinking_stage, target_stage, ...) surfaced when present
    - Logs go to stderr: stdout is reserved for protocol frames in stdio mode
    - setup_logging is idempotent — re-calling replaces its own handler

Design Decisions:
    - JSONFormatter over third-party libs: zero dependencies, full control
    - setup_logging called once on startup (CLI entry or FastAPI lifespan)
"""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import TextIO

_EXTRA_KEYS = (
    "tool_name", "error_code", "status", "thinking_stage",
    "target_stage", "thought_number", "method", "path",
)

_HANDLER_NAME = "occam_razor"


class JSONFormatter(logging.Formatter):
    """Format logs as JSON for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in _EXTRA_KEYS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


def setup_logging(
    level: str = "INFO", fmt: str = "json", stream: TextIO | None = None,
) -> logging.Handler:
    """Configure root logging. Returns the installed handler."""
    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.set_name(_HANDLER_NAME)
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s — %(message)s",
        ))
    for existing in list(logging.root.handlers):
        if existing.get_name() == _HANDLER_NAME:
            logging.root.removeHandler(existing)
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
    return handler
