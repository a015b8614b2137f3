"""Boundary Errors — what a transport raises when a request cannot reach the engine.

Invariants:
    - The transition engine never raises these: its failures are in-band ERROR responses
    - Each error renders two ways: to_step_error() for the calling agent (stdio and
      /step), to_response() for HTTP routes that answer with a non-200 status
    - Messages name the offending tool or field, never internal state

Design Decisions:
    - http_status lives on the error: the HTTP handler maps exceptions to statuses
      without a lookup table
    - ErrorContext records which tool call failed and when, for the REST envelope
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any


class ErrorSeverity(str, Enum):
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    PROTOCOL = "protocol"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Which tool call failed, and when."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    tool_name: str | None = None
    thought_number: int | None = None


class OccamError(Exception):
    """A request rejected before it reached the transition engine."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
        details: Any = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status
        self.details = details

    def to_step_error(self) -> dict:
        """ERROR step for the calling agent, same shape as engine ERROR outcomes."""
        details: dict[str, Any] = {"error_code": self.code}
        if self.details is not None:
            details["errors"] = self.details
        return {"status": "ERROR", "message": self.message, "details": details}

    def to_response(self) -> dict:
        """Body for a non-200 HTTP answer."""
        body: dict[str, Any] = {
            "code": self.code,
            "message": self.message,
            "category": self.category.value,
            "severity": self.severity.value,
            "timestamp": self.context.timestamp.isoformat(),
            "tool_name": self.context.tool_name,
        }
        if self.context.thought_number is not None:
            body["thought_number"] = self.context.thought_number
        if self.details is not None:
            body["details"] = self.details
        return {"error": body}


# ─── Rejections ──────────────────────────────────────────────────

class ToolValidationError(OccamError):
    """Tool arguments failed boundary validation."""
    def __init__(
        self, message: str, errors: list[dict] | None = None,
        context: ErrorContext | None = None,
    ):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400, details=errors,
        )
        self.errors = errors or []


class UnknownToolError(OccamError):
    """Requested tool is not registered."""
    def __init__(self, tool_name: str, context: ErrorContext | None = None):
        super().__init__(
            f"Tool '{tool_name}' does not exist.",
            "UNKNOWN_TOOL", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, context or ErrorContext(tool_name=tool_name), 404,
        )
        self.tool_name = tool_name


class ProtocolError(OccamError):
    """Transport frame is well-formed JSON but not a usable request."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "PROTOCOL_ERROR", ErrorCategory.PROTOCOL,
            ErrorSeverity.WARNING, context, 400,
        )
