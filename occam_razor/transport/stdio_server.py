"""Stdio Server — line-delimited JSON transport over stdin/stdout.

Invariants:
    - One JSON document per input line, at most one JSON document per output line
    - stdout carries protocol frames only; diagnostics go through logging (stderr)
    - Invalid JSON, blank lines and notifications produce no output
    - Bytes that are not valid UTF-8 are replaced (U+FFFD), never fatal to the loop
    - handle_line() never raises: every failure is logged or answered in-band
    - No per-connection state: each line is handled independently

Design Decisions:
    - Supports JSON-RPC 2.0 (initialize, tools/list, tools/call) plus the bare
      {"tool_name", "arguments"} frame older clients send
    - Synchronous read loop: the engine never blocks, so no event loop is needed
    - Signal handlers installed by the CLI, not here: the server stays usable from
      threads and tests
"""

import json
import logging
import signal
import sys
from typing import Any, Iterator, TextIO

from occam_razor.core.errors import ProtocolError
from occam_razor.services.tool_dispatch import ToolDispatch

logger = logging.getLogger(__name__)

JSONRPC_VERSION = "2.0"
DEFAULT_PROTOCOL_VERSION = "2024-11-05"

# JSON-RPC 2.0 error codes
METHOD_NOT_FOUND = -32601
INVALID_PARAMS = -32602


class StdioServer:
    """Reads requests from stdin, writes responses to stdout."""

    def __init__(
        self,
        dispatch: ToolDispatch,
        tools: list[dict],
        server_name: str,
        server_version: str,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
    ):
        self._dispatch = dispatch
        self._tools = tools
        self._server_info = {"name": server_name, "version": server_version}
        self._stdin = stdin if stdin is not None else sys.stdin
        self._stdout = stdout if stdout is not None else sys.stdout

    def serve(self) -> int:
        """Run until stdin closes. Returns the process exit code."""
        logger.info(f"{self._server_info['name']} ready. Listening on stdin...")
        for line in self._lines():
            response = self.handle_line(line)
            if response is not None:
                self._write(response)
        logger.info("stdin closed, stdio server stopping")
        return 0

    def _lines(self) -> Iterator[str]:
        # Byte-backed streams are decoded per line; bad bytes become U+FFFD.
        raw = getattr(self._stdin, "buffer", None)
        if raw is None:
            yield from self._stdin
            return
        for chunk in raw:
            yield chunk.decode("utf-8", errors="replace")

    def handle_line(self, line: str) -> dict | None:
        """Handle one input line. Returns the response frame, or None for no output."""
        if not line.strip():
            return None
        try:
            request = json.loads(line)
        except json.JSONDecodeError as e:
            logger.debug(f"Failed to parse incoming line as JSON: {e}. Line: {line[:100]}")
            return None
        if not isinstance(request, dict):
            logger.debug(f"Ignoring non-object frame: {line[:100]}")
            return None

        if "method" in request:
            return self._handle_jsonrpc(request)
        if "tool_name" in request:
            return self._handle_bare_tool_call(request)

        logger.debug(f"Ignoring message: {line[:100]}")
        return None

    # ─── JSON-RPC ────────────────────────────────────────────────

    def _handle_jsonrpc(self, request: dict) -> dict | None:
        method = request.get("method")
        if "id" not in request:
            logger.debug(f"Ignoring notification: {method}", extra={"method": method})
            return None
        request_id = request["id"]
        params = request.get("params") or {}

        if method == "initialize":
            return _result(request_id, self._initialize_result(params))
        if method == "tools/list":
            return _result(request_id, {"tools": self._tools})
        if method == "tools/call":
            try:
                return _result(request_id, self._call_tool(params))
            except ProtocolError as e:
                logger.warning(e.message, extra={"method": method, "error_code": e.code})
                return _error(request_id, INVALID_PARAMS, e.message)

        logger.debug(f"Unsupported method: {method}", extra={"method": method})
        return _error(request_id, METHOD_NOT_FOUND, f"Method not found: {method}")

    def _initialize_result(self, params: Any) -> dict:
        protocol_version = DEFAULT_PROTOCOL_VERSION
        if isinstance(params, dict) and isinstance(params.get("protocolVersion"), str):
            protocol_version = params["protocolVersion"]
        return {
            "protocolVersion": protocol_version,
            "serverInfo": self._server_info,
            "capabilities": {
                "tools": self._tools,
                "resources": [],
            },
        }

    def _call_tool(self, params: Any) -> dict:
        if not isinstance(params, dict) or not isinstance(params.get("name"), str):
            raise ProtocolError("tools/call requires params.name")
        response = self._dispatch.execute(params["name"], params.get("arguments") or {})
        return {
            "content": [{"type": "text", "text": json.dumps(response, ensure_ascii=False)}],
            "isError": response.get("status") == "ERROR",
        }

    # ─── Bare frame ──────────────────────────────────────────────

    def _handle_bare_tool_call(self, request: dict) -> dict | None:
        arguments = request.get("arguments")
        if not isinstance(arguments, dict):
            logger.debug(
                "Ignoring tool frame without an arguments object",
                extra={"tool_name": str(request.get("tool_name"))},
            )
            return None
        return self._dispatch.execute(request["tool_name"], arguments)

    def _write(self, frame: dict) -> None:
        self._stdout.write(json.dumps(frame, ensure_ascii=False) + "\n")
        self._stdout.flush()


def install_signal_handlers() -> None:
    """Exit cleanly (code 0) on SIGINT/SIGTERM. Main thread only."""

    def _exit(signum: int, _frame: object) -> None:
        logger.info(f"Received {signal.Signals(signum).name}. Exiting.")
        raise SystemExit(0)

    signal.signal(signal.SIGINT, _exit)
    signal.signal(signal.SIGTERM, _exit)


def _result(request_id: Any, result: dict) -> dict:
    return {"jsonrpc": JSONRPC_VERSION, "id": request_id, "result": result}


def _error(request_id: Any, code: int, message: str) -> dict:
    return {
        "jsonrpc": JSONRPC_VERSION,
        "id": request_id,
        "error": {"code": code, "message": message},
    }
