"""Command-line interface for the Occam's Razor thinking server.

Thin wrapper that configures logging and starts one of the transports.
"""

from __future__ import annotations

import json
from typing import Annotated

import typer

from occam_razor import __version__
from occam_razor.config import get_settings
from occam_razor.infrastructure.observability import setup_logging
from occam_razor.services.define_thinking_tools import TOOLS_THINKING
from occam_razor.services.tool_dispatch import get_tool_dispatch
from occam_razor.transport.stdio_server import StdioServer, install_signal_handlers

app = typer.Typer(
    add_completion=False,
    no_args_is_help=False,
    help="Occam's Razor thinking guide - stage-by-stage guidance for LLM agents",
)


@app.command(name="stdio")
def stdio() -> None:
    """Serve the occams_razor_thinking tool over stdin/stdout (one JSON per line).

    Examples:
        occam-razor
        occam-razor stdio
    """
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    install_signal_handlers()
    server = StdioServer(
        dispatch=get_tool_dispatch(),
        tools=TOOLS_THINKING,
        server_name=settings.server_name,
        server_version=settings.server_version,
    )
    raise typer.Exit(server.serve())


@app.command(name="http")
def http(
    host: Annotated[
        str | None,
        typer.Option("--host", help="Bind address (default: OCCAM_HTTP_HOST)"),
    ] = None,
    port: Annotated[
        int | None,
        typer.Option("--port", "-p", help="Bind port (default: OCCAM_HTTP_PORT)"),
    ] = None,
) -> None:
    """Serve the tool over HTTP with uvicorn."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "occam_razor.main:app",
        host=host if host is not None else settings.http_host,
        port=port if port is not None else settings.http_port,
        log_level=settings.log_level.lower(),
    )


@app.command(name="tools")
def tools() -> None:
    """Print the tool definitions as JSON."""
    typer.echo(json.dumps(TOOLS_THINKING, indent=2, ensure_ascii=False))


@app.callback(invoke_without_command=True)
def default_callback(
    ctx: typer.Context,
    version: Annotated[
        bool,
        typer.Option("--version", "-v", help="Show version"),
    ] = False,
) -> None:
    """Occam's Razor thinking guide.

    Without a subcommand, serves over stdio.
    """
    if version:
        typer.echo(f"occam-razor {__version__}")
        raise typer.Exit(0)

    if ctx.invoked_subcommand is None:
        stdio()


def main() -> None:
    """CLI entry point."""
    app()


if __name__ == "__main__":
    main()
