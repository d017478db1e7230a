"""Command-line interface for the MCP File Context Server."""

import os
import sys
from typing import Optional

import anyio
import typer
from mcp.server.fastmcp.utilities.logging import configure_logging
from typing_extensions import Annotated

from . import __version__
from .server import serve

app = typer.Typer(
    name="mcp-file-context",
    help="MCP File Context Server",
    add_completion=False,
)


@app.command()
def main(
    directory: Annotated[
        Optional[str],
        typer.Argument(
            help="Base directory to expose (defaults to current directory)",
            show_default=False,
        ),
    ] = None,
    debug: Annotated[
        bool,
        typer.Option(
            "--debug",
            "-d",
            help="Enable debug logging",
        ),
    ] = False,
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-v",
            help="Show version information",
        ),
    ] = False,
) -> None:
    """Run the MCP File Context Server over stdio.

    Every file under the base directory is exposed for reading. There is no
    path sandboxing: clients can read any path the process can.
    """
    if version:
        show_version()
        return

    configure_logging("DEBUG" if debug else "INFO")

    try:
        anyio.run(serve, directory or os.getcwd())
    except KeyboardInterrupt:
        print("\nShutting down...", file=sys.stderr)
        sys.exit(0)
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


def show_version() -> None:
    """Show version information."""
    print(f"MCP File Context Server v{__version__}")
    print("A Model Context Protocol server exposing files under a directory")


if __name__ == "__main__":
    app()
