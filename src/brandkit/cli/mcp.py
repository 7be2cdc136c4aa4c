"""
MCP (Model Context Protocol) CLI commands.

Commands for running and inspecting the BrandKit MCP server.
"""

import asyncio
from pathlib import Path

import typer

from .utils import resolve_config

mcp_app = typer.Typer(
    help="MCP (Model Context Protocol) server commands.",
    no_args_is_help=True,
)


@mcp_app.command("run")
def mcp_run(
    data_dir: Path = typer.Option(  # noqa: B008
        None,
        "--data-dir",
        help="Directory holding brand-tokens.json and other assets",
    ),
    config: Path = typer.Option(  # noqa: B008
        None,
        "--config",
        help="Path to brandkit.toml (default: ./brandkit.toml if present)",
    ),
) -> None:
    """
    Run the BrandKit MCP server.

    Starts the MCP server on stdio so MCP clients can fetch brand tokens,
    stylesheets, logos and icons.
    """
    from brandkit.mcp.server import run_server

    resolved = resolve_config(config, data_dir)

    try:
        asyncio.run(run_server(resolved))
    except KeyboardInterrupt:
        typer.echo("\nMCP server stopped.", err=True)
    except Exception as e:
        typer.echo(f"Error running MCP server: {e}", err=True)
        raise typer.Exit(code=1)


@mcp_app.command("tools")
def mcp_tools() -> None:
    """List the tools the MCP server exposes."""
    from brandkit.mcp.server.tools import get_all_tools

    for tool in get_all_tools():
        typer.echo(f"{tool.name}: {tool.description}")
