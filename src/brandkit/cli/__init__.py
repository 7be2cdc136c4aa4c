"""
BrandKit CLI Package.

- tokens.py: token, stylesheet and color commands
- mcp.py: MCP server commands
- utils.py: Shared utilities
"""

import typer

from brandkit.cli.mcp import mcp_app
from brandkit.cli.tokens import check_color_command, stylesheet_command, tokens_command
from brandkit.cli.utils import get_version, version_callback

app = typer.Typer(
    help="BrandKit - brand tokens, stylesheet and assets over MCP",
    no_args_is_help=True,
)


@app.callback()
def main_callback(
    version: bool | None = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and environment information",
    ),
) -> None:
    """BrandKit CLI main callback for global options."""
    pass


app.command(name="tokens")(tokens_command)
app.command(name="stylesheet")(stylesheet_command)
app.command(name="check-color")(check_color_command)
app.add_typer(mcp_app, name="mcp")


def main() -> None:
    """Entry point for the brandkit console script."""
    app()


__all__ = [
    "app",
    "main",
    "mcp_app",
    "get_version",
    "version_callback",
]
