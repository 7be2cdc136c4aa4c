"""
Token CLI commands.

Render the bundled (or configured) token document from the command line,
using the same code paths as the MCP tools.
"""

import json
from pathlib import Path

import typer

from brandkit.core.colors import ColorParseFailure, match_color, match_result_payload
from brandkit.core.formatter import Category, TokenFormat, render_tokens
from brandkit.core.loader import load_token_document
from brandkit.core.stylesheet import generate_stylesheet

from .utils import resolve_config

DATA_DIR_OPTION = typer.Option(
    None,
    "--data-dir",
    help="Directory holding brand-tokens.json",
)
CONFIG_OPTION = typer.Option(
    None,
    "--config",
    help="Path to brandkit.toml (default: ./brandkit.toml if present)",
)


def tokens_command(
    format: TokenFormat = typer.Option(  # noqa: B008
        TokenFormat.CSS,
        "--format",
        "-f",
        help="Output format",
    ),
    category: Category | None = typer.Option(  # noqa: B008
        None,
        "--category",
        "-c",
        help="Only output one category",
    ),
    data_dir: Path = DATA_DIR_OPTION,
    config: Path = CONFIG_OPTION,
) -> None:
    """Print brand tokens as CSS, JSON or Tailwind config."""
    resolved = resolve_config(config, data_dir)
    document = load_token_document(resolved.data_dir)
    typer.echo(render_tokens(document, format=format, category=category))


def stylesheet_command(
    data_dir: Path = DATA_DIR_OPTION,
    config: Path = CONFIG_OPTION,
) -> None:
    """Print the complete brand stylesheet."""
    resolved = resolve_config(config, data_dir)
    document = load_token_document(resolved.data_dir)
    typer.echo(
        generate_stylesheet(
            document,
            brand_name=resolved.brand_name,
            font_family=resolved.font_family,
        )
    )


def check_color_command(
    value: str = typer.Argument(..., help="Hex, rgb()/rgba() or --token name"),
    data_dir: Path = DATA_DIR_OPTION,
    config: Path = CONFIG_OPTION,
) -> None:
    """Check whether a color is on-brand."""
    resolved = resolve_config(config, data_dir)
    result = match_color(load_token_document(resolved.data_dir), value)
    typer.echo(json.dumps(match_result_payload(result), indent=2))
    if isinstance(result, ColorParseFailure):
        raise typer.Exit(code=1)
