"""
BrandKit CLI Utilities.

Shared utility functions used across CLI modules.
"""

import platform
from pathlib import Path

import typer

from brandkit.core.config import BrandKitConfig, load_config
from brandkit.core.errors import ConfigError

__version__ = "0.1.0"


def get_version() -> str:
    """Get BrandKit version from package metadata."""
    try:
        from importlib.metadata import version

        return version("brandkit")
    except Exception:
        return __version__


def version_callback(value: bool) -> None:
    """Display version and environment information."""
    if value:
        typer.echo(f"BrandKit version {get_version()}")
        typer.echo("")
        typer.echo("Environment:")
        typer.echo(
            f"  Python:        {platform.python_implementation()} {platform.python_version()}"
        )
        typer.echo(f"  Platform:      {platform.system()} {platform.release()}")
        raise typer.Exit()


def resolve_config(config_path: Path | None, data_dir: Path | None) -> BrandKitConfig:
    """
    Load configuration for a CLI command, exiting with code 1 on error.

    Args:
        config_path: Optional explicit brandkit.toml
        data_dir: Optional data directory overriding the config file
    """
    try:
        config = load_config(config_path)
    except ConfigError as e:
        typer.echo(f"Configuration error: {e}", err=True)
        raise typer.Exit(code=1)
    if data_dir is not None:
        config = config.with_data_dir(data_dir)
    return config
