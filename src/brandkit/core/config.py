"""
BrandKit configuration.

Configuration is loaded from the ``[brandkit]`` table of brandkit.toml:

    [brandkit]
    data_dir = "./assets"
    brand_name = "Chubb"
    font_family = "Lato"
    server_name = "chubb-brand-kit"
    server_version = "1.0.0"

Every key is optional. ``BRANDKIT_DATA_DIR`` overrides ``data_dir``.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from .errors import ConfigError

CONFIG_FILE = "brandkit.toml"
DATA_DIR_ENV = "BRANDKIT_DATA_DIR"

# Assets bundled with the package
BUNDLED_DATA_DIR = Path(__file__).resolve().parent.parent / "data"


class BrandKitConfig(BaseModel):
    """Runtime configuration for the brand kit server and CLI."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    data_dir: Path = Field(default=BUNDLED_DATA_DIR)
    brand_name: str = "Chubb"
    font_family: str = "Lato"
    server_name: str = "chubb-brand-kit"
    server_version: str = "1.0.0"

    def with_data_dir(self, data_dir: Path) -> BrandKitConfig:
        """Return a copy pointing at another data directory."""
        return self.model_copy(update={"data_dir": data_dir.resolve()})


def load_config(config_path: Path | None = None) -> BrandKitConfig:
    """
    Load configuration from brandkit.toml and the environment.

    Args:
        config_path: Explicit config file. When omitted, brandkit.toml in the
            current directory is used if present.

    Returns:
        BrandKitConfig with defaults for anything not set

    Raises:
        ConfigError: If an explicit config file is missing, or any config
            file is not valid TOML or has unknown/invalid keys
    """
    if config_path is None:
        candidate = Path.cwd() / CONFIG_FILE
        path = candidate if candidate.exists() else None
    else:
        path = config_path
        if not path.exists():
            raise ConfigError("config file not found", path)

    values: dict[str, object] = {}
    if path is not None:
        try:
            with open(path, "rb") as f:
                data = tomllib.load(f)
        except (OSError, tomllib.TOMLDecodeError) as e:
            raise ConfigError(f"cannot read config: {e}", path) from e

        values = dict(data.get("brandkit", {}))
        if "data_dir" in values:
            data_dir = Path(str(values["data_dir"]))
            if not data_dir.is_absolute():
                data_dir = path.resolve().parent / data_dir
            values["data_dir"] = data_dir

    env_dir = os.environ.get(DATA_DIR_ENV)
    if env_dir:
        values["data_dir"] = Path(env_dir).resolve()

    try:
        return BrandKitConfig(**values)  # type: ignore[arg-type]
    except PydanticValidationError as e:
        raise ConfigError(f"invalid config: {e}", path) from e
