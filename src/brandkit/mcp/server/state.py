"""
MCP Server state management.

Holds the configuration the server was started with. Set once at start-up;
handlers only read it.
"""

from __future__ import annotations

import logging
from pathlib import Path

from brandkit.core.config import BrandKitConfig

logger = logging.getLogger("brandkit.mcp")

# ============================================================================
# Server State
# ============================================================================

_config: BrandKitConfig = BrandKitConfig()


def set_config(config: BrandKitConfig) -> None:
    """Set the configuration used by all handlers."""
    global _config
    _config = config
    logger.debug(f"Configuration set: data_dir={config.data_dir}")


def get_config() -> BrandKitConfig:
    """Get the active configuration."""
    return _config


def get_data_dir() -> Path:
    """Get the directory assets are read from."""
    return _config.data_dir
