"""Shared fixtures for MCP handler tests.

Handlers read the data directory from server state, so each test points
the state at its own temporary data directory and restores it afterwards.
"""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest

from brandkit.core.config import BrandKitConfig
from brandkit.mcp.server.state import get_config, set_config


@pytest.fixture
def server_config(data_dir: Path) -> Iterator[BrandKitConfig]:
    """Configure the server state to serve the test data directory."""
    previous = get_config()
    config = BrandKitConfig(data_dir=data_dir)
    set_config(config)
    yield config
    set_config(previous)


@pytest.fixture
def empty_server_config(tmp_path: Path) -> Iterator[BrandKitConfig]:
    """Configure the server state with a data directory that does not exist."""
    previous = get_config()
    config = BrandKitConfig(data_dir=tmp_path / "missing")
    set_config(config)
    yield config
    set_config(previous)
