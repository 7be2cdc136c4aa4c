"""
BrandKit - brand asset distribution over the Model Context Protocol.

Serves design tokens, logos, icons and layout snippets, renders tokens as
CSS, JSON or Tailwind configuration, and checks colors against the brand
palette.
"""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _metadata_version

from .core import ir
from .core.errors import AssetLoadError, BrandKitError, ConfigError


def _get_version() -> str:
    """Get version from installed package metadata."""
    try:
        return _metadata_version("brandkit")
    except PackageNotFoundError:
        return "0.0.0"


__version__ = _get_version()

__all__ = [
    "__version__",
    "ir",
    "BrandKitError",
    "AssetLoadError",
    "ConfigError",
]
