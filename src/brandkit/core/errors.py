"""
Error types for BrandKit asset loading and configuration.

None of these cross the public core or tool boundary: the loader folds
``AssetLoadError`` into an empty document, and MCP handlers turn anything
else into a JSON ``{"error": ...}`` payload.
"""

from __future__ import annotations

from pathlib import Path


class BrandKitError(Exception):
    """Base exception for all BrandKit errors."""

    def __init__(self, message: str, path: Path | None = None):
        self.message = message
        self.path = path
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with the offending path if available."""
        if self.path is not None:
            return f"{self.path}: {self.message}"
        return self.message


class AssetLoadError(BrandKitError):
    """
    Raised when a static asset cannot be read.

    Examples:
    - File missing from the data directory
    - File not readable or not UTF-8
    - JSON syntax error
    """

    pass


class ConfigError(BrandKitError):
    """
    Raised when brandkit.toml cannot be read or fails validation.
    """

    pass
