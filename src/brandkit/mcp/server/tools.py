"""
MCP Server tool definitions.

This module contains the tool schema definitions for the MCP server.
"""

from __future__ import annotations

from mcp.types import Tool

from brandkit.core.formatter import Category, TokenFormat

LOGO_VARIANTS: tuple[str, ...] = ("full", "compact", "powered-by")


def get_token_tools() -> list[Tool]:
    """Get tools that render the token document."""
    return [
        Tool(
            name="get_brand_stylesheet",
            description=(
                "Get a complete, drop-in CSS stylesheet with brand tokens (colors, typography, "
                "spacing, font imports). Ready to paste into any project."
            ),
            inputSchema={"type": "object", "properties": {}, "required": []},
        ),
        Tool(
            name="get_brand_tokens",
            description=(
                "Get brand tokens in CSS, JSON, or Tailwind format. "
                "Optionally filter by category (colors, typography, spacing)."
            ),
            inputSchema={
                "type": "object",
                "properties": {
                    "format": {
                        "type": "string",
                        "enum": [f.value for f in TokenFormat],
                        "description": "Output format (default: css)",
                    },
                    "category": {
                        "type": "string",
                        "enum": [c.value for c in Category],
                        "description": "Only return tokens of this category",
                    },
                },
                "required": [],
            },
        ),
        Tool(
            name="validate_brand_colors",
            description=(
                "Check if a color value is on-brand. Accepts hex (#000ECC), rgb(0,14,204), "
                "or token name (--color-primary-blue). Returns whether it matches and "
                "suggests the closest brand color if not."
            ),
            inputSchema={
                "type": "object",
                "properties": {
                    "value": {
                        "type": "string",
                        "description": "Color to check: hex, rgb()/rgba() or --token name",
                    }
                },
                "required": ["value"],
            },
        ),
    ]


def get_asset_tools() -> list[Tool]:
    """Get tools that serve static brand assets."""
    return [
        Tool(
            name="get_icon",
            description=(
                "Search for icons by name. Returns matching icon names and their available "
                'variants (size, style). Use with <ds-icon name="iconName"> web component.'
            ),
            inputSchema={
                "type": "object",
                "properties": {
                    "search": {
                        "type": "string",
                        "description": "Case-insensitive substring of the icon name",
                    }
                },
                "required": [],
            },
        ),
        Tool(
            name="get_logo",
            description=(
                'Get the brand logo SVG. Available variants: "full", "compact", "powered-by". '
                "SVGs use currentColor for theme adaptation."
            ),
            inputSchema={
                "type": "object",
                "properties": {
                    "variant": {
                        "type": "string",
                        "enum": list(LOGO_VARIANTS),
                        "description": "Logo variant (default: full)",
                    }
                },
                "required": [],
            },
        ),
        Tool(
            name="get_layout",
            description=(
                "Get a layout CSS snippet by name. Call without a name to list available layouts."
            ),
            inputSchema={
                "type": "object",
                "properties": {
                    "name": {
                        "type": "string",
                        "description": "Layout name, e.g. page-grid",
                    }
                },
                "required": [],
            },
        ),
    ]


def get_all_tools() -> list[Tool]:
    """Get all available tools."""
    tools = []
    tools.extend(get_token_tools())
    tools.extend(get_asset_tools())
    return tools
