"""
Resource definitions for the BrandKit MCP server.

Resources are read-only views of the brand assets that clients can attach
as context without calling a tool.
"""

import json
from typing import Any

from brandkit.core.config import BrandKitConfig
from brandkit.core.formatter import render_tokens
from brandkit.core.loader import ICONS_FILE, LOGOS_FILE, load_json, load_token_document
from brandkit.core.stylesheet import generate_stylesheet


def create_resources() -> list[dict[str, Any]]:
    """
    Create available resources for the MCP server.

    Returns:
        List of resource definitions with URI, name, and description
    """
    return [
        {
            "uri": "brandkit://stylesheet",
            "name": "Brand Stylesheet",
            "description": "Complete drop-in stylesheet with font import and body defaults",
            "mimeType": "text/css",
        },
        {
            "uri": "brandkit://tokens/css",
            "name": "Brand Tokens (CSS)",
            "description": "All tokens as CSS custom properties",
            "mimeType": "text/css",
        },
        {
            "uri": "brandkit://tokens/json",
            "name": "Brand Tokens (JSON)",
            "description": "All tokens as a flat CSS-variable to value map",
            "mimeType": "application/json",
        },
        {
            "uri": "brandkit://tokens/tailwind",
            "name": "Brand Tokens (Tailwind)",
            "description": "Tailwind theme.extend configuration",
            "mimeType": "text/javascript",
        },
        {
            "uri": "brandkit://logos",
            "name": "Brand Logos",
            "description": "All logo variants with SVG markup",
            "mimeType": "application/json",
        },
        {
            "uri": "brandkit://icons",
            "name": "Icon Registry",
            "description": "Every icon name with its variants",
            "mimeType": "application/json",
        },
    ]


def read_resource_text(uri: str, config: BrandKitConfig) -> str | None:
    """
    Read a resource by URI.

    Returns:
        Resource text, or None for an unknown URI
    """
    data_dir = config.data_dir

    if uri == "brandkit://stylesheet":
        return generate_stylesheet(
            load_token_document(data_dir),
            brand_name=config.brand_name,
            font_family=config.font_family,
        )
    if uri.startswith("brandkit://tokens/"):
        fmt = uri.removeprefix("brandkit://tokens/")
        if fmt not in ("css", "json", "tailwind"):
            return None
        return render_tokens(load_token_document(data_dir), format=fmt)
    if uri == "brandkit://logos":
        return json.dumps(load_json(data_dir, LOGOS_FILE), indent=2, ensure_ascii=False)
    if uri == "brandkit://icons":
        return json.dumps(load_json(data_dir, ICONS_FILE), indent=2, ensure_ascii=False)
    return None
