"""
Token tool handlers.

Handles get_brand_stylesheet, get_brand_tokens and validate_brand_colors.
"""

from __future__ import annotations

from typing import Any

from brandkit.core.colors import match_color, match_result_payload
from brandkit.core.formatter import TokenFormat, render_tokens
from brandkit.core.stylesheet import generate_stylesheet

from ..state import get_config
from .common import handler_error_json, load_document, to_json


@handler_error_json
def get_brand_stylesheet_handler(args: dict[str, Any]) -> str:
    """Render the full brand stylesheet."""
    config = get_config()
    return generate_stylesheet(
        load_document(),
        brand_name=config.brand_name,
        font_family=config.font_family,
    )


@handler_error_json
def get_brand_tokens_handler(args: dict[str, Any]) -> str:
    """Render tokens as css, json or tailwind, optionally filtered by category."""
    fmt = args.get("format") or TokenFormat.CSS
    category = args.get("category") or None
    return render_tokens(load_document(), format=fmt, category=category)


@handler_error_json
def validate_brand_colors_handler(args: dict[str, Any]) -> str:
    """Check a color value against the brand palette."""
    value = args.get("value")
    if not isinstance(value, str):
        return to_json({"error": "value is required (hex, rgb() or --token name)"})
    result = match_color(load_document(), value)
    return to_json(match_result_payload(result))
