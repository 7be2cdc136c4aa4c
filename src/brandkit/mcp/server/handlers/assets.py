"""
Static asset tool handlers.

Handles icon search, logo lookup and layout snippets. Unknown keys get a
plain-text "not found" message rather than an error payload.
"""

from __future__ import annotations

import re
from typing import Any

from brandkit.core.loader import (
    ICONS_FILE,
    LAYOUTS_DIR,
    LOGOS_FILE,
    list_layouts,
    load_json,
    load_text,
)

from ..state import get_data_dir
from ..tools import LOGO_VARIANTS
from .common import handler_error_json, to_json

MAX_ICON_RESULTS = 20

_LAYOUT_NAME_RE = re.compile(r"^[a-z0-9-]+$")


def icon_usage(name: str) -> str:
    """Web component snippet for an icon."""
    return f'<ds-icon name="{name}" size="24px"></ds-icon>'


@handler_error_json
def get_icon_handler(args: dict[str, Any]) -> str:
    """Search the icon registry by case-insensitive name substring."""
    search = args.get("search") or ""
    registry = load_json(get_data_dir(), ICONS_FILE)
    icons = registry.get("icons", []) if isinstance(registry, dict) else []

    needle = search.lower()
    if needle:
        results = [icon for icon in icons if needle in str(icon.get("name", "")).lower()]
    else:
        results = list(icons)

    if not results:
        return f'No icons found matching "{search}". Try a broader term.'

    shown = [
        {
            "name": icon.get("name"),
            "variants": icon.get("variants"),
            "usage": icon_usage(icon.get("name")),
        }
        for icon in results[:MAX_ICON_RESULTS]
    ]
    return to_json(
        {
            "total": len(results),
            "showing": min(len(results), MAX_ICON_RESULTS),
            "icons": shown,
        }
    )


@handler_error_json
def get_logo_handler(args: dict[str, Any]) -> str:
    """Return one logo variant (SVG plus metadata)."""
    variant = args.get("variant") or "full"
    logos = load_json(get_data_dir(), LOGOS_FILE)
    logo = logos.get("logos", {}).get(variant) if isinstance(logos, dict) else None
    if not logo:
        return f'Unknown variant "{variant}". Available: {", ".join(LOGO_VARIANTS)}'
    return to_json(logo)


@handler_error_json
def get_layout_handler(args: dict[str, Any]) -> str:
    """Return a layout CSS snippet, or list the available ones."""
    name = args.get("name") or ""
    data_dir = get_data_dir()
    available = list_layouts(data_dir)

    if name and _LAYOUT_NAME_RE.match(name) and name in available:
        css = load_text(data_dir, f"{LAYOUTS_DIR}/{name}.css")
        if css:
            return css

    listing = {"available": available}
    if name:
        listing = {"error": f'Unknown layout "{name}".', **listing}
    return to_json(listing)
