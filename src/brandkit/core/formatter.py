"""
Token formatter: reshape a TokenDocument into CSS, JSON or Tailwind output.

All CSS and JSON output derives from a single ordered sequence of
``(css variable, value)`` pairs produced by :func:`format_entries`. The
Tailwind shape is built directly from the document because it is keyed by
short names rather than CSS variables.
"""

from __future__ import annotations

import json
import logging
from enum import StrEnum
from typing import Any

from .ir.tokens import COLOR_GROUPS, TokenDocument

logger = logging.getLogger(__name__)

TAILWIND_PREAMBLE = "// tailwind.config.js\nmodule.exports = "


class Category(StrEnum):
    """Token categories accepted as a filter."""

    COLORS = "colors"
    TYPOGRAPHY = "typography"
    SPACING = "spacing"


class TokenFormat(StrEnum):
    """Output formats for get_brand_tokens."""

    CSS = "css"
    JSON = "json"
    TAILWIND = "tailwind"


def line_height_token(key: str) -> str:
    """CSS variable name for the line height of a type-scale step."""
    return f"--font-line-height-{key}"


def stringify_number(value: Any) -> str:
    """Render a numeric token value the way it reads in the source JSON."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def parse_category(category: str | Category | None) -> Category | None:
    """Coerce a category string, treating unknown values as no filter."""
    if category is None or isinstance(category, Category):
        return category
    try:
        return Category(category)
    except ValueError:
        logger.debug("Ignoring unknown token category %r", category)
        return None


def _includes(category: Category | None, section: Category) -> bool:
    return category is None or category == section


# =============================================================================
# Entry extraction
# =============================================================================


def color_entries(document: TokenDocument) -> list[tuple[str, str]]:
    """Color pairs, group by group in fixed order."""
    entries: list[tuple[str, str]] = []
    for group in COLOR_GROUPS:
        for color in document.color_group(group).values():
            entries.append((f"{color.css_token}", stringify_number(color.value)))
    return entries


def typography_entries(document: TokenDocument) -> list[tuple[str, str]]:
    """Typography pairs: families, then type scale, then weights."""
    typo = document.typography
    entries: list[tuple[str, str]] = []
    for family in typo.font_families.values():
        entries.append((f"{family.css_token}", f"{family.name}, {family.fallback}"))
    for key, step in typo.type_scale.items():
        entries.append((f"{step.token}", stringify_number(step.size)))
        entries.append((line_height_token(key), stringify_number(step.line_height)))
    for weight in typo.font_weights.values():
        entries.append((f"{weight.css_token}", stringify_number(weight.value)))
    return entries


def spacing_entries(document: TokenDocument) -> list[tuple[str, str]]:
    """Spacing pairs in document order."""
    return [
        (f"{step.css_token}", stringify_number(step.value)) for step in document.spacing.values()
    ]


def format_entries(
    document: TokenDocument, category: str | Category | None = None
) -> list[tuple[str, str]]:
    """
    Flatten the document into ordered ``(css variable, value)`` pairs.

    Args:
        document: Token document to flatten
        category: Restrict to one category; ``None`` concatenates colors,
            typography and spacing in that order

    Returns:
        List of pairs in traversal order. Duplicated variable names are kept.
    """
    selected = parse_category(category)
    entries: list[tuple[str, str]] = []
    if _includes(selected, Category.COLORS):
        entries.extend(color_entries(document))
    if _includes(selected, Category.TYPOGRAPHY):
        entries.extend(typography_entries(document))
    if _includes(selected, Category.SPACING):
        entries.extend(spacing_entries(document))
    return entries


# =============================================================================
# Renderers
# =============================================================================


def tokens_to_css(document: TokenDocument, category: str | Category | None = None) -> str:
    """Render a ``:root`` block with one declaration per line."""
    lines = [":root {"]
    for token, value in format_entries(document, category):
        lines.append(f"  {token}: {value};")
    lines.append("}")
    return "\n".join(lines)


def tokens_to_json(
    document: TokenDocument, category: str | Category | None = None
) -> dict[str, str]:
    """Fold the pairs into a flat mapping; later duplicates win."""
    result: dict[str, str] = {}
    for token, value in format_entries(document, category):
        result[token] = value
    return result


def tokens_to_tailwind(
    document: TokenDocument, category: str | Category | None = None
) -> dict[str, Any]:
    """
    Build a Tailwind ``theme.extend`` configuration object.

    Colors are keyed ``<group>-<key>`` for every group, neutral included.
    Font families are expanded into ``[name, *fallbacks]``.
    """
    selected = parse_category(category)
    extend: dict[str, Any] = {}

    if _includes(selected, Category.COLORS):
        colors: dict[str, Any] = {}
        for group in COLOR_GROUPS:
            for key, color in document.color_group(group).items():
                colors[f"{group}-{key}"] = color.value
        extend["colors"] = colors

    if _includes(selected, Category.TYPOGRAPHY):
        typo = document.typography
        extend["fontSize"] = {
            key: [step.size, step.line_height] for key, step in typo.type_scale.items()
        }
        font_family: dict[str, list[Any]] = {}
        for key, family in typo.font_families.items():
            fallbacks = family.fallback.split(", ") if family.fallback is not None else []
            font_family[key] = [family.name, *fallbacks]
        extend["fontFamily"] = font_family

    if _includes(selected, Category.SPACING):
        extend["spacing"] = {key: step.value for key, step in document.spacing.items()}

    return {"theme": {"extend": extend}}


def render_tokens(
    document: TokenDocument,
    format: str | TokenFormat = TokenFormat.CSS,
    category: str | Category | None = None,
) -> str:
    """
    Render tokens as text for the get_brand_tokens tool.

    Unrecognized formats fall back to CSS.
    """
    if format == TokenFormat.JSON:
        return json.dumps(tokens_to_json(document, category), indent=2, ensure_ascii=False)
    if format == TokenFormat.TAILWIND:
        config = tokens_to_tailwind(document, category)
        return TAILWIND_PREAMBLE + json.dumps(config, indent=2, ensure_ascii=False)
    if format != TokenFormat.CSS:
        logger.debug("Unknown token format %r, rendering CSS", format)
    return tokens_to_css(document, category)
