"""
Brand color matching.

Decides whether a free-form color expression is on-brand. Accepts hex
(``#rgb``/``#rrggbb``), ``rgb()``/``rgba()`` and CSS token names
(``--color-...``). Off-brand colors get the nearest brand color by
Euclidean distance in RGB space.

The result is one of four models (see :data:`MatchResult`); callers branch
on the model type and serialize with :func:`match_result_payload`.
"""

from __future__ import annotations

import math
import re
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from .ir.tokens import COLOR_GROUPS, TokenDocument, TokenValue

_HEX6_RE = re.compile(r"^[0-9a-f]{6}$")
_HEX3_RE = re.compile(r"^[0-9a-f]{3}$")
_RGB_RE = re.compile(r"rgba?\(\s*(\d+)\s*,\s*(\d+)\s*,\s*(\d+)", re.IGNORECASE)


# =============================================================================
# Normalization
# =============================================================================


def normalize_hex(value: str) -> str | None:
    """
    Normalize a color expression to lowercase ``#rrggbb``.

    Args:
        value: Hex (with or without ``#``, 3 or 6 digits) or rgb()/rgba()

    Returns:
        Normalized hex string, or None if the input is not a color
    """
    hx = value.strip().lower()
    if hx.startswith("#"):
        hx = hx[1:]
    if _HEX6_RE.match(hx):
        return f"#{hx}"
    if _HEX3_RE.match(hx):
        return "#" + "".join(c * 2 for c in hx)

    rgb_match = _RGB_RE.search(value)
    if rgb_match:
        channels = [int(c) for c in rgb_match.groups()]
        if any(c > 255 for c in channels):
            return None
        return "#" + "".join(f"{c:02x}" for c in channels)

    return None


def hex_to_rgb(hx: str) -> tuple[int, int, int]:
    """Split a normalized ``#rrggbb`` string into channels."""
    return (int(hx[1:3], 16), int(hx[3:5], 16), int(hx[5:7], 16))


def hex_distance(hex1: str, hex2: str) -> float:
    """Euclidean distance between two normalized hex colors."""
    r1, g1, b1 = hex_to_rgb(hex1)
    r2, g2, b2 = hex_to_rgb(hex2)
    return math.sqrt((r1 - r2) ** 2 + (g1 - g2) ** 2 + (b1 - b2) ** 2)


def round_half_up(value: float) -> int:
    """Round to the nearest integer, with halves rounding up."""
    return math.floor(value + 0.5)


# =============================================================================
# Brand palette
# =============================================================================


class BrandColor(BaseModel):
    """A brand color flattened out of the token document."""

    model_config = ConfigDict(frozen=True)

    token: str | None
    value: TokenValue
    name: str
    # False when the document value is not a parseable color
    comparable: bool = True


def flatten_brand_colors(document: TokenDocument) -> list[BrandColor]:
    """
    Walk the color groups in fixed order into a flat list.

    Values are normalized to lowercase ``#rrggbb``. Order is neutral,
    primary, utility, then document order within a group.
    """
    colors: list[BrandColor] = []
    for group in COLOR_GROUPS:
        for key, color in document.color_group(group).items():
            normalized = normalize_hex(color.value) if isinstance(color.value, str) else None
            colors.append(
                BrandColor(
                    token=color.css_token,
                    value=normalized or color.value,
                    name=f"{group}-{key}",
                    comparable=normalized is not None,
                )
            )
    return colors


# =============================================================================
# Results
# =============================================================================


class _ResultModel(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)


class BrandColorMatch(_ResultModel):
    """Input is a brand color (matched by token name or exact hex)."""

    on_brand: bool = Field(default=True, alias="onBrand")
    token: str | None
    value: TokenValue
    name: str


class UnknownToken(_ResultModel):
    """Input looked like a token name but no brand color carries it."""

    on_brand: bool = Field(default=False, alias="onBrand")
    message: str


class OffBrandColor(_ResultModel):
    """Input is a valid color that is not in the palette."""

    on_brand: bool = Field(default=False, alias="onBrand")
    input: str
    suggestion: str | None = None
    distance: int | None = None


class ColorParseFailure(_ResultModel):
    """Input could not be parsed as a color or token name."""

    error: str


MatchResult = BrandColorMatch | UnknownToken | OffBrandColor | ColorParseFailure


def _exact(color: BrandColor) -> BrandColorMatch:
    return BrandColorMatch(token=color.token, value=color.value, name=color.name)


def nearest_brand_color(hx: str, palette: list[BrandColor]) -> tuple[BrandColor, float] | None:
    """
    Find the closest comparable brand color to a normalized hex.

    Ties go to the color seen first in palette order.
    """
    closest: BrandColor | None = None
    min_dist = math.inf
    for color in palette:
        if not color.comparable or color.value is None:
            continue
        dist = hex_distance(hx, color.value)
        if dist < min_dist:
            min_dist = dist
            closest = color
    if closest is None:
        return None
    return closest, min_dist


def match_color(document: TokenDocument, value: str) -> MatchResult:
    """
    Check a color expression against the brand palette.

    Args:
        document: Token document supplying the palette
        value: Hex, rgb()/rgba() or ``--token`` name

    Returns:
        BrandColorMatch, UnknownToken, OffBrandColor or ColorParseFailure
    """
    palette = flatten_brand_colors(document)

    if value.startswith("--"):
        for color in palette:
            if color.token == value:
                return _exact(color)
        return UnknownToken(message=f'Token "{value}" not found in brand palette.')

    hx = normalize_hex(value)
    if hx is None:
        return ColorParseFailure(
            error=f'Cannot parse "{value}". Use hex (#RRGGBB), rgb(r,g,b), or token name (--token).'
        )

    for color in palette:
        if color.comparable and color.value == hx:
            return _exact(color)

    nearest = nearest_brand_color(hx, palette)
    if nearest is None:
        return OffBrandColor(input=hx)
    closest, min_dist = nearest
    return OffBrandColor(
        input=hx,
        suggestion=f"Closest brand color: {closest.name} ({closest.token}: {closest.value})",
        distance=round_half_up(min_dist),
    )


def match_result_payload(result: MatchResult) -> dict[str, Any]:
    """Serialize a match result with camelCase keys for the wire."""
    if isinstance(result, BrandColorMatch | UnknownToken | ColorParseFailure):
        return result.model_dump(by_alias=True)
    if isinstance(result, OffBrandColor):
        return result.model_dump(by_alias=True, exclude_none=True)
    raise TypeError(f"Unsupported match result: {type(result).__name__}")
