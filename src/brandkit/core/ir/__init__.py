"""Typed schema for the brand token document."""

from .tokens import (
    COLOR_GROUPS,
    ColorToken,
    FontFamilyToken,
    FontWeightToken,
    SpacingToken,
    TokenDocument,
    TokenValue,
    TypeScaleToken,
    Typography,
)

__all__ = [
    "COLOR_GROUPS",
    "ColorToken",
    "FontFamilyToken",
    "FontWeightToken",
    "SpacingToken",
    "TokenDocument",
    "TokenValue",
    "TypeScaleToken",
    "Typography",
]
