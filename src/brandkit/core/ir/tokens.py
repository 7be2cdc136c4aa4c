"""
Token document IR types.

Mirrors the shape of ``brand-tokens.json``: three optional sections
(colors, typography, spacing), each a mapping keyed by a short name whose
leaf entries carry a ``cssToken`` (or ``token`` for the type scale) naming
the CSS custom property.

Every section defaults to an empty mapping and every leaf field defaults to
``None`` so partial documents load without error. Key order from the source
document is preserved and drives output order.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Fixed traversal order for color groups. Also the tie-break order for
# nearest-color search.
COLOR_GROUPS: tuple[str, ...] = ("neutral", "primary", "utility")

# Leaf values are usually strings ("16px", "#000ECC") but may be plain numbers.
TokenValue = str | int | float | None


class _TokenModel(BaseModel):
    """Shared config: immutable, camelCase aliases, unknown keys ignored."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")


# =============================================================================
# Leaf entries
# =============================================================================


class ColorToken(_TokenModel):
    """A single brand color."""

    css_token: str | None = Field(default=None, alias="cssToken")
    value: TokenValue = None


class FontFamilyToken(_TokenModel):
    """A font family with its comma-separated fallback stack."""

    css_token: str | None = Field(default=None, alias="cssToken")
    name: str | None = None
    fallback: str | None = None


class FontWeightToken(_TokenModel):
    """A numeric font weight."""

    css_token: str | None = Field(default=None, alias="cssToken")
    value: TokenValue = None


class TypeScaleToken(_TokenModel):
    """A type-scale step: font size plus line height.

    The line-height custom property is not stored in the document; it is
    synthesized as ``--font-line-height-<key>``.
    """

    token: str | None = None
    size: TokenValue = None
    line_height: TokenValue = Field(default=None, alias="lineHeight")


class SpacingToken(_TokenModel):
    """A spacing step."""

    css_token: str | None = Field(default=None, alias="cssToken")
    value: TokenValue = None


# =============================================================================
# Sections
# =============================================================================


class Typography(_TokenModel):
    """Typography section: families, weights and the type scale."""

    font_families: dict[str, FontFamilyToken] = Field(default_factory=dict, alias="fontFamilies")
    font_weights: dict[str, FontWeightToken] = Field(default_factory=dict, alias="fontWeights")
    type_scale: dict[str, TypeScaleToken] = Field(default_factory=dict, alias="typeScale")


class TokenDocument(_TokenModel):
    """The complete brand token document."""

    colors: dict[str, dict[str, ColorToken]] = Field(default_factory=dict)
    typography: Typography = Field(default_factory=Typography)
    spacing: dict[str, SpacingToken] = Field(default_factory=dict)

    @field_validator("colors", mode="before")
    @classmethod
    def _known_groups_only(cls, value: Any) -> Any:
        # Keys outside the fixed groups (descriptions, metadata) are never rendered
        if isinstance(value, dict):
            return {k: v for k, v in value.items() if k in COLOR_GROUPS}
        return value

    def color_group(self, group: str) -> dict[str, ColorToken]:
        """Return the entries of a color group, or an empty mapping."""
        return self.colors.get(group, {})

    def is_empty(self) -> bool:
        """True when the document carries no tokens at all."""
        typo = self.typography
        return not (
            any(self.colors.values())
            or typo.font_families
            or typo.font_weights
            or typo.type_scale
            or self.spacing
        )
