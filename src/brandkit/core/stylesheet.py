"""
Full brand stylesheet generation.

Unlike :func:`brandkit.core.formatter.tokens_to_css`, the stylesheet always
carries every token, groups declarations with blank lines, imports the brand
web font and closes with a base ``body`` rule.
"""

from __future__ import annotations

from .formatter import line_height_token, stringify_number
from .ir.tokens import COLOR_GROUPS, TokenDocument

DEFAULT_BRAND_NAME = "Chubb"
DEFAULT_FONT_FAMILY = "Lato"
FONT_WEIGHTS = (300, 400, 700)

BODY_RULE = (
    "body {",
    "  font-family: var(--font-family-body);",
    "  font-size: var(--font-size-body-regular);",
    "  line-height: var(--font-line-height-body-regular);",
    "  color: var(--color-neutral-black);",
    "  -webkit-font-smoothing: antialiased;",
    "  -moz-osx-font-smoothing: grayscale;",
    "}",
)


def font_import_url(font_family: str) -> str:
    """Google Fonts CSS2 URL for the brand typeface."""
    family = font_family.replace(" ", "+")
    weights = ";".join(str(w) for w in FONT_WEIGHTS)
    return f"https://fonts.googleapis.com/css2?family={family}:wght@{weights}&display=swap"


def generate_stylesheet(
    document: TokenDocument,
    brand_name: str = DEFAULT_BRAND_NAME,
    font_family: str = DEFAULT_FONT_FAMILY,
) -> str:
    """
    Generate a complete, drop-in stylesheet for the brand.

    Args:
        document: Token document
        brand_name: Brand name used in the header comment
        font_family: Web font imported from Google Fonts

    Returns:
        Stylesheet text (no trailing newline)
    """
    typo = document.typography
    lines: list[str] = [
        f"/* {brand_name} Brand Kit - Auto-generated stylesheet */",
        "/* Drop this into your project for brand-correct colors, typography, and spacing */",
        "",
        f"/* Font: {font_family} - primary brand typeface */",
        f"@import url('{font_import_url(font_family)}');",
        "",
        ":root {",
    ]

    for family in typo.font_families.values():
        lines.append(f"  {family.css_token}: {family.name}, {family.fallback};")
    lines.append("")

    for weight in typo.font_weights.values():
        lines.append(f"  {weight.css_token}: {stringify_number(weight.value)};")
    lines.append("")

    for key, step in typo.type_scale.items():
        lines.append(f"  {step.token}: {stringify_number(step.size)};")
        lines.append(f"  {line_height_token(key)}: {stringify_number(step.line_height)};")
    lines.append("")

    for group in COLOR_GROUPS:
        for color in document.color_group(group).values():
            lines.append(f"  {color.css_token}: {stringify_number(color.value)};")
        lines.append("")

    for step in document.spacing.values():
        lines.append(f"  {step.css_token}: {stringify_number(step.value)};")
    lines.append("}")
    lines.append("")
    lines.extend(BODY_RULE)

    return "\n".join(lines)
