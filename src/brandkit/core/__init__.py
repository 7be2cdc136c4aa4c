"""Core BrandKit functionality: token schema, formatter, stylesheet, color matcher, asset loading."""

from . import ir
from .colors import (
    BrandColor,
    BrandColorMatch,
    ColorParseFailure,
    MatchResult,
    OffBrandColor,
    UnknownToken,
    flatten_brand_colors,
    match_color,
    match_result_payload,
    normalize_hex,
)
from .config import BrandKitConfig, load_config
from .errors import AssetLoadError, BrandKitError, ConfigError
from .formatter import (
    Category,
    TokenFormat,
    format_entries,
    render_tokens,
    tokens_to_css,
    tokens_to_json,
    tokens_to_tailwind,
)
from .loader import load_json, load_text, load_token_document
from .stylesheet import generate_stylesheet

__all__ = [
    "ir",
    # Errors
    "BrandKitError",
    "AssetLoadError",
    "ConfigError",
    # Config
    "BrandKitConfig",
    "load_config",
    # Loading
    "load_json",
    "load_text",
    "load_token_document",
    # Formatting
    "Category",
    "TokenFormat",
    "format_entries",
    "render_tokens",
    "tokens_to_css",
    "tokens_to_json",
    "tokens_to_tailwind",
    "generate_stylesheet",
    # Colors
    "BrandColor",
    "BrandColorMatch",
    "ColorParseFailure",
    "MatchResult",
    "OffBrandColor",
    "UnknownToken",
    "flatten_brand_colors",
    "match_color",
    "match_result_payload",
    "normalize_hex",
]
