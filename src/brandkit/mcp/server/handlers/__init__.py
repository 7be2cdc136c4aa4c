"""
MCP Server tool handlers package.

Token rendering handlers live in ``tokens``; static asset lookups in
``assets``.
"""

from .assets import get_icon_handler, get_layout_handler, get_logo_handler
from .tokens import (
    get_brand_stylesheet_handler,
    get_brand_tokens_handler,
    validate_brand_colors_handler,
)

__all__ = [
    "get_brand_stylesheet_handler",
    "get_brand_tokens_handler",
    "validate_brand_colors_handler",
    "get_icon_handler",
    "get_logo_handler",
    "get_layout_handler",
]
