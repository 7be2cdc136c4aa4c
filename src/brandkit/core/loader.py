"""
Static asset loading for the brand kit.

Assets live in a flat data directory (``brand-tokens.json``,
``logos.json``, ``icon-registry.json``, ``layouts/*.css``) and are read
through on every request.

Two layers:

- ``read_*_asset`` raise :class:`AssetLoadError` on any failure.
- ``load_*`` never raise; a failure yields an empty value so callers render
  nothing instead of erroring.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, TypeVar

from pydantic import ValidationError

from .errors import AssetLoadError
from .ir.tokens import (
    COLOR_GROUPS,
    ColorToken,
    FontFamilyToken,
    FontWeightToken,
    SpacingToken,
    TokenDocument,
    TypeScaleToken,
    Typography,
)

logger = logging.getLogger(__name__)

TOKENS_FILE = "brand-tokens.json"
LOGOS_FILE = "logos.json"
ICONS_FILE = "icon-registry.json"
LAYOUTS_DIR = "layouts"

_Entry = TypeVar(
    "_Entry", ColorToken, FontFamilyToken, FontWeightToken, TypeScaleToken, SpacingToken
)


# =============================================================================
# Raising readers
# =============================================================================


def read_text_asset(data_dir: Path, name: str) -> str:
    """Read a UTF-8 text asset, raising AssetLoadError on failure."""
    path = data_dir / name
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise AssetLoadError(f"cannot read asset: {e}", path) from e


def read_json_asset(data_dir: Path, name: str) -> Any:
    """Read and parse a JSON asset, raising AssetLoadError on failure."""
    raw = read_text_asset(data_dir, name)
    try:
        return json.loads(raw)
    except json.JSONDecodeError as e:
        raise AssetLoadError(f"invalid JSON: {e}", data_dir / name) from e


# =============================================================================
# Non-raising loaders
# =============================================================================


def load_text(data_dir: Path, name: str) -> str:
    """Load a text asset, or an empty string if it cannot be read."""
    try:
        return read_text_asset(data_dir, name)
    except AssetLoadError as e:
        logger.debug("Asset unavailable: %s", e)
        return ""


def load_json(data_dir: Path, name: str) -> Any:
    """Load a JSON asset, or an empty dict if it cannot be read or parsed."""
    try:
        return read_json_asset(data_dir, name)
    except AssetLoadError as e:
        logger.debug("Asset unavailable: %s", e)
        return {}


def _coerce_entries(model: type[_Entry], raw: Any, where: str) -> dict[str, _Entry]:
    """
    Validate one keyed section entry by entry.

    A malformed entry is kept as an all-``None`` placeholder so it still
    renders in document order.
    """
    if not isinstance(raw, dict):
        if raw is not None:
            logger.warning("Token section %s is not an object, ignoring", where)
        return {}
    entries: dict[str, _Entry] = {}
    for key, value in raw.items():
        try:
            entries[key] = model.model_validate(value)
        except ValidationError as e:
            logger.warning("Malformed token %s.%s, rendering placeholder: %s", where, key, e)
            entries[key] = model()
    return entries


def _section(data: dict[str, Any], key: str) -> dict[str, Any]:
    raw = data.get(key)
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        logger.warning("Token section %s is not an object, ignoring", key)
        return {}
    return raw


def coerce_token_document(data: Any) -> TokenDocument:
    """
    Build a TokenDocument from parsed JSON, best effort.

    Each section and entry is validated on its own: a bad section is
    dropped, a bad entry becomes a placeholder, and everything else loads.
    Color keys outside the fixed groups are ignored.
    """
    if not isinstance(data, dict):
        if data not in ({}, None):
            logger.warning("Token document is not an object (%s), ignoring", type(data).__name__)
        return TokenDocument()

    raw_colors = _section(data, "colors")
    colors = {
        group: _coerce_entries(ColorToken, raw_colors[group], f"colors.{group}")
        for group in COLOR_GROUPS
        if group in raw_colors
    }

    raw_typo = _section(data, "typography")
    typography = Typography(
        font_families=_coerce_entries(
            FontFamilyToken, raw_typo.get("fontFamilies"), "typography.fontFamilies"
        ),
        font_weights=_coerce_entries(
            FontWeightToken, raw_typo.get("fontWeights"), "typography.fontWeights"
        ),
        type_scale=_coerce_entries(
            TypeScaleToken, raw_typo.get("typeScale"), "typography.typeScale"
        ),
    )

    spacing = _coerce_entries(SpacingToken, data.get("spacing"), "spacing")
    return TokenDocument(colors=colors, typography=typography, spacing=spacing)


def load_token_document(data_dir: Path) -> TokenDocument:
    """Load brand-tokens.json, falling back to an empty document."""
    return coerce_token_document(load_json(data_dir, TOKENS_FILE))


def list_layouts(data_dir: Path) -> list[str]:
    """Names of the layout snippets available in the data directory."""
    layouts_dir = data_dir / LAYOUTS_DIR
    if not layouts_dir.is_dir():
        return []
    return sorted(p.stem for p in layouts_dir.glob("*.css"))
