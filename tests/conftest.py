"""Shared pytest fixtures for BrandKit tests."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

from brandkit.core.ir.tokens import TokenDocument


def make_token_data() -> dict[str, Any]:
    """A small but complete token document, as parsed from JSON."""
    return {
        "colors": {
            "neutral": {
                "black": {"cssToken": "--color-neutral-black", "value": "#000000"},
                "white": {"cssToken": "--color-neutral-white", "value": "#FFFFFF"},
            },
            "primary": {
                "blue": {"cssToken": "--color-primary-blue", "value": "#000ECC"},
            },
            "utility": {
                "error": {"cssToken": "--color-utility-error", "value": "#c8102e"},
            },
        },
        "typography": {
            "fontFamilies": {
                "body": {
                    "cssToken": "--font-family-body",
                    "name": "Lato",
                    "fallback": "Helvetica Neue, Arial, sans-serif",
                }
            },
            "fontWeights": {
                "regular": {"cssToken": "--font-weight-regular", "value": 400},
                "bold": {"cssToken": "--font-weight-bold", "value": 700},
            },
            "typeScale": {
                "body-regular": {
                    "token": "--font-size-body-regular",
                    "size": "16px",
                    "lineHeight": "24px",
                }
            },
        },
        "spacing": {
            "sm": {"cssToken": "--spacing-sm", "value": "8px"},
            "md": {"cssToken": "--spacing-md", "value": "16px"},
        },
    }


@pytest.fixture
def token_data() -> dict[str, Any]:
    """Return raw token document data."""
    return make_token_data()


@pytest.fixture
def token_document(token_data: dict[str, Any]) -> TokenDocument:
    """Return the parsed token document."""
    return TokenDocument.model_validate(token_data)


@pytest.fixture
def empty_document() -> TokenDocument:
    """Return a document with no sections."""
    return TokenDocument()


@pytest.fixture
def data_dir(tmp_path: Path, token_data: dict[str, Any]) -> Path:
    """Create a data directory with tokens, logos, icons and layouts."""
    root = tmp_path / "data"
    root.mkdir()

    (root / "brand-tokens.json").write_text(json.dumps(token_data))

    (root / "logos.json").write_text(
        json.dumps(
            {
                "logos": {
                    "full": {"width": 157, "height": 16, "svg": "<svg>full</svg>"},
                    "compact": {"width": 98, "height": 10, "svg": "<svg>compact</svg>"},
                }
            }
        )
    )

    icons = [{"name": f"arrow{i}", "variants": {"sizes": ["24px"]}} for i in range(25)]
    icons.append({"name": "Umbrella", "variants": {"sizes": ["16px", "24px"]}})
    (root / "icon-registry.json").write_text(json.dumps({"icons": icons}))

    layouts = root / "layouts"
    layouts.mkdir()
    (layouts / "page-grid.css").write_text(".page-grid { display: grid; }\n")
    (layouts / "card.css").write_text(".card { padding: var(--spacing-md); }\n")

    return root
