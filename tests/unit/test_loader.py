"""Tests for static asset loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from brandkit.core.errors import AssetLoadError
from brandkit.core.formatter import render_tokens
from brandkit.core.ir.tokens import TokenDocument
from brandkit.core.loader import (
    coerce_token_document,
    list_layouts,
    load_json,
    load_text,
    load_token_document,
    read_json_asset,
    read_text_asset,
)


class TestRaisingReaders:
    def test_missing_text(self, tmp_path: Path):
        with pytest.raises(AssetLoadError) as exc_info:
            read_text_asset(tmp_path, "missing.css")
        assert exc_info.value.path == tmp_path / "missing.css"

    def test_invalid_json(self, tmp_path: Path):
        (tmp_path / "broken.json").write_text("{not json")
        with pytest.raises(AssetLoadError, match="invalid JSON"):
            read_json_asset(tmp_path, "broken.json")

    def test_valid_json(self, data_dir: Path):
        assert "logos" in read_json_asset(data_dir, "logos.json")


class TestSilentLoaders:
    def test_missing_json_is_empty_dict(self, tmp_path: Path):
        assert load_json(tmp_path, "brand-tokens.json") == {}

    def test_invalid_json_is_empty_dict(self, tmp_path: Path):
        (tmp_path / "brand-tokens.json").write_text("[1, 2,")
        assert load_json(tmp_path, "brand-tokens.json") == {}

    def test_missing_text_is_empty_string(self, tmp_path: Path):
        assert load_text(tmp_path, "layouts/none.css") == ""

    def test_text(self, data_dir: Path):
        assert load_text(data_dir, "layouts/card.css").startswith(".card")


class TestLoadTokenDocument:
    def test_loads_document(self, data_dir: Path, token_document: TokenDocument):
        assert load_token_document(data_dir) == token_document

    def test_missing_directory(self, tmp_path: Path):
        doc = load_token_document(tmp_path / "nowhere")
        assert doc == TokenDocument()
        assert doc.is_empty()

    def test_partial_document(self):
        doc = coerce_token_document({"spacing": {"sm": {"cssToken": "--sm", "value": "8px"}}})
        assert doc.colors == {}
        assert doc.typography.type_scale == {}
        assert not doc.is_empty()

    @pytest.mark.parametrize(
        "data",
        [
            [1, 2, 3],
            "tokens",
            None,
            {"colors": ["not", "a", "mapping"]},
            {"typography": "Lato"},
        ],
    )
    def test_unusable_data_is_empty(self, data):
        assert coerce_token_document(data) == TokenDocument()

    def test_unknown_keys_ignored(self):
        doc = coerce_token_document(
            {
                "meta": {"version": 2},
                "colors": {"neutral": {"black": {"cssToken": "--b", "value": "#000", "note": "x"}}},
            }
        )
        assert doc.colors["neutral"]["black"].css_token == "--b"

    def test_numeric_leaf_value(self, token_data):
        token_data["spacing"]["zero"] = {"cssToken": "--spacing-zero", "value": 0}
        doc = coerce_token_document(token_data)
        assert doc.spacing["zero"].value == 0
        css = render_tokens(doc, "css")
        assert "  --color-primary-blue: #000ECC;" in css
        assert css.endswith("  --spacing-zero: 0;\n}")

    def test_non_group_color_keys_ignored(self, token_data):
        token_data["colors"]["description"] = "Brand palette v2"
        doc = coerce_token_document(token_data)
        assert list(doc.colors) == ["neutral", "primary", "utility"]
        assert "  --color-primary-blue: #000ECC;" in render_tokens(doc, "css")

    def test_malformed_entry_is_placeholder(self, token_data):
        token_data["spacing"] = {
            "sm": "8px",
            "md": {"cssToken": "--spacing-md", "value": "16px"},
        }
        doc = coerce_token_document(token_data)
        assert render_tokens(doc, "css", "spacing") == (
            ":root {\n  None: None;\n  --spacing-md: 16px;\n}"
        )

    def test_bad_section_dropped_alone(self, token_data):
        token_data["typography"]["typeScale"] = ["16px"]
        doc = coerce_token_document(token_data)
        assert doc.typography.type_scale == {}
        assert "body" in doc.typography.font_families
        assert doc.spacing["md"].value == "16px"


def test_list_layouts(data_dir: Path, tmp_path: Path):
    assert list_layouts(data_dir) == ["card", "page-grid"]
    assert list_layouts(tmp_path / "nowhere") == []
