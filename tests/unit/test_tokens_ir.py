"""Tests for the token document IR models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from brandkit.core.ir.tokens import COLOR_GROUPS, ColorToken, TokenDocument


def test_color_group_order():
    assert COLOR_GROUPS == ("neutral", "primary", "utility")


def test_aliases(token_document):
    blue = token_document.colors["primary"]["blue"]
    assert blue.css_token == "--color-primary-blue"
    step = token_document.typography.type_scale["body-regular"]
    assert step.line_height == "24px"
    assert token_document.typography.font_families["body"].fallback.startswith("Helvetica")


def test_populate_by_name():
    assert ColorToken(css_token="--x", value="#fff").css_token == "--x"


def test_key_order_preserved(token_data):
    token_data["spacing"] = {
        "xl": {"cssToken": "--xl", "value": "32px"},
        "xs": {"cssToken": "--xs", "value": "4px"},
        "md": {"cssToken": "--md", "value": "16px"},
    }
    doc = TokenDocument.model_validate(token_data)
    assert list(doc.spacing) == ["xl", "xs", "md"]


def test_missing_group_is_empty(token_document):
    assert token_document.color_group("accent") == {}


def test_is_empty(token_document, empty_document):
    assert empty_document.is_empty()
    assert TokenDocument.model_validate({"colors": {"neutral": {}}}).is_empty()
    assert not token_document.is_empty()


def test_frozen(token_document):
    with pytest.raises(ValidationError):
        token_document.spacing = {}  # type: ignore[misc]


def test_non_group_color_keys_dropped(token_data):
    token_data["colors"]["description"] = "Brand palette v2"
    doc = TokenDocument.model_validate(token_data)
    assert list(doc.colors) == ["neutral", "primary", "utility"]


def test_numeric_values_accepted(token_data):
    token_data["spacing"]["zero"] = {"cssToken": "--spacing-zero", "value": 0}
    assert TokenDocument.model_validate(token_data).spacing["zero"].value == 0
