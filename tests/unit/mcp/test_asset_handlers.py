"""Tests for the icon, logo and layout MCP handlers."""

from __future__ import annotations

import json

import pytest

from brandkit.mcp.server.handlers.assets import (
    MAX_ICON_RESULTS,
    get_icon_handler,
    get_layout_handler,
    get_logo_handler,
    icon_usage,
)


@pytest.mark.usefixtures("server_config")
class TestGetIcon:
    def test_search_is_case_insensitive(self):
        payload = json.loads(get_icon_handler({"search": "umbr"}))
        assert payload["total"] == 1
        assert payload["showing"] == 1
        assert payload["icons"] == [
            {
                "name": "Umbrella",
                "variants": {"sizes": ["16px", "24px"]},
                "usage": '<ds-icon name="Umbrella" size="24px"></ds-icon>',
            }
        ]

    def test_results_are_capped(self):
        payload = json.loads(get_icon_handler({"search": "arrow"}))
        assert payload["total"] == 25
        assert payload["showing"] == MAX_ICON_RESULTS
        assert len(payload["icons"]) == MAX_ICON_RESULTS

    def test_no_search_returns_everything(self):
        payload = json.loads(get_icon_handler({}))
        assert payload["total"] == 26
        assert payload["icons"][0]["name"] == "arrow0"

    def test_no_match(self):
        assert (
            get_icon_handler({"search": "zebra"})
            == 'No icons found matching "zebra". Try a broader term.'
        )

    def test_usage_snippet(self):
        assert icon_usage("home") == '<ds-icon name="home" size="24px"></ds-icon>'


@pytest.mark.usefixtures("server_config")
class TestGetLogo:
    def test_default_variant(self):
        assert json.loads(get_logo_handler({})) == {
            "width": 157,
            "height": 16,
            "svg": "<svg>full</svg>",
        }

    def test_named_variant(self):
        assert json.loads(get_logo_handler({"variant": "compact"}))["width"] == 98

    def test_unknown_variant(self):
        assert (
            get_logo_handler({"variant": "powered-by"})
            == 'Unknown variant "powered-by". Available: full, compact, powered-by'
        )


@pytest.mark.usefixtures("server_config")
class TestGetLayout:
    def test_known_layout(self):
        assert get_layout_handler({"name": "card"}) == ".card { padding: var(--spacing-md); }\n"

    def test_listing(self):
        assert json.loads(get_layout_handler({})) == {"available": ["card", "page-grid"]}

    def test_unknown_layout(self):
        payload = json.loads(get_layout_handler({"name": "hero"}))
        assert payload == {"error": 'Unknown layout "hero".', "available": ["card", "page-grid"]}

    def test_path_traversal_rejected(self):
        payload = json.loads(get_layout_handler({"name": "../brand-tokens"}))
        assert "error" in payload


@pytest.mark.usefixtures("empty_server_config")
def test_missing_assets_do_not_error():
    assert get_icon_handler({}) == 'No icons found matching "". Try a broader term.'
    assert get_logo_handler({}).startswith('Unknown variant "full"')
    assert json.loads(get_layout_handler({})) == {"available": []}
