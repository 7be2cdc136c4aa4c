"""
BrandKit MCP Server implementation.

Implements the Model Context Protocol using the official MCP SDK, exposing
tools for brand tokens, the brand stylesheet, color validation, icons,
logos and layout snippets, plus read-only resources over the same assets.
"""

from __future__ import annotations

import json
import logging
import sys
from collections.abc import Callable
from typing import Any

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import Resource, TextContent, Tool
from pydantic import AnyUrl

from brandkit.core.config import BrandKitConfig
from brandkit.mcp.resources import create_resources, read_resource_text

from .handlers import (
    get_brand_stylesheet_handler,
    get_brand_tokens_handler,
    get_icon_handler,
    get_layout_handler,
    get_logo_handler,
    validate_brand_colors_handler,
)
from .state import get_config, get_data_dir, set_config
from .tools import get_all_tools

# Configure logging to stderr only (stdout is reserved for JSON-RPC protocol)
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    stream=sys.stderr,
)
logger = logging.getLogger("brandkit.mcp")

TOOL_HANDLERS: dict[str, Callable[[dict[str, Any]], str]] = {
    "get_brand_stylesheet": get_brand_stylesheet_handler,
    "get_brand_tokens": get_brand_tokens_handler,
    "validate_brand_colors": validate_brand_colors_handler,
    "get_icon": get_icon_handler,
    "get_logo": get_logo_handler,
    "get_layout": get_layout_handler,
}


def create_server(name: str, version: str | None = None) -> Server:
    """Create the MCP server and register its handlers."""
    server = Server(name, version=version)

    # ========================================================================
    # Tool Handler
    # ========================================================================

    @server.list_tools()  # type: ignore[no-untyped-call]
    async def list_tools_handler() -> list[Tool]:
        """List available BrandKit tools."""
        return get_all_tools()

    @server.call_tool()
    async def call_tool_handler(name: str, arguments: dict[str, Any] | None) -> list[TextContent]:
        """Execute a BrandKit tool."""
        return call_tool(name, arguments or {})

    # ========================================================================
    # Resource Handlers
    # ========================================================================

    @server.list_resources()  # type: ignore[no-untyped-call]
    async def list_resources() -> list[Resource]:
        """List available BrandKit resources."""
        return [
            Resource(
                uri=AnyUrl(r["uri"]),
                name=r["name"],
                description=r["description"],
                mimeType=r.get("mimeType", "text/plain"),
            )
            for r in create_resources()
        ]

    @server.read_resource()  # type: ignore[no-untyped-call]
    async def read_resource(uri: AnyUrl) -> str:
        """Read a BrandKit resource by URI."""
        text = read_resource_text(str(uri), get_config())
        if text is None:
            return f"Unknown resource: {uri}"
        return text

    return server


def call_tool(name: str, arguments: dict[str, Any]) -> list[TextContent]:
    """Dispatch a tool call to its handler and wrap the text result."""
    handler = TOOL_HANDLERS.get(name)
    if handler is None:
        result = json.dumps({"error": f"Unknown tool: {name}"})
    else:
        logger.debug(f"Calling tool {name} with {arguments}")
        result = handler(arguments)
    return [TextContent(type="text", text=result)]


# ============================================================================
# Server Entry Point
# ============================================================================


async def run_server(config: BrandKitConfig | None = None) -> None:
    """Run the BrandKit MCP server over stdio."""
    if config is not None:
        set_config(config)
    config = get_config()
    logger.info(f"Serving brand assets from: {get_data_dir()}")
    if not get_data_dir().is_dir():
        logger.warning(f"Data directory not found, tools will return empty output: {get_data_dir()}")

    server = create_server(config.server_name, config.server_version)
    logger.info(f"Starting {config.server_name} MCP server v{config.server_version}...")
    try:
        async with stdio_server() as (read_stream, write_stream):
            logger.info("stdio transport established, running server...")
            await server.run(
                read_stream,
                write_stream,
                server.create_initialization_options(),
            )
    except Exception as e:
        logger.exception(f"Server error: {e}")
        raise


class BrandKitMCPServer:
    """Convenience wrapper for running the MCP server with a config."""

    def __init__(self, config: BrandKitConfig | None = None):
        self.config = config or BrandKitConfig()

    async def run(self) -> None:
        await run_server(self.config)


__all__ = [
    "BrandKitMCPServer",
    "TOOL_HANDLERS",
    "call_tool",
    "create_server",
    "get_config",
    "run_server",
    "set_config",
]
