"""
BrandKit MCP Server

Model Context Protocol server exposing the brand kit as tools and resources.
"""

from .server import BrandKitMCPServer

__all__ = ["BrandKitMCPServer"]
