"""
MCP server entry point for BrandKit.

Run with: python -m brandkit.mcp [DATA_DIR]
"""

import asyncio
import logging
import sys
from pathlib import Path

from brandkit.core.config import load_config
from brandkit.core.errors import ConfigError
from brandkit.mcp.server import run_server

logger = logging.getLogger(__name__)


async def main() -> None:
    """Run the BrandKit MCP server."""
    try:
        config = load_config()
    except ConfigError as e:
        logger.error(f"Configuration error: {e}")
        sys.exit(1)

    # Optional data directory from command line args
    if len(sys.argv) > 1:
        config = config.with_data_dir(Path(sys.argv[1]))

    logger.info(f"Starting BrandKit MCP server with assets in {config.data_dir}")

    try:
        await run_server(config)
    except KeyboardInterrupt:
        logger.info("Server stopped by user")
    except Exception as e:
        logger.error(f"Server error: {e}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    asyncio.run(main())
