"""
Command line entry point.

    dumpling-mcp                      # MCP over stdio (default)
    dumpling-mcp --transport http     # FastAPI server for local testing
"""

import argparse
import asyncio
import logging
import sys
from typing import List, Optional

from .config import ConfigError, configure_logging, load_settings
from .registry import build_registry

logger = logging.getLogger("dumpling_mcp")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="dumpling-mcp",
        description="Dumpling AI tools as an MCP server",
    )
    parser.add_argument("--transport", choices=["stdio", "http"], default="stdio")
    parser.add_argument("--host", default="127.0.0.1", help="Bind address for --transport http")
    parser.add_argument("--port", type=int, default=8000, help="Port for --transport http")
    parser.add_argument("--log-level", default=None, help="Overrides DUMPLING_LOG_LEVEL")
    parser.add_argument("--env-file", default=None, help="Path to a .env file")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)

    try:
        settings = load_settings(args.env_file)
    except ConfigError as e:
        configure_logging("INFO")
        logger.error(f"Invalid configuration: {e}")
        return 2

    configure_logging(args.log_level or settings.log_level)
    registry = build_registry(settings)

    if args.transport == "http":
        import uvicorn

        from .http_api import create_app

        uvicorn.run(create_app(registry), host=args.host, port=args.port, log_level="info")
        return 0

    from .server import run_stdio

    try:
        asyncio.run(run_stdio(registry))
    except KeyboardInterrupt:
        logger.info("Interrupted, shutting down")
    return 0


if __name__ == "__main__":
    sys.exit(main())
