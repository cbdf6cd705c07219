"""
Dumpling AI MCP Server

Exposes the Dumpling AI API (search, scraping, crawling, document/media
extraction, image generation, knowledge bases) as MCP tools.
"""

__version__ = "1.0.0"

from .base import ToolDefinition, ToolParameter, ToolResult
from .config import Settings
from .registry import ToolRegistry, build_registry

__all__ = [
    "Settings",
    "ToolDefinition",
    "ToolParameter",
    "ToolRegistry",
    "ToolResult",
    "build_registry",
]
