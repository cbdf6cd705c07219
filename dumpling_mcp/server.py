"""
MCP stdio server.

Exposes every registered tool through the MCP SDK's low-level Server. Tool
failures are raised as ToolCallError, which the SDK reports to the client as
an error result (isError) instead of tearing down the session.
"""

import logging
from typing import Any, Dict, List

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import TextContent, Tool

from . import __version__
from .base import ToolResult
from .registry import ToolRegistry

logger = logging.getLogger(__name__)

SERVER_NAME = "dumplingai"


class ToolCallError(Exception):
    """A tool invocation finished with a failed ToolResult."""

    def __init__(self, result: ToolResult):
        self.result = result
        super().__init__(result.error or f"Tool {result.tool} failed")


def list_mcp_tools(registry: ToolRegistry) -> List[Tool]:
    return [
        Tool(
            name=definition.name,
            description=definition.description,
            inputSchema=definition.input_schema(),
        )
        for definition in registry.list_tools()
    ]


async def call_mcp_tool(registry: ToolRegistry, name: str, arguments: Dict[str, Any]) -> List[TextContent]:
    result = await registry.invoke(name, arguments)
    if not result.success:
        raise ToolCallError(result)
    return [TextContent(type="text", text=block["text"]) for block in result.content]


def create_server(registry: ToolRegistry) -> Server:
    """Build an MCP Server wired to `registry`."""
    server = Server(SERVER_NAME, version=__version__)

    @server.list_tools()
    async def list_tools() -> List[Tool]:
        """List available Dumpling AI tools."""
        return list_mcp_tools(registry)

    # the registry validates arguments itself, with its own messages
    @server.call_tool(validate_input=False)
    async def call_tool(name: str, arguments: Dict[str, Any]) -> List[TextContent]:
        """Handle tool calls."""
        return await call_mcp_tool(registry, name, arguments or {})

    return server


async def run_stdio(registry: ToolRegistry) -> None:
    """Run the MCP server on stdin/stdout until the client disconnects."""
    server = create_server(registry)
    logger.info(f"Dumpling AI MCP Server running on stdio with {len(registry)} tools")
    async with stdio_server() as (read_stream, write_stream):
        await server.run(
            read_stream,
            write_stream,
            server.create_initialization_options(),
        )
