"""
Tests for the MCP stdio server wiring.
"""

import pytest
from mcp import types

from dumpling_mcp.server import ToolCallError, call_mcp_tool, create_server, list_mcp_tools


def test_list_tools_mirrors_registry(registry):
    tools = list_mcp_tools(registry)

    assert [tool.name for tool in tools] == registry.list_tool_names()
    transcript = next(tool for tool in tools if tool.name == "get-youtube-transcript")
    assert transcript.inputSchema["required"] == ["videoUrl"]
    assert transcript.inputSchema["properties"]["videoUrl"]["format"] == "uri"
    assert transcript.description


@pytest.mark.asyncio
async def test_call_tool_returns_text_content(registry, upstream):
    upstream.respond("get-youtube-transcript", {"transcript": "hello", "language": "en"})

    content = await call_mcp_tool(registry, "get-youtube-transcript", {"videoUrl": "https://youtu.be/x"})

    assert len(content) == 1
    assert isinstance(content[0], types.TextContent)
    assert content[0].type == "text"
    assert content[0].text == "Transcript: hello\nLanguage: en"


@pytest.mark.asyncio
async def test_call_tool_failure_raises(registry, upstream):
    with pytest.raises(ToolCallError, match="Either placeId or businessName is required") as exc_info:
        await call_mcp_tool(registry, "get-google-reviews", {})

    assert exc_info.value.result.error_type == "precondition_failed"
    assert upstream.calls == 0


@pytest.mark.asyncio
async def test_call_unknown_tool_raises(registry):
    with pytest.raises(ToolCallError, match="Tool not found: nope"):
        await call_mcp_tool(registry, "nope", {})


def test_create_server_registers_handlers(registry):
    server = create_server(registry)

    assert server.name == "dumplingai"
    assert types.ListToolsRequest in server.request_handlers
    assert types.CallToolRequest in server.request_handlers
