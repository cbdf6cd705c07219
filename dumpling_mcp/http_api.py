"""
HTTP API over the tool registry.

Useful for local integration and debugging; the stdio server remains the
primary transport.
"""

from typing import Any, Dict, List, Optional

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

from . import __version__
from .registry import ToolRegistry


class ToolRequest(BaseModel):
    """Request body for tool execution."""

    arguments: Dict[str, Any] = {}


class ToolResponse(BaseModel):
    """Response from tool execution."""

    success: bool
    tool: str
    content: Optional[List[Dict[str, str]]] = None
    error: Optional[str] = None
    error_type: Optional[str] = None


def create_app(registry: ToolRegistry) -> FastAPI:
    app = FastAPI(
        title="Dumpling AI MCP Server",
        description="Dumpling AI tools exposed over HTTP",
        version=__version__,
    )

    # ============== API Endpoints ==============

    @app.get("/health")
    async def health():
        return {"status": "healthy", "tools_loaded": len(registry)}

    @app.get("/tools")
    async def list_tools():
        tools = registry.list_tools()
        return {
            "total": len(tools),
            "tools": [
                {
                    "name": tool.name,
                    "description": tool.description,
                    "category": tool.category,
                    "inputSchema": tool.input_schema(),
                }
                for tool in tools
            ],
        }

    @app.get("/tools/{tool_name}")
    async def get_tool_info(tool_name: str):
        tool = registry.get(tool_name)
        if tool is None:
            raise HTTPException(status_code=404, detail=f"Tool not found: {tool_name}")
        return {
            "name": tool.name,
            "description": tool.description,
            "category": tool.category,
            "inputSchema": tool.input_schema(),
        }

    @app.post("/tools/{tool_name}/execute", response_model=ToolResponse, response_model_exclude_none=True)
    async def execute_tool_endpoint(tool_name: str, request: ToolRequest):
        result = await registry.invoke(tool_name, request.arguments)
        if result.error_type == "unknown_tool":
            raise HTTPException(status_code=404, detail=result.error)
        return ToolResponse(**result.to_dict())

    return app
