"""
MCP Tool Registry

Single source of truth for tool lookup and dispatch. Tool descriptors are
discovered from the dumpling_mcp/tools/ package and bound to a client once
at startup.
"""

import importlib
import logging
import pkgutil
from pathlib import Path
from typing import Any, Dict, List, Optional

import httpx

from .base import DuplicateToolError, InvalidArguments, ToolDefinition, ToolResult, validate_arguments
from .client import DumplingClient
from .config import API_KEY_ENV, Settings
from .proxy import ProxyTool

logger = logging.getLogger(__name__)

TOOLS_PACKAGE = "dumpling_mcp.tools"


class ToolRegistry:
    """Name → ToolDefinition mapping with a single `invoke` entry point."""

    def __init__(self):
        self._tools: Dict[str, ToolDefinition] = {}

    def __contains__(self, name: str) -> bool:
        return name in self._tools

    def __len__(self) -> int:
        return len(self._tools)

    def register(self, definition: ToolDefinition) -> None:
        if definition.name in self._tools:
            raise DuplicateToolError(f"Tool already registered: {definition.name}")
        if definition.handler is None:
            raise ValueError(f"Tool has no handler: {definition.name}")
        self._tools[definition.name] = definition
        logger.debug(f"Registered tool: {definition.name} ({definition.category})")

    def get(self, name: str) -> Optional[ToolDefinition]:
        """Get a specific tool by name. Returns None if not found."""
        return self._tools.get(name)

    def list_tools(self) -> List[ToolDefinition]:
        return list(self._tools.values())

    def list_tool_names(self) -> List[str]:
        return list(self._tools.keys())

    def get_tools_by_category(self, category: str) -> List[ToolDefinition]:
        return [tool for tool in self._tools.values() if tool.category == category]

    async def invoke(self, name: str, arguments: Optional[Dict[str, Any]] = None) -> ToolResult:
        """
        Execute a tool by name.

        Unknown names and schema violations come back as failed results; the
        handler's own result is returned unchanged.
        """
        tool = self._tools.get(name)
        if tool is None:
            logger.warning(f"Tool not found: {name}")
            return ToolResult.failure(name, f"Tool not found: {name}", "unknown_tool")

        try:
            validated = validate_arguments(list(tool.parameters), arguments)
        except InvalidArguments as e:
            logger.warning(f"Validation error in {name}: {e.message}")
            return ToolResult.failure(name, e.message, e.error_type)

        return await tool.handler(validated)


def discover_tools(package: str = TOOLS_PACKAGE) -> List[ProxyTool]:
    """
    Import every module in `package` and collect its module-level ProxyTool
    descriptors, in module order then declaration order.
    """
    module = importlib.import_module(package)
    tools_path = Path(module.__file__).parent

    found: List[ProxyTool] = []
    for _, module_name, _ in pkgutil.iter_modules([str(tools_path)]):
        if module_name.startswith("_"):
            continue
        tool_module = importlib.import_module(f"{package}.{module_name}")
        logger.debug(f"Loaded tool module: {tool_module.__name__}")
        for value in vars(tool_module).values():
            if isinstance(value, ProxyTool):
                found.append(value)
    return found


def build_registry(
    settings: Settings,
    transport: Optional[httpx.AsyncBaseTransport] = None,
    package: str = TOOLS_PACKAGE,
) -> ToolRegistry:
    """Discover all tools and bind them to one DumplingClient."""
    client = DumplingClient(settings, transport=transport)
    registry = ToolRegistry()
    for tool in discover_tools(package):
        registry.register(tool.bind(client))

    logger.info(f"Tool discovery complete. Total tools: {len(registry)}")
    if not settings.has_credential:
        logger.warning(f"{API_KEY_ENV} is not set; every tool call will fail until it is provided")
    return registry
