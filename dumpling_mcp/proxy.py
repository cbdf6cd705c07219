"""
Simple proxy tools.

Every Dumpling AI tool follows the same shape: check a precondition, POST the
validated arguments to one endpoint, project part of the JSON answer into
text. ProxyTool captures that shape once; the modules under tools/ only
declare descriptors.
"""

import json
import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional, Tuple

from .base import (
    DumplingToolError,
    MalformedResponse,
    PreconditionFailed,
    ToolDefinition,
    ToolParameter,
    ToolResult,
)
from .client import DumplingClient

logger = logging.getLogger(__name__)

Projector = Callable[[Dict[str, Any]], Any]
Precondition = Callable[[Dict[str, Any]], Optional[str]]


# ============== Projection helpers ==============


def pick(data: Dict[str, Any], *fields: str) -> Dict[str, Any]:
    """
    Select fields from `data` in the given order.

    A trailing "?" marks a field optional: it is left out when the upstream
    answer lacks it (or sends null). A missing or null required field is a
    malformed response.
    """
    projected: Dict[str, Any] = {}
    for entry in fields:
        optional = entry.endswith("?")
        key = entry[:-1] if optional else entry
        if data.get(key) is None:
            if optional:
                continue
            raise MalformedResponse(f"Response is missing required field '{key}'")
        projected[key] = data[key]
    return projected


def passthrough(data: Dict[str, Any]) -> Dict[str, Any]:
    return data


def fields(*names: str) -> Projector:
    """Projector that picks `names` (see pick)."""
    def project(data: Dict[str, Any]) -> Dict[str, Any]:
        return pick(data, *names)
    return project


def require_any(*names: str) -> Precondition:
    """Precondition satisfied when at least one of `names` is present."""
    if len(names) == 2:
        message = f"Either {names[0]} or {names[1]} is required"
    else:
        message = f"One of {', '.join(names)} is required"

    def check(arguments: Dict[str, Any]) -> Optional[str]:
        if any(arguments.get(name) for name in names):
            return None
        return message
    return check


def render(payload: Any) -> str:
    """Plain strings pass through; everything else becomes indented JSON."""
    if isinstance(payload, str):
        return payload
    return json.dumps(payload, indent=2, ensure_ascii=False)


# ============== ProxyTool ==============


@dataclass(frozen=True)
class ProxyTool:
    """Declarative description of one Dumpling AI endpoint exposed as a tool."""
    name: str
    description: str
    action: str
    parameters: Tuple[ToolParameter, ...]
    project: Projector = passthrough
    precondition: Optional[Precondition] = None
    category: str = "general"
    path: Optional[str] = None

    @property
    def endpoint_path(self) -> str:
        return self.path or self.name

    async def execute(self, client: DumplingClient, arguments: Dict[str, Any]) -> str:
        """
        Run the request for already-validated arguments and return the text
        payload. Raises DumplingToolError subclasses on failure.
        """
        if self.precondition is not None:
            violation = self.precondition(arguments)
            if violation:
                raise PreconditionFailed(violation, tool_name=self.name)

        data = await client.post(
            self.endpoint_path,
            dict(arguments),
            action=self.action,
            tool_name=self.name,
        )

        try:
            payload = self.project(data)
        except MalformedResponse as e:
            raise MalformedResponse(f"Failed to {self.action}: {e.message}", tool_name=self.name) from e
        except (KeyError, TypeError, AttributeError) as e:
            raise MalformedResponse(
                f"Failed to {self.action}: unexpected response shape ({e!r})",
                tool_name=self.name,
            ) from e
        return render(payload)

    def bind(self, client: DumplingClient) -> ToolDefinition:
        """Produce the registry definition whose handler talks through `client`."""

        async def handler(arguments: Dict[str, Any]) -> ToolResult:
            logger.info(f"{self.name} called with: {sorted(arguments)}")
            try:
                text = await self.execute(client, arguments)
            except DumplingToolError as e:
                logger.error(f"{e.error_type} in {self.name}: {e.message}")
                return ToolResult.from_error(self.name, e)
            except Exception as e:
                logger.exception(f"Unexpected error in {self.name}")
                return ToolResult.failure(self.name, str(e), "unexpected")
            logger.info(f"{self.name} succeeded ({len(text)} chars)")
            return ToolResult.text(self.name, text)

        return ToolDefinition(
            name=self.name,
            description=self.description,
            parameters=self.parameters,
            handler=handler,
            category=self.category,
        )
