"""
MCP Tool Base Classes

Parameter schemas, tool definitions, the standard result shape and the error
taxonomy shared by every Dumpling AI tool.
"""

from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, Dict, List, Optional, Tuple
from urllib.parse import urlparse


# ============== Errors ==============


class DumplingToolError(Exception):
    """Base exception for tool errors. Converted to a failed ToolResult."""

    error_type = "execution"

    def __init__(self, message: str, tool_name: str = None, details: Dict = None):
        self.message = message
        self.tool_name = tool_name
        self.details = details or {}
        super().__init__(self.message)


class InvalidArguments(DumplingToolError):
    """Raised when arguments do not match the tool's parameter schema."""

    error_type = "invalid_arguments"


class PreconditionFailed(DumplingToolError):
    """Raised when a cross-field precondition is not satisfied."""

    error_type = "precondition_failed"


class MissingCredential(DumplingToolError):
    """Raised when the API key is not configured."""

    error_type = "missing_credential"


class UpstreamError(DumplingToolError):
    """Raised when the Dumpling AI API answers with a non-success status."""

    error_type = "upstream_error"

    def __init__(self, message: str, status_code: int, body: str, tool_name: str = None):
        super().__init__(
            message,
            tool_name=tool_name,
            details={"status_code": status_code, "body": body},
        )
        self.status_code = status_code
        self.body = body


class TransportFailure(DumplingToolError):
    """Raised when the request never produced an HTTP response."""

    error_type = "transport_failure"


class MalformedResponse(DumplingToolError):
    """Raised when a success response cannot be parsed or projected."""

    error_type = "malformed_response"


class DuplicateToolError(Exception):
    """Raised at startup when two tools share a name."""


# ============== Schema ==============


_JSON_TYPES: Dict[str, Tuple[type, ...]] = {
    "string": (str,),
    "integer": (int,),
    "number": (int, float),
    "boolean": (bool,),
    "array": (list, tuple),
    "object": (dict,),
}


@dataclass(frozen=True)
class ToolParameter:
    """Definition of a tool parameter."""
    name: str
    type: str
    description: str = ""
    required: bool = False
    enum: Optional[Tuple[str, ...]] = None
    format: Optional[str] = None
    items: Optional["ToolParameter"] = None
    properties: Tuple["ToolParameter", ...] = ()

    def to_json_schema(self) -> Dict[str, Any]:
        """Render this parameter as a JSON schema fragment."""
        schema: Dict[str, Any] = {"type": self.type}
        if self.description:
            schema["description"] = self.description
        if self.enum:
            schema["enum"] = list(self.enum)
        if self.format:
            schema["format"] = self.format
        if self.type == "array" and self.items is not None:
            schema["items"] = self.items.to_json_schema()
        if self.type == "object" and self.properties:
            schema["properties"] = {p.name: p.to_json_schema() for p in self.properties}
            required = [p.name for p in self.properties if p.required]
            if required:
                schema["required"] = required
        return schema


def _type_name(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    for name, types in _JSON_TYPES.items():
        if isinstance(value, types):
            return name
    return type(value).__name__


def _is_url(value: str) -> bool:
    parsed = urlparse(value)
    return parsed.scheme in ("http", "https") and bool(parsed.netloc)


def _check_value(param: ToolParameter, value: Any, path: str) -> Any:
    """Check one present value against its parameter. Returns the cleaned value."""
    expected = _JSON_TYPES.get(param.type)
    if expected is None:
        raise ValueError(f"Unsupported parameter type '{param.type}' for {path}")

    # bool is an int subclass; JSON keeps them apart
    if isinstance(value, bool) and param.type != "boolean":
        ok = False
    elif param.type == "integer" and isinstance(value, float) and value.is_integer():
        # JSON clients may send 2.0 for 2
        value = int(value)
        ok = True
    else:
        ok = isinstance(value, expected)
    if not ok:
        raise InvalidArguments(
            f"Invalid type for parameter '{path}': expected {param.type}, got {_type_name(value)}"
        )

    if param.enum and value not in param.enum:
        raise InvalidArguments(
            f"Invalid value for parameter '{path}': expected one of {list(param.enum)}, got {value!r}"
        )

    if param.format == "uri" and not _is_url(value):
        raise InvalidArguments(f"Invalid URL for parameter '{path}': {value!r}")

    if param.type == "array":
        if param.items is None:
            return list(value)
        return [
            _check_value(param.items, item, f"{path}[{index}]")
            for index, item in enumerate(value)
        ]

    if param.type == "object" and param.properties:
        return _check_members(param.properties, value, prefix=f"{path}.")

    return value


def _check_members(parameters: Tuple[ToolParameter, ...], arguments: Dict[str, Any], prefix: str = "") -> Dict[str, Any]:
    validated: Dict[str, Any] = {}
    for param in parameters:
        path = f"{prefix}{param.name}"
        value = arguments.get(param.name)
        if value is None:
            if param.required:
                raise InvalidArguments(f"Missing required parameter: {path}")
            continue
        validated[param.name] = _check_value(param, value, path)
    return validated


def validate_arguments(parameters: List[ToolParameter], arguments: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    """
    Validate call arguments against a parameter list.

    Parameters are checked in declaration order and the first violation is
    raised as InvalidArguments. Unknown keys are dropped, None counts as
    absent, and absent optional parameters are left out of the result.
    """
    if arguments is None:
        arguments = {}
    if not isinstance(arguments, dict):
        raise InvalidArguments(f"Arguments must be an object, got {_type_name(arguments)}")
    return _check_members(tuple(parameters), arguments)


# ============== Definitions & Results ==============


@dataclass
class ToolResult:
    """Outcome of one tool invocation."""
    success: bool
    tool: str
    content: List[Dict[str, str]] = field(default_factory=list)
    error: Optional[str] = None
    error_type: Optional[str] = None

    @classmethod
    def text(cls, tool: str, text: str) -> "ToolResult":
        return cls(success=True, tool=tool, content=[{"type": "text", "text": text}])

    @classmethod
    def failure(cls, tool: str, error: str, error_type: str) -> "ToolResult":
        return cls(success=False, tool=tool, error=error, error_type=error_type)

    @classmethod
    def from_error(cls, tool: str, exc: DumplingToolError) -> "ToolResult":
        return cls.failure(tool, exc.message, exc.error_type)

    @property
    def text_content(self) -> str:
        return "\n".join(block["text"] for block in self.content if block.get("type") == "text")

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"success": self.success, "tool": self.tool}
        if self.success:
            data["content"] = self.content
        else:
            data["error"] = self.error
            data["error_type"] = self.error_type
        return data


ToolHandler = Callable[[Dict[str, Any]], Awaitable[ToolResult]]


@dataclass(frozen=True)
class ToolDefinition:
    """Complete definition of an MCP tool."""
    name: str
    description: str
    parameters: Tuple[ToolParameter, ...] = ()
    handler: Optional[ToolHandler] = None
    category: str = "general"

    def input_schema(self) -> Dict[str, Any]:
        """JSON schema for the tool's arguments, as advertised to MCP clients."""
        schema: Dict[str, Any] = {
            "type": "object",
            "properties": {p.name: p.to_json_schema() for p in self.parameters},
        }
        required = [p.name for p in self.parameters if p.required]
        if required:
            schema["required"] = required
        return schema
