"""Error taxonomy for the Netlify MCP server.

Every error carries typed fields (not just a message string), maps onto
exactly one ``ErrorKind`` and supports ``to_dict()`` for logging.  The
dispatcher catches these and turns them into ``ToolResponse.fail``;
nothing escapes it in a different shape.
"""

from __future__ import annotations

import enum


class ErrorKind(str, enum.Enum):
    """The three caller-facing error classifications."""

    INVALID_PARAMS = "invalid_params"
    INTERNAL_ERROR = "internal_error"
    METHOD_NOT_FOUND = "method_not_found"

    @property
    def code(self) -> int:
        """JSON-RPC error code used on the wire."""
        return _JSONRPC_CODES[self]


_JSONRPC_CODES: dict[ErrorKind, int] = {
    ErrorKind.INVALID_PARAMS: -32602,
    ErrorKind.INTERNAL_ERROR: -32603,
    ErrorKind.METHOD_NOT_FOUND: -32601,
}


class NetlifyMCPError(Exception):
    """Base error for all tool dispatch failures."""

    kind: ErrorKind = ErrorKind.INTERNAL_ERROR

    def __init__(self, message: str, *, detail: dict | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.detail = detail or {}

    def to_dict(self) -> dict:
        return {
            "error": type(self).__name__,
            "kind": self.kind.value,
            "message": self.message,
            **self.detail,
        }

    def __str__(self) -> str:
        return self.message


class ConfigError(NetlifyMCPError):
    """Required configuration is missing or invalid at startup."""


class ToolNotFound(NetlifyMCPError):
    """Requested tool name is not registered."""

    kind = ErrorKind.METHOD_NOT_FOUND

    def __init__(self, tool_name: str, available_tools: list[str]) -> None:
        self.tool_name = tool_name
        self.available_tools = available_tools
        super().__init__(
            f"Unknown tool: {tool_name}",
            detail={"tool_name": tool_name, "available_tools": available_tools},
        )


class InvalidParams(NetlifyMCPError):
    """Caller supplied missing or malformed arguments, or a missing site."""

    kind = ErrorKind.INVALID_PARAMS

    def __init__(self, message: str, *, field: str | None = None) -> None:
        self.field = field
        super().__init__(message, detail={"field": field} if field else None)


class InternalError(NetlifyMCPError):
    """The remote call failed for a reason not attributable to the caller."""

    kind = ErrorKind.INTERNAL_ERROR

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        self.status_code = status_code
        super().__init__(
            message,
            detail={"status_code": status_code} if status_code is not None else None,
        )
