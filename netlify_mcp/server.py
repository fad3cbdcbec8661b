"""MCP Server wiring — list_tools, call_tool, and stdio entry point."""

from __future__ import annotations

import asyncio
import json
import logging
import sys

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.shared.exceptions import McpError
from mcp.types import (
    CallToolRequest,
    CallToolResult,
    ErrorData,
    ServerResult,
    TextContent,
    Tool,
)

from netlify_mcp.client import NetlifyClient
from netlify_mcp.config import VERSION, Settings, load_settings
from netlify_mcp.contracts import ToolResponse
from netlify_mcp.dispatcher import Dispatcher
from netlify_mcp.errors import ConfigError, ErrorKind
from netlify_mcp.tools import build_registry

logger = logging.getLogger(__name__)

SERVER_NAME = "netlify-mcp-server"


# ── Server instance ───────────────────────────────────────────────────────


def create_server(dispatcher: Dispatcher) -> Server:
    """Build an MCP ``Server`` whose tools are served by *dispatcher*."""
    server = Server(SERVER_NAME, version=VERSION)

    @server.list_tools()
    async def list_tools() -> list[Tool]:
        """Declare all available tools."""
        return [Tool(**defn) for defn in dispatcher.registry.list_tools()]

    async def call_tool(req: CallToolRequest) -> ServerResult:
        """Handle tool invocations by dispatching to the Netlify API."""
        name = req.params.name
        try:
            response = await dispatcher.dispatch(name, req.params.arguments)
        except Exception as exc:
            logger.exception("[mcp:server] unhandled error in %s", name)
            raise McpError(
                ErrorData(code=ErrorKind.INTERNAL_ERROR.code, message=str(exc))
            ) from exc
        return ServerResult(CallToolResult(content=render(response)))

    # Registered raw: McpError must reach the session as a JSON-RPC error
    server.request_handlers[CallToolRequest] = call_tool
    return server


def render(response: ToolResponse) -> list[TextContent]:
    """Serialize a success envelope, or raise the failure as ``McpError``."""
    if not response.success:
        raise McpError(ErrorData(code=response.kind.code, message=response.error))
    text = json.dumps(response.envelope(), indent=2, default=str)
    return [TextContent(type="text", text=text)]


# ── Logging ───────────────────────────────────────────────────────────────


class _PlainFormatter(logging.Formatter):
    """Plain-text formatter for stderr logs (stdout carries the protocol)."""

    def format(self, record: logging.LogRecord) -> str:
        ts = self.formatTime(record, "%H:%M:%S")
        name = record.name.split(".")[-1][:12]
        msg = record.getMessage()
        line = f"{ts} {record.levelname:<8s} [{name:>12s}] {msg}"
        if record.exc_info:
            line = f"{line}\n{self.formatException(record.exc_info)}"
        return line


def configure_logging(level: str = "INFO") -> None:
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(_PlainFormatter())
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO), handlers=[handler], force=True
    )
    # Quiet noisy loggers
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


# ── Entry point ───────────────────────────────────────────────────────────


async def main(settings: Settings | None = None) -> None:
    """Run the MCP server over stdio until the client disconnects."""
    settings = settings or load_settings()
    async with NetlifyClient(settings) as client:
        server = create_server(Dispatcher(build_registry(), client))
        async with stdio_server() as (read_stream, write_stream):
            logger.info("Netlify MCP server running on stdio")
            await server.run(
                read_stream,
                write_stream,
                server.create_initialization_options(),
            )


def run() -> None:
    """Console-script entry point: load config, configure logging, serve."""
    try:
        settings = load_settings()
    except ConfigError as exc:
        print(f"[config] FATAL: {exc}", file=sys.stderr)
        sys.exit(1)

    configure_logging(settings.LOG_LEVEL)
    try:
        asyncio.run(main(settings))
    except KeyboardInterrupt:
        logger.info("Interrupted, shutting down")
