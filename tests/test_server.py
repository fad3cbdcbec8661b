"""Tests for netlify_mcp.server — envelope rendering and MCP wiring."""

import json
from unittest.mock import AsyncMock, patch

import pytest
from mcp.shared.exceptions import McpError
from mcp.types import (
    CallToolRequest,
    CallToolRequestParams,
    CallToolResult,
    ListToolsRequest,
)

from netlify_mcp.contracts import RemoteFailure, RemoteSuccess, ToolResponse
from netlify_mcp.errors import ConfigError, ErrorKind
from netlify_mcp.server import create_server, render, run


class TestRender:
    def test_success_is_pretty_json(self):
        response = ToolResponse.ok({"message": "Site abc deleted successfully"})
        (content,) = render(response)
        assert content.type == "text"
        assert json.loads(content.text) == {
            "success": True,
            "message": "Site abc deleted successfully",
        }
        assert "\n  " in content.text

    @pytest.mark.parametrize(
        "kind, code",
        [
            (ErrorKind.INVALID_PARAMS, -32602),
            (ErrorKind.INTERNAL_ERROR, -32603),
            (ErrorKind.METHOD_NOT_FOUND, -32601),
        ],
    )
    def test_failure_raises_mcp_error(self, kind, code):
        with pytest.raises(McpError) as exc_info:
            render(ToolResponse.fail(kind, "boom"))
        assert exc_info.value.error.code == code
        assert exc_info.value.error.message == "boom"


class TestCreateServer:
    def test_registers_tool_handlers(self, dispatcher):
        server = create_server(dispatcher)
        assert ListToolsRequest in server.request_handlers
        assert CallToolRequest in server.request_handlers


def _call(name, arguments):
    return CallToolRequest(
        method="tools/call",
        params=CallToolRequestParams(name=name, arguments=arguments),
    )


@pytest.mark.asyncio
class TestCallToolHandler:
    """Drives the registered CallToolRequest handler the way the session does."""

    async def _handle(self, dispatcher, name, arguments):
        handler = create_server(dispatcher).request_handlers[CallToolRequest]
        return await handler(_call(name, arguments))

    async def test_success_is_call_tool_result(self, dispatcher, executor):
        executor.execute.return_value = RemoteSuccess(status_code=204, body=None)
        result = await self._handle(dispatcher, "deleteSite", {"siteId": "abc"})
        assert isinstance(result.root, CallToolResult)
        assert not result.root.isError
        assert json.loads(result.root.content[0].text) == {
            "success": True,
            "message": "Site abc deleted successfully",
        }

    async def test_unknown_tool_is_method_not_found(self, dispatcher, executor):
        with pytest.raises(McpError) as exc_info:
            await self._handle(dispatcher, "noSuchTool", {})
        assert exc_info.value.error.code == -32601
        assert exc_info.value.error.message == "Unknown tool: noSuchTool"
        executor.execute.assert_not_awaited()

    async def test_missing_argument_is_invalid_params(self, dispatcher, executor):
        with pytest.raises(McpError) as exc_info:
            await self._handle(dispatcher, "getSite", {})
        assert exc_info.value.error.code == -32602
        assert exc_info.value.error.message == "Missing required parameter: siteId"
        executor.execute.assert_not_awaited()

    async def test_remote_failure_is_internal_error(self, dispatcher, executor):
        executor.execute.return_value = RemoteFailure(
            status_code=500, body={"message": "boom"}
        )
        with pytest.raises(McpError) as exc_info:
            await self._handle(dispatcher, "listSites", None)
        assert exc_info.value.error.code == -32603
        assert exc_info.value.error.message == "Failed to list sites: boom"

    async def test_unexpected_exception_is_internal_error(self, dispatcher, executor):
        executor.execute.side_effect = RuntimeError("socket closed")
        with pytest.raises(McpError) as exc_info:
            await self._handle(dispatcher, "getSite", {"siteId": "abc"})
        assert exc_info.value.error.code == -32603
        assert exc_info.value.error.message == "socket closed"


class TestRun:
    def test_missing_token_exits(self, capsys):
        with patch(
            "netlify_mcp.server.load_settings",
            side_effect=ConfigError("NETLIFY_ACCESS_TOKEN environment variable is required"),
        ):
            with pytest.raises(SystemExit) as exc_info:
                run()
        assert exc_info.value.code == 1
        assert "FATAL" in capsys.readouterr().err

    def test_runs_main_with_loaded_settings(self, settings):
        with patch("netlify_mcp.server.load_settings", return_value=settings), \
                patch("netlify_mcp.server.configure_logging") as configure, \
                patch("netlify_mcp.server.main", new_callable=AsyncMock) as main:
            run()
        configure.assert_called_once_with("INFO")
        main.assert_awaited_once_with(settings)
