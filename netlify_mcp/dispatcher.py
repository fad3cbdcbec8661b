"""Tool dispatch — one call in, one ``ToolResponse`` out.

Every call walks the same fixed sequence::

    lookup -> validate -> build request -> call API -> shape | normalize

An unknown name or invalid arguments stop the call before any request is
built.  Remote failures are reported once; nothing is retried.  The three
error kinds are fully resolved here and returned, never raised.
"""

from __future__ import annotations

import logging
import time
from typing import Any, Protocol

from netlify_mcp.contracts import OutboundRequest, RemoteFailure, RemoteResult, ToolResponse
from netlify_mcp.errors import InternalError, InvalidParams, NetlifyMCPError
from netlify_mcp.normalizer import normalize
from netlify_mcp.registry import Registry, ToolSpec

logger = logging.getLogger(__name__)


class RequestExecutor(Protocol):
    async def execute(self, request: OutboundRequest) -> RemoteResult: ...


class Dispatcher:
    """Routes tool calls through the registry to the Netlify API."""

    def __init__(self, registry: Registry, client: RequestExecutor) -> None:
        self._registry = registry
        self._client = client

    @property
    def registry(self) -> Registry:
        return self._registry

    async def dispatch(self, name: str, arguments: dict[str, Any] | None) -> ToolResponse:
        """Serve one tool call and return its envelope."""
        start = time.perf_counter()
        logger.info("[mcp:call] %s  %s", name, _summarise(arguments or {}))

        try:
            spec = self._registry.lookup(name)
            args = spec.validate(arguments)
            result = await self._client.execute(spec.build(args))
            data = self._resolve(spec, args, result)
        except NetlifyMCPError as exc:
            response = ToolResponse.fail(
                exc.kind, exc.message, duration_ms=_elapsed_ms(start)
            )
        else:
            response = ToolResponse.ok(data, duration_ms=_elapsed_ms(start))

        _log_result(name, response)
        return response

    @staticmethod
    def _resolve(spec: ToolSpec, args: Any, result: RemoteResult) -> dict[str, Any]:
        if not isinstance(result, RemoteFailure):
            return spec.shape(args, result.body)

        if result.status_code == 404 and spec.not_found_is_invalid:
            raise InvalidParams(f"Site not found: {args.site_id}", field="siteId")

        raise InternalError(
            f"Failed to {spec.operation}: {normalize(result)}",
            status_code=result.status_code,
        )


# -----------------------------------------------------------------------
# Helpers
# -----------------------------------------------------------------------


def _elapsed_ms(start: float) -> int:
    return int((time.perf_counter() - start) * 1000)


def _summarise(args: Any, max_len: int = 200) -> str:
    """One-line summary of tool arguments (env var values are masked)."""
    if isinstance(args, dict):
        raw = ", ".join(
            f"{k}={sorted(v) if k == 'envVars' and isinstance(v, dict) else v!r}"
            for k, v in args.items()
        )
    else:
        raw = repr(args)
    return raw[:max_len] + ("…" if len(raw) > max_len else "")


def _log_result(name: str, response: ToolResponse) -> None:
    if response.success:
        logger.info("[mcp:result] %s  OK (%dms)", name, response.duration_ms)
    else:
        logger.warning(
            "[mcp:result] %s  %s (%dms): %s",
            name, response.kind.name, response.duration_ms, response.error,
        )
