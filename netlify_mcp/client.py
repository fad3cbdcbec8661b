"""Netlify API client — execute ``OutboundRequest``s over a shared httpx client.

The client is deliberately thin: it attaches the bearer token, enforces the
timeout and reports what happened as a ``RemoteResult``.  It never raises
for HTTP status codes and never decides what a status *means*; that is the
dispatcher's job.
"""

from __future__ import annotations

import logging
import time
from typing import Any

import httpx

from netlify_mcp.config import VERSION, Settings
from netlify_mcp.contracts import (
    OutboundRequest,
    RemoteFailure,
    RemoteResult,
    RemoteSuccess,
)

logger = logging.getLogger(__name__)


class NetlifyClient:
    """Stateless executor bound to one base URL and one credential.

    Usage::

        client = NetlifyClient(settings)
        result = await client.execute(OutboundRequest(method="GET", path="/sites"))
        await client.aclose()

    ``transport`` is forwarded to ``httpx.AsyncClient`` (tests pass an
    ``httpx.MockTransport``).
    """

    def __init__(
        self,
        settings: Settings,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._base_url = settings.NETLIFY_API_URL
        self._timeout = settings.NETLIFY_TIMEOUT_SECONDS
        self._headers = {
            "Authorization": f"Bearer {settings.NETLIFY_ACCESS_TOKEN}",
            "Content-Type": "application/json",
            "Accept": "application/json",
            "User-Agent": f"netlify-mcp-server/{VERSION}",
        }
        self._transport = transport
        self._http_client: httpx.AsyncClient | None = None

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def timeout(self) -> float:
        return self._timeout

    def _get_client(self) -> httpx.AsyncClient:
        """Return (or create) the shared httpx client."""
        if self._http_client is None:
            self._http_client = httpx.AsyncClient(
                base_url=self._base_url,
                headers=self._headers,
                timeout=self._timeout,
                transport=self._transport,
            )
        return self._http_client

    async def aclose(self) -> None:
        """Close the shared HTTP client.  Called during server shutdown."""
        if self._http_client is not None:
            await self._http_client.aclose()
            self._http_client = None

    async def __aenter__(self) -> NetlifyClient:
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def execute(self, request: OutboundRequest) -> RemoteResult:
        """Perform exactly one HTTP round trip for *request*."""
        client = self._get_client()
        start = time.perf_counter()
        try:
            response = await client.request(
                request.method,
                request.path,
                params=request.params or None,
                json=request.json_body,
            )
        except httpx.TimeoutException:
            logger.warning(
                "[netlify:http] %s %s  TIMEOUT after %.0fs",
                request.method, request.path, self._timeout,
            )
            return RemoteFailure(
                transport_error=f"Request timed out after {self._timeout:g}s"
            )
        except httpx.HTTPError as exc:
            logger.warning(
                "[netlify:http] %s %s  TRANSPORT ERROR: %s",
                request.method, request.path, exc,
            )
            return RemoteFailure(transport_error=str(exc) or type(exc).__name__)

        elapsed = int((time.perf_counter() - start) * 1000)
        logger.debug(
            "[netlify:http] %s %s  -> %d (%dms)",
            request.method, request.path, response.status_code, elapsed,
        )
        body = _decode_body(response)
        if response.is_success:
            return RemoteSuccess(status_code=response.status_code, body=body)
        return RemoteFailure(status_code=response.status_code, body=body)


def _decode_body(response: httpx.Response) -> Any:
    """Parse JSON when present; keep non-JSON text; ``None`` for empty bodies."""
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return response.text
