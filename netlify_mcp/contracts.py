"""Tool contracts — Pydantic models for arguments, requests and responses.

Every tool call flows through these models:

* per-tool request models validate the caller's raw arguments,
* ``OutboundRequest`` is the exact HTTP call a builder derives from them,
* ``RemoteSuccess`` / ``RemoteFailure`` is what the API client reports back,
* ``ToolResponse`` is the single envelope the dispatcher returns.

All models are frozen (immutable after creation).
"""

from __future__ import annotations

import re
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, StrictInt, field_validator

from netlify_mcp.errors import ErrorKind

MAX_PER_PAGE = 100
DEFAULT_BRANCH = "main"

_REPO_RE = re.compile(r"^[\w.-]+/[\w.-]+$")

_ARGS_CONFIG = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")


# ---------------------------------------------------------------------------
# Per-tool request models
# ---------------------------------------------------------------------------


class CreateSiteFromGitHubRequest(BaseModel):
    """Request schema for the ``createSiteFromGitHub`` tool."""

    model_config = _ARGS_CONFIG

    name: str = Field(..., min_length=1, description="Name for the new site")
    repo: str = Field(
        ..., min_length=1, description="GitHub repository in format owner/repo"
    )
    build_command: str = Field(
        ..., alias="buildCommand", min_length=1, description="Build command to run"
    )
    publish_dir: str = Field(
        ...,
        alias="publishDir",
        min_length=1,
        description="Directory containing the built files to publish",
    )
    branch: str = Field(
        default=DEFAULT_BRANCH, min_length=1, description="Branch to deploy from"
    )
    env_vars: dict[str, str] | None = Field(
        default=None,
        alias="envVars",
        description="Build environment variables (name to value)",
    )

    @field_validator("branch", mode="before")
    @classmethod
    def _default_branch(cls, value: Any) -> Any:
        return value or DEFAULT_BRANCH

    @field_validator("repo")
    @classmethod
    def _repo_format(cls, value: str) -> str:
        if not _REPO_RE.match(value):
            raise ValueError("must be in the format owner/repo")
        return value


class ListSitesRequest(BaseModel):
    """Request schema for the ``listSites`` tool.

    ``perPage`` above ``MAX_PER_PAGE`` is clamped, never rejected.
    """

    model_config = _ARGS_CONFIG

    filter: Literal["all", "owner", "guest"] | None = Field(
        default=None, description="Filter sites by access type"
    )
    page: StrictInt | None = Field(
        default=None, ge=1, description="Page number (1-based)"
    )
    per_page: StrictInt | None = Field(
        default=None,
        alias="perPage",
        ge=1,
        description=f"Sites per page (values above {MAX_PER_PAGE} are clamped)",
    )

    @field_validator("per_page")
    @classmethod
    def _clamp_per_page(cls, value: int | None) -> int | None:
        if value is None:
            return None
        return min(value, MAX_PER_PAGE)


class SiteIdRequest(BaseModel):
    """Request schema for ``getSite`` and ``deleteSite``.

    ``siteId`` may be the opaque site ID or the site name; the API accepts
    both in the same path slot.
    """

    model_config = _ARGS_CONFIG

    site_id: str = Field(
        ..., alias="siteId", min_length=1, description="ID or name of the site"
    )

    @field_validator("site_id")
    @classmethod
    def _single_segment(cls, value: str) -> str:
        if value in (".", ".."):
            raise ValueError("must not be a dot segment")
        return value


# ---------------------------------------------------------------------------
# Wire-level values
# ---------------------------------------------------------------------------


class OutboundRequest(BaseModel):
    """One HTTP call against the Netlify API, relative to the base URL."""

    model_config = ConfigDict(frozen=True)

    method: Literal["GET", "POST", "DELETE"]
    path: str
    params: dict[str, Any] = Field(default_factory=dict)
    json_body: dict[str, Any] | None = None


class RemoteSuccess(BaseModel):
    """A completed call with a 2xx status."""

    model_config = ConfigDict(frozen=True)

    status_code: int
    body: Any = None


class RemoteFailure(BaseModel):
    """A non-2xx response, or a call that never produced a response."""

    model_config = ConfigDict(frozen=True)

    status_code: int | None = None
    body: Any = None
    transport_error: str | None = None


RemoteResult = RemoteSuccess | RemoteFailure


# ---------------------------------------------------------------------------
# Envelope
# ---------------------------------------------------------------------------


class ToolResponse(BaseModel):
    """Structured result of one tool dispatch.

    Use the ``ok`` / ``fail`` factory class methods for clean construction.
    """

    model_config = ConfigDict(frozen=True)

    success: bool
    data: dict[str, Any] = Field(default_factory=dict)
    error: str | None = None
    kind: ErrorKind | None = None
    duration_ms: int = 0

    @classmethod
    def ok(cls, data: dict[str, Any], *, duration_ms: int = 0) -> ToolResponse:
        """Create a successful response."""
        return cls(success=True, data=data, duration_ms=duration_ms)

    @classmethod
    def fail(
        cls, kind: ErrorKind, error: str, *, duration_ms: int = 0
    ) -> ToolResponse:
        """Create a failure response."""
        return cls(success=False, kind=kind, error=error, duration_ms=duration_ms)

    def envelope(self) -> dict[str, Any]:
        """Caller-facing payload: ``{"success": true, ...}`` on success."""
        if self.success:
            return {"success": True, **self.data}
        return {"success": False, "error": self.error}
