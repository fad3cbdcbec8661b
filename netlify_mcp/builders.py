"""Request builders: validated tool arguments to ``OutboundRequest``.

Pure and deterministic: no I/O, no configuration lookups.  Query
parameters are only emitted when they differ from the API default so the
server-side defaults stay in charge.
"""

from __future__ import annotations

from typing import Any
from urllib.parse import quote

from netlify_mcp.contracts import (
    CreateSiteFromGitHubRequest,
    ListSitesRequest,
    OutboundRequest,
    SiteIdRequest,
)


def _site_path(site_id: str) -> str:
    return f"/sites/{quote(site_id, safe='')}"


def build_create_site(args: CreateSiteFromGitHubRequest) -> OutboundRequest:
    """``POST /sites`` linked to a GitHub repository."""
    repo: dict[str, Any] = {
        "provider": "github",
        "repo": args.repo,
        "branch": args.branch,
        "cmd": args.build_command,
        "dir": args.publish_dir,
    }
    if args.env_vars is not None:
        repo["env"] = dict(args.env_vars)
    return OutboundRequest(
        method="POST",
        path="/sites",
        json_body={"name": args.name, "repo": repo},
    )


def build_list_sites(args: ListSitesRequest) -> OutboundRequest:
    """``GET /sites`` with only the non-default query parameters."""
    params: dict[str, Any] = {}
    if args.filter is not None and args.filter != "all":
        params["filter"] = args.filter
    if args.page is not None:
        params["page"] = args.page
    if args.per_page is not None:
        params["per_page"] = args.per_page
    return OutboundRequest(method="GET", path="/sites", params=params)


def build_get_site(args: SiteIdRequest) -> OutboundRequest:
    return OutboundRequest(method="GET", path=_site_path(args.site_id))


def build_delete_site(args: SiteIdRequest) -> OutboundRequest:
    return OutboundRequest(method="DELETE", path=_site_path(args.site_id))
