"""Response shapers — trim successful Netlify bodies to what callers need.

Each shaper receives the validated arguments and the decoded success body
and returns the envelope fields (everything except ``success``).  Missing
keys in a remote record come back as ``None``.
"""

from __future__ import annotations

from typing import Any

from netlify_mcp.contracts import CreateSiteFromGitHubRequest, SiteIdRequest

_CREATED_SITE_FIELDS = ("id", "name", "url", "admin_url", "deploy_url", "created_at")
_LISTED_SITE_FIELDS = (
    "id",
    "name",
    "url",
    "admin_url",
    "created_at",
    "updated_at",
    "published_deploy",
)


def _pick(record: Any, fields: tuple[str, ...]) -> dict[str, Any]:
    if not isinstance(record, dict):
        record = {}
    return {key: record.get(key) for key in fields}


def shape_created_site(args: CreateSiteFromGitHubRequest, body: Any) -> dict[str, Any]:
    return {
        "site": _pick(body, _CREATED_SITE_FIELDS),
        "message": f"Site {args.name} created successfully",
    }


def shape_site_list(args: Any, body: Any) -> dict[str, Any]:
    records = body if isinstance(body, list) else []
    sites = [_pick(record, _LISTED_SITE_FIELDS) for record in records]
    return {"sites": sites, "count": len(sites)}


def shape_site(args: SiteIdRequest, body: Any) -> dict[str, Any]:
    """Return the full remote record untouched."""
    return {"site": body}


def shape_deleted_site(args: SiteIdRequest, body: Any) -> dict[str, Any]:
    return {"message": f"Site {args.site_id} deleted successfully"}
