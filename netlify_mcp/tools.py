"""The closed set of Netlify tools and the default registry."""

from __future__ import annotations

import enum

from netlify_mcp.builders import (
    build_create_site,
    build_delete_site,
    build_get_site,
    build_list_sites,
)
from netlify_mcp.contracts import (
    CreateSiteFromGitHubRequest,
    ListSitesRequest,
    SiteIdRequest,
)
from netlify_mcp.registry import Registry, ToolSpec
from netlify_mcp.shapers import (
    shape_created_site,
    shape_deleted_site,
    shape_site,
    shape_site_list,
)


class ToolName(str, enum.Enum):
    CREATE_SITE_FROM_GITHUB = "createSiteFromGitHub"
    LIST_SITES = "listSites"
    GET_SITE = "getSite"
    DELETE_SITE = "deleteSite"


# ── Tool catalogue ────────────────────────────────────────────────────────

TOOL_SPECS: tuple[ToolSpec, ...] = (
    ToolSpec(
        name=ToolName.CREATE_SITE_FROM_GITHUB.value,
        description=(
            "Create a new Netlify site from a GitHub repository. The site "
            "builds with buildCommand and publishes publishDir from the "
            "given branch (default: main)."
        ),
        request_model=CreateSiteFromGitHubRequest,
        build=build_create_site,
        shape=shape_created_site,
        operation="create site",
    ),
    ToolSpec(
        name=ToolName.LIST_SITES.value,
        description=(
            "List Netlify sites, optionally filtered by access type and "
            "paginated (at most 100 sites per page)."
        ),
        request_model=ListSitesRequest,
        build=build_list_sites,
        shape=shape_site_list,
        operation="list sites",
    ),
    ToolSpec(
        name=ToolName.GET_SITE.value,
        description="Get details of a specific site by ID or name.",
        request_model=SiteIdRequest,
        build=build_get_site,
        shape=shape_site,
        operation="get site",
        not_found_is_invalid=True,
    ),
    ToolSpec(
        name=ToolName.DELETE_SITE.value,
        description="Delete a site by ID or name. This cannot be undone.",
        request_model=SiteIdRequest,
        build=build_delete_site,
        shape=shape_deleted_site,
        operation="delete site",
        not_found_is_invalid=True,
    ),
)


def build_registry() -> Registry:
    """Return a registry holding every tool in ``TOOL_SPECS``."""
    registry = Registry()
    for spec in TOOL_SPECS:
        registry.register(spec)
    return registry
