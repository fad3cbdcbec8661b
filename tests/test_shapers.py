"""Tests for netlify_mcp.shapers."""

from netlify_mcp.contracts import CreateSiteFromGitHubRequest, SiteIdRequest
from netlify_mcp.shapers import (
    shape_created_site,
    shape_deleted_site,
    shape_site,
    shape_site_list,
)

CREATE_ARGS = CreateSiteFromGitHubRequest.model_validate(
    {
        "name": "my-site",
        "repo": "octocat/hello-world",
        "buildCommand": "npm run build",
        "publishDir": "dist",
    }
)


class TestShapeCreatedSite:
    def test_picks_summary_fields(self, site_record):
        data = shape_created_site(CREATE_ARGS, site_record)
        assert data["site"] == {
            "id": site_record["id"],
            "name": "my-site",
            "url": site_record["url"],
            "admin_url": site_record["admin_url"],
            "deploy_url": site_record["deploy_url"],
            "created_at": site_record["created_at"],
        }
        assert data["message"] == "Site my-site created successfully"

    def test_missing_fields_are_none(self):
        data = shape_created_site(CREATE_ARGS, {"id": "x"})
        assert data["site"]["id"] == "x"
        assert data["site"]["deploy_url"] is None


class TestShapeSiteList:
    def test_picks_list_fields(self, site_record):
        data = shape_site_list(None, [site_record, {**site_record, "id": "other"}])
        assert data["count"] == 2
        first = data["sites"][0]
        assert set(first) == {
            "id", "name", "url", "admin_url", "created_at", "updated_at", "published_deploy",
        }
        assert first["published_deploy"] == {"id": "d1", "state": "ready"}
        assert "build_settings" not in first
        assert data["sites"][1]["id"] == "other"

    def test_empty(self):
        assert shape_site_list(None, []) == {"sites": [], "count": 0}

    def test_non_list_body(self):
        assert shape_site_list(None, None) == {"sites": [], "count": 0}


class TestShapeSite:
    def test_full_record_passthrough(self, site_record):
        data = shape_site(SiteIdRequest(siteId="my-site"), site_record)
        assert data == {"site": site_record}


class TestShapeDeletedSite:
    def test_message(self):
        data = shape_deleted_site(SiteIdRequest(siteId="abc-123"), None)
        assert data == {"message": "Site abc-123 deleted successfully"}
