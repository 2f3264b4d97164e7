"""Unit tests for the GitBook transport client."""

import httpx
import pytest

from gitbook_mcp.client import GitBookClient, comments_base_path, content_base_path
from gitbook_mcp.core.errors import GitBookAPIError


class TestPathBuilders:
    """Test published vs change-request path selection."""

    def test_content_published(self):
        assert content_base_path("s1") == "/spaces/s1/content"
        assert content_base_path("s1", None) == "/spaces/s1/content"
        assert content_base_path("s1", "") == "/spaces/s1/content"

    def test_content_change_request(self):
        assert (
            content_base_path("s1", "cr9")
            == "/spaces/s1/change-requests/cr9/content"
        )

    def test_comments_published(self):
        assert comments_base_path("s1") == "/spaces/s1/comments"

    def test_comments_change_request(self):
        assert (
            comments_base_path("s1", "12")
            == "/spaces/s1/change-requests/12/comments"
        )


class TestRequest:
    """Test request construction and response mapping."""

    def test_build_url_without_query(self, client):
        assert client.build_url("/spaces/abc") == "https://api.gitbook.test/v1/spaces/abc"
        assert client.build_url("/spaces/abc", {}) == "https://api.gitbook.test/v1/spaces/abc"

    def test_build_url_with_query(self, client):
        url = client.build_url("/orgs/o1/spaces", {"page": "p2", "limit": "0"})
        assert url == "https://api.gitbook.test/v1/orgs/o1/spaces?page=p2&limit=0"

    def test_trailing_slash_on_base_url(self, config):
        config.api_base_url = "https://api.gitbook.test/v1/"
        assert GitBookClient(config).base_url == "https://api.gitbook.test/v1"

    @pytest.mark.asyncio
    async def test_headers_and_json_body(self, client, api):
        api.respond("PATCH", "/spaces/abc", {"id": "abc", "title": "New"})

        result = await client.request("PATCH", "/spaces/abc", {"title": "New"})

        assert result == {"id": "abc", "title": "New"}
        assert api.last.headers["Authorization"] == "Bearer test-token"
        assert api.last.headers["Content-Type"] == "application/json"
        assert api.last_json() == {"title": "New"}

    @pytest.mark.asyncio
    async def test_no_body_when_none(self, client, api):
        api.respond("POST", "/spaces/abc/duplicate", {"id": "copy"})

        await client.duplicate_space("abc")

        assert api.last.content == b""

    @pytest.mark.asyncio
    async def test_text_response(self, client, api):
        api.respond("GET", "/spaces/abc", text="plain body")

        assert await client.request("GET", "/spaces/abc") == "plain body"

    @pytest.mark.asyncio
    async def test_empty_response(self, client, api):
        api.respond("DELETE", "/spaces/s1/comments/c1", status=204)

        assert await client.delete_comment("s1", "c1") is None
        assert api.last.method == "DELETE"

    @pytest.mark.asyncio
    async def test_error_response(self, client, api):
        api.respond("GET", "/spaces/abc", status=404, text="not found")

        with pytest.raises(GitBookAPIError) as exc_info:
            await client.get_space("abc")

        error = exc_info.value
        assert error.status_code == 404
        assert error.status_text == "Not Found"
        assert error.body == "not found"
        assert error.endpoint == "GET /spaces/abc"

    @pytest.mark.asyncio
    async def test_network_error_propagates(self, config):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        client = GitBookClient(config, transport=httpx.MockTransport(handler))

        with pytest.raises(httpx.ConnectError):
            await client.get_space("abc")


class TestResourceMethods:
    """Test paths and payloads of selected resource methods."""

    @pytest.mark.asyncio
    async def test_search_adds_query_after_pagination(self, client, api):
        api.respond("GET", "/spaces/s1/search", {"items": []})

        await client.search_space_content("s1", "install guide", {"limit": "5"})

        assert api.last.url.params["query"] == "install guide"
        assert api.last.url.params["limit"] == "5"
        assert "page" not in api.last.url.params

    @pytest.mark.asyncio
    async def test_search_does_not_mutate_caller_query(self, client, api):
        api.respond("GET", "/spaces/s1/search", {"items": []})
        query = {"limit": "5"}

        await client.search_space_content("s1", "x", query)

        assert query == {"limit": "5"}

    @pytest.mark.asyncio
    async def test_page_links_unwrapped(self, client, api):
        api.respond(
            "GET",
            "/spaces/s1/change-requests/7/content/page/p1/links",
            {"links": [{"url": "https://example.com"}]},
        )

        links = await client.get_page_links("s1", "p1", "7")

        assert links == [{"url": "https://example.com"}]

    @pytest.mark.asyncio
    async def test_backlinks_default_to_empty(self, client, api):
        api.respond("GET", "/spaces/s1/content/page/p1/backlinks", {})

        assert await client.get_page_backlinks("s1", "p1") == []

    @pytest.mark.asyncio
    async def test_requested_reviewers_unwrapped(self, client, api):
        api.respond(
            "GET",
            "/spaces/s1/change-requests/3/requested-reviewers",
            {"items": [{"id": "u1"}]},
        )

        assert await client.list_requested_reviewers("s1", "3") == [{"id": "u1"}]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("body", ["", "not json"])
    async def test_list_unwrapping_tolerates_text_body(self, client, api, body):
        api.respond("GET", "/spaces/s1/content/page/p1/links", text=body)
        api.respond("GET", "/spaces/s1/content/page/p1/backlinks", text=body)
        api.respond(
            "GET", "/spaces/s1/change-requests/3/requested-reviewers", text=body
        )

        assert await client.get_page_links("s1", "p1") == []
        assert await client.get_page_backlinks("s1", "p1") == []
        assert await client.list_requested_reviewers("s1", "3") == []

    @pytest.mark.asyncio
    async def test_request_reviewers_body(self, client, api):
        api.respond("POST", "/spaces/s1/change-requests/3/requested-reviewers", {})

        await client.request_reviewers("s1", "3", ["u1", "u2"])

        assert api.last_json() == {"users": ["u1", "u2"]}

    @pytest.mark.asyncio
    async def test_update_comment_uses_put(self, client, api):
        api.respond("PUT", "/spaces/s1/change-requests/4/comments/c1", {"id": "c1"})

        await client.update_comment("s1", "c1", {"body": "edited"}, "4")

        assert api.last.method == "PUT"
        assert api.last_json() == {"body": "edited"}

    @pytest.mark.asyncio
    async def test_sync_change_request_path(self, client, api):
        api.respond("POST", "/spaces/s1/change-requests/4/update", {"ok": True})

        assert await client.sync_change_request("s1", "4") == {"ok": True}
