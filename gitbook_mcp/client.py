"""HTTP client for the GitBook REST API."""

import json
from typing import Any

import httpx

from gitbook_mcp.config import GitBookConfig
from gitbook_mcp.core.errors import GitBookAPIError
from gitbook_mcp.core.logging import get_logger

# Parsed JSON for JSON responses, raw text otherwise
APIResponse = dict[str, Any] | list[Any] | str

logger = get_logger(__name__)


def content_base_path(space_id: str, change_request_id: str | None = None) -> str:
    """Base path for revision content of a space or of one change request."""
    if change_request_id:
        return f"/spaces/{space_id}/change-requests/{change_request_id}/content"
    return f"/spaces/{space_id}/content"


def comments_base_path(space_id: str, change_request_id: str | None = None) -> str:
    """Base path for comments on a space or on one change request."""
    if change_request_id:
        return f"/spaces/{space_id}/change-requests/{change_request_id}/comments"
    return f"/spaces/{space_id}/comments"


def unwrap_list(result: APIResponse, key: str) -> list[Any]:
    """List stored under ``key`` in a JSON object, or ``[]`` for anything else."""
    if isinstance(result, dict):
        return result.get(key) or []
    return []


class GitBookClient:
    """Async client for the GitBook API.

    Every call opens its own ``httpx.AsyncClient``; the instance itself only
    holds the base URL and token and is never mutated after construction.
    """

    def __init__(
        self,
        config: GitBookConfig,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """Initialize the client with configuration.

        Args:
            config: Loaded configuration providing base URL and token
            transport: Optional httpx transport, used by tests to stub the API
        """
        self.base_url = config.api_base_url.rstrip("/")
        self._token = config.api_token
        self._transport = transport

    def __repr__(self) -> str:
        return f"GitBookClient(base_url='{self.base_url}')"

    def build_url(self, path: str, query: dict[str, str] | None = None) -> str:
        """Join base URL, path and (when non-empty) the encoded query."""
        url = f"{self.base_url}{path}"
        if query:
            url += f"?{httpx.QueryParams(query)}"
        return url

    async def request(
        self,
        method: str,
        path: str,
        body: Any = None,
        query: dict[str, str] | None = None,
    ) -> APIResponse:
        """Send one request to the GitBook API.

        Args:
            method: HTTP verb
            path: Path relative to the configured base URL
            body: JSON-serializable request body, sent only when not None
            query: Query parameters

        Returns:
            Parsed JSON when the response is JSON, otherwise the raw text

        Raises:
            GitBookAPIError: If the response status is not 2xx
        """
        endpoint = f"{method} {path}"
        headers = {
            "Authorization": f"Bearer {self._token}",
            "Content-Type": "application/json",
        }
        content = json.dumps(body) if body is not None else None

        logger.debug("GitBook API request", endpoint=endpoint)
        async with httpx.AsyncClient(transport=self._transport) as client:
            response = await client.request(
                method, self.build_url(path, query), headers=headers, content=content
            )

        if not response.is_success:
            logger.warning(
                "GitBook API error", status=response.status_code, endpoint=endpoint
            )
            raise GitBookAPIError(
                response.status_code, response.reason_phrase, response.text, endpoint
            )

        if "application/json" in response.headers.get("content-type", ""):
            return response.json()
        return response.text

    # Spaces

    async def get_space(self, space_id: str) -> APIResponse:
        return await self.request("GET", f"/spaces/{space_id}")

    async def update_space(self, space_id: str, data: dict[str, Any]) -> APIResponse:
        return await self.request("PATCH", f"/spaces/{space_id}", data)

    async def create_space(self, org_id: str, data: dict[str, Any]) -> APIResponse:
        return await self.request("POST", f"/orgs/{org_id}/spaces", data)

    async def duplicate_space(self, space_id: str) -> APIResponse:
        return await self.request("POST", f"/spaces/{space_id}/duplicate")

    async def list_spaces(
        self, org_id: str, query: dict[str, str] | None = None
    ) -> APIResponse:
        return await self.request("GET", f"/orgs/{org_id}/spaces", query=query)

    async def search_space_content(
        self, space_id: str, search_query: str, query: dict[str, str] | None = None
    ) -> APIResponse:
        params = dict(query or {})
        params["query"] = search_query
        return await self.request("GET", f"/spaces/{space_id}/search", query=params)

    # Revision content (published or change request)

    async def get_space_revision(
        self, space_id: str, change_request_id: str | None = None
    ) -> APIResponse:
        return await self.request("GET", content_base_path(space_id, change_request_id))

    async def list_pages(
        self,
        space_id: str,
        change_request_id: str | None = None,
        query: dict[str, str] | None = None,
    ) -> APIResponse:
        base = content_base_path(space_id, change_request_id)
        return await self.request("GET", f"{base}/pages", query=query)

    async def get_page_by_id(
        self, space_id: str, page_id: str, change_request_id: str | None = None
    ) -> APIResponse:
        base = content_base_path(space_id, change_request_id)
        return await self.request("GET", f"{base}/page/{page_id}")

    async def get_page_by_path(
        self, space_id: str, page_path: str, change_request_id: str | None = None
    ) -> APIResponse:
        base = content_base_path(space_id, change_request_id)
        return await self.request("GET", f"{base}/path/{page_path}")

    async def get_page_links(
        self, space_id: str, page_id: str, change_request_id: str | None = None
    ) -> list[Any]:
        base = content_base_path(space_id, change_request_id)
        result = await self.request("GET", f"{base}/page/{page_id}/links")
        return unwrap_list(result, "links")

    async def get_page_backlinks(
        self, space_id: str, page_id: str, change_request_id: str | None = None
    ) -> list[Any]:
        base = content_base_path(space_id, change_request_id)
        result = await self.request("GET", f"{base}/page/{page_id}/backlinks")
        return unwrap_list(result, "backlinks")

    async def list_files(
        self,
        space_id: str,
        change_request_id: str | None = None,
        query: dict[str, str] | None = None,
    ) -> APIResponse:
        base = content_base_path(space_id, change_request_id)
        return await self.request("GET", f"{base}/files", query=query)

    async def get_file(
        self, space_id: str, file_id: str, change_request_id: str | None = None
    ) -> APIResponse:
        base = content_base_path(space_id, change_request_id)
        return await self.request("GET", f"{base}/files/{file_id}")

    # Change requests

    async def create_change_request(
        self, space_id: str, data: dict[str, Any]
    ) -> APIResponse:
        return await self.request("POST", f"/spaces/{space_id}/change-requests", data)

    async def list_change_requests(
        self, space_id: str, query: dict[str, str] | None = None
    ) -> APIResponse:
        return await self.request(
            "GET", f"/spaces/{space_id}/change-requests", query=query
        )

    async def get_change_request(
        self, space_id: str, change_request_id: str
    ) -> APIResponse:
        return await self.request(
            "GET", f"/spaces/{space_id}/change-requests/{change_request_id}"
        )

    async def update_change_request(
        self, space_id: str, change_request_id: str, data: dict[str, Any]
    ) -> APIResponse:
        return await self.request(
            "PATCH", f"/spaces/{space_id}/change-requests/{change_request_id}", data
        )

    async def merge_change_request(
        self, space_id: str, change_request_id: str
    ) -> APIResponse:
        return await self.request(
            "POST", f"/spaces/{space_id}/change-requests/{change_request_id}/merge"
        )

    async def sync_change_request(
        self, space_id: str, change_request_id: str
    ) -> APIResponse:
        return await self.request(
            "POST", f"/spaces/{space_id}/change-requests/{change_request_id}/update"
        )

    # Reviews

    async def list_reviews(
        self,
        space_id: str,
        change_request_id: str,
        query: dict[str, str] | None = None,
    ) -> APIResponse:
        return await self.request(
            "GET",
            f"/spaces/{space_id}/change-requests/{change_request_id}/reviews",
            query=query,
        )

    async def submit_review(
        self, space_id: str, change_request_id: str, data: dict[str, Any]
    ) -> APIResponse:
        return await self.request(
            "POST",
            f"/spaces/{space_id}/change-requests/{change_request_id}/reviews",
            data,
        )

    async def list_requested_reviewers(
        self, space_id: str, change_request_id: str
    ) -> list[Any]:
        result = await self.request(
            "GET",
            f"/spaces/{space_id}/change-requests/{change_request_id}/requested-reviewers",
        )
        return unwrap_list(result, "items")

    async def request_reviewers(
        self, space_id: str, change_request_id: str, user_ids: list[str]
    ) -> APIResponse:
        return await self.request(
            "POST",
            f"/spaces/{space_id}/change-requests/{change_request_id}/requested-reviewers",
            {"users": user_ids},
        )

    async def remove_reviewer(
        self, space_id: str, change_request_id: str, user_id: str
    ) -> None:
        await self.request(
            "DELETE",
            f"/spaces/{space_id}/change-requests/{change_request_id}"
            f"/requested-reviewers/{user_id}",
        )

    # Comments (space or change request)

    async def list_comments(
        self,
        space_id: str,
        change_request_id: str | None = None,
        query: dict[str, str] | None = None,
    ) -> APIResponse:
        path = comments_base_path(space_id, change_request_id)
        return await self.request("GET", path, query=query)

    async def post_comment(
        self,
        space_id: str,
        data: dict[str, Any],
        change_request_id: str | None = None,
    ) -> APIResponse:
        path = comments_base_path(space_id, change_request_id)
        return await self.request("POST", path, data)

    async def update_comment(
        self,
        space_id: str,
        comment_id: str,
        data: dict[str, Any],
        change_request_id: str | None = None,
    ) -> APIResponse:
        path = comments_base_path(space_id, change_request_id)
        return await self.request("PUT", f"{path}/{comment_id}", data)

    async def delete_comment(
        self, space_id: str, comment_id: str, change_request_id: str | None = None
    ) -> None:
        path = comments_base_path(space_id, change_request_id)
        await self.request("DELETE", f"{path}/{comment_id}")

    async def list_comment_replies(
        self,
        space_id: str,
        comment_id: str,
        change_request_id: str | None = None,
        query: dict[str, str] | None = None,
    ) -> APIResponse:
        path = comments_base_path(space_id, change_request_id)
        return await self.request("GET", f"{path}/{comment_id}/replies", query=query)

    async def post_comment_reply(
        self,
        space_id: str,
        comment_id: str,
        data: dict[str, Any],
        change_request_id: str | None = None,
    ) -> APIResponse:
        path = comments_base_path(space_id, change_request_id)
        return await self.request("POST", f"{path}/{comment_id}/replies", data)

    # Git sync

    async def git_import(self, space_id: str, data: dict[str, Any]) -> APIResponse:
        return await self.request("POST", f"/spaces/{space_id}/git/import", data)

    async def git_export(self, space_id: str, data: dict[str, Any]) -> APIResponse:
        return await self.request("POST", f"/spaces/{space_id}/git/export", data)

    async def get_git_info(self, space_id: str) -> APIResponse:
        return await self.request("GET", f"/spaces/{space_id}/git/info")

    # Organizations

    async def get_organization(self, org_id: str) -> APIResponse:
        return await self.request("GET", f"/orgs/{org_id}")

    async def list_collections(
        self, org_id: str, query: dict[str, str] | None = None
    ) -> APIResponse:
        return await self.request("GET", f"/orgs/{org_id}/collections", query=query)

    async def get_collection(self, org_id: str, collection_id: str) -> APIResponse:
        return await self.request("GET", f"/orgs/{org_id}/collections/{collection_id}")

    async def ask_ai(self, org_id: str, data: dict[str, Any]) -> APIResponse:
        return await self.request("POST", f"/orgs/{org_id}/ask", data)

    # Content import

    async def import_content(self, org_id: str, data: dict[str, Any]) -> APIResponse:
        return await self.request("POST", f"/orgs/{org_id}/imports", data)
