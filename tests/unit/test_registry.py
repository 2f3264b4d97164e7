"""Unit tests for the tool registry and the catch-all wrapper."""

import json

import pytest

from gitbook_mcp.mcp_server.registry import (
    ToolDefinition,
    ToolRegistry,
    run_tool,
    to_json,
)
from gitbook_mcp.mcp_server.schemas import ToolArguments

EXPECTED_TOOLS = [
    # spaces
    "get_space",
    "update_space",
    "create_space",
    "duplicate_space",
    "list_spaces",
    "search_space_content",
    # pages
    "get_space_revision",
    "list_pages",
    "get_page_by_id",
    "get_page_by_path",
    "get_page_links",
    "get_page_backlinks",
    "list_files",
    "get_file",
    # change requests
    "create_change_request",
    "list_change_requests",
    "get_change_request",
    "update_change_request",
    "merge_change_request",
    "sync_change_request",
    # reviews
    "list_reviews",
    "submit_review",
    "list_requested_reviewers",
    "request_reviewers",
    "remove_reviewer",
    # comments
    "list_comments",
    "post_comment",
    "update_comment",
    "delete_comment",
    "list_comment_replies",
    "post_comment_reply",
    # git sync
    "git_import",
    "git_export",
    "get_git_info",
    # organizations
    "get_organization",
    "list_collections",
    "get_collection",
    "ask_ai",
    # content import
    "import_content",
]


class TestRegistryContents:
    """Test the set of registered tools and their schemas."""

    def test_all_tools_registered_in_order(self, registry):
        assert len(registry) == 39
        assert registry.names() == EXPECTED_TOOLS

    def test_every_tool_has_description_and_object_schema(self, registry):
        for tool in registry.list_tools():
            assert tool.description
            assert tool.inputSchema["type"] == "object"

    def test_destructive_tools_say_so(self, registry):
        for name in (
            "merge_change_request",
            "delete_comment",
            "remove_reviewer",
            "git_import",
            "import_content",
        ):
            assert "DESTRUCTIVE" in registry.get(name).description

    def test_schema_uses_wire_names(self, registry):
        schema = registry.get("get_page_by_id").to_mcp().inputSchema

        assert set(schema["properties"]) == {"spaceId", "pageId", "changeRequestId"}
        assert sorted(schema["required"]) == ["pageId", "spaceId"]

    def test_optional_arguments_are_not_nullable(self, registry):
        schema = registry.get("update_space").to_mcp().inputSchema

        assert "anyOf" not in json.dumps(schema)
        assert schema["required"] == ["spaceId"]
        assert schema["properties"]["title"]["type"] == "string"
        assert "default" not in schema["properties"]["title"]
        assert schema["properties"]["visibility"]["enum"] == [
            "public",
            "unlisted",
            "share-link",
            "visitor-auth",
            "in-collection",
        ]

    def test_pagination_arguments(self, registry):
        properties = registry.get("list_spaces").to_mcp().inputSchema["properties"]

        assert properties["page"]["type"] == "string"
        assert properties["limit"]["type"] == "integer"

    def test_array_argument(self, registry):
        properties = registry.get("request_reviewers").to_mcp().inputSchema["properties"]

        assert properties["userIds"]["type"] == "array"
        assert properties["userIds"]["items"] == {"type": "string"}

    def test_review_status_enum(self, registry):
        properties = registry.get("submit_review").to_mcp().inputSchema["properties"]

        assert properties["status"]["enum"] == [
            "approved",
            "changes-requested",
            "commented",
        ]

    def test_duplicate_registration_rejected(self):
        async def handler(args):
            return "ok"

        registry = ToolRegistry()
        definition = ToolDefinition("ping", "Ping", ToolArguments, handler)
        registry.register(definition)

        with pytest.raises(ValueError):
            registry.register(definition)


class TestRegistryCall:
    """Test invocation paths that never reach the API."""

    @pytest.mark.asyncio
    async def test_unknown_tool(self, registry, api):
        result = await registry.call("delete_everything", {})

        assert result.isError
        assert result.content[0].text == "Unknown tool: delete_everything"
        assert api.requests == []

    @pytest.mark.asyncio
    async def test_missing_required_argument(self, registry, api):
        result = await registry.call("get_space", {})

        assert result.isError
        assert "spaceId" in result.content[0].text
        assert api.requests == []

    @pytest.mark.asyncio
    async def test_none_arguments(self, registry):
        result = await registry.call("get_space", None)

        assert result.isError

    @pytest.mark.asyncio
    async def test_snake_case_names_also_accepted(self, registry, api):
        api.respond("GET", "/spaces/abc", {"id": "abc"})

        result = await registry.call("get_space", {"space_id": "abc"})

        assert not result.isError

    @pytest.mark.asyncio
    async def test_unknown_arguments_ignored(self, registry, api):
        api.respond("GET", "/spaces/abc", {"id": "abc"})

        result = await registry.call("get_space", {"spaceId": "abc", "extra": 1})

        assert not result.isError


class TestRunTool:
    """Test the catch-all wrapper."""

    @pytest.mark.asyncio
    async def test_success(self):
        async def work():
            return "done"

        result = await run_tool(work)

        assert not result.isError
        assert len(result.content) == 1
        assert result.content[0].type == "text"
        assert result.content[0].text == "done"

    @pytest.mark.asyncio
    async def test_generic_failure(self):
        async def work():
            raise RuntimeError("socket closed")

        result = await run_tool(work, tool_name="get_space")

        assert result.isError
        assert result.content[0].text == "Error: socket closed"

    @pytest.mark.asyncio
    async def test_network_failure_through_registry(self, config):
        import httpx

        from gitbook_mcp.client import GitBookClient
        from gitbook_mcp.mcp_server.tools import build_registry

        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        registry = build_registry(
            GitBookClient(config, transport=httpx.MockTransport(handler))
        )

        result = await registry.call("get_space", {"spaceId": "abc"})

        assert result.isError
        assert result.content[0].text == "Error: connection refused"


class TestToJson:
    """Test result serialization."""

    def test_pretty_printed(self):
        assert to_json({"a": [1, 2]}) == '{\n  "a": [\n    1,\n    2\n  ]\n}'

    def test_string_result_is_quoted(self):
        assert to_json("raw text") == '"raw text"'

    def test_non_ascii_kept(self):
        assert to_json({"title": "Übersicht"}) == '{\n  "title": "Übersicht"\n}'
