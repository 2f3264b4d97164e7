"""Space lifecycle and search tools."""

from pydantic import Field

from gitbook_mcp.mcp_server.registry import ToolGroup, to_json, tool
from gitbook_mcp.mcp_server.schemas import (
    PaginationArguments,
    SpaceVisibility,
    ToolArguments,
    org_id_field,
    space_id_field,
)


class GetSpaceArguments(ToolArguments):
    space_id: str = space_id_field("The ID of the GitBook space")


class UpdateSpaceArguments(ToolArguments):
    space_id: str = space_id_field("The ID of the space to update")
    title: str | None = Field(default=None, description="New title for the space")
    visibility: SpaceVisibility | None = Field(
        default=None, description="Visibility setting for the space"
    )


class CreateSpaceArguments(ToolArguments):
    org_id: str = org_id_field()
    title: str = Field(description="Title for the new space")
    visibility: SpaceVisibility | None = Field(
        default=None,
        description="Visibility setting (defaults to organization default)",
    )


class DuplicateSpaceArguments(ToolArguments):
    space_id: str = space_id_field("The ID of the space to duplicate")


class ListSpacesArguments(PaginationArguments):
    org_id: str = org_id_field()


class SearchSpaceContentArguments(PaginationArguments):
    space_id: str = space_id_field("The ID of the space to search in")
    query: str = Field(description="The search query")


class SpaceTools(ToolGroup):
    """Tools for reading, creating and searching spaces."""

    @tool("get_space", "Get details of a GitBook space by its ID", GetSpaceArguments)
    async def get_space(self, args: GetSpaceArguments) -> str:
        return to_json(await self.client.get_space(args.space_id))

    @tool(
        "update_space",
        "Update a GitBook space's properties (title, visibility, etc.)",
        UpdateSpaceArguments,
    )
    async def update_space(self, args: UpdateSpaceArguments) -> str:
        data = args.payload("title", "visibility")
        return to_json(await self.client.update_space(args.space_id, data))

    @tool(
        "create_space",
        "Create a new GitBook space in an organization",
        CreateSpaceArguments,
    )
    async def create_space(self, args: CreateSpaceArguments) -> str:
        data = args.payload("title", "visibility")
        return to_json(await self.client.create_space(args.org_id, data))

    @tool(
        "duplicate_space",
        "Duplicate an existing GitBook space (creates a full copy)",
        DuplicateSpaceArguments,
    )
    async def duplicate_space(self, args: DuplicateSpaceArguments) -> str:
        return to_json(await self.client.duplicate_space(args.space_id))

    @tool(
        "list_spaces",
        "List all spaces in a GitBook organization",
        ListSpacesArguments,
    )
    async def list_spaces(self, args: ListSpacesArguments) -> str:
        result = await self.client.list_spaces(args.org_id, args.pagination_query())
        return to_json(result)

    @tool(
        "search_space_content",
        "Search for content within a GitBook space",
        SearchSpaceContentArguments,
    )
    async def search_space_content(self, args: SearchSpaceContentArguments) -> str:
        result = await self.client.search_space_content(
            args.space_id, args.query, args.pagination_query()
        )
        return to_json(result)
