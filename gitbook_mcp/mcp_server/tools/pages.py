"""Page, revision and file reading tools.

Every tool here reads either the published revision of a space or, when
``changeRequestId`` is given, the draft revision of that change request.
"""

from pydantic import Field

from gitbook_mcp.mcp_server.registry import ToolGroup, to_json, tool
from gitbook_mcp.mcp_server.schemas import (
    PaginationArguments,
    ToolArguments,
    optional_change_request_id_field,
    space_id_field,
)


class SpaceRevisionArguments(ToolArguments):
    space_id: str = space_id_field()
    change_request_id: str | None = optional_change_request_id_field(
        "Optional change request ID to read CR content instead of published"
    )


class ListRevisionItemsArguments(PaginationArguments):
    space_id: str = space_id_field()
    change_request_id: str | None = optional_change_request_id_field()


class PageArguments(ToolArguments):
    space_id: str = space_id_field()
    page_id: str = Field(alias="pageId", description="The ID of the page")
    change_request_id: str | None = optional_change_request_id_field()


class PageByPathArguments(ToolArguments):
    space_id: str = space_id_field()
    page_path: str = Field(
        alias="pagePath",
        description="The URL path of the page (e.g. 'getting-started/install')",
    )
    change_request_id: str | None = optional_change_request_id_field()


class FileArguments(ToolArguments):
    space_id: str = space_id_field()
    file_id: str = Field(alias="fileId", description="The ID of the file")
    change_request_id: str | None = optional_change_request_id_field()


class PageTools(ToolGroup):
    """Tools for reading revision content."""

    @tool(
        "get_space_revision",
        "Get the full content tree of a GitBook space (or change request)",
        SpaceRevisionArguments,
    )
    async def get_space_revision(self, args: SpaceRevisionArguments) -> str:
        result = await self.client.get_space_revision(
            args.space_id, args.change_request_id
        )
        return to_json(result)

    @tool(
        "list_pages",
        "List all pages in a GitBook space (or change request)",
        ListRevisionItemsArguments,
    )
    async def list_pages(self, args: ListRevisionItemsArguments) -> str:
        result = await self.client.list_pages(
            args.space_id, args.change_request_id, args.pagination_query()
        )
        return to_json(result)

    @tool(
        "get_page_by_id",
        "Get a specific page by its ID from a GitBook space (or change request)",
        PageArguments,
    )
    async def get_page_by_id(self, args: PageArguments) -> str:
        result = await self.client.get_page_by_id(
            args.space_id, args.page_id, args.change_request_id
        )
        return to_json(result)

    @tool(
        "get_page_by_path",
        "Get a specific page by its URL path from a GitBook space (or change request)",
        PageByPathArguments,
    )
    async def get_page_by_path(self, args: PageByPathArguments) -> str:
        result = await self.client.get_page_by_path(
            args.space_id, args.page_path, args.change_request_id
        )
        return to_json(result)

    @tool("get_page_links", "Get all outgoing links from a page", PageArguments)
    async def get_page_links(self, args: PageArguments) -> str:
        result = await self.client.get_page_links(
            args.space_id, args.page_id, args.change_request_id
        )
        return to_json(result)

    @tool(
        "get_page_backlinks",
        "Get all pages that link to a specific page (backlinks)",
        PageArguments,
    )
    async def get_page_backlinks(self, args: PageArguments) -> str:
        result = await self.client.get_page_backlinks(
            args.space_id, args.page_id, args.change_request_id
        )
        return to_json(result)

    @tool(
        "list_files",
        "List all files (images, attachments) in a GitBook space (or change request)",
        ListRevisionItemsArguments,
    )
    async def list_files(self, args: ListRevisionItemsArguments) -> str:
        result = await self.client.list_files(
            args.space_id, args.change_request_id, args.pagination_query()
        )
        return to_json(result)

    @tool(
        "get_file",
        "Get details and download URL for a specific file in a GitBook space",
        FileArguments,
    )
    async def get_file(self, args: FileArguments) -> str:
        result = await self.client.get_file(
            args.space_id, args.file_id, args.change_request_id
        )
        return to_json(result)
