"""Content import tool."""

from pydantic import Field

from gitbook_mcp.mcp_server.registry import ToolGroup, to_json, tool
from gitbook_mcp.mcp_server.schemas import ToolArguments, org_id_field


class ImportContentArguments(ToolArguments):
    org_id: str = org_id_field()
    url: str = Field(description="The URL of the content to import")
    space_id: str | None = Field(
        default=None,
        alias="spaceId",
        description="Optional target space ID (imports into this space)",
    )


class ContentImportTools(ToolGroup):
    @tool(
        "import_content",
        "Import content into a GitBook organization from a URL "
        "(DESTRUCTIVE: may overwrite existing content depending on target)",
        ImportContentArguments,
    )
    async def import_content(self, args: ImportContentArguments) -> str:
        data = args.payload("url", "space_id")
        return to_json(await self.client.import_content(args.org_id, data))
