"""Git import/export tools."""

from pydantic import Field

from gitbook_mcp.mcp_server.registry import ToolGroup, to_json, tool
from gitbook_mcp.mcp_server.schemas import ToolArguments, space_id_field


class GitImportArguments(ToolArguments):
    space_id: str = space_id_field("The ID of the space to import into")
    url: str = Field(description="The Git repository URL to import from")


class GitExportArguments(ToolArguments):
    space_id: str = space_id_field("The ID of the space to export from")
    url: str = Field(description="The Git repository URL to export to")


class GitInfoArguments(ToolArguments):
    space_id: str = space_id_field()


class GitSyncTools(ToolGroup):
    """Tools for syncing a space with a Git repository."""

    @tool(
        "git_import",
        "Import content from a Git repository into a GitBook space "
        "(DESTRUCTIVE: overwrites existing content)",
        GitImportArguments,
    )
    async def git_import(self, args: GitImportArguments) -> str:
        return to_json(await self.client.git_import(args.space_id, args.payload("url")))

    @tool(
        "git_export",
        "Export GitBook space content to a Git repository",
        GitExportArguments,
    )
    async def git_export(self, args: GitExportArguments) -> str:
        return to_json(await self.client.git_export(args.space_id, args.payload("url")))

    @tool(
        "get_git_info",
        "Get Git sync configuration and status for a GitBook space",
        GitInfoArguments,
    )
    async def get_git_info(self, args: GitInfoArguments) -> str:
        return to_json(await self.client.get_git_info(args.space_id))
