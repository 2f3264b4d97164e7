"""Change request lifecycle tools."""

from pydantic import Field

from gitbook_mcp.mcp_server.registry import ToolGroup, to_json, tool
from gitbook_mcp.mcp_server.schemas import (
    ChangeRequestStatus,
    PaginationArguments,
    ToolArguments,
    change_request_id_field,
    space_id_field,
)


class CreateChangeRequestArguments(ToolArguments):
    space_id: str = space_id_field()
    subject: str | None = Field(
        default=None, description="Subject/title of the change request"
    )


class ListChangeRequestsArguments(PaginationArguments):
    space_id: str = space_id_field()


class ChangeRequestArguments(ToolArguments):
    space_id: str = space_id_field()
    change_request_id: str = change_request_id_field()


class UpdateChangeRequestArguments(ToolArguments):
    space_id: str = space_id_field()
    change_request_id: str = change_request_id_field()
    subject: str | None = Field(default=None, description="New subject/title")
    status: ChangeRequestStatus | None = Field(
        default=None, description="New status for the change request"
    )


class MergeChangeRequestArguments(ToolArguments):
    space_id: str = space_id_field()
    change_request_id: str = change_request_id_field(
        "The ID or number of the change request to merge"
    )


class SyncChangeRequestArguments(ToolArguments):
    space_id: str = space_id_field()
    change_request_id: str = change_request_id_field(
        "The ID or number of the change request to sync"
    )


class ChangeRequestTools(ToolGroup):
    """Tools for creating, updating and merging change requests."""

    @tool(
        "create_change_request",
        "Create a new change request (similar to a PR/draft) in a GitBook space",
        CreateChangeRequestArguments,
    )
    async def create_change_request(self, args: CreateChangeRequestArguments) -> str:
        result = await self.client.create_change_request(
            args.space_id, args.payload("subject")
        )
        return to_json(result)

    @tool(
        "list_change_requests",
        "List change requests in a GitBook space",
        ListChangeRequestsArguments,
    )
    async def list_change_requests(self, args: ListChangeRequestsArguments) -> str:
        result = await self.client.list_change_requests(
            args.space_id, args.pagination_query()
        )
        return to_json(result)

    @tool(
        "get_change_request",
        "Get details of a specific change request",
        ChangeRequestArguments,
    )
    async def get_change_request(self, args: ChangeRequestArguments) -> str:
        result = await self.client.get_change_request(
            args.space_id, args.change_request_id
        )
        return to_json(result)

    @tool(
        "update_change_request",
        "Update a change request's properties (subject, status, etc.)",
        UpdateChangeRequestArguments,
    )
    async def update_change_request(self, args: UpdateChangeRequestArguments) -> str:
        result = await self.client.update_change_request(
            args.space_id, args.change_request_id, args.payload("subject", "status")
        )
        return to_json(result)

    @tool(
        "merge_change_request",
        "Merge a change request into the main content (DESTRUCTIVE: publishes changes)",
        MergeChangeRequestArguments,
    )
    async def merge_change_request(self, args: MergeChangeRequestArguments) -> str:
        result = await self.client.merge_change_request(
            args.space_id, args.change_request_id
        )
        return (
            f"Change request {args.change_request_id} merged successfully.\n"
            f"{to_json(result)}"
        )

    @tool(
        "sync_change_request",
        "Sync/update a change request with the latest main content",
        SyncChangeRequestArguments,
    )
    async def sync_change_request(self, args: SyncChangeRequestArguments) -> str:
        result = await self.client.sync_change_request(
            args.space_id, args.change_request_id
        )
        return to_json(result)
