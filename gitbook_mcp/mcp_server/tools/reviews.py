"""Review and reviewer tools for change requests."""

from pydantic import Field

from gitbook_mcp.mcp_server.registry import ToolGroup, to_json, tool
from gitbook_mcp.mcp_server.schemas import (
    PaginationArguments,
    ReviewStatus,
    ToolArguments,
    change_request_id_field,
    space_id_field,
)


class ListReviewsArguments(PaginationArguments):
    space_id: str = space_id_field()
    change_request_id: str = change_request_id_field()


class SubmitReviewArguments(ToolArguments):
    space_id: str = space_id_field()
    change_request_id: str = change_request_id_field()
    status: ReviewStatus = Field(description="The review decision")
    comment: str | None = Field(default=None, description="Optional review comment")


class RequestedReviewersArguments(ToolArguments):
    space_id: str = space_id_field()
    change_request_id: str = change_request_id_field()


class RequestReviewersArguments(ToolArguments):
    space_id: str = space_id_field()
    change_request_id: str = change_request_id_field()
    user_ids: list[str] = Field(
        alias="userIds", description="Array of user IDs to request as reviewers"
    )


class RemoveReviewerArguments(ToolArguments):
    space_id: str = space_id_field()
    change_request_id: str = change_request_id_field()
    user_id: str = Field(
        alias="userId", description="The user ID to remove from reviewers"
    )


class ReviewTools(ToolGroup):
    """Tools for reviewing change requests."""

    @tool("list_reviews", "List reviews on a change request", ListReviewsArguments)
    async def list_reviews(self, args: ListReviewsArguments) -> str:
        result = await self.client.list_reviews(
            args.space_id, args.change_request_id, args.pagination_query()
        )
        return to_json(result)

    @tool(
        "submit_review",
        "Submit a review on a change request (approve, request changes, or comment)",
        SubmitReviewArguments,
    )
    async def submit_review(self, args: SubmitReviewArguments) -> str:
        result = await self.client.submit_review(
            args.space_id, args.change_request_id, args.payload("status", "comment")
        )
        return to_json(result)

    @tool(
        "list_requested_reviewers",
        "List users who have been requested to review a change request",
        RequestedReviewersArguments,
    )
    async def list_requested_reviewers(self, args: RequestedReviewersArguments) -> str:
        reviewers = await self.client.list_requested_reviewers(
            args.space_id, args.change_request_id
        )
        return to_json(reviewers)

    @tool(
        "request_reviewers",
        "Request specific users to review a change request",
        RequestReviewersArguments,
    )
    async def request_reviewers(self, args: RequestReviewersArguments) -> str:
        result = await self.client.request_reviewers(
            args.space_id, args.change_request_id, args.user_ids
        )
        return to_json(result)

    @tool(
        "remove_reviewer",
        "Remove a requested reviewer from a change request (DESTRUCTIVE)",
        RemoveReviewerArguments,
    )
    async def remove_reviewer(self, args: RemoveReviewerArguments) -> str:
        await self.client.remove_reviewer(
            args.space_id, args.change_request_id, args.user_id
        )
        return (
            f"Reviewer {args.user_id} removed from change request "
            f"{args.change_request_id}."
        )
