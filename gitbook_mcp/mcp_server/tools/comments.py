"""Comment and reply tools.

Comments live either on a space or on a change request; ``changeRequestId``
selects the latter.
"""

from pydantic import Field

from gitbook_mcp.mcp_server.registry import ToolGroup, to_json, tool
from gitbook_mcp.mcp_server.schemas import (
    PaginationArguments,
    ToolArguments,
    optional_change_request_id_field,
    space_id_field,
)

ON_CHANGE_REQUEST = "Optional change request ID if comment is on a CR"


class ListCommentsArguments(PaginationArguments):
    space_id: str = space_id_field()
    change_request_id: str | None = optional_change_request_id_field(
        "Optional change request ID (scopes comments to that CR)"
    )


class PostCommentArguments(ToolArguments):
    space_id: str = space_id_field()
    body: str = Field(description="The comment text (markdown supported)")
    change_request_id: str | None = optional_change_request_id_field(
        "Optional change request ID (posts comment on that CR)"
    )


class UpdateCommentArguments(ToolArguments):
    space_id: str = space_id_field()
    comment_id: str = Field(
        alias="commentId", description="The ID of the comment to update"
    )
    body: str = Field(description="The new comment text (markdown supported)")
    change_request_id: str | None = optional_change_request_id_field(ON_CHANGE_REQUEST)


class DeleteCommentArguments(ToolArguments):
    space_id: str = space_id_field()
    comment_id: str = Field(
        alias="commentId", description="The ID of the comment to delete"
    )
    change_request_id: str | None = optional_change_request_id_field(ON_CHANGE_REQUEST)


class ListCommentRepliesArguments(PaginationArguments):
    space_id: str = space_id_field()
    comment_id: str = Field(alias="commentId", description="The ID of the parent comment")
    change_request_id: str | None = optional_change_request_id_field(ON_CHANGE_REQUEST)


class PostCommentReplyArguments(ToolArguments):
    space_id: str = space_id_field()
    comment_id: str = Field(
        alias="commentId", description="The ID of the parent comment to reply to"
    )
    body: str = Field(description="The reply text (markdown supported)")
    change_request_id: str | None = optional_change_request_id_field(ON_CHANGE_REQUEST)


class CommentTools(ToolGroup):
    """Tools for comment threads on spaces and change requests."""

    @tool(
        "list_comments",
        "List comments on a GitBook space or change request",
        ListCommentsArguments,
    )
    async def list_comments(self, args: ListCommentsArguments) -> str:
        result = await self.client.list_comments(
            args.space_id, args.change_request_id, args.pagination_query()
        )
        return to_json(result)

    @tool(
        "post_comment",
        "Post a new comment on a GitBook space or change request",
        PostCommentArguments,
    )
    async def post_comment(self, args: PostCommentArguments) -> str:
        result = await self.client.post_comment(
            args.space_id, args.payload("body"), args.change_request_id
        )
        return to_json(result)

    @tool(
        "update_comment",
        "Update an existing comment (uses PUT as per GitBook API)",
        UpdateCommentArguments,
    )
    async def update_comment(self, args: UpdateCommentArguments) -> str:
        result = await self.client.update_comment(
            args.space_id, args.comment_id, args.payload("body"), args.change_request_id
        )
        return to_json(result)

    @tool(
        "delete_comment",
        "Delete a comment (DESTRUCTIVE: cannot be undone)",
        DeleteCommentArguments,
    )
    async def delete_comment(self, args: DeleteCommentArguments) -> str:
        await self.client.delete_comment(
            args.space_id, args.comment_id, args.change_request_id
        )
        return f"Comment {args.comment_id} deleted successfully."

    @tool(
        "list_comment_replies",
        "List replies to a specific comment",
        ListCommentRepliesArguments,
    )
    async def list_comment_replies(self, args: ListCommentRepliesArguments) -> str:
        result = await self.client.list_comment_replies(
            args.space_id,
            args.comment_id,
            args.change_request_id,
            args.pagination_query(),
        )
        return to_json(result)

    @tool(
        "post_comment_reply",
        "Post a reply to an existing comment",
        PostCommentReplyArguments,
    )
    async def post_comment_reply(self, args: PostCommentReplyArguments) -> str:
        result = await self.client.post_comment_reply(
            args.space_id, args.comment_id, args.payload("body"), args.change_request_id
        )
        return to_json(result)
