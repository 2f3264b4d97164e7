"""Models for GitBook MCP."""

from gitbook_mcp.models.api import *

__all__ = [
    "ChangeRequest",
    "Collection",
    "Comment",
    "CommentAuthor",
    "NextPage",
    "Page",
    "PaginatedList",
    "SearchResult",
    "Space",
    "SpaceContent",
    "SpaceUrls",
]
