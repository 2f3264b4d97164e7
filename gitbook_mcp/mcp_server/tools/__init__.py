"""Tool groups, one module per GitBook resource."""

from gitbook_mcp.client import GitBookClient
from gitbook_mcp.mcp_server.registry import ToolGroup, ToolRegistry
from gitbook_mcp.mcp_server.tools.change_requests import ChangeRequestTools
from gitbook_mcp.mcp_server.tools.comments import CommentTools
from gitbook_mcp.mcp_server.tools.content_import import ContentImportTools
from gitbook_mcp.mcp_server.tools.git_sync import GitSyncTools
from gitbook_mcp.mcp_server.tools.organizations import OrganizationTools
from gitbook_mcp.mcp_server.tools.pages import PageTools
from gitbook_mcp.mcp_server.tools.reviews import ReviewTools
from gitbook_mcp.mcp_server.tools.spaces import SpaceTools

TOOL_GROUPS: tuple[type[ToolGroup], ...] = (
    SpaceTools,  # 6 tools
    PageTools,  # 8 tools
    ChangeRequestTools,  # 6 tools
    ReviewTools,  # 5 tools
    CommentTools,  # 6 tools
    GitSyncTools,  # 3 tools
    OrganizationTools,  # 4 tools
    ContentImportTools,  # 1 tool
)


def build_registry(client: GitBookClient) -> ToolRegistry:
    """Register every tool group against one shared client."""
    registry = ToolRegistry()
    for group in TOOL_GROUPS:
        registry.register_group(group(client))
    return registry


__all__ = ["TOOL_GROUPS", "build_registry"]
