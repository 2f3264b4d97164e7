"""Composition of client, tool registry and MCP server."""

from typing import Any

import mcp.types as types
from mcp.server import NotificationOptions, Server
from mcp.server.models import InitializationOptions

from gitbook_mcp.client import GitBookClient
from gitbook_mcp.config import GitBookConfig
from gitbook_mcp.mcp_server.registry import ToolRegistry
from gitbook_mcp.mcp_server.tools import build_registry


def create_server(
    config: GitBookConfig,
    client: GitBookClient | None = None,
    registry: ToolRegistry | None = None,
) -> Server:
    """Build an MCP server with every GitBook tool attached.

    Args:
        config: Loaded configuration
        client: Client to share across tools; built from ``config`` if omitted
        registry: Pre-built registry; built from ``client`` if omitted

    Returns:
        Low-level MCP ``Server`` with ``list_tools`` and ``call_tool`` handlers
    """
    if registry is None:
        registry = build_registry(client or GitBookClient(config))

    server = Server(config.server_name, version=config.server_version)

    @server.list_tools()
    async def handle_list_tools() -> list[types.Tool]:
        """List available MCP tools."""
        return registry.list_tools()

    @server.call_tool()
    async def handle_call_tool(
        name: str, arguments: dict[str, Any]
    ) -> types.CallToolResult:
        """Handle MCP tool calls."""
        return await registry.call(name, arguments)

    return server


def initialization_options(server: Server, config: GitBookConfig) -> InitializationOptions:
    return InitializationOptions(
        server_name=config.server_name,
        server_version=config.server_version,
        capabilities=server.get_capabilities(
            notification_options=NotificationOptions(),
            experimental_capabilities={},
        ),
    )
