"""Main CLI entry point for GitBook MCP."""

import asyncio
import json

import click

from gitbook_mcp import __version__
from gitbook_mcp.cli.utils import (
    console,
    echo_error,
    get_config_or_exit,
    mask_secret,
    parse_response,
    print_table,
    run_api_call,
)
from gitbook_mcp.client import GitBookClient
from gitbook_mcp.config import GitBookConfig
from gitbook_mcp.core.pagination import build_pagination_query, format_paginated_result
from gitbook_mcp.mcp_server.registry import to_json
from gitbook_mcp.mcp_server.tools import build_registry
from gitbook_mcp.models import (
    ChangeRequest,
    Collection,
    Comment,
    PaginatedList,
    SearchResult,
    Space,
    SpaceContent,
)


@click.group(invoke_without_command=True)
@click.option("-v", "--version", is_flag=True, help="Show version information")
@click.pass_context
def cli(ctx, version):
    """GitBook MCP - inspect and call the GitBook tools from a terminal.

    Reads the same GITBOOK_* environment variables as the MCP server.

    Examples:
        gitbook tools                              # List every tool
        gitbook call get_space --args '{"spaceId": "abc"}'
        gitbook spaces my-org --limit 20           # Spaces of an organization
        gitbook pages my-space -c 42               # Page tree of change request 42
    """
    if version:
        console.print(f"GitBook MCP v{__version__}")
        ctx.exit()

    if ctx.invoked_subcommand is None:
        console.print(ctx.get_help())
        ctx.exit()


@cli.command()
def tools():
    """List the registered MCP tools."""
    # Listing needs no credentials; the client is never called.
    registry = build_registry(GitBookClient(GitBookConfig(api_token="unused")))
    rows = [
        {"name": tool.name, "description": tool.description}
        for tool in registry.list_tools()
    ]
    print_table(rows, title=f"Tools ({len(rows)})", headers=["name", "description"])


@cli.command()
@click.argument("name")
@click.option(
    "--args", "-a", "raw_args", default="{}", help="Tool arguments as a JSON object"
)
def call(name, raw_args):
    """Invoke a tool exactly as an MCP host would and print its text.

    Exits with status 1 when the tool reports an error.
    """
    try:
        arguments = json.loads(raw_args)
    except json.JSONDecodeError as e:
        echo_error(f"--args is not valid JSON: {e}")
        raise SystemExit(2)
    if not isinstance(arguments, dict):
        echo_error("--args must be a JSON object")
        raise SystemExit(2)

    registry = build_registry(GitBookClient(get_config_or_exit()))
    result = asyncio.run(registry.call(name, arguments))

    for block in result.content:
        click.echo(block.text)
    if result.isError:
        raise SystemExit(1)


@cli.command()
@click.argument("org_id")
@click.option("--page", default=None, help="Pagination token")
@click.option("--limit", type=int, default=None, help="Max items to return")
@click.option("--plain", is_flag=True, help="Print JSON instead of a table")
def spaces(org_id, page, limit, plain):
    """List the spaces of an organization."""
    raw = run_api_call(
        lambda client: client.list_spaces(org_id, build_pagination_query(page, limit))
    )
    if plain:
        # Non-object bodies are printed as received
        if isinstance(raw, dict):
            click.echo(format_paginated_result(raw, "Spaces"))
        else:
            click.echo(raw if isinstance(raw, str) else to_json(raw))
        return

    result = parse_response(PaginatedList[Space], raw)
    rows = [
        {"id": space.id, "title": space.title, "visibility": space.visibility}
        for space in result.items
    ]
    print_table(rows, title="Spaces")
    if result.next_page:
        console.print(f"Next page token: {result.next_page}")


@cli.command()
@click.argument("space_id")
@click.option("--change-request", "-c", default=None, help="Change request ID")
def pages(space_id, change_request):
    """Show the page tree of a space or of one change request."""
    raw = run_api_call(
        lambda client: client.get_space_revision(space_id, change_request)
    )
    revision = parse_response(SpaceContent, raw)
    rows = [
        {"title": "  " * depth + page.title, "path": page.path, "id": page.id}
        for depth, page in revision.walk()
    ]
    print_table(rows, title="Pages")


@cli.command("change-requests")
@click.argument("space_id")
@click.option("--page", default=None, help="Pagination token")
@click.option("--limit", type=int, default=None, help="Max items to return")
def change_requests(space_id, page, limit):
    """List the change requests of a space."""
    raw = run_api_call(
        lambda client: client.list_change_requests(
            space_id, build_pagination_query(page, limit)
        )
    )
    result = parse_response(PaginatedList[ChangeRequest], raw)
    rows = [
        {
            "number": cr.number,
            "subject": cr.subject,
            "status": cr.status,
            "id": cr.id,
        }
        for cr in result.items
    ]
    print_table(rows, title="Change Requests")
    if result.next_page:
        console.print(f"Next page token: {result.next_page}")


@cli.command()
@click.argument("space_id")
@click.option("--change-request", "-c", default=None, help="Change request ID")
def comments(space_id, change_request):
    """List the comments on a space or change request."""
    raw = run_api_call(lambda client: client.list_comments(space_id, change_request))
    result = parse_response(PaginatedList[Comment], raw)
    rows = [
        {
            "id": comment.id,
            "author": comment.author.display_name if comment.author else None,
            "created_at": comment.created_at,
        }
        for comment in result.items
    ]
    print_table(rows, title="Comments")


@cli.command()
@click.argument("org_id")
def collections(org_id):
    """List the collections of an organization."""
    raw = run_api_call(lambda client: client.list_collections(org_id))
    result = parse_response(PaginatedList[Collection], raw)
    rows = [
        {"id": c.id, "title": c.title, "description": c.description}
        for c in result.items
    ]
    print_table(rows, title="Collections")


@cli.command()
@click.argument("space_id")
@click.argument("query")
@click.option("--limit", type=int, default=None, help="Max items to return")
def search(space_id, query, limit):
    """Search the content of a space."""
    raw = run_api_call(
        lambda client: client.search_space_content(
            space_id, query, build_pagination_query(limit=limit)
        )
    )
    result = parse_response(PaginatedList[SearchResult], raw)
    rows = [{"title": hit.title, "path": hit.path, "id": hit.id} for hit in result.items]
    print_table(rows, title=f"Results for '{query}'")


@cli.command()
def config():
    """Show the effective configuration (token masked)."""
    settings = get_config_or_exit()
    rows = [
        {"setting": "api_token", "value": mask_secret(settings.api_token)},
        {"setting": "api_base_url", "value": settings.api_base_url},
        {"setting": "default_space_id", "value": settings.default_space_id},
        {"setting": "default_org_id", "value": settings.default_org_id},
        {"setting": "log_level", "value": settings.log_level},
        {"setting": "server_name", "value": settings.server_name},
        {"setting": "server_version", "value": settings.server_version},
    ]
    print_table(rows, title="Configuration")


if __name__ == "__main__":
    cli()
