"""Utility functions for the GitBook CLI."""

import asyncio

from pydantic import BaseModel, ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from gitbook_mcp.client import GitBookClient
from gitbook_mcp.config import GitBookConfig, load_config
from gitbook_mcp.core.errors import ConfigurationError, format_tool_error

console = Console()


def echo_error(message: str) -> None:
    """Print error message."""
    console.print(f"[red]✗ {escape(message)}[/red]", highlight=False)


def print_table(
    rows: list[dict], title: str = "", headers: list[str] | None = None
) -> None:
    """Print rows as a rich table."""
    if not rows:
        console.print(f"[yellow]No {title.lower()} found.[/yellow]")
        return

    table = Table(title=title)
    headers = headers or list(rows[0].keys())
    for header in headers:
        table.add_column(header.replace("_", " ").title())

    for row in rows:
        table.add_row(*[str(row.get(header, "") or "") for header in headers])

    console.print(table)


def mask_secret(value: str | None) -> str:
    """Show only the last four characters of a secret."""
    if not value:
        return "(not set)"
    if len(value) <= 4:
        return "****"
    return f"****{value[-4:]}"


def get_config_or_exit() -> GitBookConfig:
    """Load configuration, exiting with status 1 when the token is missing."""
    try:
        return load_config()
    except ConfigurationError as e:
        echo_error(str(e))
        raise SystemExit(1)


def run_api_call(coro_factory):
    """Run one client call, turning API failures into a CLI error exit.

    Args:
        coro_factory: Callable taking a ``GitBookClient`` and returning a
            coroutine

    Returns:
        Whatever the coroutine returns
    """
    client = GitBookClient(get_config_or_exit())
    try:
        return asyncio.run(coro_factory(client))
    except Exception as e:
        echo_error(format_tool_error(e))
        raise SystemExit(1)


def parse_response(model: type[BaseModel], raw):
    """Validate a response for display, exiting with status 1 on an unexpected shape."""
    try:
        return model.model_validate(raw)
    except ValidationError as e:
        echo_error(f"Unexpected response from GitBook API: {e}")
        raise SystemExit(1)
