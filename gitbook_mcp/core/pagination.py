"""Pagination helpers shared by every list-shaped tool."""

import json
from typing import Any


def build_pagination_query(
    page: str | None = None, limit: int | None = None
) -> dict[str, str]:
    """Translate pagination arguments into query parameters.

    ``page`` is sent only when non-empty. ``limit`` is sent whenever it is
    given, including ``0``.
    """
    query: dict[str, str] = {}
    if page:
        query["page"] = page
    if limit is not None:
        query["limit"] = str(limit)
    return query


def format_paginated_result(response: dict[str, Any], label: str) -> str:
    """Render one page of a paginated response as text with its next token."""
    items = response.get("items") or []
    lines = [f"{label} ({len(items)} items):", json.dumps(items, indent=2, ensure_ascii=False)]
    next_token = (response.get("next") or {}).get("page")
    if next_token:
        lines.append(f"\nNext page token: {next_token}")
    return "\n".join(lines)
