"""Tool registry: named, schema-described bindings onto the GitBook client."""

import json
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any

import mcp.types as types
from pydantic import ValidationError

from gitbook_mcp.client import GitBookClient
from gitbook_mcp.core.errors import format_tool_error
from gitbook_mcp.core.logging import get_logger
from gitbook_mcp.mcp_server.schemas import ToolArguments

logger = get_logger(__name__)

ToolHandler = Callable[[ToolArguments], Awaitable[str]]


def to_json(value: Any) -> str:
    """Pretty-print a result the way every tool returns it."""
    return json.dumps(value, indent=2, ensure_ascii=False)


def text_result(text: str, is_error: bool = False) -> types.CallToolResult:
    return types.CallToolResult(
        content=[types.TextContent(type="text", text=text)], isError=is_error
    )


async def run_tool(
    work: Callable[[], Awaitable[str]], tool_name: str | None = None
) -> types.CallToolResult:
    """Run one unit of tool work and convert any failure into a flagged result.

    Args:
        work: Zero-argument coroutine factory producing the success text
        tool_name: Name used in log messages

    Returns:
        CallToolResult with a single text block; ``isError`` is set when the
        work raised
    """
    try:
        text = await work()
    except Exception as e:
        logger.warning("Tool execution failed", tool=tool_name, error=type(e).__name__)
        return text_result(format_tool_error(e), is_error=True)
    return text_result(text)


def tool(name: str, description: str, arguments: type[ToolArguments]):
    """Mark a ``ToolGroup`` method as the handler of a named tool."""

    def decorator(func):
        func.tool_spec = (name, description, arguments)
        return func

    return decorator


@dataclass(frozen=True)
class ToolDefinition:
    """A registered tool."""

    name: str
    description: str
    arguments: type[ToolArguments]
    handler: ToolHandler

    def to_mcp(self) -> types.Tool:
        return types.Tool(
            name=self.name,
            description=self.description,
            inputSchema=self.arguments.input_schema(),
        )


class ToolGroup:
    """A set of tools for one GitBook resource, bound to a shared client."""

    def __init__(self, client: GitBookClient):
        self.client = client

    def definitions(self) -> list[ToolDefinition]:
        """Tool definitions in the order the methods are declared."""
        definitions = []
        for attr in vars(type(self)).values():
            spec = getattr(attr, "tool_spec", None)
            if spec is None:
                continue
            name, description, arguments = spec
            definitions.append(
                ToolDefinition(name, description, arguments, attr.__get__(self))
            )
        return definitions


class ToolRegistry:
    """Collection of tools keyed by their globally unique names."""

    def __init__(self):
        self._tools: dict[str, ToolDefinition] = {}

    def __len__(self) -> int:
        return len(self._tools)

    def __contains__(self, name: str) -> bool:
        return name in self._tools

    def register(self, definition: ToolDefinition) -> None:
        if definition.name in self._tools:
            raise ValueError(f"Tool '{definition.name}' is already registered")
        self._tools[definition.name] = definition

    def register_group(self, group: ToolGroup) -> None:
        for definition in group.definitions():
            self.register(definition)

    def names(self) -> list[str]:
        return list(self._tools)

    def get(self, name: str) -> ToolDefinition | None:
        return self._tools.get(name)

    def list_tools(self) -> list[types.Tool]:
        return [definition.to_mcp() for definition in self._tools.values()]

    async def call(
        self, name: str, arguments: dict[str, Any] | None
    ) -> types.CallToolResult:
        """Validate arguments and invoke a tool.

        Unknown names and invalid arguments come back as flagged results, the
        same way failures inside the tool do.
        """
        definition = self._tools.get(name)
        if definition is None:
            return text_result(f"Unknown tool: {name}", is_error=True)

        try:
            args = definition.arguments.model_validate(arguments or {})
        except ValidationError as e:
            return text_result(f"Invalid arguments for {name}: {e}", is_error=True)

        logger.debug("Calling tool", tool=name)
        return await run_tool(lambda: definition.handler(args), tool_name=name)
