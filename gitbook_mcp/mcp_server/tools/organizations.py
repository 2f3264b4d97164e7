"""Organization, collection and AI query tools."""

from pydantic import Field

from gitbook_mcp.mcp_server.registry import ToolGroup, to_json, tool
from gitbook_mcp.mcp_server.schemas import (
    PaginationArguments,
    ToolArguments,
    org_id_field,
)


class OrganizationArguments(ToolArguments):
    org_id: str = org_id_field()


class ListCollectionsArguments(PaginationArguments):
    org_id: str = org_id_field()


class CollectionArguments(ToolArguments):
    org_id: str = org_id_field()
    collection_id: str = Field(alias="collectionId", description="The collection ID")


class AskAIArguments(ToolArguments):
    org_id: str = org_id_field()
    query: str = Field(description="The question to ask the AI")


class OrganizationTools(ToolGroup):
    """Tools for organization-level resources."""

    @tool(
        "get_organization",
        "Get details of a GitBook organization",
        OrganizationArguments,
    )
    async def get_organization(self, args: OrganizationArguments) -> str:
        return to_json(await self.client.get_organization(args.org_id))

    @tool(
        "list_collections",
        "List all collections in a GitBook organization",
        ListCollectionsArguments,
    )
    async def list_collections(self, args: ListCollectionsArguments) -> str:
        result = await self.client.list_collections(
            args.org_id, args.pagination_query()
        )
        return to_json(result)

    @tool(
        "get_collection",
        "Get details of a specific collection in a GitBook organization",
        CollectionArguments,
    )
    async def get_collection(self, args: CollectionArguments) -> str:
        result = await self.client.get_collection(args.org_id, args.collection_id)
        return to_json(result)

    @tool(
        "ask_ai",
        "Ask GitBook AI a question about the organization's documentation content",
        AskAIArguments,
    )
    async def ask_ai(self, args: AskAIArguments) -> str:
        return to_json(await self.client.ask_ai(args.org_id, args.payload("query")))
