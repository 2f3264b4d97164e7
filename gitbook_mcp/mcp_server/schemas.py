"""Argument models shared by the tool groups.

Field aliases are the camelCase argument names hosts send; the JSON schema of
each model is advertised as the tool's ``inputSchema``.
"""

from typing import Any, Literal

from pydantic import BaseModel, Field
from pydantic.json_schema import GenerateJsonSchema

from gitbook_mcp.core.pagination import build_pagination_query

SpaceVisibility = Literal[
    "public", "unlisted", "share-link", "visitor-auth", "in-collection"
]
ChangeRequestStatus = Literal["draft", "open", "closed"]
ReviewStatus = Literal["approved", "changes-requested", "commented"]


class ToolSchemaGenerator(GenerateJsonSchema):
    """Emit optional arguments as plain optional properties.

    ``str | None = None`` becomes ``{"type": "string"}`` outside ``required``
    rather than an ``anyOf`` with ``null``; field titles are dropped.
    """

    def nullable_schema(self, schema):
        return self.generate_inner(schema["schema"])

    def default_schema(self, schema):
        json_schema = super().default_schema(schema)
        if "default" in json_schema and json_schema["default"] is None:
            json_schema.pop("default")
        return json_schema

    def field_title_should_be_set(self, schema) -> bool:
        return False


class ToolArguments(BaseModel):
    """Base class for tool argument models."""

    model_config = {"populate_by_name": True, "extra": "ignore"}

    @classmethod
    def input_schema(cls) -> dict[str, Any]:
        schema = cls.model_json_schema(
            by_alias=True, schema_generator=ToolSchemaGenerator
        )
        schema.pop("title", None)
        schema.setdefault("properties", {})
        return schema

    def payload(self, *fields: str) -> dict[str, Any]:
        """Request body from the named fields, leaving out unset ones."""
        return self.model_dump(include=set(fields), by_alias=True, exclude_none=True)


class PaginationArguments(ToolArguments):
    """Base for list tools taking a ``page`` token and a ``limit``."""

    page: str | None = Field(default=None, description="Pagination token")
    limit: int | None = Field(default=None, description="Max items to return")

    def pagination_query(self) -> dict[str, str]:
        return build_pagination_query(self.page, self.limit)


def space_id_field(description: str = "The ID of the space"):
    return Field(alias="spaceId", description=description)


def org_id_field(description: str = "The organization ID"):
    return Field(alias="orgId", description=description)


def change_request_id_field(
    description: str = "The ID or number of the change request",
):
    return Field(alias="changeRequestId", description=description)


def optional_change_request_id_field(
    description: str = "Optional change request ID",
):
    return Field(default=None, alias="changeRequestId", description=description)
