"""Space models."""

from pydantic import BaseModel, Field


class SpaceUrls(BaseModel):
    app: str
    published: str | None = None

    model_config = {"extra": "allow"}


class Space(BaseModel):
    """A top-level documentation container."""

    id: str
    title: str = ""
    visibility: str | None = None
    created_at: str | None = Field(default=None, alias="createdAt")
    updated_at: str | None = Field(default=None, alias="updatedAt")
    urls: SpaceUrls | None = None

    model_config = {"extra": "allow", "populate_by_name": True}


class SearchResult(BaseModel):
    """A search hit inside a space."""

    id: str
    title: str = ""
    path: str = ""

    model_config = {"extra": "allow"}


__all__ = ["Space", "SpaceUrls", "SearchResult"]
