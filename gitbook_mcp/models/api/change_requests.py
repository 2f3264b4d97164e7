"""Change request and comment models."""

from pydantic import BaseModel, Field


class ChangeRequest(BaseModel):
    """A draft set of edits to a space, similar to a pull request."""

    id: str
    number: int | None = None
    status: str | None = None
    subject: str | None = None
    created_at: str | None = Field(default=None, alias="createdAt")
    updated_at: str | None = Field(default=None, alias="updatedAt")
    urls: dict | None = None

    model_config = {"extra": "allow", "populate_by_name": True}


class CommentAuthor(BaseModel):
    id: str
    display_name: str | None = Field(default=None, alias="displayName")

    model_config = {"extra": "allow", "populate_by_name": True}


class Comment(BaseModel):
    id: str
    body: str | dict | None = None
    created_at: str | None = Field(default=None, alias="createdAt")
    updated_at: str | None = Field(default=None, alias="updatedAt")
    author: CommentAuthor | None = None

    model_config = {"extra": "allow", "populate_by_name": True}


__all__ = ["ChangeRequest", "CommentAuthor", "Comment"]
