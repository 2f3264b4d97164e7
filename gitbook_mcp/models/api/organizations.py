"""Organization-level models."""

from pydantic import BaseModel


class Collection(BaseModel):
    """A group of spaces inside an organization."""

    id: str
    title: str = ""
    description: str | None = None

    model_config = {"extra": "allow"}


__all__ = ["Collection"]
