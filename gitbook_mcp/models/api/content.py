"""Revision content models."""

from pydantic import BaseModel, Field


class Page(BaseModel):
    """A page (or group) in a revision's page tree."""

    id: str
    title: str = ""
    kind: str | None = None
    type: str | None = None
    path: str | None = None
    slug: str | None = None
    description: str | None = None
    pages: list["Page"] = Field(default_factory=list)

    model_config = {"extra": "allow"}

    def walk(self, depth: int = 0):
        """Yield ``(depth, page)`` for this page and all descendants."""
        yield depth, self
        for child in self.pages:
            yield from child.walk(depth + 1)


class SpaceContent(BaseModel):
    """A revision: the full page tree of a space or change request."""

    id: str
    pages: list[Page] = Field(default_factory=list)

    model_config = {"extra": "allow"}

    def walk(self):
        for page in self.pages:
            yield from page.walk()


__all__ = ["Page", "SpaceContent"]
