"""Shared response envelopes."""

from typing import Generic, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


class NextPage(BaseModel):
    """Cursor for the following page of a list."""

    page: str


class PaginatedList(BaseModel, Generic[T]):
    """One page of a list endpoint."""

    items: list[T] = Field(default_factory=list)
    next: NextPage | None = None

    model_config = {"extra": "allow"}

    @property
    def next_page(self) -> str | None:
        return self.next.page if self.next else None


__all__ = ["NextPage", "PaginatedList"]
