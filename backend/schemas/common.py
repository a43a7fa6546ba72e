"""Shared response shapes: navigation links and the paged list envelope."""
from typing import Generic, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


class Link(BaseModel):
    """Navigation link: relation, absolute href and HTTP method."""

    rel: str
    href: str
    method: str = "GET"


class PagedResponse(BaseModel, Generic[T]):
    """List endpoint envelope."""

    items: list[T]
    page: int
    pageSize: int
    totalCount: int
    links: list[Link] = Field(default_factory=list)


# Signed 64-bit INTEGER range of the database; values outside it cannot be bound as parameters.
DB_ID_MIN = -(2**63)
DB_ID_MAX = 2**63 - 1


def reference_id(description: str):
    """Field for an id referencing another table, bounded to what the database can store."""
    return Field(..., ge=DB_ID_MIN, le=DB_ID_MAX, description=description)
