"""Helpers shared by the endpoint handlers."""

from __future__ import annotations

from typing import TYPE_CHECKING, Literal

from pydantic import BaseModel, Field

if TYPE_CHECKING:
    from discogs_client.core.types import AnyDict, QueryParams


def create_params(options: AnyDict | None) -> QueryParams:
    """Create query parameters from options.

    Empty values are dropped, the rest is stringified and sorted by key.

    Args:
        options: Dictionary of query parameters

    Returns:
        Query parameters ready for encoding
    """
    if not options:
        return {}
    return {key: str(value) for key, value in sorted(options.items()) if value is not None and value != ""}


class Pagination(BaseModel):
    """Paging and ordering of list endpoints."""

    sort: str | None = None
    sort_order: Literal["asc", "desc"] | None = None
    page: int | None = Field(default=None, ge=1)
    per_page: int | None = Field(default=None, ge=1, le=100)

    def to_params(self) -> QueryParams:
        return create_params(self.model_dump())
