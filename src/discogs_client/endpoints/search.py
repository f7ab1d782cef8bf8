"""Database search endpoint."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Literal, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from discogs_client.core import models
from discogs_client.endpoints.common import create_params

if TYPE_CHECKING:
    import httpx
    from returns.result import Result

    from discogs_client.adapters.returns_adapter import DecodeError
    from discogs_client.core.errors import APIError
    from discogs_client.core.types import QueryParams
    from discogs_client.transport.http import HTTPClient

T = TypeVar("T")


class SearchRequest(BaseModel):
    """Search query. Every field left unset is left out of the request."""

    model_config = ConfigDict(extra="forbid")

    q: str | None = None
    type: Literal["release", "master", "artist", "label"] | None = None
    title: str | None = None
    release_title: str | None = None
    credit: str | None = None
    artist: str | None = None
    anv: str | None = None
    label: str | None = None
    genre: str | None = None
    style: str | None = None
    country: str | None = None
    year: str | None = None
    format: str | None = None
    catno: str | None = None
    barcode: str | None = None
    track: str | None = None
    submitter: str | None = None
    contributor: str | None = None

    page: int | None = Field(default=None, ge=1)
    per_page: int | None = Field(default=None, ge=1, le=100)

    def to_params(self) -> QueryParams:
        return create_params(self.model_dump())


class SearchAPI:
    """Handles the Discogs database search endpoint.

    Discogs only answers searches from authenticated clients.
    """

    def __init__(self, http_client: HTTPClient, url: str) -> None:
        self.http: HTTPClient = http_client
        self.url: str = url

    def search(
        self,
        request: SearchRequest,
        *,
        model: type[T] | Any = models.Search,
    ) -> Result[T, APIError | DecodeError | httpx.HTTPError]:
        """Search releases, masters, artists and labels.

        Args:
            request: Search terms, filters and page
            model: Type to validate the response into

        Returns:
            Result containing one page of search results or error
        """
        return self.http.request(self.url, request.to_params(), model=model)
