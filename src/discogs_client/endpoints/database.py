"""Database endpoints: releases, masters, artists and labels."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, TypeVar
from urllib.parse import quote

from discogs_client.core import models
from discogs_client.endpoints.common import create_params

if TYPE_CHECKING:
    import httpx
    from returns.result import Result

    from discogs_client.adapters.returns_adapter import DecodeError
    from discogs_client.core.currency import Currency
    from discogs_client.core.errors import APIError
    from discogs_client.endpoints.common import Pagination
    from discogs_client.transport.http import HTTPClient

T = TypeVar("T")


class DatabaseAPI:
    """Handles the Discogs database endpoints."""

    def __init__(self, http_client: HTTPClient, base_url: str, currency: Currency) -> None:
        """Initialize database API handler.

        Args:
            http_client: HTTP client for making requests
            base_url: API root, without trailing slash
            currency: Currency for marketplace data of releases
        """
        self.http: HTTPClient = http_client
        self.base_url: str = base_url
        self.currency: Currency = currency

    def release(
        self,
        release_id: int,
        *,
        model: type[T] | Any = models.Release,
    ) -> Result[T, APIError | DecodeError | httpx.HTTPError]:
        """Get a release, with marketplace prices in the client currency.

        Args:
            release_id: Discogs release ID
            model: Type to validate the response into

        Returns:
            Result containing the release or error
        """
        params = create_params({"curr_abbr": self.currency.value})
        return self.http.request(f"{self.base_url}/releases/{release_id}", params, model=model)

    def release_rating(
        self,
        release_id: int,
        *,
        model: type[T] | Any = models.CommunityReleaseRating,
    ) -> Result[T, APIError | DecodeError | httpx.HTTPError]:
        """Get the community rating of a release."""
        return self.http.request(f"{self.base_url}/releases/{release_id}/rating", model=model)

    def release_rating_by_user(
        self,
        release_id: int,
        username: str,
        *,
        model: type[T] | Any = models.UserReleaseRating,
    ) -> Result[T, APIError | DecodeError | httpx.HTTPError]:
        """Get the rating a single user gave a release."""
        url = f"{self.base_url}/releases/{release_id}/rating/{quote(username, safe='')}"
        return self.http.request(url, model=model)

    def master(
        self,
        master_id: int,
        *,
        model: type[T] | Any = models.Master,
    ) -> Result[T, APIError | DecodeError | httpx.HTTPError]:
        """Get a master release.

        Args:
            master_id: Discogs master ID
            model: Type to validate the response into

        Returns:
            Result containing the master release or error
        """
        return self.http.request(f"{self.base_url}/masters/{master_id}", model=model)

    def master_versions(
        self,
        master_id: int,
        pagination: Pagination | None = None,
        *,
        model: type[T] | Any = models.MasterVersions,
    ) -> Result[T, APIError | DecodeError | httpx.HTTPError]:
        """Get one page of the versions of a master release.

        Args:
            master_id: Discogs master ID
            pagination: Optional page and ordering
            model: Type to validate the response into

        Returns:
            Result containing the versions or error
        """
        params = pagination.to_params() if pagination else {}
        return self.http.request(f"{self.base_url}/masters/{master_id}/versions", params, model=model)

    def artist(
        self,
        artist_id: int,
        *,
        model: type[T] | Any = models.Artist,
    ) -> Result[T, APIError | DecodeError | httpx.HTTPError]:
        """Get an artist."""
        return self.http.request(f"{self.base_url}/artists/{artist_id}", model=model)

    def artist_releases(
        self,
        artist_id: int,
        pagination: Pagination | None = None,
        *,
        model: type[T] | Any = models.ArtistReleases,
    ) -> Result[T, APIError | DecodeError | httpx.HTTPError]:
        """Get one page of the releases and masters of an artist.

        Args:
            artist_id: Discogs artist ID
            pagination: Optional page and ordering (sort by year, title or format)
            model: Type to validate the response into

        Returns:
            Result containing the releases or error
        """
        params = pagination.to_params() if pagination else {}
        return self.http.request(f"{self.base_url}/artists/{artist_id}/releases", params, model=model)

    def label(
        self,
        label_id: int,
        *,
        model: type[T] | Any = models.Label,
    ) -> Result[T, APIError | DecodeError | httpx.HTTPError]:
        """Get a label, company or recording studio."""
        return self.http.request(f"{self.base_url}/labels/{label_id}", model=model)

    def label_releases(
        self,
        label_id: int,
        pagination: Pagination | None = None,
        *,
        model: type[T] | Any = models.LabelReleases,
    ) -> Result[T, APIError | DecodeError | httpx.HTTPError]:
        """Get one page of the releases of a label."""
        params = pagination.to_params() if pagination else {}
        return self.http.request(f"{self.base_url}/labels/{label_id}/releases", params, model=model)
