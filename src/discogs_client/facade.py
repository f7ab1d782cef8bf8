"""Main facade for the Discogs client."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, TypeVar

from discogs_client.core import models
from discogs_client.core.settings import DiscogsEnvSettings, DiscogsSettings
from discogs_client.core.validation import ClientConfig, validate_settings
from discogs_client.endpoints.database import DatabaseAPI
from discogs_client.endpoints.search import SearchAPI, SearchRequest
from discogs_client.transport.http import HTTPClient

if TYPE_CHECKING:
    import httpx
    from returns.result import Result

    from discogs_client.adapters.returns_adapter import DecodeError
    from discogs_client.core.errors import APIError
    from discogs_client.endpoints.common import Pagination

T = TypeVar("T")

logger = logging.getLogger("discogs_client")


class DiscogsClient:
    """Discogs API client giving access to the database and search endpoints."""

    def __init__(self, settings: DiscogsSettings | None) -> None:
        """Initialize Discogs client.

        Args:
            settings: Client options; a user agent is required. The
                ``discogs_client`` logger level is only touched when
                ``log_level`` is set explicitly.

        Raises:
            UserAgentInvalidError: If settings are missing or the user agent is empty
            CurrencyNotSupportedError: If the currency is not supported
            CredentialsIncompleteError: If only one of key and secret is set
        """
        self.config: ClientConfig = validate_settings(settings)
        self.settings: DiscogsSettings = settings  # type: ignore[assignment]
        if self.settings.log_level is not None:
            logger.setLevel(self.settings.log_level)

        # The header belongs to this client only
        self.http: HTTPClient = HTTPClient(self.config.header, timeout=self.settings.timeout_seconds)

        # Initialize API endpoint handlers
        self.database: DatabaseAPI = DatabaseAPI(self.http, self.config.base_url, self.config.currency)
        self.search: SearchAPI = SearchAPI(self.http, f"{self.config.base_url}/database/search")

    @classmethod
    def from_env(cls) -> DiscogsClient:
        """Create a client from ``DISCOGS_*`` environment variables and ``.env``."""
        return cls(DiscogsEnvSettings())

    # Shortcuts to the endpoint handlers
    def release(
        self,
        release_id: int,
        *,
        model: type[T] | Any = models.Release,
    ) -> Result[T, APIError | DecodeError | httpx.HTTPError]:
        """Get a release."""
        return self.database.release(release_id, model=model)

    def release_rating(
        self,
        release_id: int,
        *,
        model: type[T] | Any = models.CommunityReleaseRating,
    ) -> Result[T, APIError | DecodeError | httpx.HTTPError]:
        """Get the community rating of a release."""
        return self.database.release_rating(release_id, model=model)

    def release_rating_by_user(
        self,
        release_id: int,
        username: str,
        *,
        model: type[T] | Any = models.UserReleaseRating,
    ) -> Result[T, APIError | DecodeError | httpx.HTTPError]:
        """Get the rating a user gave a release."""
        return self.database.release_rating_by_user(release_id, username, model=model)

    def master(
        self,
        master_id: int,
        *,
        model: type[T] | Any = models.Master,
    ) -> Result[T, APIError | DecodeError | httpx.HTTPError]:
        """Get a master release."""
        return self.database.master(master_id, model=model)

    def master_versions(
        self,
        master_id: int,
        pagination: Pagination | None = None,
        *,
        model: type[T] | Any = models.MasterVersions,
    ) -> Result[T, APIError | DecodeError | httpx.HTTPError]:
        """Get versions of a master release."""
        return self.database.master_versions(master_id, pagination, model=model)

    def artist(
        self,
        artist_id: int,
        *,
        model: type[T] | Any = models.Artist,
    ) -> Result[T, APIError | DecodeError | httpx.HTTPError]:
        """Get an artist."""
        return self.database.artist(artist_id, model=model)

    def artist_releases(
        self,
        artist_id: int,
        pagination: Pagination | None = None,
        *,
        model: type[T] | Any = models.ArtistReleases,
    ) -> Result[T, APIError | DecodeError | httpx.HTTPError]:
        """Get releases of an artist."""
        return self.database.artist_releases(artist_id, pagination, model=model)

    def label(
        self,
        label_id: int,
        *,
        model: type[T] | Any = models.Label,
    ) -> Result[T, APIError | DecodeError | httpx.HTTPError]:
        """Get a label."""
        return self.database.label(label_id, model=model)

    def label_releases(
        self,
        label_id: int,
        pagination: Pagination | None = None,
        *,
        model: type[T] | Any = models.LabelReleases,
    ) -> Result[T, APIError | DecodeError | httpx.HTTPError]:
        """Get releases of a label."""
        return self.database.label_releases(label_id, pagination, model=model)

    def search_database(
        self,
        request: SearchRequest | None = None,
        *,
        model: type[T] | Any = models.Search,
        **terms: Any,
    ) -> Result[T, APIError | DecodeError | httpx.HTTPError]:
        """Search the database, either with a prepared request or keyword terms."""
        if request is None:
            request = SearchRequest(**terms)
        return self.search.search(request, model=model)
