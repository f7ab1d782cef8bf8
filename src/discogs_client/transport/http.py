"""HTTP client for the Discogs API."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, TypeVar

import httpx
from returns.result import Failure, Result

from discogs_client.adapters.returns_adapter import decode_response_result

if TYPE_CHECKING:
    from discogs_client.adapters.returns_adapter import DecodeError
    from discogs_client.auth.header import AuthHeader
    from discogs_client.core.errors import APIError
    from discogs_client.core.types import QueryParams, StrDict

T = TypeVar("T")

logger = logging.getLogger(__name__)


class HTTPClient:
    """Sends GET requests to the Discogs REST API with a fixed set of headers."""

    def __init__(self, header: AuthHeader, *, timeout: float | None = 5.0) -> None:
        """Initialize HTTP client.

        Args:
            header: Headers of the owning client, sent unchanged with every request
            timeout: Transport timeout in seconds, None to wait forever
        """
        self.header: AuthHeader = header
        self.timeout: float | None = timeout

    def request(
        self,
        url: str,
        params: QueryParams | None = None,
        *,
        model: type[T] | Any,
    ) -> Result[T, APIError | DecodeError | httpx.HTTPError]:
        """Make a GET request and decode the JSON answer into `model`.

        Args:
            url: Absolute URL of the resource
            params: Query parameters, URL-encoded into the query string
            model: Type to validate the JSON body into

        Returns:
            Success with the decoded body. Failure with UnauthorizedError on 401,
            UnknownError on any other non-200 status, the JSON or validation
            error on a bad body, or the httpx error on transport failures.
        """
        logger.debug("GET %s params=%s", url, params)
        try:
            response = self._make_http_request("GET", url, self.header.as_dict(), params or {})
        except httpx.HTTPError as exc:
            logger.debug("GET %s failed: %s", url, exc)
            return Failure(exc)

        return decode_response_result(response, model)

    def _make_http_request(
        self,
        method: str,
        url: str,
        headers: StrDict,
        params: QueryParams,
    ) -> httpx.Response:
        # the context manager reads the body and releases the connection
        with httpx.Client(headers=headers, timeout=self.timeout) as client:
            return client.request(method, url, params=params)
