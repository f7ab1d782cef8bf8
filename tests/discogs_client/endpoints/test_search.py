"""Tests for SearchAPI."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from pydantic import ValidationError
from returns.result import Failure, Success

from discogs_client.core.errors import UnauthorizedError
from discogs_client.endpoints.search import SearchAPI, SearchRequest

if TYPE_CHECKING:  # pragma: no cover
    from discogs_client.transport.http import HTTPClient

    from .conftest import FakeDiscogs

SEARCH_URL = "https://api.discogs.com/database/search"


@pytest.fixture
def search_api(http_client: HTTPClient) -> SearchAPI:
    return SearchAPI(http_client, SEARCH_URL)


class TestSearchRequest:
    def test_empty_request_has_no_params(self) -> None:
        assert SearchRequest().to_params() == {}

    def test_only_set_fields_are_sent(self) -> None:
        request = SearchRequest(q="nevermind", type="release", artist="Nirvana", year="1991", page=2, per_page=50)

        assert request.to_params() == {
            "artist": "Nirvana",
            "page": "2",
            "per_page": "50",
            "q": "nevermind",
            "type": "release",
            "year": "1991",
        }

    def test_empty_strings_are_dropped(self) -> None:
        assert SearchRequest(q="", label="Sub Pop").to_params() == {"label": "Sub Pop"}

    def test_unknown_type_rejected(self) -> None:
        with pytest.raises(ValidationError):
            SearchRequest(type="song")  # type: ignore[arg-type]

    def test_unknown_term_rejected(self) -> None:
        with pytest.raises(ValidationError):
            SearchRequest(artsit="Nirvana")  # type: ignore[call-arg]

    def test_per_page_limit(self) -> None:
        with pytest.raises(ValidationError):
            SearchRequest(per_page=101)


class TestSearchAPI:
    def test_search(self, search_api: SearchAPI, fake_discogs: FakeDiscogs) -> None:
        fake_discogs.payload = {
            "pagination": {"page": 1, "pages": 1, "per_page": 50, "items": 1, "urls": {}},
            "results": [
                {
                    "id": 367113,
                    "type": "release",
                    "title": "Nirvana - Nevermind",
                    "year": "1991",
                    "format": ["Vinyl", "LP", "Album"],
                    "label": ["DGC", "Sub Pop"],
                    "genre": ["Rock"],
                    "style": ["Grunge"],
                    "country": "US",
                    "catno": "DGC-24425",
                    "community": {"have": 9000, "want": 4000},
                },
            ],
        }

        result = search_api.search(SearchRequest(release_title="nevermind", artist="nirvana", type="release"))

        assert isinstance(result, Success)
        search = result.unwrap()
        assert search.pagination.items == 1
        assert search.results[0].label == ["DGC", "Sub Pop"]
        assert search.results[0].community.have == 9000
        assert fake_discogs.last.url == SEARCH_URL
        assert fake_discogs.last.params == {"artist": "nirvana", "release_title": "nevermind", "type": "release"}

    def test_search_unauthorized(self, search_api: SearchAPI, fake_discogs: FakeDiscogs) -> None:
        fake_discogs.status = 401
        fake_discogs.payload = {"message": "You must authenticate to access this resource."}

        result = search_api.search(SearchRequest(q="nirvana"))

        assert isinstance(result, Failure)
        assert isinstance(result.failure(), UnauthorizedError)
