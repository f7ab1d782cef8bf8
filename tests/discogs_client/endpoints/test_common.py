"""Tests for endpoint helpers."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from discogs_client.endpoints.common import Pagination, create_params


class TestCreateParams:
    def test_none(self) -> None:
        assert create_params(None) == {}

    def test_empty(self) -> None:
        assert create_params({}) == {}

    def test_values_are_stringified(self) -> None:
        assert create_params({"page": 2, "per_page": 50}) == {"page": "2", "per_page": "50"}

    def test_empty_values_dropped(self) -> None:
        assert create_params({"q": "", "sort": None, "type": "artist"}) == {"type": "artist"}

    def test_keys_sorted(self) -> None:
        assert list(create_params({"z": 1, "a": 2, "m": 3})) == ["a", "m", "z"]


class TestPagination:
    def test_defaults_send_nothing(self) -> None:
        assert Pagination().to_params() == {}

    def test_all_fields(self) -> None:
        pagination = Pagination(sort="title", sort_order="asc", page=3, per_page=25)

        assert pagination.to_params() == {"page": "3", "per_page": "25", "sort": "title", "sort_order": "asc"}

    @pytest.mark.parametrize("kwargs", [{"page": 0}, {"per_page": 0}, {"per_page": 101}, {"sort_order": "up"}])
    def test_invalid(self, kwargs: dict[str, object]) -> None:
        with pytest.raises(ValidationError):
            Pagination(**kwargs)  # type: ignore[arg-type]
