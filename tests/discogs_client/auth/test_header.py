"""Tests for authentication header creation."""

from __future__ import annotations

from discogs_client.auth.header import AuthHeader, build_auth_header, create_authorization


class TestCreateAuthorization:
    def test_token(self) -> None:
        assert create_authorization(token="abc123") == "Discogs token=abc123"

    def test_key_and_secret(self) -> None:
        assert create_authorization(key="k", secret="s") == "Discogs key=k, secret=s"

    def test_token_checked_first(self) -> None:
        assert create_authorization(token="abc123", key="k", secret="s") == "Discogs token=abc123"

    def test_nothing(self) -> None:
        assert create_authorization() is None

    def test_key_without_secret_is_anonymous(self) -> None:
        assert create_authorization(key="k") is None


class TestAuthHeader:
    def test_as_dict_with_authorization(self) -> None:
        header = build_auth_header("TestAgent/1.0", token="abc123")

        assert header.as_dict() == {
            "User-Agent": "TestAgent/1.0",
            "Authorization": "Discogs token=abc123",
        }

    def test_as_dict_without_authorization(self) -> None:
        header = AuthHeader(user_agent="TestAgent/1.0")

        assert header.as_dict() == {"User-Agent": "TestAgent/1.0"}

    def test_as_dict_returns_fresh_dict(self) -> None:
        header = build_auth_header("TestAgent/1.0", key="k", secret="s")

        headers = header.as_dict()
        headers["Authorization"] = "tampered"

        assert header.as_dict()["Authorization"] == "Discogs key=k, secret=s"
