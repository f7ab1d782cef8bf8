"""Request headers that identify and authenticate a client."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from discogs_client.core.types import StrDict


class AuthHeader(BaseModel):
    """Headers sent with every request of one client."""

    model_config = ConfigDict(frozen=True)

    user_agent: str
    authorization: str | None = None

    def as_dict(self) -> StrDict:
        headers = {"User-Agent": self.user_agent}
        if self.authorization is not None:
            headers["Authorization"] = self.authorization
        return headers


def create_authorization(token: str = "", key: str = "", secret: str = "") -> str | None:
    """Create the Discogs ``Authorization`` value.

    A token wins over a key/secret pair. Without either, requests go out
    unauthenticated, which some endpoints allow.

    Args:
        token: Personal access token
        key: Consumer key
        secret: Consumer secret

    Returns:
        Header value, or None for anonymous access
    """
    if token:
        return f"Discogs token={token}"
    if key and secret:
        return f"Discogs key={key}, secret={secret}"
    return None


def build_auth_header(user_agent: str, token: str = "", key: str = "", secret: str = "") -> AuthHeader:
    return AuthHeader(user_agent=user_agent, authorization=create_authorization(token, key, secret))
