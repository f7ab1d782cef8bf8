"""Validation of client settings into a ready-to-use configuration."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict

from discogs_client.auth.header import AuthHeader, build_auth_header
from discogs_client.core.currency import Currency, parse_currency
from discogs_client.core.errors import CredentialsIncompleteError, UserAgentInvalidError
from discogs_client.core.settings import DISCOGS_API

if TYPE_CHECKING:
    from discogs_client.core.settings import DiscogsSettings


class ClientConfig(BaseModel):
    """Validated, immutable configuration of a single client."""

    model_config = ConfigDict(frozen=True)

    base_url: str
    currency: Currency
    header: AuthHeader


def validate_settings(settings: DiscogsSettings | None) -> ClientConfig:
    """Check settings and derive the client configuration.

    Args:
        settings: User supplied options, or None

    Returns:
        Base URL, currency and authentication header for the client

    Raises:
        UserAgentInvalidError: If settings are missing or the user agent is empty
        CurrencyNotSupportedError: If the currency is not supported
        CredentialsIncompleteError: If only one of key and secret is set
    """
    if settings is None or not settings.user_agent:
        raise UserAgentInvalidError

    currency = parse_currency(settings.currency)

    # key and secret come as a pair
    if (settings.key == "") != (settings.secret == ""):
        raise CredentialsIncompleteError

    header = build_auth_header(settings.user_agent, settings.token, settings.key, settings.secret)
    base_url = (settings.url or DISCOGS_API).rstrip("/")

    return ClientConfig(base_url=base_url, currency=currency, header=header)
