"""Client for the Discogs database and search API."""

from discogs_client.core.currency import Currency
from discogs_client.core.errors import (
    CredentialsIncompleteError,
    CurrencyNotSupportedError,
    DiscogsError,
    UnauthorizedError,
    UnknownError,
    UserAgentInvalidError,
)
from discogs_client.core.settings import DiscogsEnvSettings, DiscogsSettings
from discogs_client.endpoints.common import Pagination
from discogs_client.endpoints.search import SearchRequest
from discogs_client.facade import DiscogsClient

__version__ = "1.0.0"
__all__ = [
    "CredentialsIncompleteError",
    "Currency",
    "CurrencyNotSupportedError",
    "DiscogsClient",
    "DiscogsEnvSettings",
    "DiscogsError",
    "DiscogsSettings",
    "Pagination",
    "SearchRequest",
    "UnauthorizedError",
    "UnknownError",
    "UserAgentInvalidError",
]
