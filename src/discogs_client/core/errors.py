"""Error definitions for discogs_client."""

from __future__ import annotations


class DiscogsError(Exception):
    """Base exception for Discogs client errors."""


class ConfigurationError(DiscogsError):
    """Raised when client settings are rejected before any request is made."""


class UserAgentInvalidError(ConfigurationError):
    """Raised when the user agent is empty or no settings were given."""

    def __init__(self) -> None:
        super().__init__("invalid user-agent")


class CurrencyNotSupportedError(ConfigurationError):
    """Raised when the currency is not one Discogs accepts."""

    def __init__(self, currency: str) -> None:
        super().__init__(f"currency is not supported: {currency!r}")
        self.currency = currency


class CredentialsIncompleteError(ConfigurationError):
    """Raised when only one of consumer key and secret is set."""

    def __init__(self) -> None:
        super().__init__("key and secret must be set together")


class APIError(DiscogsError):
    """Raised for a non-200 answer from the Discogs API."""

    def __init__(self, message: str, *, http_status: int, reason: str) -> None:
        super().__init__(message)
        self.http_status = http_status
        self.reason = reason


class UnauthorizedError(APIError):
    """Raised when Discogs answers 401."""

    def __init__(self, reason: str = "Unauthorized") -> None:
        super().__init__("unauthorized", http_status=401, reason=reason)


class UnknownError(APIError):
    """Raised for any other non-200 status; carries the status text."""

    def __init__(self, http_status: int, reason: str) -> None:
        self.status = f"{http_status} {reason}".strip()
        super().__init__(f"unknown error: {self.status}", http_status=http_status, reason=reason)
