"""Marketplace currencies accepted by the Discogs API."""

from __future__ import annotations

from enum import Enum

from discogs_client.core.errors import CurrencyNotSupportedError


class Currency(str, Enum):
    """Currency abbreviations Discogs uses for marketplace data (``curr_abbr``)."""

    USD = "USD"
    GBP = "GBP"
    EUR = "EUR"
    CAD = "CAD"
    AUD = "AUD"
    JPY = "JPY"
    CHF = "CHF"
    MXN = "MXN"
    BRL = "BRL"
    NZD = "NZD"
    SEK = "SEK"
    ZAR = "ZAR"


DEFAULT_CURRENCY = Currency.USD


def parse_currency(value: str) -> Currency:
    """Turn a currency code into a `Currency`.

    Args:
        value: Three-letter code, matched exactly. An empty string selects USD.

    Returns:
        The matching currency

    Raises:
        CurrencyNotSupportedError: If the code is not one of the supported currencies
    """
    if value == "":
        return DEFAULT_CURRENCY
    try:
        return Currency(value)
    except ValueError:
        raise CurrencyNotSupportedError(value) from None
