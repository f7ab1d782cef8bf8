"""Type definitions for discogs_client."""

from __future__ import annotations

from typing import Any

# Type aliases for better readability
AnyDict = dict[str, Any]
StrDict = dict[str, str]
QueryParams = dict[str, str]
