"""Turn Discogs HTTP responses into `returns` results.

Nothing in here raises for a bad response: status errors, broken JSON and
payloads that do not fit the target model all come back as a `Failure`.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any, TypeVar

from pydantic import TypeAdapter, ValidationError
from returns.result import Failure, Result, Success

from discogs_client.core.errors import APIError, UnauthorizedError, UnknownError

if TYPE_CHECKING:
    import httpx

T = TypeVar("T")

logger = logging.getLogger(__name__)

DecodeError = json.JSONDecodeError | UnicodeDecodeError | ValidationError


def _map_error(response: httpx.Response) -> APIError:
    """Map a non-200 response to an error.

    Only 401 gets its own type. The body is not inspected.
    """
    if response.status_code == 401:  # noqa: PLR2004
        return UnauthorizedError(response.reason_phrase or "Unauthorized")
    return UnknownError(response.status_code, response.reason_phrase)


def _json_from_response(response: httpx.Response) -> Any:
    # raises UnicodeDecodeError on bodies that are not UTF-8, json.JSONDecodeError on malformed JSON
    return json.loads(response.content)


def decode_response_result(
    response: httpx.Response,
    model: type[T] | Any,
) -> Result[T, APIError | DecodeError]:
    """Check the status of a response and decode its body into `model`.

    Args:
        response: A fully read response
        model: Any type pydantic can validate into (a model, ``dict[str, Any]``, ...)

    Returns:
        Success with the decoded value, or Failure with the error
    """
    if response.status_code != 200:  # noqa: PLR2004
        logger.warning("Discogs answered %s %s", response.status_code, response.reason_phrase)
        return Failure(_map_error(response))

    try:
        data = _json_from_response(response)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        return Failure(exc)

    try:
        return Success(TypeAdapter(model).validate_python(data))
    except ValidationError as exc:
        return Failure(exc)
