"""Classification of hub response bodies.

The hub answers every endpoint with JSON, and a failure looks like:

    [{"error": {"type": 101, "address": "/", "description": "link button not pressed"}}]

Success payloads can have the same outer shape (a list of single-key objects),
so a body only counts as an error when it matches the envelope strictly AND the
first entry carries a non-zero error type.
"""

import json
from typing import Any, Callable, TypeVar

from core.errors import AggregateError, ApiError, MalformedResponseError

T = TypeVar('T')

# Exceptions a payload parser raises when the JSON has the wrong shape
PARSE_ERRORS = (TypeError, ValueError, KeyError)


def _error_from_entry(entry: Any) -> ApiError | None:
    """Decode one envelope entry, or None if it cannot be an error entry."""
    if not isinstance(entry, dict):
        return None

    error = entry.get('error')
    if error is None:
        return ApiError(0)
    if not isinstance(error, dict):
        return None

    # null members decode as zero values
    error_type = error.get('type')
    if error_type is None:
        error_type = 0
    address = error.get('address') or ''
    description = error.get('description') or ''

    # bool is an int subclass but never a valid error type
    if isinstance(error_type, bool) or not isinstance(error_type, int):
        return None
    if not isinstance(address, str) or not isinstance(description, str):
        return None

    return ApiError(error_type, address, description)


def find_api_errors(payload: Any) -> list[ApiError] | None:
    """Return the errors in payload if it is a confirmed error envelope.

    Args:
        payload: Decoded JSON body

    Returns:
        List of ApiError in hub order, or None if the payload is not an error
    """
    if not isinstance(payload, list) or not payload:
        return None

    errors = []
    for entry in payload:
        error = _error_from_entry(entry)
        if error is None:
            return None
        errors.append(error)

    if errors[0].type == 0:
        return None
    return errors


def raise_for_api_errors(payload: Any):
    """Raise ApiError or AggregateError if payload is an error envelope."""
    errors = find_api_errors(payload)
    if not errors:
        return
    if len(errors) == 1:
        raise errors[0]
    raise AggregateError(errors)


def decode_response(body: bytes, parse: Callable[[Any], T]) -> T:
    """Decode a raw response body into the operation's result type.

    Args:
        body: Raw response bytes
        parse: Converts the decoded JSON into the success type

    Returns:
        Whatever parse returns

    Raises:
        ApiError, AggregateError: The hub reported failure
        MalformedResponseError: The body is not JSON or has the wrong shape
    """
    try:
        payload = json.loads(body)
    except ValueError as e:
        raise MalformedResponseError(body, e) from e

    raise_for_api_errors(payload)

    try:
        return parse(payload)
    except PARSE_ERRORS as e:
        raise MalformedResponseError(body, e) from e
