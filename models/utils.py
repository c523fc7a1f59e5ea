"""Utility functions shared by the models and commands.

This module contains helpers used across the application:
- expect_object: Check that a decoded JSON value is an object
- member: Read a typed member from a JSON object with a zero-value default
- get_client: Build a HueClient from the click context
"""

from typing import Any

import click

_ZERO_VALUES = {bool: False, int: 0, float: 0.0, str: ''}


def expect_object(value: Any, what: str) -> dict:
    """Return value if it is a JSON object, otherwise raise TypeError."""
    if not isinstance(value, dict):
        raise TypeError(f"{what}: expected object, got {type(value).__name__}")
    return value


def member(data: dict, key: str, kind: type, default: Any = None) -> Any:
    """Read data[key], checking its JSON type.

    Missing or null members decode to the zero value for kind (or default).
    A member of the wrong type raises TypeError.

    Args:
        data: JSON object
        key: Member name as sent by the hub
        kind: Expected Python type (bool, int, float, str, list or dict)
        default: Value for a missing member if kind has no zero value
    """
    value = data.get(key)
    if value is None:
        if default is not None:
            return default
        return _ZERO_VALUES.get(kind, kind())

    # JSON booleans are ints in Python but never valid numbers on the wire
    if kind is not bool and isinstance(value, bool):
        raise TypeError(f"{key}: expected {kind.__name__}, got bool")
    if kind is float and isinstance(value, int):
        return float(value)
    if not isinstance(value, kind):
        raise TypeError(f"{key}: expected {kind.__name__}, got {type(value).__name__}")
    return value


def get_client():
    """Get a HueClient for the hub configured on the current click context."""
    from core.client import HueClient
    from core.config import HubConfig

    ctx = click.get_current_context()
    config = ctx.find_object(HubConfig) or HubConfig.from_sources()
    return HueClient(config)
