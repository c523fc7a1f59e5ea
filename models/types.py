"""Type definitions for the Hue lights CLI.

This module provides TypedDict definitions for structured data types used across
the application.
"""

from typing import TypedDict


class UserConfigFile(TypedDict, total=False):
    """Contents of the user config file. Every key is optional."""
    bridge_ip: str
    username: str
    device_type: str
    timeout: float
