"""Configuration for connecting to a Hue hub.

This module handles:
- The HubConfig value handed to HueClient
- Loading/saving the user config file
- Merging defaults, the config file and command-line overrides
"""

import json
import os
from dataclasses import dataclass, fields
from pathlib import Path

import click

from models.types import UserConfigFile

# User configuration file location
USER_CONFIG_FILE = Path.home() / '.hue_lights' / 'config.json'

DEFAULT_BRIDGE_IP = '192.168.1.3'
DEFAULT_USERNAME = 'HueGoRaspberryPiUser'
DEFAULT_DEVICE_TYPE = 'HueGoRaspberryPi'


@dataclass(frozen=True)
class HubConfig:
    """Connection parameters for one hub.

    Attributes:
        bridge_ip: IPv4 address of the hub
        username: Registered user token
        device_type: Device type sent when registering
        timeout: Seconds to wait for the hub, or None for no limit
    """
    bridge_ip: str = DEFAULT_BRIDGE_IP
    username: str = DEFAULT_USERNAME
    device_type: str = DEFAULT_DEVICE_TYPE
    timeout: float | None = None

    @classmethod
    def from_sources(cls, config_file: Path | None = None, **overrides) -> 'HubConfig':
        """Build a config from defaults, the user config file and overrides.

        Overrides that are None are ignored, so unset command-line options fall
        through to the config file and then the defaults.

        Args:
            config_file: Path to read instead of USER_CONFIG_FILE
            **overrides: Field values that take priority over the file
        """
        names = {f.name for f in fields(cls)}
        unknown = set(overrides) - names
        if unknown:
            raise TypeError(f"Unknown config fields: {', '.join(sorted(unknown))}")

        values = {k: v for k, v in load_user_config(config_file).items() if k in names}
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)


def _valid_setting(key: str, value) -> bool:
    """Check a value read from the config file. Unknown keys pass through."""
    if key == 'timeout':
        if value is None:
            return True
        return isinstance(value, (int, float)) and not isinstance(value, bool) and value > 0
    if key in ('bridge_ip', 'username', 'device_type'):
        return isinstance(value, str) and bool(value)
    return True


def load_user_config(config_file: Path | None = None) -> UserConfigFile:
    """Load the user config file.

    Returns:
        Dict of saved settings, empty if the file is missing or unreadable
    """
    config_file = config_file or USER_CONFIG_FILE
    if not config_file.exists():
        return {}

    try:
        with open(config_file, 'r') as f:
            config = json.load(f)
    except (json.JSONDecodeError, IOError) as e:
        click.echo(f"Warning: Failed to load config from {config_file}: {e}", err=True)
        return {}

    if not isinstance(config, dict):
        click.echo(f"Warning: Ignoring {config_file}: expected a JSON object", err=True)
        return {}

    valid = {}
    for key, value in config.items():
        if not _valid_setting(key, value):
            click.echo(f"Warning: Ignoring invalid {key!r} in {config_file}: {value!r}", err=True)
            continue
        valid[key] = value
    return valid


def save_user_config(config: UserConfigFile, config_file: Path | None = None):
    """Merge config into the user config file.

    Creates the config directory if it doesn't exist and sets secure
    file permissions (600 - user read/write only).
    """
    config_file = config_file or USER_CONFIG_FILE
    config_file.parent.mkdir(parents=True, exist_ok=True)

    existing = {}
    if config_file.exists():
        try:
            with open(config_file, 'r') as f:
                existing = json.load(f)
        except (json.JSONDecodeError, IOError):
            # Corrupt file, start fresh
            existing = {}

    if not isinstance(existing, dict):
        existing = {}
    existing.update(config)
    with open(config_file, 'w') as f:
        json.dump(existing, f, indent=2)

    os.chmod(config_file, 0o600)
