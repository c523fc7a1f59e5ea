"""Pytest configuration and fixtures for Hue lights tests."""

import json
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from core.client import HueClient
from core.config import HubConfig


@pytest.fixture
def project_root():
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture(autouse=True)
def isolated_user_config(tmp_path, monkeypatch):
    """Point the user config file at a temp path so tests never read ~/."""
    config_file = tmp_path / '.hue_lights' / 'config.json'
    monkeypatch.setattr('core.config.USER_CONFIG_FILE', config_file)
    for var in ('HUE_IP', 'HUE_USERNAME', 'HUE_DEVICE_TYPE', 'HUE_TIMEOUT'):
        monkeypatch.delenv(var, raising=False)
    return config_file


@pytest.fixture
def hub_config():
    return HubConfig(bridge_ip='10.0.0.5', username='test-user', device_type='test-device')


@pytest.fixture
def client(hub_config):
    return HueClient(hub_config)


@pytest.fixture
def make_response():
    """Build a fake requests.Response with a JSON (or raw) body."""
    def _make(payload=None, status_code=200, raw: bytes | None = None):
        response = MagicMock()
        response.status_code = status_code
        response.content = raw if raw is not None else json.dumps(payload).encode()
        return response
    return _make


@pytest.fixture
def light_payload():
    """A light as returned by GET /api/<user>/lights/<id>."""
    return {
        'state': {
            'on': True,
            'bri': 200,
            'hue': 10000,
            'sat': 254,
            'xy': [0.5128, 0.4147],
            'ct': 467,
            'alert': 'none',
            'effect': 'none',
            'colormode': 'hs',
            'reachable': True,
        },
        'type': 'Extended color light',
        'name': 'Kitchen',
        'modelid': 'LCT001',
        'swversion': '66009461',
        'pointsymbol': {'1': 'none', '2': 'none'},
    }
