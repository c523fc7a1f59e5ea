"""HueClient class for talking to a Philips Hue hub over its local HTTP API.

The client holds no state besides its HubConfig. Each operation is one
request/response exchange; failures are raised as the types in core.errors.
"""

from typing import Any, Callable, TypeVar

import click
import requests

from core.config import HubConfig
from core.errors import HueError, MalformedResponseError, TransportError
from core.response import decode_response
from models.light import Light, LightSummary, LightUpdate, parse_light_listing
from models.user import UserInfo

T = TypeVar('T')


def _parse_registration(payload: Any) -> str:
    """Pull the confirmed username out of a registration response."""
    if not isinstance(payload, list):
        raise TypeError(f"expected list, got {type(payload).__name__}")
    for entry in payload:
        if isinstance(entry, dict) and isinstance(entry.get('success'), dict):
            username = entry['success'].get('username')
            if isinstance(username, str):
                return username
    raise KeyError('success.username')


def _parse_acknowledgements(payload: Any) -> dict[str, Any]:
    """Flatten [{"success": {address: value}}, ...] into {address: value}."""
    if not isinstance(payload, list):
        raise TypeError(f"expected list, got {type(payload).__name__}")
    acks = {}
    for entry in payload:
        if not isinstance(entry, dict):
            raise TypeError(f"expected object, got {type(entry).__name__}")
        success = entry.get('success') or {}
        if not isinstance(success, dict):
            raise TypeError(f"success: expected object, got {type(success).__name__}")
        acks.update(success)
    return acks


class HueClient:
    """Typed operations against one hub's local API."""

    def __init__(self, config: HubConfig | None = None):
        """Initialise HueClient.

        Args:
            config: Hub address, user token and device type (defaults if omitted)
        """
        self._config = config or HubConfig()

    @property
    def config(self) -> HubConfig:
        return self._config

    @property
    def base_url(self) -> str:
        return f"http://{self._config.bridge_ip}"

    def __repr__(self):
        return f"HueClient(bridge_ip={self._config.bridge_ip!r}, username={self._config.username!r})"

    def _user_path(self, *parts: str) -> str:
        return '/'.join(['/api', self._config.username, *parts])

    def _request(self, method: str, path: str, parse: Callable[[Any], T],
                 data: dict | None = None) -> T:
        """Make a request to the hub and decode the response.

        Args:
            method: HTTP method
            path: Absolute path, e.g. '/api/<user>/lights'
            parse: Converts the decoded JSON into the result type
            data: JSON request body for POST/PUT

        Raises:
            TransportError: Connection failure or non-200 status
            ApiError, AggregateError: The hub reported failure
            MalformedResponseError: The body could not be decoded
        """
        url = f"{self.base_url}{path}"
        headers = {'Content-Type': 'application/json'} if data is not None else None

        try:
            response = requests.request(method, url, json=data, headers=headers,
                                        timeout=self._config.timeout)
        except (requests.exceptions.RequestException, ValueError) as e:
            click.echo(f"Http {method} failed: {e}", err=True)
            raise TransportError(f"Http {method} {url} failed: {e}", url=url) from e

        if response.status_code != 200:
            message = f"Http request failed: Status {response.status_code}"
            click.echo(message, err=True)
            raise TransportError(message, url=url, status_code=response.status_code)

        body = response.content

        try:
            return decode_response(body, parse)
        except MalformedResponseError as e:
            click.echo(f"Failed to parse response body: {body!r}\nerror: {e.cause}", err=True)
            raise
        except HueError as e:
            click.echo(f"Request failed: {e}", err=True)
            raise

    def register_user(self) -> str:
        """Register this client's username and device type with the hub.

        The hub only accepts the request shortly after its link button has
        been pressed; otherwise it answers with error 101.

        Returns:
            The username the hub confirmed
        """
        payload = {
            'username': self._config.username,
            'devicetype': self._config.device_type,
        }
        return self._request('POST', '/api', _parse_registration, data=payload)

    def get_user_info(self) -> UserInfo:
        """Fetch everything the hub exposes to this user."""
        return self._request('GET', self._user_path(), UserInfo.from_dict)

    def list_lights(self) -> dict[str, LightSummary]:
        """Get {light id: LightSummary} for every light on the hub."""
        return self._request('GET', self._user_path('lights'), parse_light_listing)

    def get_light(self, light_id: str) -> Light:
        """Get the full record for one light."""
        return self._request('GET', self._user_path('lights', light_id), Light.from_dict)

    def set_light_state(self, light_id: str, update: LightUpdate) -> dict[str, Any]:
        """Apply a partial state change to one light.

        Args:
            light_id: Light identifier
            update: Fields to change; unset fields are left alone

        Returns:
            The hub's per-field acknowledgements, {address: value}
        """
        path = self._user_path('lights', light_id, 'state')
        return self._request('PUT', path, _parse_acknowledgements, data=update.to_payload())
