"""Light records returned by the hub and the partial update sent to it."""

from dataclasses import dataclass, field
from typing import Any

from models.utils import expect_object, member

# Wire names for the fields of a light state update
UPDATE_FIELDS = {
    'on': 'on',
    'hue': 'hue',
    'saturation': 'sat',
    'brightness': 'bri',
}


@dataclass(frozen=True)
class LightState:
    """Snapshot of a light's state as reported by the hub."""
    on: bool = False
    hue: int = 0
    saturation: int = 0
    brightness: int = 0
    alert: str = ''
    color_mode: str = ''
    color_temperature: int = 0
    effect: str = ''
    reachable: bool = False
    xy: tuple[float, ...] = ()

    @classmethod
    def from_dict(cls, data: Any) -> 'LightState':
        data = expect_object(data, 'state')
        xy = member(data, 'xy', list, default=[])
        if not all(isinstance(v, (int, float)) and not isinstance(v, bool) for v in xy):
            raise TypeError("xy: expected list of numbers")

        return cls(
            on=member(data, 'on', bool),
            hue=member(data, 'hue', int),
            saturation=member(data, 'sat', int),
            brightness=member(data, 'bri', int),
            alert=member(data, 'alert', str),
            color_mode=member(data, 'colormode', str),
            color_temperature=member(data, 'ct', int),
            effect=member(data, 'effect', str),
            reachable=member(data, 'reachable', bool),
            xy=tuple(float(v) for v in xy),
        )


@dataclass(frozen=True)
class Light:
    """Everything the hub knows about one light."""
    state: LightState = field(default_factory=LightState)
    type: str = ''
    name: str = ''
    model_id: str = ''
    firmware_version: str = ''
    point_symbol: dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Any) -> 'Light':
        data = expect_object(data, 'light')
        point_symbol = member(data, 'pointsymbol', dict, default={})
        if not all(isinstance(v, str) for v in point_symbol.values()):
            raise TypeError("pointsymbol: expected string values")

        return cls(
            state=LightState.from_dict(data.get('state') or {}),
            type=member(data, 'type', str),
            name=member(data, 'name', str),
            model_id=member(data, 'modelid', str),
            firmware_version=member(data, 'swversion', str),
            point_symbol=dict(point_symbol),
        )


@dataclass(frozen=True)
class LightSummary:
    """Entry in the lights listing."""
    name: str = ''

    @classmethod
    def from_dict(cls, data: Any) -> 'LightSummary':
        data = expect_object(data, 'light')
        return cls(name=member(data, 'name', str))


def parse_light_listing(payload: Any) -> dict[str, LightSummary]:
    """Decode the lights collection into {light id: LightSummary}."""
    payload = expect_object(payload, 'lights')
    return {light_id: LightSummary.from_dict(data) for light_id, data in payload.items()}


@dataclass(frozen=True)
class LightUpdate:
    """Partial state change for one light.

    Only fields that are set (not None) are sent to the hub.
    """
    on: bool | None = None
    hue: int | None = None
    saturation: int | None = None
    brightness: int | None = None

    def to_payload(self) -> dict:
        """Build the request body, omitting every unset field."""
        payload = {}
        for attr, wire_name in UPDATE_FIELDS.items():
            value = getattr(self, attr)
            if value is not None:
                payload[wire_name] = value
        return payload

    def is_empty(self) -> bool:
        return not self.to_payload()

    @classmethod
    def from_acknowledgements(cls, acks: dict[str, Any]) -> 'LightUpdate':
        """Rebuild the update the hub confirmed.

        Args:
            acks: Flattened acknowledgements, e.g. {'/lights/1/state/bri': 200}
        """
        wire_to_attr = {wire_name: attr for attr, wire_name in UPDATE_FIELDS.items()}
        values = {}
        for address, value in acks.items():
            attr = wire_to_attr.get(address.rsplit('/', 1)[-1])
            if attr:
                values[attr] = value
        return cls(**values)
