"""Records describing the hub as seen by a registered user.

GET /api/<username> returns every resource the user can see in one object:
lights, groups, config, schedules and scenes. Groups and schedules are kept
as raw JSON.
"""

from dataclasses import dataclass, field
from typing import Any

from models.light import Light
from models.utils import expect_object, member


@dataclass(frozen=True)
class WhitelistEntry:
    """A user registered with the hub."""
    name: str = ''
    last_use_date: str = ''
    create_date: str = ''

    @classmethod
    def from_dict(cls, data: Any) -> 'WhitelistEntry':
        data = expect_object(data, 'whitelist entry')
        return cls(
            name=member(data, 'name', str),
            last_use_date=member(data, 'last use date', str),
            create_date=member(data, 'create date', str),
        )


@dataclass(frozen=True)
class SoftwareUpdate:
    notify: bool = False
    update_state: int = 0
    url: str = ''
    text: str = ''

    @classmethod
    def from_dict(cls, data: Any) -> 'SoftwareUpdate':
        data = expect_object(data, 'swupdate')
        return cls(
            notify=member(data, 'notify', bool),
            update_state=member(data, 'updatestate', int),
            url=member(data, 'url', str),
            text=member(data, 'text', str),
        )


@dataclass(frozen=True)
class PortalState:
    incoming: bool = False
    outgoing: bool = False
    signed_on: bool = False
    connection: str = ''

    @classmethod
    def from_dict(cls, data: Any) -> 'PortalState':
        data = expect_object(data, 'portalstate')
        return cls(
            incoming=member(data, 'incoming', bool),
            outgoing=member(data, 'outgoing', bool),
            signed_on=member(data, 'signedon', bool),
            connection=member(data, 'connection', str),
        )


@dataclass(frozen=True)
class BridgeConfig:
    """Hub configuration record."""
    name: str = ''
    mac: str = ''
    gateway: str = ''
    netmask: str = ''
    local_time: str = ''
    utc: str = ''
    timezone: str = ''
    proxy_address: str = ''
    proxy_port: int = 0
    link_button: bool = False
    portal_services: bool = False
    portal_connection: str = ''
    software_version: str = ''
    api_version: str = ''
    whitelist: dict[str, WhitelistEntry] = field(default_factory=dict)
    software_update: SoftwareUpdate = field(default_factory=SoftwareUpdate)
    portal_state: PortalState = field(default_factory=PortalState)

    @classmethod
    def from_dict(cls, data: Any) -> 'BridgeConfig':
        data = expect_object(data, 'config')
        whitelist = member(data, 'whitelist', dict, default={})

        return cls(
            name=member(data, 'name', str),
            mac=member(data, 'mac', str),
            gateway=member(data, 'gateway', str),
            netmask=member(data, 'netmask', str),
            local_time=member(data, 'localtime', str),
            utc=member(data, 'UTC', str),
            timezone=member(data, 'timezone', str),
            proxy_address=member(data, 'proxyaddress', str),
            proxy_port=member(data, 'proxyport', int),
            link_button=member(data, 'linkbutton', bool),
            portal_services=member(data, 'portalservices', bool),
            portal_connection=member(data, 'portalconnection', str),
            software_version=member(data, 'swversion', str),
            api_version=member(data, 'apiversion', str),
            whitelist={key: WhitelistEntry.from_dict(entry) for key, entry in whitelist.items()},
            software_update=SoftwareUpdate.from_dict(data.get('swupdate') or {}),
            portal_state=PortalState.from_dict(data.get('portalstate') or {}),
        )


@dataclass(frozen=True)
class Scene:
    name: str = ''
    active: bool = False
    lights: tuple[str, ...] = ()

    @classmethod
    def from_dict(cls, data: Any) -> 'Scene':
        data = expect_object(data, 'scene')
        lights = member(data, 'lights', list, default=[])
        if not all(isinstance(light_id, str) for light_id in lights):
            raise TypeError("lights: expected list of light ids")

        return cls(
            name=member(data, 'name', str),
            active=member(data, 'active', bool),
            lights=tuple(lights),
        )


@dataclass(frozen=True)
class UserInfo:
    """Full view of the hub for the registered user."""
    lights: dict[str, Light] = field(default_factory=dict)
    groups: dict[str, Any] = field(default_factory=dict)
    config: BridgeConfig = field(default_factory=BridgeConfig)
    schedules: dict[str, Any] = field(default_factory=dict)
    scenes: dict[str, Scene] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Any) -> 'UserInfo':
        data = expect_object(data, 'user info')
        lights = member(data, 'lights', dict, default={})
        scenes = member(data, 'scenes', dict, default={})

        return cls(
            lights={light_id: Light.from_dict(light) for light_id, light in lights.items()},
            groups=member(data, 'groups', dict, default={}),
            config=BridgeConfig.from_dict(data.get('config') or {}),
            schedules=member(data, 'schedules', dict, default={}),
            scenes={scene_id: Scene.from_dict(scene) for scene_id, scene in scenes.items()},
        )
