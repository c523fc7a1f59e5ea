"""Tests for the light and user records in models/"""

import pytest

from models.light import Light, LightState, LightUpdate, parse_light_listing
from models.user import UserInfo
from models.utils import member


class TestLightUpdate:
    """Only fields the caller set end up in the request body."""

    def test_only_on(self):
        assert LightUpdate(on=True).to_payload() == {'on': True}

    def test_off_is_sent(self):
        """False is a value, not an unset field."""
        assert LightUpdate(on=False).to_payload() == {'on': False}

    def test_zero_is_sent(self):
        assert LightUpdate(brightness=0).to_payload() == {'bri': 0}

    def test_wire_names(self):
        update = LightUpdate(on=True, hue=10000, saturation=254, brightness=200)
        assert update.to_payload() == {'on': True, 'hue': 10000, 'sat': 254, 'bri': 200}

    def test_empty(self):
        assert LightUpdate().to_payload() == {}
        assert LightUpdate().is_empty()
        assert not LightUpdate(hue=1).is_empty()

    def test_round_trip_through_acknowledgements(self):
        update = LightUpdate(on=True, hue=10000, saturation=254, brightness=200)
        acks = {f'/lights/1/state/{key}': value for key, value in reversed(update.to_payload().items())}

        assert LightUpdate.from_acknowledgements(acks) == update

    def test_acknowledgements_ignore_other_fields(self):
        acks = {'/lights/1/state/ct': 300, '/lights/1/state/on': False}
        assert LightUpdate.from_acknowledgements(acks) == LightUpdate(on=False)


class TestLight:
    def test_from_dict(self, light_payload):
        light = Light.from_dict(light_payload)

        assert light.name == 'Kitchen'
        assert light.type == 'Extended color light'
        assert light.model_id == 'LCT001'
        assert light.firmware_version == '66009461'
        assert light.point_symbol == {'1': 'none', '2': 'none'}
        assert light.state == LightState(
            on=True, hue=10000, saturation=254, brightness=200, alert='none',
            color_mode='hs', color_temperature=467, effect='none', reachable=True,
            xy=(0.5128, 0.4147),
        )

    def test_missing_members_are_zero(self):
        light = Light.from_dict({'name': 'Hall'})
        assert light.name == 'Hall'
        assert light.state == LightState()
        assert light.point_symbol == {}

    def test_wrong_type_raises(self, light_payload):
        light_payload['state']['bri'] = 'bright'
        with pytest.raises(TypeError):
            Light.from_dict(light_payload)

    def test_bool_is_not_a_number(self, light_payload):
        light_payload['state']['hue'] = True
        with pytest.raises(TypeError):
            Light.from_dict(light_payload)


def test_parse_light_listing():
    lights = parse_light_listing({'1': {'name': 'Kitchen'}, '2': {'name': 'Hall'}})
    assert {light_id: light.name for light_id, light in lights.items()} == {'1': 'Kitchen', '2': 'Hall'}


def test_parse_light_listing_rejects_list():
    with pytest.raises(TypeError):
        parse_light_listing([{'name': 'Kitchen'}])


class TestUserInfo:
    def test_from_dict(self, light_payload):
        info = UserInfo.from_dict({
            'lights': {'1': light_payload},
            'groups': {'1': {'name': 'Downstairs'}},
            'config': {
                'name': 'Philips hue',
                'mac': '00:17:88:00:00:00',
                'proxyport': 0,
                'UTC': '2024-01-01T10:00:00',
                'apiversion': '1.2.1',
                'whitelist': {
                    'test-user': {
                        'name': 'test-device',
                        'last use date': '2024-01-01T10:00:00',
                        'create date': '2023-06-01T09:00:00',
                    },
                },
                'swupdate': {'updatestate': 0, 'notify': False, 'url': '', 'text': ''},
                'portalstate': {'signedon': True, 'incoming': False, 'outgoing': True, 'connection': 'connected'},
            },
            'schedules': {},
            'scenes': {'abc': {'name': 'Relax', 'active': True, 'lights': ['1', '2']}},
        })

        assert info.lights['1'].name == 'Kitchen'
        assert info.groups == {'1': {'name': 'Downstairs'}}
        assert info.config.name == 'Philips hue'
        assert info.config.utc == '2024-01-01T10:00:00'
        assert info.config.whitelist['test-user'].last_use_date == '2024-01-01T10:00:00'
        assert info.config.whitelist['test-user'].create_date == '2023-06-01T09:00:00'
        assert info.config.portal_state.signed_on is True
        assert info.scenes['abc'].lights == ('1', '2')

    def test_empty(self):
        info = UserInfo.from_dict({})
        assert info.lights == {}
        assert info.config.name == ''


class TestMember:
    def test_int_as_float(self):
        assert member({'x': 1}, 'x', float) == 1.0

    def test_null_is_zero(self):
        assert member({'x': None}, 'x', str) == ''

    def test_default(self):
        assert member({}, 'x', dict, default={'a': 1}) == {'a': 1}
