"""Tests for the error types in core/errors.py"""

from core.errors import (
    LINK_BUTTON_NOT_PRESSED,
    AggregateError,
    ApiError,
    HueError,
    MalformedResponseError,
    TransportError,
)


class TestApiError:
    def test_message_format(self):
        error = ApiError(7, '/lights/1/state/bri', 'invalid value, 300, for parameter, bri')
        assert str(error) == 'Hue Error 7: /lights/1/state/bri invalid value, 300, for parameter, bri'

    def test_link_button_required(self):
        assert ApiError(LINK_BUTTON_NOT_PRESSED, '/', 'link button not pressed').link_button_required
        assert not ApiError(3, '/lights/9', 'resource not available').link_button_required

    def test_equality(self):
        assert ApiError(3, '/lights/9', 'x') == ApiError(3, '/lights/9', 'x')
        assert ApiError(3, '/lights/9', 'x') != ApiError(3, '/lights/8', 'x')


class TestAggregateError:
    def test_message_concatenates_in_order(self):
        errors = [ApiError(7, '/a', 'first'), ApiError(6, '/b', 'second')]
        aggregate = AggregateError(errors)
        assert str(aggregate) == 'Hue Error 7: /a first\nHue Error 6: /b second'

    def test_iterable_and_sized(self):
        errors = [ApiError(7, '/a', 'first'), ApiError(6, '/b', 'second')]
        aggregate = AggregateError(errors)
        assert len(aggregate) == 2
        assert list(aggregate) == errors


def test_hierarchy():
    """Every client failure can be caught as HueError."""
    for cls in (TransportError, MalformedResponseError, ApiError, AggregateError):
        assert issubclass(cls, HueError)


def test_malformed_response_keeps_body_and_cause():
    cause = ValueError('bad json')
    error = MalformedResponseError(b'<html>', cause)
    assert error.body == b'<html>'
    assert error.cause is cause
